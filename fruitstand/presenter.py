"""Rendu HTML (fragments) du reçu et de la liste d'erreurs."""

from __future__ import annotations

from flask import render_template

from .pricing import APPLE_PRICE, BANANA_PRICE, PricingResult, round_cents
from .validation import ValidatedOrder


def format_money(amount) -> str:
    return f"{round_cents(amount):.2f}"


def render_errors(errors: list[str]) -> str:
    return render_template("errors.html", errors=errors)


def render_receipt(order: ValidatedOrder, pricing: PricingResult) -> str:
    lines = []
    if order.apples > 0:
        lines.append(("Apples", APPLE_PRICE, order.apples, format_money(order.apples * APPLE_PRICE)))
    if order.bananas > 0:
        lines.append(("Bananas", BANANA_PRICE, order.bananas, format_money(order.bananas * BANANA_PRICE)))

    return render_template(
        "receipt.html",
        order=order,
        lines=lines,
        subtotal=format_money(pricing.subtotal),
        tax_percentage=format_money(pricing.tax_percentage),
        tax=format_money(pricing.tax),
        total=format_money(pricing.total),
    )
