"""fruitstand.validation – contrôle des champs du formulaire de commande

Les règles s'appliquent dans un ordre fixe et s'accumulent : un formulaire
vide renvoie tous les messages d'un coup, jamais seulement le premier.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from .errors import ValidationError

PHONE_PATTERN = re.compile(r"\d{3}-\d{3}-\d{4}", re.ASCII)
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
QUANTITY_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

REQUIRED_FIELDS = (
    ("name", "Name is required."),
    ("address", "Address is required."),
    ("city", "City is required."),
    ("province", "Province is required."),
)

PHONE_ERROR = "Phone Number must be in the format 555-555-5555."
EMAIL_ERROR = "Invalid Email Address format."
NO_QUANTITY_ERROR = "At least one of Apples or Bananas quantity must be greater than 0."
APPLES_ERROR = "Apples quantity must be a positive number."
BANANAS_ERROR = "Bananas quantity must be a positive number."


@dataclass(frozen=True)
class OrderInput:
    """Champs bruts tels que reçus (None = champ absent du formulaire)."""
    name: str | None = None
    address: str | None = None
    city: str | None = None
    province: str | None = None
    phone_number: str | None = None
    email: str | None = None
    apples: str | None = None
    bananas: str | None = None

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "OrderInput":
        return cls(
            name=form.get("name"),
            address=form.get("address"),
            city=form.get("city"),
            province=form.get("province"),
            phone_number=form.get("phoneNumber"),
            email=form.get("email"),
            apples=form.get("apples"),
            bananas=form.get("bananas"),
        )


@dataclass(frozen=True)
class ValidatedOrder:
    name: str
    address: str
    city: str
    province: str
    phone_number: str
    email: str
    apples: int
    bananas: int


def parse_quantity(raw: str | None) -> int | None:
    """Convertit une quantité saisie ; None si elle n'est pas numérique.

    Un champ présent mais vide vaut 0 (input number laissé vide).
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return 0
    if not QUANTITY_PATTERN.fullmatch(text):
        return None
    return int(text)


def validate(order_input: OrderInput) -> list[str]:
    errors = []

    for field, message in REQUIRED_FIELDS:
        if not getattr(order_input, field):
            errors.append(message)

    if not PHONE_PATTERN.fullmatch(order_input.phone_number or ""):
        errors.append(PHONE_ERROR)

    if not EMAIL_PATTERN.search(order_input.email or ""):
        errors.append(EMAIL_ERROR)

    apples = parse_quantity(order_input.apples)
    bananas = parse_quantity(order_input.bananas)
    # Branche exclusive : le message combiné et les messages individuels
    # ne sortent jamais ensemble.
    if not _is_positive(apples) and not _is_positive(bananas):
        errors.append(NO_QUANTITY_ERROR)
    else:
        if apples is None or apples < 0:
            errors.append(APPLES_ERROR)
        if bananas is None or bananas < 0:
            errors.append(BANANAS_ERROR)

    return errors


def validate_order(order_input: OrderInput) -> ValidatedOrder:
    """Valide `order_input` et construit la commande typée.

    Raises
    ------
    ValidationError
        Avec la liste complète des messages si une règle échoue.
    """
    errors = validate(order_input)
    if errors:
        raise ValidationError(errors)

    return ValidatedOrder(
        name=order_input.name,
        address=order_input.address,
        city=order_input.city,
        province=order_input.province,
        phone_number=order_input.phone_number,
        email=order_input.email,
        apples=parse_quantity(order_input.apples),
        bananas=parse_quantity(order_input.bananas),
    )


def _is_positive(quantity: int | None) -> bool:
    return quantity is not None and quantity > 0
