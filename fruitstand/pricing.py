"""fruitstand.pricing – prix, taxes et achat minimum

Tous les montants sont des `Decimal` ; aucun float ne passe par ici.
Les arrondis au cent (ROUND_HALF_UP) ne se font qu'à l'affichage et à
l'enregistrement.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from .errors import MinimumPurchaseError

APPLE_PRICE = Decimal("3")
BANANA_PRICE = Decimal("2")
MINIMUM_PURCHASE = Decimal("10")

CENT = Decimal("0.01")

# --- Taxes de vente par province (correspondance exacte du nom) ---
TAX_RATES = MappingProxyType({
    "Alberta": Decimal("0.05"),
    "British Columbia": Decimal("0.12"),
    "Manitoba": Decimal("0.13"),
    "New Brunswick": Decimal("0.15"),
    "Newfoundland and Labrador": Decimal("0.15"),
    "Northwest Territories": Decimal("0.05"),
    "Nova Scotia": Decimal("0.15"),
    "Nunavut": Decimal("0.05"),
    "Ontario": Decimal("0.13"),
    "Prince Edward Island": Decimal("0.15"),
    "Quebec": Decimal("0.14975"),
    "Saskatchewan": Decimal("0.11"),
    "Yukon": Decimal("0.05"),
})


@dataclass(frozen=True)
class PricingResult:
    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal

    @property
    def tax_percentage(self) -> Decimal:
        return self.tax_rate * 100


def compute_subtotal(apples: int, bananas: int) -> Decimal:
    return apples * APPLE_PRICE + bananas * BANANA_PRICE


def get_tax_rate(province: str) -> Decimal:
    # Province inconnue : taxe à 0, sans erreur
    return TAX_RATES.get(province, Decimal("0"))


def compute_total(subtotal: Decimal, province: str) -> PricingResult:
    tax_rate = get_tax_rate(province)
    tax = subtotal * tax_rate
    return PricingResult(subtotal=subtotal, tax_rate=tax_rate, tax=tax, total=subtotal + tax)


def check_minimum_purchase(subtotal: Decimal) -> None:
    """Lève MinimumPurchaseError si `subtotal` < MINIMUM_PURCHASE (10 $ passe)."""
    if subtotal < MINIMUM_PURCHASE:
        raise MinimumPurchaseError(f"Minimum purchase should be ${MINIMUM_PURCHASE}.")


def round_cents(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(amount: Decimal) -> int:
    return int(round_cents(amount) * 100)
