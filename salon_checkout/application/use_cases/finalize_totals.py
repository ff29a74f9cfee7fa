from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from salon_checkout.application.utils.money import to_cents

DEFAULT_TAX_RATE = Decimal("0.08")


@dataclass(frozen=True)
class Totals:
    discounted_subtotal: Decimal
    tax: Decimal
    total: Decimal

    def rounded(self) -> "Totals":
        return Totals(
            discounted_subtotal=to_cents(self.discounted_subtotal),
            tax=to_cents(self.tax),
            total=to_cents(self.total),
        )


def finalize(subtotal: Decimal, total_discount: Decimal, tax_rate: Decimal = DEFAULT_TAX_RATE) -> Totals:
    """Tax is charged on the discounted subtotal. Nothing is rounded here."""
    discounted_subtotal = max(Decimal("0"), subtotal - total_discount)
    tax = discounted_subtotal * tax_rate
    return Totals(discounted_subtotal=discounted_subtotal, tax=tax, total=discounted_subtotal + tax)
