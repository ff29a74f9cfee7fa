from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from salon_checkout.domain.entities.line_item import LineItem
from salon_checkout.domain.entities.selection import SelectionSource


@dataclass(frozen=True)
class AppliedDiscount:
    source: str  # "claimed", "redeemed", "promotion"
    label: str
    amount: Decimal


@dataclass(frozen=True)
class Receipt:
    booking_id: str
    confirmed_at: datetime
    appointment_date: str | None
    appointment_time: str | None
    salon_name: str | None
    barber_name: str | None
    selection_source: SelectionSource
    services: tuple[LineItem, ...]
    subtotal: Decimal
    claimed_discount: Decimal
    redeemed_discount: Decimal
    promotion_discount: Decimal
    total_discount: Decimal
    applied_discounts: tuple[AppliedDiscount, ...]
    discounted_subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal
    base_points: int
    points_multiplier: int
    points_earned: int
    points_redeemed: int
    points_balance: int
    redemption_error: str | None = None

    @property
    def discounts(self) -> dict[str, Decimal]:
        return {
            "claimed": self.claimed_discount,
            "redeemed": self.redeemed_discount,
            "promotion": self.promotion_discount,
        }
