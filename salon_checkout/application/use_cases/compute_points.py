from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

from salon_checkout.application.utils.time_label import is_evening

DEFAULT_EARN_RATE = Decimal("0.10")


@dataclass(frozen=True)
class PointsResult:
    base_points: int
    multiplier: int
    points_earned: int  # base_points * multiplier, the amount credited


def compute_points(
    subtotal: Decimal,
    appointment_time: str | None,
    earn_rate: Decimal = DEFAULT_EARN_RATE,
    evening_multiplier: int = 2,
    evening_start_hour: int = 6,
) -> PointsResult:
    """Points on the pre-discount subtotal, multiplied for PM appointments at evening_start_hour or later."""
    base = (max(subtotal, Decimal("0")) * earn_rate).to_integral_value(rounding=ROUND_FLOOR)
    base_points = int(base)
    multiplier = evening_multiplier if is_evening(appointment_time, evening_start_hour) else 1
    return PointsResult(base_points=base_points, multiplier=multiplier, points_earned=base_points * multiplier)
