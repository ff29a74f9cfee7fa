from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class RewardRule(str, Enum):
    FIXED = "fixed"  # flat amount
    SERVICE_PRICE = "service_price"  # full catalog price of service_key
    SERVICE_PERCENT = "service_percent"  # value is a fraction of service_key's price


@dataclass(frozen=True)
class ClaimedReward:
    reward_id: str
    title: str
    rule: RewardRule
    value: Decimal = Decimal("0")
    service_key: str | None = None
    claimed_at: datetime | None = None


@dataclass(frozen=True)
class RedeemableRewardOption:
    id: str
    title: str
    points_cost: int
    discount_value: Decimal
    description: str = ""


@dataclass(frozen=True)
class PromotionDiscount:
    code: str
    title: str
    amount: Decimal


@dataclass(frozen=True)
class RedemptionState:
    selected_option_id: str | None = None

    @property
    def is_selected(self) -> bool:
        return self.selected_option_id is not None
