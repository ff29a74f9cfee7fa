from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from salon_checkout.application.ports.service_catalog import ServiceCatalogPort
from salon_checkout.domain.entities.receipt import AppliedDiscount
from salon_checkout.domain.entities.rewards import (
    ClaimedReward,
    PromotionDiscount,
    RedeemableRewardOption,
    RewardRule,
)

INSUFFICIENT_POINTS = "insufficient_points"


@dataclass(frozen=True)
class DiscountResult:
    claimed_amount: Decimal
    redeemed_amount: Decimal
    promotion_amount: Decimal
    total_discount: Decimal
    applied: tuple[AppliedDiscount, ...] = ()
    redemption_error: str | None = None

    @property
    def redemption_applied(self) -> bool:
        return self.redeemed_amount > 0


class ComputeDiscountUseCase:
    """Combine claimed rewards, one points redemption and a promotion into one discount.

    The total is clamped to the subtotal, so over-claiming saturates instead of
    producing a negative payable amount. Claimed rewards are assumed validated
    upstream; only the points redemption is checked here.
    """

    def __init__(self, catalog: ServiceCatalogPort) -> None:
        self._catalog = catalog
        self._logger = logging.getLogger(__name__)

    def compute(
        self,
        claimed: Iterable[ClaimedReward],
        redemption: RedeemableRewardOption | None,
        subtotal: Decimal,
        current_points: int,
        promotion: PromotionDiscount | None = None,
    ) -> DiscountResult:
        applied: list[AppliedDiscount] = []

        claimed_amount = Decimal("0")
        for reward in claimed:
            value = self.claimed_value(reward)
            claimed_amount += value
            applied.append(AppliedDiscount(source="claimed", label=reward.title, amount=value))

        redeemed_amount = Decimal("0")
        redemption_error = None
        if redemption is not None:
            if current_points >= redemption.points_cost:
                redeemed_amount = redemption.discount_value
                applied.append(AppliedDiscount(source="redeemed", label=redemption.title, amount=redeemed_amount))
            else:
                redemption_error = INSUFFICIENT_POINTS
                self._logger.warning(
                    "Redemption rejected",
                    extra={"reward": redemption.id, "reason": INSUFFICIENT_POINTS},
                )

        promotion_amount = Decimal("0")
        if promotion is not None and promotion.amount > 0:
            promotion_amount = promotion.amount
            label = f"{promotion.title} ({promotion.code})" if promotion.code else promotion.title
            applied.append(AppliedDiscount(source="promotion", label=label, amount=promotion_amount))

        requested = claimed_amount + redeemed_amount + promotion_amount
        total_discount = min(max(subtotal, Decimal("0")), requested)

        return DiscountResult(
            claimed_amount=claimed_amount,
            redeemed_amount=redeemed_amount,
            promotion_amount=promotion_amount,
            total_discount=total_discount,
            applied=tuple(applied),
            redemption_error=redemption_error,
        )

    def claimed_value(self, reward: ClaimedReward) -> Decimal:
        if reward.rule == RewardRule.FIXED:
            return max(reward.value, Decimal("0"))

        entry = self._catalog.lookup(reward.service_key or "")
        if not entry:
            self._logger.warning(
                "Claimed reward references unknown service",
                extra={"reward": reward.reward_id, "service": reward.service_key},
            )
            return Decimal("0")

        if reward.rule == RewardRule.SERVICE_PRICE:
            return entry.price
        return entry.price * reward.value
