from __future__ import annotations

from decimal import Decimal

from salon_checkout.domain.entities.rewards import ClaimedReward, RedeemableRewardOption, RewardRule

REDEEMABLE_REWARDS: dict[str, RedeemableRewardOption] = {
    option.id: option
    for option in (
        RedeemableRewardOption(
            id="5_off",
            title="$5 Off",
            points_cost=500,
            discount_value=Decimal("5"),
            description="Use 500 points for $5 off this booking",
        ),
        RedeemableRewardOption(
            id="10_off",
            title="$10 Off",
            points_cost=1000,
            discount_value=Decimal("10"),
            description="Use 1000 points for $10 off this booking",
        ),
        RedeemableRewardOption(
            id="20_off",
            title="$20 Off",
            points_cost=1800,
            discount_value=Decimal("20"),
            description="Use 1800 points for $20 off this booking",
        ),
    )
}

# Rewards a customer can hold on their profile before reaching checkout.
CLAIMABLE_REWARDS: dict[str, ClaimedReward] = {
    reward.reward_id: reward
    for reward in (
        ClaimedReward(reward_id="free_haircut", title="Free Haircut", rule=RewardRule.SERVICE_PRICE, service_key="haircut"),
        ClaimedReward(
            reward_id="beard_trim_20",
            title="20% Off Beard Trim",
            rule=RewardRule.SERVICE_PERCENT,
            value=Decimal("0.20"),
            service_key="beard",
        ),
        ClaimedReward(reward_id="free_styling", title="Free Styling", rule=RewardRule.SERVICE_PRICE, service_key="styling"),
        ClaimedReward(reward_id="vip_treatment", title="VIP Treatment", rule=RewardRule.FIXED, value=Decimal("10")),
    )
}
