from __future__ import annotations

from salon_checkout.application.ports.rewards_catalog import RewardsCatalogPort
from salon_checkout.domain.entities.rewards import ClaimedReward, RedeemableRewardOption
from salon_checkout.infrastructure.rewards.rewards_catalog_data import CLAIMABLE_REWARDS, REDEEMABLE_REWARDS


class RewardsCatalogStore(RewardsCatalogPort):
    def __init__(
        self,
        options: dict[str, RedeemableRewardOption] | None = None,
        claimable: dict[str, ClaimedReward] | None = None,
    ) -> None:
        self._options = REDEEMABLE_REWARDS if options is None else options
        self._claimable = CLAIMABLE_REWARDS if claimable is None else claimable

    def get_option(self, option_id: str) -> RedeemableRewardOption | None:
        return self._options.get(option_id)

    def list_options(self) -> list[RedeemableRewardOption]:
        return sorted(self._options.values(), key=lambda option: option.points_cost)

    def get_claimable(self, reward_id: str) -> ClaimedReward | None:
        return self._claimable.get(reward_id)
