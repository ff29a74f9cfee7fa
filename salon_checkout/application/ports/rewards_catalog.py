from __future__ import annotations

from abc import ABC, abstractmethod

from salon_checkout.domain.entities.rewards import ClaimedReward, RedeemableRewardOption


class RewardsCatalogPort(ABC):
    @abstractmethod
    def get_option(self, option_id: str) -> RedeemableRewardOption | None:
        """Get a redeemable reward option by id."""
        raise NotImplementedError

    @abstractmethod
    def list_options(self) -> list[RedeemableRewardOption]:
        """All options a customer may spend points on."""
        raise NotImplementedError

    @abstractmethod
    def get_claimable(self, reward_id: str) -> ClaimedReward | None:
        """Get the rule for a reward that can already be claimed on a profile."""
        raise NotImplementedError
