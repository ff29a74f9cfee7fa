from __future__ import annotations

import logging
from dataclasses import dataclass

from salon_checkout.application.exceptions import InsufficientPointsError, UnknownRewardError
from salon_checkout.application.ports.rewards_catalog import RewardsCatalogPort
from salon_checkout.domain.entities.rewards import RedeemableRewardOption, RedemptionState


@dataclass(frozen=True)
class RewardAvailability:
    option: RedeemableRewardOption
    affordable: bool
    selected: bool


class RedemptionUseCase:
    """Single-select toggle over the redeemable rewards catalog.

    States: nothing selected, or exactly one option selected. Selecting the
    selected option clears it; selecting another one replaces it.
    """

    def __init__(self, rewards: RewardsCatalogPort) -> None:
        self._rewards = rewards
        self._logger = logging.getLogger(__name__)

    def toggle(self, state: RedemptionState, option_id: str, current_points: int) -> RedemptionState:
        if state.selected_option_id == option_id:
            return RedemptionState()

        option = self._rewards.get_option(option_id)
        if option is None:
            raise UnknownRewardError(option_id)

        if current_points < option.points_cost:
            self._logger.info(
                "Reward selection blocked",
                extra={"reward": option_id, "reason": "insufficient_points"},
            )
            raise InsufficientPointsError(option_id, required=option.points_cost, available=current_points)

        return RedemptionState(selected_option_id=option_id)

    def selected_option(self, state: RedemptionState) -> RedeemableRewardOption | None:
        if not state.selected_option_id:
            return None
        option = self._rewards.get_option(state.selected_option_id)
        if option is None:
            raise UnknownRewardError(state.selected_option_id)
        return option

    def available_options(self, current_points: int, state: RedemptionState | None = None) -> list[RewardAvailability]:
        selected_id = state.selected_option_id if state else None
        return [
            RewardAvailability(
                option=option,
                affordable=current_points >= option.points_cost,
                selected=option.id == selected_id,
            )
            for option in self._rewards.list_options()
        ]
