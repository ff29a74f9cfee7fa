"""
Tests for the single-select reward redemption toggle.
"""

from __future__ import annotations

import pytest

from salon_checkout.application.exceptions import InsufficientPointsError, UnknownRewardError
from salon_checkout.application.use_cases.redemption import RedemptionUseCase
from salon_checkout.domain.entities.rewards import RedemptionState
from salon_checkout.infrastructure.rewards.rewards_catalog_store import RewardsCatalogStore


def _use_case() -> RedemptionUseCase:
    return RedemptionUseCase(rewards=RewardsCatalogStore())


def test_toggle_same_option_twice_deselects():
    uc = _use_case()

    selected = uc.toggle(RedemptionState(), "5_off", current_points=1250)
    assert selected.selected_option_id == "5_off"

    cleared = uc.toggle(selected, "5_off", current_points=1250)
    assert cleared == RedemptionState()
    assert not cleared.is_selected


def test_toggle_switches_between_options():
    uc = _use_case()

    state = uc.toggle(RedemptionState(), "5_off", current_points=1250)
    state = uc.toggle(state, "10_off", current_points=1250)

    assert state.selected_option_id == "10_off"


def test_toggle_rejects_unaffordable_option():
    uc = _use_case()

    with pytest.raises(InsufficientPointsError) as exc_info:
        uc.toggle(RedemptionState(), "20_off", current_points=1250)

    assert exc_info.value.required == 1800
    assert exc_info.value.available == 1250
    assert "1800 points" in str(exc_info.value)


def test_deselect_never_checks_points():
    """Clearing a selection works even if the balance dropped below the cost."""
    uc = _use_case()

    cleared = uc.toggle(RedemptionState(selected_option_id="10_off"), "10_off", current_points=0)

    assert cleared == RedemptionState()


def test_toggle_unknown_option():
    with pytest.raises(UnknownRewardError):
        _use_case().toggle(RedemptionState(), "free_car", current_points=99999)


def test_selected_option_lookup():
    uc = _use_case()

    assert uc.selected_option(RedemptionState()) is None
    assert uc.selected_option(RedemptionState(selected_option_id="5_off")).points_cost == 500


def test_available_options_flags_affordability():
    uc = _use_case()

    options = uc.available_options(1250, RedemptionState(selected_option_id="5_off"))

    assert [(o.option.id, o.affordable, o.selected) for o in options] == [
        ("5_off", True, True),
        ("10_off", True, False),
        ("20_off", False, False),
    ]


def test_injected_empty_rewards_catalog_stays_empty():
    store = RewardsCatalogStore(options={}, claimable={})

    assert store.list_options() == []
    assert store.get_option("5_off") is None
    assert store.get_claimable("free_haircut") is None
    with pytest.raises(UnknownRewardError):
        RedemptionUseCase(rewards=store).toggle(RedemptionState(), "5_off", current_points=5000)
