"""
Tests for the checkout HTTP endpoints.
"""

from __future__ import annotations

import json
from decimal import Decimal

from fastapi.testclient import TestClient

from salon_checkout.main import app

client = TestClient(app)


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_services():
    response = client.get("/api/v1/checkout/services")

    assert response.status_code == 200
    keys = [s["key"] for s in response.json()]
    assert "haircut" in keys
    assert "beard" in keys


def test_list_rewards_with_points():
    response = client.get("/api/v1/checkout/rewards", params={"current_points": 600})

    assert response.status_code == 200
    affordable = {r["id"]: r["affordable"] for r in response.json()}
    assert affordable == {"5_off": True, "10_off": False, "20_off": False}


def test_toggle_redemption():
    payload = {"option_id": "5_off", "current_points": 1250}
    selected = client.post("/api/v1/checkout/redemption/toggle", json=payload)
    assert selected.status_code == 200
    assert selected.json() == {"selected_option_id": "5_off"}

    payload["selected_option_id"] = "5_off"
    cleared = client.post("/api/v1/checkout/redemption/toggle", json=payload)
    assert cleared.json() == {"selected_option_id": None}


def test_toggle_redemption_errors():
    poor = client.post("/api/v1/checkout/redemption/toggle", json={"option_id": "20_off", "current_points": 10})
    assert poor.status_code == 400
    assert "1800 points" in poor.json()["detail"]

    unknown = client.post("/api/v1/checkout/redemption/toggle", json={"option_id": "nope"})
    assert unknown.status_code == 404


def test_quote_from_serialized_params():
    payload = {
        "selected_services_json": json.dumps([{"key": "beard", "label": "Beard Trim"}]),
        "redemption_option_id": "5_off",
        "current_points": 1250,
        "selected_time": "10:00 AM",
    }

    response = client.post("/api/v1/checkout/quote", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "serialized"
    assert Decimal(data["subtotal"]) == Decimal("15")
    assert Decimal(data["discounts"]["redeemed"]) == Decimal("5")
    assert Decimal(data["tax"]) == Decimal("0.80")
    assert Decimal(data["total"]) == Decimal("10.80")
    assert data["points"]["points_redeemed"] == 500
    assert data["total_display"] == "$10.80"


def test_quote_with_claimed_rewards_and_promotion():
    payload = {
        "selected_service": "haircut",
        "selected_service_label": "Haircut & Styling",
        "claimed_reward_ids": ["beard_trim_20", "unknown_reward"],
        "promotion_code": "FALL",
        "promotion_title": "Fall Special",
        "discount_amount": "$4",
    }

    response = client.post("/api/v1/checkout/quote", json=payload)

    data = response.json()
    assert data["source"] == "legacy"
    assert Decimal(data["discounts"]["claimed"]) == Decimal("3.00")
    assert Decimal(data["discounts"]["promotion"]) == Decimal("4.00")
    assert Decimal(data["total_discount"]) == Decimal("7.00")
    assert [d["label"] for d in data["applied_discounts"]] == ["20% Off Beard Trim", "Fall Special (FALL)"]


def test_confirm_returns_receipt():
    payload = {
        "selected_services": [{"key": "hair", "label": "Haircut & Styling"}],
        "claimed_reward_ids": ["free_haircut"],
        "selected_date": "June 3",
        "selected_time": "7:00 PM",
    }

    response = client.post("/api/v1/checkout/confirm", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["booking_id"].startswith("BK")
    assert len(data["booking_id"]) == 8
    assert data["source"] == "context"
    assert Decimal(data["total"]) == Decimal("0")
    assert data["points"]["multiplier"] == 2
    assert data["points"]["points_earned"] == 6
    assert data["appointment_time"] == "7:00 PM"


def test_confirm_with_unknown_redemption():
    response = client.post("/api/v1/checkout/confirm", json={"redemption_option_id": "bogus"})

    assert response.status_code == 404
