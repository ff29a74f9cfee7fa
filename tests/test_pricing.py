"""
Tests for the service catalog and the pricing of resolved selections.
"""

from __future__ import annotations

from decimal import Decimal

from salon_checkout.application.use_cases.price_services import PriceServicesUseCase
from salon_checkout.domain.entities.selection import SelectedService
from salon_checkout.infrastructure.catalog.service_catalog_store import ServiceCatalogStore


def test_catalog_lookup_normalizes_key():
    catalog = ServiceCatalogStore()

    entry = catalog.lookup("  Haircut ")
    assert entry is not None
    assert entry.name == "Haircut & Styling"
    assert entry.price == Decimal("35")
    assert entry.duration == "45 min"

    assert catalog.lookup("hair") is None


def test_price_empty_selection():
    """No selections price to an empty receipt with subtotal 0."""
    priced = PriceServicesUseCase(catalog=ServiceCatalogStore()).price([])

    assert priced.line_items == ()
    assert priced.subtotal == Decimal("0")
    assert priced.is_empty


def test_price_sums_catalog_prices():
    selected = [
        SelectedService(key="haircut", label="Haircut & Styling"),
        SelectedService(key="beard", label="Beard Trim"),
        SelectedService(key="beard", label="Beard Trim"),
    ]

    priced = PriceServicesUseCase(catalog=ServiceCatalogStore()).price(selected)

    assert [item.service.key for item in priced.line_items] == ["haircut", "beard", "beard"]
    assert priced.subtotal == Decimal("65")
    assert not priced.is_empty


def test_unknown_key_uses_fallback_definition():
    """Uncataloged keys never fail; the label becomes the display name."""
    pricing = PriceServicesUseCase(catalog=ServiceCatalogStore())

    priced = pricing.price([SelectedService(key="hot_towel", label="Hot Towel")])

    service = priced.line_items[0].service
    assert service.key == "hot_towel"
    assert service.name == "Hot Towel"
    assert service.duration == "45 min"
    assert service.price == Decimal("35")
    assert service.description == "Professional hot towel service"
    assert priced.subtotal == Decimal("35")


def test_fallback_price_is_configurable():
    pricing = PriceServicesUseCase(catalog=ServiceCatalogStore(), fallback_price=Decimal("20"), fallback_duration="30 min")

    service = pricing.resolve_service(SelectedService(key="mystery", label=""))

    assert service.name == "Service"
    assert service.price == Decimal("20")
    assert service.duration == "30 min"


def test_injected_empty_catalog_stays_empty():
    """An explicitly empty catalog does not fall back to the built-in services."""
    catalog = ServiceCatalogStore({})

    assert catalog.lookup("haircut") is None
    assert catalog.list_services() == []

    priced = PriceServicesUseCase(catalog=catalog).price([SelectedService(key="haircut", label="Haircut & Styling")])
    assert priced.line_items[0].service.description == "Professional haircut & styling service"
