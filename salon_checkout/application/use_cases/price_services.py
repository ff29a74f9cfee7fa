from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from salon_checkout.application.ports.service_catalog import ServiceCatalogPort
from salon_checkout.domain.entities.line_item import LineItem
from salon_checkout.domain.entities.selection import SelectedService
from salon_checkout.domain.entities.service_definition import ServiceDefinition


@dataclass(frozen=True)
class PricedSelection:
    line_items: tuple[LineItem, ...]
    subtotal: Decimal

    @property
    def is_empty(self) -> bool:
        return not self.line_items


class PriceServicesUseCase:
    def __init__(
        self,
        catalog: ServiceCatalogPort,
        fallback_price: Decimal = Decimal("35"),
        fallback_duration: str = "45 min",
    ) -> None:
        self._catalog = catalog
        self._fallback_price = fallback_price
        self._fallback_duration = fallback_duration
        self._logger = logging.getLogger(__name__)

    def price(self, selected: Iterable[SelectedService]) -> PricedSelection:
        line_items = tuple(LineItem(service=self.resolve_service(s)) for s in selected)
        subtotal = sum((item.total for item in line_items), Decimal("0"))
        return PricedSelection(line_items=line_items, subtotal=subtotal)

    def resolve_service(self, selected: SelectedService) -> ServiceDefinition:
        entry = self._catalog.lookup(selected.key)
        if entry:
            return entry
        self._logger.info("Service not cataloged, using fallback", extra={"service": selected.key})
        return ServiceDefinition.fallback(
            key=selected.key,
            label=selected.label,
            price=self._fallback_price,
            duration=self._fallback_duration,
        )
