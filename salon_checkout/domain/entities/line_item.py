from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from salon_checkout.domain.entities.service_definition import ServiceDefinition


@dataclass(frozen=True)
class LineItem:
    service: ServiceDefinition
    quantity: int = 1

    @property
    def total(self) -> Decimal:
        return self.service.price * self.quantity
