from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ServiceDefinition:
    key: str
    name: str
    duration: str  # display label, e.g. "45 min"
    price: Decimal
    description: str = ""

    @staticmethod
    def fallback(key: str, label: str | None, price: Decimal, duration: str) -> "ServiceDefinition":
        name = (label or "").strip() or "Service"
        return ServiceDefinition(
            key=key,
            name=name,
            duration=duration,
            price=price,
            description=f"Professional {name.lower()} service",
        )
