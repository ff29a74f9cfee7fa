from __future__ import annotations

from abc import ABC, abstractmethod

from salon_checkout.domain.entities.service_definition import ServiceDefinition


class ServiceCatalogPort(ABC):
    @abstractmethod
    def lookup(self, key: str) -> ServiceDefinition | None:
        """Get service definition by key, or None when not cataloged."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[ServiceDefinition]:
        """All cataloged services in display order."""
        raise NotImplementedError
