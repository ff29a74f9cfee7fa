from __future__ import annotations

from salon_checkout.application.ports.service_catalog import ServiceCatalogPort
from salon_checkout.domain.entities.service_definition import ServiceDefinition
from salon_checkout.infrastructure.catalog.service_catalog_data import SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, catalog: dict[str, ServiceDefinition] | None = None) -> None:
        self._catalog = SERVICE_CATALOG if catalog is None else catalog

    def lookup(self, key: str) -> ServiceDefinition | None:
        normalized_key = (key or "").lower().strip()
        return self._catalog.get(normalized_key)

    def list_services(self) -> list[ServiceDefinition]:
        return list(self._catalog.values())
