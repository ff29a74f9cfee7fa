from functools import lru_cache

from salon_checkout.application.ports.rewards_catalog import RewardsCatalogPort
from salon_checkout.application.ports.service_catalog import ServiceCatalogPort
from salon_checkout.application.use_cases.checkout import CheckoutUseCase
from salon_checkout.application.use_cases.compute_discount import ComputeDiscountUseCase
from salon_checkout.application.use_cases.price_services import PriceServicesUseCase
from salon_checkout.application.use_cases.redemption import RedemptionUseCase
from salon_checkout.application.use_cases.resolve_selection import ResolveSelectionUseCase
from salon_checkout.core.config import settings
from salon_checkout.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from salon_checkout.infrastructure.rewards.rewards_catalog_store import RewardsCatalogStore


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_rewards_catalog() -> RewardsCatalogPort:
    return RewardsCatalogStore()


def get_redemption_use_case() -> RedemptionUseCase:
    return RedemptionUseCase(rewards=get_rewards_catalog())


def get_checkout_use_case() -> CheckoutUseCase:
    catalog = get_service_catalog()
    return CheckoutUseCase(
        resolver=ResolveSelectionUseCase(),
        pricing=PriceServicesUseCase(
            catalog=catalog,
            fallback_price=settings.FALLBACK_SERVICE_PRICE,
            fallback_duration=settings.FALLBACK_SERVICE_DURATION,
        ),
        discounts=ComputeDiscountUseCase(catalog=catalog),
        redemption=get_redemption_use_case(),
        tax_rate=settings.TAX_RATE,
        earn_rate=settings.POINTS_EARN_RATE,
        evening_multiplier=settings.EVENING_POINTS_MULTIPLIER,
        evening_start_hour=settings.EVENING_START_HOUR,
        booking_id_prefix=settings.BOOKING_ID_PREFIX,
    )
