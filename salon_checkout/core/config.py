from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = "INFO"

    TAX_RATE: Decimal = Decimal("0.08")
    CURRENCY: str = "CAD"
    CURRENCY_SYMBOL: str = "$"

    POINTS_EARN_RATE: Decimal = Decimal("0.10")
    EVENING_POINTS_MULTIPLIER: int = 2
    EVENING_START_HOUR: int = 6
    DEFAULT_CURRENT_POINTS: int = 1000

    FALLBACK_SERVICE_PRICE: Decimal = Decimal("35")
    FALLBACK_SERVICE_DURATION: str = "45 min"

    BOOKING_ID_PREFIX: str = "BK"


settings = Settings()
