from fastapi import FastAPI

from salon_checkout.api.v1.checkout import router as checkout_router
from salon_checkout.core.config import settings
from salon_checkout.core.log_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Salon Booking Checkout", version="1.0.0")
app.include_router(checkout_router, prefix="/api/v1/checkout", tags=["checkout"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
