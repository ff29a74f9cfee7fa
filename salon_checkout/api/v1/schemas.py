from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class SelectedServiceSchema(BaseModel):
    key: str
    label: str


class CheckoutRequestSchema(BaseModel):
    # In-app multi-select, first-chosen first.
    selected_services: list[SelectedServiceSchema] = Field(default_factory=list)
    # Navigation params arrive as strings.
    selected_services_json: str | None = None
    selected_service: str | None = None
    selected_service_label: str | None = None

    claimed_reward_ids: list[str] = Field(default_factory=list)
    redemption_option_id: str | None = None
    current_points: int | None = Field(default=None, ge=0)

    selected_date: str | None = None
    selected_time: str | None = None
    salon_name: str | None = None
    barber_name: str | None = None

    promotion_code: str | None = None
    promotion_title: str | None = None
    discount_amount: str | None = None


class ToggleRedemptionRequestSchema(BaseModel):
    selected_option_id: str | None = None
    option_id: str
    current_points: int | None = Field(default=None, ge=0)


class ToggleRedemptionResponseSchema(BaseModel):
    selected_option_id: str | None


class ServiceSchema(BaseModel):
    key: str
    name: str
    duration: str
    price: Decimal
    description: str = ""


class RewardOptionSchema(BaseModel):
    id: str
    title: str
    description: str = ""
    points_cost: int
    discount_value: Decimal
    affordable: bool
    selected: bool = False


class LineItemSchema(BaseModel):
    key: str
    name: str
    duration: str
    price: Decimal
    quantity: int = 1


class DiscountsSchema(BaseModel):
    claimed: Decimal
    redeemed: Decimal
    promotion: Decimal


class AppliedDiscountSchema(BaseModel):
    source: str
    label: str
    amount: Decimal


class PointsSchema(BaseModel):
    base_points: int
    multiplier: int
    points_earned: int
    points_redeemed: int
    points_balance: int


class QuoteResponseSchema(BaseModel):
    source: str
    services: list[LineItemSchema]
    subtotal: Decimal
    discounts: DiscountsSchema
    applied_discounts: list[AppliedDiscountSchema] = Field(default_factory=list)
    total_discount: Decimal
    discounted_subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal
    points: PointsSchema
    warnings: list[str] = Field(default_factory=list)
    currency: str = "CAD"
    total_display: str = ""


class ReceiptResponseSchema(QuoteResponseSchema):
    booking_id: str
    confirmed_at: datetime
    appointment_date: str | None = None
    appointment_time: str | None = None
    salon_name: str | None = None
    barber_name: str | None = None
