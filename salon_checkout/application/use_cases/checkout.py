from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from salon_checkout.application.exceptions import NoServicesSelectedError
from salon_checkout.application.use_cases.compute_discount import ComputeDiscountUseCase, DiscountResult
from salon_checkout.application.use_cases.compute_points import DEFAULT_EARN_RATE, PointsResult, compute_points
from salon_checkout.application.use_cases.finalize_totals import DEFAULT_TAX_RATE, Totals, finalize
from salon_checkout.application.use_cases.price_services import PriceServicesUseCase, PricedSelection
from salon_checkout.application.use_cases.redemption import RedemptionUseCase
from salon_checkout.application.use_cases.resolve_selection import ResolveSelectionUseCase
from salon_checkout.domain.entities.receipt import Receipt
from salon_checkout.domain.entities.rewards import ClaimedReward, PromotionDiscount, RedemptionState
from salon_checkout.domain.entities.selection import ResolvedSelection, SelectionInputBundle


@dataclass(frozen=True)
class CheckoutRequest:
    selection: SelectionInputBundle = SelectionInputBundle()
    claimed_rewards: tuple[ClaimedReward, ...] = ()
    redemption: RedemptionState = RedemptionState()
    current_points: int = 0
    appointment_date: str | None = None
    appointment_time: str | None = None
    salon_name: str | None = None
    barber_name: str | None = None
    promotion: PromotionDiscount | None = None


@dataclass(frozen=True)
class BookingQuote:
    selection: ResolvedSelection
    priced: PricedSelection
    discount: DiscountResult
    totals: Totals
    points: PointsResult
    tax_rate: Decimal
    points_redeemed: int = 0
    current_points: int = 0
    warnings: tuple[str, ...] = ()

    @property
    def points_balance(self) -> int:
        return self.current_points - self.points_redeemed + self.points.points_earned


class CheckoutUseCase:
    """Run selection, pricing, discounts, tax and points for the confirmation step.

    quote() is re-derived from scratch on every call and has no side effects.
    confirm() runs the same pipeline and freezes the result into a Receipt.
    """

    def __init__(
        self,
        resolver: ResolveSelectionUseCase,
        pricing: PriceServicesUseCase,
        discounts: ComputeDiscountUseCase,
        redemption: RedemptionUseCase,
        tax_rate: Decimal = DEFAULT_TAX_RATE,
        earn_rate: Decimal = DEFAULT_EARN_RATE,
        evening_multiplier: int = 2,
        evening_start_hour: int = 6,
        booking_id_prefix: str = "BK",
    ) -> None:
        self._resolver = resolver
        self._pricing = pricing
        self._discounts = discounts
        self._redemption = redemption
        self._tax_rate = tax_rate
        self._earn_rate = earn_rate
        self._evening_multiplier = evening_multiplier
        self._evening_start_hour = evening_start_hour
        self._booking_id_prefix = booking_id_prefix
        self._logger = logging.getLogger(__name__)

    def quote(self, request: CheckoutRequest) -> BookingQuote:
        selection = self._resolver.resolve(request.selection)
        priced = self._pricing.price(selection.services)

        option = self._redemption.selected_option(request.redemption)
        discount = self._discounts.compute(
            claimed=request.claimed_rewards,
            redemption=option,
            subtotal=priced.subtotal,
            current_points=request.current_points,
            promotion=request.promotion,
        )
        totals = finalize(priced.subtotal, discount.total_discount, self._tax_rate)
        points = compute_points(
            priced.subtotal,
            request.appointment_time,
            earn_rate=self._earn_rate,
            evening_multiplier=self._evening_multiplier,
            evening_start_hour=self._evening_start_hour,
        )

        warnings: list[str] = []
        if priced.is_empty:
            warnings.append("no_services_selected")
        if discount.redemption_error:
            warnings.append(discount.redemption_error)

        return BookingQuote(
            selection=selection,
            priced=priced,
            discount=discount,
            totals=totals,
            points=points,
            tax_rate=self._tax_rate,
            points_redeemed=option.points_cost if option and discount.redemption_applied else 0,
            current_points=request.current_points,
            warnings=tuple(warnings),
        )

    def confirm(self, request: CheckoutRequest, now: datetime | None = None) -> Receipt:
        quote = self.quote(request)
        if quote.priced.is_empty:
            raise NoServicesSelectedError("No services selected")

        confirmed_at = now or datetime.now().astimezone()
        booking_id = self.booking_id(confirmed_at)
        receipt = Receipt(
            booking_id=booking_id,
            confirmed_at=confirmed_at,
            appointment_date=request.appointment_date,
            appointment_time=request.appointment_time,
            salon_name=request.salon_name,
            barber_name=request.barber_name,
            selection_source=quote.selection.source,
            services=quote.priced.line_items,
            subtotal=quote.priced.subtotal,
            claimed_discount=quote.discount.claimed_amount,
            redeemed_discount=quote.discount.redeemed_amount,
            promotion_discount=quote.discount.promotion_amount,
            total_discount=quote.discount.total_discount,
            applied_discounts=quote.discount.applied,
            discounted_subtotal=quote.totals.discounted_subtotal,
            tax_rate=quote.tax_rate,
            tax=quote.totals.tax,
            total=quote.totals.total,
            base_points=quote.points.base_points,
            points_multiplier=quote.points.multiplier,
            points_earned=quote.points.points_earned,
            points_redeemed=quote.points_redeemed,
            points_balance=quote.points_balance,
            redemption_error=quote.discount.redemption_error,
        )
        self._logger.info(
            "Booking confirmed",
            extra={"booking_id": booking_id, "source": quote.selection.source.value, "total": str(receipt.total)},
        )
        return receipt

    def booking_id(self, confirmed_at: datetime) -> str:
        millis = int(confirmed_at.timestamp() * 1000)
        return f"{self._booking_id_prefix}{millis % 1_000_000:06d}"
