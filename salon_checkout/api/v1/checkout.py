from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_checkout.api.v1.schemas import (
    AppliedDiscountSchema,
    CheckoutRequestSchema,
    DiscountsSchema,
    LineItemSchema,
    PointsSchema,
    QuoteResponseSchema,
    ReceiptResponseSchema,
    RewardOptionSchema,
    ServiceSchema,
    ToggleRedemptionRequestSchema,
    ToggleRedemptionResponseSchema,
)
from salon_checkout.application.exceptions import (
    InsufficientPointsError,
    NoServicesSelectedError,
    UnknownRewardError,
)
from salon_checkout.application.ports.rewards_catalog import RewardsCatalogPort
from salon_checkout.application.ports.service_catalog import ServiceCatalogPort
from salon_checkout.application.use_cases.checkout import CheckoutRequest, CheckoutUseCase
from salon_checkout.application.use_cases.redemption import RedemptionUseCase
from salon_checkout.application.utils.money import format_price, parse_price, to_cents
from salon_checkout.core.config import settings
from salon_checkout.domain.entities.line_item import LineItem
from salon_checkout.domain.entities.receipt import AppliedDiscount
from salon_checkout.domain.entities.rewards import ClaimedReward, PromotionDiscount, RedemptionState
from salon_checkout.domain.entities.selection import LegacySelection, SelectedService, SelectionInputBundle
from salon_checkout.wiring.dependencies import (
    get_checkout_use_case,
    get_redemption_use_case,
    get_rewards_catalog,
    get_service_catalog,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/services", response_model=list[ServiceSchema])
def list_services(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [
        ServiceSchema(key=s.key, name=s.name, duration=s.duration, price=s.price, description=s.description)
        for s in catalog.list_services()
    ]


@router.get("/rewards", response_model=list[RewardOptionSchema])
def list_rewards(
    current_points: int | None = Query(None, ge=0),
    selected_option_id: str | None = Query(None),
    uc: RedemptionUseCase = Depends(get_redemption_use_case),
):
    points = settings.DEFAULT_CURRENT_POINTS if current_points is None else current_points
    state = RedemptionState(selected_option_id=selected_option_id)
    return [
        RewardOptionSchema(
            id=a.option.id,
            title=a.option.title,
            description=a.option.description,
            points_cost=a.option.points_cost,
            discount_value=a.option.discount_value,
            affordable=a.affordable,
            selected=a.selected,
        )
        for a in uc.available_options(points, state)
    ]


@router.post("/redemption/toggle", response_model=ToggleRedemptionResponseSchema)
def toggle_redemption(
    req: ToggleRedemptionRequestSchema,
    uc: RedemptionUseCase = Depends(get_redemption_use_case),
):
    points = settings.DEFAULT_CURRENT_POINTS if req.current_points is None else req.current_points
    try:
        state = uc.toggle(RedemptionState(selected_option_id=req.selected_option_id), req.option_id, points)
    except UnknownRewardError:
        raise HTTPException(status_code=404, detail=f"Unknown reward: {req.option_id}")
    except InsufficientPointsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ToggleRedemptionResponseSchema(selected_option_id=state.selected_option_id)


@router.post("/quote", response_model=QuoteResponseSchema)
def quote(
    req: CheckoutRequestSchema,
    uc: CheckoutUseCase = Depends(get_checkout_use_case),
    rewards: RewardsCatalogPort = Depends(get_rewards_catalog),
):
    try:
        result = uc.quote(_to_checkout_request(req, rewards))
    except UnknownRewardError:
        raise HTTPException(status_code=404, detail=f"Unknown reward: {req.redemption_option_id}")

    return QuoteResponseSchema(
        source=result.selection.source.value,
        services=[_line_item_schema(item) for item in result.priced.line_items],
        subtotal=to_cents(result.priced.subtotal),
        discounts=DiscountsSchema(
            claimed=to_cents(result.discount.claimed_amount),
            redeemed=to_cents(result.discount.redeemed_amount),
            promotion=to_cents(result.discount.promotion_amount),
        ),
        applied_discounts=[_applied_schema(d) for d in result.discount.applied],
        total_discount=to_cents(result.discount.total_discount),
        discounted_subtotal=to_cents(result.totals.discounted_subtotal),
        tax_rate=result.tax_rate,
        tax=to_cents(result.totals.tax),
        total=to_cents(result.totals.total),
        points=PointsSchema(
            base_points=result.points.base_points,
            multiplier=result.points.multiplier,
            points_earned=result.points.points_earned,
            points_redeemed=result.points_redeemed,
            points_balance=result.points_balance,
        ),
        warnings=list(result.warnings),
        currency=settings.CURRENCY,
        total_display=format_price(result.totals.total, settings.CURRENCY_SYMBOL),
    )


@router.post("/confirm", response_model=ReceiptResponseSchema)
def confirm(
    req: CheckoutRequestSchema,
    uc: CheckoutUseCase = Depends(get_checkout_use_case),
    rewards: RewardsCatalogPort = Depends(get_rewards_catalog),
):
    try:
        receipt = uc.confirm(_to_checkout_request(req, rewards))
    except NoServicesSelectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownRewardError:
        raise HTTPException(status_code=404, detail=f"Unknown reward: {req.redemption_option_id}")

    return ReceiptResponseSchema(
        booking_id=receipt.booking_id,
        confirmed_at=receipt.confirmed_at,
        appointment_date=receipt.appointment_date,
        appointment_time=receipt.appointment_time,
        salon_name=receipt.salon_name,
        barber_name=receipt.barber_name,
        source=receipt.selection_source.value,
        services=[_line_item_schema(item) for item in receipt.services],
        subtotal=to_cents(receipt.subtotal),
        discounts=DiscountsSchema(**{k: to_cents(v) for k, v in receipt.discounts.items()}),
        applied_discounts=[_applied_schema(d) for d in receipt.applied_discounts],
        total_discount=to_cents(receipt.total_discount),
        discounted_subtotal=to_cents(receipt.discounted_subtotal),
        tax_rate=receipt.tax_rate,
        tax=to_cents(receipt.tax),
        total=to_cents(receipt.total),
        points=PointsSchema(
            base_points=receipt.base_points,
            multiplier=receipt.points_multiplier,
            points_earned=receipt.points_earned,
            points_redeemed=receipt.points_redeemed,
            points_balance=receipt.points_balance,
        ),
        warnings=[receipt.redemption_error] if receipt.redemption_error else [],
        currency=settings.CURRENCY,
        total_display=format_price(receipt.total, settings.CURRENCY_SYMBOL),
    )


def _to_checkout_request(req: CheckoutRequestSchema, rewards: RewardsCatalogPort) -> CheckoutRequest:
    claimed: list[ClaimedReward] = []
    for reward_id in req.claimed_reward_ids:
        reward = rewards.get_claimable(reward_id)
        if reward is None:
            logger.warning("Ignoring unknown claimed reward", extra={"reward": reward_id})
            continue
        claimed.append(reward)

    legacy = None
    if req.selected_service or req.selected_service_label:
        legacy = LegacySelection(key=req.selected_service, label=req.selected_service_label)

    promotion = None
    amount = parse_price(req.discount_amount)
    if amount > 0:
        promotion = PromotionDiscount(
            code=req.promotion_code or "",
            title=req.promotion_title or "Promotion",
            amount=amount,
        )

    return CheckoutRequest(
        selection=SelectionInputBundle(
            context_selections=tuple(SelectedService(key=s.key, label=s.label) for s in req.selected_services),
            serialized_selections=req.selected_services_json,
            legacy_single=legacy,
        ),
        claimed_rewards=tuple(claimed),
        redemption=RedemptionState(selected_option_id=req.redemption_option_id),
        current_points=settings.DEFAULT_CURRENT_POINTS if req.current_points is None else req.current_points,
        appointment_date=req.selected_date,
        appointment_time=req.selected_time,
        salon_name=req.salon_name,
        barber_name=req.barber_name,
        promotion=promotion,
    )


def _line_item_schema(item: LineItem) -> LineItemSchema:
    return LineItemSchema(
        key=item.service.key,
        name=item.service.name,
        duration=item.service.duration,
        price=to_cents(item.service.price),
        quantity=item.quantity,
    )


def _applied_schema(discount: AppliedDiscount) -> AppliedDiscountSchema:
    return AppliedDiscountSchema(source=discount.source, label=discount.label, amount=to_cents(discount.amount))
