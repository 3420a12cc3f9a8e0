"""Order admission API: checks a cart before checkout persists it."""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends

from auth.dependencies import AuthenticatedUser
from auth.rate_limit import check_order_rate_limit
from config import get_settings
from domain.ordering import (
    ClockPort,
    OrderAdmissionValidator,
    OrderValidatorPort,
    SystemClock,
    delivery_fee_for,
)
from observability.metrics import order_validation_errors_total, order_validations_total
from schemas.order_validation import OrderValidationRequest, OrderValidationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

MESSAGE_VALID = "Objednávka je validná"
MESSAGE_INVALID = "Objednávka neprešla validáciou"


@lru_cache()
def get_order_validator() -> OrderValidatorPort:
    """Validator configured once from settings and shared across requests."""
    return OrderAdmissionValidator(get_settings().validation_limits())


def get_clock() -> ClockPort:
    return SystemClock(get_settings().ORDER_TIMEZONE)


@router.post("/validate", response_model=OrderValidationResponse)
def validate_order(
    request: OrderValidationRequest,
    user: AuthenticatedUser = Depends(check_order_rate_limit),
    validator: OrderValidatorPort = Depends(get_order_validator),
    clock: ClockPort = Depends(get_clock),
):
    """Validate a cart before the order is placed.

    Business rule violations are returned with 200 and valid=False so the
    storefront can show every problem at once. Malformed bodies are rejected
    with 400 by the request validation handler, and unauthenticated or
    throttled callers with 401/429 by the dependencies.

    Args:
        request: Cart items, caller-computed total, and delivery region
        user: Authenticated, rate-limited caller
        validator: Order admission validator
        clock: Time source for the ordering cutoff

    Returns:
        OrderValidationResponse with errors, canonical region, and delivery fee
    """
    cart_items = [item.to_domain() for item in request.cart_items]

    logger.info(
        f"Validating order for user {user.user_id}",
        extra={
            "user_id": str(user.user_id),
            "item_count": len(cart_items),
            "total_price": str(request.total_price),
        }
    )

    # totalPrice is taken as submitted; it is not recomputed from menu prices
    result = validator.validate(
        cart_items,
        request.total_price,
        request.delivery_region,
        clock.now(),
    )

    if result.valid:
        order_validations_total.labels(result="valid").inc()
        logger.info(
            f"Order validation passed for user {user.user_id}",
            extra={"user_id": str(user.user_id), "region": result.region.value}
        )
    else:
        order_validations_total.labels(result="invalid").inc()
        order_validation_errors_total.inc(len(result.errors))
        logger.info(
            f"Order validation failed for user {user.user_id}",
            extra={
                "user_id": str(user.user_id),
                "region": result.region.value,
                "errors": list(result.errors),
            }
        )

    return OrderValidationResponse(
        valid=result.valid,
        errors=list(result.errors),
        message=MESSAGE_VALID if result.valid else MESSAGE_INVALID,
        region=result.region.value,
        delivery_fee=float(delivery_fee_for(result.region)),
    )
