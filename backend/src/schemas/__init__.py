"""Pydantic schemas for the order admission API"""

from .order_validation import (
    CartItemRequest,
    MenuReference,
    OrderValidationRequest,
    OrderValidationResponse,
)

__all__ = [
    "CartItemRequest",
    "MenuReference",
    "OrderValidationRequest",
    "OrderValidationResponse",
]
