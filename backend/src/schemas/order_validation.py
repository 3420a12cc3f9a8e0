"""Pydantic schemas for the order validation API.

Wire names are camelCase, matching what the storefront stores in its cart;
snake_case names are accepted as well.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

from domain.ordering.models import CartLineItem


class MenuReference(BaseModel):
    """The weekly menu snapshot embedded in a weekly cart item."""
    start_date: Optional[date] = None
    items: Optional[list[Any]] = None


class CartItemRequest(BaseModel):
    """A cart line as submitted by the storefront.

    `type` and `size` are free strings here; unknown values are business
    errors reported by the validator, not request validation failures.
    """
    type: str
    size: str
    selected_days: Optional[list[str]] = Field(None, alias="selectedDays")
    menu_start_date: Optional[date] = Field(None, alias="menuStartDate")
    menu: Optional[MenuReference] = None
    is_vegetarian: bool = Field(False, alias="isVegetarian")

    class Config:
        populate_by_name = True

    def to_domain(self) -> CartLineItem:
        menu_start_date = self.menu_start_date
        if menu_start_date is None and self.menu is not None:
            menu_start_date = self.menu.start_date

        menu_day_count = None
        if self.menu is not None and self.menu.items is not None:
            menu_day_count = len(self.menu.items)

        return CartLineItem(
            kind=self.type,
            size=self.size,
            selected_days=tuple(self.selected_days) if self.selected_days is not None else None,
            menu_start_date=menu_start_date,
            menu_day_count=menu_day_count,
            is_vegetarian=self.is_vegetarian,
        )


class OrderValidationRequest(BaseModel):
    """Request body for POST /orders/validate."""
    cart_items: list[CartItemRequest] = Field(..., alias="cartItems")
    total_price: Decimal = Field(..., alias="totalPrice")
    delivery_region: Optional[str] = Field(None, alias="deliveryRegion")

    class Config:
        populate_by_name = True


class OrderValidationResponse(BaseModel):
    """Outcome of an order admission check.

    A business rejection is a normal response with valid=False; errors are
    user-facing messages in the storefront's language.
    """
    valid: bool
    errors: list[str] = Field(default_factory=list)
    message: str
    region: str
    delivery_fee: float = Field(..., alias="deliveryFee")

    class Config:
        populate_by_name = True
