"""OrderAdmissionValidator - decides whether a submitted cart is accepted.

Every rule runs on every call; violations are accumulated so the customer
sees all problems with a cart at once.
"""

from datetime import datetime
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from .cutoff import is_day_orderable
from .models import (
    CartLineItem,
    ItemKind,
    Region,
    ValidationLimits,
    ValidationResult,
)
from .port import OrderValidatorPort
from .regions import REGION_ALIASES, canonicalize_region


class OrderAdmissionValidator(OrderValidatorPort):
    """Concrete implementation of OrderValidatorPort.

    Holds only read-only configuration, so a single instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        limits: Optional[ValidationLimits] = None,
        region_aliases: Mapping[str, Region] = REGION_ALIASES,
    ):
        self.limits = limits or ValidationLimits()
        self.region_aliases = region_aliases

    def validate(
        self,
        cart_items: Sequence[CartLineItem],
        total_price: Decimal,
        delivery_region: Optional[str],
        now: datetime,
    ) -> ValidationResult:
        errors: list[str] = []
        errors.extend(self._check_cart_size(cart_items))
        errors.extend(self._check_total_price(total_price))
        for position, item in enumerate(cart_items, start=1):
            errors.extend(self._check_item(position, item, now))

        return ValidationResult(
            errors=tuple(errors),
            region=canonicalize_region(delivery_region, self.region_aliases),
        )

    def _check_cart_size(self, cart_items: Sequence[CartLineItem]) -> list[str]:
        if not cart_items:
            return ["Košík je prázdny"]
        if len(cart_items) > self.limits.max_cart_items:
            return [f"Maximálny počet položiek v košíku je {self.limits.max_cart_items}"]
        return []

    def _check_total_price(self, total_price: Decimal) -> list[str]:
        errors = []
        if total_price > self.limits.max_total_order_value:
            errors.append(
                f"Maximálna hodnota objednávky je €{self.limits.max_total_order_value:,}"
            )
        if total_price <= 0:
            errors.append("Celková cena objednávky musí byť väčšia ako 0")
        return errors

    def _check_item(self, position: int, item: CartLineItem, now: datetime) -> list[str]:
        errors = []
        kind = item.item_kind

        if kind is ItemKind.WEEKLY_MENU:
            number_of_days = self._weekly_day_count(item)
            if number_of_days > self.limits.max_quantity_per_item:
                errors.append(
                    f"Položka {position}: Maximálny počet dní je {self.limits.max_quantity_per_item}"
                )
            if number_of_days <= 0:
                errors.append(f"Položka {position}: Musí mať aspoň jeden deň")

            if item.selected_days and item.menu_start_date is not None:
                unavailable = [
                    day for day in item.selected_days
                    if not is_day_orderable(
                        day, item.menu_start_date, now, self.limits.order_cutoff_hour
                    )
                ]
                if unavailable:
                    errors.append(
                        f"Položka {position}: Dni {', '.join(unavailable)} už nie je možné "
                        f"objednať. Objednávky na nasledujúci deň prijímame do "
                        f"{self.limits.order_cutoff_hour}:00 predchádzajúceho dňa."
                    )

        if item.size_code is None:
            errors.append(f"Položka {position}: Neplatná veľkosť menu ({item.size})")

        if kind is None:
            errors.append(f"Položka {position}: Neplatný typ objednávky ({item.kind})")

        return errors

    def _weekly_day_count(self, item: CartLineItem) -> int:
        if item.selected_days is not None:
            return len(item.selected_days)
        if item.menu_day_count:
            return item.menu_day_count
        return self.limits.default_weekly_days
