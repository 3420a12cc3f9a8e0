"""Ordering domain module.

Implements the admission check that runs before a meal order is stored:
cart and price limits, weekly day counts, the noon cutoff for next-day
delivery, and delivery region canonicalization.
"""

from .models import (
    CartLineItem,
    ItemKind,
    Region,
    SizeCode,
    ValidationLimits,
    ValidationResult,
    WeekDay,
)
from .clock import ClockPort, SystemClock
from .cutoff import is_day_orderable
from .port import OrderValidatorPort
from .regions import (
    canonicalize_region,
    delivery_fee_for,
    detect_region_from_address,
)
from .validator import OrderAdmissionValidator

__all__ = [
    "CartLineItem",
    "ItemKind",
    "Region",
    "SizeCode",
    "ValidationLimits",
    "ValidationResult",
    "WeekDay",
    "ClockPort",
    "SystemClock",
    "is_day_orderable",
    "OrderValidatorPort",
    "canonicalize_region",
    "delivery_fee_for",
    "detect_region_from_address",
    "OrderAdmissionValidator",
]
