"""OrderValidatorPort interface"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from .models import CartLineItem, ValidationResult


class OrderValidatorPort(ABC):
    """Port interface for order admission checks.

    Implementations decide whether a submitted cart may be turned into
    orders. They must not perform I/O; persistence and notifications happen
    in the caller after a valid result.
    """

    @abstractmethod
    def validate(
        self,
        cart_items: Sequence[CartLineItem],
        total_price: Decimal,
        delivery_region: Optional[str],
        now: datetime,
    ) -> ValidationResult:
        """Check a cart against the admission rules.

        Args:
            cart_items: Cart lines in submission order
            total_price: Caller-computed order total
            delivery_region: Free-text delivery region, may be empty
            now: Current local date-time

        Returns:
            ValidationResult listing every violated rule
        """
        pass
