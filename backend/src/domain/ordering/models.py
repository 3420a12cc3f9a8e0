"""Ordering domain models: closed enumerations, cart items, limits, results."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class ItemKind(str, Enum):
    """Cart line kinds, valued by their wire representation."""
    WEEKLY_MENU = "week"
    SINGLE_DAY = "day"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ItemKind"]:
        try:
            return cls(value)
        except ValueError:
            return None


class SizeCode(str, Enum):
    """Menu sizes offered on the menu page."""
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"
    XXL_PLUS = "XXL_PLUS"
    CUSTOM = "CUSTOM"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SizeCode"]:
        try:
            return cls(value)
        except ValueError:
            return None


class WeekDay(int, Enum):
    """Orderable weekdays, Monday=1 .. Friday=5."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5

    @property
    def label(self) -> str:
        return DAY_LABELS[self]

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["WeekDay"]:
        return _DAYS_BY_LABEL.get(label) if label else None


# Display labels as they appear on weekly menus
DAY_LABELS = {
    WeekDay.MONDAY: "Pondelok",
    WeekDay.TUESDAY: "Utorok",
    WeekDay.WEDNESDAY: "Streda",
    WeekDay.THURSDAY: "Štvrtok",
    WeekDay.FRIDAY: "Piatok",
}

_DAYS_BY_LABEL = {label: day for day, label in DAY_LABELS.items()}


class Region(str, Enum):
    """Canonical delivery region tags."""
    NITRA = "Nitra"
    BRATISLAVA = "Bratislava"
    SERED = "Sered"
    TRNAVA = "Trnava"
    OTHER = "Other"


@dataclass(frozen=True)
class CartLineItem:
    """A single cart line as submitted at checkout.

    `kind` and `size` hold the raw submitted strings so that values outside
    the closed enumerations are reported as business errors by the validator
    instead of failing request parsing.
    """
    kind: str
    size: str
    selected_days: Optional[tuple[str, ...]] = None
    menu_start_date: Optional[date] = None
    menu_day_count: Optional[int] = None
    is_vegetarian: bool = False

    @property
    def item_kind(self) -> Optional[ItemKind]:
        return ItemKind.parse(self.kind)

    @property
    def size_code(self) -> Optional[SizeCode]:
        return SizeCode.parse(self.size)


@dataclass(frozen=True)
class ValidationLimits:
    """Admission limits, built once at startup and injected."""
    max_quantity_per_item: int = 50
    max_total_order_value: Decimal = Decimal("10000")
    max_cart_items: int = 20
    # Day count assumed for a weekly item carrying neither days nor a menu
    default_weekly_days: int = 5
    order_cutoff_hour: int = 12


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single admission check. Valid iff there are no errors."""
    errors: tuple[str, ...] = field(default_factory=tuple)
    region: Region = Region.OTHER

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "region": self.region.value,
        }
