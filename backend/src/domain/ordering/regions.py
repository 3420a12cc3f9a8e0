"""Delivery region canonicalization and delivery fees.

Region is informational: it is normalized for logging and fee display and
never causes an order to be rejected.
"""

import unicodedata
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from .models import Region


REGION_ALIASES: Mapping[str, Region] = MappingProxyType({
    "nitriansky": Region.NITRA,
    "nitra": Region.NITRA,
    "bratislavsky": Region.BRATISLAVA,
    "bratislava": Region.BRATISLAVA,
    "sered": Region.SERED,
    "trnava": Region.TRNAVA,
    "other": Region.OTHER,
})

# Nitra and villages within the free delivery radius (~20 km)
NITRA_AREA_PLACES = (
    "nitra", "lapas", "beladice", "luzianky", "ludanice", "cabaj", "capor",
    "jelsovce", "ivanka", "lehota", "parovske haje", "mlynarce",
    "janikovce", "branc", "drazovce",
)

DELIVERY_FEES: Mapping[Region, Decimal] = MappingProxyType({
    Region.NITRA: Decimal("0.00"),
    Region.SERED: Decimal("4.00"),
    Region.TRNAVA: Decimal("5.00"),
    Region.BRATISLAVA: Decimal("6.00"),
    # Priced by agreement with the customer
    Region.OTHER: Decimal("0.00"),
})


def normalize_text(value: str) -> str:
    """Lowercase, trim, and strip diacritics (NFD, drop combining marks)."""
    decomposed = unicodedata.normalize("NFD", value.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def canonicalize_region(
    value: Optional[str],
    aliases: Mapping[str, Region] = REGION_ALIASES,
) -> Region:
    """Map free-text region input to a canonical region tag.

    Total: any input, including None and empty strings, yields a Region.
    """
    if not value:
        return Region.OTHER
    return aliases.get(normalize_text(value), Region.OTHER)


def detect_region_from_address(address: Optional[str]) -> Region:
    """Guess the delivery region from a free-text street address.

    Nitra and its surrounding villages take precedence over the other
    regions when an address mentions more than one place.
    """
    if not address:
        return Region.OTHER

    normalized = normalize_text(address)
    if any(place in normalized for place in NITRA_AREA_PLACES):
        return Region.NITRA
    for needle, region in (
        ("sered", Region.SERED),
        ("trnava", Region.TRNAVA),
        ("bratislava", Region.BRATISLAVA),
    ):
        if needle in normalized:
            return region
    return Region.OTHER


def delivery_fee_for(region: Region) -> Decimal:
    return DELIVERY_FEES[region]
