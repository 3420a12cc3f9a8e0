"""Time source for the ordering domain.

The cutoff rule depends on local wall-clock time, so "now" is always injected
rather than read inline.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from zoneinfo import ZoneInfo


class ClockPort(ABC):
    """Supplies the current local date-time."""

    @abstractmethod
    def now(self) -> datetime:
        pass


class SystemClock(ClockPort):
    """Reads system time in the kitchen's timezone."""

    def __init__(self, tz_name: str = "Europe/Bratislava"):
        self.tz = ZoneInfo(tz_name)

    def now(self) -> datetime:
        return datetime.now(self.tz)
