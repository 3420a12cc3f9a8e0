"""Day-level ordering cutoff for weekly menus.

A weekday of a weekly menu can be ordered only if it lies strictly after
today, and the next calendar day closes at the cutoff hour (noon) today.
"""

from datetime import date, datetime, timedelta

from .models import WeekDay

DEFAULT_CUTOFF_HOUR = 12


def day_date(day: WeekDay, menu_start_date: date) -> date:
    """Calendar date of `day` within the week starting at `menu_start_date`."""
    return menu_start_date + timedelta(days=day.value - 1)


def is_day_orderable(
    day_name: str,
    menu_start_date: date,
    now: datetime,
    cutoff_hour: int = DEFAULT_CUTOFF_HOUR,
) -> bool:
    """Return True if `day_name` of the menu week can still be ordered at `now`.

    Args:
        day_name: Weekday label as shown on the menu (e.g. "Utorok")
        menu_start_date: Monday of the weekly menu
        now: Current local date-time
        cutoff_hour: Hour at which ordering for the next day closes

    Returns:
        False for unknown labels, past days, today, and tomorrow once the
        cutoff hour has passed; True otherwise.
    """
    day = WeekDay.from_label(day_name)
    if day is None:
        return False

    target = day_date(day, menu_start_date)
    today = now.date()

    if target <= today:
        return False
    if now.hour >= cutoff_hour and target == today + timedelta(days=1):
        return False
    return True
