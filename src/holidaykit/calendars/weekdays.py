"""
Weekday Rules

Resolution of floating holidays defined by a weekday: "3rd Monday of
January", "last Monday of May", "Monday on or before May 24".
"""
from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta


LAST = -1


def last_day_of_month(year: int, month: int) -> date:
    """Get the last calendar day of a month."""
    return date(year, month, monthrange(year, month)[1])


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        n: Which occurrence (1=first, 2=second, etc.) or -1 for the last one

    Returns:
        The date of the nth weekday

    Raises:
        ValueError: If n is 0 or a negative value other than -1
    """
    if n >= 1:
        first_day = date(year, month, 1)
        days_until_weekday = (weekday - first_day.weekday()) % 7
        first_occurrence = first_day + timedelta(days=days_until_weekday)
        return first_occurrence + timedelta(weeks=n - 1)
    if n == LAST:
        last_day = last_day_of_month(year, month)
        days_since_weekday = (last_day.weekday() - weekday) % 7
        return last_day - timedelta(days=days_since_weekday)
    raise ValueError(f"Invalid occurrence {n}: use 1, 2, ... or -1 for last")


def weekday_on_or_before(d: date, weekday: int) -> date:
    """
    Get the given weekday on or before a date.

    Used for Victoria Day (Monday on or before May 24).
    """
    return d - timedelta(days=(d.weekday() - weekday) % 7)


def weekday_on_or_after(d: date, weekday: int) -> date:
    """Get the given weekday on or after a date."""
    return d + timedelta(days=(weekday - d.weekday()) % 7)
