"""
holidaykit Calendars

Pure date algorithms shared by every country catalog.

Provides:
- Gregorian and Orthodox Easter with movable-feast offsets
- Nth / last weekday of a month and weekday-relative dates
- Observed-date policies
- Lookup tables with approximate fallbacks
- Catalog rule types that resolve themselves for a year
- BusinessCalendar for weekend/holiday-aware day arithmetic

Usage:
    from holidaykit.calendars import gregorian_easter, nth_weekday_of_month

    gregorian_easter(2024)                  # date(2024, 3, 31)
    nth_weekday_of_month(2024, 1, 0, 3)     # MLK Day: date(2024, 1, 15)
"""
from __future__ import annotations

from .business import BusinessCalendar, HolidayCalendar
from .easter import (
    ORTHODOX_OFFSETS,
    WESTERN_OFFSETS,
    easter_monday,
    easter_offset,
    good_friday,
    gregorian_easter,
    julian_easter,
    julian_to_gregorian_offset,
    orthodox_easter,
)
from .lookup import lookup_date, parse_month_day
from .observed import is_shifted, shift_observed
from .rules import (
    ComputedRule,
    EasterRule,
    FixedDateRule,
    LookupTableRule,
    NthWeekdayRule,
    RelativeWeekdayRule,
    ResolvedDate,
    Rule,
    fixed_date,
    span,
)
from .weekdays import (
    LAST,
    last_day_of_month,
    nth_weekday_of_month,
    weekday_on_or_after,
    weekday_on_or_before,
)

__all__ = [
    # Easter
    "WESTERN_OFFSETS",
    "ORTHODOX_OFFSETS",
    "gregorian_easter",
    "julian_easter",
    "julian_to_gregorian_offset",
    "orthodox_easter",
    "easter_offset",
    "good_friday",
    "easter_monday",
    # Weekdays
    "LAST",
    "last_day_of_month",
    "nth_weekday_of_month",
    "weekday_on_or_before",
    "weekday_on_or_after",
    # Observed
    "shift_observed",
    "is_shifted",
    # Lookup
    "lookup_date",
    "parse_month_day",
    # Rules
    "ResolvedDate",
    "FixedDateRule",
    "EasterRule",
    "NthWeekdayRule",
    "RelativeWeekdayRule",
    "LookupTableRule",
    "ComputedRule",
    "Rule",
    "fixed_date",
    "span",
    # Business days
    "HolidayCalendar",
    "BusinessCalendar",
]
