"""
Business-Day Calendar

Weekend- and holiday-aware day arithmetic on top of a HolidayProvider.
Weekend days come from the country's catalog unless overridden.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from itertools import islice
from typing import TYPE_CHECKING, Iterator, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..provider import HolidayProvider


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for holiday calendars.

    Anything that can answer "is this a holiday / business day" can drive
    business-day calculations.
    """

    def is_holiday(self, d: date) -> bool:
        ...

    def is_business_day(self, d: date) -> bool:
        ...

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        ...


@dataclass
class BusinessCalendar:
    """
    Business-day calculations for one country (and optionally subdivisions).

    Attributes:
        provider: Holiday provider for the country
        subdivisions: Only count regional holidays of these subdivisions
            (nationwide holidays always count)
        weekend_days: Non-working weekdays (0=Monday, 6=Sunday); defaults to
            the catalog's weekend
    """

    provider: HolidayProvider
    subdivisions: frozenset[str] = field(default_factory=frozenset)
    weekend_days: Optional[frozenset[int]] = None

    def __post_init__(self) -> None:
        self.subdivisions = frozenset(self.subdivisions)
        if self.weekend_days is None:
            self.weekend_days = frozenset(self.provider.weekend_days)
        else:
            self.weekend_days = frozenset(self.weekend_days)
        if len(self.weekend_days) >= 7:
            raise ValueError("weekend_days must leave at least one working day")

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday in the calendar's scope."""
        return self.provider.is_holiday(d, self.subdivisions)

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_business_day(self, d: date) -> bool:
        """
        Check if a date is a business day.

        A business day is a non-weekend day that is not a holiday.
        """
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """Get all holiday dates within a range (inclusive)."""
        return [
            d for d, record in self.provider.holidays_in_range(start, end).items()
            if record.applies_to(self.subdivisions)
        ]

    def _business_days_from(self, start: date, step: int) -> Iterator[date]:
        """Business days after `start`, walking `step` days at a time."""
        current = start
        while True:
            current += timedelta(days=step)
            if self.is_business_day(current):
                yield current

    def add_business_days(self, start: date, days: int) -> date:
        """
        Move a number of business days away from a date.

        Args:
            start: Starting date (not counted)
            days: Business days to move; negative moves backwards

        Returns:
            The business day reached, or `start` when `days` is 0
        """
        if days == 0:
            return start
        walk = self._business_days_from(start, 1 if days > 0 else -1)
        return next(islice(walk, abs(days) - 1, None))

    def subtract_business_days(self, start: date, days: int) -> date:
        return self.add_business_days(start, -days)

    def business_days_between(self, start: date, end: date) -> int:
        """Count business days after `start` up to and including `end`."""
        return sum(
            1 for offset in range(1, (end - start).days + 1)
            if self.is_business_day(start + timedelta(days=offset))
        )

    def next_business_day(self, d: date) -> date:
        """The date itself if it is a business day, else the next one."""
        if self.is_business_day(d):
            return d
        return next(self._business_days_from(d, 1))

    def previous_business_day(self, d: date) -> date:
        """The date itself if it is a business day, else the previous one."""
        if self.is_business_day(d):
            return d
        return next(self._business_days_from(d, -1))
