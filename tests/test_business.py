"""
Tests for business-day calculations.
"""
from datetime import date

import pytest

from holidaykit.calendars.business import BusinessCalendar, HolidayCalendar
from holidaykit.calendars.rules import FixedDateRule
from holidaykit.provider import HolidayProvider
from holidaykit.registry import Registry
from tests.conftest import make_catalog, make_entry, make_provider


@pytest.fixture(scope="module")
def us_calendar(registry: Registry) -> BusinessCalendar:
    return registry.business_calendar("US")


class TestBusinessDays:
    """Weekend and holiday awareness."""

    def test_protocol(self, us_calendar: BusinessCalendar) -> None:
        assert isinstance(us_calendar, HolidayCalendar)

    def test_weekend_from_catalog(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.weekend_days == frozenset({5, 6})
        assert us_calendar.is_weekend(date(2024, 7, 6))
        assert not us_calendar.is_weekend(date(2024, 7, 5))

    def test_holiday_is_not_business_day(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.is_holiday(date(2024, 7, 4))
        assert not us_calendar.is_business_day(date(2024, 7, 4))
        assert us_calendar.is_business_day(date(2024, 7, 5))

    def test_sunday_only_weekend(self, registry: Registry) -> None:
        """India's catalog only rests on Sunday."""
        calendar = registry.business_calendar("IN")
        assert calendar.is_business_day(date(2024, 1, 6))
        assert not calendar.is_business_day(date(2024, 1, 7))

    def test_weekend_override(self) -> None:
        calendar = BusinessCalendar(make_provider([make_entry("a")]), weekend_days={4, 5})
        assert not calendar.is_business_day(date(2024, 1, 5))
        assert calendar.is_business_day(date(2024, 1, 7))

    def test_weekend_override_needs_working_day(self) -> None:
        """A seven-day weekend is refused up front rather than looping forever."""
        with pytest.raises(ValueError):
            BusinessCalendar(make_provider([make_entry("a")]), weekend_days=range(7))

    def test_catalog_weekend_needs_working_day(self) -> None:
        provider = HolidayProvider(make_catalog([make_entry("a")], weekend_days=range(7)))
        with pytest.raises(ValueError):
            BusinessCalendar(provider)

    def test_regional_holidays_need_subdivision(self, registry: Registry) -> None:
        """Quebec's Fête nationale only closes business in QC."""
        day = date(2024, 6, 24)
        assert registry.business_calendar("CA").is_business_day(day)
        assert not registry.business_calendar("CA", ["QC"]).is_business_day(day)

    def test_holidays_in_range(self, registry: Registry) -> None:
        start, end = date(2024, 6, 1), date(2024, 6, 30)
        assert registry.business_calendar("CA", ["QC"]).get_holidays_in_range(start, end) == [
            date(2024, 6, 24),
        ]
        assert registry.business_calendar("CA").get_holidays_in_range(start, end) == []


class TestBusinessDayArithmetic:
    """Adding, subtracting and counting business days."""

    def test_add_skips_holiday(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.add_business_days(date(2024, 7, 3), 1) == date(2024, 7, 5)

    def test_add_zero(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.add_business_days(date(2024, 7, 6), 0) == date(2024, 7, 6)

    def test_add_across_weekend(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.add_business_days(date(2024, 7, 5), 1) == date(2024, 7, 8)

    def test_add_negative(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.add_business_days(date(2024, 7, 5), -1) == date(2024, 7, 3)

    def test_subtract(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.subtract_business_days(date(2024, 12, 26), 1) == date(2024, 12, 24)

    def test_between(self, us_calendar: BusinessCalendar) -> None:
        """Start exclusive, end inclusive: July 2, 3, 5 and 8."""
        assert us_calendar.business_days_between(date(2024, 7, 1), date(2024, 7, 8)) == 4

    def test_between_reversed(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.business_days_between(date(2024, 7, 8), date(2024, 7, 1)) == 0

    def test_next_business_day(self, us_calendar: BusinessCalendar) -> None:
        """Saturday Aug 31 -> Labor Day Monday -> Tuesday Sep 3."""
        assert us_calendar.next_business_day(date(2024, 8, 31)) == date(2024, 9, 3)
        assert us_calendar.next_business_day(date(2024, 9, 4)) == date(2024, 9, 4)

    def test_previous_business_day(self, us_calendar: BusinessCalendar) -> None:
        assert us_calendar.previous_business_day(date(2024, 9, 2)) == date(2024, 8, 30)

    def test_observed_holiday_closes_friday(self) -> None:
        """A Saturday holiday observed on Friday makes Friday a non-business day."""
        provider = make_provider([
            make_entry("independence_day", FixedDateRule(7, 4), observed="nearest_weekday"),
        ])
        calendar = BusinessCalendar(provider)
        assert not calendar.is_business_day(date(2026, 7, 3))
        assert calendar.next_business_day(date(2026, 7, 3)) == date(2026, 7, 6)
