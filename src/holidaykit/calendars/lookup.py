"""
Lookup-Table Dates

Boundary for calendars the kernel does not compute (Hijri, Hebrew, Chinese
lunisolar, Thai Buddhist feasts). Catalogs ship these as literal per-year
tables plus an optional fallback rule for years outside the table.

A tabulated year is used verbatim. Any other year goes through the fallback
and is flagged as approximate. There is no interpolation.
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Mapping, Optional


def lookup_date(
    year: int,
    table: Mapping[int, tuple[int, int]],
    fallback: Optional[Callable[[int], date]] = None,
) -> Optional[tuple[date, bool]]:
    """
    Resolve a date from a year table.

    Args:
        year: Year to resolve
        table: Year -> (month, day) of tabulated dates
        fallback: Function computing an approximate date for other years

    Returns:
        (date, approximate) or None when the year is not tabulated and
        there is no fallback
    """
    if year in table:
        month, day = table[year]
        return date(year, month, day), False
    if fallback is None:
        return None
    return fallback(year), True


def parse_month_day(value: str) -> tuple[int, int]:
    """
    Parse a "MM-DD" string into a (month, day) pair.

    Raises:
        ValueError: If the string is not "MM-DD" with a plausible month and day
    """
    parts = str(value).strip().split("-")
    if len(parts) != 2:
        raise ValueError(f"Expected MM-DD, got {value!r}")
    month, day = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError(f"Month/day out of range in {value!r}")
    return month, day
