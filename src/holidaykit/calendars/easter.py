"""
Easter Computus

Closed-form Easter calculations for the Western (Gregorian) and
Orthodox (Julian) churches.

Every movable feast in a catalog is expressed as a day offset from one of
these two dates, e.g. Good Friday = Easter - 2 days.

The Orthodox date is computed in the Julian calendar and then converted to
the Gregorian civil calendar by adding the century-dependent offset between
the two calendars (13 days for 1900-2099, 14 days for 2100-2199, ...).
"""
from __future__ import annotations

from datetime import date, timedelta


# Western movable feasts, in days relative to Easter Sunday
WESTERN_OFFSETS: dict[str, int] = {
    "carnival_monday": -48,
    "carnival_tuesday": -47,
    "ash_wednesday": -46,
    "palm_sunday": -7,
    "maundy_thursday": -3,
    "good_friday": -2,
    "holy_saturday": -1,
    "easter_sunday": 0,
    "easter_monday": 1,
    "ascension_day": 39,
    "whit_sunday": 49,
    "whit_monday": 50,
    "corpus_christi": 60,
}

# Orthodox movable feasts, in days relative to Orthodox Easter Sunday
ORTHODOX_OFFSETS: dict[str, int] = {
    "palm_sunday": -7,
    "good_friday": -2,
    "easter_sunday": 0,
    "easter_monday": 1,
    "trinity_sunday": 49,
    "trinity_monday": 50,
}


def gregorian_easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    This is the standard algorithm for calculating Easter in Western Christianity.
    All divisions are floor divisions.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def julian_easter(year: int) -> tuple[int, int]:
    """
    Calculate Easter Sunday in the Julian calendar (Meeus Julian algorithm).

    Returns:
        (month, day) in the Julian calendar. The pair is not a Gregorian
        civil date; use orthodox_easter() for that.
    """
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = ((d + e + 114) % 31) + 1
    return month, day


def julian_to_gregorian_offset(year: int) -> int:
    """
    Days between the Julian and Gregorian calendars for dates in spring of `year`.

    The gap grows by one day in every century year not divisible by 400.
    """
    return year // 100 - year // 400 - 2


def orthodox_easter(year: int) -> date:
    """Calculate Orthodox Easter Sunday as a Gregorian civil date."""
    month, day = julian_easter(year)
    return date(year, month, day) + timedelta(days=julian_to_gregorian_offset(year))


def easter_offset(year: int, days: int, orthodox: bool = False) -> date:
    """Get the date `days` away from (Gregorian or Orthodox) Easter Sunday."""
    easter = orthodox_easter(year) if orthodox else gregorian_easter(year)
    return easter + timedelta(days=days)


def good_friday(year: int) -> date:
    """Calculate Good Friday (2 days before Easter Sunday)."""
    return easter_offset(year, WESTERN_OFFSETS["good_friday"])


def easter_monday(year: int) -> date:
    """Calculate Easter Monday (1 day after Easter Sunday)."""
    return easter_offset(year, WESTERN_OFFSETS["easter_monday"])
