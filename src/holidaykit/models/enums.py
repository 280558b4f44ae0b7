"""
holidaykit Enumerations

Enumeration types shared by the rule engine, catalogs and providers.

String enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any


# =============================================================================
# Holiday Categories
# =============================================================================

class HolidayCategory(str, Enum):
    """
    Well-known category tags.

    Catalogs may declare other tags; the kernel never rejects a category
    that is missing here.
    """
    PUBLIC = "public"
    BANK = "bank"
    SCHOOL = "school"
    GOVERNMENT = "government"
    RELIGIOUS = "religious"
    REGIONAL = "regional"
    MEMORIAL = "memorial"
    OPTIONAL = "optional"
    CULTURAL = "cultural"
    HALF_DAY = "half_day"
    ARMED_FORCES = "armed_forces"
    WORKDAY = "workday"


# =============================================================================
# Observed-Date Policies
# =============================================================================

class ObservedPolicy(str, Enum):
    """How a holiday's nominal date is moved to the date it is observed."""
    NONE = "none"                            # Identity
    MOVE_TO_MONDAY = "move_to_monday"        # Tue..Fri back to Monday, weekend forward
    WEEKEND_TO_MONDAY = "weekend_to_monday"  # Sat/Sun forward to Monday
    NEAREST_WEEKDAY = "nearest_weekday"      # Sat back to Friday, Sun forward to Monday


# =============================================================================
# Rule Types
# =============================================================================

class RuleType(str, Enum):
    """Date-computation methods a catalog entry can use."""
    FIXED = "fixed"
    EASTER = "easter"
    ORTHODOX_EASTER = "orthodox_easter"
    NTH_WEEKDAY = "nth_weekday"
    RELATIVE_WEEKDAY = "relative_weekday"
    LOOKUP = "lookup"


class Direction(str, Enum):
    """Search direction for relative weekday rules."""
    BEFORE = "before"
    AFTER = "after"


# =============================================================================
# Weekdays
# =============================================================================

class Weekday(IntEnum):
    """Day of week, numbered like ``date.weekday()`` (0=Monday)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Any) -> "Weekday":
        """
        Parse a weekday from an int (0-6), a name or a 3-letter abbreviation.

        Raises:
            ValueError: If the value is not a recognizable weekday
        """
        if isinstance(value, Weekday):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid weekday: {value!r}")
        if isinstance(value, int):
            return cls(value)
        text = str(value).strip().upper()
        for member in cls:
            if text == member.name or text == member.name[:3]:
                return member
        raise ValueError(f"Invalid weekday: {value!r}")
