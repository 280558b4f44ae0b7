"""
Catalog Date Rules

One immutable rule type per date-computation method. Each rule resolves
itself for a year by delegating to the pure engine functions in this
package.

Rules validate their parameters on construction, so a malformed catalog
entry fails when the catalog is loaded rather than when a year is computed.
"""
from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import NamedTuple, Optional, Union

from ..models.enums import Direction, RuleType, Weekday
from .easter import easter_offset
from .lookup import lookup_date
from .weekdays import LAST, nth_weekday_of_month, weekday_on_or_after, weekday_on_or_before


class ResolvedDate(NamedTuple):
    """A rule's result for one year."""
    date: date
    approximate: bool = False


def fixed_date(year: int, month: int, day: int) -> date:
    """Get a fixed civil date in a year."""
    return date(year, month, day)


def _check_month_day(month: int, day: int) -> None:
    """Reject month/day pairs that don't exist every year."""
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    # 2001 is not a leap year, so Feb 29 is rejected
    if not 1 <= day <= monthrange(2001, month)[1]:
        raise ValueError(f"Invalid day {day} for month {month}")


# =============================================================================
# Computed Rules
# =============================================================================

@dataclass(frozen=True)
class FixedDateRule:
    """Same civil date every year."""
    month: int
    day: int

    rule_type = RuleType.FIXED

    def __post_init__(self) -> None:
        _check_month_day(self.month, self.day)

    def resolve(self, year: int) -> Optional[ResolvedDate]:
        return ResolvedDate(fixed_date(year, self.month, self.day))


@dataclass(frozen=True)
class EasterRule:
    """
    Movable feast: a fixed number of days from Easter Sunday.

    Attributes:
        offset: Days relative to Easter Sunday (negative = before)
        orthodox: Use Orthodox (Julian) Easter instead of Western Easter
    """
    offset: int = 0
    orthodox: bool = False

    def __post_init__(self) -> None:
        # Keeps every offset date inside the Easter year
        if not -70 <= self.offset <= 200:
            raise ValueError(f"Easter offset out of range: {self.offset}")

    @property
    def rule_type(self) -> RuleType:
        return RuleType.ORTHODOX_EASTER if self.orthodox else RuleType.EASTER

    def resolve(self, year: int) -> Optional[ResolvedDate]:
        return ResolvedDate(easter_offset(year, self.offset, orthodox=self.orthodox))


@dataclass(frozen=True)
class NthWeekdayRule:
    """Nth (or last, n=-1) occurrence of a weekday in a month."""
    month: int
    weekday: Weekday
    n: int

    rule_type = RuleType.NTH_WEEKDAY

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")
        # A 5th occurrence doesn't exist in every month
        if self.n != LAST and not 1 <= self.n <= 4:
            raise ValueError(f"Invalid occurrence {self.n}: use 1-4 or -1 for last")
        object.__setattr__(self, "weekday", Weekday.parse(self.weekday))

    def resolve(self, year: int) -> Optional[ResolvedDate]:
        return ResolvedDate(nth_weekday_of_month(year, self.month, self.weekday, self.n))


@dataclass(frozen=True)
class RelativeWeekdayRule:
    """
    A weekday on or before/after an anchor date.

    Example: Victoria Day is the Monday on or before May 24.
    """
    month: int
    day: int
    weekday: Weekday
    direction: Direction = Direction.BEFORE

    rule_type = RuleType.RELATIVE_WEEKDAY

    def __post_init__(self) -> None:
        _check_month_day(self.month, self.day)
        object.__setattr__(self, "weekday", Weekday.parse(self.weekday))
        object.__setattr__(self, "direction", Direction(self.direction))

    def resolve(self, year: int) -> Optional[ResolvedDate]:
        anchor = date(year, self.month, self.day)
        if self.direction == Direction.BEFORE:
            return ResolvedDate(weekday_on_or_before(anchor, self.weekday))
        return ResolvedDate(weekday_on_or_after(anchor, self.weekday))


ComputedRule = Union[FixedDateRule, EasterRule, NthWeekdayRule, RelativeWeekdayRule]


# =============================================================================
# Lookup Rule
# =============================================================================

@dataclass(frozen=True)
class LookupTableRule:
    """
    Dates taken from a per-year table, with an optional fallback rule.

    Attributes:
        table: Year -> (month, day)
        fallback: Rule used (and flagged approximate) for untabulated years
    """
    table: dict[int, tuple[int, int]] = field(default_factory=dict, hash=False)
    fallback: Optional[ComputedRule] = None

    rule_type = RuleType.LOOKUP

    def __post_init__(self) -> None:
        if not self.table and self.fallback is None:
            raise ValueError("Lookup rule needs a table or a fallback")
        if isinstance(self.fallback, LookupTableRule):
            raise ValueError("Lookup fallback must be a computed rule")
        for year, (month, day) in self.table.items():
            # Validates the tabulated date against that year's calendar
            date(year, month, day)

    def resolve(self, year: int) -> Optional[ResolvedDate]:
        fallback = None
        if self.fallback is not None:
            fallback = lambda y: self.fallback.resolve(y).date  # noqa: E731
        result = lookup_date(year, self.table, fallback)
        if result is None:
            return None
        return ResolvedDate(*result)


Rule = Union[FixedDateRule, EasterRule, NthWeekdayRule, RelativeWeekdayRule, LookupTableRule]


def span(start: date, duration_days: int) -> list[date]:
    """Get `duration_days` consecutive dates starting at `start`."""
    return [start + timedelta(days=i) for i in range(duration_days)]
