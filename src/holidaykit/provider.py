"""
holidaykit Holiday Provider

One generic provider evaluates any country catalog for a year. Countries
differ only in their data; there is no per-country subclass.

Merge contract:
- Entries are evaluated in catalog order (configured custom entries last)
- Each result is keyed by its shown date
- A later entry on the same date replaces the earlier record silently
"""
from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Union

from .calendars.observed import shift_observed
from .calendars.rules import span
from .config import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR
from .exceptions import InvalidYearError
from .models import CatalogEntry, CountryCatalog, HolidayRecord, code_set

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)


class HolidayProvider:
    """
    Computes a country's holidays from its catalog.

    Usage:
        provider = HolidayProvider(catalog)
        holidays = provider.load_holidays(2024)
        provider.is_holiday(date(2024, 7, 4))
    """

    def __init__(
        self,
        catalog: CountryCatalog,
        min_year: int = DEFAULT_MIN_YEAR,
        max_year: int = DEFAULT_MAX_YEAR,
        excluded_ids: Iterable[str] = (),
        extra_entries: Sequence[CatalogEntry] = (),
        cache: bool = False,
    ):
        """
        Initialize the provider.

        Args:
            catalog: Country catalog to evaluate
            min_year: Lowest accepted year
            max_year: Highest accepted year
            excluded_ids: Entry IDs to skip
            extra_entries: Entries evaluated after the catalog's own
            cache: Memoize computed years
        """
        if min_year < 1 or min_year > max_year:
            raise ValueError(f"Invalid year range: {min_year}-{max_year}")
        self.catalog = catalog
        self.min_year = min_year
        self.max_year = max_year
        self.excluded_ids = frozenset(excluded_ids)
        self.entries: list[CatalogEntry] = list(catalog.entries) + list(extra_entries)
        self._cache: Optional[dict[int, dict[date, HolidayRecord]]] = {} if cache else None

    @classmethod
    def from_settings(cls, catalog: CountryCatalog, settings: Settings) -> HolidayProvider:
        """Build a provider with the year range, exclusions and customs from settings."""
        from .catalogs.loader import build_entry

        code = catalog.country_code
        extra = []
        for data in settings.custom_for(code):
            entry = build_entry(data)
            entry_subdivisions = entry.subdivisions - set(catalog.subdivisions)
            if entry_subdivisions:
                logger.warning(
                    "Custom holiday %s uses subdivisions unknown to %s: %s",
                    entry.id, code, ", ".join(sorted(entry_subdivisions)),
                    extra={"country_code": code, "entry_id": entry.id},
                )
            extra.append(entry)

        excluded = settings.excluded_for(code)
        unknown = excluded - set(catalog.entry_ids) - {e.id for e in extra}
        if unknown:
            logger.warning(
                "Excluded holidays not in %s catalog: %s",
                code, ", ".join(sorted(unknown)),
                extra={"country_code": code},
            )

        return cls(
            catalog,
            min_year=settings.min_year,
            max_year=settings.max_year,
            excluded_ids=excluded,
            extra_entries=extra,
            cache=settings.cache_years,
        )

    # =========================================================================
    # Metadata
    # =========================================================================

    @property
    def country_code(self) -> str:
        return self.catalog.country_code

    @property
    def name(self) -> str:
        return self.catalog.name

    @property
    def supported_subdivisions(self) -> list[str]:
        return list(self.catalog.subdivisions)

    @property
    def supported_categories(self) -> list[str]:
        return list(self.catalog.categories)

    @property
    def languages(self) -> list[str]:
        return list(self.catalog.languages)

    @property
    def default_language(self) -> str:
        return self.catalog.default_language

    @property
    def weekend_days(self) -> frozenset[int]:
        return self.catalog.weekend_days

    def __repr__(self) -> str:
        return f"HolidayProvider({self.country_code!r}, entries={len(self.entries)})"

    # =========================================================================
    # Computation
    # =========================================================================

    def check_year(self, year: int) -> None:
        """
        Reject years outside the supported range.

        Raises:
            InvalidYearError: If the year is out of range
        """
        if isinstance(year, bool) or not isinstance(year, int):
            raise InvalidYearError(
                message=f"Year must be an integer, got {year!r}",
                country_code=self.country_code,
            )
        if not self.min_year <= year <= self.max_year:
            raise InvalidYearError(
                message=f"Year {year} outside supported range {self.min_year}-{self.max_year}",
                details={"year": year, "min_year": self.min_year, "max_year": self.max_year},
                country_code=self.country_code,
            )

    def load_holidays(self, year: int) -> dict[date, HolidayRecord]:
        """
        Compute all holidays for a year.

        Args:
            year: Calendar year

        Returns:
            Records keyed by shown date, in date order

        Raises:
            InvalidYearError: If the year is out of range
        """
        self.check_year(year)
        if self._cache is not None and year in self._cache:
            return dict(self._cache[year])

        holidays: dict[date, HolidayRecord] = {}
        for entry in self.entries:
            if entry.id in self.excluded_ids or not entry.applies_in(year):
                continue

            resolved = entry.rule.resolve(year)
            if resolved is None:
                logger.debug(
                    "No date for %s in %d", entry.id, year,
                    extra={"country_code": self.country_code, "year": year, "entry_id": entry.id},
                )
                continue

            for nominal in span(resolved.date, entry.duration_days):
                shown = shift_observed(nominal, entry.observed)
                holidays[shown] = HolidayRecord(
                    date=shown,
                    canonical_name=entry.name,
                    localized_names=dict(entry.localized_names),
                    category=entry.category,
                    subdivision_scope=entry.subdivisions,
                    observed=shown != nominal,
                    approximate=resolved.approximate,
                    nominal_date=nominal,
                    entry_id=entry.id,
                )

        result = dict(sorted(holidays.items()))
        logger.debug(
            "Computed %d holidays for %s %d", len(result), self.country_code, year,
            extra={"country_code": self.country_code, "year": year, "holiday_count": len(result)},
        )
        if self._cache is not None:
            self._cache[year] = result
            return dict(result)
        return result

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()

    # =========================================================================
    # Queries
    # =========================================================================

    def filter_holidays(
        self,
        year: int,
        subdivisions: Optional[Union[str, Iterable[str]]] = None,
        categories: Optional[Union[str, Iterable[str]]] = None,
    ) -> dict[date, HolidayRecord]:
        """
        Holidays of a year narrowed by subdivision and/or category.

        Args:
            year: Calendar year
            subdivisions: Keep nationwide holidays plus those of these
                subdivisions; an empty collection keeps nationwide only.
                None applies no subdivision filter.
            categories: Keep only these categories. None applies no
                category filter.
        """
        holidays = self.load_holidays(year)
        if subdivisions is not None:
            wanted = code_set(subdivisions)
            holidays = {d: r for d, r in holidays.items() if r.applies_to(wanted)}
        if categories is not None:
            wanted = code_set(categories)
            holidays = {d: r for d, r in holidays.items() if r.category in wanted}
        return holidays

    def filter_by_subdivision(
        self, year: int, subdivisions: Union[str, Iterable[str]]
    ) -> dict[date, HolidayRecord]:
        """Holidays that are nationwide or apply to any of the subdivisions."""
        return self.filter_holidays(year, subdivisions=subdivisions)

    def filter_by_category(
        self, year: int, categories: Union[str, Iterable[str]]
    ) -> dict[date, HolidayRecord]:
        """Holidays whose category is one of the requested values."""
        return self.filter_holidays(year, categories=categories)

    def holidays_in_range(self, start: date, end: date) -> dict[date, HolidayRecord]:
        """
        Holidays shown between two dates (inclusive).

        Neighbouring years are evaluated too, since observed shifts and
        multi-day spans can carry a holiday across Jan 1.

        Raises:
            InvalidYearError: If either bound's year is out of range
        """
        if start > end:
            return {}
        self.check_year(start.year)
        self.check_year(end.year)

        result: dict[date, HolidayRecord] = {}
        first = max(self.min_year, start.year - 1)
        last = min(self.max_year, end.year + 1)
        for year in range(first, last + 1):
            for d, record in self.load_holidays(year).items():
                if start <= d <= end:
                    result[d] = record
        return dict(sorted(result.items()))

    def get_holiday(self, d: date) -> Optional[HolidayRecord]:
        """Get the holiday shown on a date, if any."""
        return self.holidays_in_range(d, d).get(d)

    def is_holiday(
        self, d: date, subdivisions: Optional[Union[str, Iterable[str]]] = None
    ) -> bool:
        """
        Check if a date is a holiday.

        Args:
            d: Date to check
            subdivisions: If given, only holidays applying to one of them count
        """
        record = self.get_holiday(d)
        if record is None:
            return False
        if subdivisions is None:
            return True
        return record.applies_to(subdivisions)

    def holiday_count(self, year: int) -> int:
        """Number of holiday dates in a year."""
        return len(self.load_holidays(year))
