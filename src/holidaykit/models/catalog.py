"""
holidaykit Catalog Models

Domain models for a country's declarative holiday catalog.

Key components:
- ValidityRange: Years an entry is in force
- CatalogEntry: One named observance (rule + metadata)
- CountryCatalog: Ordered entries plus country-level metadata

Catalog order is significant: when two entries resolve to the same date
in a year, the later entry wins.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..calendars.rules import Rule
from .enums import ObservedPolicy


# =============================================================================
# Validity Range
# =============================================================================

@dataclass(frozen=True)
class ValidityRange:
    """
    Inclusive year range; either bound may be open.

    Attributes:
        min_year: First year the entry applies (None = no lower bound)
        max_year: Last year the entry applies (None = no upper bound)
    """
    min_year: Optional[int] = None
    max_year: Optional[int] = None

    def __post_init__(self) -> None:
        if (
            self.min_year is not None
            and self.max_year is not None
            and self.min_year > self.max_year
        ):
            raise ValueError(
                f"Validity range is reversed: {self.min_year} > {self.max_year}"
            )

    def contains(self, year: int) -> bool:
        """Check if a year falls within the range."""
        if self.min_year is not None and year < self.min_year:
            return False
        if self.max_year is not None and year > self.max_year:
            return False
        return True


ALWAYS = ValidityRange()


# =============================================================================
# Catalog Entry
# =============================================================================

@dataclass(frozen=True)
class CatalogEntry:
    """
    One named observance of a country.

    Attributes:
        id: Identifier, unique within the catalog
        name: Canonical name in the catalog's primary language
        rule: How to compute the date for a year
        localized_names: Language code -> label
        category: Category tag
        subdivisions: Subdivision scope (empty = nationwide)
        validity: Years the entry is in force
        observed: Observed-date policy applied to the computed date
        duration_days: Number of consecutive days the holiday spans
    """
    id: str
    name: str
    rule: Rule
    localized_names: dict[str, str] = field(default_factory=dict, hash=False)
    category: str = "public"
    subdivisions: frozenset[str] = field(default_factory=frozenset)
    validity: ValidityRange = ALWAYS
    observed: ObservedPolicy = ObservedPolicy.NONE
    duration_days: int = 1

    def __post_init__(self) -> None:
        if self.duration_days < 1:
            raise ValueError(f"duration_days must be >= 1, got {self.duration_days}")
        if not isinstance(self.subdivisions, frozenset):
            object.__setattr__(self, "subdivisions", frozenset(self.subdivisions))
        object.__setattr__(self, "observed", ObservedPolicy(self.observed))

    def applies_in(self, year: int) -> bool:
        """Check if the entry is in force for a year."""
        return self.validity.contains(year)


# =============================================================================
# Country Catalog
# =============================================================================

@dataclass
class CountryCatalog:
    """
    A country's holiday catalog.

    Attributes:
        country_code: ISO 3166-1 alpha-2 code (upper case)
        name: Country name
        default_language: Primary language of canonical names
        languages: Languages the catalog provides labels for
        categories: Category tags used by the catalog
        subdivisions: Subdivision codes the catalog knows
        entries: Ordered catalog entries
        weekend_days: Non-working weekdays (0=Monday, 6=Sunday)
        version: Catalog data version
    """
    country_code: str
    name: str
    default_language: str = "en"
    languages: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=lambda: ["public"])
    subdivisions: list[str] = field(default_factory=list)
    entries: list[CatalogEntry] = field(default_factory=list)
    weekend_days: frozenset[int] = field(default_factory=lambda: frozenset({5, 6}))
    version: str = "1.0"

    def get_entry(self, entry_id: str) -> Optional[CatalogEntry]:
        """Get an entry by ID."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    @property
    def entry_ids(self) -> list[str]:
        """IDs of all entries in catalog order."""
        return [entry.id for entry in self.entries]
