"""
holidaykit Holiday Record

The immutable unit of output: one civil date plus its descriptive attributes.

Records are value objects. They are compared by field values and never
mutated after creation, so a cached year can hand out the same records
again.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union


def code_set(values: Union[str, Iterable[str]]) -> frozenset[str]:
    """Normalize one code or an iterable of codes to a frozenset."""
    if isinstance(values, str):
        return frozenset({values})
    return frozenset(values)


@dataclass(frozen=True)
class HolidayRecord:
    """
    A holiday on a concrete date.

    Attributes:
        date: Civil date the holiday is shown on (observed date if shifted)
        canonical_name: Label in the catalog's primary language
        localized_names: Language code -> label (read-only)
        category: Category tag from the catalog (e.g. "public", "religious")
        subdivision_scope: Subdivision codes it applies to (empty = nationwide)
        observed: True if `date` is an adjusted (observed) date
        approximate: True if `date` came from a lookup-table fallback
        nominal_date: Date before any observed shift
        entry_id: ID of the catalog entry that produced this record
    """
    date: date
    canonical_name: str
    localized_names: Mapping[str, str] = field(default_factory=dict, hash=False)
    category: str = "public"
    subdivision_scope: frozenset[str] = field(default_factory=frozenset)
    observed: bool = False
    approximate: bool = False
    nominal_date: Optional[date] = None
    entry_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.nominal_date is None:
            object.__setattr__(self, "nominal_date", self.date)
        if not isinstance(self.subdivision_scope, frozenset):
            object.__setattr__(self, "subdivision_scope", code_set(self.subdivision_scope))
        object.__setattr__(self, "localized_names", MappingProxyType(dict(self.localized_names)))

    @property
    def is_nationwide(self) -> bool:
        """Check if the holiday applies to the whole country."""
        return not self.subdivision_scope

    def name(self, language: Optional[str] = None) -> str:
        """Get the label in a language, falling back to the canonical name."""
        if language is None:
            return self.canonical_name
        return self.localized_names.get(language, self.canonical_name)

    def applies_to(self, subdivisions: Union[str, Iterable[str]]) -> bool:
        """
        Check if the holiday applies to any of the given subdivisions.

        Nationwide holidays apply everywhere.
        """
        if self.is_nationwide:
            return True
        return not self.subdivision_scope.isdisjoint(code_set(subdivisions))

    def to_dict(self, language: Optional[str] = None) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "date": self.date.isoformat(),
            "name": self.name(language),
            "canonical_name": self.canonical_name,
            "localized_names": dict(sorted(self.localized_names.items())),
            "category": self.category,
            "subdivisions": sorted(self.subdivision_scope),
            "observed": self.observed,
            "nominal_date": self.nominal_date.isoformat() if self.nominal_date else None,
            "approximate": self.approximate,
            "entry_id": self.entry_id,
        }
