"""
holidaykit Catalog Schemas

Pydantic models for validating country catalog YAML/JSON files.

These schemas define the structure of catalogs that can be loaded at
runtime. They map to the domain models in holidaykit.models.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

from calendar import monthrange
from datetime import date
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from ..calendars.lookup import parse_month_day
from ..models.enums import Weekday


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

ObservedPolicyValue = Literal[
    "none", "move_to_monday", "weekend_to_monday", "nearest_weekday"
]

DirectionValue = Literal["before", "after"]


def _validate_weekday(value: Any) -> int:
    return int(Weekday.parse(value))


def _validate_month_day(month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    if not 1 <= day <= monthrange(2001, month)[1]:
        raise ValueError(f"Invalid day {day} for month {month}")


# =============================================================================
# Rule Schemas
# =============================================================================

class FixedRuleSchema(BaseModel):
    """Same civil date every year."""
    type: Literal["fixed"]
    month: int = Field(..., description="Month (1-12)")
    day: int = Field(..., description="Day of month")

    @model_validator(mode="after")
    def validate_date(self) -> "FixedRuleSchema":
        _validate_month_day(self.month, self.day)
        return self


class EasterRuleSchema(BaseModel):
    """Days relative to Western Easter Sunday."""
    type: Literal["easter"]
    offset: int = Field(0, ge=-70, le=200, description="Days from Easter Sunday")


class OrthodoxEasterRuleSchema(BaseModel):
    """Days relative to Orthodox Easter Sunday."""
    type: Literal["orthodox_easter"]
    offset: int = Field(0, ge=-70, le=200, description="Days from Orthodox Easter Sunday")


class NthWeekdayRuleSchema(BaseModel):
    """Nth (1-4) or last (-1) weekday of a month."""
    type: Literal["nth_weekday"]
    month: int = Field(..., ge=1, le=12)
    weekday: int = Field(..., description="monday..sunday or 0-6")
    n: int = Field(..., description="Occurrence: 1-4, or -1 for last")

    @field_validator("weekday", mode="before")
    @classmethod
    def parse_weekday(cls, value: Any) -> int:
        return _validate_weekday(value)

    @field_validator("n")
    @classmethod
    def validate_n(cls, value: int) -> int:
        if value != -1 and not 1 <= value <= 4:
            raise ValueError(f"Occurrence must be 1-4 or -1, got {value}")
        return value


class RelativeWeekdayRuleSchema(BaseModel):
    """Weekday on or before/after an anchor date."""
    type: Literal["relative_weekday"]
    month: int
    day: int
    weekday: int
    direction: DirectionValue = "before"

    @field_validator("weekday", mode="before")
    @classmethod
    def parse_weekday(cls, value: Any) -> int:
        return _validate_weekday(value)

    @model_validator(mode="after")
    def validate_anchor(self) -> "RelativeWeekdayRuleSchema":
        _validate_month_day(self.month, self.day)
        return self


ComputedRuleSchema = Annotated[
    Union[
        FixedRuleSchema,
        EasterRuleSchema,
        OrthodoxEasterRuleSchema,
        NthWeekdayRuleSchema,
        RelativeWeekdayRuleSchema,
    ],
    Field(discriminator="type"),
]


class LookupRuleSchema(BaseModel):
    """
    Per-year table of dates with an optional computed fallback.

    Table values are "MM-DD" strings keyed by year.
    """
    type: Literal["lookup"]
    table: dict[int, str] = Field(default_factory=dict)
    fallback: Optional[ComputedRuleSchema] = None

    @field_validator("table")
    @classmethod
    def validate_table(cls, value: dict[int, str]) -> dict[int, str]:
        for year, month_day in value.items():
            month, day = parse_month_day(month_day)
            # Real date check for that specific year (leap days)
            date(year, month, day)
        return value

    @model_validator(mode="after")
    def validate_source(self) -> "LookupRuleSchema":
        if not self.table and self.fallback is None:
            raise ValueError("Lookup rule needs a 'table' or a 'fallback'")
        return self


RuleSchema = Annotated[
    Union[
        FixedRuleSchema,
        EasterRuleSchema,
        OrthodoxEasterRuleSchema,
        NthWeekdayRuleSchema,
        RelativeWeekdayRuleSchema,
        LookupRuleSchema,
    ],
    Field(discriminator="type"),
]


# =============================================================================
# Entry Schemas
# =============================================================================

class ValiditySchema(BaseModel):
    """Inclusive year range."""
    min_year: Optional[int] = Field(None, ge=1)
    max_year: Optional[int] = Field(None, ge=1)

    @model_validator(mode="after")
    def validate_order(self) -> "ValiditySchema":
        if (
            self.min_year is not None
            and self.max_year is not None
            and self.min_year > self.max_year
        ):
            raise ValueError(f"min_year {self.min_year} is after max_year {self.max_year}")
        return self


class EntrySchema(BaseModel):
    """Schema for one catalog entry."""
    id: str = Field(..., min_length=1, description="Unique identifier within the catalog")
    name: str = Field(..., min_length=1, description="Canonical name (primary language)")
    localized_names: dict[str, str] = Field(default_factory=dict)
    category: str = Field("public", description="Category tag")
    subdivisions: list[str] = Field(default_factory=list, description="Empty = nationwide")
    validity: Optional[ValiditySchema] = None
    observed: ObservedPolicyValue = "none"
    duration_days: int = Field(1, ge=1, le=31)
    rule: RuleSchema


# =============================================================================
# Catalog Schema
# =============================================================================

class CatalogSchema(BaseModel):
    """
    Root schema for a country catalog file.

    Entries are kept in file order; order decides which entry wins when two
    resolve to the same date.
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Catalog schema version")
    country_code: str = Field(..., min_length=2, max_length=3)
    name: str
    version: str = "1.0"
    default_language: str = "en"
    languages: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=lambda: ["public"])
    subdivisions: list[str] = Field(default_factory=list)
    weekend_days: list[int] = Field(default_factory=lambda: [5, 6])
    entries: list[EntrySchema] = Field(default_factory=list)

    @field_validator("country_code")
    @classmethod
    def normalize_country_code(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("weekend_days", mode="before")
    @classmethod
    def parse_weekend_days(cls, value: Any) -> list[int]:
        days = [_validate_weekday(v) for v in (value or [])]
        if len(set(days)) >= 7:
            raise ValueError("weekend_days must leave at least one working day")
        return days


def validate_catalog(data: dict[str, Any]) -> CatalogSchema:
    """
    Validate raw catalog data against the schema.

    Raises:
        pydantic.ValidationError: If the data doesn't match the schema
    """
    return CatalogSchema.model_validate(data)


def validate_entry(data: dict[str, Any]) -> EntrySchema:
    """Validate a single catalog entry (used for configured custom holidays)."""
    return EntrySchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if catalog data has a compatible schema version.

    Major versions must match; a missing version is treated as current.
    """
    version = str(data.get("schema_version", SCHEMA_VERSION))
    return version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
