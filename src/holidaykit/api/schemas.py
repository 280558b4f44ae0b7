"""Response schemas for the API."""

from typing import Optional

from pydantic import BaseModel

from ..models import HolidayRecord


class HolidayResponse(BaseModel):
    """One holiday on a concrete date."""
    date: str
    name: str
    canonical_name: str
    localized_names: dict[str, str]
    category: str
    subdivisions: list[str]
    observed: bool
    nominal_date: Optional[str] = None
    approximate: bool
    entry_id: Optional[str] = None

    @classmethod
    def from_record(cls, record: HolidayRecord, language: Optional[str] = None) -> "HolidayResponse":
        return cls(**record.to_dict(language))


class CountrySummary(BaseModel):
    """Country listing entry."""
    country_code: str
    name: str
    default_language: str
    languages: list[str]
    categories: list[str]
    subdivision_count: int
    entry_count: int


class CountryDetail(CountrySummary):
    """Full country metadata."""
    subdivisions: list[str]
    weekend_days: list[int]
    version: str
    catalog_hash: str


class HolidayListResponse(BaseModel):
    """Holidays of a country for a year."""
    country_code: str
    year: int
    count: int
    holidays: list[HolidayResponse]


class DateCheckResponse(BaseModel):
    """Holiday and business-day status of a single date."""
    country_code: str
    date: str
    is_holiday: bool
    is_business_day: bool
    holiday: Optional[HolidayResponse] = None


class HealthResponse(BaseModel):
    """Service health."""
    healthy: bool
    countries_loaded: int
    version: str
