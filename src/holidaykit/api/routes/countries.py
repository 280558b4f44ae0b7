"""Country and holiday endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ...canon import compute_catalog_hash
from ...exceptions import CountryNotSupportedError, InvalidYearError
from ...provider import HolidayProvider
from ...registry import Registry
from ..schemas import (
    CountryDetail,
    CountrySummary,
    DateCheckResponse,
    HolidayListResponse,
    HolidayResponse,
)

router = APIRouter(prefix="/countries", tags=["Countries"])

# Shared registry instance (set by main.py)
registry: Optional[Registry] = None


def set_registry(r: Registry) -> None:
    global registry
    registry = r


def _get_provider(code: str) -> HolidayProvider:
    if registry is None:
        raise HTTPException(status_code=503, detail="Registry not loaded")
    try:
        return registry.get(code)
    except CountryNotSupportedError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())


def _language(language: Optional[str]) -> Optional[str]:
    """Requested language, else the configured default_language."""
    return language or registry.settings.default_language


def _summary_fields(provider: HolidayProvider) -> dict:
    return {
        "country_code": provider.country_code,
        "name": provider.name,
        "default_language": provider.default_language,
        "languages": provider.languages,
        "categories": provider.supported_categories,
        "subdivision_count": len(provider.supported_subdivisions),
        "entry_count": len(provider.entries),
    }


@router.get("", response_model=list[CountrySummary])
async def list_countries():
    """List all supported countries."""
    if registry is None:
        return []
    return [
        CountrySummary(**_summary_fields(registry.get(code)))
        for code in registry.supported_countries()
    ]


@router.get("/{code}", response_model=CountryDetail)
async def get_country(code: str):
    """Get country metadata including subdivisions and the catalog hash."""
    provider = _get_provider(code)
    return CountryDetail(
        **_summary_fields(provider),
        subdivisions=provider.supported_subdivisions,
        weekend_days=sorted(provider.weekend_days),
        version=provider.catalog.version,
        catalog_hash=compute_catalog_hash(provider.catalog),
    )


@router.get("/{code}/holidays/{year}", response_model=HolidayListResponse)
async def get_holidays(
    code: str,
    year: int,
    subdivision: Optional[list[str]] = Query(None),
    category: Optional[list[str]] = Query(None),
    language: Optional[str] = None,
):
    """
    List a country's holidays for a year.

    Optionally keep only nationwide holidays plus those of the given
    subdivisions, and/or only the given categories.
    """
    provider = _get_provider(code)
    language = _language(language)
    try:
        holidays = registry.holidays(
            provider.country_code, year, subdivisions=subdivision, categories=category
        )
    except InvalidYearError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())

    return HolidayListResponse(
        country_code=provider.country_code,
        year=year,
        count=len(holidays),
        holidays=[HolidayResponse.from_record(r, language) for r in holidays.values()],
    )


@router.get("/{code}/dates/{iso_date}", response_model=DateCheckResponse)
async def check_date(
    code: str,
    iso_date: date,
    subdivision: Optional[list[str]] = Query(None),
    language: Optional[str] = None,
):
    """Check whether a date is a holiday and a business day."""
    provider = _get_provider(code)
    language = _language(language)
    calendar = registry.business_calendar(provider.country_code, subdivision or ())
    try:
        record = provider.get_holiday(iso_date)
        is_business_day = calendar.is_business_day(iso_date)
    except InvalidYearError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())

    if record is not None and subdivision and not record.applies_to(subdivision):
        record = None

    return DateCheckResponse(
        country_code=provider.country_code,
        date=iso_date.isoformat(),
        is_holiday=record is not None,
        is_business_day=is_business_day,
        holiday=HolidayResponse.from_record(record, language) if record else None,
    )
