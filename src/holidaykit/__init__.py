"""
holidaykit - Holiday Calendars as Data

Computes, for a country and a calendar year, the holidays that fall on
specific dates, each with a category, a subdivision scope and names in
several languages.

Key Features:
- Shared date algorithms (Gregorian and Orthodox Easter, Nth weekday,
  observed-date policies, lookup tables with approximate fallbacks)
- Declarative YAML/JSON country catalogs validated at load time
- One generic provider with a documented last-entry-wins merge
- Business-day arithmetic, a CLI and a read-only HTTP API

Quick Start:
    from datetime import date
    from holidaykit import Registry

    registry = Registry()
    for day, holiday in registry.holidays("US", 2024).items():
        print(day, holiday.name())

    registry.is_holiday("CA", date(2024, 7, 1))              # True
    registry.holidays("DE", 2024, subdivisions=["BY"])

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .calendars import BusinessCalendar
from .catalogs import CatalogLoader, load_catalog, load_catalog_from_string
from .config import Settings, load_settings
from .exceptions import (
    CatalogLoadError,
    CatalogValidationError,
    CatalogVersionMismatch,
    ConfigError,
    CountryNotSupportedError,
    HolidayKitError,
    InvalidYearError,
)
from .models import (
    CatalogEntry,
    CountryCatalog,
    HolidayCategory,
    HolidayRecord,
    ObservedPolicy,
    ValidityRange,
)
from .provider import HolidayProvider
from .registry import Registry, get_registry

__all__ = [
    "__version__",
    # Core
    "HolidayProvider",
    "Registry",
    "get_registry",
    "BusinessCalendar",
    # Models
    "HolidayRecord",
    "CatalogEntry",
    "CountryCatalog",
    "ValidityRange",
    "HolidayCategory",
    "ObservedPolicy",
    # Catalogs
    "CatalogLoader",
    "load_catalog",
    "load_catalog_from_string",
    # Config
    "Settings",
    "load_settings",
    # Exceptions
    "HolidayKitError",
    "CatalogLoadError",
    "CatalogValidationError",
    "CatalogVersionMismatch",
    "CountryNotSupportedError",
    "InvalidYearError",
    "ConfigError",
]
