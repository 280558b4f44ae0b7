"""
holidaykit Registry

Country-code lookup over loaded catalogs, plus country-agnostic query
helpers. The default registry reads the bundled catalogs (or
HK_CATALOG_DIR) once per process.
"""
from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Union

from .calendars.business import BusinessCalendar
from .catalogs.loader import CatalogLoader
from .config import Settings, load_settings
from .exceptions import CountryNotSupportedError
from .models import CountryCatalog, HolidayRecord, code_set
from .provider import HolidayProvider

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "catalogs" / "data"


class Registry:
    """
    Providers keyed by country code.

    Usage:
        registry = Registry()
        registry.holidays("US", 2024)
        registry.is_holiday("CA", date(2024, 7, 1), subdivisions=["ON"])
    """

    def __init__(
        self,
        catalog_dir: Optional[Union[str, Path]] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Load every catalog in a directory.

        Args:
            catalog_dir: Directory of catalog files (default: settings.catalog_dir,
                then the bundled catalogs)
            settings: Runtime settings (default: Settings())

        Raises:
            CatalogLoadError, CatalogValidationError: If a catalog is broken
        """
        self.settings = settings or Settings()
        self.catalog_dir = Path(catalog_dir or self.settings.catalog_dir or DATA_DIR)
        self._providers: dict[str, HolidayProvider] = {}

        loader = CatalogLoader()
        for catalog in loader.load_directory(self.catalog_dir):
            if not self.settings.is_enabled(catalog.country_code):
                logger.info(
                    "Skipping disabled country %s", catalog.country_code,
                    extra={"country_code": catalog.country_code},
                )
                continue
            self.register(catalog)

        logger.info(
            "Loaded %d country catalogs from %s", len(self._providers), self.catalog_dir,
            extra={"path": str(self.catalog_dir)},
        )

    def register(self, catalog: CountryCatalog) -> HolidayProvider:
        """Add (or replace) a country's catalog."""
        provider = HolidayProvider.from_settings(catalog, self.settings)
        self._providers[catalog.country_code] = provider
        return provider

    def supported_countries(self) -> list[str]:
        """Country codes with a loaded catalog, sorted."""
        return sorted(self._providers)

    def __contains__(self, country_code: object) -> bool:
        return isinstance(country_code, str) and country_code.upper() in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def get(self, country_code: str) -> HolidayProvider:
        """
        Get a country's provider.

        Raises:
            CountryNotSupportedError: If no catalog is loaded for the code
        """
        provider = self._providers.get(country_code.strip().upper())
        if provider is None:
            raise CountryNotSupportedError(
                message=f"Country not supported: {country_code}",
                details={"supported": self.supported_countries()},
                country_code=country_code,
            )
        return provider

    def holidays(
        self,
        country_code: str,
        year: int,
        subdivisions: Optional[Union[str, Iterable[str]]] = None,
        categories: Optional[Union[str, Iterable[str]]] = None,
    ) -> dict[date, HolidayRecord]:
        """
        Holidays of a country for a year, optionally filtered.

        Args:
            country_code: Country code (case-insensitive)
            year: Calendar year
            subdivisions: Keep nationwide holidays plus those of these
                subdivisions (empty keeps nationwide only)
            categories: Keep only these categories
        """
        return self.get(country_code).filter_holidays(year, subdivisions, categories)

    def is_holiday(
        self,
        country_code: str,
        d: date,
        subdivisions: Optional[Union[str, Iterable[str]]] = None,
    ) -> bool:
        """Check if a date is a holiday in a country."""
        return self.get(country_code).is_holiday(d, subdivisions)

    def business_calendar(
        self,
        country_code: str,
        subdivisions: Union[str, Iterable[str]] = (),
    ) -> BusinessCalendar:
        """Business-day calendar for a country."""
        return BusinessCalendar(self.get(country_code), code_set(subdivisions))


@lru_cache(maxsize=1)
def get_registry() -> Registry:
    """Process-wide registry built from load_settings()."""
    return Registry(settings=load_settings())
