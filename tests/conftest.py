"""
Pytest configuration and fixtures for holidaykit tests.

Provides helper factories for catalogs and entries, plus fixtures for the
bundled catalogs.
"""
import logging
from pathlib import Path

import pytest

from holidaykit.calendars.rules import FixedDateRule
from holidaykit.log import LOGGER_NAME
from holidaykit.models import CatalogEntry, CountryCatalog, ObservedPolicy, ValidityRange
from holidaykit.provider import HolidayProvider
from holidaykit.registry import DATA_DIR, Registry


# =============================================================================
# Factory Helpers
# =============================================================================

def make_entry(
    entry_id: str,
    rule=None,
    name: str = None,
    category: str = "public",
    subdivisions=(),
    min_year: int = None,
    max_year: int = None,
    observed: ObservedPolicy = ObservedPolicy.NONE,
    duration_days: int = 1,
    localized_names: dict = None,
) -> CatalogEntry:
    """Create a CatalogEntry with sensible defaults."""
    return CatalogEntry(
        id=entry_id,
        name=name or entry_id.replace("_", " ").title(),
        rule=rule or FixedDateRule(month=1, day=1),
        localized_names=localized_names or {},
        category=category,
        subdivisions=frozenset(subdivisions),
        validity=ValidityRange(min_year=min_year, max_year=max_year),
        observed=observed,
        duration_days=duration_days,
    )


def make_catalog(
    entries: list,
    country_code: str = "XX",
    subdivisions: list = None,
    weekend_days=frozenset({5, 6}),
    categories: list = None,
) -> CountryCatalog:
    """Create a CountryCatalog for tests."""
    return CountryCatalog(
        country_code=country_code,
        name="Testland",
        default_language="en",
        languages=["en", "fr"],
        categories=categories or ["public", "religious"],
        subdivisions=subdivisions or ["AA", "BB"],
        entries=entries,
        weekend_days=frozenset(weekend_days),
    )


def make_provider(entries: list, **kwargs) -> HolidayProvider:
    """Create a provider over a test catalog."""
    return HolidayProvider(make_catalog(entries), **kwargs)


MINIMAL_CATALOG_YAML = """
schema_version: "1.0.0"
country_code: "XX"
name: Testland
languages: [en, fr]
categories: [public, religious]
subdivisions: ["AA", "BB"]
entries:
  - id: new_year
    name: New Year
    localized_names: {en: New Year, fr: Nouvel An}
    rule: {type: fixed, month: 1, day: 1}
  - id: easter_monday
    name: Easter Monday
    category: religious
    rule: {type: easter, offset: 1}
  - id: founders_day
    name: Founders Day
    subdivisions: ["AA"]
    observed: weekend_to_monday
    rule: {type: fixed, month: 6, day: 1}
"""


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def data_dir() -> Path:
    """Directory of the bundled catalogs."""
    return DATA_DIR


@pytest.fixture(scope="session")
def registry() -> Registry:
    """Registry over the bundled catalogs with default settings."""
    return Registry()


@pytest.fixture
def minimal_catalog_yaml() -> str:
    return MINIMAL_CATALOG_YAML


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers attached by configure_logging() during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_holidaykit_handler", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
