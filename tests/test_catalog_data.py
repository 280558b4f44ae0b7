"""
Bundled Catalog Tests

Tests that verify:
1. Every bundled catalog loads and passes validation
2. Entries reference declared subdivisions and categories
3. Each catalog computes a plausible year
4. Hashes are deterministic
"""
from __future__ import annotations

from pathlib import Path

import pytest

from holidaykit.canon import compute_catalog_hash
from holidaykit.catalogs import load_catalog
from holidaykit.provider import HolidayProvider
from holidaykit.registry import DATA_DIR


def get_all_catalog_paths() -> list[Path]:
    """Get all bundled catalog files."""
    return sorted(p for p in DATA_DIR.iterdir() if p.suffix in {".yaml", ".yml", ".json"})


EXPECTED_COUNTRIES = {"AR", "CA", "CL", "DE", "GB", "IN", "NZ", "PL", "RU", "US"}


class TestCatalogLoading:
    """Every bundled catalog loads."""

    def test_all_countries_bundled(self) -> None:
        codes = {load_catalog(p).country_code for p in get_all_catalog_paths()}
        assert codes == EXPECTED_COUNTRIES

    @pytest.mark.parametrize("path", get_all_catalog_paths(), ids=lambda p: p.stem)
    def test_file_name_matches_country(self, path: Path) -> None:
        """us.yaml holds the US catalog."""
        assert load_catalog(path).country_code == path.stem.upper()

    @pytest.mark.parametrize("path", get_all_catalog_paths(), ids=lambda p: p.stem)
    def test_has_entries_and_languages(self, path: Path) -> None:
        catalog = load_catalog(path)
        assert catalog.entries
        assert catalog.default_language in catalog.languages

    @pytest.mark.parametrize("path", get_all_catalog_paths(), ids=lambda p: p.stem)
    def test_categories_declared(self, path: Path) -> None:
        """Entries only use categories the catalog declares."""
        catalog = load_catalog(path)
        for entry in catalog.entries:
            assert entry.category in catalog.categories, (
                f"Entry {entry.id} uses undeclared category '{entry.category}' in {path.name}"
            )

    @pytest.mark.parametrize("path", get_all_catalog_paths(), ids=lambda p: p.stem)
    def test_localized_names_cover_languages(self, path: Path) -> None:
        """Entry labels only use declared languages."""
        catalog = load_catalog(path)
        for entry in catalog.entries:
            assert set(entry.localized_names) <= set(catalog.languages), entry.id


class TestCatalogComputation:
    """Every bundled catalog computes a range of years."""

    @pytest.mark.parametrize("path", get_all_catalog_paths(), ids=lambda p: p.stem)
    def test_computes_years(self, path: Path) -> None:
        provider = HolidayProvider(load_catalog(path))
        for year in (1950, 2000, 2024, 2025, 2100):
            holidays = provider.load_holidays(year)
            assert holidays
            assert list(holidays) == sorted(holidays)

    @pytest.mark.parametrize("path", get_all_catalog_paths(), ids=lambda p: p.stem)
    def test_records_scoped_to_known_subdivisions(self, path: Path) -> None:
        catalog = load_catalog(path)
        known = set(catalog.subdivisions)
        for record in HolidayProvider(catalog).load_holidays(2024).values():
            assert record.subdivision_scope <= known


class TestCatalogHash:
    """Catalog hashes are deterministic."""

    @pytest.mark.parametrize("path", get_all_catalog_paths(), ids=lambda p: p.stem)
    def test_hash_is_stable(self, path: Path) -> None:
        first = compute_catalog_hash(load_catalog(path))
        second = compute_catalog_hash(load_catalog(path))
        assert first == second
        assert len(first) == 64

    def test_hashes_differ_between_countries(self) -> None:
        hashes = {compute_catalog_hash(load_catalog(p)) for p in get_all_catalog_paths()}
        assert len(hashes) == len(get_all_catalog_paths())
