"""
holidaykit Catalog Loader

Loads and validates country catalogs from YAML or JSON files.

Converts Pydantic schema models to holidaykit domain models.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars.lookup import parse_month_day
from ..calendars.rules import (
    ComputedRule,
    EasterRule,
    FixedDateRule,
    LookupTableRule,
    NthWeekdayRule,
    RelativeWeekdayRule,
    Rule,
)
from ..exceptions import CatalogLoadError, CatalogValidationError, CatalogVersionMismatch
from ..models import ALWAYS, CatalogEntry, CountryCatalog, Direction, ObservedPolicy, ValidityRange
from .schema import (
    SCHEMA_VERSION,
    CatalogSchema,
    EasterRuleSchema,
    EntrySchema,
    FixedRuleSchema,
    LookupRuleSchema,
    NthWeekdayRuleSchema,
    OrthodoxEasterRuleSchema,
    RelativeWeekdayRuleSchema,
    check_schema_version,
    validate_catalog,
    validate_entry,
)

logger = logging.getLogger(__name__)

CATALOG_SUFFIXES = {".yaml", ".yml", ".json"}


# =============================================================================
# Reference Integrity Validation
# =============================================================================

def validate_reference_integrity(catalog: CountryCatalog, path: str = "") -> None:
    """
    Validate internal references are consistent.

    Catches:
    - Duplicate entry IDs
    - Entries scoped to subdivisions the catalog doesn't declare

    Args:
        catalog: The catalog to validate
        path: File path for error messages

    Raises:
        ValueError: If reference integrity errors are found
    """
    errors = []

    seen_ids: set[str] = set()
    for entry in catalog.entries:
        if entry.id in seen_ids:
            errors.append(f"Duplicate entry ID: '{entry.id}'")
        seen_ids.add(entry.id)

    known_subdivisions = set(catalog.subdivisions)
    for entry in catalog.entries:
        unknown = sorted(entry.subdivisions - known_subdivisions)
        if unknown:
            errors.append(
                f"Entry '{entry.id}' references unknown subdivisions: {', '.join(unknown)}"
            )

    if errors:
        path_str = f" in {path}" if path else ""
        raise ValueError(
            f"Reference integrity errors{path_str}:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_computed_rule(schema: Any) -> ComputedRule:
    """Convert a computed rule schema to its rule model."""
    if isinstance(schema, FixedRuleSchema):
        return FixedDateRule(month=schema.month, day=schema.day)
    if isinstance(schema, EasterRuleSchema):
        return EasterRule(offset=schema.offset)
    if isinstance(schema, OrthodoxEasterRuleSchema):
        return EasterRule(offset=schema.offset, orthodox=True)
    if isinstance(schema, NthWeekdayRuleSchema):
        return NthWeekdayRule(month=schema.month, weekday=schema.weekday, n=schema.n)
    if isinstance(schema, RelativeWeekdayRuleSchema):
        return RelativeWeekdayRule(
            month=schema.month,
            day=schema.day,
            weekday=schema.weekday,
            direction=Direction(schema.direction),
        )
    raise TypeError(f"Unsupported rule schema: {type(schema).__name__}")


def _convert_rule(schema: Any) -> Rule:
    """Convert any rule schema (including lookup tables) to its rule model."""
    if isinstance(schema, LookupRuleSchema):
        return LookupTableRule(
            table={year: parse_month_day(value) for year, value in schema.table.items()},
            fallback=_convert_computed_rule(schema.fallback) if schema.fallback else None,
        )
    return _convert_computed_rule(schema)


def _convert_entry(schema: EntrySchema) -> CatalogEntry:
    """Convert EntrySchema to CatalogEntry model."""
    validity = ALWAYS
    if schema.validity is not None:
        validity = ValidityRange(
            min_year=schema.validity.min_year,
            max_year=schema.validity.max_year,
        )
    return CatalogEntry(
        id=schema.id,
        name=schema.name,
        rule=_convert_rule(schema.rule),
        localized_names=dict(schema.localized_names),
        category=schema.category,
        subdivisions=frozenset(schema.subdivisions),
        validity=validity,
        observed=ObservedPolicy(schema.observed),
        duration_days=schema.duration_days,
    )


def _convert_catalog(schema: CatalogSchema) -> CountryCatalog:
    """Convert CatalogSchema to CountryCatalog model."""
    return CountryCatalog(
        country_code=schema.country_code,
        name=schema.name,
        default_language=schema.default_language,
        languages=list(schema.languages),
        categories=list(schema.categories),
        subdivisions=list(schema.subdivisions),
        entries=[_convert_entry(e) for e in schema.entries],
        weekend_days=frozenset(schema.weekend_days),
        version=schema.version,
    )


def build_entry(data: dict[str, Any]) -> CatalogEntry:
    """
    Validate and convert a single entry definition.

    Used for custom holidays declared in settings.

    Raises:
        CatalogValidationError: If the entry is malformed
    """
    try:
        return _convert_entry(validate_entry(data))
    except ValidationError as e:
        raise CatalogValidationError(
            message=f"Entry validation failed: {e.error_count()} errors",
            details={"errors": e.errors(include_url=False, include_context=False), "entry": data.get("id")},
        )


# =============================================================================
# Catalog Loader
# =============================================================================

class CatalogLoader:
    """
    Loads country catalogs from YAML or JSON files.

    Usage:
        loader = CatalogLoader()
        catalog = loader.load("path/to/us.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject catalogs with incompatible schema versions
        """
        self.strict_version = strict_version
        self._catalogs: dict[str, CountryCatalog] = {}

    def load(self, path: Union[str, Path]) -> CountryCatalog:
        """
        Load a catalog from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Loaded CountryCatalog model

        Raises:
            CatalogLoadError: If file cannot be read
            CatalogValidationError: If validation fails
            CatalogVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                message=f"Failed to load catalog: {e}",
                details={"path": str(path), "error": str(e)},
            )

        catalog = self.load_data(data, source=str(path))
        logger.debug(
            "Loaded catalog %s (%d entries) from %s",
            catalog.country_code, len(catalog.entries), path,
        )
        return catalog

    def load_data(self, data: Any, source: str = "") -> CountryCatalog:
        """
        Validate and convert already-parsed catalog data.

        Args:
            data: Parsed YAML/JSON mapping
            source: Description of the origin for error messages

        Returns:
            Loaded CountryCatalog model
        """
        if not isinstance(data, dict):
            raise CatalogValidationError(
                message="Catalog root must be a mapping",
                details={"path": source},
            )

        if self.strict_version and not check_schema_version(data):
            catalog_version = data.get("schema_version", "unknown")
            raise CatalogVersionMismatch(
                message=f"Schema version mismatch: catalog has {catalog_version}, expected {SCHEMA_VERSION}",
                details={
                    "catalog_version": catalog_version,
                    "expected_version": SCHEMA_VERSION,
                    "path": source,
                },
            )

        try:
            schema = validate_catalog(data)
        except ValidationError as e:
            raise CatalogValidationError(
                message=f"Catalog validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False, include_context=False), "path": source},
            )

        catalog = _convert_catalog(schema)

        try:
            validate_reference_integrity(catalog, source)
        except ValueError as e:
            raise CatalogValidationError(
                message="Reference integrity validation failed",
                details={"errors": str(e), "path": source},
                country_code=catalog.country_code,
            )

        self._catalogs[catalog.country_code] = catalog
        return catalog

    def load_directory(self, directory: Union[str, Path]) -> list[CountryCatalog]:
        """Load every catalog file in a directory, sorted by file name."""
        directory = Path(directory)
        if not directory.is_dir():
            raise CatalogLoadError(
                message=f"Catalog directory not found: {directory}",
                details={"path": str(directory)},
            )
        return [
            self.load(path)
            for path in sorted(directory.iterdir())
            if path.suffix.lower() in CATALOG_SUFFIXES
        ]

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                return json.load(f)
            else:
                # Try YAML first, then JSON
                content = f.read()
                try:
                    return yaml.safe_load(content)
                except yaml.YAMLError:
                    return json.loads(content)

    def get_catalog(self, country_code: str) -> Optional[CountryCatalog]:
        """Get a loaded catalog by country code."""
        return self._catalogs.get(country_code.upper())

    def list_catalogs(self) -> list[str]:
        """List country codes of all loaded catalogs."""
        return list(self._catalogs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_catalog(path: Union[str, Path]) -> CountryCatalog:
    """
    Load a catalog from a file.

    Convenience function that creates a temporary loader.
    """
    loader = CatalogLoader()
    return loader.load(path)


def load_catalog_from_string(
    content: str,
    format: str = "yaml",
) -> CountryCatalog:
    """
    Load a catalog from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"

    Returns:
        Loaded CountryCatalog model
    """
    if format.lower() == "json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)
    return CatalogLoader().load_data(data, source="<string>")
