"""
holidaykit Country Catalogs

Schema validation and loading for country catalogs.

Catalogs are YAML or JSON files that declare a country's holidays as data:
one entry per observance, each with a date rule, category, subdivision
scope, names and optional observed policy. Bundled catalogs live in the
data/ directory next to this module.

Usage:
    from holidaykit.catalogs import load_catalog, CatalogLoader

    # Load a single catalog
    catalog = load_catalog("path/to/us.yaml")

    # Use a loader for a whole directory
    loader = CatalogLoader()
    catalogs = loader.load_directory("path/to/catalogs")
"""
from __future__ import annotations

from .loader import (
    CatalogLoader,
    build_entry,
    load_catalog,
    load_catalog_from_string,
    validate_reference_integrity,
)
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
    ValiditySchema,
    check_schema_version,
    validate_catalog,
    validate_entry,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "CatalogLoader",
    "load_catalog",
    "load_catalog_from_string",
    "build_entry",
    "validate_reference_integrity",
    # Validation
    "validate_catalog",
    "validate_entry",
    "check_schema_version",
    # Schemas
    "CatalogSchema",
    "EntrySchema",
    "ValiditySchema",
    "FixedRuleSchema",
    "EasterRuleSchema",
    "OrthodoxEasterRuleSchema",
    "NthWeekdayRuleSchema",
    "RelativeWeekdayRuleSchema",
    "LookupRuleSchema",
]
