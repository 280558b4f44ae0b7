"""
Canonical JSON Serialization

Provides deterministic JSON serialization for hashing and comparison:
- Sorted keys (lexicographic)
- No whitespace
- UTF-8 encoding

The same catalog always produces the same hash, so API clients can tell
whether the rules behind a result changed between two calls.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any

from .models import CatalogEntry, CountryCatalog


def _default_serializer(obj: Any) -> Any:
    """
    Custom JSON serializer for non-standard types.

    Handles:
    - date: ISO 8601 format
    - Enum: value
    - dataclass: dict
    - set/frozenset: sorted list
    """
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_serializer,
        ensure_ascii=False,
    )


def content_hash(obj: Any) -> str:
    """
    Compute SHA-256 hash of canonical JSON representation.

    Returns:
        Hex-encoded SHA-256 hash string (64 characters)
    """
    return hashlib.sha256(canonical_json(obj).encode("utf-8")).hexdigest()


def content_hash_short(obj: Any, length: int = 12) -> str:
    """Compute truncated SHA-256 hash for display purposes."""
    return content_hash(obj)[:length]


def _serialize_entry(entry: CatalogEntry) -> dict:
    """Serialize a CatalogEntry for hashing."""
    return {
        "id": entry.id,
        "name": entry.name,
        "localized_names": entry.localized_names,
        "category": entry.category,
        "subdivisions": sorted(entry.subdivisions),
        "validity": [entry.validity.min_year, entry.validity.max_year],
        "observed": entry.observed.value,
        "duration_days": entry.duration_days,
        "rule_type": entry.rule.rule_type.value,
        "rule": asdict(entry.rule),
    }


def compute_catalog_hash(catalog: CountryCatalog) -> str:
    """
    Compute SHA-256 hash of a country catalog in canonical JSON form.

    Entries stay in catalog order: order decides which entry wins a date
    collision, so reordering entries changes the hash.

    Args:
        catalog: A CountryCatalog instance

    Returns:
        Hex-encoded SHA-256 hash string (64 characters)
    """
    catalog_dict = {
        "country_code": catalog.country_code,
        "version": catalog.version,
        "default_language": catalog.default_language,
        "subdivisions": sorted(catalog.subdivisions),
        "weekend_days": sorted(catalog.weekend_days),
        "entries": [_serialize_entry(e) for e in catalog.entries],
    }
    return content_hash(catalog_dict)
