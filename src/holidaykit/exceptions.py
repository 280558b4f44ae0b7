"""
holidaykit Exception Hierarchy

Domain-specific exceptions for holiday computation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: HK_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HolidayKitError(Exception):
    """
    Base exception for all holidaykit errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (HK_*)
        details: Additional context about the error
        country_code: Associated country code if applicable
    """
    message: str
    code: str = "HK_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    country_code: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.country_code:
            parts.append(f"(country: {self.country_code})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.country_code:
            result["country_code"] = self.country_code
        return result


# =============================================================================
# Catalog Errors
# =============================================================================

@dataclass
class CatalogLoadError(HolidayKitError):
    """Failed to read a country catalog file."""
    code: str = "HK_CATALOG_LOAD_ERROR"


@dataclass
class CatalogValidationError(HolidayKitError):
    """Catalog schema or integrity validation failed."""
    code: str = "HK_CATALOG_VALIDATION_ERROR"


@dataclass
class CatalogVersionMismatch(HolidayKitError):
    """Catalog schema version doesn't match the supported version."""
    code: str = "HK_CATALOG_VERSION_MISMATCH"


# =============================================================================
# Query Errors
# =============================================================================

@dataclass
class CountryNotSupportedError(HolidayKitError):
    """No catalog is registered for the requested country code."""
    code: str = "HK_COUNTRY_NOT_SUPPORTED"


@dataclass
class InvalidYearError(HolidayKitError):
    """Requested year is outside the supported range."""
    code: str = "HK_INVALID_YEAR"


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class ConfigError(HolidayKitError):
    """Settings file or environment overrides are invalid."""
    code: str = "HK_CONFIG_ERROR"
