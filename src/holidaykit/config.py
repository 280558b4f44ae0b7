"""
holidaykit Configuration

Settings come from an optional YAML file and environment overrides:

    HK_CONFIG_FILE        Path to a YAML settings file
    HK_LOG_LEVEL          DEBUG | INFO | WARNING | ERROR (default INFO)
    HK_LOG_FORMAT         json | text (default text)
    HK_CATALOG_DIR        Directory of catalog files (default: bundled data)
    HK_DEFAULT_LANGUAGE   Language for holiday names (default: catalog's own)
    HK_MIN_YEAR           Lowest year accepted by providers (default 1583)
    HK_MAX_YEAR           Highest year accepted by providers (default 9998)
    HK_CACHE_YEARS        true | false, memoize computed years (default false)

Settings file example:

    log_level: DEBUG
    countries:
      US:
        excluded_holidays: [columbus_day]
    custom_holidays:
      US:
        - id: company_day
          name: Company Day
          category: optional
          rule: {type: fixed, month: 3, day: 14}
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigError

# First year of the Gregorian computus
DEFAULT_MIN_YEAR = 1583
# Leaves room for observed shifts past Dec 31 without leaving date's range
DEFAULT_MAX_YEAR = 9998

ENV_PREFIX = "HK_"


class CountrySettings(BaseModel):
    """Per-country overrides."""
    enabled: bool = True
    excluded_holidays: list[str] = Field(default_factory=list)


class Settings(BaseModel):
    """Runtime settings for providers, the CLI and the API."""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    catalog_dir: Optional[Path] = None
    default_language: Optional[str] = None
    min_year: int = Field(DEFAULT_MIN_YEAR, ge=1)
    max_year: int = Field(DEFAULT_MAX_YEAR, le=9998)
    cache_years: bool = False
    countries: dict[str, CountrySettings] = Field(default_factory=dict)
    custom_holidays: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("countries", "custom_holidays", mode="before")
    @classmethod
    def normalize_country_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k).upper(): v for k, v in value.items()}
        return value

    @model_validator(mode="after")
    def validate_year_range(self) -> "Settings":
        if self.min_year > self.max_year:
            raise ValueError(f"min_year {self.min_year} is after max_year {self.max_year}")
        return self

    def excluded_for(self, country_code: str) -> frozenset[str]:
        """Entry IDs excluded for a country."""
        country = self.countries.get(country_code.upper())
        return frozenset(country.excluded_holidays) if country else frozenset()

    def is_enabled(self, country_code: str) -> bool:
        """Check if a country is enabled."""
        country = self.countries.get(country_code.upper())
        return country.enabled if country else True

    def custom_for(self, country_code: str) -> list[dict[str, Any]]:
        """Raw custom entry definitions for a country."""
        return list(self.custom_holidays.get(country_code.upper(), []))


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key in ("log_level", "log_format", "catalog_dir", "default_language",
                "min_year", "max_year", "cache_years"):
        value = environ.get(ENV_PREFIX + key.upper())
        if value is not None and value != "":
            overrides[key] = value
    return overrides


def load_settings(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build settings from a YAML file and environment variables.

    Environment variables take precedence over the file.

    Args:
        path: Settings file (defaults to $HK_CONFIG_FILE, if set)
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ConfigError: If the file can't be read or a value is invalid
    """
    environ = os.environ if environ is None else environ
    if path is None and environ.get(ENV_PREFIX + "CONFIG_FILE"):
        path = Path(environ[ENV_PREFIX + "CONFIG_FILE"])

    data: dict[str, Any] = {}
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(
                message=f"Failed to read settings file: {e}",
                details={"path": str(path)},
            )
        if not isinstance(data, dict):
            raise ConfigError(
                message="Settings file root must be a mapping",
                details={"path": str(path)},
            )

    data.update(_env_overrides(environ))

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            message=f"Invalid settings: {e.error_count()} errors",
            details={"errors": e.errors(include_url=False, include_context=False)},
        )
