"""
Tests for settings loading.
"""
from pathlib import Path

import pytest

from holidaykit.config import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR, Settings, load_settings
from holidaykit.exceptions import ConfigError


SETTINGS_YAML = """
log_level: debug
log_format: json
min_year: 1900
countries:
  us:
    excluded_holidays: [columbus_day]
  de:
    enabled: false
custom_holidays:
  US:
    - id: company_day
      name: Company Day
      category: optional
      rule: {type: fixed, month: 3, day: 14}
"""


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "holidaykit.yaml"
    path.write_text(SETTINGS_YAML, encoding="utf-8")
    return path


class TestDefaults:
    """Defaults with no file and no environment."""

    def test_defaults(self) -> None:
        settings = load_settings(environ={})
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.catalog_dir is None
        assert settings.default_language is None
        assert settings.min_year == DEFAULT_MIN_YEAR == 1583
        assert settings.max_year == DEFAULT_MAX_YEAR == 9998
        assert settings.cache_years is False

    def test_country_helpers_default(self) -> None:
        settings = Settings()
        assert settings.is_enabled("US")
        assert settings.excluded_for("US") == frozenset()
        assert settings.custom_for("US") == []


class TestSettingsFile:
    """Settings read from YAML."""

    def test_load_file(self, settings_file: Path) -> None:
        settings = load_settings(settings_file, environ={})
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.min_year == 1900

    def test_country_keys_upper_cased(self, settings_file: Path) -> None:
        settings = load_settings(settings_file, environ={})
        assert settings.excluded_for("us") == frozenset({"columbus_day"})
        assert not settings.is_enabled("DE")
        assert settings.is_enabled("CA")
        assert settings.custom_for("US")[0]["id"] == "company_day"

    def test_file_from_environment(self, settings_file: Path) -> None:
        settings = load_settings(environ={"HK_CONFIG_FILE": str(settings_file)})
        assert settings.log_format == "json"

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path, environ={}).log_level == "INFO"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings(tmp_path / "missing.yaml", environ={})
        assert exc_info.value.code == "HK_CONFIG_ERROR"

    def test_root_not_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(path, environ={})

    def test_broken_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("log_level: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(path, environ={})


class TestEnvironmentOverrides:
    """HK_* variables win over the file."""

    def test_env_overrides_file(self, settings_file: Path) -> None:
        settings = load_settings(settings_file, environ={"HK_LOG_LEVEL": "warning", "HK_MIN_YEAR": "1950"})
        assert settings.log_level == "WARNING"
        assert settings.min_year == 1950
        assert settings.log_format == "json"

    def test_env_types_coerced(self, tmp_path: Path) -> None:
        settings = load_settings(environ={
            "HK_CACHE_YEARS": "true",
            "HK_MAX_YEAR": "2500",
            "HK_CATALOG_DIR": str(tmp_path),
            "HK_DEFAULT_LANGUAGE": "fr",
        })
        assert settings.cache_years is True
        assert settings.max_year == 2500
        assert settings.catalog_dir == tmp_path
        assert settings.default_language == "fr"

    def test_empty_env_ignored(self) -> None:
        assert load_settings(environ={"HK_LOG_LEVEL": ""}).log_level == "INFO"


class TestValidation:
    """Invalid values raise ConfigError."""

    @pytest.mark.parametrize("environ", [
        {"HK_LOG_LEVEL": "LOUD"},
        {"HK_LOG_FORMAT": "xml"},
        {"HK_MIN_YEAR": "0"},
        {"HK_MAX_YEAR": "9999"},
        {"HK_MIN_YEAR": "2100", "HK_MAX_YEAR": "2000"},
        {"HK_MIN_YEAR": "soon"},
    ])
    def test_invalid_values(self, environ: dict) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings(environ=environ)
        assert exc_info.value.details["errors"]
