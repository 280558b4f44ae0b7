"""
Tests for logging setup and exceptions.
"""
import json
import logging
import sys

import pytest

from holidaykit.exceptions import (
    CatalogLoadError,
    CountryNotSupportedError,
    HolidayKitError,
    InvalidYearError,
)
from holidaykit.log import EXTRA_FIELDS, LOGGER_NAME, JSONFormatter, configure_logging


def make_log_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="holidaykit.provider",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Computed %d holidays",
        args=(11,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for structured log lines."""

    def test_basic_fields(self) -> None:
        line = json.loads(JSONFormatter().format(make_log_record()))
        assert line["level"] == "INFO"
        assert line["logger"] == "holidaykit.provider"
        assert line["message"] == "Computed 11 holidays"
        assert "timestamp" in line

    def test_extra_fields(self) -> None:
        record = make_log_record(country_code="US", year=2024, holiday_count=11, unrelated="x")
        line = json.loads(JSONFormatter().format(record))
        assert line["country_code"] == "US"
        assert line["year"] == 2024
        assert line["holiday_count"] == 11
        assert "unrelated" not in line

    def test_extra_field_names(self) -> None:
        """Only fields the package actually logs are copied into the line."""
        assert EXTRA_FIELDS == ("country_code", "year", "holiday_count", "entry_id", "path")

    def test_exception_included(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_log_record()
            record.exc_info = sys.exc_info()
        line = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in line["exception"]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_single_handler(self) -> None:
        logger = configure_logging("DEBUG", "json")
        configure_logging("INFO", "text")
        ours = [h for h in logger.handlers if getattr(h, "_holidaykit_handler", False)]
        assert len(ours) == 1
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert not isinstance(ours[0].formatter, JSONFormatter)

    def test_json_format(self) -> None:
        logger = configure_logging("warning", "json")
        ours = [h for h in logger.handlers if getattr(h, "_holidaykit_handler", False)]
        assert isinstance(ours[0].formatter, JSONFormatter)
        assert logger.level == logging.WARNING


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_str_includes_code_and_country(self) -> None:
        error = InvalidYearError(message="Year 1500 outside range", country_code="US")
        assert str(error) == "[HK_INVALID_YEAR] Year 1500 outside range (country: US)"

    def test_to_dict(self) -> None:
        error = CountryNotSupportedError(
            message="Country not supported: XX",
            details={"supported": ["US"]},
            country_code="XX",
        )
        assert error.to_dict() == {
            "code": "HK_COUNTRY_NOT_SUPPORTED",
            "message": "Country not supported: XX",
            "details": {"supported": ["US"]},
            "country_code": "XX",
        }

    def test_to_dict_minimal(self) -> None:
        assert CatalogLoadError(message="nope").to_dict() == {
            "code": "HK_CATALOG_LOAD_ERROR",
            "message": "nope",
        }

    def test_hierarchy(self) -> None:
        with pytest.raises(HolidayKitError):
            raise CatalogLoadError(message="unreadable")
