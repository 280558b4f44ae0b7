"""
holidaykit Models

Domain models for holiday records and country catalogs.
"""
from __future__ import annotations

from .catalog import ALWAYS, CatalogEntry, CountryCatalog, ValidityRange
from .enums import Direction, HolidayCategory, ObservedPolicy, RuleType, Weekday
from .holiday import HolidayRecord, code_set

__all__ = [
    # Enums
    "Direction",
    "HolidayCategory",
    "ObservedPolicy",
    "RuleType",
    "Weekday",
    # Records
    "HolidayRecord",
    "code_set",
    # Catalogs
    "ALWAYS",
    "CatalogEntry",
    "CountryCatalog",
    "ValidityRange",
]
