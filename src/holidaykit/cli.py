"""
holidaykit CLI

Command-line interface for holiday queries and catalog validation.

Usage:
    holidaykit countries
    holidaykit holidays US --year 2024 --format json
    holidaykit holidays DE --subdivision BY --language en
    holidaykit check CA 2024-07-01 --business
    holidaykit validate path/to/catalogs
"""

from __future__ import annotations

import argparse
import csv
import json
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from .catalogs.loader import CATALOG_SUFFIXES, CatalogLoader
from .config import Settings, load_settings
from .exceptions import CatalogValidationError, HolidayKitError
from .log import configure_logging
from .models import HolidayRecord
from .registry import Registry

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
CSV_FIELDS = ("date", "name", "category", "subdivisions", "observed", "approximate", "entry_id")


def _build_registry(args: argparse.Namespace, settings: Settings) -> Registry:
    return Registry(catalog_dir=args.catalog_dir, settings=settings)


def _language(args: argparse.Namespace, settings: Settings) -> Optional[str]:
    return getattr(args, "language", None) or settings.default_language


def _print_table(records: Sequence[HolidayRecord], language: Optional[str]) -> None:
    print(f"{'Date':<10}  {'Day':<3}  {'Category':<12}  {'Name':<40}  Subdivisions")
    print("-" * 90)
    for record in records:
        flags = ""
        if record.observed:
            flags += f" (observed, from {record.nominal_date.isoformat()})"
        if record.approximate:
            flags += " (approx.)"
        subdivisions = ", ".join(sorted(record.subdivision_scope)) or "all"
        print(
            f"{record.date.isoformat():<10}  {WEEKDAY_NAMES[record.date.weekday()]:<3}  "
            f"{record.category:<12}  {record.name(language) + flags:<40}  {subdivisions}"
        )
    print("-" * 90)
    print(f"{len(records)} holidays")


def _print_csv(records: Sequence[HolidayRecord], language: Optional[str]) -> None:
    writer = csv.writer(sys.stdout)
    writer.writerow(CSV_FIELDS)
    for record in records:
        writer.writerow([
            record.date.isoformat(),
            record.name(language),
            record.category,
            " ".join(sorted(record.subdivision_scope)),
            str(record.observed).lower(),
            str(record.approximate).lower(),
            record.entry_id or "",
        ])


# =============================================================================
# Commands
# =============================================================================

def cmd_countries(args: argparse.Namespace, settings: Settings) -> int:
    """List supported countries."""
    registry = _build_registry(args, settings)
    print(f"{'Code':<5} {'Name':<20} {'Entries':>8}  Languages")
    print("-" * 50)
    for code in registry.supported_countries():
        provider = registry.get(code)
        print(
            f"{code:<5} {provider.name:<20} {len(provider.entries):>8}  "
            f"{', '.join(provider.languages)}"
        )
    return 0


def cmd_holidays(args: argparse.Namespace, settings: Settings) -> int:
    """List a country's holidays for a year."""
    registry = _build_registry(args, settings)
    year = args.year or date.today().year
    holidays = registry.holidays(
        args.country,
        year,
        subdivisions=args.subdivision,
        categories=args.category,
    )
    records = list(holidays.values())
    language = _language(args, settings)

    if args.format == "json":
        print(json.dumps([r.to_dict(language) for r in records], indent=2, ensure_ascii=False))
    elif args.format == "csv":
        _print_csv(records, language)
    else:
        _print_table(records, language)
    return 0


def cmd_check(args: argparse.Namespace, settings: Settings) -> int:
    """Check whether a date is a holiday (and optionally a business day)."""
    try:
        day = date.fromisoformat(args.date)
    except ValueError:
        print(f"Error: invalid date '{args.date}', expected YYYY-MM-DD", file=sys.stderr)
        return 1

    registry = _build_registry(args, settings)
    provider = registry.get(args.country)
    language = _language(args, settings)
    subdivisions = args.subdivision or None

    record = provider.get_holiday(day)
    if record is not None and (subdivisions is None or record.applies_to(subdivisions)):
        print(f"{day.isoformat()} is a holiday in {provider.country_code}: {record.name(language)}")
    else:
        print(f"{day.isoformat()} is not a holiday in {provider.country_code}")

    if args.business:
        calendar = registry.business_calendar(args.country, subdivisions or ())
        if calendar.is_business_day(day):
            print(f"{day.isoformat()} is a business day")
        else:
            print(f"{day.isoformat()} is not a business day")
            print(f"Next business day: {calendar.next_business_day(day).isoformat()}")
    return 0


def _catalog_paths(paths: Sequence[str]) -> list[Path]:
    found: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found.extend(
                p for p in sorted(path.iterdir())
                if p.suffix.lower() in CATALOG_SUFFIXES
            )
        else:
            found.append(path)
    return found


def cmd_validate(args: argparse.Namespace, settings: Settings) -> int:
    """Validate catalog files and report errors."""
    loader = CatalogLoader()
    valid = 0
    invalid = 0

    for path in _catalog_paths(args.paths):
        try:
            catalog = loader.load(path)
        except CatalogValidationError as e:
            invalid += 1
            print(f"[ERROR] {path}: {e.message}")
            errors = e.details.get("errors")
            if isinstance(errors, list):
                for err in errors[:20]:
                    loc = " -> ".join(str(x) for x in err.get("loc", []))
                    print(f"    {loc}: {err.get('msg', 'Unknown')}")
                if len(errors) > 20:
                    print(f"    ... and {len(errors) - 20} more errors")
            elif errors:
                print(f"    {errors}")
        except HolidayKitError as e:
            invalid += 1
            print(f"[ERROR] {path}: {e.message}")
        else:
            valid += 1
            print(f"[OK] {path}: {catalog.country_code} ({len(catalog.entries)} entries)")

    print()
    print(f"Valid catalogs:   {valid}")
    print(f"Invalid catalogs: {invalid}")
    return 0 if invalid == 0 and valid > 0 else 1


# =============================================================================
# Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Holiday calendars by country",
        prog="holidaykit",
    )
    parser.add_argument("--config", type=Path, help="Settings file (default: $HK_CONFIG_FILE)")
    parser.add_argument("--catalog-dir", type=Path, help="Directory of catalog files")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    countries_parser = subparsers.add_parser("countries", help="List supported countries")
    countries_parser.set_defaults(func=cmd_countries)

    holidays_parser = subparsers.add_parser("holidays", help="List holidays for a year")
    holidays_parser.add_argument("country", help="Country code, e.g. US")
    holidays_parser.add_argument("--year", type=int, help="Year (default: current year)")
    holidays_parser.add_argument(
        "--subdivision", action="append", help="Include holidays of a subdivision (repeatable)"
    )
    holidays_parser.add_argument(
        "--category", action="append", help="Only this category (repeatable)"
    )
    holidays_parser.add_argument("--language", help="Language for holiday names")
    holidays_parser.add_argument(
        "--format", choices=("table", "json", "csv"), default="table", help="Output format"
    )
    holidays_parser.set_defaults(func=cmd_holidays)

    check_parser = subparsers.add_parser("check", help="Check a date")
    check_parser.add_argument("country", help="Country code, e.g. US")
    check_parser.add_argument("date", help="Date as YYYY-MM-DD")
    check_parser.add_argument(
        "--subdivision", action="append", help="Count holidays of a subdivision (repeatable)"
    )
    check_parser.add_argument("--language", help="Language for holiday names")
    check_parser.add_argument(
        "--business", action="store_true", help="Also report whether it is a business day"
    )
    check_parser.set_defaults(func=cmd_check)

    validate_parser = subparsers.add_parser("validate", help="Validate catalog files")
    validate_parser.add_argument("paths", nargs="+", help="Catalog files or directories")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = load_settings(args.config)
        configure_logging(settings.log_level, settings.log_format)
        return args.func(args, settings)
    except HolidayKitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
