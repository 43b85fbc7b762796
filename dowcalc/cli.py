"""CLI for the weekday calculator and fixture runner."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from dowcalc.calendar_zeller import weekday_of_date
from dowcalc.domain import CalendarDate, Fixture, Settings
from dowcalc.export_excel import export_results_excel
from dowcalc.fixtures import FIXTURES, FixtureLoadError, load_fixtures
from dowcalc.report import summarize_results
from dowcalc.runner import run_fixtures

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Day-of-week calculator")
    parser.add_argument(
        "--date",
        action="append",
        default=[],
        help="Date in YYYY-MM-DD format (repeatable); use --date=-YYYY-MM-DD for negative years",
    )
    parser.add_argument("--fixtures", help="Path to fixture file (.csv or .xlsx)")
    parser.add_argument("--out", help="Path to output Excel file with fixture results")
    parser.add_argument(
        "--print-results",
        action="store_true",
        help="Print fixture results table",
    )
    parser.add_argument(
        "--fail-on-mismatch",
        action="store_true",
        help="Exit with status 1 when any fixture fails",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args(argv)
    if args.date:
        run_options = {
            "--fixtures": args.fixtures,
            "--out": args.out,
            "--print-results": args.print_results,
            "--fail-on-mismatch": args.fail_on_mismatch,
        }
        conflicts = [name for name, value in run_options.items() if value]
        if conflicts:
            parser.error(f"--date cannot be combined with {', '.join(conflicts)}")
    return args


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        datefmt=settings.date_format,
    )


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def _load_fixtures_or_exit(fixtures_path: Path) -> list[Fixture]:
    if not fixtures_path.is_file():
        raise SystemExit(f"ERROR: fixture file not found: {fixtures_path}")
    try:
        return load_fixtures(fixtures_path)
    except FixtureLoadError as exc:
        print("Errors in fixture file (first 5):")
        for issue in exc.issues[:5]:
            print(f"- row {issue['row']}, field {issue['field']}: {issue['message']}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc


def _print_weekdays(dates: list[str]) -> None:
    for text in dates:
        try:
            value = CalendarDate.parse(text)
        except (ValueError, ValidationError) as exc:
            raise SystemExit(f"ERROR: invalid date {text!r}: {exc}") from exc
        print(f"{value.isoformat()}: {weekday_of_date(value)}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        settings = Settings(log_level=args.log_level, fail_on_mismatch=args.fail_on_mismatch)
    except ValidationError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc
    configure_logging(settings)

    if args.date:
        _print_weekdays(args.date)
        return

    if args.fixtures:
        fixtures = _load_fixtures_or_exit(Path(args.fixtures))
        logger.info("Loaded %d fixtures from %s", len(fixtures), args.fixtures)
    else:
        fixtures = list(FIXTURES)

    summary = run_fixtures(fixtures)
    if args.print_results:
        print(_render_table(summarize_results(summary)))
    if args.out:
        export_results_excel(args.out, summary)
        logger.info("Wrote %d results to %s", summary.total, args.out)
    logger.info("Fixtures: %d passed, %d failed", summary.passed, summary.failed)
    if settings.fail_on_mismatch and not summary.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
