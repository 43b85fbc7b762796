"""Bundled fixtures and fixture file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from dowcalc.domain import CalendarDate, Fixture


class FixtureLoadError(Exception):
    def __init__(self, issues: list[dict[str, Any]]) -> None:
        super().__init__("Invalid rows in fixture file")
        self.issues = issues


def describe(value: CalendarDate) -> str:
    return f"weekday_of returns correct day for {value.isoformat()}(yyyy-mm-dd)"


def _fixture(year: int, month: int, day: int, expected: str) -> Fixture:
    value = CalendarDate(year=year, month=month, day=day)
    return Fixture(description=describe(value), input=value, expected=expected)


FIXTURES: tuple[Fixture, ...] = (
    _fixture(2024, 10, 8, "Tuesday"),
    _fixture(2023, 1, 1, "Sunday"),
    _fixture(2000, 2, 29, "Tuesday"),
    _fixture(1999, 12, 31, "Friday"),
    _fixture(2022, 7, 4, "Monday"),
)


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.casefold()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix in {".xlsx", ".xlsm"}:
        return pd.read_excel(path, sheet_name=0)
    raise ValueError(f"Unsupported fixture file type: {path.suffix!r}")


def _normalize_header(value: Any) -> str:
    return "".join(char for char in str(value).casefold() if char not in {" ", "-", "_"})


def _get_column_value(row: pd.Series, column_map: dict[str, str], name: str) -> Any:
    column = column_map.get(_normalize_header(name))
    if column is None:
        return None
    return row.get(column)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _map_fixture_record(row: pd.Series, column_map: dict[str, str]) -> dict[str, Any]:
    date_fields = {
        name: _get_column_value(row, column_map, name) for name in ("year", "month", "day")
    }
    return {
        "description": _cell_text(_get_column_value(row, column_map, "description")),
        "input": date_fields,
        "expected": _get_column_value(row, column_map, "expected"),
    }


def load_fixtures(path: str | Path) -> list[Fixture]:
    source = Path(path)
    df = _read_table(source)
    if df.empty:
        return []
    df = df.astype(object).where(pd.notna(df), None)
    column_map = {_normalize_header(column): str(column) for column in df.columns}
    df = df.rename(columns=str)
    fixtures: list[Fixture] = []
    issues: list[dict[str, Any]] = []
    for idx, (_, row) in enumerate(df.iterrows()):
        record = _map_fixture_record(row, column_map)
        try:
            fixture = Fixture.model_validate(record)
        except ValidationError as exc:
            row_number = idx + 2
            for error in exc.errors():
                field = ".".join(str(part) for part in error.get("loc", []))
                issues.append(
                    {
                        "row": row_number,
                        "field": field or "unknown",
                        "message": error.get("msg", "Unknown error"),
                    }
                )
            continue
        if not fixture.description:
            fixture = fixture.model_copy(update={"description": describe(fixture.input)})
        fixtures.append(fixture)
    if issues:
        raise FixtureLoadError(issues)
    return fixtures
