"""Domain models for dates, fixtures and run settings."""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

WeekdayName = Literal[
    "Saturday",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
]

# Index 0 is Saturday, matching the congruence result.
WEEKDAY_NAMES: tuple[WeekdayName, ...] = (
    "Saturday",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
)

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


class InvalidMonthError(ValueError):
    def __init__(self, month: Any) -> None:
        super().__init__(f"Invalid month (expected 1-12): {month!r}")
        self.month = month


def normalize_weekday(value: Any) -> WeekdayName:
    if value is None:
        raise ValueError("Weekday name is required")
    text = str(value).strip().casefold()
    for name in WEEKDAY_NAMES:
        if text in {name.casefold(), name[:3].casefold()}:
            return name
    raise ValueError(f"Invalid weekday name: {value!r}")


class CalendarDate(BaseModel):
    """A (year, month, day) triple.

    The day is not checked against the month length: 2023-04-31 is a valid
    value and is computed arithmetically.
    """

    year: int
    month: int
    day: int

    model_config = {"frozen": True}

    @field_validator("month")
    @classmethod
    def _validate_month(cls, value: int) -> int:
        if not 1 <= value <= 12:
            raise InvalidMonthError(value)
        return value

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        match = _DATE_RE.match(str(text).strip())
        if match is None:
            raise ValueError(f"Invalid date format (YYYY-MM-DD): {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year=year, month=month, day=day)


class Fixture(BaseModel):
    description: str
    input: CalendarDate = Field(alias="assert")
    expected: WeekdayName

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("expected", mode="before")
    @classmethod
    def _normalize_expected(cls, value: Any) -> WeekdayName:
        return normalize_weekday(value)


class Settings(BaseModel):
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    fail_on_mismatch: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        text = str(value).strip().upper()
        if text not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value!r}")
        return text
