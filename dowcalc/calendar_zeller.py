"""Day-of-week calculation with Zeller's congruence."""

from __future__ import annotations

from dowcalc.domain import WEEKDAY_NAMES, CalendarDate, InvalidMonthError, WeekdayName


def adjust_month(month: int) -> int:
    """January and February count as months 13 and 14 of the previous year."""
    return month + 12 if month <= 2 else month


def adjust_year(year: int, month: int) -> int:
    return year - 1 if month <= 2 else year


def century(year: int) -> int:
    return year // 100


def year_in_century(year: int) -> int:
    return year % 100


def weekday_index(year: int, month: int, day: int) -> int:
    """Return the weekday index for a date (0=Saturday, 1=Sunday, ..., 6=Friday).

    The day is not validated against the month, so out-of-range days are
    computed arithmetically. Months outside 1-12 raise InvalidMonthError.
    """
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)
    base_year = adjust_year(year, month)
    c = century(base_year)
    yic = year_in_century(base_year)
    k = day
    m = adjust_month(month)
    raw = k + (13 * (m + 1)) // 5 + yic + yic // 4 + c // 4 - 2 * c
    return ((raw % 7) + 7) % 7


def weekday_of(year: int, month: int, day: int) -> WeekdayName:
    return WEEKDAY_NAMES[weekday_index(year, month, day)]


def weekday_of_date(value: CalendarDate) -> WeekdayName:
    return weekday_of(value.year, value.month, value.day)
