"""Fixture runner: checks the calculator against expected weekdays."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from dowcalc.calendar_zeller import weekday_of
from dowcalc.domain import Fixture

logger = logging.getLogger(__name__)

success_logger = logging.getLogger("dowcalc.runner.success")
failure_logger = logging.getLogger("dowcalc.runner.failure")

Calculator = Callable[[int, int, int], str]
Sink = Callable[[str], None]


@dataclass(frozen=True)
class FixtureResult:
    fixture: Fixture
    received: str

    @property
    def passed(self) -> bool:
        return self.received == self.fixture.expected


@dataclass(frozen=True)
class RunSummary:
    results: list[FixtureResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0


def _log_success(message: str) -> None:
    success_logger.info(message)


def _log_failure(message: str) -> None:
    failure_logger.error(message)


def check_fixture(fixture: Fixture, calculator: Calculator = weekday_of) -> FixtureResult:
    date = fixture.input
    received = calculator(date.year, date.month, date.day)
    return FixtureResult(fixture=fixture, received=received)


def format_result(result: FixtureResult) -> str:
    return (
        f"{result.fixture.description}\n"
        f"    Expected = {result.fixture.expected}\n"
        f"    Received = {result.received}"
    )


def run_fixtures(
    fixtures: Iterable[Fixture],
    *,
    calculator: Calculator = weekday_of,
    on_success: Sink | None = None,
    on_failure: Sink | None = None,
) -> RunSummary:
    """Check every fixture in order and report each one.

    Matches go to ``on_success`` and mismatches to ``on_failure``; both default
    to dedicated loggers. A mismatch never stops the run.
    """
    on_success = on_success or _log_success
    on_failure = on_failure or _log_failure
    results: list[FixtureResult] = []
    for fixture in fixtures:
        result = check_fixture(fixture, calculator)
        results.append(result)
        if result.passed:
            on_success(format_result(result))
        else:
            on_failure(format_result(result))
    summary = RunSummary(results=results)
    logger.debug("Fixtures checked: %d passed, %d failed", summary.passed, summary.failed)
    return summary
