"""Reporting helpers."""

from __future__ import annotations

from dowcalc.runner import RunSummary


def summarize_results(summary: RunSummary) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for result in summary.results:
        rows.append(
            {
                "description": result.fixture.description,
                "date": result.fixture.input.isoformat(),
                "expected": result.fixture.expected,
                "received": result.received,
                "status": "PASS" if result.passed else "FAIL",
            }
        )
    return rows


def summary_row(summary: RunSummary) -> dict[str, object]:
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "ok": summary.ok,
    }
