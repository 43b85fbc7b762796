"""Excel export helpers."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from dowcalc.report import summarize_results, summary_row
from dowcalc.runner import RunSummary

RESULT_COLUMNS = ["description", "date", "expected", "received", "status"]


def _auto_fit_columns(worksheet) -> None:
    for column_cells in worksheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in column_cells]
        max_length = max((len(value) for value in values), default=0)
        column_letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, 80)


def _apply_sheet_formatting(worksheet) -> None:
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    _auto_fit_columns(worksheet)


def export_results_excel(path: str | Path, summary: RunSummary) -> None:
    output_path = Path(path)
    results_df = pd.DataFrame(summarize_results(summary), columns=RESULT_COLUMNS)
    totals_df = pd.DataFrame([summary_row(summary)])

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        results_df.to_excel(writer, sheet_name="results", index=False)
        totals_df.to_excel(writer, sheet_name="summary", index=False)

        for sheet_name in ("results", "summary"):
            worksheet = writer.sheets[sheet_name]
            _apply_sheet_formatting(worksheet)
