import tempfile
import unittest
from pathlib import Path

from openpyxl import load_workbook

from dowcalc.export_excel import export_results_excel
from dowcalc.fixtures import FIXTURES
from dowcalc.report import summarize_results, summary_row
from dowcalc.runner import run_fixtures


class ExportExcelTests(unittest.TestCase):
    def setUp(self) -> None:
        fixtures = list(FIXTURES)
        fixtures[0] = fixtures[0].model_copy(update={"expected": "Wednesday"})
        self.summary = run_fixtures(
            fixtures, on_success=lambda message: None, on_failure=lambda message: None
        )

    def test_summarize_results(self) -> None:
        rows = summarize_results(self.summary)
        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[0]["date"], "2024-10-08")
        self.assertEqual(rows[0]["expected"], "Wednesday")
        self.assertEqual(rows[0]["received"], "Tuesday")
        self.assertEqual(rows[0]["status"], "FAIL")
        self.assertEqual({row["status"] for row in rows[1:]}, {"PASS"})
        self.assertEqual(
            summary_row(self.summary),
            {"total": 5, "passed": 4, "failed": 1, "ok": False},
        )

    def test_workbook_sheets(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "results.xlsx"
            export_results_excel(path, self.summary)
            workbook = load_workbook(path)
            self.assertEqual(workbook.sheetnames, ["results", "summary"])
            results = workbook["results"]
            self.assertEqual(
                [cell.value for cell in results[1]],
                ["description", "date", "expected", "received", "status"],
            )
            self.assertEqual(results.max_row, 6)
            self.assertEqual(results["E2"].value, "FAIL")
            self.assertEqual(results.freeze_panes, "A2")
            summary = workbook["summary"]
            self.assertEqual(summary["C2"].value, 1)
            workbook.close()


if __name__ == "__main__":
    unittest.main()
