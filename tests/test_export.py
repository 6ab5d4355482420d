"""Tests for CSV/Excel exports and their table builders."""

import io

import pandas as pd
from openpyxl import load_workbook

from utils.shift_performance.comparison_engine import compare_shifts
from utils.shift_performance.export_utils import (
    ShiftPerformanceExport,
    comparison_frame,
    goal_achievement_frames,
    overview_frame,
    ytd_frame,
)
from utils.shift_performance.goal_summary import summarize_goal_achievement
from utils.shift_performance.overview_aggregator import aggregate_overview, collect_shift_summaries
from utils.shift_performance.ytd_aggregator import aggregate_ytd


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load(data: bytes):
    return load_workbook(io.BytesIO(data))


class TestTableBuilders:
    def test_overview_frame(self, fleet) -> None:
        df = overview_frame(aggregate_overview(fleet, "April"))
        assert df["shift"].tolist() == ["Dry 1st", "Dry 2nd", "Perishable 1st"]
        assert df["goal_percent"].tolist() == [67, 50, 100]

    def test_goal_achievement_frames(self, fleet) -> None:
        frames = goal_achievement_frames(summarize_goal_achievement(collect_shift_summaries(fleet, "April")))
        assert list(frames) == ["Goals by Metric", "Goals by Shift"]
        assert len(frames["Goals by Metric"]) == 6
        assert frames["Goals by Shift"]["badge"].tolist() == ["⭐", "⭐", "🏆"]

    def test_ytd_frame(self, fleet) -> None:
        assert ytd_frame(aggregate_ytd(fleet, "February")).empty
        df = ytd_frame(aggregate_ytd(fleet, "April"))
        assert df.loc[df["metric"] == "Safety", "total"].item() == 5

    def test_comparison_frame(self, fleet) -> None:
        df = comparison_frame(compare_shifts(fleet, ["dry-1st", "per-1st"], "April"))
        assert list(df.columns) == ["Metric", "Goal", "Dry 1st", "Perishable 1st", "Winner"]


class TestShiftPerformanceExport:
    def test_csv_has_bom(self) -> None:
        data = ShiftPerformanceExport.to_csv(pd.DataFrame({"metric": ["DPM"], "value": [1500]}))
        assert data.startswith(b"\xef\xbb\xbf")
        assert b"metric,value" in data

    def test_excel_single_sheet(self) -> None:
        df = pd.DataFrame({"metric": ["DPM", "Chase %"], "status": ["green", "red"], "average": [1350.0, 2.5]})
        wb = _load(ShiftPerformanceExport.to_excel(df, sheet_name="YTD"))
        ws = wb["YTD"]
        assert [cell.value for cell in ws[1]] == ["metric", "status", "average"]
        assert ws["A3"].value == "Chase %"
        assert ws["C2"].value == 1350.0
        assert ws.freeze_panes == "A2"

    def test_excel_skips_empty_frames(self) -> None:
        frames = {
            "Overview": pd.DataFrame({"shift": ["Dry 1st"]}),
            "YTD": pd.DataFrame(),
        }
        wb = _load(ShiftPerformanceExport.to_excel_sheets(frames))
        assert wb.sheetnames == ["Overview"]

    def test_excel_all_empty_keeps_one_sheet(self) -> None:
        wb = _load(ShiftPerformanceExport.to_excel_sheets({"YTD": pd.DataFrame()}))
        assert wb.sheetnames == ["Data"]

    def test_long_sheet_names_truncated(self) -> None:
        name = "Goal Achievement by Metric and Shift"
        wb = _load(ShiftPerformanceExport.to_excel_sheets({name: pd.DataFrame({"a": [1]})}))
        assert wb.sheetnames == [name[:31]]
