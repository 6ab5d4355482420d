# utils/shift_performance/export_utils.py
"""
Export Utilities for Shift Performance

VERSION: 1.0.0
- CSV export for quick downloads
- openpyxl Excel workbook, one formatted sheet per table
- Table builders for overview, goal achievement, YTD and comparison
"""

import io
import logging
from typing import Dict, List, Optional

import pandas as pd
import streamlit as st
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .comparison_engine import ComparisonResult
from .constants import EXCEL_STYLES, STATUS_GREEN, STATUS_RED
from .goal_summary import GoalAchievementSummary
from .overview_aggregator import OverviewSnapshot
from .ytd_aggregator import YTDSnapshot

logger = logging.getLogger(__name__)

# Excel sheet names are capped at 31 characters
_MAX_SHEET_NAME = 31

_STATUS_FILLS = {
    STATUS_GREEN: 'D4EDDA',
    STATUS_RED: 'F8D7DA',
}


# =============================================================================
# TABLE BUILDERS
# =============================================================================

def overview_frame(snapshot: OverviewSnapshot) -> pd.DataFrame:
    return pd.DataFrame(snapshot.shift_table())


def goal_achievement_frames(summary: GoalAchievementSummary) -> Dict[str, pd.DataFrame]:
    return {
        'Goals by Metric': pd.DataFrame([metric.to_dict() for metric in summary.metrics]),
        'Goals by Shift': pd.DataFrame([shift.to_dict() for shift in summary.shifts]),
    }


def ytd_frame(snapshot: Optional[YTDSnapshot]) -> pd.DataFrame:
    if snapshot is None:
        return pd.DataFrame()
    return pd.DataFrame(snapshot.to_rows())


def comparison_frame(result: ComparisonResult) -> pd.DataFrame:
    return pd.DataFrame(result.to_rows())


# =============================================================================
# EXPORT
# =============================================================================

class ShiftPerformanceExport:
    """Handle CSV/Excel exports."""

    @staticmethod
    def to_csv(df: pd.DataFrame) -> bytes:
        return df.to_csv(index=False).encode('utf-8-sig')

    @staticmethod
    def _write_sheet(ws, df: pd.DataFrame):
        header_fill = PatternFill(
            start_color=EXCEL_STYLES['header_fill_color'],
            end_color=EXCEL_STYLES['header_fill_color'],
            fill_type='solid'
        )
        header_font = Font(bold=True, color=EXCEL_STYLES['header_font_color'], size=11)
        thin_border = Side(style='thin', color='000000')
        cell_border = Border(left=thin_border, right=thin_border, top=thin_border, bottom=thin_border)

        # Headers
        for col_idx, col_name in enumerate(df.columns, 1):
            cell = ws.cell(row=1, column=col_idx, value=str(col_name))
            cell.fill = header_fill
            cell.font = header_font
            cell.alignment = Alignment(horizontal='center', vertical='center')
            cell.border = cell_border
            ws.column_dimensions[get_column_letter(col_idx)].width = max(len(str(col_name)) + 4, 12)

        # Data
        for row_idx, row in enumerate(df.itertuples(index=False), 2):
            for col_idx, value in enumerate(row, 1):
                if isinstance(value, float) and pd.isna(value):
                    value = None
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = cell_border

                col_name = str(df.columns[col_idx - 1]).lower()
                if 'percent' in col_name:
                    cell.alignment = Alignment(horizontal='right')
                elif isinstance(value, float):
                    cell.number_format = EXCEL_STYLES['decimal_format']
                    cell.alignment = Alignment(horizontal='right')
                elif isinstance(value, int):
                    cell.number_format = EXCEL_STYLES['number_format']
                    cell.alignment = Alignment(horizontal='right')

                if col_name == 'status' and value in _STATUS_FILLS:
                    cell.fill = PatternFill(
                        start_color=_STATUS_FILLS[value],
                        end_color=_STATUS_FILLS[value],
                        fill_type='solid'
                    )

        ws.freeze_panes = 'A2'

    @staticmethod
    def to_excel(df: pd.DataFrame, sheet_name: str = 'Data') -> bytes:
        """Convert DataFrame to formatted Excel bytes using openpyxl."""
        return ShiftPerformanceExport.to_excel_sheets({sheet_name: df})

    @staticmethod
    def to_excel_sheets(frames: Dict[str, pd.DataFrame]) -> bytes:
        """Several DataFrames → one workbook, one sheet each (empty frames skipped)."""
        wb = Workbook()
        wb.remove(wb.active)

        for sheet_name, df in frames.items():
            if df is None or df.empty:
                continue
            ws = wb.create_sheet(title=sheet_name[:_MAX_SHEET_NAME])
            ShiftPerformanceExport._write_sheet(ws, df)

        if not wb.sheetnames:
            wb.create_sheet(title='Data')

        buffer = io.BytesIO()
        wb.save(buffer)
        buffer.seek(0)
        return buffer.getvalue()

    @staticmethod
    def render_download_button(df: pd.DataFrame, filename: str,
                               label: str = "📥 Export",
                               key: str = None):
        """Render download buttons for CSV and Excel."""
        if df.empty:
            st.info("No data to export")
            return

        col1, col2 = st.columns(2)

        with col1:
            st.download_button(
                label=f"{label} CSV",
                data=ShiftPerformanceExport.to_csv(df),
                file_name=f"{filename}.csv",
                mime="text/csv",
                key=f"{key}_csv" if key else None
            )

        with col2:
            st.download_button(
                label=f"{label} Excel",
                data=ShiftPerformanceExport.to_excel(df),
                file_name=f"{filename}.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                key=f"{key}_xlsx" if key else None
            )

    @staticmethod
    def render_workbook_button(frames: Dict[str, pd.DataFrame], filename: str,
                               label: str = "📥 Download Excel report",
                               key: str = None):
        """Single download button for a multi-sheet workbook."""
        non_empty: List[str] = [name for name, df in frames.items() if df is not None and not df.empty]
        if not non_empty:
            st.info("No data to export")
            return

        logger.debug(f"[Export] Workbook {filename}: {non_empty}")
        st.download_button(
            label=label,
            data=ShiftPerformanceExport.to_excel_sheets(frames),
            file_name=f"{filename}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key=key,
        )
