"""XLSX extractor for the document extraction pipeline.

This module contains the XlsxExtractor class for extracting one table
per sheet, plus a tab-separated text rendering, from Excel workbooks
using openpyxl.
"""

import io
from datetime import date, datetime, time, timedelta
from typing import Any, List

import openpyxl
from openpyxl.cell.cell import Cell
from openpyxl.worksheet.worksheet import Worksheet

from ..exceptions import MalformedDocumentError
from ..models import ExtractedTable, ExtractionResult
from .base import FormatExtractor

__all__ = ["XlsxExtractor"]


class XlsxExtractor(FormatExtractor):
    """Extracts sheet contents from XLSX workbooks.

    Each sheet is read over its used range, which starts at the first
    row and column holding a cell rather than at A1. The full
    text gets one line per row with a tab after every cell. Formulas
    are read as written, not as cached results.
    """

    def extract(self, data: bytes) -> ExtractionResult:
        """Extract tables and tab-separated text from a workbook.

        Args:
            data: Raw XLSX file content as bytes

        Returns:
            ExtractionResult with full text, one table per non-empty
            sheet and the total sheet count

        Raises:
            MalformedDocumentError: If the workbook cannot be read
        """
        try:
            workbook = openpyxl.load_workbook(io.BytesIO(data), data_only=False)
        except Exception as e:
            raise MalformedDocumentError(f"XLSX reading error: {str(e)}")

        try:
            text_parts: List[str] = []
            tables: List[ExtractedTable] = []
            sheet_names: List[str] = workbook.sheetnames

            for sheet_name in sheet_names:
                sheet = workbook[sheet_name]
                # chartsheets count towards sheet_count but hold no cells
                if not isinstance(sheet, Worksheet):
                    continue

                rows = self._read_rows(sheet)
                for row in rows:
                    text_parts.extend(f"{value}\t" for value in row)
                    text_parts.append("\n")

                if rows:
                    tables.append(ExtractedTable(name=sheet_name, rows=rows))
        except Exception as e:
            raise MalformedDocumentError(f"XLSX reading error: {str(e)}")
        finally:
            workbook.close()

        return ExtractionResult(
            full_text="".join(text_parts),
            tables=tables,
            sheet_count=len(sheet_names),
        )

    def _read_rows(self, sheet: Worksheet) -> List[List[str]]:
        cells = [
            list(row)
            for row in sheet.iter_rows(min_row=sheet.min_row, min_col=sheet.min_column)
        ]
        if all(cell.value is None for row in cells for cell in row):
            return []
        return [[self.cell_to_string(cell) for cell in row] for row in cells]

    @staticmethod
    def cell_to_string(cell: Cell) -> str:
        """Render a cell value the way it appears in extracted output.

        Text passes through, numbers render as decimals (``42`` becomes
        ``"42.0"``, integers keep every digit), booleans as ``"true"``/``"false"``, formulas as
        their text without the leading ``=``, dates in ISO-8601. Empty
        and error cells render as ``""``.
        """
        value: Any = cell.value
        if value is None or cell.data_type == "e":
            return ""
        if cell.data_type == "f":
            formula = str(getattr(value, "text", value))
            return formula[1:] if formula.startswith("=") else formula
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return f"{value}.0"
        if isinstance(value, float):
            return str(value)
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        if isinstance(value, timedelta):
            return str(value)
        return str(value)
