"""DOCX extractor for the document extraction pipeline.

This module contains the DocxExtractor class for extracting paragraph
text and tables from Word documents using python-docx.
"""

import io
from typing import List

from docx import Document
from docx.table import _Cell

from ..exceptions import MalformedDocumentError
from ..models import ExtractedTable, ExtractionResult
from .base import FormatExtractor

__all__ = ["DocxExtractor"]


class DocxExtractor(FormatExtractor):
    """Extracts body text and tables from DOCX files.

    Every body paragraph, empty ones included, contributes its text
    followed by a newline. Tables are read separately in document order
    and named "Table 1", "Table 2", ... counting only tables that have
    at least one row. Each physical cell is read once, so a cell merged
    across columns appears once in its row.
    """

    def extract(self, data: bytes) -> ExtractionResult:
        """Extract paragraph text and tables from a DOCX document.

        Args:
            data: Raw DOCX file content as bytes

        Returns:
            ExtractionResult with full text and tables

        Raises:
            MalformedDocumentError: If the package cannot be read as DOCX
        """
        try:
            document = Document(io.BytesIO(data))
            full_text: str = "".join(f"{paragraph.text}\n" for paragraph in document.paragraphs)
            tables: List[ExtractedTable] = self._extract_tables(document)
        except Exception as e:
            raise MalformedDocumentError(f"DOCX reading error: {str(e)}")

        return ExtractionResult(full_text=full_text, tables=tables)

    @staticmethod
    def _extract_tables(document) -> List[ExtractedTable]:
        tables: List[ExtractedTable] = []
        for table in document.tables:
            rows: List[List[str]] = [
                [_Cell(tc, table).text.strip() for tc in row._tr.tc_lst]
                for row in table.rows
            ]
            if rows:
                tables.append(ExtractedTable(name=f"Table {len(tables) + 1}", rows=rows))
        return tables
