"""In-memory result types shared by every format extractor."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

__all__ = ["DocumentDescriptor", "ExtractedTable", "ExtractionResult", "KeyValuePair"]


@dataclass(frozen=True)
class DocumentDescriptor:
    """Identifies a stored document and how to read it.

    Attributes:
        document_id: Opaque unique identifier of the document
        content_type: MIME type declared at upload time
        storage_locator: Key handed to the byte source to fetch the content
    """
    document_id: str
    content_type: str
    storage_locator: str


@dataclass(frozen=True)
class ExtractedTable:
    """A named grid of string cells.

    Rows may have different lengths; cells are never None.
    """
    name: str
    rows: List[List[str]]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "rows": [list(row) for row in self.rows]}


@dataclass(frozen=True)
class KeyValuePair:
    """A trimmed key and its non-empty trimmed value."""
    key: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class ExtractionResult:
    """Common output of the PDF, DOCX and XLSX extractors.

    Attributes:
        full_text: Extracted text, empty when the document has none
        tables: Tables in document order
        page_count: Number of pages (PDF only)
        sheet_count: Number of sheets (XLSX only)
    """
    full_text: str = ""
    tables: List[ExtractedTable] = field(default_factory=list)
    page_count: int = 0
    sheet_count: int = 0

    @property
    def character_count(self) -> int:
        return len(self.full_text)

    @property
    def table_count(self) -> int:
        return len(self.tables)
