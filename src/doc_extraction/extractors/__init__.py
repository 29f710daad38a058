"""Extractors module for the document extraction pipeline.

This module contains the format-specific extractors (PDF, DOCX, XLSX),
the dispatch from content type to extractor, and the key-value
heuristic run over extracted text.
"""

from typing import Dict, Type

from ..models import ContentType
from .base import FormatExtractor
from .pdf_extractor import PDFExtractor
from .docx_extractor import DocxExtractor
from .xlsx_extractor import XlsxExtractor
from .key_value_extractor import KeyValueExtractor

__all__ = [
    "FormatExtractor",
    "PDFExtractor",
    "DocxExtractor",
    "XlsxExtractor",
    "KeyValueExtractor",
    "EXTRACTORS",
    "get_extractor"
]

EXTRACTORS: Dict[ContentType, Type[FormatExtractor]] = {
    ContentType.PDF: PDFExtractor,
    ContentType.DOCX: DocxExtractor,
    ContentType.XLSX: XlsxExtractor,
}


def get_extractor(content_type: ContentType) -> FormatExtractor:
    """Return the extractor for a supported content type.

    Args:
        content_type: Parsed content type

    Returns:
        A fresh extractor instance
    """
    return EXTRACTORS[content_type]()
