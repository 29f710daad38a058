"""PDF extractor for the document extraction pipeline.

This module contains the PDFExtractor class for extracting text content
and page counts from PDF files using the pdfplumber library.
"""

import io
from typing import List

import pdfplumber

from ..exceptions import MalformedDocumentError
from ..models import ExtractionResult
from .base import FormatExtractor

__all__ = ["PDFExtractor"]


class PDFExtractor(FormatExtractor):
    """Extracts text content from PDF files.

    Page texts are concatenated in page order, relying on pdfplumber's
    reading order. Tables are not extracted from PDFs, so the result
    never carries any. Image-only pages contribute empty text; there is
    no OCR.
    """

    def extract(self, data: bytes) -> ExtractionResult:
        """Extract text content and page count from a PDF.

        Args:
            data: Raw PDF file content as bytes

        Returns:
            ExtractionResult with full text and page count

        Raises:
            MalformedDocumentError: If the PDF cannot be opened or a page fails
        """
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                page_count: int = len(pdf.pages)
                text_parts: List[str] = [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            raise MalformedDocumentError(f"PDF reading error: {str(e)}")

        return ExtractionResult(
            full_text="\n".join(text_parts),
            tables=[],
            page_count=page_count,
        )
