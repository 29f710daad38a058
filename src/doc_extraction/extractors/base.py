"""Format extractor base class for the document extraction pipeline.

This module contains the abstract FormatExtractor base class that defines
the interface every format-specific parser implements.
"""

from abc import ABC, abstractmethod

from ..models import ExtractionResult

__all__ = ["FormatExtractor"]


class FormatExtractor(ABC):
    """Abstract base class for format-specific extraction.

    Implementations turn the raw bytes of one document format into the
    common ExtractionResult. They either return a complete result or
    raise; a partially populated result is never returned.
    """

    @abstractmethod
    def extract(self, data: bytes) -> ExtractionResult:
        """Extract text, tables and counts from document content.

        Args:
            data: Raw document content

        Returns:
            ExtractionResult for the whole document

        Raises:
            MalformedDocumentError: If the parser rejects the content
        """
        pass
