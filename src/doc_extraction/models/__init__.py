"""Data models for the document extraction pipeline.

This module contains the content type and status enumerations, the
in-memory extraction result types, and the SQLAlchemy model for the
persisted extraction record.
"""

from .content_types import ContentType, ExtractionStatus
from .results import DocumentDescriptor, ExtractedTable, ExtractionResult, KeyValuePair
from .extraction import Base, ExtractionRecord

__all__ = [
    "ContentType",
    "ExtractionStatus",
    "DocumentDescriptor",
    "ExtractedTable",
    "ExtractionResult",
    "KeyValuePair",
    "Base",
    "ExtractionRecord"
]
