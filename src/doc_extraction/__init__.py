"""Document Extraction - structured extraction from business documents.

This package turns stored PDF, DOCX and XLSX documents into a
normalized extraction record: full text, tables, heuristically
extracted key-value pairs and per-format counts.

The package is organized into the following modules:
- config: Pipeline configuration and settings
- exceptions: Custom exception classes
- models: Content types, result types and the extraction record model
- storage: Byte sources for stored documents
- validators: Payload validation before parsing
- extractors: Format extractors and the key-value heuristic
- database: Database management and the extraction repository
- processors: Single, asynchronous and batch extraction workflows
"""

__version__ = "1.0.0"
__author__ = "Document Extraction Team"
__description__ = "Text, table and key-value extraction for PDF, DOCX and XLSX documents"

from .config import Config
from .exceptions import (
    DocumentExtractionError,
    UnsupportedFormatError,
    SourceUnavailableError,
    SourceNotFoundError,
    MalformedDocumentError,
    SerializationError,
    DatabaseError
)
from .models import (
    Base,
    ContentType,
    DocumentDescriptor,
    ExtractedTable,
    ExtractionRecord,
    ExtractionResult,
    ExtractionStatus,
    KeyValuePair
)
from .storage import ByteSource, InMemoryByteSource, LocalFileStorage
from .validators import DocumentValidator
from .extractors import (
    FormatExtractor,
    PDFExtractor,
    DocxExtractor,
    XlsxExtractor,
    KeyValueExtractor,
    get_extractor
)
from .database import DatabaseManager, ExtractionRepository
from .processors import (
    DocumentExtractionProcessor,
    AsyncExtractionProcessor,
    AsyncBatchExtractor,
    ProgressEvent,
    ProgressEventType
)

__all__ = [
    # Configuration
    "Config",
    # Exceptions
    "DocumentExtractionError",
    "UnsupportedFormatError",
    "SourceUnavailableError",
    "SourceNotFoundError",
    "MalformedDocumentError",
    "SerializationError",
    "DatabaseError",
    # Models
    "Base",
    "ContentType",
    "DocumentDescriptor",
    "ExtractedTable",
    "ExtractionRecord",
    "ExtractionResult",
    "ExtractionStatus",
    "KeyValuePair",
    # Storage
    "ByteSource",
    "InMemoryByteSource",
    "LocalFileStorage",
    # Validators
    "DocumentValidator",
    # Extractors
    "FormatExtractor",
    "PDFExtractor",
    "DocxExtractor",
    "XlsxExtractor",
    "KeyValueExtractor",
    "get_extractor",
    # Database
    "DatabaseManager",
    "ExtractionRepository",
    # Processors
    "DocumentExtractionProcessor",
    "AsyncExtractionProcessor",
    "AsyncBatchExtractor",
    "ProgressEvent",
    "ProgressEventType"
]
