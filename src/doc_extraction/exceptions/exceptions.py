"""Custom exceptions for the document extraction pipeline.

Every fault an extraction attempt can run into on account of its input
derives from DocumentExtractionError. The orchestrator turns those into
FAILED records. DatabaseError is kept outside that hierarchy since a
broken record store is not a property of the document.
"""

__all__ = [
    "DocumentExtractionError",
    "UnsupportedFormatError",
    "SourceUnavailableError",
    "SourceNotFoundError",
    "MalformedDocumentError",
    "SerializationError",
    "DatabaseError"
]


class DocumentExtractionError(Exception):
    """Base class for faults contained by the extraction orchestrator."""
    pass


class UnsupportedFormatError(DocumentExtractionError):
    """Exception raised when a declared content type has no extractor.

    Only PDF, DOCX and XLSX are supported. Legacy DOC and plain text
    are accepted at upload time but still end up here.
    """
    pass


class SourceUnavailableError(DocumentExtractionError):
    """Exception raised when document bytes cannot be fetched.

    This covers storage I/O faults and locators that cannot be resolved.
    """
    pass


class SourceNotFoundError(SourceUnavailableError):
    """Exception raised when the storage locator points at nothing."""
    pass


class MalformedDocumentError(DocumentExtractionError):
    """Exception raised when content is not a valid instance of its format.

    Raised by payload validation and by the format extractors when the
    underlying parser rejects the bytes.
    """
    pass


class SerializationError(DocumentExtractionError):
    """Exception raised when tables or key-values cannot be encoded."""
    pass


class DatabaseError(Exception):
    """Exception raised during database operations.

    This exception is raised when there are issues with database
    connectivity, queries, or data persistence.
    """
    pass
