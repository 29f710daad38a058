"""Custom exceptions for the document extraction pipeline.

This module contains all custom exception classes used throughout
the fetch, validation, parsing and persistence stages.
"""

from .exceptions import (
    DocumentExtractionError,
    UnsupportedFormatError,
    SourceUnavailableError,
    SourceNotFoundError,
    MalformedDocumentError,
    SerializationError,
    DatabaseError
)

__all__ = [
    "DocumentExtractionError",
    "UnsupportedFormatError",
    "SourceUnavailableError",
    "SourceNotFoundError",
    "MalformedDocumentError",
    "SerializationError",
    "DatabaseError"
]
