"""Configuration module for the document extraction pipeline.

This module contains all configuration parameters including
supported content types, key-value heuristic bounds, payload
size limits, storage and database settings.
"""

import os
from typing import Dict

from dotenv import load_dotenv

__all__ = ["Config"]

load_dotenv()


class Config:
    """Configuration class containing pipeline settings and constants.

    The key-value bounds are fixed: downstream consumers assert on them
    literally, so they are not read from the environment. Everything
    deployment specific is read from ``DOC_EXTRACTION_*`` variables.
    """

    # Supported MIME types
    PDF_CONTENT_TYPE: str = "application/pdf"
    DOCX_CONTENT_TYPE: str = (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )
    XLSX_CONTENT_TYPE: str = (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )

    # Key-value heuristic
    MAX_KV_LINES: int = 120
    KV_KEY_MIN_LENGTH: int = 2
    KV_KEY_MAX_LENGTH: int = 60
    KV_PATTERN: str = r"^([^:]{2,60}):\s*(.+)$"

    # Payload validation limits
    MAX_FILE_SIZE: int = int(
        os.getenv("DOC_EXTRACTION_MAX_FILE_SIZE", str(50 * 1024 * 1024))
    )
    MIN_FILE_SIZE: int = 1

    # Leading bytes each format must start with
    FILE_SIGNATURES: Dict[str, bytes] = {
        PDF_CONTENT_TYPE: b"%PDF",
        DOCX_CONTENT_TYPE: b"PK\x03\x04",
        XLSX_CONTENT_TYPE: b"PK\x03\x04",
    }

    # Database configuration
    DATABASE_URL: str = os.getenv(
        "DOC_EXTRACTION_DATABASE_URL", "sqlite:///extractions.db"
    )

    # Local byte storage
    STORAGE_ROOT: str = os.getenv("DOC_EXTRACTION_STORAGE_ROOT", "./storage")

    # Batch fan-out
    MAX_CONCURRENT: int = int(os.getenv("DOC_EXTRACTION_MAX_CONCURRENT", "5"))
