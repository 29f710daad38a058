"""Content type and extraction status enumerations."""

from enum import Enum

from ..config import Config
from ..exceptions import UnsupportedFormatError

__all__ = ["ContentType", "ExtractionStatus"]


class ContentType(Enum):
    """The closed set of formats the pipeline can extract."""
    PDF = Config.PDF_CONTENT_TYPE
    DOCX = Config.DOCX_CONTENT_TYPE
    XLSX = Config.XLSX_CONTENT_TYPE

    @classmethod
    def parse(cls, mime_type: str) -> "ContentType":
        """Resolve a declared MIME string to a supported content type.

        Only the exact MIME strings of the three formats are accepted.
        Variants in letter case or with parameters such as
        ``; charset=utf-8`` are rejected like any other unknown type.

        Args:
            mime_type: Content type declared for the stored document

        Returns:
            Matching ContentType member

        Raises:
            UnsupportedFormatError: If the type is not PDF, DOCX or XLSX
        """
        for member in cls:
            if member.value == mime_type:
                return member
        raise UnsupportedFormatError(f"Unsupported content type: {mime_type}")


class ExtractionStatus(Enum):
    """Outcome of one extraction attempt.

    PENDING only exists between record construction and the end of the
    attempt; callers always receive SUCCESS or FAILED.
    """
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
