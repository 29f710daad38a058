"""Payload validators for the document extraction pipeline.

These checks reject bytes that cannot possibly be the declared format
before a parser spends time on them.
"""

from ..config import Config
from ..exceptions import MalformedDocumentError
from ..models import ContentType

__all__ = ["DocumentValidator"]


class DocumentValidator:
    """Validates fetched document payloads.

    This class provides static methods for payload validation including
    size checks and format signature verification. Every failure raises
    MalformedDocumentError.
    """

    @staticmethod
    def validate(data: bytes, content_type: ContentType) -> None:
        """Perform all payload checks for the declared content type.

        Args:
            data: Raw document content
            content_type: Format the content claims to be

        Raises:
            MalformedDocumentError: If any validation check fails
        """
        DocumentValidator._validate_size(data)
        DocumentValidator._validate_signature(data, content_type)

    @staticmethod
    def _validate_size(data: bytes) -> None:
        """Validate payload size within acceptable limits.

        Raises:
            MalformedDocumentError: If the payload is empty or too large
        """
        if data is None or len(data) < Config.MIN_FILE_SIZE:
            raise MalformedDocumentError("Document is empty")

        if len(data) > Config.MAX_FILE_SIZE:
            raise MalformedDocumentError(
                f"Document is too large. Maximum size: {Config.MAX_FILE_SIZE // (1024*1024)}MB"
            )

    @staticmethod
    def _validate_signature(data: bytes, content_type: ContentType) -> None:
        """Validate the leading bytes of the payload.

        PDF files carry ``%PDF`` within their first kilobyte; DOCX and
        XLSX are ZIP packages and start with a local file header.

        Raises:
            MalformedDocumentError: If the signature does not match
        """
        signature = Config.FILE_SIGNATURES[content_type.value]
        if content_type is ContentType.PDF:
            matches = signature in data[:1024]
        else:
            matches = data.startswith(signature)
        if not matches:
            raise MalformedDocumentError(
                f"Document is not a valid {content_type.name} file"
            )
