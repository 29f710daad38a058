"""Extraction processor for the document extraction pipeline.

This module contains the DocumentExtractionProcessor class that runs one
extraction attempt end to end: content type dispatch, byte fetch,
payload validation, format extraction, key-value extraction, and
persistence of the resulting record.
"""

import json
import logging
from typing import List, Optional, Tuple

from langfuse import observe

from ..database import ExtractionRepository
from ..extractors import KeyValueExtractor, get_extractor
from ..exceptions import SerializationError
from ..models import (
    ContentType,
    DocumentDescriptor,
    ExtractionRecord,
    ExtractionResult,
    KeyValuePair
)
from ..storage import ByteSource
from ..validators import DocumentValidator

__all__ = ["DocumentExtractionProcessor"]

logger = logging.getLogger(__name__)


class DocumentExtractionProcessor:
    """Main service class for document extraction attempts.

    ``extract_document`` never raises for faults caused by the document
    or its storage: unsupported content types, unreadable bytes, parser
    failures and serialization failures all produce a FAILED record.
    Only contract violations and record store failures propagate.

    The processor holds no per-attempt state, so one instance may serve
    concurrent calls from several threads.

    Attributes:
        byte_source: Source of stored document bytes
        repository: Store the finished record is saved to
        validator: Payload checks run before parsing
        key_value_extractor: Heuristic run over the extracted text
    """

    def __init__(self, byte_source: ByteSource, repository: ExtractionRepository,
                 validator: Optional[DocumentValidator] = None) -> None:
        self.byte_source: ByteSource = byte_source
        self.repository: ExtractionRepository = repository
        self.validator: DocumentValidator = validator or DocumentValidator()
        self.key_value_extractor: KeyValueExtractor = KeyValueExtractor()

    @observe(name="document_extraction")
    def extract_document(self, descriptor: DocumentDescriptor,
                         tenant_id: Optional[str] = None) -> ExtractionRecord:
        """Run one extraction attempt and persist its outcome.

        Args:
            descriptor: Document to extract
            tenant_id: Owning tenant, stored on the record

        Returns:
            The saved record, in SUCCESS or FAILED state

        Raises:
            ValueError: If descriptor is None
            DatabaseError: If the record cannot be saved
        """
        if descriptor is None:
            raise ValueError("descriptor must not be None")

        logger.info("Starting extraction for document: %s", descriptor.document_id)
        record = ExtractionRecord(document_id=descriptor.document_id, tenant_id=tenant_id)

        try:
            content_type = ContentType.parse(descriptor.content_type)
            data: bytes = self.byte_source.fetch(descriptor.storage_locator)
            result, key_values = self.extract_result(data, content_type)
            tables_json, key_values_json = self._serialize(result, key_values)
            record.mark_success(result, tables_json, key_values_json)
            logger.info(
                "Extraction completed successfully for document: %s (%d characters, %d tables, %d key-values)",
                descriptor.document_id, result.character_count, result.table_count, len(key_values)
            )
        except Exception as e:
            logger.error("Extraction failed for document: %s", descriptor.document_id, exc_info=True)
            record.mark_failed(self._describe(e))

        return self.repository.save(record)

    def extract_result(self, data: bytes,
                       content_type: ContentType) -> Tuple[ExtractionResult, List[KeyValuePair]]:
        """Extract a payload without touching storage or the record store.

        Args:
            data: Raw document content
            content_type: Declared format of the content

        Returns:
            Tuple of the extractor result and the key-value pairs found in its text

        Raises:
            MalformedDocumentError: If the content is not a valid instance of its format
        """
        self.validator.validate(data, content_type)
        result: ExtractionResult = get_extractor(content_type).extract(data)
        key_values: List[KeyValuePair] = self.key_value_extractor.extract(result.full_text)
        return result, key_values

    @staticmethod
    def _serialize(result: ExtractionResult,
                   key_values: List[KeyValuePair]) -> Tuple[str, str]:
        try:
            tables_json = json.dumps([t.to_dict() for t in result.tables], ensure_ascii=False)
            key_values_json = json.dumps([kv.to_dict() for kv in key_values], ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize extraction output: {str(e)}")
        return tables_json, key_values_json

    @staticmethod
    def _describe(error: Exception) -> str:
        message = str(error).strip()
        return message or error.__class__.__name__
