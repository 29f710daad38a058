"""Asynchronous batch extractor for the document extraction pipeline.

This module contains the AsyncBatchExtractor class that extracts many
documents concurrently, with bounded parallelism and progress events.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from langfuse import observe

from ..config import Config
from ..models import DocumentDescriptor, ExtractionRecord, ExtractionStatus
from .async_extraction_processor import AsyncExtractionProcessor

__all__ = ["AsyncBatchExtractor", "ProgressEvent", "ProgressEventType", "ProgressCallback"]

logger = logging.getLogger(__name__)


class ProgressEventType(Enum):
    """Types of progress events."""
    BATCH_STARTED = "batch_started"
    DOCUMENT_STARTED = "document_started"
    DOCUMENT_COMPLETED = "document_completed"
    DOCUMENT_FAILED = "document_failed"
    BATCH_COMPLETED = "batch_completed"


@dataclass
class ProgressEvent:
    """Progress event data structure."""
    event_type: ProgressEventType
    document_id: Optional[str] = None
    current_document: int = 0
    total_documents: int = 0
    message: str = ""
    error: Optional[str] = None


class ProgressCallback(Protocol):
    """Protocol for progress callback functions."""
    def __call__(self, event: ProgressEvent) -> None:
        """Handle progress event."""
        ...


class AsyncBatchExtractor:
    """Extracts multiple documents concurrently.

    Each document goes through its own extraction attempt, so a bad
    document yields a FAILED record and never aborts the batch. Results
    are returned in input order.

    Attributes:
        processor: AsyncExtractionProcessor used for every document
        max_concurrent: Maximum number of attempts running at once
        progress_callback: Optional callback for progress updates
    """

    def __init__(
        self,
        processor: AsyncExtractionProcessor,
        max_concurrent: int = Config.MAX_CONCURRENT,
        progress_callback: Optional[ProgressCallback] = None
    ) -> None:
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self.processor: AsyncExtractionProcessor = processor
        self.max_concurrent: int = max_concurrent
        self.progress_callback: Optional[ProgressCallback] = progress_callback

    def _emit_progress(self, event: ProgressEvent) -> None:
        """Emit progress event to callback if available."""
        if self.progress_callback:
            self.progress_callback(event)

    async def _extract_one(
        self,
        semaphore: asyncio.Semaphore,
        descriptor: DocumentDescriptor,
        tenant_id: Optional[str],
        index: int,
        total: int
    ) -> ExtractionRecord:
        async with semaphore:
            document_id = str(descriptor.document_id)
            self._emit_progress(ProgressEvent(
                event_type=ProgressEventType.DOCUMENT_STARTED,
                document_id=document_id,
                current_document=index + 1,
                total_documents=total,
                message=f"Starting extraction of {document_id}"
            ))

            record = await self.processor.extract_document_async(descriptor, tenant_id)

            if record.status is ExtractionStatus.SUCCESS:
                self._emit_progress(ProgressEvent(
                    event_type=ProgressEventType.DOCUMENT_COMPLETED,
                    document_id=document_id,
                    current_document=index + 1,
                    total_documents=total,
                    message=f"Successfully extracted {document_id}"
                ))
            else:
                self._emit_progress(ProgressEvent(
                    event_type=ProgressEventType.DOCUMENT_FAILED,
                    document_id=document_id,
                    current_document=index + 1,
                    total_documents=total,
                    message=f"Failed to extract {document_id}",
                    error=record.error_message
                ))
            return record

    @observe(name="async_batch_document_extraction")
    async def extract_batch(
        self,
        descriptors: List[DocumentDescriptor],
        tenant_id: Optional[str] = None
    ) -> List[ExtractionRecord]:
        """Extract documents concurrently.

        Args:
            descriptors: Documents to extract
            tenant_id: Owning tenant of every document in the batch

        Returns:
            One record per descriptor, in input order

        Raises:
            DatabaseError: If a record cannot be saved
        """
        total = len(descriptors)
        semaphore = asyncio.Semaphore(self.max_concurrent)

        self._emit_progress(ProgressEvent(
            event_type=ProgressEventType.BATCH_STARTED,
            total_documents=total,
            message=f"Starting batch extraction of {total} documents"
        ))

        records: List[ExtractionRecord] = await asyncio.gather(*[
            self._extract_one(semaphore, descriptor, tenant_id, index, total)
            for index, descriptor in enumerate(descriptors)
        ])

        successful_count = sum(1 for r in records if r.status is ExtractionStatus.SUCCESS)
        failed_count = total - successful_count
        logger.info("Batch extraction finished: %d successful, %d failed", successful_count, failed_count)

        self._emit_progress(ProgressEvent(
            event_type=ProgressEventType.BATCH_COMPLETED,
            total_documents=total,
            message=f"Batch extraction completed. {successful_count} successful, {failed_count} failed"
        ))

        return records
