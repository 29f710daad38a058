"""Asynchronous extraction processor for the document extraction pipeline.

This module contains the AsyncExtractionProcessor class that runs
extraction attempts in the default thread pool so that they do not
block the event loop.
"""

import asyncio
from typing import List, Optional, Tuple

from ..models import ContentType, DocumentDescriptor, ExtractionRecord, ExtractionResult, KeyValuePair
from .extraction_processor import DocumentExtractionProcessor

__all__ = ["AsyncExtractionProcessor"]


class AsyncExtractionProcessor:
    """Asynchronous facade over DocumentExtractionProcessor.

    Parsing is CPU bound and fetching and saving block on I/O, so the
    whole attempt is moved to a worker thread with ``asyncio.to_thread``.
    Cancelling the awaiting task does not interrupt an attempt already
    running in its thread.

    Attributes:
        processor: Synchronous processor doing the actual work
    """

    def __init__(self, processor: DocumentExtractionProcessor) -> None:
        self.processor: DocumentExtractionProcessor = processor

    async def extract_document_async(self, descriptor: DocumentDescriptor,
                                     tenant_id: Optional[str] = None) -> ExtractionRecord:
        """Run one extraction attempt in a worker thread.

        Args:
            descriptor: Document to extract
            tenant_id: Owning tenant, stored on the record

        Returns:
            The saved record, in SUCCESS or FAILED state
        """
        return await asyncio.to_thread(self.processor.extract_document, descriptor, tenant_id)

    async def extract_result_async(
        self,
        data: bytes,
        content_type: ContentType
    ) -> Tuple[ExtractionResult, List[KeyValuePair]]:
        """Extract a payload in a worker thread without persisting anything."""
        return await asyncio.to_thread(self.processor.extract_result, data, content_type)
