"""Processors module for the document extraction pipeline.

This module contains processing classes that orchestrate extraction
attempts: the synchronous processor, its asyncio facade, and the
concurrent batch extractor.
"""

from .extraction_processor import DocumentExtractionProcessor
from .async_extraction_processor import AsyncExtractionProcessor
from .batch_extractor import AsyncBatchExtractor, ProgressEvent, ProgressCallback, ProgressEventType

__all__ = ["DocumentExtractionProcessor", "AsyncExtractionProcessor", "AsyncBatchExtractor", "ProgressEvent", "ProgressCallback", "ProgressEventType"]
