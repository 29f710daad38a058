"""Storage module for the document extraction pipeline.

This module contains the byte source contract and the implementations
used to fetch stored document content.
"""

from .byte_source import ByteSource, InMemoryByteSource, LocalFileStorage

__all__ = ["ByteSource", "InMemoryByteSource", "LocalFileStorage"]
