"""Validators module for the document extraction pipeline.

This module contains payload checks run before a format extractor
is invoked: size limits and format signatures.
"""

from .validators import DocumentValidator

__all__ = ["DocumentValidator"]
