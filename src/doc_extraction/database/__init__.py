"""Database module for the document extraction pipeline.

This module contains database management classes including connection
management, session creation, and the repository that persists
extraction records.
"""

from .database_manager import DatabaseManager
from .extraction_repository import ExtractionRepository

__all__ = ["DatabaseManager", "ExtractionRepository"]
