"""Test package for the document extraction pipeline.

This package contains unit tests for all components of the pipeline
including format extractors, the key-value heuristic, payload
validation, storage, database operations, and processors.

Test Structure:
- conftest.py: Shared fixtures and test configuration
- sample_documents.py: Sample content and the PDF builder
- test_extractors.py: Tests for PDF, DOCX and XLSX extraction
- test_key_value_extractor.py: Tests for the key-value heuristic
- test_validators.py: Tests for payload validation
- test_models.py: Tests for content types and extraction records
- test_storage.py: Tests for byte sources
- test_database.py: Tests for database operations
- test_processors.py: Tests for the extraction workflow
- test_async_processors.py: Tests for async and batch extraction

Usage:
    Run all tests: pytest
    Run specific module: pytest tests/test_extractors.py
    Run with coverage: pytest --cov=src/doc_extraction
"""
