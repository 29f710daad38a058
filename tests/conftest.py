"""Pytest configuration and fixtures for the document extraction test suite.

This module provides shared fixtures and test configuration for all test
modules. Sample documents are generated in memory with python-docx and
openpyxl; the PDF sample is assembled by hand with a valid xref table.
"""

import io
import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import Generator
from unittest.mock import Mock

import pytest
from docx import Document
from openpyxl import Workbook

from doc_extraction import (
    DatabaseManager,
    DocumentDescriptor,
    DocumentExtractionProcessor,
    ExtractionRepository,
    InMemoryByteSource,
    KeyValueExtractor
)

from .sample_documents import DOCX_HEADER, DOCX_ROWS, PDF_PAGES, build_pdf


@pytest.fixture
def temp_db_url(tmp_path: Path) -> str:
    """Database URL of a fresh SQLite file for each test."""
    return f"sqlite:///{tmp_path / 'extractions.db'}"


@pytest.fixture
def test_db_manager(temp_db_url: str) -> Generator[DatabaseManager, None, None]:
    """Create a DatabaseManager instance with a temporary database."""
    manager = DatabaseManager(database_url=temp_db_url)
    yield manager
    manager.dispose()


@pytest.fixture
def test_repository(test_db_manager: DatabaseManager) -> ExtractionRepository:
    """Create an ExtractionRepository with a test database."""
    return ExtractionRepository(test_db_manager)


@pytest.fixture
def byte_source() -> InMemoryByteSource:
    """Empty in-memory byte source."""
    return InMemoryByteSource()


@pytest.fixture
def processor(byte_source: InMemoryByteSource,
              test_repository: ExtractionRepository) -> DocumentExtractionProcessor:
    """Processor wired to the in-memory byte source and the test database."""
    return DocumentExtractionProcessor(byte_source, test_repository)


@pytest.fixture
def mock_repository() -> Mock:
    """Repository double whose save returns the record it was given."""
    repository = Mock(spec=ExtractionRepository)
    repository.save.side_effect = lambda record: record
    return repository


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Two-page PDF with key-value lines on the first page."""
    return build_pdf(PDF_PAGES)


@pytest.fixture
def sample_docx_bytes() -> bytes:
    """DOCX with four paragraphs, a 4x4 table and a 2x2 table."""
    document = Document()
    document.add_paragraph("Carrier: Aetna")
    document.add_paragraph("Due Date: January 2025")
    document.add_paragraph("")
    document.add_paragraph("Benefits overview")

    table = document.add_table(rows=4, cols=4)
    for r, values in enumerate([DOCX_HEADER] + DOCX_ROWS):
        for c, value in enumerate(values):
            table.cell(r, c).text = value

    contacts = document.add_table(rows=2, cols=2)
    contacts.cell(0, 0).text = "  Name  "
    contacts.cell(0, 1).text = "Email"
    contacts.cell(1, 0).text = "John Smith"
    contacts.cell(1, 1).text = "john.smith@example.com "

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def empty_docx_bytes() -> bytes:
    """DOCX without paragraphs or tables."""
    buffer = io.BytesIO()
    Document().save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_xlsx_bytes() -> bytes:
    """Workbook with the sheets "Plan Details" and "Pricing"."""
    workbook = Workbook()
    details = workbook.active
    details.title = "Plan Details"
    details.append(["Plan", "Deductible", "Active"])
    details.append(["PPO", 500, True])
    details.append(["HMO", 1250.5, False])

    pricing = workbook.create_sheet("Pricing")
    pricing["A1"] = "Tier"
    pricing["B1"] = "Premium"
    pricing["A2"] = "Employee"
    pricing["B2"] = 420
    pricing["B3"] = "=SUM(B2:B2)"

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def xlsx_with_empty_sheet_bytes() -> bytes:
    """Workbook with an empty sheet between two populated ones."""
    workbook = Workbook()
    first = workbook.active
    first.title = "Summary"
    first["A1"] = "Effective Date"
    first["B1"] = datetime(2025, 1, 15)
    workbook.create_sheet("Blank")
    last = workbook.create_sheet("Notes")
    last["A1"] = "Renewal: pending"

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def sample_text_content() -> str:
    """Text as it comes out of an RFP cover page."""
    return "Carrier: Aetna\nDue Date: January 2025\nNotes\nX: \n"


@pytest.fixture
def key_value_extractor() -> KeyValueExtractor:
    """Create a KeyValueExtractor instance for testing."""
    return KeyValueExtractor()


@pytest.fixture
def make_descriptor():
    """Factory for descriptors with a fresh document id."""
    def _make(content_type: str, storage_locator: str = "tenant_test/doc") -> DocumentDescriptor:
        return DocumentDescriptor(
            document_id=str(uuid.uuid4()),
            content_type=content_type,
            storage_locator=storage_locator
        )
    return _make


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Disable Langfuse tracing for the duration of each test."""
    original = os.environ.get("LANGFUSE_TRACING_ENABLED")
    os.environ["LANGFUSE_TRACING_ENABLED"] = "false"

    yield

    if original is not None:
        os.environ["LANGFUSE_TRACING_ENABLED"] = original
    else:
        del os.environ["LANGFUSE_TRACING_ENABLED"]

