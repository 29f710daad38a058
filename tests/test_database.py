"""Tests for the database module.

This module contains tests for database management functionality
including connection management, session creation, and the extraction
record repository.
"""

import json
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from doc_extraction.config import Config
from doc_extraction.database import DatabaseManager, ExtractionRepository
from doc_extraction.exceptions import DatabaseError
from doc_extraction.models import (
    ExtractedTable,
    ExtractionRecord,
    ExtractionResult,
    ExtractionStatus
)


def _success(document_id: str, text: str = "Carrier: Aetna\n",
             tenant_id: str = None) -> ExtractionRecord:
    record = ExtractionRecord(document_id=document_id, tenant_id=tenant_id)
    result = ExtractionResult(full_text=text, tables=[ExtractedTable("Table 1", [["a", "b"]])])
    record.mark_success(
        result,
        json.dumps([t.to_dict() for t in result.tables]),
        json.dumps([{"key": "Carrier", "value": "Aetna"}])
    )
    return record


class TestDatabaseManager:
    """Test cases for DatabaseManager class."""

    def test_init_default_url(self):
        """Test initialization with default database URL."""
        db_manager = DatabaseManager()
        assert db_manager.database_url == Config.DATABASE_URL
        assert db_manager._engine is None
        assert db_manager._session_factory is None

    def test_engine_property_lazy_initialization(self, test_db_manager):
        """Test that engine is created lazily and cached."""
        assert test_db_manager._engine is None

        engine = test_db_manager.engine
        assert engine is not None
        assert test_db_manager.engine is engine

    def test_engine_property_database_creation(self, test_db_manager):
        """Test that engine creation also creates database tables."""
        with patch('doc_extraction.database.database_manager.Base.metadata.create_all') as mock_create_all:
            engine = test_db_manager.engine
            mock_create_all.assert_called_once_with(engine)

    def test_engine_property_creation_error(self):
        """Test handling of engine creation errors."""
        with patch('doc_extraction.database.database_manager.create_engine') as mock_create_engine:
            mock_create_engine.side_effect = Exception("Database connection failed")

            db_manager = DatabaseManager("invalid://url")

            with pytest.raises(DatabaseError, match="Database initialization error"):
                _ = db_manager.engine
            assert db_manager._engine is None

    def test_sqlite_engine_configuration(self, test_db_manager):
        """Test that SQLite engines share their connection across threads."""
        with patch('doc_extraction.database.database_manager.create_engine') as mock_create_engine:
            mock_create_engine.return_value = Mock()

            _ = test_db_manager.engine

            args, kwargs = mock_create_engine.call_args
            assert args[0] == test_db_manager.database_url
            assert kwargs['connect_args']['check_same_thread'] is False
            assert kwargs['connect_args']['timeout'] == 20
            assert kwargs['echo'] is False

    def test_non_sqlite_engine_configuration(self):
        """Test that other backends get no SQLite specific arguments."""
        with patch('doc_extraction.database.database_manager.create_engine') as mock_create_engine, \
             patch('doc_extraction.database.database_manager.Base.metadata.create_all'):
            mock_create_engine.return_value = Mock()

            _ = DatabaseManager("postgresql://localhost/extractions").engine

            _, kwargs = mock_create_engine.call_args
            assert 'connect_args' not in kwargs
            assert 'poolclass' not in kwargs

    def test_create_session_factory_caching(self, test_db_manager):
        """Test that session factory is created and cached."""
        session1 = test_db_manager.create_session()
        session_factory = test_db_manager._session_factory
        session2 = test_db_manager.create_session()

        assert session_factory is not None
        assert test_db_manager._session_factory is session_factory
        assert session1 is not session2

        session1.close()
        session2.close()

    def test_dispose(self, test_db_manager):
        """Test that dispose drops the cached engine."""
        _ = test_db_manager.engine
        test_db_manager.dispose()
        assert test_db_manager._engine is None
        assert test_db_manager._session_factory is None


class TestExtractionRepository:
    """Test cases for ExtractionRepository class."""

    def test_save_and_find(self, test_repository):
        """Test that a saved record can be read back."""
        saved = test_repository.save(_success("doc-1"))

        found = test_repository.find_by_document_id("doc-1")

        assert found is not None
        assert found.id == saved.id
        assert found.status is ExtractionStatus.SUCCESS
        assert found.extracted_text == "Carrier: Aetna\n"
        assert found.tables == [ExtractedTable("Table 1", [["a", "b"]])]
        assert found.table_count == 1

    def test_saved_record_readable_after_session_close(self, test_repository):
        """Test that the returned record is usable outside the session."""
        saved = test_repository.save(_success("doc-1"))
        assert saved.to_dict()["status"] == "SUCCESS"

    def test_find_missing(self, test_repository):
        """Test that unknown documents return None."""
        assert test_repository.find_by_document_id("nope") is None

    def test_save_replaces_existing_record(self, test_repository):
        """Test last-write-wins per document."""
        first = test_repository.save(_success("doc-1", "first run"))
        failed = ExtractionRecord(document_id="doc-1")
        failed.mark_failed("PDF reading error: boom")
        second = test_repository.save(failed)

        found = test_repository.find_by_document_id("doc-1")

        assert second.id != first.id
        assert found.id == second.id
        assert found.status is ExtractionStatus.FAILED
        assert found.error_message == "PDF reading error: boom"
        assert found.extracted_text is None

    def test_save_keeps_other_documents(self, test_repository):
        """Test that saving one document leaves others untouched."""
        test_repository.save(_success("doc-1"))
        test_repository.save(_success("doc-2"))

        assert test_repository.find_by_document_id("doc-1") is not None
        assert test_repository.find_by_document_id("doc-2") is not None

    def test_find_with_tenant(self, test_repository):
        """Test that a tenant filter hides other tenants' records."""
        test_repository.save(_success("doc-1", tenant_id="tenant_acme"))

        assert test_repository.find_by_document_id("doc-1", tenant_id="tenant_acme") is not None
        assert test_repository.find_by_document_id("doc-1", tenant_id="tenant_other") is None

    def test_delete_by_document_id(self, test_repository):
        """Test removal of a document's record."""
        test_repository.save(_success("doc-1"))

        assert test_repository.delete_by_document_id("doc-1") is True
        assert test_repository.find_by_document_id("doc-1") is None
        assert test_repository.delete_by_document_id("doc-1") is False

    def test_save_database_error(self, test_repository):
        """Test handling of database errors during save."""
        with patch.object(test_repository.db_manager, 'create_session') as mock_create_session:
            mock_session = Mock()
            mock_session.commit.side_effect = SQLAlchemyError("Database error")
            mock_create_session.return_value = mock_session

            with pytest.raises(DatabaseError, match="Database save error"):
                test_repository.save(_success("doc-1"))

            mock_session.rollback.assert_called_once()
            mock_session.close.assert_called_once()

    def test_find_database_error(self, test_repository):
        """Test handling of database errors during lookup."""
        with patch.object(test_repository.db_manager, 'create_session') as mock_create_session:
            mock_session = Mock()
            mock_session.query.side_effect = SQLAlchemyError("Database error")
            mock_create_session.return_value = mock_session

            with pytest.raises(DatabaseError, match="Database query error"):
                test_repository.find_by_document_id("doc-1")

            mock_session.close.assert_called_once()
