"""Extraction repository for the document extraction pipeline.

This module contains the ExtractionRepository class for persisting and
reading extraction records, one per document.
"""

import threading
from typing import Any, Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from ..models import ExtractionRecord
from ..exceptions import DatabaseError
from .database_manager import DatabaseManager

__all__ = ["ExtractionRepository"]


class ExtractionRepository:
    """Repository pattern implementation for extraction record persistence.

    Saving is last-write-wins per document: an existing record for the
    same document is replaced within the same transaction.

    Attributes:
        db_manager: DatabaseManager instance for database operations
    """

    def __init__(self, db_manager: DatabaseManager) -> None:
        self.db_manager: DatabaseManager = db_manager
        # SQLite serializes writers; other backends rely on the unique index
        self._write_lock = threading.Lock()

    def save(self, record: ExtractionRecord) -> ExtractionRecord:
        """Insert or replace the record for ``record.document_id``.

        Args:
            record: Extraction record in a terminal state

        Returns:
            The saved record

        Raises:
            DatabaseError: If database operation fails
        """
        with self._write_lock:
            session: Session = self.db_manager.create_session()
            try:
                session.query(ExtractionRecord).filter(
                    ExtractionRecord.document_id == record.document_id,
                    ExtractionRecord.id != record.id
                ).delete(synchronize_session=False)
                record = session.merge(record)
                session.commit()
                return record
            except SQLAlchemyError as e:
                session.rollback()
                raise DatabaseError(f"Database save error: {str(e)}")
            finally:
                session.close()

    def find_by_document_id(self, document_id: Any,
                            tenant_id: Optional[str] = None) -> Optional[ExtractionRecord]:
        """Fetch the extraction record of a document.

        Args:
            document_id: Identifier of the source document
            tenant_id: When given, only a record owned by this tenant matches

        Returns:
            The record, or None if the document was never extracted

        Raises:
            DatabaseError: If database operation fails
        """
        session: Session = self.db_manager.create_session()
        try:
            query = session.query(ExtractionRecord).filter(
                ExtractionRecord.document_id == str(document_id)
            )
            if tenant_id is not None:
                query = query.filter(ExtractionRecord.tenant_id == tenant_id)
            return query.one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database query error: {str(e)}")
        finally:
            session.close()

    def delete_by_document_id(self, document_id: Any) -> bool:
        """Remove the extraction record of a deleted document.

        Returns:
            True if a record was removed

        Raises:
            DatabaseError: If database operation fails
        """
        session: Session = self.db_manager.create_session()
        try:
            deleted = session.query(ExtractionRecord).filter(
                ExtractionRecord.document_id == str(document_id)
            ).delete(synchronize_session=False)
            session.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            session.rollback()
            raise DatabaseError(f"Database delete error: {str(e)}")
        finally:
            session.close()
