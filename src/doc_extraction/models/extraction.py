"""Database model for persisted extraction records.

This module contains the SQLAlchemy model that stores the outcome of
one extraction attempt per document, successful or not.
"""

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import declarative_base

from .content_types import ExtractionStatus
from .results import ExtractedTable, ExtractionResult, KeyValuePair

__all__ = ["Base", "ExtractionRecord"]

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExtractionRecord(Base):
    """SQLAlchemy model for storing document extraction outcomes.

    A record is created in PENDING state and moved to exactly one of the
    terminal states by ``mark_success`` or ``mark_failed``. There is one
    record per document; re-running extraction replaces it.

    Attributes:
        id: Random UUID string identifying this attempt
        document_id: Identifier of the source document (unique)
        tenant_id: Owning tenant, passed explicitly by the caller
        status: PENDING, SUCCESS or FAILED
        extracted_text: Full text of the document (SUCCESS only)
        tables_json: JSON list of ``{name, rows}`` objects (SUCCESS only)
        key_values_json: JSON list of ``{key, value}`` objects (SUCCESS only)
        page_count: Page count, 0 for non-PDF (SUCCESS only)
        sheet_count: Sheet count, 0 for non-XLSX (SUCCESS only)
        character_count: Length of extracted_text (SUCCESS only)
        table_count: Number of extracted tables (SUCCESS only)
        error_message: Description of the fault (FAILED only)
        extracted_at: Completion or failure time
    """
    __tablename__ = "document_extractions"

    id: str = Column(String(36), primary_key=True)
    document_id: str = Column(String(255), nullable=False, unique=True, index=True)
    tenant_id: Optional[str] = Column(String(255), nullable=True, index=True)
    status = Column(
        Enum(ExtractionStatus, name="extraction_status", native_enum=False),
        nullable=False
    )
    extracted_text: Optional[str] = Column(Text, nullable=True)
    tables_json: Optional[str] = Column(Text, nullable=True)
    key_values_json: Optional[str] = Column(Text, nullable=True)
    page_count: Optional[int] = Column(Integer, nullable=True)
    sheet_count: Optional[int] = Column(Integer, nullable=True)
    character_count: Optional[int] = Column(Integer, nullable=True)
    table_count: Optional[int] = Column(Integer, nullable=True)
    error_message: Optional[str] = Column(Text, nullable=True)
    extracted_at = Column(DateTime(timezone=True), nullable=True)

    def __init__(self, document_id: Any, tenant_id: Optional[str] = None, **kwargs: Any) -> None:
        kwargs.setdefault("id", str(uuid.uuid4()))
        kwargs.setdefault("status", ExtractionStatus.PENDING)
        super().__init__(document_id=str(document_id), tenant_id=tenant_id, **kwargs)

    def mark_success(self, result: ExtractionResult, tables_json: str,
                     key_values_json: str) -> None:
        """Populate the record from a finished extraction.

        Args:
            result: Extractor output
            tables_json: Serialized ``result.tables``
            key_values_json: Serialized key-value pairs
        """
        self.extracted_text = result.full_text
        self.tables_json = tables_json
        self.key_values_json = key_values_json
        self.page_count = result.page_count
        self.sheet_count = result.sheet_count
        self.character_count = result.character_count
        self.table_count = result.table_count
        self.error_message = None
        self.status = ExtractionStatus.SUCCESS
        self.extracted_at = _utcnow()

    def mark_failed(self, message: str) -> None:
        """Move the record to FAILED and clear any data fields.

        Args:
            message: Human-readable description of the fault
        """
        self.extracted_text = None
        self.tables_json = None
        self.key_values_json = None
        self.page_count = None
        self.sheet_count = None
        self.character_count = None
        self.table_count = None
        self.error_message = message or "Extraction failed"
        self.status = ExtractionStatus.FAILED
        self.extracted_at = _utcnow()

    @property
    def tables(self) -> List[ExtractedTable]:
        if not self.tables_json:
            return []
        return [ExtractedTable(name=t["name"], rows=t["rows"]) for t in json.loads(self.tables_json)]

    @property
    def key_values(self) -> List[KeyValuePair]:
        if not self.key_values_json:
            return []
        return [KeyValuePair(key=kv["key"], value=kv["value"]) for kv in json.loads(self.key_values_json)]

    def to_dict(self) -> Dict[str, Any]:
        """Render the record as JSON-compatible data.

        Data fields appear only for SUCCESS records and ``errorMessage``
        only for FAILED ones.

        Returns:
            Dictionary with camelCase keys
        """
        out: Dict[str, Any] = {
            "id": self.id,
            "documentId": self.document_id,
            "status": self.status.value,
        }
        if self.status is ExtractionStatus.SUCCESS:
            out.update({
                "extractedText": self.extracted_text,
                "tables": json.loads(self.tables_json or "[]"),
                "keyValues": json.loads(self.key_values_json or "[]"),
                "pageCount": self.page_count,
                "sheetCount": self.sheet_count,
                "characterCount": self.character_count,
                "tableCount": self.table_count,
            })
        elif self.status is ExtractionStatus.FAILED:
            out["errorMessage"] = self.error_message
        out["extractedAt"] = self.extracted_at.isoformat() if self.extracted_at else None
        return out

    def __repr__(self) -> str:
        return f"<ExtractionRecord document_id={self.document_id!r} status={self.status}>"
