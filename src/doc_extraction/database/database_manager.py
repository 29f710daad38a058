"""Database manager for the document extraction pipeline.

This module contains the DatabaseManager class for handling database
connections, session creation, and database initialization.
"""

from typing import Any, Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..config import Config
from ..models import Base
from ..exceptions import DatabaseError

__all__ = ["DatabaseManager"]


class DatabaseManager:
    """Manages database connections and session creation.

    The engine is created on first use and the schema is created with
    it. SQLite URLs get a connection shared across threads so that
    concurrent extractions can write through the same manager.

    Attributes:
        database_url: SQLAlchemy database URL
        _engine: Cached SQLAlchemy engine instance
        _session_factory: Cached sessionmaker factory
    """

    def __init__(self, database_url: str = Config.DATABASE_URL) -> None:
        self.database_url: str = database_url
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        """Get or create the SQLAlchemy engine.

        Returns:
            SQLAlchemy engine instance

        Raises:
            DatabaseError: If engine creation or schema creation fails
        """
        if self._engine is None:
            try:
                kwargs: Dict[str, Any] = {"echo": False}
                if self.database_url.startswith("sqlite"):
                    kwargs["connect_args"] = {
                        "check_same_thread": False,
                        "timeout": 20
                    }
                    kwargs["poolclass"] = StaticPool
                self._engine = create_engine(self.database_url, **kwargs)
                Base.metadata.create_all(self._engine)
            except Exception as e:
                self._engine = None
                raise DatabaseError(f"Database initialization error: {str(e)}")
        return self._engine

    def create_session(self) -> Session:
        """Create a new database session.

        Sessions keep attribute values after commit so that saved records
        can be returned to callers once the session is closed.

        Returns:
            SQLAlchemy Session instance
        """
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._session_factory()

    def dispose(self) -> None:
        """Close all pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
