"""
Database session management.

Provides explicit ORM session handling with SQLAlchemy over a single
SQLite engine held for the lifetime of the process.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from tradejournal.core.config import Config
from tradejournal.core.errors import NotConnected, ReadFailed
from tradejournal.core.models import Base

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(config: Config) -> Engine:
    """
    Create SQLAlchemy engine.

    Uses SQLite with WAL mode and foreign keys enforced.
    """
    db_path = Path(config.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _enable_foreign_keys)

    with engine.connect() as conn:
        conn.execute(text("PRAGMA journal_mode=WAL"))
        conn.commit()

    return engine


def init_db(engine: Engine) -> None:
    """
    Initialize database schema.

    Creates all tables if they don't exist.
    """
    Base.metadata.create_all(engine)


class Database:
    """
    The journal's single database handle.

    Call connect() once at startup; every store shares this object.
    Until then (or after close()) any session request raises
    NotConnected.
    """

    def __init__(self, config: Config):
        self.config = config
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def connect(self) -> None:
        """Open the database file and create tables if needed."""
        if self.is_connected:
            return

        engine = None
        try:
            engine = get_engine(self.config)
            init_db(engine)
        except (SQLAlchemyError, OSError) as e:
            if engine is not None:
                engine.dispose()
            logger.error(f"Failed to open database {self.config.database_path}: {e}")
            raise NotConnected(f"Could not open {self.config.database_path}: {e}") from e

        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        logger.info(f"Database connected: {self.config.database_path}")

    def close(self) -> None:
        """Dispose of the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database closed")

    def get_session(self) -> Session:
        """
        Create a new database session.

        Remember to close or use session_scope().
        """
        if self._session_factory is None:
            raise NotConnected()
        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Provide transactional scope around a series of operations.

        Usage:
            with db.session_scope() as session:
                session.add(row)
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        """Run a trivial query to confirm the connection works."""
        try:
            with self.session_scope() as session:
                return session.execute(text("SELECT 1")).scalar() == 1
        except SQLAlchemyError as e:
            raise ReadFailed(f"Database ping failed: {e}") from e

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
