"""
Shared plumbing for the stores.

Each store is a stateless wrapper over the process-wide Database.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tradejournal.core.db import Database
from tradejournal.core.errors import ReadFailed, WriteFailed

logger = logging.getLogger(__name__)


class BaseStore:
    """Base class giving stores a write scope and a read scope."""

    def __init__(self, db: Database):
        self.db = db

    @contextmanager
    def writing(self, action: str) -> Generator[Session, None, None]:
        """
        Session scope for one write.

        SQLAlchemy failures surface as WriteFailed. NotConnected and
        InvalidInput pass through untouched.
        """
        try:
            with self.db.session_scope() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action}: {e}")
            raise WriteFailed(f"Failed to {action}: {e}") from e

    @contextmanager
    def reading(self, action: str) -> Generator[Session, None, None]:
        """Session scope for one query; failures surface as ReadFailed."""
        try:
            with self.db.session_scope() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action}: {e}")
            raise ReadFailed(f"Failed to {action}: {e}") from e
