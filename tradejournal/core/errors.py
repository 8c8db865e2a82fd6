"""
Error types raised by the persistence layer.

Stores never swallow failures; SQLAlchemy exceptions are wrapped in one
of these and re-raised with the original attached as __cause__.
"""

from typing import Optional


class StoreError(Exception):
    """Base class for all store failures."""


class NotConnected(StoreError):
    """The database has not been connected yet (or was closed)."""

    def __init__(self, message: str = "Database is not connected"):
        super().__init__(message)


class WriteFailed(StoreError):
    """An insert or upsert was rejected by the database."""


class ReadFailed(StoreError):
    """A query failed (malformed statement, schema mismatch)."""


class InvalidInput(StoreError):
    """A field could not be parsed or is outside its allowed values."""

    def __init__(self, field: str, value: object, reason: str = "invalid value"):
        self.field = field
        self.value = value
        super().__init__(f"{field}: {reason} ({value!r})")


class UnknownAccount(StoreError):
    """A trade referenced an account id that does not exist."""

    def __init__(self, account_id: Optional[int]):
        self.account_id = account_id
        super().__init__(f"Account #{account_id} does not exist")


class NoAccountSelected(Exception):
    """A trade was logged before any account was selected."""

    def __init__(self, message: str = "Please select an account first"):
        super().__init__(message)
