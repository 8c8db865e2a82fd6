"""
Tests for the database handle and error wrapping.
"""

import pytest
from sqlalchemy import inspect, text

from tradejournal.core.config import Config
from tradejournal.core.db import Database
from tradejournal.core.errors import NotConnected, ReadFailed, WriteFailed
from tradejournal.core.models import TradeRow, TradeType
from tradejournal.store.base import BaseStore


class TestDatabase:
    def test_connect_creates_schema(self, db):
        with db.session_scope() as session:
            tables = set(inspect(session.get_bind()).get_table_names())

        assert {"profile", "accounts", "trades"} <= tables

    def test_creates_parent_directory(self, tmp_path):
        database = Database(Config(database_path=str(tmp_path / "nested" / "j.db")))
        database.connect()
        try:
            assert (tmp_path / "nested" / "j.db").exists()
        finally:
            database.close()

    def test_parent_is_a_file(self, tmp_path):
        """Filesystem failures surface as NotConnected, not OSError."""
        (tmp_path / "afile").write_text("not a directory")
        database = Database(Config(database_path=str(tmp_path / "afile" / "j.db")))

        with pytest.raises(NotConnected) as exc_info:
            database.connect()

        assert isinstance(exc_info.value.__cause__, OSError)
        assert not database.is_connected

    def test_ping(self, db):
        assert db.ping() is True

    def test_not_connected_before_connect(self, config):
        database = Database(config)

        assert not database.is_connected
        with pytest.raises(NotConnected):
            database.get_session()

    def test_close_is_idempotent(self, db):
        db.close()
        db.close()

        assert not db.is_connected

    def test_context_manager(self, config):
        with Database(config) as database:
            assert database.is_connected

        assert not database.is_connected

    def test_foreign_keys_enforced(self, db):
        with db.session_scope() as session:
            assert session.execute(text("PRAGMA foreign_keys")).scalar() == 1


def orphan_trade() -> TradeRow:
    return TradeRow(
        account_id=999,
        symbol="EURUSD",
        type=TradeType.BUY,
        entry_price=1.0,
        take_profit=1.1,
        stop_loss=0.9,
        lot_size=0.1,
        volume=1.0,
        profit=0.0,
        date="2026-01-01T00:00:00.000000+00:00",
    )


class TestErrorWrapping:
    def test_constraint_failure_is_write_failed(self, db):
        store = BaseStore(db)

        with pytest.raises(WriteFailed) as exc_info:
            with store.writing("save orphan") as session:
                session.add(orphan_trade())

        assert exc_info.value.__cause__ is not None

    def test_write_rolled_back(self, db):
        store = BaseStore(db)

        with pytest.raises(WriteFailed):
            with store.writing("save orphan") as session:
                session.add(orphan_trade())

        with db.session_scope() as session:
            assert session.execute(text("SELECT COUNT(*) FROM trades")).scalar() == 0

    def test_bad_query_is_read_failed(self, db):
        store = BaseStore(db)

        with pytest.raises(ReadFailed):
            with store.reading("query missing table") as session:
                session.execute(text("SELECT * FROM no_such_table"))
