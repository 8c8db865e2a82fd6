"""
Shared fixtures: a fresh SQLite file per test.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tradejournal.core.config import Config
from tradejournal.core.db import Database
from tradejournal.core.records import NewAccount, NewTrade
from tradejournal.store import AccountStore, ProfileStore, TradeStore


BASE_DATE = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def config(tmp_path):
    return Config(
        database_path=str(tmp_path / "journal.db"),
        export_dir=str(tmp_path / "exports"),
    )


@pytest.fixture
def db(config):
    database = Database(config)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def profile_store(db):
    return ProfileStore(db)


@pytest.fixture
def account_store(db):
    return AccountStore(db)


@pytest.fixture
def trade_store(db):
    return TradeStore(db)


def make_account(**overrides) -> NewAccount:
    fields = dict(
        name="Main",
        type="live",
        initial_balance=1000,
        broker="X",
        leverage="1:50",
        instruments="EURUSD,XAUUSD",
    )
    fields.update(overrides)
    return NewAccount(**fields)


def make_trade(account_id: int, minutes: int = 0, **overrides) -> NewTrade:
    fields = dict(
        account_id=account_id,
        symbol="EURUSD",
        type="buy",
        entry_price=1.1000,
        take_profit=1.1100,
        stop_loss=1.0950,
        lot_size=0.5,
        volume=50000,
        profit=50.0,
        date=BASE_DATE + timedelta(minutes=minutes),
    )
    fields.update(overrides)
    return NewTrade(**fields)


@pytest.fixture
def account_id(account_store):
    return account_store.insert_account(make_account())
