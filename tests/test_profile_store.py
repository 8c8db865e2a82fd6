"""
Unit tests for the profile store.

The profile is a singleton: saving replaces it, never accumulates.
"""

import pytest
from sqlalchemy import func, select

from tradejournal.core.config import Config
from tradejournal.core.db import Database
from tradejournal.core.errors import InvalidInput, NotConnected
from tradejournal.core.models import ProfileRow
from tradejournal.core.records import Profile
from tradejournal.store import AccountStore, ProfileStore, TradeStore

from conftest import make_trade


class TestFetchProfile:
    """Reading the profile."""

    def test_first_run_returns_none(self, profile_store):
        """No profile saved yet is a normal result, not an error."""
        assert profile_store.fetch_profile() is None

    def test_fetch_after_upsert(self, profile_store):
        """Fetch returns exactly what was saved."""
        profile_store.upsert_profile("Alice", "USD")

        profile = profile_store.fetch_profile()

        assert profile.name == "Alice"
        assert profile.currency == "USD"

    def test_vestigial_fields_default_empty(self, profile_store):
        """email, experience and timezone are stored as empty strings."""
        profile_store.upsert_profile("Alice", "USD")

        assert profile_store.fetch_profile() == Profile(
            name="Alice", currency="USD", email="", experience="", timezone=""
        )

    def test_optional_fields_settable(self, profile_store):
        profile_store.upsert_profile(
            "Alice", "EUR", email="a@example.com", experience="beginner", timezone="UTC"
        )

        profile = profile_store.fetch_profile()
        assert profile.email == "a@example.com"
        assert profile.experience == "beginner"
        assert profile.timezone == "UTC"


class TestUpsertProfile:
    """Writing the profile."""

    def test_second_upsert_replaces_first(self, profile_store, db):
        """Only the latest profile is retrievable and only one row exists."""
        profile_store.upsert_profile("Alice", "USD", email="a@example.com")
        profile_store.upsert_profile("Bob", "GBP")

        profile = profile_store.fetch_profile()
        assert profile.name == "Bob"
        assert profile.currency == "GBP"
        # Full replace, not patch
        assert profile.email == ""

        with db.session_scope() as session:
            count = session.scalar(select(func.count(ProfileRow.id)))
        assert count == 1

    def test_idempotent(self, profile_store):
        profile_store.upsert_profile("Alice", "USD")
        first = profile_store.fetch_profile()
        profile_store.upsert_profile("Alice", "USD")

        assert profile_store.fetch_profile() == first

    @pytest.mark.parametrize("name,currency", [("", "USD"), ("  ", "USD"), ("Alice", "")])
    def test_blank_fields_rejected(self, profile_store, name, currency):
        with pytest.raises(InvalidInput):
            profile_store.upsert_profile(name, currency)

        assert profile_store.fetch_profile() is None

    def test_survives_reconnect(self, config, profile_store, db):
        """Profile is durable across a new Database on the same file."""
        profile_store.upsert_profile("Alice", "USD")
        db.close()

        reopened = Database(config)
        reopened.connect()
        try:
            assert ProfileStore(reopened).fetch_profile().name == "Alice"
        finally:
            reopened.close()


class TestNotConnected:
    """Store calls before connect() fail immediately."""

    def test_fetch_not_connected(self, tmp_path):
        store = ProfileStore(Database(Config(database_path=str(tmp_path / "x.db"))))

        with pytest.raises(NotConnected):
            store.fetch_profile()

    def test_upsert_after_close(self, profile_store, db):
        db.close()

        with pytest.raises(NotConnected):
            profile_store.upsert_profile("Alice", "USD")


class TestNotConnectedOtherStores:
    """Account and trade stores fail the same way before connect()."""

    def test_list_accounts_not_connected(self, config):
        store = AccountStore(Database(config))

        with pytest.raises(NotConnected):
            store.list_accounts()

    def test_insert_trade_not_connected(self, config):
        store = TradeStore(Database(config))

        with pytest.raises(NotConnected):
            store.insert_trade(make_trade(1))
