"""
Persistence layer for TradeJournal.

Stateless stores over the shared Database.
"""

from tradejournal.store.profiles import ProfileStore
from tradejournal.store.accounts import AccountStore
from tradejournal.store.trades import TradeStore

__all__ = ["ProfileStore", "AccountStore", "TradeStore"]
