"""
Application state for TradeJournal.

One JournalState object carries everything a front end needs between
actions: the database, the stores, the loaded profile, the selected
account, the loaded collections and the last statistics shown. Every
action follows the same chain: write, reload, aggregate.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional

from tradejournal.core.config import Config
from tradejournal.core.db import Database
from tradejournal.core.errors import NoAccountSelected, StoreError, UnknownAccount
from tradejournal.core.records import Account, NewAccount, NewTrade, Profile, Trade
from tradejournal.review.stats import TradeStats, compute_stats
from tradejournal.store import AccountStore, ProfileStore, TradeStore

logger = logging.getLogger(__name__)


@dataclass
class JournalState:
    """Session state of the journal."""

    config: Config
    db: Database
    profiles: ProfileStore
    accounts_store: AccountStore
    trades_store: TradeStore

    profile: Optional[Profile] = None
    current_account: Optional[Account] = None
    accounts: List[Account] = field(default_factory=list)
    trades: List[Trade] = field(default_factory=list)
    stats: Optional[TradeStats] = None

    @classmethod
    def open(cls, config: Config) -> "JournalState":
        """
        Connect the database and load profile and accounts.

        A missing profile is normal on first run; the caller should ask
        for one before anything else.
        """
        db = Database(config)
        db.connect()

        state = cls(
            config=config,
            db=db,
            profiles=ProfileStore(db),
            accounts_store=AccountStore(db),
            trades_store=TradeStore(db),
        )

        try:
            state.profile = state.profiles.fetch_profile()
            if state.profile is None:
                logger.info("No profile found, setup required")
            else:
                state.load_accounts()
        except StoreError:
            db.close()
            raise

        return state

    def close(self) -> None:
        self.db.close()

    @property
    def needs_setup(self) -> bool:
        return self.profile is None

    @property
    def currency(self) -> str:
        if self.profile is not None:
            return self.profile.currency
        return self.config.default_currency

    def save_profile(self, name: str, currency: str, **extra: str) -> Profile:
        """Replace the profile and reload accounts."""
        self.profiles.upsert_profile(name, currency, **extra)
        self.profile = self.profiles.fetch_profile()
        self.load_accounts()
        return self.profile

    def load_accounts(self) -> List[Account]:
        self.accounts = self.accounts_store.list_accounts()
        return self.accounts

    def create_account(self, account: NewAccount) -> Account:
        """Insert an account and reload the account list."""
        account_id = self.accounts_store.insert_account(account)
        self.load_accounts()
        return next(a for a in self.accounts if a.id == account_id)

    def select_account(self, account_id: int) -> Account:
        """
        Make an account current and load its trades and stats.

        Raises:
            UnknownAccount: If no loaded account has this id
        """
        account = next((a for a in self.accounts if a.id == account_id), None)
        if account is None:
            # The list may be stale if another process added accounts
            account = self.accounts_store.get_account(account_id)
            if account is None:
                raise UnknownAccount(account_id)
            self.load_accounts()

        self.current_account = account
        self.stats = None
        self.load_trades()
        return account

    def load_trades(self) -> List[Trade]:
        if self.current_account is None:
            raise NoAccountSelected()

        self.trades = self.trades_store.list_trades_for_account(self.current_account.id)
        self.refresh_stats()
        return self.trades

    def log_trade(self, trade: NewTrade) -> int:
        """
        Record a trade against the selected account.

        A copy of the trade is stored with account_id set to the
        selected account; the caller's record is left as is.

        Raises:
            NoAccountSelected: If no account is selected
        """
        if self.current_account is None:
            raise NoAccountSelected()

        trade_id = self.trades_store.insert_trade(
            replace(trade, account_id=self.current_account.id)
        )
        self.load_trades()
        return trade_id

    def refresh_stats(self) -> Optional[TradeStats]:
        """
        Recompute stats from the loaded trades.

        An empty collection leaves the previous stats untouched.
        """
        stats = compute_stats(self.trades)
        if stats is not None:
            self.stats = stats
        return self.stats
