"""
Account store.

Accounts are append-only: inserted once, never updated or deleted here.
"""

import logging
from typing import List, Optional, Union

from sqlalchemy import select

from tradejournal.core.errors import InvalidInput
from tradejournal.core.models import AccountRow, AccountType
from tradejournal.core.records import Account, NewAccount
from tradejournal.core.utils import parse_amount
from tradejournal.store.base import BaseStore

logger = logging.getLogger(__name__)


def parse_account_type(value: Union[AccountType, str]) -> AccountType:
    """
    Normalize account type.

    Raises:
        InvalidInput: If value is not demo or live
    """
    if isinstance(value, AccountType):
        return value

    try:
        return AccountType(str(value).strip().lower())
    except ValueError:
        raise InvalidInput("type", value, "expected 'demo' or 'live'") from None


def _require_text(value: str, field: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidInput(field, value, "required")
    return str(value)


def row_to_account(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        name=row.name,
        type=row.type,
        initial_balance=row.initial_balance,
        current_balance=row.current_balance,
        broker=row.broker,
        leverage=row.leverage,
        instruments=row.instruments or "",
    )


class AccountStore(BaseStore):
    """Insert and list trading accounts."""

    def insert_account(self, account: NewAccount) -> int:
        """
        Insert a new account.

        current_balance starts equal to initial_balance.

        Returns:
            The id assigned by the database

        Raises:
            InvalidInput: If a field fails validation
            NotConnected: If the database is not connected
            WriteFailed: If the database rejects the row
        """
        initial_balance = parse_amount(account.initial_balance, "initial_balance")

        row = AccountRow(
            name=_require_text(account.name, "name"),
            type=parse_account_type(account.type),
            initial_balance=initial_balance,
            current_balance=initial_balance,
            broker=_require_text(account.broker, "broker"),
            leverage=_require_text(account.leverage, "leverage"),
            instruments=account.instruments or "",
        )

        with self.writing("save account") as session:
            session.add(row)
            session.flush()
            account_id = row.id

        logger.info(f"Saved account #{account_id}: {row.name} ({row.type.value})")
        return account_id

    def get_account(self, account_id: int) -> Optional[Account]:
        """
        Get a single account.

        Returns:
            Account, or None if no account has this id
        """
        with self.reading(f"load account #{account_id}") as session:
            row = session.get(AccountRow, account_id)
            return row_to_account(row) if row is not None else None

    def list_accounts(self) -> List[Account]:
        """
        Get all accounts, most recently inserted first.
        """
        with self.reading("load accounts") as session:
            rows = session.scalars(
                select(AccountRow).order_by(AccountRow.id.desc())
            ).all()

            accounts = [row_to_account(row) for row in rows]

        logger.debug(f"Loaded {len(accounts)} accounts")
        return accounts
