"""
Trade store.

Trades belong to exactly one account and are append-only.
"""

import logging
from typing import List, Union

from sqlalchemy import select

from tradejournal.core.errors import InvalidInput, UnknownAccount
from tradejournal.core.models import AccountRow, TradeRow, TradeType
from tradejournal.core.records import NewTrade, Trade
from tradejournal.core.utils import (
    calculate_rr_ratio,
    from_storage_date,
    parse_amount,
    parse_optional_amount,
    to_storage_date,
)
from tradejournal.store.base import BaseStore

logger = logging.getLogger(__name__)


def parse_trade_type(value: Union[TradeType, str]) -> TradeType:
    """
    Normalize trade direction.

    Raises:
        InvalidInput: If value is not buy or sell
    """
    if isinstance(value, TradeType):
        return value

    try:
        return TradeType(str(value).strip().lower())
    except ValueError:
        raise InvalidInput("type", value, "expected 'buy' or 'sell'") from None


def _parse_account_id(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput("account_id", value, "expected an integer id")
    return value


def row_to_trade(row: TradeRow) -> Trade:
    return Trade(
        id=row.id,
        account_id=row.account_id,
        symbol=row.symbol,
        type=row.type,
        entry_price=row.entry_price,
        exit_price=row.exit_price,
        take_profit=row.take_profit,
        stop_loss=row.stop_loss,
        lot_size=row.lot_size,
        volume=row.volume,
        profit=row.profit,
        commission=row.commission if row.commission is not None else 0.0,
        rr_ratio=row.rr_ratio or "",
        strategy=row.strategy or "",
        session=row.session or "",
        duration=row.duration or "",
        date=from_storage_date(row.date),
    )


class TradeStore(BaseStore):
    """Insert trades and list them per account."""

    def build_row(self, trade: NewTrade) -> TradeRow:
        """
        Validate a NewTrade and turn it into a row.

        Raises:
            InvalidInput: If any field fails validation
        """
        account_id = _parse_account_id(trade.account_id)

        symbol = (trade.symbol or "").strip()
        if not symbol:
            raise InvalidInput("symbol", trade.symbol, "required")

        entry_price = parse_amount(trade.entry_price, "entry_price")
        take_profit = parse_amount(trade.take_profit, "take_profit")
        stop_loss = parse_amount(trade.stop_loss, "stop_loss")

        commission = parse_optional_amount(trade.commission, "commission")

        # A user-supplied ratio wins over the derived one
        rr_ratio = trade.rr_ratio
        if not rr_ratio:
            rr_ratio = calculate_rr_ratio(entry_price, take_profit, stop_loss) or ""

        return TradeRow(
            account_id=account_id,
            symbol=symbol,
            type=parse_trade_type(trade.type),
            entry_price=entry_price,
            exit_price=parse_optional_amount(trade.exit_price, "exit_price"),
            take_profit=take_profit,
            stop_loss=stop_loss,
            lot_size=parse_amount(trade.lot_size, "lot_size"),
            volume=parse_amount(trade.volume, "volume"),
            profit=parse_amount(trade.profit, "profit"),
            commission=commission if commission is not None else 0.0,
            rr_ratio=rr_ratio,
            strategy=trade.strategy or "",
            session=trade.session or "",
            duration=trade.duration or "",
            date=to_storage_date(trade.date),
        )

    def insert_trade(self, trade: NewTrade) -> int:
        """
        Insert a new trade for an existing account.

        Returns:
            The id assigned by the database

        Raises:
            InvalidInput: If a field fails validation
            UnknownAccount: If account_id does not match an account
            NotConnected: If the database is not connected
            WriteFailed: If the database rejects the row
        """
        row = self.build_row(trade)

        with self.writing("save trade") as session:
            if session.get(AccountRow, row.account_id) is None:
                logger.warning(f"Rejected trade for unknown account #{row.account_id}")
                raise UnknownAccount(row.account_id)

            session.add(row)
            session.flush()
            trade_id = row.id

        logger.info(
            f"Saved trade #{trade_id}: {row.type.value} {row.symbol} "
            f"@ {row.entry_price} (account #{row.account_id})"
        )
        return trade_id

    def list_trades_for_account(self, account_id: int) -> List[Trade]:
        """
        Get all trades for one account, most recent date first.
        """
        with self.reading(f"load trades for account #{account_id}") as session:
            rows = session.scalars(
                select(TradeRow)
                .where(TradeRow.account_id == account_id)
                .order_by(TradeRow.date.desc())
            ).all()

            trades = [row_to_trade(row) for row in rows]

        logger.debug(f"Loaded {len(trades)} trades for account #{account_id}")
        return trades
