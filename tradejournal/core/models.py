"""
Database models for TradeJournal.

Models: ProfileRow, AccountRow, TradeRow.

These rows never leave the store layer; callers receive the plain
records from tradejournal.core.records instead.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import (
    Enum as SQLEnum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


PROFILE_ID = 1


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class AccountType(str, Enum):
    """Kind of trading account."""
    DEMO = "demo"
    LIVE = "live"


class TradeType(str, Enum):
    """Direction of a trade."""
    BUY = "buy"
    SELL = "sell"


def _enum_values(enum_cls) -> list:
    return [member.value for member in enum_cls]


class ProfileRow(Base):
    """
    The single user profile.

    Only one row ever exists, keyed by PROFILE_ID.
    """

    __tablename__ = "profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(200), nullable=True, default="")
    experience: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    currency: Mapped[str] = mapped_column(String(10), nullable=False)
    timezone: Mapped[str] = mapped_column(String(50), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<ProfileRow {self.id}: {self.name} ({self.currency})>"


class AccountRow(Base):
    """
    A trading account.

    current_balance is set from initial_balance at creation and is
    not recomputed from trades.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[AccountType] = mapped_column(
        SQLEnum(AccountType, native_enum=False, values_callable=_enum_values, length=10),
        nullable=False,
    )
    initial_balance: Mapped[float] = mapped_column(Float, nullable=False)
    current_balance: Mapped[float] = mapped_column(Float, nullable=False)
    broker: Mapped[str] = mapped_column(String(100), nullable=False)
    leverage: Mapped[str] = mapped_column(String(20), nullable=False)
    instruments: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default="")

    # Relationship
    trades: Mapped[list["TradeRow"]] = relationship(
        "TradeRow", back_populates="account"
    )

    def __repr__(self) -> str:
        return f"<AccountRow {self.id}: {self.name} ({self.type.value}) {self.broker}>"


class TradeRow(Base):
    """
    A single trade entry.

    Exit price is nullable; date is ISO-8601 text in UTC so that
    ordering by the column is chronological.
    """

    __tablename__ = "trades"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id"), nullable=False, index=True
    )
    symbol: Mapped[str] = mapped_column(String(50), nullable=False)
    type: Mapped[TradeType] = mapped_column(
        SQLEnum(TradeType, native_enum=False, values_callable=_enum_values, length=10),
        nullable=False,
    )
    entry_price: Mapped[float] = mapped_column(Float, nullable=False)
    exit_price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    take_profit: Mapped[float] = mapped_column(Float, nullable=False)
    stop_loss: Mapped[float] = mapped_column(Float, nullable=False)
    lot_size: Mapped[float] = mapped_column(Float, nullable=False)
    volume: Mapped[float] = mapped_column(Float, nullable=False)
    profit: Mapped[float] = mapped_column(Float, nullable=False)
    commission: Mapped[float] = mapped_column(Float, default=0.0)
    rr_ratio: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, default="")
    strategy: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, default="")
    session: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, default="")
    duration: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, default="")
    date: Mapped[str] = mapped_column(String(40), nullable=False, index=True)

    # Relationship
    account: Mapped["AccountRow"] = relationship("AccountRow", back_populates="trades")

    def __repr__(self) -> str:
        return f"<TradeRow {self.id}: {self.type.value} {self.symbol} @ {self.entry_price}>"
