"""
Plain records exchanged with the store layer.

Stores accept NewAccount / NewTrade and return Profile, Account and
Trade. None of these are bound to a database session.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

from tradejournal.core.models import AccountType, TradeType
from tradejournal.core.utils import utc_now


@dataclass
class Profile:
    """The user's display name and base currency."""
    name: str
    currency: str
    email: str = ""
    experience: str = ""
    timezone: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class Account:
    """A stored trading account."""
    id: int
    name: str
    type: AccountType
    initial_balance: float
    current_balance: float
    broker: str
    leverage: str
    instruments: str = ""

    @property
    def is_live(self) -> bool:
        return self.type == AccountType.LIVE

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.type.value
        return data


@dataclass
class NewAccount:
    """
    Fields for a new account.

    Numeric values may still be raw strings from a prompt; the store
    parses them and rejects anything that is not a finite number.
    """
    name: str
    type: Union[AccountType, str]
    initial_balance: Any
    broker: str
    leverage: str
    instruments: Optional[str] = ""


@dataclass
class Trade:
    """A stored trade."""
    id: int
    account_id: int
    symbol: str
    type: TradeType
    entry_price: float
    exit_price: Optional[float]
    take_profit: float
    stop_loss: float
    lot_size: float
    volume: float
    profit: float
    commission: float
    rr_ratio: str
    strategy: str
    session: str
    duration: str
    date: datetime

    @property
    def is_open(self) -> bool:
        """True while no exit price has been recorded."""
        return self.exit_price is None

    @property
    def is_win(self) -> bool:
        return self.profit > 0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.type.value
        data["date"] = self.date.isoformat()
        return data


@dataclass
class NewTrade:
    """
    Fields for a new trade.

    The date is stamped when the record is built, i.e. at submission
    time. exit_price and commission may be omitted; rr_ratio is derived
    from the prices when not given.
    """
    account_id: int
    symbol: str
    type: Union[TradeType, str]
    entry_price: Any
    take_profit: Any
    stop_loss: Any
    lot_size: Any
    volume: Any
    profit: Any
    exit_price: Any = None
    commission: Any = None
    rr_ratio: Optional[str] = None
    strategy: Optional[str] = ""
    session: Optional[str] = ""
    duration: Optional[str] = ""
    date: datetime = field(default_factory=utc_now)
