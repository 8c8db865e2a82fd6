"""
Utility functions for TradeJournal.
"""

import math
import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from tradejournal.core.errors import InvalidInput

THOUSANDS_PATTERN = re.compile(r"^[-+]?\d{1,3}(,\d{3})+(\.\d+)?$")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_storage_date(value: datetime) -> str:
    """
    Normalise a datetime to fixed-width UTC ISO-8601 text.

    Naive datetimes are taken to be UTC already. The fixed width keeps
    text ordering equal to chronological ordering.
    """
    if not isinstance(value, datetime):
        raise InvalidInput("date", value, "expected a datetime")

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_storage_date(value: str) -> datetime:
    """Parse text written by to_storage_date back into an aware datetime."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_amount(value: Any, field: str) -> float:
    """
    Parse a monetary or quantity value strictly.

    Accepts ints, floats, Decimals and numeric strings. Rejects booleans,
    blanks, NaN and infinities.

    Raises:
        InvalidInput: If the value is not a finite number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInput(field, value, "expected a number")

    if isinstance(value, str):
        text = value.strip()
        if "," in text:
            if not THOUSANDS_PATTERN.match(text):
                raise InvalidInput(field, value, "commas are only allowed as thousands separators")
            text = text.replace(",", "")
        if not text:
            raise InvalidInput(field, value, "expected a number")
        try:
            number = float(Decimal(text))
        except (InvalidOperation, ValueError):
            raise InvalidInput(field, value, "expected a number") from None
    elif isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (ValueError, OverflowError):
            raise InvalidInput(field, value, "expected a number") from None
    else:
        raise InvalidInput(field, value, "expected a number")

    if math.isnan(number) or math.isinf(number):
        raise InvalidInput(field, value, "must be a finite number")

    return number


def parse_optional_amount(value: Any, field: str) -> Optional[float]:
    """
    Like parse_amount, but None and blank strings mean "absent".
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return parse_amount(value, field)


def calculate_rr_ratio(
    entry_price: Optional[float],
    take_profit: Optional[float],
    stop_loss: Optional[float],
) -> Optional[str]:
    """
    Risk-to-reward ratio in display form.

    Examples:
        entry=100, tp=110, sl=95 -> "1:2.00"
        entry=100, tp=90, sl=105 -> "1:2.00"

    Returns:
        "1:N" with N to two decimals, or None when any price is
        missing or zero, or when risk is zero
    """
    if not entry_price or not take_profit or not stop_loss:
        return None

    risk = abs(entry_price - stop_loss)
    reward = abs(take_profit - entry_price)

    if risk == 0:
        return None

    return f"1:{reward / risk:.2f}"


def format_money(amount: float, currency: str = "") -> str:
    """
    Format an amount to two decimals, optionally prefixed by currency.

    Examples:
        (30, "USD") -> "USD 30.00"
        (-12.5, "")  -> "-12.50"
    """
    text = f"{amount:.2f}"
    return f"{currency} {text}" if currency else text


def format_signed(amount: float) -> str:
    """Two-decimal amount with an explicit + for non-negative values."""
    return f"+{amount:.2f}" if amount >= 0 else f"{amount:.2f}"
