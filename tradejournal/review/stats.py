"""
Trade statistics module.

Pure aggregation over an in-memory list of trades for one account.
No database access happens here.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from tradejournal.core.records import Trade
from tradejournal.core.utils import format_money


@dataclass(frozen=True)
class TradeStats:
    """Aggregate performance of one account's trades (full precision)."""
    total_pnl: float
    trade_count: int
    win_rate: float
    total_volume: float
    wins: int
    losses: int


def compute_stats(trades: Sequence[Trade]) -> Optional[TradeStats]:
    """
    Aggregate a collection of trades.

    Win rate is the share of trades with profit > 0, as a percentage.
    Breakeven trades count as neither win nor loss but still count
    towards the total.

    Returns:
        TradeStats, or None for an empty collection (nothing is
        computed, so callers keep whatever they showed before)
    """
    if not trades:
        return None

    trade_count = len(trades)
    wins = sum(1 for t in trades if t.profit > 0)
    losses = sum(1 for t in trades if t.profit < 0)

    return TradeStats(
        total_pnl=sum(t.profit for t in trades),
        trade_count=trade_count,
        win_rate=wins / trade_count * 100,
        total_volume=sum(t.volume for t in trades),
        wins=wins,
        losses=losses,
    )


def format_stats(stats: TradeStats, currency: str = "") -> dict:
    """
    Display strings for a stats block.

    Returns:
        Dict with total_pnl ("USD 30.00"), trade_count ("2"),
        win_rate ("50.0%") and total_volume ("1,250.50")
    """
    return {
        "total_pnl": format_money(stats.total_pnl, currency),
        "trade_count": str(stats.trade_count),
        "win_rate": f"{stats.win_rate:.1f}%",
        "total_volume": f"{stats.total_volume:,.2f}",
    }
