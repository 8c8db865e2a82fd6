"""
Export trades to CSV.

Writes one account's trades for external analysis.
"""

import csv
import logging
from pathlib import Path
from typing import Optional, Sequence

from tradejournal.core.config import Config
from tradejournal.core.records import Trade
from tradejournal.core.utils import utc_now

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "id",
    "date",
    "account_id",
    "symbol",
    "type",
    "entry_price",
    "exit_price",
    "take_profit",
    "stop_loss",
    "lot_size",
    "volume",
    "profit",
    "commission",
    "rr_ratio",
    "strategy",
    "session",
    "duration",
]


def default_export_path(config: Config, account_id: int) -> Path:
    stamp = utc_now().strftime("%Y%m%d_%H%M%S")
    return Path(config.export_dir) / f"trades_account{account_id}_{stamp}.csv"


def export_trades_csv(trades: Sequence[Trade], output: Path) -> int:
    """
    Write trades to a CSV file, in the order given.

    Open trades get an empty exit_price cell.

    Returns:
        Number of trades written
    """
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)

        for trade in trades:
            writer.writerow([
                trade.id,
                trade.date.isoformat(),
                trade.account_id,
                trade.symbol,
                trade.type.value,
                trade.entry_price,
                trade.exit_price if trade.exit_price is not None else "",
                trade.take_profit,
                trade.stop_loss,
                trade.lot_size,
                trade.volume,
                trade.profit,
                trade.commission,
                trade.rr_ratio,
                trade.strategy,
                trade.session,
                trade.duration,
            ])

    logger.info(f"Exported {len(trades)} trades to {output}")
    return len(trades)


def export_account_trades(
    config: Config,
    trades: Sequence[Trade],
    account_id: int,
    output: Optional[str] = None,
) -> Path:
    """
    Export an account's trades, choosing a timestamped path if none given.

    Returns file path.
    """
    path = Path(output) if output else default_export_path(config, account_id)
    export_trades_csv(trades, path)
    return path
