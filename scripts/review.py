#!/usr/bin/env python3
"""
Account review script.

Shows an account's trades, newest first, with P&L, win rate and volume.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tradejournal.app import JournalState
from tradejournal.core.config import Config
from tradejournal.core.errors import StoreError
from tradejournal.core.utils import format_money, format_signed
from tradejournal.review.stats import format_stats

app = typer.Typer(help="Account review")
console = Console()


@app.command()
def main(
    account_id: int = typer.Argument(..., help="Account ID"),
    limit: int = typer.Option(0, "--limit", "-n", help="Show only the N most recent trades"),
):
    """
    Review one account.
    """
    config = Config.from_env()
    config.configure_logging()

    try:
        state = JournalState.open(config)
    except StoreError as e:
        console.print(f"[red]Failed to initialize database: {e}[/red]")
        raise typer.Exit(1)

    try:
        account = state.select_account(account_id)
    except StoreError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    finally:
        state.close()

    currency = state.currency

    console.print(Panel.fit(
        f"[bold]{account.name}[/bold]\n"
        f"{account.broker} | {account.leverage} | "
        f"{'💰 Live' if account.is_live else '📊 Demo'} Account\n"
        f"Balance: {format_money(account.current_balance, currency)}",
        border_style="cyan",
    ))

    if state.stats is None:
        console.print("No trades yet")
        return

    shown = format_stats(state.stats, currency)
    pnl_style = "green" if state.stats.total_pnl >= 0 else "red"
    console.print(
        f"Total P&L: [{pnl_style}]{shown['total_pnl']}[/{pnl_style}]   "
        f"Trades: {shown['trade_count']}   "
        f"Win rate: {shown['win_rate']}   "
        f"Volume: {shown['total_volume']}\n"
    )

    trades = state.trades[:limit] if limit > 0 else state.trades

    table = Table()
    table.add_column("Date")
    table.add_column("Symbol")
    table.add_column("Type")
    table.add_column("Entry", justify="right")
    table.add_column("Exit", justify="right")
    table.add_column("Lots", justify="right")
    table.add_column("Profit", justify="right")
    table.add_column("R:R")

    for trade in trades:
        style = "green" if trade.profit >= 0 else "red"
        table.add_row(
            trade.date.strftime("%Y-%m-%d"),
            trade.symbol,
            trade.type.value.upper(),
            f"{trade.entry_price}",
            f"{trade.exit_price}" if trade.exit_price is not None else "-",
            f"{trade.lot_size}",
            f"[{style}]{format_signed(trade.profit)}[/{style}]",
            trade.rr_ratio or "-",
        )

    console.print(table)


if __name__ == "__main__":
    app()
