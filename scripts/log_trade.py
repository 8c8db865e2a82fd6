#!/usr/bin/env python3
"""
Log a trade against an account.

The R:R ratio is worked out from entry, take-profit and stop-loss
unless --rr overrides it.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from rich.console import Console
from rich.prompt import Prompt

from tradejournal.app import JournalState
from tradejournal.core.config import Config
from tradejournal.core.errors import StoreError
from tradejournal.core.records import NewTrade
from tradejournal.core.utils import calculate_rr_ratio, format_signed
from tradejournal.review.stats import format_stats

app = typer.Typer(help="Log a trade")
console = Console()


@app.command()
def main(
    account_id: int = typer.Option(..., "--account", "-a", help="Account ID"),
    symbol: str = typer.Option(..., "--symbol", "-s", help="Instrument (e.g., EURUSD)"),
    trade_type: str = typer.Option(..., "--type", "-t", help="buy or sell"),
    entry_price: float = typer.Option(..., "--entry", "-e", help="Entry price"),
    take_profit: float = typer.Option(..., "--tp", help="Take-profit price"),
    stop_loss: float = typer.Option(..., "--sl", help="Stop-loss price"),
    lot_size: float = typer.Option(..., "--lots", help="Lot size"),
    volume: float = typer.Option(..., "--volume", help="Traded volume"),
    profit: float = typer.Option(..., "--profit", "-p", help="Realized profit (negative for a loss)"),
    exit_price: str = typer.Option("", "--exit", help="Exit price (blank while open)"),
    commission: str = typer.Option("", "--commission", help="Commission (defaults to 0)"),
    rr_ratio: str = typer.Option("", "--rr", help="Override R:R (e.g., 1:2.5)"),
    strategy: str = typer.Option("", "--strategy", help="Strategy name"),
    session: str = typer.Option("", "--session", help="Trading session (e.g., London)"),
    duration: str = typer.Option("", "--duration", help="Holding time (e.g., 45m)"),
    ask: bool = typer.Option(False, "--ask", help="Prompt for strategy/session/duration"),
):
    """
    Log a new trade.

    The trade is stamped with the current time.
    """
    config = Config.from_env()
    config.configure_logging()

    try:
        state = JournalState.open(config)
    except StoreError as e:
        console.print(f"[red]Failed to initialize database: {e}[/red]")
        raise typer.Exit(1)

    try:
        state.select_account(account_id)

        derived = calculate_rr_ratio(entry_price, take_profit, stop_loss)
        if derived and not rr_ratio:
            console.print(f"R:R ratio: [cyan]{derived}[/cyan]")

        if ask:
            strategy = strategy or Prompt.ask("Strategy", default="", console=console)
            session = session or Prompt.ask("Session", default="", console=console)
            duration = duration or Prompt.ask("Duration", default="", console=console)

        trade_id = state.log_trade(NewTrade(
            account_id=account_id,
            symbol=symbol.upper(),
            type=trade_type,
            entry_price=entry_price,
            exit_price=exit_price,
            take_profit=take_profit,
            stop_loss=stop_loss,
            lot_size=lot_size,
            volume=volume,
            profit=profit,
            commission=commission,
            rr_ratio=rr_ratio or None,
            strategy=strategy,
            session=session,
            duration=duration,
        ))

    except StoreError as e:
        console.print(f"[red]Failed to save trade: {e}[/red]")
        raise typer.Exit(1)
    finally:
        state.close()

    console.print(
        f"\n[green]Trade #{trade_id} logged: {trade_type.upper()} {symbol.upper()} "
        f"({format_signed(profit)})[/green]"
    )

    if state.stats:
        shown = format_stats(state.stats, state.currency)
        console.print(
            f"Account P&L: {shown['total_pnl']} | Trades: {shown['trade_count']} | "
            f"Win rate: {shown['win_rate']}\n"
        )


if __name__ == "__main__":
    app()
