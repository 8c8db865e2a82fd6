#!/usr/bin/env python3
"""
Export data to CSV.

Exports an account's trades to CSV format for external analysis.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from rich.console import Console

from tradejournal.app import JournalState
from tradejournal.core.config import Config
from tradejournal.core.errors import StoreError
from tradejournal.review.export import export_account_trades

app = typer.Typer(help="Export data to CSV")
console = Console()


@app.command()
def trades(
    account_id: int = typer.Argument(..., help="Account ID"),
    output: str = typer.Option(None, "--output", "-o", help="Output file path"),
):
    """
    Export all trades of an account to CSV, newest first.
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
    except StoreError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    finally:
        state.close()

    path = export_account_trades(config, state.trades, account_id, output)
    console.print(f"[green]Exported {len(state.trades)} trades to {path}[/green]")


if __name__ == "__main__":
    app()
