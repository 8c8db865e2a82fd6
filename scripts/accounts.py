#!/usr/bin/env python3
"""
Trading account CLI.

Create accounts and list them, newest first.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from rich.console import Console
from rich.table import Table

from tradejournal.app import JournalState
from tradejournal.core.config import Config
from tradejournal.core.errors import StoreError
from tradejournal.core.records import NewAccount
from tradejournal.core.utils import format_money

app = typer.Typer(help="Manage trading accounts")
console = Console()


def _open_state() -> JournalState:
    config = Config.from_env()
    config.configure_logging()

    try:
        state = JournalState.open(config)
    except StoreError as e:
        console.print(f"[red]Failed to initialize database: {e}[/red]")
        raise typer.Exit(1)

    if state.needs_setup:
        console.print("[yellow]No profile yet. Run: python scripts/setup.py[/yellow]")
        state.close()
        raise typer.Exit(1)

    return state


@app.command()
def add(
    name: str = typer.Option(..., "--name", "-n", help="Account name"),
    account_type: str = typer.Option("demo", "--type", "-t", help="demo or live"),
    initial_balance: str = typer.Option(..., "--balance", "-b", help="Initial balance"),
    broker: str = typer.Option(..., "--broker", help="Broker name"),
    leverage: str = typer.Option("1:100", "--leverage", "-l", help="Leverage (e.g., 1:100)"),
    instruments: str = typer.Option("", "--instruments", "-i", help="Comma-separated instruments"),
):
    """
    Create a new trading account.
    """
    state = _open_state()

    try:
        account = state.create_account(NewAccount(
            name=name,
            type=account_type,
            initial_balance=initial_balance,
            broker=broker,
            leverage=leverage,
            instruments=instruments,
        ))
    except StoreError as e:
        console.print(f"[red]Failed to save account: {e}[/red]")
        raise typer.Exit(1)
    finally:
        state.close()

    console.print(
        f"\n[green]Account #{account.id} created: {account.name} "
        f"({format_money(account.current_balance, state.currency)})[/green]\n"
    )


@app.command("list")
def list_accounts():
    """
    List all accounts, newest first.
    """
    state = _open_state()
    state.close()

    if not state.accounts:
        console.print("No trading accounts yet. Create one to start journaling!")
        return

    table = Table(title="Trading Accounts")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Broker")
    table.add_column("Leverage")
    table.add_column("Balance", justify="right")
    table.add_column("Instruments")

    for account in state.accounts:
        table.add_row(
            str(account.id),
            account.name,
            "💰 Live" if account.is_live else "📊 Demo",
            account.broker,
            account.leverage,
            format_money(account.current_balance, state.currency),
            account.instruments or "-",
        )

    console.print(table)


if __name__ == "__main__":
    app()
