#!/usr/bin/env python3
"""
Interactive setup wizard for TradeJournal.

Creates the profile and, optionally, the first trading account.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich import print as rprint

from tradejournal.app import JournalState
from tradejournal.core.config import Config
from tradejournal.core.errors import StoreError
from tradejournal.core.records import NewAccount

app = typer.Typer(help="Interactive setup wizard")
console = Console()


@app.command()
def main(
    name: str = typer.Option("", "--name", help="Display name"),
    currency: str = typer.Option("", "--currency", help="Base currency (e.g., USD)"),
):
    """
    Run interactive setup wizard.

    Prompts for anything not provided via CLI.
    """
    config = Config.from_env()
    config.configure_logging()

    console.print(Panel.fit(
        "[bold cyan]TradeJournal Setup Wizard[/bold cyan]\n\n"
        "This wizard creates your profile and first account.\n"
        "Press Ctrl+C at any time to cancel.",
        border_style="cyan"
    ))

    rprint("")

    try:
        state = JournalState.open(config)
    except StoreError as e:
        console.print(f"[red]Failed to initialize database: {e}[/red]")
        raise typer.Exit(1)

    try:
        # Profile
        console.print("[bold yellow]Step 1/2: Profile[/bold yellow]\n")

        replace = True
        if state.profile:
            console.print(
                f"Existing profile: [cyan]{state.profile.name}[/cyan] "
                f"({state.profile.currency})"
            )
            replace = Confirm.ask("Replace it?", default=False, console=console)

        if replace:
            if not name:
                name = Prompt.ask("Your name", console=console)
            if not currency:
                currency = Prompt.ask(
                    "Base currency", default=config.default_currency, console=console
                )

            state.save_profile(name, currency)
            console.print(f"\n[green]✓ Profile saved: {name} ({currency})[/green]\n")

        # First account
        console.print("[bold yellow]Step 2/2: Trading Account[/bold yellow]\n")

        if state.accounts:
            console.print(f"You already have {len(state.accounts)} account(s).")

        if Confirm.ask("Create a trading account now?", default=not state.accounts, console=console):
            account = state.create_account(NewAccount(
                name=Prompt.ask("Account name", console=console),
                type=Prompt.ask("Type", choices=["demo", "live"], default="demo", console=console),
                initial_balance=Prompt.ask("Initial balance", console=console),
                broker=Prompt.ask("Broker", console=console),
                leverage=Prompt.ask("Leverage", default="1:100", console=console),
                instruments=Prompt.ask("Instruments (comma-separated)", default="", console=console),
            ))
            console.print(f"\n[green]✓ Account #{account.id} created: {account.name}[/green]")

    except StoreError as e:
        console.print(f"\n[red]Setup failed: {e}[/red]")
        raise typer.Exit(1)
    finally:
        state.close()

    console.print(Panel.fit(
        "[bold green]Setup complete[/bold green]\n\n"
        "Log a trade:   python scripts/log_trade.py --account <id> ...\n"
        "Review stats:  python scripts/review.py <id>",
        border_style="green"
    ))


if __name__ == "__main__":
    app()
