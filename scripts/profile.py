#!/usr/bin/env python3
"""
Profile management CLI.

View and replace the journal profile.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer

from tradejournal.core.config import Config
from tradejournal.core.db import Database
from tradejournal.core.errors import StoreError
from tradejournal.store import ProfileStore

app = typer.Typer(help="TradeJournal Profile Management")


def _open_store() -> tuple:
    config = Config.from_env()
    config.configure_logging()

    db = Database(config)
    db.connect()
    return db, ProfileStore(db)


@app.command()
def show():
    """Show the current profile and settings."""
    try:
        db, store = _open_store()
    except StoreError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    try:
        profile = store.fetch_profile()
    except StoreError as e:
        typer.secho(f"Failed to load profile: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)
    finally:
        db.close()

    if profile is None:
        typer.secho("No profile yet. Run: python scripts/setup.py", fg=typer.colors.YELLOW)
        raise typer.Exit(1)

    typer.secho("\n👤 Profile", bold=True)
    typer.echo("─" * 50)
    typer.echo(f"  Name: {profile.name}")
    typer.echo(f"  Currency: {profile.currency}")
    if profile.email:
        typer.echo(f"  Email: {profile.email}")
    if profile.experience:
        typer.echo(f"  Experience: {profile.experience}")
    if profile.timezone:
        typer.echo(f"  Timezone: {profile.timezone}")

    typer.secho("\n⚙️  Settings", bold=True)
    typer.echo("─" * 50)
    typer.echo(db.config.get_summary())


@app.command()
def set(
    name: str = typer.Argument(..., help="Display name"),
    currency: str = typer.Argument(..., help="Base currency (e.g., USD)"),
    email: str = typer.Option("", help="Email address"),
    experience: str = typer.Option("", help="Experience level"),
    timezone: str = typer.Option("", help="Timezone (e.g., Europe/London)"),
):
    """Replace the profile (every field is overwritten)."""
    try:
        db, store = _open_store()
    except StoreError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    try:
        store.upsert_profile(
            name, currency, email=email, experience=experience, timezone=timezone
        )
    except StoreError as e:
        typer.secho(f"Failed to save profile: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)
    finally:
        db.close()

    typer.secho(f"✓ Profile saved: {name} ({currency})", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
