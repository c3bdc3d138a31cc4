"""CLI for the stockpot inventory tracker.

Usage:
    python -m stockpot shell                    # Interactive menu, threshold 10
    python -m stockpot shell --threshold 5      # Custom restock threshold
    python -m stockpot shell --table            # Listings as Rich tables
    python -m stockpot settings                 # Show resolved configuration
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from stockpot.config import THRESHOLD_ENV_VAR, Settings
from stockpot.render import render_settings
from stockpot.shell import run_shell

app = typer.Typer(
    name="stockpot",
    help="In-memory inventory tracker",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _load_settings(threshold: Optional[int]) -> Settings:
    try:
        return Settings.resolve(threshold=threshold)
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)


@app.command("shell")
def cmd_shell(
    threshold: Optional[int] = typer.Option(
        None, "--threshold", "-t",
        help=f"Restock threshold (default: ${THRESHOLD_ENV_VAR} or 10)",
    ),
    table: bool = typer.Option(False, "--table", help="Render listings as tables"),
) -> None:
    """Start the interactive inventory menu."""
    settings = _load_settings(threshold)
    run_shell(settings.new_inventory(), console, as_table=table)


@app.command("settings")
def cmd_settings(
    threshold: Optional[int] = typer.Option(None, "--threshold", "-t", help="Restock threshold override"),
) -> None:
    """Show the resolved configuration."""
    render_settings(_load_settings(threshold), console)


if __name__ == "__main__":
    app()
