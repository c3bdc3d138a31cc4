"""Rich rendering for stockpot — item listings and the settings table."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stockpot.config import Settings
from stockpot.models import Item, RestockNotice


def items_table(items: list[Item], title: str) -> Table:
    """Build a Rich table of items, one row per item in the given order."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("ID", style="green", min_width=6)
    table.add_column("Name", min_width=12)
    table.add_column("Category", style="cyan")
    table.add_column("Quantity", justify="right")

    for item in items:
        table.add_row(escape(item.id), escape(item.name), escape(item.category), str(item.quantity))
    return table


def print_items(items: list[Item], title: str, console: Console, as_table: bool = False) -> None:
    """Print an item listing under a heading.

    The default is a heading line followed by the plain `ID: ..., Name: ...`
    form of each item, which keeps the output greppable. as_table renders a
    Rich table instead.
    """
    if as_table:
        console.print()
        console.print(items_table(items, title))
        console.print()
        return

    console.print(escape(title), soft_wrap=True)
    for item in items:
        console.print(escape(str(item)), soft_wrap=True)


def print_restock(notice: RestockNotice, console: Console) -> None:
    console.print(f"[yellow]{escape(notice.message)}[/yellow]", soft_wrap=True)


def render_settings(settings: Settings, console: Console) -> None:
    """Render the resolved settings as a Rich table."""
    table = Table(title="stockpot settings", show_header=True, header_style="bold")
    table.add_column("Setting", style="dim", min_width=16)
    table.add_column("Value", justify="right")
    table.add_column("Source")
    table.add_row("Restock threshold", str(settings.restock_threshold), settings.source)

    console.print()
    console.print(table)
    console.print()
