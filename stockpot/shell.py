"""Interactive menu loop for stockpot.

Each menu entry reads its arguments with rich prompts, calls one Inventory
operation, and prints the result on the shared console:

1. Add/Update Item           → Inventory.add_or_update
2. Remove Item               → Inventory.remove
3. View Items by Category    → Inventory.items_by_category
4. Merge Inventory           → builds a second Inventory, then merge_from
5. Get Top K Items           → Inventory.top_k
6. Exit
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt

from stockpot.inventory import Inventory
from stockpot.render import print_items, print_restock

MENU = """
[bold]Inventory Management System[/bold]
1. Add/Update Item
2. Remove Item
3. View Items by Category
4. Merge Inventory
5. Get Top K Items by Quantity
6. Exit"""

EXIT_CHOICE = 6


def _ask_item(console: Console) -> tuple[str, str, str, int]:
    """Prompt for the four fields of an item."""
    item_id = Prompt.ask("Enter ID", console=console)
    name = Prompt.ask("Enter Name", console=console)
    category = Prompt.ask("Enter Category", console=console)
    quantity = IntPrompt.ask("Enter Quantity", console=console)
    return item_id, name, category, quantity


def _add_item(inventory: Inventory, console: Console, as_table: bool) -> None:
    inventory.add_or_update(*_ask_item(console))


def _remove_item(inventory: Inventory, console: Console, as_table: bool) -> None:
    item_id = Prompt.ask("Enter ID of the item to remove", console=console)
    if item_id not in inventory:
        console.print(f"[dim]No item with ID {escape(item_id)}, nothing removed.[/dim]")
        return
    inventory.remove(item_id)


def _view_category(inventory: Inventory, console: Console, as_table: bool) -> None:
    category = Prompt.ask("Enter Category", console=console)
    items = inventory.items_by_category(category)
    print_items(items, f"Items in category {category}:", console, as_table=as_table)


def _merge(inventory: Inventory, console: Console, as_table: bool) -> None:
    console.print("Merging another inventory...")
    count = IntPrompt.ask("How many items to merge", console=console)

    # The incoming inventory shares our threshold so its own notices match.
    other = Inventory(restock_threshold=inventory.restock_threshold)
    other.subscribe(lambda notice: print_restock(notice, console))
    for _ in range(max(count, 0)):
        other.add_or_update(*_ask_item(console))

    inventory.merge_from(other)
    console.print(f"Merged {len(other)} item(s); inventory now holds {len(inventory)}.")


def _top_k(inventory: Inventory, console: Console, as_table: bool) -> None:
    k = IntPrompt.ask("Enter the value of K", console=console)
    print_items(inventory.top_k(k), f"Top {k} items by quantity:", console, as_table=as_table)


_ACTIONS: dict[int, Callable[[Inventory, Console, bool], None]] = {
    1: _add_item,
    2: _remove_item,
    3: _view_category,
    4: _merge,
    5: _top_k,
}


def run_shell(inventory: Inventory, console: Console, as_table: bool = False) -> None:
    """Run the menu loop until Exit is chosen or input runs out.

    Invalid item input (empty id, negative quantity) is reported and the loop
    carries on; a failed merge leaves the receiving inventory untouched.

    Args:
        inventory: The inventory the session operates on.
        console: Rich Console for prompts, listings and restock notices.
        as_table: Render listings as Rich tables instead of plain lines.
    """
    inventory.subscribe(lambda notice: print_restock(notice, console))

    while True:
        console.print(MENU)
        try:
            choice = IntPrompt.ask("Choose an option", console=console)
            if choice == EXIT_CHOICE:
                console.print("Exiting the system. Goodbye!")
                return
            action = _ACTIONS.get(choice)
            if action is None:
                console.print("[red]Invalid choice. Please try again.[/red]")
                continue
            action(inventory, console, as_table)
        except EOFError:
            console.print()
            console.print("[dim]End of input, leaving the shell.[/dim]")
            return
        except ValueError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
