"""stockpot — in-memory inventory tracker.

Stores items by id, keeps each category ordered by quantity, merges a second
inventory by keeping the higher quantity per item, and answers top-K queries.
Items that fall below the restock threshold raise a restock notice.

Usage:
    python -m stockpot shell                 # Interactive menu
    python -m stockpot settings              # Show configuration
"""

from stockpot.inventory import IndexCorruptionError, Inventory
from stockpot.models import Item, RestockNotice

__all__ = ["IndexCorruptionError", "Inventory", "Item", "RestockNotice"]
