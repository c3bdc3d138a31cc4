"""Data models for the stockpot inventory engine.

Item and RestockNotice, the typed records that flow through
inventory → shell → render.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Item:
    """A single inventory line, keyed by its id."""

    id: str
    name: str
    category: str
    quantity: int = 0

    @property
    def sort_key(self) -> tuple[int, str]:
        """Highest quantity first, then ascending id."""
        return (-self.quantity, self.id)

    def copy(self) -> Item:
        """Detached snapshot, safe to hand out of the engine."""
        return replace(self)

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, "
            f"Category: {self.category}, Quantity: {self.quantity}"
        )


@dataclass(frozen=True)
class RestockNotice:
    """Emitted when an item's quantity ends up below the restock threshold."""

    item: Item
    threshold: int

    @property
    def message(self) -> str:
        return f"Restock needed for item: {self.item}"
