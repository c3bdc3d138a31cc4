"""Stockpot inventory engine: item storage, category index, merge, top-K.

Two views of the same item set are kept in step on every mutation:
- a primary map from item id to its Item record
- a per-category bucket of sort keys, (-quantity, id), kept sorted with bisect

A quantity or category change always unindexes the old key first and inserts
the new one afterwards. Keys already sitting in a bucket are never touched.
"""

from __future__ import annotations

import heapq
from bisect import bisect_left, insort
from typing import Callable, Optional

from stockpot.models import Item, RestockNotice

DEFAULT_RESTOCK_THRESHOLD = 10

RestockListener = Callable[[RestockNotice], None]


class IndexCorruptionError(RuntimeError):
    """The primary map and the category index disagree.

    Never raised by a correct engine; seeing one means a bug, not bad input.
    """


def _require_count(value: object, what: str) -> int:
    """Reject anything that is not a non-negative int (bool included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


class Inventory:
    """In-memory inventory with a quantity-ordered index per category."""

    def __init__(self, restock_threshold: int = DEFAULT_RESTOCK_THRESHOLD) -> None:
        self.restock_threshold = _require_count(restock_threshold, "restock_threshold")
        self._items: dict[str, Item] = {}
        self._by_category: dict[str, list[tuple[int, str]]] = {}
        self._listeners: list[RestockListener] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def subscribe(self, listener: RestockListener) -> None:
        """Register a callable to receive every RestockNotice, in order."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_or_update(self, item_id: str, name: str, category: str, quantity: int) -> None:
        """Insert a new item or replace an existing one's fields.

        Args:
            item_id: Non-empty identifier; the primary key.
            name: Display name, replaced on every call.
            category: Grouping key; changing it moves the item between buckets.
            quantity: Non-negative stock count.

        Raises:
            ValueError: Empty id, a non-string name or category, or a
                negative/non-integer quantity. Nothing is modified in that case.
        """
        if not isinstance(item_id, str) or not item_id:
            raise ValueError(f"item id must be a non-empty string, got {item_id!r}")
        if not isinstance(name, str):
            raise ValueError(f"name must be a string, got {name!r}")
        if not isinstance(category, str):
            raise ValueError(f"category must be a string, got {category!r}")
        _require_count(quantity, "quantity")

        item = self._items.get(item_id)
        if item is not None:
            self._unindex(item)
            item.name = name
            item.category = category
            item.quantity = quantity
        else:
            item = Item(id=item_id, name=name, category=category, quantity=quantity)
            self._items[item_id] = item
        self._index(item)

        if item.quantity < self.restock_threshold:
            notice = RestockNotice(item=item.copy(), threshold=self.restock_threshold)
            for listener in self._listeners:
                listener(notice)

    def remove(self, item_id: str) -> None:
        """Delete an item. Unknown ids are ignored."""
        item = self._items.pop(item_id, None)
        if item is not None:
            self._unindex(item)

    def merge_from(self, other: Inventory) -> None:
        """Pull items from another inventory, keeping the higher quantity.

        Items missing here are added. Items present on both sides are replaced
        only when the incoming quantity is strictly greater, so an equal
        quantity leaves name and category alone too. Everything goes through
        add_or_update, which means restock notices fire on this inventory.
        `other` is never modified.
        """
        for incoming in list(other._items.values()):
            existing = self._items.get(incoming.id)
            if existing is None or incoming.quantity > existing.quantity:
                self.add_or_update(incoming.id, incoming.name, incoming.category, incoming.quantity)

    # ------------------------------------------------------------------
    # Queries (all return detached copies)
    # ------------------------------------------------------------------

    def get(self, item_id: str) -> Optional[Item]:
        item = self._items.get(item_id)
        return item.copy() if item is not None else None

    def categories(self) -> list[str]:
        """Names of every category holding at least one item, sorted."""
        return sorted(self._by_category)

    def items_by_category(self, category: str) -> list[Item]:
        """Items in a category, highest quantity first, ties by ascending id.

        Returns an empty list for an unknown category.
        """
        bucket = self._by_category.get(category, [])
        return [self._items[item_id].copy() for _, item_id in bucket]

    def top_k(self, k: int) -> list[Item]:
        """The k highest-quantity items across all categories.

        Ties are broken by ascending id. k <= 0 gives an empty list; a k larger
        than the inventory gives every item.
        """
        if k <= 0:
            return []
        ranked = heapq.nsmallest(k, self._items.values(), key=lambda item: item.sort_key)
        return [item.copy() for item in ranked]

    # ------------------------------------------------------------------
    # Index maintenance
    # ------------------------------------------------------------------

    def _index(self, item: Item) -> None:
        insort(self._by_category.setdefault(item.category, []), item.sort_key)

    def _unindex(self, item: Item) -> None:
        """Drop the item's current key, deleting the bucket once it empties."""
        bucket = self._by_category.get(item.category)
        if bucket is None:
            raise IndexCorruptionError(
                f"item {item.id!r} has no bucket for category {item.category!r}"
            )
        key = item.sort_key
        pos = bisect_left(bucket, key)
        if pos == len(bucket) or bucket[pos] != key:
            raise IndexCorruptionError(
                f"item {item.id!r} missing from bucket {item.category!r} at key {key}"
            )
        del bucket[pos]
        if not bucket:
            del self._by_category[item.category]

    def check_invariants(self) -> None:
        """Walk both views and raise IndexCorruptionError on any mismatch."""
        seen: set[str] = set()
        for category, bucket in self._by_category.items():
            if not bucket:
                raise IndexCorruptionError(f"empty bucket left for category {category!r}")
            if any(a >= b for a, b in zip(bucket, bucket[1:])):
                raise IndexCorruptionError(f"bucket {category!r} is out of order")
            for key in bucket:
                item_id = key[1]
                item = self._items.get(item_id)
                if item is None:
                    raise IndexCorruptionError(f"bucket {category!r} holds unknown id {item_id!r}")
                if item.category != category or item.sort_key != key:
                    raise IndexCorruptionError(f"stale key {key} for item {item_id!r}")
                if item_id in seen:
                    raise IndexCorruptionError(f"item {item_id!r} indexed more than once")
                seen.add(item_id)
        missing = set(self._items) - seen
        if missing:
            raise IndexCorruptionError(f"items not indexed: {sorted(missing)}")
