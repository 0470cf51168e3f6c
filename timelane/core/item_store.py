"""
Item Store Module.

The authoritative, mutable collection of timeline items. Every mutation is
validated before it is committed and then announced to subscribers, which
re-run the layout.
"""

import dataclasses
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from timelane.core.errors import DuplicateItemId, ItemNotFound
from timelane.core.items import Item, ItemId

logger = logging.getLogger(__name__)

StoreListener = Callable[[Optional[Item]], None]

# Fields an update may touch; the id is fixed for the item's lifetime.
UPDATABLE_FIELDS = ("name", "start", "end", "description")


class ItemStore:
    """
    Insertion-ordered collection of Items keyed by id.

    Listeners are called with the updated Item after ``update`` and with
    None after ``load``.
    """

    def __init__(self, items: Iterable[Item] = ()):
        """
        Initializes the store.

        Args:
            items: Initial items; validated as in ``load``.
        """
        self._items: Dict[ItemId, Item] = {}
        self._listeners: List[StoreListener] = []
        self.load(items)

    def load(self, items: Iterable[Item]) -> None:
        """
        Replaces the whole collection.

        Args:
            items: The new items, in display order.

        Raises:
            InvalidInterval: If any item starts after it ends.
            DuplicateItemId: If two items share an id.
        """
        loaded: Dict[ItemId, Item] = {}
        for item in items:
            item.validate()
            if item.id in loaded:
                raise DuplicateItemId(f"Duplicate item id: {item.id!r}")
            loaded[item.id] = item

        self._items = loaded
        logger.info(f"Loaded {len(loaded)} items")
        self._notify(None)

    def get(self, item_id: ItemId) -> Item:
        """
        Returns the item with the given id.

        Raises:
            ItemNotFound: If no such item exists.
        """
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFound(f"Item not found: {item_id!r}") from None

    def items(self) -> List[Item]:
        """Returns the items in insertion order."""
        return list(self._items.values())

    def update(self, item_id: ItemId, **changes) -> Item:
        """
        Applies field changes to an item.

        The item is replaced, not mutated, so anything holding the previous
        Item keeps a consistent snapshot.

        Args:
            item_id: The item to change.
            **changes: New values for name, start, end or description.

        Returns:
            Item: The committed item.

        Raises:
            ItemNotFound: If no such item exists.
            ValueError: If an unknown field is given.
            InvalidInterval: If the change would put start after end; the
                store is left unchanged.
        """
        current = self.get(item_id)
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        updated = dataclasses.replace(current, **changes).validate()
        if updated == current:
            return current

        self._items[item_id] = updated
        logger.debug(
            f"Updated item {item_id!r}: {updated.start} - {updated.end} '{updated.name}'"
        )
        self._notify(updated)
        return updated

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """
        Registers a change listener.

        Args:
            listener: Called after every committed change.

        Returns:
            Callable: Removes the listener when called.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, item: Optional[Item]) -> None:
        for listener in list(self._listeners):
            listener(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items())

    def __contains__(self, item_id) -> bool:
        return item_id in self._items
