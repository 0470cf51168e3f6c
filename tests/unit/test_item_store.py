"""
Unit tests for ItemStore.
"""

from datetime import date

import pytest

from timelane.core.errors import DuplicateItemId, InvalidInterval, ItemNotFound
from timelane.core.item_store import ItemStore
from timelane.core.items import Item


@pytest.fixture
def store(sample_items):
    return ItemStore(sample_items)


class TestItemStore:
    """Tests for loading, lookups and updates."""

    def test_items_keep_insertion_order(self, store):
        assert [item.id for item in store.items()] == [1, 2, 3]
        assert len(store) == 3
        assert 2 in store
        assert 99 not in store

    def test_get_unknown_item(self, store):
        with pytest.raises(ItemNotFound) as excinfo:
            store.get(99)
        assert "99" in str(excinfo.value)

    def test_load_rejects_duplicate_ids(self):
        items = [
            Item(id=1, name="A", start="2024-01-01", end="2024-01-02"),
            Item(id=1, name="B", start="2024-01-03", end="2024-01-04"),
        ]
        with pytest.raises(DuplicateItemId):
            ItemStore(items)

    def test_load_rejects_inverted_item(self):
        with pytest.raises(InvalidInterval):
            ItemStore([Item(id=1, name="A", start="2024-01-05", end="2024-01-01")])

    def test_update_replaces_item(self, store):
        before = store.get(1)

        updated = store.update(1, start=date(2024, 1, 2), end=date(2024, 1, 6))

        assert updated.start == date(2024, 1, 2)
        assert store.get(1) is updated
        assert before.start == date(2024, 1, 1)

    def test_update_parses_string_dates(self, store):
        updated = store.update(1, end="2024-01-07")
        assert updated.end == date(2024, 1, 7)

    def test_update_rejects_inverted_interval(self, store):
        """A rejected update leaves the stored item untouched."""
        before = store.get(1)

        with pytest.raises(InvalidInterval):
            store.update(1, start=date(2024, 1, 9))

        assert store.get(1) is before

    def test_update_rejects_unknown_fields(self, store):
        with pytest.raises(ValueError):
            store.update(1, id=5)

    def test_update_unknown_item(self, store):
        with pytest.raises(ItemNotFound):
            store.update(99, name="X")


class TestItemStoreListeners:
    """Tests for change notification."""

    def test_listener_receives_updated_item(self, store):
        received = []
        store.subscribe(received.append)

        updated = store.update(2, name="Renamed")

        assert received == [updated]

    def test_load_notifies_with_none(self, store, sample_items):
        received = []
        store.subscribe(received.append)

        store.load(sample_items[:1])

        assert received == [None]
        assert len(store) == 1

    def test_unchanged_update_does_not_notify(self, store):
        received = []
        store.subscribe(received.append)

        result = store.update(1, name="A")

        assert result is store.get(1)
        assert received == []

    def test_unsubscribe(self, store):
        received = []
        unsubscribe = store.subscribe(received.append)
        unsubscribe()

        store.update(1, name="Other")

        assert received == []
