"""
Timeline Layout Module.

Ties the item store to the date range, lane assignment and geometry. The
layout is recomputed from scratch whenever the store changes; nothing is
maintained incrementally.
"""

import logging
from typing import Callable, List, Optional

from timelane.core.config import TimelineConfig
from timelane.core.date_range import DateRange, compute_date_range
from timelane.core.errors import InvalidRange
from timelane.core.geometry import GeometryMapper, ItemGeometry
from timelane.core.item_store import ItemStore
from timelane.core.items import Item, ItemId
from timelane.core.lane_assigner import Lane, LaneAssigner, LaneAssignment

logger = logging.getLogger(__name__)


class TimelineLayout:
    """
    Derived layout for the current contents of an ItemStore.

    Attributes:
        date_range: Covering range, or None while the store is empty.
        assignment: Current lane assignment (empty while the store is empty).
        mapper: Geometry mapper for ``date_range``, or None while empty.
    """

    def __init__(self, store: ItemStore, config: Optional[TimelineConfig] = None):
        """
        Initializes the layout and subscribes to store changes.

        Args:
            store: The item store to lay out.
            config: Layout settings; defaults to TimelineConfig().
        """
        self.store = store
        self.config = config or TimelineConfig()
        self._assigner = LaneAssigner()
        self._listeners: List[Callable[["TimelineLayout"], None]] = []

        self.date_range: Optional[DateRange] = None
        self.assignment = LaneAssignment()
        self.mapper: Optional[GeometryMapper] = None

        self._unsubscribe = store.subscribe(self._on_store_changed)
        self.refresh()

    @property
    def is_empty(self) -> bool:
        return self.date_range is None

    @property
    def lanes(self) -> List[Lane]:
        return self.assignment.lanes

    def refresh(self) -> None:
        """Recomputes the date range, lanes and mapper from the store."""
        items = self.store.items()
        if not items:
            self.date_range = None
            self.assignment = LaneAssignment()
            self.mapper = None
        else:
            self.date_range = compute_date_range(items)
            self.assignment = self._assigner.assign(items)
            self.mapper = GeometryMapper(
                self.date_range, min_width_fraction=self.config.min_width_fraction
            )

        for listener in list(self._listeners):
            listener(self)

    def geometry(self, item_id: ItemId) -> ItemGeometry:
        """
        Display geometry of a stored item.

        Raises:
            InvalidRange: If the store is empty.
            ItemNotFound: If the item does not exist.
        """
        return self.require_mapper().geometry(self.store.get(item_id))

    def lane_of(self, item_id: ItemId) -> int:
        return self.assignment.lane_of(item_id)

    def require_mapper(self) -> GeometryMapper:
        """
        Returns the mapper, failing loudly when there is nothing to map.

        Raises:
            InvalidRange: If the store is empty.
        """
        if self.mapper is None:
            raise InvalidRange("Timeline is empty; no date range to map against")
        return self.mapper

    def lane_top(self, lane_index: int) -> int:
        """Y coordinate of a lane's top edge, below the month header."""
        return self.config.header_height + lane_index * self.config.lane_spacing

    def content_height(self) -> int:
        """Total height needed for the header and every lane."""
        return (
            self.config.header_height
            + self.assignment.lane_count * self.config.lane_spacing
            + self.config.content_padding
        )

    def subscribe(self, listener: Callable[["TimelineLayout"], None]) -> Callable[[], None]:
        """
        Registers a callback run after every recomputation.

        Returns:
            Callable: Removes the listener when called.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Detaches from the store."""
        self._unsubscribe()
        self._listeners.clear()

    def _on_store_changed(self, item: Optional[Item]) -> None:
        self.refresh()
