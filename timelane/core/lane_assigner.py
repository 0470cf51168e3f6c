"""
Lane Assigner Module.

Provides the lane packing algorithm for organizing items on the timeline
without overlaps using a greedy "First Fit" approach.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from timelane.core.errors import ItemNotFound
from timelane.core.items import Item, ItemId

logger = logging.getLogger(__name__)

Lane = List[Item]


@dataclass
class LaneAssignment:
    """
    Ordered lanes produced by one packing run.

    The list index of a lane is its vertical position. Within a lane items
    are kept in placement order (ascending start date).
    """

    lanes: List[Lane] = field(default_factory=list)

    @property
    def lane_count(self) -> int:
        return len(self.lanes)

    def as_mapping(self) -> Dict[ItemId, int]:
        """
        Maps every item id to its lane index.

        Returns:
            Dict[ItemId, int]: item id -> lane index.
        """
        return {item.id: index for index, lane in enumerate(self.lanes) for item in lane}

    def lane_of(self, item_id: ItemId) -> int:
        """
        Looks up the lane of a single item.

        Raises:
            ItemNotFound: If the item was not part of this assignment.
        """
        for index, lane in enumerate(self.lanes):
            if any(item.id == item_id for item in lane):
                return index
        raise ItemNotFound(f"Item {item_id!r} has no lane")

    def __iter__(self):
        return iter(self.lanes)

    def __len__(self) -> int:
        return len(self.lanes)


class LaneAssigner:
    """
    Handles the lane packing algorithm for timeline items.

    Uses a greedy "First Fit" algorithm over items sorted by start date,
    which yields the minimum number of lanes for interval data (the maximum
    number of items covering any single day). Overlap is inclusive on both
    ends: an item ending on day D and one starting on day D never share a
    lane.
    """

    def assign(self, items: Iterable[Item]) -> LaneAssignment:
        """
        Packs items into lanes using the First Fit algorithm.

        Args:
            items: Items to pack, in any order. Ties on start date keep
                the input order so repeated runs give identical lanes.

        Returns:
            LaneAssignment: Every input item placed exactly once.

        Raises:
            InvalidInterval: If an item starts after it ends.
        """
        items = list(items)
        for item in items:
            item.validate()

        # sorted() is stable, so equal starts stay in input order
        sorted_items = sorted(items, key=lambda item: item.start)

        lanes: List[Lane] = []
        for item in sorted_items:
            self._place(lanes, item)

        logger.debug(f"Packed {len(items)} items into {len(lanes)} lanes")
        return LaneAssignment(lanes=lanes)

    def _place(self, lanes: List[Lane], item: Item) -> int:
        """
        Places an item in the first lane whose last item ends strictly
        before it starts, opening a new lane if none does.

        Args:
            lanes: Lanes built so far; mutated in place.
            item: The item to place.

        Returns:
            int: The lane index (0-based).
        """
        for index, lane in enumerate(lanes):
            if lane[-1].end < item.start:
                lane.append(item)
                return index

        lanes.append([item])
        return len(lanes) - 1


def assign_lanes(items: Iterable[Item]) -> LaneAssignment:
    """Packs ``items`` with a fresh LaneAssigner."""
    return LaneAssigner().assign(items)
