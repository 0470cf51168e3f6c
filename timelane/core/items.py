"""Core Items Module.

Defines the Item dataclass representing a date-ranged bar on the timeline.

An Item spans whole calendar days, both ends inclusive:
- ``start <= end`` must hold at all times (see ``validate``)
- Dates serialize as ISO ``YYYY-MM-DD`` strings
- The lane an item occupies is derived by the lane assigner, never stored
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Union

from timelane.core.dates import format_iso_date, parse_iso_date
from timelane.core.errors import InvalidInterval

ItemId = Union[int, str]


@dataclass
class Item:
    """
    Represents a named span of calendar days.
    Core unit of the timeline.
    """

    id: ItemId
    name: str
    start: date
    end: date
    description: str = ""

    def __post_init__(self):
        self.start = parse_iso_date(self.start)
        self.end = parse_iso_date(self.end)

    @property
    def duration_days(self) -> int:
        """
        Number of days covered, counting both ends.

        Returns:
            int: At least 1 for a valid item.
        """
        return (self.end - self.start).days + 1

    def validate(self) -> "Item":
        """
        Checks the ``start <= end`` invariant.

        Returns:
            Item: self, to allow chaining.

        Raises:
            InvalidInterval: If start falls after end.
        """
        if self.start > self.end:
            raise InvalidInterval(
                f"Item {self.id!r} starts {format_iso_date(self.start)} "
                f"after it ends {format_iso_date(self.end)}"
            )
        return self

    def overlaps(self, other: "Item") -> bool:
        """
        Inclusive-inclusive interval intersection.

        Items that touch on a single day overlap.
        """
        return self.start <= other.end and other.start <= self.end

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the Item to a dictionary with ISO date strings.

        Returns:
            Dict[str, Any]: Serializable representation of the item.
        """
        data = {
            "id": self.id,
            "name": self.name,
            "start": format_iso_date(self.start),
            "end": format_iso_date(self.end),
        }
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        """
        Creates an Item from a dictionary such as one loaded from JSON.

        Args:
            data (Dict[str, Any]): Must contain id, name, start and end.

        Returns:
            Item: A new Item. It is not validated; the store does that.

        Raises:
            KeyError: If a required key is missing.
            InvalidDateFormat: If a date is not YYYY-MM-DD.
        """
        return cls(
            id=data["id"],
            name=data["name"],
            start=data["start"],
            end=data["end"],
            description=data.get("description", "") or "",
        )
