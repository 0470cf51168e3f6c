import logging
from typing import Any, Dict

from timelane.commands.base_command import BaseCommand, CommandResult
from timelane.core.dates import parse_iso_date
from timelane.core.interaction import Edge, resize_dates, shift_dates
from timelane.core.item_store import UPDATABLE_FIELDS, ItemStore
from timelane.core.items import ItemId

logger = logging.getLogger(__name__)


class UpdateItemCommand(BaseCommand):
    """
    Command to update an existing item.
    Accepts a dictionary of changes; dates may be ISO strings.
    """

    def __init__(self, item_id: ItemId, update_data: Dict[str, Any]):
        """
        Initializes the Update command.

        Args:
            item_id: The ID of the item to update.
            update_data (dict): Dictionary of fields to update. Unknown
                fields are ignored.
        """
        super().__init__()
        self.item_id = item_id
        self.update_data = update_data

    def _apply(self, store: ItemStore) -> CommandResult:
        """
        1. Filters the changes to updatable fields.
        2. Parses boundary dates.
        3. Commits through the store, which enforces start <= end.
        """
        clean_data = {
            k: v for k, v in self.update_data.items() if k in UPDATABLE_FIELDS
        }
        for key in ("start", "end"):
            if key in clean_data:
                clean_data[key] = parse_iso_date(clean_data[key])

        item = store.update(self.item_id, **clean_data)
        logger.info(f"Executing UpdateItem: {item.name}")
        return self.succeeded(f"Updated item {item.id}", item.to_dict())


class MoveItemCommand(BaseCommand):
    """
    Command to shift an item by a whole number of days, keeping its length.
    """

    def __init__(self, item_id: ItemId, days: int):
        super().__init__()
        self.item_id = item_id
        self.days = days

    def _apply(self, store: ItemStore) -> CommandResult:
        current = store.get(self.item_id)
        start, end = shift_dates(current.start, current.end, self.days)
        item = store.update(self.item_id, start=start, end=end)
        logger.info(f"Executing MoveItem: {item.name} by {self.days} days")
        return self.succeeded(
            f"Moved item {item.id} by {self.days} days", item.to_dict()
        )


class ResizeItemCommand(BaseCommand):
    """
    Command to move one edge of an item.

    A resize that would leave the start on or after the end is rejected and
    the item keeps its previous dates.
    """

    def __init__(self, item_id: ItemId, edge: str, days: int):
        """
        Initializes the Resize command.

        Args:
            item_id: The ID of the item to resize.
            edge (str): "start" or "end".
            days (int): Signed number of days to move the edge.
        """
        super().__init__()
        self.item_id = item_id
        self.edge = edge
        self.days = days

    def _apply(self, store: ItemStore) -> CommandResult:
        try:
            edge = Edge(self.edge)
        except ValueError:
            return self.failed(
                f"Unknown edge: {self.edge!r}",
                errors={"edge": "must be 'start' or 'end'"},
            )

        current = store.get(self.item_id)
        candidate = resize_dates(current.start, current.end, edge, self.days)
        if candidate is None:
            logger.debug(
                f"Rejected resize of {self.item_id!r}: {edge.value} by {self.days}"
            )
            return self.failed(
                f"Resizing the {edge.value} by {self.days} days would "
                f"leave no days in item {current.id}",
                errors={edge.value: "start must stay before end"},
                data=current.to_dict(),
            )

        start, end = candidate
        item = store.update(self.item_id, start=start, end=end)
        logger.info(f"Executing ResizeItem: {item.name} {edge.value} by {self.days}")
        return self.succeeded(f"Resized item {item.id}", item.to_dict())


class RenameItemCommand(BaseCommand):
    """
    Command to change an item's display name.
    """

    def __init__(self, item_id: ItemId, name: str):
        super().__init__()
        self.item_id = item_id
        self.new_name = name

    def _apply(self, store: ItemStore) -> CommandResult:
        if not self.new_name or not self.new_name.strip():
            return self.failed("Item name cannot be empty", errors={"name": "required"})

        item = store.update(self.item_id, name=self.new_name)
        logger.info(f"Executing RenameItem: {item.id} -> {item.name}")
        return self.succeeded(f"Renamed item {item.id}", item.to_dict())
