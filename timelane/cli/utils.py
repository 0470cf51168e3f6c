"""
CLI Utilities Module.

Common utility functions for CLI tools.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from timelane.core.item_store import ItemStore
from timelane.core.items import Item, ItemId

logger = logging.getLogger(__name__)


def validate_items_path(items_path: str) -> bool:
    """
    Validate that an items file exists.

    Args:
        items_path: Path to the JSON items file.

    Returns:
        True if valid, False otherwise.
    """
    path = Path(items_path)

    if not path.is_file():
        logger.error(f"Items file not found: {items_path}")
        return False

    return True


def load_items_file(items_path: Union[str, Path]) -> List[Item]:
    """
    Reads items from a JSON file.

    The file holds either a list of item objects or an object with an
    "items" list. Each item needs id, name, start and end; dates are
    YYYY-MM-DD strings.

    Args:
        items_path: Path to the JSON file.

    Returns:
        List[Item]: Items in file order, not yet validated.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the JSON does not have the expected shape.
        KeyError: If an item lacks a required key.
    """
    with open(items_path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of items in {items_path}")

    items = [Item.from_dict(entry) for entry in data]
    logger.debug(f"Read {len(items)} items from {items_path}")
    return items


def resolve_item_id(store: ItemStore, raw_id: str) -> ItemId:
    """
    Matches a command-line id against the store.

    JSON files may use integer ids while arguments always arrive as
    strings, so a numeric argument also matches an integer id.

    Args:
        store: The loaded items.
        raw_id: The id as typed.

    Returns:
        The id as stored, or ``raw_id`` unchanged if nothing matches.
    """
    if raw_id in store:
        return raw_id
    try:
        numeric = int(raw_id)
    except ValueError:
        return raw_id
    return numeric if numeric in store else raw_id
