#!/usr/bin/env python3
"""
Timeline Layout CLI.

Provides command-line tools for inspecting the lane layout of an items file
and trying out edits. Edits are printed, never written back.

Usage:
    python -m timelane.cli.timeline lanes --items items.json
    python -m timelane.cli.timeline range --items items.json --json
    python -m timelane.cli.timeline geometry --items items.json --percent
    python -m timelane.cli.timeline move --items items.json --id 3 --days 5
    python -m timelane.cli.timeline resize --items items.json --id 3 \
        --edge end --days -2
    python -m timelane.cli.timeline rename --items items.json --id 3 \
        --name "Kickoff"
"""

import argparse
import json
import logging
import sys

from timelane.cli.utils import load_items_file, resolve_item_id, validate_items_path
from timelane.commands.item_commands import (
    MoveItemCommand,
    RenameItemCommand,
    ResizeItemCommand,
)
from timelane.core.item_store import ItemStore
from timelane.core.layout import TimelineLayout

# Setup logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def _load_layout(args: argparse.Namespace) -> TimelineLayout:
    store = ItemStore(load_items_file(args.items))
    return TimelineLayout(store)


def show_lanes(args: argparse.Namespace) -> int:
    """Print the lane assignment."""
    try:
        layout = _load_layout(args)

        if layout.is_empty:
            print("No items found.")
            return 0

        if args.json:
            print(
                json.dumps(
                    {
                        "start": layout.date_range.start.isoformat(),
                        "end": layout.date_range.end.isoformat(),
                        "lanes": [
                            [item.to_dict() for item in lane] for lane in layout.lanes
                        ],
                    },
                    indent=2,
                )
            )
            return 0

        print(
            f"✓ {len(layout.store)} item(s) in {layout.assignment.lane_count} "
            f"lane(s), {layout.date_range.start} - {layout.date_range.end}\n"
        )
        for index, lane in enumerate(layout.lanes):
            print(f"Lane {index}:")
            for item in lane:
                print(f"  [{item.id}] {item.name}: {item.start} - {item.end}")
        return 0

    except Exception as e:
        logger.error(f"Failed to assign lanes: {e}")
        if args.verbose:
            raise
        return 1


def show_range(args: argparse.Namespace) -> int:
    """Print the month-aligned date range and its months."""
    try:
        layout = _load_layout(args)

        if layout.is_empty:
            print("No items found.")
            return 0

        date_range = layout.date_range
        if args.json:
            print(
                json.dumps(
                    {
                        "start": date_range.start.isoformat(),
                        "end": date_range.end.isoformat(),
                        "total_days": date_range.total_days,
                        "months": [m.isoformat() for m in date_range.months],
                    },
                    indent=2,
                )
            )
            return 0

        print(
            f"Range: {date_range.start} - {date_range.end} "
            f"({date_range.total_days} days)"
        )
        print("Months:")
        for span in date_range.month_segments():
            print(f"  {span.start:%Y-%m}: {span.days} days")
        return 0

    except Exception as e:
        logger.error(f"Failed to compute date range: {e}")
        if args.verbose:
            raise
        return 1


def show_geometry(args: argparse.Namespace) -> int:
    """Print the horizontal placement of every item."""
    try:
        layout = _load_layout(args)

        if layout.is_empty:
            print("No items found.")
            return 0

        lanes = layout.assignment.as_mapping()
        rows = []
        for item in layout.store:
            geometry = layout.geometry(item.id)
            if args.percent:
                offset, width = geometry.as_percentages()
            else:
                offset, width = geometry.offset_fraction, geometry.width_fraction
            rows.append(
                {"id": item.id, "lane": lanes[item.id], "offset": offset, "width": width}
            )

        if args.json:
            print(json.dumps(rows, indent=2))
            return 0

        unit = "%" if args.percent else ""
        for row in rows:
            print(
                f"[{row['id']}] lane {row['lane']}: "
                f"offset {row['offset']:.4f}{unit}, width {row['width']:.4f}{unit}"
            )
        return 0

    except Exception as e:
        logger.error(f"Failed to compute geometry: {e}")
        if args.verbose:
            raise
        return 1


def _run_item_command(args: argparse.Namespace, build_command, action: str) -> int:
    try:
        store = ItemStore(load_items_file(args.items))
        item_id = resolve_item_id(store, args.id)

        cmd = build_command(item_id)
        result = cmd.execute(store)

        if result.success:
            print(f"✓ {result.message}")
            print(json.dumps(result.data, indent=2))
            return 0
        else:
            print(f"✗ Error: {result.message}")
            return 1

    except Exception as e:
        logger.error(f"Failed to {action} item: {e}")
        if args.verbose:
            raise
        return 1


def move_item(args: argparse.Namespace) -> int:
    """Shift an item by a number of days."""
    return _run_item_command(
        args, lambda item_id: MoveItemCommand(item_id, args.days), "move"
    )


def resize_item(args: argparse.Namespace) -> int:
    """Move one edge of an item."""
    return _run_item_command(
        args,
        lambda item_id: ResizeItemCommand(item_id, args.edge, args.days),
        "resize",
    )


def rename_item(args: argparse.Namespace) -> int:
    """Change an item's name."""
    return _run_item_command(
        args, lambda item_id: RenameItemCommand(item_id, args.name), "rename"
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect and edit timeline lane layouts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_items_arg(sub):
        sub.add_argument(
            "--items", "-i", required=True, help="Path to JSON items file"
        )

    # Lanes command
    lanes_parser = subparsers.add_parser("lanes", help="Show lane assignment")
    add_items_arg(lanes_parser)
    lanes_parser.add_argument("--json", action="store_true", help="Output as JSON")
    lanes_parser.set_defaults(func=show_lanes)

    # Range command
    range_parser = subparsers.add_parser("range", help="Show date range and months")
    add_items_arg(range_parser)
    range_parser.add_argument("--json", action="store_true", help="Output as JSON")
    range_parser.set_defaults(func=show_range)

    # Geometry command
    geometry_parser = subparsers.add_parser(
        "geometry", help="Show horizontal placement of items"
    )
    add_items_arg(geometry_parser)
    geometry_parser.add_argument(
        "--percent", action="store_true", help="Report percentages"
    )
    geometry_parser.add_argument("--json", action="store_true", help="Output as JSON")
    geometry_parser.set_defaults(func=show_geometry)

    # Move command
    move_parser = subparsers.add_parser("move", help="Shift an item by days")
    add_items_arg(move_parser)
    move_parser.add_argument("--id", required=True, help="Item ID")
    move_parser.add_argument(
        "--days", type=int, required=True, help="Signed number of days"
    )
    move_parser.set_defaults(func=move_item)

    # Resize command
    resize_parser = subparsers.add_parser("resize", help="Move one edge of an item")
    add_items_arg(resize_parser)
    resize_parser.add_argument("--id", required=True, help="Item ID")
    resize_parser.add_argument(
        "--edge", choices=["start", "end"], required=True, help="Edge to move"
    )
    resize_parser.add_argument(
        "--days", type=int, required=True, help="Signed number of days"
    )
    resize_parser.set_defaults(func=resize_item)

    # Rename command
    rename_parser = subparsers.add_parser("rename", help="Rename an item")
    add_items_arg(rename_parser)
    rename_parser.add_argument("--id", required=True, help="Item ID")
    rename_parser.add_argument("--name", required=True, help="New name")
    rename_parser.set_defaults(func=rename_item)

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Validate items path
    if hasattr(args, "items"):
        if not validate_items_path(args.items):
            sys.exit(1)

    # Execute command
    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
