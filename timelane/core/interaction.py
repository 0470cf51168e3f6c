"""
Interaction Controller Module.

State machine for pointer-driven editing of timeline items:
- drag the body to move an item
- drag an edge handle to resize it
- double-click to edit its name
- zoom in/out, independent of the above

The whole interaction state lives in one immutable InteractionState value
that is replaced on every event, so the machine can be driven without a UI.
"""

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Optional, Tuple

from timelane.app.constants import KEY_ENTER, KEY_ESCAPE, ZOOM_DEFAULT
from timelane.core.config import TimelineConfig
from timelane.core.dates import add_days
from timelane.core.errors import ItemNotFound
from timelane.core.item_store import ItemStore
from timelane.core.items import Item, ItemId
from timelane.core.layout import TimelineLayout

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Interaction modes. At most one item is in a non-idle mode."""

    IDLE = "idle"
    MOVING = "moving"
    RESIZING_START = "resizing-start"
    RESIZING_END = "resizing-end"
    EDITING_NAME = "editing-name"


class TargetRole(str, Enum):
    """Part of an item bar that received a pointer-down."""

    ITEM_BODY = "item-body"
    EDGE_START = "edge-start"
    EDGE_END = "edge-end"


class Edge(str, Enum):
    START = "start"
    END = "end"


DRAG_MODES = (Mode.MOVING, Mode.RESIZING_START, Mode.RESIZING_END)

_MODE_FOR_ROLE = {
    TargetRole.ITEM_BODY: Mode.MOVING,
    TargetRole.EDGE_START: Mode.RESIZING_START,
    TargetRole.EDGE_END: Mode.RESIZING_END,
}


def shift_dates(start: date, end: date, days: int) -> Tuple[date, date]:
    """Moves both ends of an interval by ``days``."""
    return add_days(start, days), add_days(end, days)


def resize_dates(
    start: date, end: date, edge: Edge, days: int
) -> Optional[Tuple[date, date]]:
    """
    Moves one end of an interval by ``days``.

    A resized start must stay strictly before ``end`` and a resized end
    strictly after ``start``. Candidates that break this are dropped, not
    clamped.

    Args:
        start: Current first day.
        end: Current last day.
        edge: Which end to move.
        days: Signed day delta.

    Returns:
        The new (start, end), or None if the candidate is rejected.
    """
    edge = Edge(edge)
    if edge is Edge.START:
        new_start = add_days(start, days)
        if new_start < end:
            return new_start, end
        return None

    new_end = add_days(end, days)
    if new_end > start:
        return start, new_end
    return None


@dataclass(frozen=True)
class InteractionState:
    """
    Snapshot of the interaction state machine.

    Attributes:
        mode: Current mode.
        active_item_id: Item being dragged or renamed, None when idle.
        pointer_anchor: Pointer X captured at pointer-down.
        anchor_start: Item start captured at pointer-down.
        anchor_end: Item end captured at pointer-down.
        anchor_total_days: Range width in days captured at pointer-down.
        track_width: Rendered (zoomed) track width captured at pointer-down.
        draft_name: Name text while editing.
        zoom: Current zoom level.
    """

    mode: Mode = Mode.IDLE
    active_item_id: Optional[ItemId] = None
    pointer_anchor: Optional[float] = None
    anchor_start: Optional[date] = None
    anchor_end: Optional[date] = None
    anchor_total_days: Optional[int] = None
    track_width: Optional[float] = None
    draft_name: Optional[str] = None
    zoom: float = ZOOM_DEFAULT

    @property
    def is_idle(self) -> bool:
        return self.mode is Mode.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.mode in DRAG_MODES

    def cleared(self) -> "InteractionState":
        """Returns an idle state that keeps only the zoom level."""
        return InteractionState(zoom=self.zoom)


class InteractionController:
    """
    Translates pointer, keyboard and zoom input into item updates.

    Pointer-moves apply their candidate dates to the store immediately so
    the layout follows the drag. ``on_commit`` fires once per gesture, at
    pointer-up or when a name edit ends, and only if the item changed.

    Starting a new gesture while another item is active is refused rather
    than superseding the active one.
    """

    def __init__(
        self,
        store: ItemStore,
        layout: TimelineLayout,
        config: Optional[TimelineConfig] = None,
        on_commit: Optional[Callable[[Item], None]] = None,
    ):
        """
        Initializes the InteractionController.

        Args:
            store: Store that receives item updates.
            layout: Layout used for pixel to day conversion.
            config: Zoom bounds and step; defaults to TimelineConfig().
            on_commit: Called with the updated item at the end of a gesture.
        """
        self.store = store
        self.layout = layout
        self.config = config or TimelineConfig()
        self.on_commit = on_commit
        self._state = InteractionState(zoom=self._clamp_zoom(ZOOM_DEFAULT))

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def zoom_level(self) -> float:
        return self._state.zoom

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def pointer_down(
        self, item_id: ItemId, client_x: float, role, track_width: float
    ) -> bool:
        """
        Starts a move or resize gesture.

        Args:
            item_id: The item under the pointer.
            client_x: Pointer X coordinate.
            role: TargetRole (or its string value) of the pressed element.
            track_width: Unzoomed track width in pixels; the zoom level is
                applied here.

        Returns:
            bool: True if a gesture started, False if another is active.

        Raises:
            ItemNotFound: If the item is not in the store.
            ValueError: If the role or track width is invalid.
        """
        role = TargetRole(role)
        if not self._state.is_idle:
            logger.debug(
                f"Ignoring pointer-down on {item_id!r}: "
                f"{self._state.mode.value} active on {self._state.active_item_id!r}"
            )
            return False
        if track_width <= 0:
            raise ValueError(f"Track width must be positive, got {track_width}")

        item = self.store.get(item_id)
        mapper = self.layout.require_mapper()

        self._state = dataclasses.replace(
            self._state,
            mode=_MODE_FOR_ROLE[role],
            active_item_id=item.id,
            pointer_anchor=client_x,
            anchor_start=item.start,
            anchor_end=item.end,
            anchor_total_days=mapper.total_days,
            track_width=track_width * self._state.zoom,
        )
        logger.debug(f"Started {self._state.mode.value} on item {item.id!r}")
        return True

    def pointer_move(self, client_x: float) -> Optional[Item]:
        """
        Applies the pointer position to the active item.

        Args:
            client_x: Pointer X coordinate.

        Returns:
            The item as stored after the move, or None when idle, editing,
            or when a resize candidate was rejected.
        """
        state = self._state
        if not state.is_dragging:
            return None

        days = self.layout.require_mapper().days_delta(
            client_x - state.pointer_anchor,
            state.track_width,
            total_days=state.anchor_total_days,
        )

        if state.mode is Mode.MOVING:
            candidate = shift_dates(state.anchor_start, state.anchor_end, days)
        else:
            edge = Edge.START if state.mode is Mode.RESIZING_START else Edge.END
            candidate = resize_dates(state.anchor_start, state.anchor_end, edge, days)
            if candidate is None:
                logger.debug(
                    f"Dropped resize of {state.active_item_id!r} by {days} days: "
                    f"would invert the item"
                )
                return None

        new_start, new_end = candidate
        try:
            return self.store.update(state.active_item_id, start=new_start, end=new_end)
        except ItemNotFound:
            logger.warning(
                f"Active item {state.active_item_id!r} left the store mid-drag"
            )
            self._state = state.cleared()
            return None

    def pointer_up(self) -> Optional[Item]:
        """
        Ends a move or resize gesture.

        Returns:
            The committed item if its dates changed, otherwise None.
        """
        state = self._state
        if not state.is_dragging:
            return None

        self._state = state.cleared()
        try:
            item = self.store.get(state.active_item_id)
        except ItemNotFound:
            return None

        if (item.start, item.end) == (state.anchor_start, state.anchor_end):
            return None

        logger.info(
            f"Committed {state.mode.value} of {item.id!r}: {item.start} - {item.end}"
        )
        self._emit_commit(item)
        return item

    def pointer_leave(self) -> Optional[Item]:
        """Pointer left the track; ends the gesture like pointer-up."""
        return self.pointer_up()

    # ------------------------------------------------------------------
    # Name editing
    # ------------------------------------------------------------------

    def double_click(self, item_id: ItemId) -> bool:
        """
        Starts editing an item's name.

        Returns:
            bool: True if editing started, False if another item is active.

        Raises:
            ItemNotFound: If the item is not in the store.
        """
        if not self._state.is_idle:
            logger.debug(f"Ignoring double-click on {item_id!r}: interaction active")
            return False

        item = self.store.get(item_id)
        self._state = dataclasses.replace(
            self._state,
            mode=Mode.EDITING_NAME,
            active_item_id=item.id,
            draft_name=item.name,
        )
        return True

    def edit_name(self, text: str) -> None:
        """Replaces the in-progress name text."""
        if self._state.mode is Mode.EDITING_NAME:
            self._state = dataclasses.replace(self._state, draft_name=text)

    def key_press(self, key: str) -> Optional[Item]:
        """
        Handles a key while editing a name. Enter and Escape commit.

        Returns:
            The renamed item if the name changed, otherwise None.
        """
        if self._state.mode is Mode.EDITING_NAME and key in (KEY_ENTER, KEY_ESCAPE):
            return self._finish_editing()
        return None

    def blur(self) -> Optional[Item]:
        """Focus left the name editor; commits the draft name."""
        if self._state.mode is Mode.EDITING_NAME:
            return self._finish_editing()
        return None

    def _finish_editing(self) -> Optional[Item]:
        state = self._state
        self._state = state.cleared()
        try:
            current = self.store.get(state.active_item_id)
        except ItemNotFound:
            return None

        if state.draft_name is None or state.draft_name == current.name:
            return None

        item = self.store.update(current.id, name=state.draft_name)
        logger.info(f"Renamed item {item.id!r} to '{item.name}'")
        self._emit_commit(item)
        return item

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------

    def zoom_in(self) -> float:
        return self._set_zoom(self._state.zoom + self.config.zoom_step)

    def zoom_out(self) -> float:
        return self._set_zoom(self._state.zoom - self.config.zoom_step)

    def zoom(self, direction: str) -> float:
        """
        Applies a zoom command.

        Args:
            direction: "in" or "out".

        Returns:
            float: The new zoom level.
        """
        if direction == "in":
            return self.zoom_in()
        if direction == "out":
            return self.zoom_out()
        raise ValueError(f"Unknown zoom direction: {direction!r}")

    def _set_zoom(self, level: float) -> float:
        level = self._clamp_zoom(level)
        if level != self._state.zoom:
            self._state = dataclasses.replace(self._state, zoom=level)
            logger.debug(f"Zoom level {level:.2f}")
        return level

    def _clamp_zoom(self, level: float) -> float:
        return min(max(level, self.config.zoom_min), self.config.zoom_max)

    def _emit_commit(self, item: Item) -> None:
        if self.on_commit:
            self.on_commit(item)
