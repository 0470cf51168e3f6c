"""
Timeline Errors Module.

Defines the exception hierarchy raised by the layout core. Layout and
geometry errors are precondition violations and propagate to the caller;
interaction edge cases (a resize that would invert an item) are handled
locally and never raised.
"""


class TimelineError(Exception):
    """Base class for all timeline core errors."""


class InvalidRange(TimelineError, ValueError):
    """Raised when a DateRange is requested for an empty item set."""


class InvalidInterval(TimelineError, ValueError):
    """Raised when an item's start date falls after its end date."""


class InvalidDateFormat(TimelineError, ValueError):
    """Raised when a boundary date string is not zero-padded YYYY-MM-DD."""


class ItemNotFound(TimelineError, KeyError):
    """Raised when an item id is not present in the store."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class DuplicateItemId(TimelineError, ValueError):
    """Raised when two items share the same id on load."""
