"""
Base Command Module.

Commands are the user-level edits the CLI runs against an ItemStore. Each
one reports its outcome as a CommandResult instead of raising, so callers
only branch on ``success``.

Classes:
    CommandResult: Outcome of a single command.
    BaseCommand: Template for commands; subclasses implement ``_apply``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from timelane.core.errors import TimelineError
from timelane.core.item_store import ItemStore

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """
    Outcome of a command.

    Attributes:
        success (bool): Whether the store was changed as requested.
        message (str): One-line summary for the user.
        errors (Dict[str, str]): Field name -> problem, for rejected input.
        command_name (str): Class name of the command.
        data (Optional[Dict[str, Any]]): The affected item as ``to_dict()``
            output, when there is one.
    """

    success: bool
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    command_name: str = ""
    data: Optional[Dict[str, Any]] = None


class BaseCommand(ABC):
    """
    Base class for edits to the item store.

    ``execute`` turns any TimelineError raised by ``_apply`` into a failed
    result. There is no undo; edits are applied to an in-memory store.
    """

    def __init__(self):
        self._is_executed = False

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def is_executed(self) -> bool:
        """True once the command has changed the store successfully."""
        return self._is_executed

    def execute(self, store: ItemStore) -> CommandResult:
        """
        Runs the command against ``store``.

        Args:
            store (ItemStore): The store to edit.

        Returns:
            CommandResult: The outcome; never raises TimelineError.
        """
        try:
            result = self._apply(store)
        except TimelineError as e:
            logger.warning(f"{self.name} failed: {e}")
            return self.failed(str(e))

        self._is_executed = result.success
        return result

    @abstractmethod
    def _apply(self, store: ItemStore) -> CommandResult:
        """Performs the edit. May raise TimelineError."""

    def succeeded(self, message: str, data: Dict[str, Any]) -> CommandResult:
        return CommandResult(
            success=True, message=message, command_name=self.name, data=data
        )

    def failed(
        self,
        message: str,
        errors: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> CommandResult:
        return CommandResult(
            success=False,
            message=message,
            errors=errors or {},
            command_name=self.name,
            data=data,
        )
