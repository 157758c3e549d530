"""Controller layer tying commands to the buffer model."""

from .actions import COMMAND_HANDLERS
from .context import CommandResult, EditorBus, EditorContext
from .controller import EditorController

__all__ = [
    "COMMAND_HANDLERS",
    "CommandResult",
    "EditorBus",
    "EditorContext",
    "EditorController",
]
