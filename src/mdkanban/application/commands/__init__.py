"""
Commands - Individual edit operations on a board.

Commands represent write operations and can be:
- Validated before touching the board
- Executed in place
- Batched
"""

from .base import Command, CommandBatch, CommandResult
from .board_commands import (
    AddColumnCommand,
    AddTaskCommand,
    DeleteTaskCommand,
    EditTaskCommand,
    MoveColumnCommand,
    MoveTaskCommand,
    ReorderTaskStepsCommand,
    ToggleColumnArchiveCommand,
    UpdateTaskStepCommand,
)

__all__ = [
    "Command",
    "CommandBatch",
    "CommandResult",
    "AddColumnCommand",
    "AddTaskCommand",
    "DeleteTaskCommand",
    "EditTaskCommand",
    "MoveColumnCommand",
    "MoveTaskCommand",
    "ReorderTaskStepsCommand",
    "ToggleColumnArchiveCommand",
    "UpdateTaskStepCommand",
]
