"""
Application Layer - Edit commands and the board session.

This layer contains:
- commands/: Individual edit operations (MoveTask, EditTask, etc.)
- session: Single-writer owner of an open board document
"""

from .session import BoardSession, SaveResult
from .commands import (
    AddColumnCommand,
    AddTaskCommand,
    Command,
    CommandBatch,
    CommandResult,
    DeleteTaskCommand,
    EditTaskCommand,
    MoveColumnCommand,
    MoveTaskCommand,
    ReorderTaskStepsCommand,
    ToggleColumnArchiveCommand,
    UpdateTaskStepCommand,
)

__all__ = [
    "BoardSession",
    "SaveResult",
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
