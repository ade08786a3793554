"""
Command Base - Common machinery for board edit commands.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from ...core.domain.entities import Board, Task


@dataclass
class CommandResult:
    """
    Result of executing a command.

    Attributes:
        success: False only when the command was rejected by validation
        data: Command-specific payload (e.g. the created task)
        error: Validation message when success is False
        skipped: True when the command was a no-op (unknown id, empty change)
        detail_tasks: Tasks whose detail files must be rewritten
    """

    success: bool = True
    data: Any = None
    error: Optional[str] = None
    skipped: bool = False
    reason: Optional[str] = None
    detail_tasks: list[Task] = field(default_factory=list)

    @classmethod
    def ok(cls, data: Any = None, detail_tasks: Optional[list[Task]] = None) -> "CommandResult":
        return cls(success=True, data=data, detail_tasks=detail_tasks or [])

    @classmethod
    def fail(cls, error: str) -> "CommandResult":
        return cls(success=False, error=error)

    @classmethod
    def skip(cls, reason: str) -> "CommandResult":
        return cls(success=True, skipped=True, reason=reason)

    @property
    def changed(self) -> bool:
        """True if the board was mutated."""
        return self.success and not self.skipped


class Command(ABC):
    """
    A discrete edit applied to a Board in place.

    Commands never raise for caller mistakes: invalid arguments produce
    a failed result and unknown ids produce a skipped one, both without
    touching the board.
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def validate(self) -> Optional[str]:
        """Return an error message if the command's arguments are invalid."""
        return None

    def execute(self, board: Board) -> CommandResult:
        error = self.validate()
        if error:
            return CommandResult.fail(error)

        result = self._apply(board)
        logger = logging.getLogger(self.name)
        if result.skipped:
            logger.debug(f"Skipped: {result.reason}")
        else:
            logger.debug("Applied")
        return result

    @abstractmethod
    def _apply(self, board: Board) -> CommandResult:
        ...


class CommandBatch:
    """Run several commands against the same board, in order."""

    def __init__(self, stop_on_error: bool = False):
        self.commands: list[Command] = []
        self.results: list[CommandResult] = []
        self.stop_on_error = stop_on_error

    def add(self, command: Command) -> "CommandBatch":
        self.commands.append(command)
        return self

    def execute(self, board: Board) -> list[CommandResult]:
        self.results = []
        for command in self.commands:
            result = command.execute(board)
            self.results.append(result)
            if not result.success and self.stop_on_error:
                break
        return self.results

    @property
    def all_succeeded(self) -> bool:
        return all(r.success for r in self.results)

    @property
    def detail_tasks(self) -> list[Task]:
        tasks: list[Task] = []
        for result in self.results:
            for task in result.detail_tasks:
                if all(task is not t for t in tasks):
                    tasks.append(task)
        return tasks
