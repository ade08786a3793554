"""
Board Commands - Edit operations on columns, tasks and steps.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from ...core.domain.entities import Board, Column, Step, Task
from ...core.domain.enums import Priority, Workload
from .base import Command, CommandResult


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    """Trim a string field; blank means the field is removed."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _coerce_priority(value: Union[Priority, str, None]) -> Optional[Priority]:
    if value is None or isinstance(value, Priority):
        return value
    return Priority.from_string(value)


def _coerce_workload(value: Union[Workload, str, None]) -> Optional[Workload]:
    if value is None or isinstance(value, Workload):
        return value
    return Workload.from_string(value)


def _detail_tasks(task: Task) -> list[Task]:
    return [task] if task.has_detail_file else []


# -----------------------------------------------------------------------------
# Task Commands
# -----------------------------------------------------------------------------


@dataclass
class MoveTaskCommand(Command):
    """Move a task to a position in another (or the same) column."""

    task_id: str
    from_column_id: str
    to_column_id: str
    new_index: int

    def validate(self) -> Optional[str]:
        if not self.task_id:
            return "Task id is required"
        return None

    def _apply(self, board: Board) -> CommandResult:
        from_column = board.find_column(self.from_column_id)
        to_column = board.find_column(self.to_column_id)
        if from_column is None or to_column is None:
            return CommandResult.skip("Column not found")

        index = from_column.index_of(self.task_id)
        if index == -1:
            return CommandResult.skip(f"Task {self.task_id} not found")

        task = from_column.tasks.pop(index)
        to_column.tasks.insert(self.new_index, task)
        return CommandResult.ok(task)


@dataclass
class AddTaskCommand(Command):
    """Append a new task to a column."""

    column_id: str
    title: str
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    priority: Union[Priority, str, None] = None
    workload: Union[Workload, str, None] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    default_expanded: Optional[bool] = None
    steps: Optional[list[Step]] = None

    def validate(self) -> Optional[str]:
        if not self.title or not self.title.strip():
            return "Task title is required"
        return None

    def _apply(self, board: Board) -> CommandResult:
        column = board.find_column(self.column_id)
        if column is None:
            return CommandResult.skip(f"Column {self.column_id} not found")

        task = Task(
            title=self.title.strip(),
            description=_blank_to_none(self.description),
            tags=list(self.tags) if self.tags else None,
            priority=_coerce_priority(self.priority),
            workload=_coerce_workload(self.workload),
            start_date=_blank_to_none(self.start_date),
            due_date=_blank_to_none(self.due_date),
            default_expanded=self.default_expanded,
            steps=list(self.steps) if self.steps else None,
        )
        column.tasks.append(task)
        return CommandResult.ok(task)


@dataclass
class DeleteTaskCommand(Command):
    """Remove a task from its column."""

    task_id: str
    column_id: str

    def _apply(self, board: Board) -> CommandResult:
        column = board.find_column(self.column_id)
        if column is None:
            return CommandResult.skip(f"Column {self.column_id} not found")

        index = column.index_of(self.task_id)
        if index == -1:
            return CommandResult.skip(f"Task {self.task_id} not found")

        return CommandResult.ok(column.tasks.pop(index))


@dataclass
class EditTaskCommand(Command):
    """
    Replace a task's editable fields.

    The edit form always sends the full set of editable fields, so every
    one of them is overwritten; None or blank removes the field. Fields the
    form does not edit (id, updated, completed, milestone, detail) are kept.
    """

    task_id: str
    column_id: str
    title: str
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    priority: Union[Priority, str, None] = None
    workload: Union[Workload, str, None] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    default_expanded: Optional[bool] = None
    steps: Optional[list[Step]] = None

    def validate(self) -> Optional[str]:
        if not self.title or not self.title.strip():
            return "Task title is required"
        return None

    def _apply(self, board: Board) -> CommandResult:
        column = board.find_column(self.column_id)
        task = column.find_task(self.task_id) if column else None
        if task is None:
            return CommandResult.skip(f"Task {self.task_id} not found")

        task.title = self.title.strip()
        task.description = _blank_to_none(self.description)
        task.tags = list(self.tags) if self.tags else None
        task.priority = _coerce_priority(self.priority)
        task.workload = _coerce_workload(self.workload)
        task.default_expanded = self.default_expanded
        task.steps = list(self.steps) if self.steps else None
        task.start_date = _blank_to_none(self.start_date)
        task.due_date = _blank_to_none(self.due_date)

        return CommandResult.ok(task, detail_tasks=_detail_tasks(task))


# -----------------------------------------------------------------------------
# Step Commands
# -----------------------------------------------------------------------------


@dataclass
class UpdateTaskStepCommand(Command):
    """Check or uncheck a single step."""

    task_id: str
    column_id: str
    step_index: int
    completed: bool

    def _apply(self, board: Board) -> CommandResult:
        column = board.find_column(self.column_id)
        task = column.find_task(self.task_id) if column else None
        if task is None or not task.steps:
            return CommandResult.skip(f"Task {self.task_id} has no steps")
        if not 0 <= self.step_index < len(task.steps):
            return CommandResult.skip(f"Step index {self.step_index} out of range")

        task.steps[self.step_index].completed = self.completed
        return CommandResult.ok(task, detail_tasks=_detail_tasks(task))


@dataclass
class ReorderTaskStepsCommand(Command):
    """
    Replace a task's steps with the given ordering.

    new_order lists old indexes in their new order; indexes outside the
    current range are dropped.
    """

    task_id: str
    column_id: str
    new_order: list[int] = field(default_factory=list)

    def _apply(self, board: Board) -> CommandResult:
        column = board.find_column(self.column_id)
        task = column.find_task(self.task_id) if column else None
        if task is None or task.steps is None:
            return CommandResult.skip(f"Task {self.task_id} has no steps")

        original = list(task.steps)
        task.steps = [original[i] for i in self.new_order if 0 <= i < len(original)]
        return CommandResult.ok(task, detail_tasks=_detail_tasks(task))


# -----------------------------------------------------------------------------
# Column Commands
# -----------------------------------------------------------------------------


@dataclass
class AddColumnCommand(Command):
    """Append an empty column."""

    title: str

    def validate(self) -> Optional[str]:
        if not self.title or not self.title.strip():
            return "Column title is required"
        return None

    def _apply(self, board: Board) -> CommandResult:
        column = Column(title=self.title.strip())
        board.columns.append(column)
        return CommandResult.ok(column)


@dataclass
class MoveColumnCommand(Command):
    """Move a column from one position to another."""

    from_index: int
    to_index: int

    def _apply(self, board: Board) -> CommandResult:
        if self.from_index == self.to_index:
            return CommandResult.skip("Column already in place")
        if not 0 <= self.from_index < len(board.columns):
            return CommandResult.skip(f"Column index {self.from_index} out of range")

        column = board.columns.pop(self.from_index)
        board.columns.insert(self.to_index, column)
        return CommandResult.ok(column)


@dataclass
class ToggleColumnArchiveCommand(Command):
    """Set or clear a column's archived flag."""

    column_id: str
    archived: bool

    def _apply(self, board: Board) -> CommandResult:
        column = board.find_column(self.column_id)
        if column is None:
            return CommandResult.skip(f"Column {self.column_id} not found")

        column.archived = self.archived
        return CommandResult.ok(column)
