"""
Domain Entities - The board document tree.

Board -> Column -> Task -> Step form a single owned tree with no
back-references. The tree is mutated in place by edit commands and
replaced wholesale on every reparse.
"""

import random
import string
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from .enums import Priority, Workload


# Reserved task property keys, in the order the formatter emits them.
# The parser uses the same tuple to tell a property bullet apart from a
# task-title bullet, so adding a key here changes both directions at once.
PROPERTY_KEYS = (
    "id",
    "tags",
    "priority",
    "workload",
    "updated",
    "completed",
    "milestone",
    "start",
    "due",
    "detail",
    "defaultExpanded",
    "steps",
)

ARCHIVED_MARKER = "[Archived]"

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id() -> str:
    """Generate an opaque 9-character base-36 identifier."""
    return "".join(random.choices(_ID_ALPHABET, k=9))


@dataclass
class Step:
    """A checkbox item in a task's checklist."""

    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "completed": self.completed}


@dataclass
class Task:
    """
    A unit of work.

    Every optional field uses None for "absent". Absent fields are never
    written to markdown; an empty string is treated the same way by the
    formatter, so callers remove a field by setting it to None.
    """

    id: str = field(default_factory=generate_id)
    title: str = ""
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    priority: Optional[Priority] = None
    workload: Optional[Workload] = None
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    updated: Optional[str] = None
    completed: Optional[str] = None
    milestone: Optional[str] = None
    detail_path: Optional[str] = None
    default_expanded: Optional[bool] = None
    steps: Optional[list[Step]] = None

    @property
    def has_detail_file(self) -> bool:
        return bool(self.detail_path)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the board graph's wire names, omitting unset fields."""
        data: dict[str, Any] = {"id": self.id, "title": self.title}
        optional = {
            "description": self.description,
            "tags": list(self.tags) if self.tags is not None else None,
            "priority": self.priority.value if self.priority else None,
            "workload": self.workload.value if self.workload else None,
            "startDate": self.start_date,
            "dueDate": self.due_date,
            "updated": self.updated,
            "completed": self.completed,
            "milestone": self.milestone,
            "detailPath": self.detail_path,
            "defaultExpanded": self.default_expanded,
            "steps": [s.to_dict() for s in self.steps] if self.steps is not None else None,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


@dataclass
class TaskDetail:
    """The slice of a Task that lives in a sidecar detail file."""

    steps: Optional[list[Step]] = None
    description: Optional[str] = None


@dataclass
class Column:
    """An ordered, optionally archived group of tasks."""

    title: str
    id: str = field(default_factory=generate_id)
    tasks: list[Task] = field(default_factory=list)
    archived: bool = False

    def index_of(self, task_id: str) -> int:
        """Return the position of a task in this column, or -1."""
        for i, task in enumerate(self.tasks):
            if task.id == task_id:
                return i
        return -1

    def find_task(self, task_id: str) -> Optional[Task]:
        index = self.index_of(task_id)
        return self.tasks[index] if index >= 0 else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "tasks": [t.to_dict() for t in self.tasks],
            "archived": self.archived,
        }


@dataclass
class Board:
    """Top-level document: a title plus ordered columns."""

    title: str = ""
    columns: list[Column] = field(default_factory=list)

    def find_column(self, column_id: str) -> Optional[Column]:
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def find_task(self, task_id: str) -> Optional[tuple[Column, Task]]:
        """Find a task anywhere on the board by id."""
        for column in self.columns:
            task = column.find_task(task_id)
            if task is not None:
                return column, task
        return None

    def iter_tasks(self) -> Iterator[Task]:
        for column in self.columns:
            yield from column.tasks

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "columns": [c.to_dict() for c in self.columns],
        }
