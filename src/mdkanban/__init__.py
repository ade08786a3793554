"""
mdkanban - Kanban boards stored as markdown.

Parses a markdown kanban dialect (columns of tasks with typed metadata,
nested steps and descriptions) into a Board tree and writes it back
without reformatting noise. Tasks may keep their steps and description
in a separate detail file.
"""

from .core.domain import (
    Board,
    Column,
    Priority,
    Step,
    Task,
    TaskDetail,
    TaskHeaderFormat,
    Workload,
)
from .adapters.parsers import MarkdownBoardParser, parse_markdown, parse_markdown_with_details
from .adapters.formatters import (
    MarkdownBoardFormatter,
    generate_markdown,
    generate_task_detail_markdown,
)
from .adapters.detail_files import resolve_detail_file_path
from .application import BoardSession

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Column",
    "Priority",
    "Step",
    "Task",
    "TaskDetail",
    "TaskHeaderFormat",
    "Workload",
    "MarkdownBoardParser",
    "MarkdownBoardFormatter",
    "BoardSession",
    "parse_markdown",
    "parse_markdown_with_details",
    "generate_markdown",
    "generate_task_detail_markdown",
    "resolve_detail_file_path",
]
