"""
Markdown Formatter - Render a Board back into the kanban markdown dialect.

Output is stable: formatting the result of parsing formatted text gives
the same text again, so saving an edited board only changes the lines
that were actually edited.
"""

from typing import Optional

from ...core.domain.entities import ARCHIVED_MARKER, PROPERTY_KEYS, Board, Step, Task
from ...core.domain.enums import TaskHeaderFormat
from ...core.ports.document_formatter import DocumentFormatterPort


PROPERTY_INDENT = "  "
STEP_INDENT = "      "
DESCRIPTION_INDENT = "    "


class MarkdownBoardFormatter(DocumentFormatterPort):
    """
    Formatter for markdown kanban boards.

    Task properties are written in PROPERTY_KEYS order. A field that is
    None or empty produces no line at all.
    """

    @property
    def name(self) -> str:
        return "Markdown"

    def format_board(
        self,
        board: Board,
        task_header_format: TaskHeaderFormat = TaskHeaderFormat.TITLE,
    ) -> str:
        parts: list[str] = []

        if board.title:
            parts.append(f"# {board.title}\n\n")

        for column in board.columns:
            title = f"{column.title} {ARCHIVED_MARKER}" if column.archived else column.title
            parts.append(f"## {title}\n\n")

            for task in column.tasks:
                if task_header_format is TaskHeaderFormat.TITLE:
                    parts.append(f"### {task.title}\n\n")
                else:
                    parts.append(f"- {task.title}\n")

                parts.append(self._format_properties(task))
                if not task.has_detail_file:
                    parts.append(self._format_description(task.description))
                parts.append("\n")

        return "".join(parts)

    def format_task_detail(self, task: Task) -> str:
        parts = [f"# {task.id or 'Task'}\n\n"]
        if task.steps:
            parts.append(self._format_steps(task.steps))
        parts.append(self._format_description(task.description))
        return "".join(parts).rstrip() + "\n"

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _format_properties(self, task: Task) -> str:
        values = {
            "id": task.id,
            "tags": f"[{', '.join(task.tags)}]" if task.tags else None,
            "priority": task.priority.value if task.priority else None,
            "workload": task.workload.value if task.workload else None,
            "updated": task.updated,
            "completed": task.completed,
            "milestone": task.milestone,
            "start": task.start_date,
            "due": task.due_date,
            "detail": task.detail_path,
            "defaultExpanded": (
                str(task.default_expanded).lower()
                if task.default_expanded is not None
                else None
            ),
        }

        lines = []
        for key in PROPERTY_KEYS:
            if key == "steps":
                # Detail-backed tasks keep their steps in the detail file only
                if task.steps and not task.has_detail_file:
                    lines.append(self._format_steps(task.steps))
            elif values[key]:
                lines.append(f"{PROPERTY_INDENT}- {key}: {values[key]}\n")
        return "".join(lines)

    def _format_steps(self, steps: list[Step]) -> str:
        lines = [f"{PROPERTY_INDENT}- steps:\n"]
        for step in steps:
            checkbox = "[x]" if step.completed else "[ ]"
            lines.append(f"{STEP_INDENT}- {checkbox} {step.text}\n")
        return "".join(lines)

    def _format_description(self, description: Optional[str]) -> str:
        if not description or not description.strip():
            return ""
        lines = [f"{DESCRIPTION_INDENT}```md\n"]
        for line in description.strip().split("\n"):
            lines.append(f"{DESCRIPTION_INDENT}{line}\n")
        lines.append(f"{DESCRIPTION_INDENT}```\n")
        return "".join(lines)


def generate_markdown(
    board: Board,
    task_header_format: TaskHeaderFormat = TaskHeaderFormat.TITLE,
) -> str:
    """Shortcut for MarkdownBoardFormatter().format_board()."""
    return MarkdownBoardFormatter().format_board(board, task_header_format)


def generate_task_detail_markdown(task: Task) -> str:
    """Shortcut for MarkdownBoardFormatter().format_task_detail()."""
    return MarkdownBoardFormatter().format_task_detail(task)
