"""
Markdown Parser - Parse markdown kanban boards into domain entities.

Implements the DocumentParserPort interface.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

from ...core.domain.entities import (
    ARCHIVED_MARKER,
    PROPERTY_KEYS,
    Board,
    Column,
    Step,
    Task,
    TaskDetail,
)
from ...core.domain.enums import Priority, Workload
from ...core.exceptions import DetailFileError
from ...core.ports.detail_store import DetailStorePort
from ...core.ports.document_parser import DocumentParserPort
from ..detail_files.filesystem import FileSystemDetailStore, resolve_detail_file_path


_KEYS = "|".join(re.escape(k) for k in PROPERTY_KEYS)

# A bullet whose key is reserved is a property line, never a task title.
RESERVED_PROPERTY = re.compile(rf"^\s*- ({_KEYS}):")
PROPERTY_LINE = re.compile(rf"^\s+- ({_KEYS}):\s*(.*)$")
STEP_LINE = re.compile(r"^\s{6,}- \[([ x])\]\s*(.*)$")
STEPS_HEADER = re.compile(r"^\s*- steps:\s*$")
FENCE_OPEN = re.compile(r"^\s*```(?:md)?\s*$")
FENCE_CLOSE = "```"
DESCRIPTION_INDENT = re.compile(r"^ {1,4}")
TAGS_VALUE = re.compile(r"\[(.*)\]")
ARCHIVED_SUFFIX = re.compile(r"\s*" + re.escape(ARCHIVED_MARKER) + r"$")
TITLE_CHECKBOX = re.compile(r"^\[[ x]\] ")


class _Mode(Enum):
    """Scanner mode. DESCRIPTION always means "inside a fenced block"."""

    TOP = auto()
    PROPERTIES = auto()
    DESCRIPTION = auto()


@dataclass
class _ParseState:
    board: Board
    column: Optional[Column] = None
    task: Optional[Task] = None
    mode: _Mode = _Mode.TOP
    description_lines: list[str] = field(default_factory=list)
    line_number: int = 0
    # 1-based numbers of lines consumed inside a description fence
    fenced_lines: set[int] = field(default_factory=set)


def split_lines(text: str) -> list[str]:
    """Split text into lines after normalizing CRLF and CR to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _strip_description_indent(line: str) -> str:
    return DESCRIPTION_INDENT.sub("", line, count=1)


class MarkdownBoardParser(DocumentParserPort):
    """
    Parser for markdown kanban boards.

    Expected format:
    # Board Title

    ## Column Title [Archived]

    ### Task Title            (or "- Task Title")
      - id: abc123
      - tags: [a, b]
      - priority: low|medium|high
      - workload: Easy|Normal|Hard|Extreme
      - due: 2024-01-31
      - steps:
          - [ ] open step
          - [x] done step
        ```md
        Free-text description
        ```

    The scan is a single forward pass with a small mode register. Bullets
    are classified by ordered predicates: reserved property keys first,
    then indentation depth, so hand-edited documents never fail to parse.
    """

    def __init__(self, detail_store: Optional[DetailStorePort] = None):
        """
        Initialize parser.

        Args:
            detail_store: Where detail files are read from (defaults to the
                local filesystem)
        """
        self.logger = logging.getLogger("MarkdownBoardParser")
        self.detail_store = detail_store or FileSystemDetailStore()

    # -------------------------------------------------------------------------
    # DocumentParserPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Markdown"

    @property
    def supported_extensions(self) -> list[str]:
        return [".md", ".markdown"]

    def can_parse(self, source: Union[str, Path]) -> bool:
        if isinstance(source, Path):
            return source.suffix.lower() in self.supported_extensions

        # Content with at least one column heading looks like a board
        return bool(re.search(r"^\s*## ", source, re.MULTILINE))

    def parse(self, text: str) -> Board:
        state = self._scan(text)
        self.logger.debug(
            f"Parsed {len(state.board.columns)} columns, "
            f"{sum(len(c.tasks) for c in state.board.columns)} tasks"
        )
        return state.board

    def parse_with_details(self, text: str, board_path: Union[str, Path]) -> Board:
        board = self.parse(text)
        for task in board.iter_tasks():
            if task.has_detail_file:
                self._apply_detail_file(task, board_path)
        return board

    def parse_file(self, path: Union[str, Path]) -> Board:
        """Read a board file and parse it together with its detail files."""
        path = Path(path)
        return self.parse_with_details(path.read_text(encoding="utf-8"), path)

    def parse_task_detail(self, text: str) -> TaskDetail:
        steps: list[Step] = []
        description_lines: list[str] = []
        in_steps = False
        in_description = False

        for line in split_lines(text):
            stripped = line.strip()

            if in_description:
                if stripped == FENCE_CLOSE:
                    in_description = False
                else:
                    description_lines.append(_strip_description_indent(line))
                continue

            if STEPS_HEADER.match(line):
                in_steps = True
                continue

            if in_steps:
                step = self._match_step(line)
                if step is not None:
                    steps.append(step)
                    continue
                if not stripped:
                    continue
                in_steps = False

            if FENCE_OPEN.match(line):
                in_description = True

        description = "\n".join(description_lines).strip()
        return TaskDetail(
            steps=steps or None,
            description=description or None,
        )

    def validate(self, text: str) -> list[str]:
        errors = []
        has_column = False
        state = self._scan(text)

        for number, line in enumerate(split_lines(text), start=1):
            if number in state.fenced_lines:
                continue

            stripped = line.strip()
            if stripped.startswith("## "):
                has_column = True
                continue

            if self._is_task_title(line, stripped):
                if not has_column:
                    errors.append(
                        f"Line {number}: task '{self._task_title(stripped)}' "
                        f"appears before any column and will be ignored"
                    )
                continue

            match = PROPERTY_LINE.match(line)
            if not match:
                continue
            key, value = match.group(1), match.group(2).strip()
            if key == "priority" and Priority.from_string(value) is None:
                allowed = ", ".join(p.value for p in Priority)
                errors.append(f"Line {number}: invalid priority '{value}' (expected {allowed})")
            elif key == "workload" and Workload.from_string(value) is None:
                allowed = ", ".join(w.value for w in Workload)
                errors.append(f"Line {number}: invalid workload '{value}' (expected {allowed})")

        board = state.board
        if not board.columns:
            errors.append("No columns found (expected '## Column' headings)")

        seen: set[str] = set()
        for task in board.iter_tasks():
            if task.id in seen:
                errors.append(f"Duplicate task id '{task.id}'")
            seen.add(task.id)

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _scan(self, text: str) -> _ParseState:
        state = _ParseState(board=Board())
        lines = split_lines(text)

        i = 0
        while i < len(lines):
            state.line_number = i + 1
            # A line that closes a task is looked at again under top-level rules
            if self._consume_line(state, lines[i]):
                i += 1

        self._finalize_task(state)
        if state.column is not None:
            state.board.columns.append(state.column)
        return state

    def _consume_line(self, state: _ParseState, line: str) -> bool:
        """
        Apply one line to the parse state.

        Returns:
            False if the line terminated a task and must be re-examined
        """
        stripped = line.strip()

        if state.mode is _Mode.DESCRIPTION:
            state.fenced_lines.add(state.line_number)
            if stripped == FENCE_CLOSE:
                # The task stays open; the next structural line closes it
                state.mode = _Mode.TOP
            else:
                state.description_lines.append(_strip_description_indent(line))
            return True

        if stripped.startswith("# ") and not state.board.title:
            state.board.title = stripped[2:].strip()
            self._finalize_task(state)
            return True

        if stripped.startswith("## "):
            self._start_column(state, stripped[3:])
            return True

        if self._is_task_title(line, stripped):
            self._start_task(state, stripped)
            return True

        if state.task is not None and state.mode is _Mode.PROPERTIES:
            if self._apply_property(line, state.task):
                return True
            if state.task.steps is not None:
                step = self._match_step(line)
                if step is not None:
                    state.task.steps.append(step)
                    return True
            if FENCE_OPEN.match(line):
                state.mode = _Mode.DESCRIPTION
                return True

        if not stripped:
            return True

        if state.task is not None and state.mode is _Mode.PROPERTIES:
            self._finalize_task(state)
            return False

        return True

    def _is_task_title(self, line: str, stripped: str) -> bool:
        if line.startswith("- "):
            return not RESERVED_PROPERTY.match(stripped)
        return stripped == "###" or stripped.startswith("### ")

    def _task_title(self, stripped: str) -> str:
        if stripped.startswith("###"):
            return stripped[3:].strip()
        title = stripped[2:].strip()
        if TITLE_CHECKBOX.match(title):
            title = title[4:].strip()
        return title

    def _start_column(self, state: _ParseState, raw_title: str) -> None:
        self._finalize_task(state)
        if state.column is not None:
            state.board.columns.append(state.column)

        title = raw_title.strip()
        archived = title.endswith(ARCHIVED_MARKER)
        if archived:
            title = ARCHIVED_SUFFIX.sub("", title).strip()

        state.column = Column(title=title, archived=archived)
        state.mode = _Mode.TOP

    def _start_task(self, state: _ParseState, stripped: str) -> None:
        self._finalize_task(state)
        if state.column is None:
            return

        state.task = Task(title=self._task_title(stripped), description="")
        state.mode = _Mode.PROPERTIES

    def _finalize_task(self, state: _ParseState) -> None:
        """Close the open task and push it into the current column."""
        task = state.task
        state.task = None
        state.mode = _Mode.TOP
        description_lines, state.description_lines = state.description_lines, []

        if task is None or state.column is None:
            return

        if description_lines:
            task.description = "\n".join(description_lines)
        if task.description is not None:
            task.description = task.description.strip() or None
        state.column.tasks.append(task)

    def _apply_property(self, line: str, task: Task) -> bool:
        match = PROPERTY_LINE.match(line)
        if not match:
            return False

        key, value = match.group(1), match.group(2).strip()

        if key == "id":
            if value:
                task.id = value
        elif key == "tags":
            tags_match = TAGS_VALUE.search(value)
            if tags_match:
                tags = [t.strip() for t in tags_match.group(1).split(",") if t.strip()]
                task.tags = tags or None
        elif key == "priority":
            priority = Priority.from_string(value)
            if priority is not None:
                task.priority = priority
        elif key == "workload":
            workload = Workload.from_string(value)
            if workload is not None:
                task.workload = workload
        elif key == "defaultExpanded":
            task.default_expanded = value.lower() == "true"
        elif key == "steps":
            task.steps = []
        else:
            # Plain string fields; an empty value means absent
            attr = {
                "due": "due_date",
                "start": "start_date",
                "updated": "updated",
                "completed": "completed",
                "milestone": "milestone",
                "detail": "detail_path",
            }[key]
            if value:
                setattr(task, attr, value)
        return True

    def _match_step(self, line: str) -> Optional[Step]:
        match = STEP_LINE.match(line)
        if not match:
            return None
        return Step(text=match.group(2).strip(), completed=match.group(1) == "x")

    def _apply_detail_file(self, task: Task, board_path: Union[str, Path]) -> None:
        """Replace a task's steps and description with its detail file contents."""
        path = resolve_detail_file_path(task.detail_path, board_path)
        try:
            content = self.detail_store.read(path)
        except DetailFileError as e:
            self.logger.warning(f"{e} ({e.cause})")
            content = ""

        detail = self.parse_task_detail(content)
        task.steps = detail.steps
        task.description = detail.description


def parse_markdown(text: str) -> Board:
    """Shortcut for MarkdownBoardParser().parse()."""
    return MarkdownBoardParser().parse(text)


def parse_markdown_with_details(text: str, board_path: Union[str, Path]) -> Board:
    """Shortcut for MarkdownBoardParser().parse_with_details()."""
    return MarkdownBoardParser().parse_with_details(text, board_path)
