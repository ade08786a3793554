"""
Output - Console output formatting.

Provides pretty-printed output with colors and formatting.
"""

import sys
from typing import Optional

from ..core.domain.entities import Board, Task
from ..core.domain.enums import Priority


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"


class Symbols:
    """Unicode symbols for output."""

    CHECK = "✓"
    CROSS = "✗"
    ARROW = "→"
    DOT = "•"
    WARN = "⚠"
    INFO = "ℹ"
    BOX_OPEN = "☐"
    BOX_DONE = "☑"
    ARCHIVE = "🗄"
    LINK = "🔗"
    BOX_H = "─"


PRIORITY_COLORS = {
    Priority.HIGH: Colors.RED,
    Priority.MEDIUM: Colors.YELLOW,
    Priority.LOW: Colors.GREEN,
}


class Console:
    """Console output helper with colors and formatting."""

    def __init__(self, color: bool = True, verbose: bool = False, stream=None):
        self.stream = stream or sys.stdout
        self.color = color and hasattr(self.stream, "isatty") and self.stream.isatty()
        self.verbose = verbose

    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET

    def print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def header(self, text: str) -> None:
        width = max(len(text) + 4, 50)
        border = self._c(Symbols.BOX_H * width, Colors.CYAN) if self.color else "-" * width

        self.print()
        self.print(border)
        self.print(self._c(f"  {text}", Colors.BOLD, Colors.CYAN))
        self.print(border)
        self.print()

    def section(self, text: str) -> None:
        self.print()
        self.print(self._c(f"{Symbols.ARROW} {text}", Colors.BOLD, Colors.BLUE))

    def success(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CHECK} {text}", Colors.GREEN))

    def error(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CROSS} {text}", Colors.RED))

    def warning(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.WARN} {text}", Colors.YELLOW))

    def info(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.INFO} {text}", Colors.CYAN))

    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self.print(self._c(f"    {text}", Colors.DIM))

    def debug(self, text: str) -> None:
        """Print debug message (only in verbose mode)."""
        if self.verbose:
            self.print(self._c(f"  [DEBUG] {text}", Colors.DIM))

    def board_summary(self, board: Board) -> None:
        """Print every column with its tasks and step progress."""
        self.header(board.title or "Untitled board")

        for column in board.columns:
            label = column.title
            if column.archived:
                label = f"{label} {self._c(f'{Symbols.ARCHIVE} archived', Colors.DIM)}"
            self.section(f"{label} ({len(column.tasks)})")

            for task in column.tasks:
                self.print(f"    {Symbols.DOT} {self._task_line(task)}")
                if self.verbose and task.description:
                    for line in task.description.splitlines():
                        self.detail(f"  {line}")

        total = sum(1 for _ in board.iter_tasks())
        self.print()
        self.info(f"{len(board.columns)} columns, {total} tasks")

    def _task_line(self, task: Task) -> str:
        parts = [task.title, self._c(f"[{task.id}]", Colors.DIM)]

        if task.priority:
            parts.append(self._c(task.priority.value, PRIORITY_COLORS[task.priority]))
        if task.workload:
            parts.append(self._c(task.workload.value, Colors.MAGENTA))
        if task.due_date:
            parts.append(f"due {task.due_date}")
        if task.tags:
            parts.append(self._c(" ".join(f"#{t}" for t in task.tags), Colors.BLUE))
        if task.steps:
            done = sum(1 for s in task.steps if s.completed)
            symbol = Symbols.BOX_DONE if done == len(task.steps) else Symbols.BOX_OPEN
            parts.append(f"{symbol} {done}/{len(task.steps)}")
        if task.detail_path:
            parts.append(self._c(f"{Symbols.LINK} {task.detail_path}", Colors.DIM))

        return " ".join(parts)

    def issues(self, messages: list[str], title: Optional[str] = None) -> None:
        """Print a list of validation messages, or a success line if empty."""
        if not messages:
            self.success(title or "No problems found")
            return

        self.warning(f"{len(messages)} problem(s):")
        for message in messages:
            self.detail(message)
