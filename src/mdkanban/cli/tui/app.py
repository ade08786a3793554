"""
TUI App - Read-only Textual board browser.

Shows columns and tasks as a tree, with the selected task's metadata,
steps and description in a side panel. Press r to reload from disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional


try:
    from rich.markup import escape
    from rich.text import Text
    from textual import on
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, VerticalScroll
    from textual.widgets import Footer, Header, Static, Tree

    TEXTUAL_AVAILABLE = True
except ImportError:
    TEXTUAL_AVAILABLE = False
    if TYPE_CHECKING:
        from textual.app import App, ComposeResult

from mdkanban.adapters.parsers import MarkdownBoardParser
from mdkanban.core.domain.entities import Board, Task


BOARD_CSS = """
#board-tree {
    width: 40;
    border-right: solid $primary-darken-2;
}

#task-detail {
    padding: 1 2;
}
"""


def format_task_detail(task: Optional[Task]) -> str:
    """Render a task for the detail panel as Rich markup."""
    if task is None:
        return "[dim]Select a task[/dim]"

    lines = [f"[bold]{escape(task.title)}[/bold]", f"[dim]id: {escape(task.id)}[/dim]", ""]

    fields = [
        ("Priority", task.priority.value if task.priority else None),
        ("Workload", task.workload.value if task.workload else None),
        ("Tags", ", ".join(task.tags) if task.tags else None),
        ("Start", task.start_date),
        ("Due", task.due_date),
        ("Milestone", task.milestone),
        ("Updated", task.updated),
        ("Completed", task.completed),
        ("Detail file", task.detail_path),
    ]
    for label, value in fields:
        if value:
            lines.append(f"[b]{label}:[/b] {escape(value)}")

    if task.steps:
        lines.append("")
        lines.append("[b]Steps[/b]")
        for step in task.steps:
            mark = "[green]✓[/green]" if step.completed else "☐"
            lines.append(f"  {mark} {escape(step.text)}")

    if task.description:
        lines.append("")
        lines.append(escape(task.description))

    return "\n".join(lines)


def load_board(path: Path) -> Board:
    return MarkdownBoardParser().parse_file(path)


if TEXTUAL_AVAILABLE:

    class BoardBrowserApp(App):
        """Browse a markdown kanban board."""

        TITLE = "mdkanban"
        CSS = BOARD_CSS

        BINDINGS = [
            Binding("q", "quit", "Quit", show=True),
            Binding("r", "reload", "Reload", show=True),
        ]

        def __init__(self, board_path: Path, *args: Any, **kwargs: Any) -> None:
            super().__init__(*args, **kwargs)
            self.board_path = board_path
            self.board = load_board(board_path)

        def compose(self) -> ComposeResult:
            yield Header()
            with Horizontal():
                yield Tree(Text(self._board_label()), id="board-tree")
                with VerticalScroll():
                    yield Static(format_task_detail(None), id="task-detail")
            yield Footer()

        def on_mount(self) -> None:
            self._populate_tree()

        def _board_label(self) -> str:
            return self.board.title or self.board_path.name

        def _populate_tree(self) -> None:
            tree = self.query_one("#board-tree", Tree)
            tree.clear()
            tree.root.set_label(Text(self._board_label()))
            tree.root.expand()
            for column in self.board.columns:
                label = Text(column.title)
                if column.archived:
                    label.append(" archived", style="dim")
                node = tree.root.add(label, expand=not column.archived)
                for task in column.tasks:
                    node.add_leaf(Text(task.title), data=task)

        @on(Tree.NodeHighlighted)
        def handle_node_highlighted(self, event: Tree.NodeHighlighted) -> None:
            detail = self.query_one("#task-detail", Static)
            detail.update(format_task_detail(event.node.data))

        def action_reload(self) -> None:
            self.board = load_board(self.board_path)
            self._populate_tree()
            self.notify(f"Reloaded {self.board_path.name}")


def run_tui(board_path: Path) -> int:
    """
    Run the board browser.

    Returns:
        Exit code (0 for success, 1 if Textual is not installed).
    """
    if not TEXTUAL_AVAILABLE:
        print("Error: Textual is not installed.")
        print("Install with: pip install mdkanban[tui]")
        return 1

    BoardBrowserApp(Path(board_path)).run()
    return 0


def check_textual_available() -> bool:
    """Check if Textual is available."""
    return TEXTUAL_AVAILABLE
