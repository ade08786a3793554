"""
Board Session - Owns one open board document.

This is the main entry point for editing a board file. It runs the
"mutate -> serialize -> persist" cycle for each edit, one cycle at a time.
"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from ..adapters.detail_files.filesystem import FileSystemDetailStore, resolve_detail_file_path
from ..adapters.formatters.markdown import MarkdownBoardFormatter
from ..adapters.parsers.markdown import MarkdownBoardParser
from ..core.domain.entities import Board, Task
from ..core.domain.enums import TaskHeaderFormat
from ..core.exceptions import DetailFileError
from ..core.ports.detail_store import DetailStorePort
from ..core.ports.document_formatter import DocumentFormatterPort
from ..core.ports.document_parser import DocumentParserPort
from ..plugins.hooks import HookManager, HookPoint
from .commands import Command, CommandBatch, CommandResult


@dataclass
class SaveResult:
    """Result of persisting a board."""

    board_path: Path
    saved: bool = True
    detail_files_written: list[Path] = field(default_factory=list)
    detail_files_skipped: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.saved and not self.errors

    def add_error(self, error: str) -> None:
        self.errors.append(error)


class BoardSession:
    """
    Single-writer owner of a board document and its detail files.

    Phases of an edit:
    1. Run the command against the in-memory board
    2. Write detail files for detail-backed tasks the command touched
    3. Regenerate the board markdown and write it

    All phases run under one lock, so concurrent callers are serialized
    and never see a half-mutated board. reload() replaces the board
    wholesale.
    """

    def __init__(
        self,
        board_path: Union[str, Path],
        parser: Optional[DocumentParserPort] = None,
        formatter: Optional[DocumentFormatterPort] = None,
        detail_store: Optional[DetailStorePort] = None,
        task_header_format: TaskHeaderFormat = TaskHeaderFormat.TITLE,
        hooks: Optional[HookManager] = None,
    ):
        """
        Initialize the session.

        Args:
            board_path: Board markdown file
            parser: Board parser (defaults to MarkdownBoardParser sharing detail_store)
            formatter: Board formatter (defaults to MarkdownBoardFormatter)
            detail_store: Detail file storage (defaults to the filesystem)
            task_header_format: How task headers are written on save
            hooks: Optional hook manager
        """
        self.board_path = Path(board_path)
        self.detail_store = detail_store or FileSystemDetailStore()
        self.parser = parser or MarkdownBoardParser(detail_store=self.detail_store)
        self.formatter = formatter or MarkdownBoardFormatter()
        self.task_header_format = task_header_format
        self.hooks = hooks or HookManager()
        self.logger = logging.getLogger("BoardSession")

        self._lock = threading.RLock()
        self._board: Optional[Board] = None

    @property
    def board(self) -> Board:
        """The current board, loading it on first access."""
        with self._lock:
            if self._board is None:
                self.reload()
            return self._board

    def reload(self) -> Board:
        """Reparse the board file and its detail files."""
        with self._lock:
            text = self.board_path.read_text(encoding="utf-8")

            ctx = self.hooks.trigger(HookPoint.BEFORE_PARSE, {"path": self.board_path}, result=text)
            if ctx.cancelled and self._board is not None:
                return self._board

            board = self.parser.parse_with_details(ctx.result, self.board_path)
            self.hooks.trigger(HookPoint.AFTER_PARSE, {"path": self.board_path}, result=board)

            self.logger.info(
                f"Loaded {self.board_path.name}: {len(board.columns)} columns, "
                f"{sum(1 for _ in board.iter_tasks())} tasks"
            )
            self._board = board
            return board

    def apply(self, command: Command) -> CommandResult:
        """Execute a command and persist the board if it changed anything."""
        with self._lock:
            board = self.board

            ctx = self.hooks.trigger(HookPoint.BEFORE_COMMAND, {"command": command})
            if ctx.cancelled:
                return CommandResult.skip(f"{command.name} cancelled by hook")

            result = command.execute(board)
            if result.changed:
                self.save(result.detail_tasks)
            elif not result.success:
                self.logger.warning(f"{command.name} rejected: {result.error}")

            self.hooks.trigger(HookPoint.AFTER_COMMAND, {"command": command}, result=result)
            return result

    def apply_batch(self, batch: CommandBatch) -> list[CommandResult]:
        """Execute a batch of commands and persist once."""
        with self._lock:
            results = batch.execute(self.board)
            if any(r.changed for r in results):
                self.save(batch.detail_tasks)
            return results

    def render(self) -> str:
        """Generate the board markdown without writing it."""
        with self._lock:
            return self.formatter.format_board(self.board, self.task_header_format)

    def save(self, detail_tasks: Iterable[Task] = ()) -> SaveResult:
        """
        Write detail files for the given tasks, then the board file.

        A detail file that cannot be written is reported in the result; it
        does not stop the board file from being saved. A detail write vetoed
        by a BEFORE_SAVE_DETAIL hook is listed as skipped, not as an error.
        """
        with self._lock:
            result = SaveResult(board_path=self.board_path)

            for task in detail_tasks:
                self.save_task_detail(task, result)

            text = self.formatter.format_board(self.board, self.task_header_format)
            ctx = self.hooks.trigger(HookPoint.BEFORE_SAVE, {"path": self.board_path}, result=text)
            if ctx.cancelled:
                result.saved = False
                return result

            self.board_path.write_text(ctx.result, encoding="utf-8")
            self.hooks.trigger(HookPoint.AFTER_SAVE, {"path": self.board_path}, result=result)
            self.logger.debug(f"Saved {self.board_path}")
            return result

    def save_task_detail(self, task: Task, result: Optional[SaveResult] = None) -> Optional[Path]:
        """
        Write one task's detail file.

        Args:
            task: A detail-backed task
            result: Where to record the written, skipped or failed path

        Returns:
            The path written, or None if the task has no detail file, a
            hook cancelled the write or the write failed
        """
        if not task.has_detail_file:
            return None

        path = resolve_detail_file_path(task.detail_path, self.board_path)
        text = self.formatter.format_task_detail(task)

        ctx = self.hooks.trigger(HookPoint.BEFORE_SAVE_DETAIL, {"task": task, "path": path}, result=text)
        if ctx.cancelled:
            self.logger.info(f"Detail file for task {task.id} skipped by hook")
            if result is not None:
                result.detail_files_skipped.append(path)
            return None

        try:
            self.detail_store.write(path, ctx.result)
        except DetailFileError as e:
            self.logger.error(str(e))
            self.hooks.trigger(HookPoint.ON_ERROR, {"task": task, "path": path, "error": e})
            if result is not None:
                result.add_error(f"Failed to save detail file for task {task.id}")
            return None

        self.hooks.trigger(HookPoint.AFTER_SAVE_DETAIL, {"task": task, "path": path})
        if result is not None:
            result.detail_files_written.append(path)
        return path
