"""Tests for task detail files: path resolution, storage and parse precedence."""

import logging
import pytest
from pathlib import Path
from textwrap import dedent
from unittest.mock import Mock

from mdkanban.adapters.detail_files import FileSystemDetailStore, resolve_detail_file_path
from mdkanban.adapters.formatters import MarkdownBoardFormatter
from mdkanban.adapters.parsers import MarkdownBoardParser, parse_markdown_with_details
from mdkanban.core.domain import Step
from mdkanban.core.exceptions import DetailFileError


BOARD_WITH_DETAIL = dedent("""
# Board

## Todo

### T1

  - id: t1
  - detail: sub/t1.md
  - steps:
      - [ ] inline step
    ```md
    Inline description
    ```

### T2

  - id: t2
  - steps:
      - [x] stays inline
""")


class TestResolveDetailFilePath:
    """Tests for resolve_detail_file_path."""

    def test_relative_to_board_directory(self, tmp_path):
        board_path = tmp_path / "board.md"
        assert resolve_detail_file_path("sub/t1.md", board_path) == (tmp_path / "sub" / "t1.md").resolve()

    def test_parent_directory(self, tmp_path):
        board_path = tmp_path / "boards" / "board.md"
        assert resolve_detail_file_path("../notes/t1.md", board_path) == (tmp_path / "notes" / "t1.md").resolve()

    def test_absolute_path_unchanged(self, tmp_path):
        absolute = tmp_path / "elsewhere" / "t1.md"
        assert resolve_detail_file_path(str(absolute), "/some/board.md") == absolute


class TestFileSystemDetailStore:
    """Tests for FileSystemDetailStore."""

    @pytest.fixture
    def store(self):
        return FileSystemDetailStore()

    def test_write_creates_parent_directories(self, store, tmp_path):
        path = tmp_path / "a" / "b" / "t1.md"
        store.write(path, "# t1\n")

        assert path.read_text(encoding="utf-8") == "# t1\n"

    def test_read(self, store, tmp_path):
        path = tmp_path / "t1.md"
        path.write_text("# t1\n\nhéllo\n", encoding="utf-8")

        assert store.read(path) == "# t1\n\nhéllo\n"

    def test_read_missing_file(self, store, tmp_path):
        path = tmp_path / "missing.md"

        with pytest.raises(DetailFileError) as exc_info:
            store.read(path)

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.cause, OSError)

    def test_write_into_file_path_fails(self, store, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(DetailFileError):
            store.write(blocker / "t1.md", "# t1\n")


class TestParseWithDetails:
    """Tests for MarkdownBoardParser.parse_with_details."""

    @pytest.fixture
    def board_path(self, tmp_path):
        path = tmp_path / "board.md"
        path.write_text(BOARD_WITH_DETAIL, encoding="utf-8")
        return path

    def test_detail_file_replaces_inline_content(self, board_path):
        detail = board_path.parent / "sub" / "t1.md"
        detail.parent.mkdir()
        detail.write_text("# t1\n\n  - steps:\n      - [x] from file\n", encoding="utf-8")

        board = parse_markdown_with_details(board_path.read_text(encoding="utf-8"), board_path)
        task = board.columns[0].tasks[0]

        assert task.detail_path == "sub/t1.md"
        assert task.steps == [Step("from file", completed=True)]
        assert task.description is None

    def test_tasks_without_detail_untouched(self, board_path):
        board = MarkdownBoardParser().parse_file(board_path)
        assert board.columns[0].tasks[1].steps == [Step("stays inline", completed=True)]

    def test_unreadable_detail_file(self, board_path, caplog):
        """Test a missing detail file clears steps and description without raising."""
        with caplog.at_level(logging.WARNING):
            board = MarkdownBoardParser().parse_file(board_path)

        task = board.columns[0].tasks[0]
        assert task.steps is None
        assert task.description is None
        assert "t1.md" in caplog.text

    def test_custom_store(self, tmp_path):
        store = Mock()
        store.read.return_value = "    ```md\n    Stored elsewhere\n    ```\n"
        parser = MarkdownBoardParser(detail_store=store)

        board = parser.parse_with_details(BOARD_WITH_DETAIL, tmp_path / "board.md")

        store.read.assert_called_once_with((tmp_path / "sub" / "t1.md").resolve())
        task = board.columns[0].tasks[0]
        assert task.description == "Stored elsewhere"
        assert task.steps is None

    def test_generated_board_keeps_detail_content_out(self, board_path):
        detail = board_path.parent / "sub" / "t1.md"
        detail.parent.mkdir()
        detail.write_text("# t1\n\n  - steps:\n      - [ ] a\n", encoding="utf-8")

        board = MarkdownBoardParser().parse_file(board_path)
        output = MarkdownBoardFormatter().format_board(board)

        t1_block = output.split("### T2")[0]
        assert "  - detail: sub/t1.md\n" in t1_block
        assert "- steps:" not in t1_block
        assert "Inline description" not in output

    def test_plain_parse_ignores_detail_files(self, board_path):
        board = MarkdownBoardParser().parse(board_path.read_text(encoding="utf-8"))
        task = board.columns[0].tasks[0]

        assert task.steps == [Step("inline step")]
        assert task.description == "Inline description"
