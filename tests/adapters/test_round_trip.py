"""Tests that the parser and formatter agree with each other."""

import pytest
from textwrap import dedent

from mdkanban.adapters.formatters import MarkdownBoardFormatter
from mdkanban.adapters.parsers import MarkdownBoardParser
from mdkanban.core.domain import (
    Board,
    Column,
    Priority,
    Step,
    Task,
    TaskHeaderFormat,
    Workload,
)


def comparable(board: Board) -> dict:
    """Board as a dict, minus column ids (they are regenerated on every parse)."""
    data = board.to_dict()
    for column in data["columns"]:
        column.pop("id")
    return data


@pytest.fixture
def parser():
    return MarkdownBoardParser()


@pytest.fixture
def formatter():
    return MarkdownBoardFormatter()


@pytest.fixture
def board():
    return Board(
        title="Release",
        columns=[
            Column(
                title="Doing",
                tasks=[
                    Task(
                        id="a1",
                        title="Ship it",
                        description="Checklist below.\n\n    code sample\nend",
                        tags=["release", "ops"],
                        priority=Priority.MEDIUM,
                        workload=Workload.NORMAL,
                        start_date="2024-05-01",
                        due_date="2024-05-10",
                        updated="2024-05-02",
                        milestone="1.0",
                        default_expanded=True,
                        steps=[Step("Tag"), Step("Build", completed=True)],
                    ),
                    Task(id="a2", title="Write notes", default_expanded=False),
                ],
            ),
            Column(
                title="Done",
                archived=True,
                tasks=[Task(id="a3", title="Plan", completed="2024-04-30", steps=[])],
            ),
            Column(title="Empty"),
        ],
    )


class TestRoundTrip:
    """Parsing generated markdown gives back the same board."""

    @pytest.mark.parametrize("header_format", list(TaskHeaderFormat))
    def test_parse_of_generated_board(self, parser, formatter, board, header_format):
        reparsed = parser.parse(formatter.format_board(board, header_format))

        # Empty step lists are not written, so they come back absent
        board.columns[1].tasks[0].steps = None
        assert comparable(reparsed) == comparable(board)

    @pytest.mark.parametrize("header_format", list(TaskHeaderFormat))
    def test_generation_is_idempotent(self, parser, formatter, board, header_format):
        once = formatter.format_board(board, header_format)
        twice = formatter.format_board(parser.parse(once), header_format)
        assert twice == once

    def test_hand_written_board_normalizes_once(self, parser, formatter):
        """Test a messy hand-edited file settles after one rewrite."""
        text = dedent("""
        # Messy


        ## Todo
        - [ ] Loose title
            - priority: high
          - id: m1


        - Next
          - id: m2
              - [x] orphan step
        """)
        once = formatter.format_board(parser.parse(text))
        assert formatter.format_board(parser.parse(once)) == once

    @pytest.mark.parametrize("header_format", list(TaskHeaderFormat))
    def test_empty_title_task_survives(self, parser, formatter, header_format):
        """Test a bare "- " bullet task is not lost when saved and reparsed."""
        board = parser.parse("## C\n- \n  - id: a\n  - priority: high\n")
        assert [t.id for t in board.columns[0].tasks] == ["a"]

        reparsed = parser.parse(formatter.format_board(board, header_format))

        assert comparable(reparsed) == comparable(board)
        assert reparsed.columns[0].tasks[0].title == ""

    def test_header_format_switch_keeps_data(self, parser, formatter, board):
        as_list = formatter.format_board(board, TaskHeaderFormat.LIST)
        as_title = formatter.format_board(parser.parse(as_list), TaskHeaderFormat.TITLE)
        assert as_title == formatter.format_board(board, TaskHeaderFormat.TITLE)


class TestEditsSurviveRoundTrip:
    """Edits made on the tree appear exactly in the regenerated text."""

    def test_removed_due_date(self, parser, formatter, board):
        board.columns[0].tasks[0].due_date = None
        text = formatter.format_board(board)

        assert "- due:" not in text
        assert parser.parse(text).columns[0].tasks[0].due_date is None

    def test_archive_flag(self, parser, formatter, board):
        board.columns[2].archived = True
        reparsed = parser.parse(formatter.format_board(board))

        assert reparsed.columns[2].archived is True
        assert reparsed.columns[2].title == "Empty"

    def test_reordered_steps(self, parser, formatter, board):
        task = board.columns[0].tasks[0]
        task.steps = [task.steps[1], task.steps[0]]
        reparsed = parser.parse(formatter.format_board(board)).columns[0].tasks[0]

        assert [s.text for s in reparsed.steps] == ["Build", "Tag"]
        assert [s.completed for s in reparsed.steps] == [True, False]
