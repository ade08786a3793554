"""
CLI App - Command line entry point for mdkanban.

Usage:
    # Show a board summary
    mdkanban show board.md

    # Rewrite a board in canonical form, using list-style task headers
    mdkanban format board.md --header list --write

    # Check a hand-edited board for mistakes
    mdkanban validate board.md

    # Dump the board graph as JSON
    mdkanban export board.md

Environment Variables:
    MDKANBAN_TASK_HEADER: Default task header format (title or list)
    MDKANBAN_VERBOSE: Enable verbose logging
    MDKANBAN_NO_COLOR: Disable colored output
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..adapters.config import EnvironmentConfigProvider
from ..adapters.parsers import MarkdownBoardParser
from ..application.session import BoardSession
from ..core.exceptions import ConfigError
from ..core.ports.config_provider import AppConfig
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdkanban",
        description="Work with kanban boards stored as markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        help="Path to a .env file with MDKANBAN_* settings",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print a summary of the board")
    show.add_argument("board", type=Path, help="Board markdown file")

    fmt = subparsers.add_parser("format", help="Regenerate the board markdown")
    fmt.add_argument("board", type=Path, help="Board markdown file")
    fmt.add_argument(
        "--header",
        choices=["title", "list"],
        help="Task header style: '### Title' or '- Title'",
    )
    fmt.add_argument(
        "--write", "-w",
        action="store_true",
        help="Rewrite the file in place instead of printing",
    )

    validate = subparsers.add_parser("validate", help="Report likely mistakes in the board")
    validate.add_argument("board", type=Path, help="Board markdown file")

    export = subparsers.add_parser("export", help="Print the board as JSON")
    export.add_argument("board", type=Path, help="Board markdown file")

    detail = subparsers.add_parser("detail", help="Print a task's detail file rendering")
    detail.add_argument("board", type=Path, help="Board markdown file")
    detail.add_argument("task_id", help="Task id")

    tui = subparsers.add_parser("tui", help="Browse the board interactively (requires textual)")
    tui.add_argument("board", type=Path, help="Board markdown file")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    provider = EnvironmentConfigProvider(
        env_file=args.env_file,
        cli_overrides={
            "board": args.board,
            "header": getattr(args, "header", None),
            "verbose": args.verbose,
            "no_color": args.no_color,
        },
    )

    try:
        config = provider.load()
    except ConfigError as e:
        Console(color=False).error(str(e))
        return ExitCode.ERROR

    setup_logging(config.verbose)
    console = Console(color=config.color, verbose=config.verbose)
    logger = logging.getLogger("main")

    if not config.board_path or not config.board_path.exists():
        console.error(f"Board file not found: {config.board_path}")
        return ExitCode.FILE_NOT_FOUND

    logger.debug(f"Running '{args.command}' on {config.board_path}")

    if args.command == "validate":
        return _validate(config, console)
    if args.command == "tui":
        from .tui.app import run_tui

        return run_tui(config.board_path)

    session = BoardSession(config.board_path, task_header_format=config.task_header_format)

    if args.command == "show":
        console.board_summary(session.board)
        return ExitCode.SUCCESS

    if args.command == "format":
        if args.write:
            session.save()
            console.success(f"Rewrote {config.board_path}")
        else:
            sys.stdout.write(session.render())
        return ExitCode.SUCCESS

    if args.command == "export":
        print(json.dumps(session.board.to_dict(), indent=2, ensure_ascii=False))
        return ExitCode.SUCCESS

    if args.command == "detail":
        found = session.board.find_task(args.task_id)
        if found is None:
            console.error(f"Task not found: {args.task_id}")
            return ExitCode.ERROR
        _, task = found
        sys.stdout.write(session.formatter.format_task_detail(task))
        return ExitCode.SUCCESS

    return ExitCode.ERROR


def _validate(config: AppConfig, console: Console) -> int:
    text = config.board_path.read_text(encoding="utf-8")
    errors = MarkdownBoardParser().validate(text)
    console.issues(errors, title=f"{config.board_path.name} looks good")
    return ExitCode.ERROR if errors else ExitCode.SUCCESS


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
