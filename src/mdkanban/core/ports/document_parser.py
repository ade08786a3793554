"""
Document Parser Port - Abstract interface for board document parsers.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..domain.entities import Board, TaskDetail


class DocumentParserPort(ABC):
    """
    Interface for turning board documents into a Board tree.

    Implementations must be total: malformed input is skipped or coerced,
    never rejected with an exception.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the parser name (e.g., 'Markdown')."""
        ...

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Get list of supported file extensions."""
        ...

    @abstractmethod
    def can_parse(self, source: Union[str, Path]) -> bool:
        """Check if this parser can handle the given file or content."""
        ...

    @abstractmethod
    def parse(self, text: str) -> Board:
        """Parse document text into a Board."""
        ...

    @abstractmethod
    def parse_with_details(self, text: str, board_path: Union[str, Path]) -> Board:
        """
        Parse document text and merge in task detail files.

        Args:
            text: Board document text
            board_path: Path of the board file, used to resolve relative
                detail paths
        """
        ...

    @abstractmethod
    def parse_task_detail(self, text: str) -> TaskDetail:
        """Parse the text of a single task detail file."""
        ...

    @abstractmethod
    def validate(self, text: str) -> list[str]:
        """
        Check a document for likely mistakes.

        Returns:
            List of warning messages (empty if nothing looks wrong)
        """
        ...
