"""
Document Formatter Port - Abstract interface for board serializers.
"""

from abc import ABC, abstractmethod

from ..domain.entities import Board, Task
from ..domain.enums import TaskHeaderFormat


class DocumentFormatterPort(ABC):
    """Interface for turning a Board tree back into document text."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def format_board(
        self,
        board: Board,
        task_header_format: TaskHeaderFormat = TaskHeaderFormat.TITLE,
    ) -> str:
        """Render the whole board. Must not perform I/O."""
        ...

    @abstractmethod
    def format_task_detail(self, task: Task) -> str:
        """Render the detail-file text for one task."""
        ...
