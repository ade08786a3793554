"""
Detail Store Port - Raw text read/write for task detail files.

The host supplies this primitive; the core only decides which path to use.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class DetailStorePort(ABC):
    """Read and write detail-file text at an already resolved path."""

    @abstractmethod
    def read(self, path: Path) -> str:
        """
        Read a detail file.

        Raises:
            DetailFileError: If the file cannot be read
        """
        ...

    @abstractmethod
    def write(self, path: Path, text: str) -> None:
        """
        Write a detail file, creating parent directories as needed.

        Raises:
            DetailFileError: If the file cannot be written
        """
        ...
