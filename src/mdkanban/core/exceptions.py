"""
Exceptions - Centralized exception hierarchy.

The parser itself never raises; these are only used at the I/O and
configuration boundaries.
"""

from pathlib import Path
from typing import Optional, Union


class MdKanbanError(Exception):
    """Base class for all mdkanban errors."""


class DetailFileError(MdKanbanError):
    """A task detail file could not be read or written."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause


class ConfigError(MdKanbanError):
    """Configuration contains an invalid value."""


__all__ = ["MdKanbanError", "DetailFileError", "ConfigError"]
