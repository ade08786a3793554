"""
Config Provider Port - Abstract interface for configuration sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..domain.enums import TaskHeaderFormat


@dataclass
class AppConfig:
    """Complete application configuration."""

    task_header_format: TaskHeaderFormat = TaskHeaderFormat.TITLE
    verbose: bool = False
    color: bool = True
    board_path: Optional[Path] = None


class ConfigProviderPort(ABC):
    """Interface for configuration providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """
        Load complete configuration.

        Raises:
            ConfigError: If a value is present but invalid
        """
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """Return a list of configuration errors (empty if valid)."""
        ...
