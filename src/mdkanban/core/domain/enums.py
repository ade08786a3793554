"""
Domain Enums - Closed value sets used by board entities.
"""

from enum import Enum
from typing import Optional


class Priority(Enum):
    """Task priority. Values are the literal tokens used in markdown."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_string(cls, value: str) -> Optional["Priority"]:
        """
        Look up a priority by its exact markdown token.

        Unknown values return None rather than raising, so a hand-edited
        board with a typo simply loses the field.
        """
        for member in cls:
            if member.value == value:
                return member
        return None


class Workload(Enum):
    """Estimated effort for a task."""

    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"
    EXTREME = "Extreme"

    @classmethod
    def from_string(cls, value: str) -> Optional["Workload"]:
        """Exact, case-sensitive lookup; None if not a member."""
        for member in cls:
            if member.value == value:
                return member
        return None


class TaskHeaderFormat(Enum):
    """How task headers are written: `### Title` or `- Title`."""

    TITLE = "title"
    LIST = "list"

    @classmethod
    def from_string(cls, value: str) -> Optional["TaskHeaderFormat"]:
        value = value.strip().lower()
        for member in cls:
            if member.value == value:
                return member
        return None
