"""
Domain - Board entities and enums.
"""

from .entities import (
    ARCHIVED_MARKER,
    PROPERTY_KEYS,
    Board,
    Column,
    Step,
    Task,
    TaskDetail,
    generate_id,
)
from .enums import Priority, TaskHeaderFormat, Workload

__all__ = [
    "ARCHIVED_MARKER",
    "PROPERTY_KEYS",
    "Board",
    "Column",
    "Step",
    "Task",
    "TaskDetail",
    "generate_id",
    "Priority",
    "TaskHeaderFormat",
    "Workload",
]
