"""
Document Formatters - Convert domain entities back into board documents.
"""

from .markdown import (
    MarkdownBoardFormatter,
    generate_markdown,
    generate_task_detail_markdown,
)

__all__ = [
    "MarkdownBoardFormatter",
    "generate_markdown",
    "generate_task_detail_markdown",
]
