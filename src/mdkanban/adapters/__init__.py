"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Parsers: Markdown board documents and task detail files
- Formatters: Markdown board documents and task detail files
- Detail files: Local filesystem storage
- Config: Environment variables and .env files
"""

from .parsers import MarkdownBoardParser
from .formatters import MarkdownBoardFormatter
from .detail_files import FileSystemDetailStore, resolve_detail_file_path
from .config import EnvironmentConfigProvider

__all__ = [
    "MarkdownBoardParser",
    "MarkdownBoardFormatter",
    "FileSystemDetailStore",
    "resolve_detail_file_path",
    "EnvironmentConfigProvider",
]
