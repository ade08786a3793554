"""
Document Parsers - Convert board documents into domain entities.
"""

from .markdown import MarkdownBoardParser, parse_markdown, parse_markdown_with_details

__all__ = ["MarkdownBoardParser", "parse_markdown", "parse_markdown_with_details"]
