"""
TUI - Optional Textual interface.
"""

from .app import check_textual_available, run_tui

__all__ = ["check_textual_available", "run_tui"]
