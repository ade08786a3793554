"""
Plugins - Extension points for board sessions.
"""

from .hooks import Hook, HookContext, HookManager, HookPoint

__all__ = ["Hook", "HookContext", "HookManager", "HookPoint"]
