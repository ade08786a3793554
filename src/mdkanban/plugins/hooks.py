"""
Hook System - Observe and veto board session operations.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional


class HookPoint(Enum):
    """Points in a board session where hooks can be attached."""

    # Loading
    BEFORE_PARSE = auto()
    AFTER_PARSE = auto()

    # Editing
    BEFORE_COMMAND = auto()
    AFTER_COMMAND = auto()

    # Persisting
    BEFORE_SAVE = auto()
    AFTER_SAVE = auto()
    BEFORE_SAVE_DETAIL = auto()
    AFTER_SAVE_DETAIL = auto()

    # Error handling
    ON_ERROR = auto()


@dataclass
class HookContext:
    """
    Context passed to hook handlers.

    BEFORE_* hooks may call cancel() to stop the operation, and
    BEFORE_SAVE hooks may replace the text about to be written through
    set_result().
    """

    hook_point: HookPoint
    data: dict = field(default_factory=dict)
    result: Any = None
    error: Optional[Exception] = None
    cancelled: bool = False

    def cancel(self) -> None:
        """Cancel the current operation."""
        self.cancelled = True

    def set_result(self, result: Any) -> None:
        """Override the result."""
        self.result = result


HookHandler = Callable[[HookContext], None]


class Hook:
    """
    A named handler attached to one hook point.

    Lower priority runs first; equal priorities run in registration order.
    """

    def __init__(
        self,
        name: str,
        hook_point: HookPoint,
        handler: HookHandler,
        priority: int = 100,
    ):
        self.name = name
        self.hook_point = hook_point
        self.handler = handler
        self.priority = priority

    def __call__(self, context: HookContext) -> None:
        self.handler(context)

    def __lt__(self, other: "Hook") -> bool:
        return self.priority < other.priority

    def __repr__(self) -> str:
        return f"Hook({self.name!r}, {self.hook_point.name}, priority={self.priority})"


class HookManager:
    """
    Registry and dispatcher for hooks.

    Usage:
        hooks = HookManager()

        @hooks.hook(HookPoint.BEFORE_SAVE)
        def stamp(ctx):
            ctx.set_result(ctx.result + "<!-- saved -->\\n")

        session = BoardSession(path, hooks=hooks)
    """

    def __init__(self):
        self._hooks: dict[HookPoint, list[Hook]] = {hp: [] for hp in HookPoint}
        self.logger = logging.getLogger("HookManager")

    def register(self, hook: Hook) -> None:
        hooks = self._hooks[hook.hook_point]
        hooks.append(hook)
        # list.sort is stable, so registration order breaks ties
        hooks.sort()
        self.logger.debug(f"Registered hook: {hook.name} at {hook.hook_point.name}")

    def unregister(self, hook_name: str) -> bool:
        """Remove every hook with this name. Returns True if any was removed."""
        removed = False
        for hook_point, hooks in self._hooks.items():
            kept = [h for h in hooks if h.name != hook_name]
            if len(kept) != len(hooks):
                self._hooks[hook_point] = kept
                removed = True
        return removed

    def trigger(
        self,
        hook_point: HookPoint,
        data: Optional[dict] = None,
        result: Any = None,
    ) -> HookContext:
        """
        Run all hooks at a hook point.

        A failing handler is logged and recorded on the context; the
        remaining handlers still run. A cancelling handler stops the chain.

        Args:
            hook_point: The hook point to trigger
            data: Data to pass to hooks
            result: Initial value of context.result

        Returns:
            HookContext with results
        """
        context = HookContext(hook_point=hook_point, data=data or {}, result=result)

        for hook in self._hooks[hook_point]:
            try:
                hook(context)
            except Exception as e:
                self.logger.error(f"Hook {hook.name} failed: {e}")
                context.error = e
                continue

            if context.cancelled:
                self.logger.info(f"Operation cancelled by hook: {hook.name}")
                break

        return context

    def hook(
        self,
        hook_point: HookPoint,
        priority: int = 100,
        name: Optional[str] = None,
    ) -> Callable[[HookHandler], HookHandler]:
        """Decorator form of register()."""
        def decorator(func: HookHandler) -> HookHandler:
            self.register(Hook(name or func.__name__, hook_point, func, priority))
            return func
        return decorator

    def get_hooks(self, hook_point: HookPoint) -> list[Hook]:
        return list(self._hooks[hook_point])

    def clear(self, hook_point: Optional[HookPoint] = None) -> None:
        """Clear hooks (all or for specific point)."""
        points = [hook_point] if hook_point else list(HookPoint)
        for hp in points:
            self._hooks[hp] = []
