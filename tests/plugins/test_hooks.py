"""Tests for plugin hook system."""

import pytest
from mdkanban.plugins import (
    Hook,
    HookPoint,
    HookManager,
    HookContext,
)


class TestHookContext:
    """Tests for HookContext."""

    def test_cancel(self):
        ctx = HookContext(hook_point=HookPoint.BEFORE_SAVE)
        assert not ctx.cancelled

        ctx.cancel()

        assert ctx.cancelled

    def test_set_result(self):
        ctx = HookContext(hook_point=HookPoint.BEFORE_SAVE, result="# Board\n")

        ctx.set_result("# Other\n")

        assert ctx.result == "# Other\n"


class TestHook:
    """Tests for Hook."""

    def test_call(self):
        seen = []
        hook = Hook("test", HookPoint.AFTER_PARSE, lambda ctx: seen.append(ctx.hook_point))

        hook(HookContext(hook_point=HookPoint.AFTER_PARSE))

        assert seen == [HookPoint.AFTER_PARSE]

    def test_priority_comparison(self):
        hook1 = Hook("high", HookPoint.BEFORE_SAVE, lambda x: x, priority=10)
        hook2 = Hook("low", HookPoint.BEFORE_SAVE, lambda x: x, priority=100)

        assert hook1 < hook2

    def test_repr(self):
        hook = Hook("stamp", HookPoint.BEFORE_SAVE, lambda x: x, priority=5)
        assert repr(hook) == "Hook('stamp', BEFORE_SAVE, priority=5)"


class TestHookManager:
    """Tests for HookManager."""

    @pytest.fixture
    def manager(self):
        return HookManager()

    def test_register(self, manager):
        manager.register(Hook("test", HookPoint.BEFORE_COMMAND, lambda x: x))

        hooks = manager.get_hooks(HookPoint.BEFORE_COMMAND)
        assert len(hooks) == 1
        assert hooks[0].name == "test"

    def test_unregister(self, manager):
        manager.register(Hook("test", HookPoint.BEFORE_SAVE, lambda x: x))
        manager.register(Hook("test", HookPoint.AFTER_SAVE, lambda x: x))

        assert manager.unregister("test") is True
        assert manager.get_hooks(HookPoint.BEFORE_SAVE) == []
        assert manager.get_hooks(HookPoint.AFTER_SAVE) == []

    def test_unregister_unknown(self, manager):
        assert manager.unregister("missing") is False

    def test_trigger(self, manager):
        results = []
        manager.register(Hook("test", HookPoint.AFTER_COMMAND, lambda ctx: results.append(ctx.data["value"])))

        manager.trigger(HookPoint.AFTER_COMMAND, {"value": 42})

        assert results == [42]

    def test_trigger_initial_result(self, manager):
        ctx = manager.trigger(HookPoint.BEFORE_SAVE, result="text")
        assert ctx.result == "text"

    def test_trigger_priority_order(self, manager):
        order = []

        manager.register(Hook("last", HookPoint.BEFORE_SAVE,
                              lambda x: order.append("last"), priority=100))
        manager.register(Hook("first", HookPoint.BEFORE_SAVE,
                              lambda x: order.append("first"), priority=10))
        manager.register(Hook("middle", HookPoint.BEFORE_SAVE,
                              lambda x: order.append("middle"), priority=50))

        manager.trigger(HookPoint.BEFORE_SAVE)

        assert order == ["first", "middle", "last"]

    def test_equal_priority_keeps_registration_order(self, manager):
        order = []
        for name in ("a", "b", "c"):
            manager.register(Hook(name, HookPoint.AFTER_SAVE,
                                  lambda x, n=name: order.append(n)))

        manager.trigger(HookPoint.AFTER_SAVE)

        assert order == ["a", "b", "c"]

    def test_trigger_cancel(self, manager):
        order = []

        def cancel_hook(ctx):
            order.append("cancel")
            ctx.cancel()

        manager.register(Hook("cancel", HookPoint.BEFORE_COMMAND, cancel_hook, priority=10))
        manager.register(Hook("after", HookPoint.BEFORE_COMMAND,
                              lambda x: order.append("after"), priority=20))

        ctx = manager.trigger(HookPoint.BEFORE_COMMAND)

        assert ctx.cancelled
        assert order == ["cancel"]

    def test_failing_hook_does_not_stop_chain(self, manager):
        order = []

        def broken(ctx):
            raise ValueError("boom")

        manager.register(Hook("broken", HookPoint.AFTER_PARSE, broken, priority=10))
        manager.register(Hook("after", HookPoint.AFTER_PARSE,
                              lambda x: order.append("after"), priority=20))

        ctx = manager.trigger(HookPoint.AFTER_PARSE)

        assert order == ["after"]
        assert isinstance(ctx.error, ValueError)

    def test_decorator(self, manager):
        @manager.hook(HookPoint.BEFORE_SAVE, priority=1)
        def stamp(ctx):
            ctx.set_result(ctx.result + "<!-- saved -->\n")

        ctx = manager.trigger(HookPoint.BEFORE_SAVE, result="# B\n")

        assert ctx.result == "# B\n<!-- saved -->\n"
        assert manager.get_hooks(HookPoint.BEFORE_SAVE)[0].name == "stamp"

    def test_clear(self, manager):
        manager.register(Hook("a", HookPoint.BEFORE_SAVE, lambda x: x))
        manager.register(Hook("b", HookPoint.AFTER_SAVE, lambda x: x))

        manager.clear(HookPoint.BEFORE_SAVE)
        assert manager.get_hooks(HookPoint.BEFORE_SAVE) == []
        assert len(manager.get_hooks(HookPoint.AFTER_SAVE)) == 1

        manager.clear()
        assert manager.get_hooks(HookPoint.AFTER_SAVE) == []
