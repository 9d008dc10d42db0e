"""
Shared fixtures for hookbus tests.
"""

import pytest

from hookbus.events.dispatcher import EventDispatcher
from hookbus.events.functions import reset_dispatcher
from hookbus.plugins.contracts import Plugin
from hookbus.plugins.registry import PluginRegistry, reset_plugin_registry


class RecordingPlugin(Plugin):
    """Plugin whose hook methods append (plugin, method, args) to `calls`."""

    def __init__(self, name, hooks, calls):
        super().__init__(name)
        self.hooks = hooks
        self.calls = calls

    def on_event(self, *args):
        self.calls.append((self.name, "on_event", args))

    def on_first(self, *args):
        self.calls.append((self.name, "on_first", args))

    def on_last(self, *args):
        self.calls.append((self.name, "on_last", args))


@pytest.fixture(autouse=True)
def _reset_defaults():
    reset_dispatcher()
    reset_plugin_registry()
    yield
    reset_dispatcher()
    reset_plugin_registry()


@pytest.fixture
def calls():
    return []


@pytest.fixture
def make_plugin(calls):
    def _make(name, hooks):
        return RecordingPlugin(name, hooks, calls)
    return _make


@pytest.fixture
def plugin_registry():
    return PluginRegistry()


@pytest.fixture
def dispatcher(plugin_registry):
    return EventDispatcher(plugin_registry)


@pytest.fixture
def recorder(calls):
    """Factory for plain observer callables that log under a label."""
    def _recorder(label):
        def callback(*args):
            calls.append((label, args))
        callback.__qualname__ = label
        return callback
    return _recorder
