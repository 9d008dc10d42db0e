"""
Hookbus Events - Module-Level Functions
=========================================
Free functions over a dispatcher, for host code that does not carry
one around. Each accepts an explicit `dispatcher=`; without it the
process-wide default from get_dispatcher() is used.

The default is created on first use and lives until process exit.
Tests swap it with set_dispatcher() / reset_dispatcher().
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Iterable, Optional, Sequence

from hookbus.events import conf
from hookbus.events.callbacks import Callback
from hookbus.events.dispatcher import EventDispatcher, PluginRef
from hookbus.plugins.contracts import HookedPlugin
from hookbus.plugins.registry import PluginRegistry, get_plugin_registry

logger = logging.getLogger("hookbus.events")

_default_dispatcher: Optional[EventDispatcher] = None
_default_lock = Lock()


# ══════════════════════════════════════════════════════════════
# DEFAULT DISPATCHER LIFECYCLE
# ══════════════════════════════════════════════════════════════

def get_dispatcher() -> EventDispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _default_dispatcher
    with _default_lock:
        if _default_dispatcher is None:
            _default_dispatcher = EventDispatcher(
                get_plugin_registry(),
                isolate_failures=conf.isolate_failures(),
            )
            logger.info("Default event dispatcher created.")
        return _default_dispatcher


def set_dispatcher(dispatcher: EventDispatcher) -> None:
    """Install a dispatcher as the process-wide default."""
    global _default_dispatcher
    if not isinstance(dispatcher, EventDispatcher):
        raise TypeError(
            f"Expected EventDispatcher, got {type(dispatcher).__name__}."
        )
    with _default_lock:
        _default_dispatcher = dispatcher


def reset_dispatcher() -> None:
    """Forget the process-wide dispatcher. Tests only."""
    global _default_dispatcher
    with _default_lock:
        _default_dispatcher = None


# ══════════════════════════════════════════════════════════════
# CONVENIENCE WRAPPERS
# ══════════════════════════════════════════════════════════════

def post_event(
    event_name: str,
    args: Iterable[Any] = (),
    pending: bool = False,
    plugins: Optional[Sequence[PluginRef]] = None,
    dispatcher: Optional[EventDispatcher] = None,
) -> None:
    """Post an event; observers and plugin hooks receive *args."""
    (dispatcher or get_dispatcher()).post_event(
        event_name, args, pending=pending, plugins=plugins
    )


def add_action(
    event_name: str,
    callback: Any,
    dispatcher: Optional[EventDispatcher] = None,
) -> Callback:
    """Register a callback (or descriptor) to run when event_name is posted."""
    return (dispatcher or get_dispatcher()).add_observer(event_name, callback)


def post_test_event(
    event_name: str,
    args: Iterable[Any] = (),
    pending: bool = False,
    plugins: Optional[Sequence[PluginRef]] = None,
    dispatcher: Optional[EventDispatcher] = None,
) -> None:
    """Like post_event(), but a no-op unless HOOKBUS_TEST_MODE is on."""
    if not conf.is_test_mode():
        return
    post_event(
        event_name, args, pending=pending, plugins=plugins,
        dispatcher=dispatcher,
    )


def load_plugin(
    plugin: HookedPlugin,
    registry: Optional[PluginRegistry] = None,
    dispatcher: Optional[EventDispatcher] = None,
) -> None:
    """
    Register a plugin and immediately replay pending events to it,
    so a late plugin sees everything posted as pending before it loaded.
    """
    dispatcher = dispatcher or get_dispatcher()
    registry = registry or dispatcher.plugin_registry
    registry.register_plugin(plugin)
    dispatcher.post_pending_events_to(plugin)
