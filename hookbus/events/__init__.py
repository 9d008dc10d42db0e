"""
Hookbus Events - Public API
=============================
Anything may post an event. Plugins and observers react to it.
Order is before → normal → after, and pending events reach late plugins.
"""

from hookbus.events.callbacks import Callback, Priority, resolve_callback
from hookbus.events.dispatcher import EventDispatcher
from hookbus.events.errors import (
    CallbackFailuresError,
    EventBusError,
    InvalidEventNameError,
    MalformedDescriptorError,
    UnresolvedHookError,
)
from hookbus.events.functions import (
    add_action,
    get_dispatcher,
    load_plugin,
    post_event,
    post_test_event,
    reset_dispatcher,
    set_dispatcher,
)
from hookbus.events.pending import PendingEvent, PendingEventLog
from hookbus.events.registry import ObserverRegistry

__all__ = [
    # ── Dispatch ──────────────────────────────────────────────
    "EventDispatcher",
    "Callback",
    "Priority",
    "resolve_callback",
    "ObserverRegistry",
    "PendingEvent",
    "PendingEventLog",
    # ── Module-level functions ────────────────────────────────
    "post_event",
    "add_action",
    "post_test_event",
    "load_plugin",
    "get_dispatcher",
    "set_dispatcher",
    "reset_dispatcher",
    # ── Errors ────────────────────────────────────────────────
    "EventBusError",
    "InvalidEventNameError",
    "MalformedDescriptorError",
    "UnresolvedHookError",
    "CallbackFailuresError",
]
