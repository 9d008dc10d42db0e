"""
Hookbus Events - Observer Registry
====================================
Ad-hoc observers: callbacks attached to event names that are NOT
methods of loaded plugins.

Rules:
- Multiple observers per event name allowed
- Duplicates allowed (registering twice → invoked twice)
- Registration order preserved
- Descriptors resolved once, at registration time
- In-memory only, thread-safe
"""

import logging
from threading import Lock
from typing import Any

from hookbus.events.callbacks import Callback, resolve_callback

logger = logging.getLogger("hookbus.events")


class ObserverRegistry:
    """
    In-memory registry of ad-hoc observers.

    Each entry maps an event name to a list of resolved Callbacks.
    """

    def __init__(self):
        self._observers: dict[str, list[Callback]] = {}
        self._lock = Lock()

    def add(self, event_name: str, descriptor: Any) -> Callback:
        """
        Register an observer for an event name.

        Raises:
            MalformedDescriptorError: descriptor cannot be resolved.
        """
        callback = resolve_callback(descriptor)

        with self._lock:
            self._observers.setdefault(event_name, []).append(callback)

        logger.info(
            f"Observer registered: {callback.name} → {event_name} "
            f"({callback.priority.name.lower()})"
        )
        return callback

    def clear(self, event_name: str) -> None:
        """Drop every observer for an event name. Test isolation only."""
        with self._lock:
            self._observers[event_name] = []

    def get_observers(self, event_name: str) -> list[Callback]:
        """Snapshot of observers for an event name, in registration order."""
        with self._lock:
            return list(self._observers.get(event_name, []))

    def has_observers(self, event_name: str) -> bool:
        with self._lock:
            return bool(self._observers.get(event_name))
