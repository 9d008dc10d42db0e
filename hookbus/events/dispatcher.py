"""
Hookbus Events - Dispatcher
=============================
Posts named events to plugin hooks and ad-hoc observers.

Dispatch behavior:
1. Validate event name
2. If pending → record (name, args) BEFORE anything else
3. Resolve the full callback set (plugins first, then ad-hoc observers)
4. Invoke BEFORE group → NORMAL group → AFTER group
5. Within a group: plugin load order, then observer registration order
6. Each callback receives *args, unchanged

Failure behavior:
- Default is fail-fast: the first callback exception propagates
  unwrapped and later callbacks do not run.
- With isolate_failures=True every callback runs; failures are logged
  and reported together as CallbackFailuresError at the end.
- Resolution errors (unknown plugin, bad hook) surface before any
  callback runs.

No lock is held while callbacks run, so callbacks may post events or
register observers. Observers added mid-dispatch fire from the next
dispatch on.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from hookbus.events.callbacks import Callback, Priority, resolve_callback
from hookbus.events.errors import (
    CallbackFailuresError,
    InvalidEventNameError,
    MalformedDescriptorError,
    UnresolvedHookError,
)
from hookbus.events.pending import PendingEvent, PendingEventLog
from hookbus.events.registry import ObserverRegistry
from hookbus.plugins.contracts import HookedPlugin, PluginRegistryProtocol

logger = logging.getLogger("hookbus.events")

PluginRef = Union[str, HookedPlugin]


class EventDispatcher:
    """
    Event dispatch context: ad-hoc observers + pending log + a view
    of the loaded plugins.

    Usage:
        dispatcher = EventDispatcher(plugin_registry)

        dispatcher.add_observer("Report.build", on_build)
        dispatcher.add_observer(
            "Report.build", {"function": audit, "before": True}
        )

        dispatcher.post_event("Report.build", [report, params])
        # audit(report, params) → plugin hooks → on_build(report, params)
    """

    def __init__(
        self,
        plugin_registry: PluginRegistryProtocol,
        observers: Optional[ObserverRegistry] = None,
        pending_log: Optional[PendingEventLog] = None,
        isolate_failures: bool = False,
    ):
        self._plugin_registry = plugin_registry
        self._observers = observers if observers is not None else ObserverRegistry()
        self._pending = pending_log if pending_log is not None else PendingEventLog()
        self.isolate_failures = isolate_failures

    @property
    def plugin_registry(self) -> PluginRegistryProtocol:
        return self._plugin_registry

    # ══════════════════════════════════════════════════════════
    # POSTING
    # ══════════════════════════════════════════════════════════

    def post_event(
        self,
        event_name: str,
        args: Iterable[Any] = (),
        pending: bool = False,
        plugins: Optional[Sequence[PluginRef]] = None,
    ) -> None:
        """
        Trigger an event, executing every callback attached to it.

        Args:
            event_name: e.g. 'API.getReportMetadata'.
            args:       Positional arguments passed to each callback.
            pending:    Also keep the event for plugins loaded later
                        (see post_pending_events_to).
            plugins:    Restrict plugin callbacks to these plugins
                        (instances or names). None or empty means all
                        loaded plugins. Ad-hoc observers always fire.

        Raises:
            InvalidEventNameError: event_name is not a non-empty str.
            TypeError:             args is a str or bytes.
            UnknownPluginError:    a plugin name is not loaded.
            UnresolvedHookError:   a hook names a missing method.
            CallbackFailuresError: isolation mode, one or more failed.
            Exception:             fail-fast mode, whatever a callback raised.
        """
        if not isinstance(event_name, str) or not event_name.strip():
            raise InvalidEventNameError(event_name)

        if isinstance(args, (str, bytes)):
            raise TypeError(
                f"args must be a sequence of arguments, not {type(args).__name__}; "
                f"wrap a single value as [value]."
            )
        args = tuple(args)

        if pending:
            self._pending.record(event_name, args)
            logger.debug(f"Pending event recorded: {event_name}")

        callbacks = self._resolve_callbacks(event_name, plugins)

        if not callbacks:
            logger.debug(f"No callbacks for event '{event_name}'")
            return

        if self.isolate_failures:
            self._invoke_isolated(event_name, callbacks, args)
        else:
            for name, func in callbacks:
                logger.debug(f"Dispatching {event_name} → {name}")
                func(*args)

    def post_pending_events_to(self, plugin: PluginRef) -> None:
        """
        Re-post every pending event, in posting order, to one plugin.

        Replayed events are not recorded again. Events made pending by
        callbacks during this replay are left for the next one.
        """
        records = self._pending.snapshot()
        logger.debug(
            f"Replaying {len(records)} pending event(s) to {plugin!r}"
        )
        for record in records:
            self.post_event(
                record.event_name, record.args, pending=False, plugins=[plugin]
            )

    # ══════════════════════════════════════════════════════════
    # OBSERVERS
    # ══════════════════════════════════════════════════════════

    def add_observer(self, event_name: str, descriptor: Any) -> Callback:
        """
        Attach a callback that is not a plugin method to an event.

        descriptor is a callable, a Callback, or
        {"function": callable, "before": True} /
        {"function": callable, "after": True}.
        """
        if not isinstance(event_name, str) or not event_name.strip():
            raise InvalidEventNameError(event_name)
        return self._observers.add(event_name, descriptor)

    def clear_observers(self, event_name: str) -> None:
        """Remove all ad-hoc observers for an event. Test isolation only."""
        self._observers.clear(event_name)

    def has_observers(self, event_name: str) -> bool:
        return self._observers.has_observers(event_name)

    def pending_events(self) -> tuple[PendingEvent, ...]:
        return self._pending.snapshot()

    # ══════════════════════════════════════════════════════════
    # RESOLUTION
    # ══════════════════════════════════════════════════════════

    def _resolve_plugins(
        self, plugins: Optional[Sequence[PluginRef]]
    ) -> list[HookedPlugin]:
        if not plugins:
            return list(self._plugin_registry.get_loaded_plugins())

        resolved = []
        for plugin in plugins:
            if isinstance(plugin, str):
                plugin = self._plugin_registry.get_loaded_plugin(plugin)
            resolved.append(plugin)
        return resolved

    @staticmethod
    def _bind_plugin_hook(
        plugin: HookedPlugin, event_name: str, callback: Callback
    ) -> Callable[..., Any]:
        if not isinstance(callback.handle, str):
            return callback.handle

        method = getattr(plugin, callback.handle, None)
        if not callable(method):
            raise UnresolvedHookError(
                getattr(plugin, "name", repr(plugin)),
                event_name,
                callback.handle,
            )
        return method

    def _resolve_callbacks(
        self,
        event_name: str,
        plugins: Optional[Sequence[PluginRef]],
    ) -> list[tuple[str, Callable[..., Any]]]:
        """
        Build the ordered (name, callable) list for one dispatch.
        Everything is resolved before anything is invoked.
        """
        groups: dict[Priority, list[tuple[str, Callable[..., Any]]]] = {
            priority: [] for priority in Priority
        }

        for plugin in self._resolve_plugins(plugins):
            hooks = plugin.get_registered_hooks()
            if event_name not in hooks:
                continue

            try:
                callback = resolve_callback(
                    hooks[event_name], allow_method_names=True
                )
            except MalformedDescriptorError:
                logger.error(
                    f"Plugin {plugin!r} has a malformed hook for "
                    f"'{event_name}'"
                )
                raise

            func = self._bind_plugin_hook(plugin, event_name, callback)
            groups[callback.priority].append(
                (f"{getattr(plugin, 'name', plugin)}.{callback.name}", func)
            )

        for callback in self._observers.get_observers(event_name):
            groups[callback.priority].append((callback.name, callback.handle))

        return [
            entry
            for priority in sorted(groups)
            for entry in groups[priority]
        ]

    # ══════════════════════════════════════════════════════════
    # ISOLATED INVOCATION
    # ══════════════════════════════════════════════════════════

    @staticmethod
    def _invoke_isolated(
        event_name: str,
        callbacks: list[tuple[str, Callable[..., Any]]],
        args: tuple[Any, ...],
    ) -> None:
        failures = []

        for name, func in callbacks:
            try:
                func(*args)
                logger.debug(f"Dispatched {event_name} → {name}")
            except Exception as exc:
                failures.append((name, exc))
                logger.error(
                    f"Callback failed: {name} for {event_name}: {exc}",
                    exc_info=True,
                )
                # Continue to next callback

        if failures:
            raise CallbackFailuresError(event_name, failures) from failures[0][1]
