"""
Hookbus Plugins - Plugin Contract
===================================
What the dispatcher expects from plugins and from whoever loads them.

A plugin exposes a hook table: event name → callback descriptor.
The descriptor usually names one of the plugin's own methods:

    class VisitsPlugin(Plugin):
        name = "Visits"
        hooks = {
            "Tracker.newVisit": "record_visit",
            "Report.build": {"function": "add_columns", "after": True},
        }

The dispatcher only reads hook tables. It never mutates plugin state.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class HookedPlugin(Protocol):
    name: str

    def get_registered_hooks(self) -> Mapping[str, Any]:
        ...


class PluginRegistryProtocol(Protocol):
    def get_loaded_plugins(self) -> Sequence[HookedPlugin]:
        ...

    def get_loaded_plugin(self, name: str) -> HookedPlugin:
        ...


class Plugin:
    """
    Convenience base class for plugins.

    Subclasses declare `name` and a `hooks` table as class attributes,
    or override get_registered_hooks() for a computed table.
    """

    name: str = ""
    hooks: Mapping[str, Any] = {}

    def __init__(self, name: str | None = None):
        if name is not None:
            self.name = name
        if not self.name or not isinstance(self.name, str):
            raise ValueError(
                f"{type(self).__name__} must declare a non-empty name."
            )

    def get_registered_hooks(self) -> Mapping[str, Any]:
        return dict(self.hooks)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
