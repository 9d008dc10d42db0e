"""
Hookbus Plugins - Plugin Registry
===================================
In-memory registry of loaded plugins, in load order.

Rules:
- Each plugin name loads at most once
- Load order is the dispatch order for plugin callbacks
- Lookup of an unknown name is an error, not None
- Thread-safe for concurrent access

Hosts with their own plugin manager only need to satisfy
PluginRegistryProtocol. This implementation backs the default
dispatcher and the test suite.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Optional

from hookbus.plugins.contracts import HookedPlugin

logger = logging.getLogger("hookbus.plugins")


# ══════════════════════════════════════════════════════════════
# REGISTRY ERRORS
# ══════════════════════════════════════════════════════════════

class PluginRegistryError(Exception):
    """Base error for plugin registry operations."""
    pass


class DuplicatePluginError(PluginRegistryError):
    """Plugin name already loaded."""

    def __init__(self, plugin_name: str):
        self.plugin_name = plugin_name
        super().__init__(
            f"Plugin '{plugin_name}' is already loaded."
        )


class UnknownPluginError(PluginRegistryError):
    """No loaded plugin has this name."""

    def __init__(self, plugin_name: str):
        self.plugin_name = plugin_name
        super().__init__(
            f"Plugin '{plugin_name}' is not loaded."
        )


# ══════════════════════════════════════════════════════════════
# PLUGIN REGISTRY
# ══════════════════════════════════════════════════════════════

class PluginRegistry:
    """
    Ordered, thread-safe registry of loaded plugins.

    Usage:
        registry = PluginRegistry()
        registry.register_plugin(VisitsPlugin())
        registry.register_plugin(GoalsPlugin())

        registry.get_loaded_plugins()        # [Visits, Goals]
        registry.get_loaded_plugin("Goals")  # GoalsPlugin instance
        registry.get_loaded_plugin("Nope")   # UnknownPluginError
    """

    def __init__(self):
        self._plugins: dict[str, HookedPlugin] = {}
        self._lock = Lock()

    def register_plugin(self, plugin: HookedPlugin) -> None:
        """
        Add a plugin to the end of the load order.

        Raises:
            TypeError: plugin has no get_registered_hooks().
            DuplicatePluginError: plugin name already loaded.
        """
        if not callable(getattr(plugin, "get_registered_hooks", None)):
            raise TypeError(
                f"Expected a plugin with get_registered_hooks(), "
                f"got {type(plugin).__name__}."
            )

        plugin_name = plugin.name

        with self._lock:
            if plugin_name in self._plugins:
                raise DuplicatePluginError(plugin_name)
            self._plugins[plugin_name] = plugin

        logger.info(
            f"Plugin loaded: '{plugin_name}' - "
            f"{len(plugin.get_registered_hooks())} hook(s)"
        )

    def get_loaded_plugins(self) -> list[HookedPlugin]:
        """All loaded plugins, in load order."""
        with self._lock:
            return list(self._plugins.values())

    def get_loaded_plugin(self, plugin_name: str) -> HookedPlugin:
        """
        Raises:
            UnknownPluginError: plugin not loaded.
        """
        with self._lock:
            plugin = self._plugins.get(plugin_name)
        if plugin is None:
            raise UnknownPluginError(plugin_name)
        return plugin


# ══════════════════════════════════════════════════════════════
# PROCESS-WIDE DEFAULT
# ══════════════════════════════════════════════════════════════

_default_registry: Optional[PluginRegistry] = None
_default_lock = Lock()


def get_plugin_registry() -> PluginRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = PluginRegistry()
        return _default_registry


def reset_plugin_registry() -> None:
    """Forget the process-wide registry. Tests only."""
    global _default_registry
    with _default_lock:
        _default_registry = None
