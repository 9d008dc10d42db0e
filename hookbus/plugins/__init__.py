"""
Hookbus Plugins - Public API
==============================
The plugin contract the dispatcher reads, and a reference registry.
"""

from hookbus.plugins.contracts import (
    HookedPlugin,
    Plugin,
    PluginRegistryProtocol,
)
from hookbus.plugins.registry import (
    DuplicatePluginError,
    PluginRegistry,
    PluginRegistryError,
    UnknownPluginError,
    get_plugin_registry,
    reset_plugin_registry,
)

__all__ = [
    # ── Contract ──────────────────────────────────────────────
    "HookedPlugin",
    "Plugin",
    "PluginRegistryProtocol",
    # ── Registry ──────────────────────────────────────────────
    "PluginRegistry",
    "PluginRegistryError",
    "DuplicatePluginError",
    "UnknownPluginError",
    "get_plugin_registry",
    "reset_plugin_registry",
]
