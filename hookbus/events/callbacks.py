"""
Hookbus Events - Callback Descriptors
=======================================
Normalizes every accepted callback shape into one closed variant:

    Callback(handle, priority)

Accepted descriptor shapes:
    some_callable                                  → NORMAL
    "method_name"            (plugin hooks only)   → NORMAL
    {"function": h}                                → NORMAL
    {"function": h, "before": True}                → BEFORE
    {"function": h, "after": True}                 → AFTER
    Callback(h, Priority.AFTER)                    → as given

When both "before" and "after" are truthy, BEFORE wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Mapping, Union

from hookbus.events.errors import MalformedDescriptorError

Handle = Union[Callable[..., Any], str]

_DESCRIPTOR_KEYS = frozenset({"function", "before", "after"})


class Priority(IntEnum):
    """Invocation group. Lower value runs first."""
    BEFORE = 0
    NORMAL = 1
    AFTER = 2


@dataclass(frozen=True)
class Callback:
    """A resolved callback: what to call and in which group."""

    handle: Handle
    priority: Priority = Priority.NORMAL

    def __post_init__(self):
        if not isinstance(self.priority, Priority):
            raise MalformedDescriptorError(
                self, f"priority must be a Priority, got {self.priority!r}"
            )
        if isinstance(self.handle, str):
            if not self.handle.strip():
                raise MalformedDescriptorError(self, "empty method name")
        elif not callable(self.handle):
            raise MalformedDescriptorError(
                self, f"handle is not callable: {type(self.handle).__name__}"
            )

    @property
    def name(self) -> str:
        if isinstance(self.handle, str):
            return self.handle
        return getattr(self.handle, "__qualname__", repr(self.handle))


def _priority_from_flags(descriptor: Mapping) -> Priority:
    if descriptor.get("before"):
        return Priority.BEFORE
    if descriptor.get("after"):
        return Priority.AFTER
    return Priority.NORMAL


def resolve_callback(descriptor: Any, allow_method_names: bool = False) -> Callback:
    """
    Resolve a descriptor into a Callback.

    Args:
        descriptor:         Any of the shapes listed in the module docstring.
        allow_method_names: Accept str handles (plugin hook tables only).

    Raises:
        MalformedDescriptorError: descriptor cannot be resolved.
    """
    if isinstance(descriptor, Callback):
        callback = descriptor
    elif isinstance(descriptor, Mapping):
        unknown = set(descriptor) - _DESCRIPTOR_KEYS
        if unknown:
            raise MalformedDescriptorError(
                descriptor, f"unknown keys {sorted(unknown)}"
            )
        handle = descriptor.get("function")
        if handle is None:
            raise MalformedDescriptorError(
                descriptor, "missing 'function' entry"
            )
        callback = Callback(handle, _priority_from_flags(descriptor))
    else:
        callback = Callback(descriptor)

    if isinstance(callback.handle, str) and not allow_method_names:
        raise MalformedDescriptorError(
            descriptor,
            "method names are only valid inside plugin hook tables",
        )
    return callback
