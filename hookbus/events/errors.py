"""
Hookbus Events - Errors
=========================
Error types for the event dispatch layer.

Callback exceptions are NOT represented here. In fail-fast mode they
propagate to the caller of post_event() exactly as raised.
"""


class EventBusError(Exception):
    """Base error for event dispatch operations."""
    pass


class InvalidEventNameError(EventBusError):
    """Event name is not a non-empty string."""

    def __init__(self, event_name):
        self.event_name = event_name
        super().__init__(
            f"Event name must be a non-empty string, got: {event_name!r}"
        )


class MalformedDescriptorError(EventBusError):
    """Callback descriptor cannot be resolved to a handle + priority."""

    def __init__(self, descriptor, reason: str):
        self.descriptor = descriptor
        self.reason = reason
        super().__init__(
            f"Malformed callback descriptor {descriptor!r}: {reason}"
        )


class UnresolvedHookError(EventBusError):
    """Plugin hook table names a method the plugin does not have."""

    def __init__(self, plugin_name: str, event_name: str, method_name: str):
        self.plugin_name = plugin_name
        self.event_name = event_name
        self.method_name = method_name
        super().__init__(
            f"Plugin '{plugin_name}' hooks '{event_name}' to "
            f"'{method_name}', which is not a callable attribute."
        )


class CallbackFailuresError(EventBusError):
    """
    One or more callbacks failed while dispatching in isolation mode.

    failures is a list of (callback_name, exception) in invocation order.
    The first exception is chained as __cause__.
    """

    def __init__(self, event_name: str, failures: list):
        self.event_name = event_name
        self.failures = failures
        names = ", ".join(name for name, _ in failures)
        super().__init__(
            f"{len(failures)} callback(s) failed for event "
            f"'{event_name}': {names}"
        )
