"""
Hookbus Events - Callback Descriptor Tests
=============================================
Covers:
- Bare callables → NORMAL
- {"function", "before"/"after"} mappings
- Ambiguous before + after → BEFORE
- Method names allowed only for plugin hook tables
- Malformed descriptors rejected
"""

import pytest

from hookbus.events.callbacks import Callback, Priority, resolve_callback
from hookbus.events.errors import EventBusError, MalformedDescriptorError


def handler(*args):
    pass


class TestResolveCallback:
    def test_bare_callable_is_normal(self):
        callback = resolve_callback(handler)
        assert callback.handle is handler
        assert callback.priority is Priority.NORMAL

    def test_mapping_without_flags_is_normal(self):
        callback = resolve_callback({"function": handler})
        assert callback.priority is Priority.NORMAL

    def test_before_flag(self):
        callback = resolve_callback({"function": handler, "before": True})
        assert callback.priority is Priority.BEFORE

    def test_after_flag(self):
        callback = resolve_callback({"function": handler, "after": True})
        assert callback.priority is Priority.AFTER

    def test_falsy_flags_are_normal(self):
        callback = resolve_callback(
            {"function": handler, "before": False, "after": 0}
        )
        assert callback.priority is Priority.NORMAL

    def test_before_wins_when_both_set(self):
        callback = resolve_callback(
            {"function": handler, "before": True, "after": True}
        )
        assert callback.priority is Priority.BEFORE

    def test_callback_instance_passes_through(self):
        original = Callback(handler, Priority.AFTER)
        assert resolve_callback(original) is original

    def test_method_name_allowed_for_plugins(self):
        callback = resolve_callback(
            {"function": "on_event", "after": True}, allow_method_names=True
        )
        assert callback.handle == "on_event"
        assert callback.priority is Priority.AFTER
        assert callback.name == "on_event"

    def test_name_uses_qualname(self):
        assert resolve_callback(handler).name == "handler"


class TestMalformedDescriptors:
    def test_method_name_rejected_for_observers(self):
        with pytest.raises(MalformedDescriptorError, match="plugin hook"):
            resolve_callback("on_event")

    def test_missing_function_entry(self):
        with pytest.raises(MalformedDescriptorError, match="function"):
            resolve_callback({"before": True})

    def test_unknown_keys(self):
        with pytest.raises(MalformedDescriptorError, match="unknown keys"):
            resolve_callback({"function": handler, "priority": "high"})

    def test_non_callable_handle(self):
        with pytest.raises(MalformedDescriptorError, match="not callable"):
            resolve_callback(42)

    def test_blank_method_name(self):
        with pytest.raises(MalformedDescriptorError, match="empty"):
            resolve_callback({"function": "  "}, allow_method_names=True)

    def test_bad_priority_type(self):
        with pytest.raises(MalformedDescriptorError, match="Priority"):
            Callback(handler, "before")

    def test_is_event_bus_error(self):
        with pytest.raises(EventBusError):
            resolve_callback(None)


class TestPriorityOrder:
    def test_groups_sort_before_normal_after(self):
        assert sorted([Priority.AFTER, Priority.BEFORE, Priority.NORMAL]) == [
            Priority.BEFORE, Priority.NORMAL, Priority.AFTER,
        ]
