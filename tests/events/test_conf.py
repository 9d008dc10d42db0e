"""
Hookbus Events - Settings Access Tests
=========================================
Covers:
- Flags read through lazy settings that nothing has touched yet
- Flags read as False when no settings module is available
"""

import config.settings as project_settings
from django.conf import LazySettings

from hookbus.events import add_action, conf, post_test_event


# ══════════════════════════════════════════════════════════════
# LAZY SETTINGS (DJANGO_SETTINGS_MODULE set, never accessed)
# ══════════════════════════════════════════════════════════════

class TestLazySettings:
    def _untouched_settings(self, monkeypatch):
        monkeypatch.setenv("DJANGO_SETTINGS_MODULE", "config.settings")
        lazy = LazySettings()
        assert not lazy.configured
        monkeypatch.setattr(conf, "settings", lazy)
        return lazy

    def test_test_mode_read_before_first_access(self, monkeypatch):
        monkeypatch.setattr(project_settings, "HOOKBUS_TEST_MODE", True)
        self._untouched_settings(monkeypatch)

        assert conf.is_test_mode() is True

    def test_isolate_failures_read_before_first_access(self, monkeypatch):
        monkeypatch.setattr(project_settings, "HOOKBUS_ISOLATE_FAILURES", True)
        self._untouched_settings(monkeypatch)

        assert conf.isolate_failures() is True

    def test_post_test_event_fires(self, monkeypatch, recorder, calls):
        monkeypatch.setattr(project_settings, "HOOKBUS_TEST_MODE", True)
        self._untouched_settings(monkeypatch)
        add_action("Test.hook", recorder("gated"))

        post_test_event("Test.hook", [1])

        assert calls == [("gated", (1,))]


# ══════════════════════════════════════════════════════════════
# NO SETTINGS MODULE
# ══════════════════════════════════════════════════════════════

class TestNoSettingsModule:
    def _no_settings(self, monkeypatch):
        monkeypatch.delenv("DJANGO_SETTINGS_MODULE", raising=False)
        monkeypatch.setattr(conf, "settings", LazySettings())

    def test_flags_read_as_false(self, monkeypatch):
        self._no_settings(monkeypatch)

        assert conf.is_test_mode() is False
        assert conf.isolate_failures() is False

    def test_post_test_event_is_noop(self, monkeypatch, recorder, calls):
        self._no_settings(monkeypatch)
        add_action("Test.hook", recorder("silent"))

        post_test_event("Test.hook", [1])

        assert calls == []
