"""
Hookbus Events - Settings Access
==================================
Reads hookbus settings from Django settings.

HOOKBUS_TEST_MODE         gates post_test_event()
HOOKBUS_ISOLATE_FAILURES  mode of the default dispatcher

Both read as False when no Django settings module is available.
Settings are read lazily, so DJANGO_SETTINGS_MODULE alone is enough;
django.setup() is not required.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


def _flag(name: str) -> bool:
    try:
        return bool(getattr(settings, name, False))
    except ImproperlyConfigured:
        return False


def is_test_mode() -> bool:
    return _flag("HOOKBUS_TEST_MODE")


def isolate_failures() -> bool:
    return _flag("HOOKBUS_ISOLATE_FAILURES")
