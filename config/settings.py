"""
Hookbus – Django Settings (Infrastructure Only)
=================================================
Django is the host container. Hookbus has no models, views or URLs;
it only reads its flags from here.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "hookbus-dev-key")

DEBUG = True

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "hookbus.events.apps.EventsConfig",
]

# ── Hookbus ───────────────────────────────────────────────────
# post_test_event() is a no-op unless this is on.
HOOKBUS_TEST_MODE = os.environ.get("HOOKBUS_TEST_MODE", "") == "1"

# Default dispatcher runs every callback and reports failures together
# instead of stopping at the first one.
HOOKBUS_ISOLATE_FAILURES = False

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "hookbus": {
            "handlers": ["console"],
            "level": os.environ.get("HOOKBUS_LOG_LEVEL", "WARNING"),
        },
    },
}

# ── Internationalization ──────────────────────────────────────
USE_TZ = True
