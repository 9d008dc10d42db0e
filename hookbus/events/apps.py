"""
Hookbus Events - App Configuration
====================================
Creates the default dispatcher once Django finishes loading, so the
settings it reads are final and plugins loaded at startup find it ready.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger("hookbus.events")


class EventsConfig(AppConfig):
    name = "hookbus.events"
    label = "hookbus_events"
    verbose_name = "Hookbus Events"

    def ready(self):
        from hookbus.events.functions import get_dispatcher

        dispatcher = get_dispatcher()
        logger.info(
            f"Event dispatcher ready (isolate_failures="
            f"{dispatcher.isolate_failures})."
        )
