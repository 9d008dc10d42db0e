"""
Hookbus Events - Pending Event Log
====================================
Events posted with pending=True are kept here so they can be
re-posted to plugins that load later.

The log is append-only for the lifetime of the process.
No expiry, no deduplication: posting the same event twice
as pending yields two records.
"""

from dataclasses import dataclass
from threading import Lock
from typing import Any, Iterable


@dataclass(frozen=True)
class PendingEvent:
    event_name: str
    args: tuple[Any, ...]


class PendingEventLog:
    def __init__(self):
        self._records: list[PendingEvent] = []
        self._lock = Lock()

    def record(self, event_name: str, args: Iterable[Any]) -> PendingEvent:
        entry = PendingEvent(event_name=event_name, args=tuple(args))
        with self._lock:
            self._records.append(entry)
        return entry

    def snapshot(self) -> tuple[PendingEvent, ...]:
        """Records in posting order, as of now."""
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
