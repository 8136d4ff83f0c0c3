"""Per-run registry of inferred events."""

from __future__ import annotations

import logging
import threading
from typing import Mapping

from .models import EventCatalog, EventDescriptor, TypeRef

logger = logging.getLogger(__name__)


class EventRegistry:
    """Collects event descriptors for one analysis run.

    Thread-safe: ``record`` may be called from several workers; the snapshot
    is always ordered by qualified name, whatever the arrival order.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._events: dict[str, EventDescriptor] = {}

    def record(self, qualified_name: str, fields: Mapping[str, TypeRef]) -> EventDescriptor:
        """Insert or replace the descriptor for an interface (last write wins)."""
        descriptor = EventDescriptor(qualified_name, fields)
        with self._lock:
            if qualified_name in self._events:
                logger.debug("Replacing recorded event %s", qualified_name)
            self._events[qualified_name] = descriptor
        return descriptor

    def snapshot(self) -> EventCatalog:
        """Return the catalog ordered by qualified name ascending."""
        with self._lock:
            ordered = sorted(self._events.values(), key=lambda e: e.qualified_name)
        return EventCatalog(tuple(ordered))

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def __contains__(self, qualified_name: object) -> bool:
        with self._lock:
            return qualified_name in self._events
