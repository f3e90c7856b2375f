"""Application State Management.

Reactive mirror of the pot catalog built on FletXr primitives. The domain
``PotCatalogStore`` stays the single source of truth; ``AppState`` re-publishes
its snapshot through ``pots`` after every mutation and announces the change on
the EventBus.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from fletx.core import RxList, RxStr

from potcatalog.shared.core import events
from potcatalog.shared.core.event_bus import EventBus, EventPayload
from potcatalog.shared.domain.catalog import PotCatalogStore, PotRecord, ValidationError

logger = logging.getLogger(__name__)

MAX_LOG_ENTRIES = 200


class AppState:
    """Reactive State for the catalog screen.

    Holds the rendered catalog snapshot, status line and log entries. UI
    components bind to the ``Rx*`` attributes with ``listen``.
    """

    def __init__(self, event_bus: EventBus, catalog: Optional[PotCatalogStore] = None) -> None:
        """Initialize application state.

        Args:
            event_bus: The shared event bus
            catalog: Domain store to mirror; a fresh empty one by default
        """
        self.bus = event_bus
        self.catalog = catalog if catalog is not None else PotCatalogStore()

        # Catalog snapshot, newest first
        self.pots: RxList[PotRecord] = RxList(list(self.catalog.list()))

        # Status line
        self.status_text: RxStr = RxStr("Ready")

        # Log entries (each is a dict: {message, level, ts})
        self.logs: RxList[Dict[str, Any]] = RxList([])

        self._started = False

    async def initialize(self) -> None:
        """Bind to EventBus events. Safe to call more than once."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_POT_ADDED, self._handle_pot_added)
        await self.bus.subscribe(events.TOPIC_POT_REMOVED, self._handle_pot_removed)
        await self.bus.subscribe(events.TOPIC_POT_REJECTED, self._handle_pot_rejected)
        await self.bus.subscribe(events.TOPIC_LOGS_EVENT, self._handle_log_event)

        self._started = True

    # --- Public Actions ---

    async def add_pot(self, name: str, location: str, flowers_raw: str = "") -> PotRecord:
        """Add a pot to the catalog and announce it.

        Raises:
            ValidationError: If name or location is blank. Nothing is
                mutated and ``pot.rejected`` is published before re-raising.
        """
        try:
            record = self.catalog.add(name, location, flowers_raw)
        except ValidationError as exc:
            await self.publish(
                events.TOPIC_POT_REJECTED,
                events.create_pot_rejected_event(exc.missing_fields),
            )
            raise

        self._sync_pots()
        await self.publish(
            events.TOPIC_POT_ADDED,
            events.create_pot_added_event(
                record.id, record.name, record.location, record.flowers, len(self.catalog)
            ),
        )
        return record

    async def remove_pot(self, pot_id: str) -> Optional[PotRecord]:
        """Remove a pot by id. Unknown ids are ignored.

        Returns:
            The removed record, or None if no pot matched
        """
        removed = self.catalog.remove(pot_id)
        if removed is None:
            return None

        self._sync_pots()
        await self.publish(
            events.TOPIC_POT_REMOVED,
            events.create_pot_removed_event(removed.id, removed.name, len(self.catalog)),
        )
        return removed

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Publish an event to the EventBus."""
        await self.bus.publish(topic, payload)

    def push_log(self, message: str, level: str = "info") -> None:
        """Append a log entry, keeping the newest MAX_LOG_ENTRIES."""
        entry = {"message": message, "level": level, "ts": time.time()}
        entries = list(self.logs.value)[-(MAX_LOG_ENTRIES - 1):]
        entries.append(entry)
        self.logs.value = entries

    def _sync_pots(self) -> None:
        self.pots.value = list(self.catalog.list())

    # --- Event Handlers ---

    async def _handle_pot_added(self, payload: EventPayload) -> None:
        """Log additions and refresh the status line."""
        name = payload.get("name", "")
        size = payload.get("catalog_size", len(self.catalog))
        self.push_log(f"Added pot '{name}'", "success")
        self.status_text.value = _count_label(size)

    async def _handle_pot_removed(self, payload: EventPayload) -> None:
        """Log removals and refresh the status line."""
        name = payload.get("name", "")
        size = payload.get("catalog_size", len(self.catalog))
        self.push_log(f"Removed pot '{name}'", "info")
        self.status_text.value = _count_label(size)

    async def _handle_pot_rejected(self, payload: EventPayload) -> None:
        """Log rejected submissions."""
        missing = ", ".join(payload.get("missing_fields", []))
        self.push_log(f"Submission rejected, missing: {missing}", "warning")

    async def _handle_log_event(self, payload: EventPayload) -> None:
        """Handle log events published by other components."""
        message = payload.get("message")
        if message:
            self.push_log(str(message), str(payload.get("level", "info")))


def _count_label(size: int) -> str:
    return "1 pot catalogued" if size == 1 else f"{size} pots catalogued"
