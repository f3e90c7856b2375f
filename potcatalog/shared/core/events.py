"""Canonical event definitions for the pot catalog."""

from __future__ import annotations

import time
from typing import Literal, Sequence

from .event_bus import EventPayload

# Shell Topics
TOPIC_LOGS_EVENT = "logs.event"

# Catalog Topics
TOPIC_POT_ADDED = "pot.added"          # Payload: pot record fields + catalog size
TOPIC_POT_REMOVED = "pot.removed"      # Payload: pot record fields + catalog size
TOPIC_POT_REJECTED = "pot.rejected"    # Payload: missing field names

# Removal confirmation lifecycle
TOPIC_REMOVAL_REQUESTED = "removal.requested"
TOPIC_REMOVAL_CANCELLED = "removal.cancelled"

LogLevel = Literal["info", "warning", "error", "success"]


def create_logs_event(
    message: str,
    level: LogLevel = "info",
    topic: str | None = None,
) -> EventPayload:
    """Create a Log event."""
    return {
        "message": message,
        "level": level,
        "topic": topic,
        "ts": time.time(),
    }


def create_pot_added_event(
    pot_id: str,
    name: str,
    location: str,
    flowers: Sequence[str],
    catalog_size: int,
) -> EventPayload:
    """Create a pot added event."""
    return {
        "id": pot_id,
        "name": name,
        "location": location,
        "flowers": list(flowers),
        "catalog_size": catalog_size,
    }


def create_pot_removed_event(pot_id: str, name: str, catalog_size: int) -> EventPayload:
    """Create a pot removed event."""
    return {
        "id": pot_id,
        "name": name,
        "catalog_size": catalog_size,
    }


def create_pot_rejected_event(missing_fields: Sequence[str]) -> EventPayload:
    """Create a rejected submission event.

    Args:
        missing_fields: Required fields that were blank, in form order
    """
    return {
        "missing_fields": list(missing_fields),
    }


def create_removal_event(pot_id: str) -> EventPayload:
    """Create a removal requested/cancelled event."""
    return {
        "id": pot_id,
    }
