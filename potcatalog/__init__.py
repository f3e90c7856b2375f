"""Pot Catalog package."""

from .shared.core.event_bus import EventBus
from .shared.domain.catalog import PotCatalogStore, PotRecord, ValidationError

__all__ = ["EventBus", "PotCatalogStore", "PotRecord", "ValidationError"]
