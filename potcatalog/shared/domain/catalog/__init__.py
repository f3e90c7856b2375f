"""Pot catalog domain: records, parsing and the in-memory store."""

from .errors import ValidationError
from .models import PotRecord
from .parsing import format_flowers, missing_required, parse_flowers
from .service import PotCatalogStore, timestamp_id_factory

__all__ = [
    "PotCatalogStore",
    "PotRecord",
    "ValidationError",
    "format_flowers",
    "missing_required",
    "parse_flowers",
    "timestamp_id_factory",
]
