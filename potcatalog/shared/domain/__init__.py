"""
Shared Domain Module
====================

Business logic with no UI dependencies.

Submodules:
- catalog: Pot records, form input parsing, the in-memory catalog store
"""

from .catalog import (
    PotCatalogStore,
    PotRecord,
    ValidationError,
    format_flowers,
    parse_flowers,
)

__all__ = [
    "PotCatalogStore",
    "PotRecord",
    "ValidationError",
    "format_flowers",
    "parse_flowers",
]
