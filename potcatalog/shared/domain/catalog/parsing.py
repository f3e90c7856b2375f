"""Text parsing helpers for pot form input."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

FLOWER_SEPARATOR = ","
FLOWER_JOINER = ", "


def parse_flowers(raw: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated flower list into trimmed, non-empty names.

    Blank input (``None``, ``""`` or whitespace only) yields an empty tuple.
    """
    if not raw or not raw.strip():
        return ()
    tokens = (token.strip() for token in raw.split(FLOWER_SEPARATOR))
    return tuple(token for token in tokens if token)


def format_flowers(flowers: Iterable[str]) -> str:
    """Join flower names for display."""
    return FLOWER_JOINER.join(flowers)


def missing_required(**fields: Optional[str]) -> List[str]:
    """Return the names of fields that are empty after trimming, in call order."""
    return [name for name, value in fields.items() if not (value or "").strip()]
