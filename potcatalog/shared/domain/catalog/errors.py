"""Catalog domain errors."""

from __future__ import annotations

from typing import Sequence, Tuple


class ValidationError(ValueError):
    """Raised when a pot is submitted without a name or location."""

    def __init__(self, missing_fields: Sequence[str]) -> None:
        self.missing_fields: Tuple[str, ...] = tuple(missing_fields)
        message = "missing required field"
        if self.missing_fields:
            message = f"{message}: {', '.join(self.missing_fields)}"
        super().__init__(message)
