"""Catalog domain models."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class PotRecord(BaseModel):
    """One catalogued pot.

    Records are immutable once created; the store replaces, never edits.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    id: str = Field(description="Opaque unique identifier assigned by the store")
    name: str = Field(min_length=1, description="Pot name")
    location: str = Field(min_length=1, description="Where the pot lives")
    flowers: Tuple[str, ...] = Field(default=(), description="Trimmed flower names, in entry order")

    @property
    def has_flowers(self) -> bool:
        return bool(self.flowers)
