"""Pot Catalog Store.

Holds the in-memory catalog of pots and exposes the only two mutations the
application performs: ``add`` (prepend) and ``remove`` (delete by id).

The store is synchronous and UI-agnostic. Reactive state and event
notifications are layered on top by ``potcatalog.app.state.AppState``.
"""

from __future__ import annotations

import itertools
import logging
import time
from typing import Callable, Iterator, List, Optional, Tuple

from .errors import ValidationError
from .models import PotRecord
from .parsing import missing_required, parse_flowers

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def timestamp_id_factory() -> IdFactory:
    """Build an id factory producing ``<epoch-millis>-<sequence>`` ids.

    The sequence suffix keeps ids unique when several pots are added within
    the same millisecond.
    """
    sequence = itertools.count(1)

    def _next_id() -> str:
        return f"{int(time.time() * 1000)}-{next(sequence)}"

    return _next_id


class PotCatalogStore:
    """Ordered, newest-first catalog of pot records."""

    def __init__(self, id_factory: Optional[IdFactory] = None) -> None:
        self._records: List[PotRecord] = []
        self._next_id: IdFactory = id_factory or timestamp_id_factory()

    def add(self, name: str, location: str, flowers_raw: Optional[str] = "") -> PotRecord:
        """Validate the input, create a record and prepend it to the catalog.

        Args:
            name: Pot name, required
            location: Pot location, required
            flowers_raw: Comma-separated flower names, optional

        Returns:
            The newly created record

        Raises:
            ValidationError: If name or location is empty after trimming.
                The catalog is left untouched.
        """
        missing = missing_required(name=name, location=location)
        if missing:
            raise ValidationError(missing)

        pot_id = self._next_id()
        if self.get(pot_id) is not None:
            raise RuntimeError(f"Id factory produced a duplicate id: {pot_id}")

        record = PotRecord(
            id=pot_id,
            name=name.strip(),
            location=location.strip(),
            flowers=parse_flowers(flowers_raw),
        )
        self._records.insert(0, record)
        logger.debug(f"Added pot {record.id} ({record.name!r}); catalog size={len(self._records)}")
        return record

    def remove(self, pot_id: str) -> Optional[PotRecord]:
        """Remove the record with ``pot_id``.

        Removing an unknown id is a no-op.

        Returns:
            The removed record, or None when nothing matched
        """
        for index, record in enumerate(self._records):
            if record.id == pot_id:
                del self._records[index]
                logger.debug(f"Removed pot {pot_id}; catalog size={len(self._records)}")
                return record
        logger.debug(f"Remove ignored, no pot with id {pot_id}")
        return None

    def list(self) -> Tuple[PotRecord, ...]:
        """Snapshot of the catalog, newest first."""
        return tuple(self._records)

    def get(self, pot_id: str) -> Optional[PotRecord]:
        for record in self._records:
            if record.id == pot_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, pot_id: object) -> bool:
        return any(record.id == pot_id for record in self._records)

    def __iter__(self) -> Iterator[PotRecord]:
        return iter(self.list())
