"""Form input buffers."""

from __future__ import annotations

from typing import Dict, Tuple

from fletx.core import RxStr

FORM_FIELDS: Tuple[str, ...] = ("name", "location", "flowers")


class FormState:
    """Reactive buffers for the three pot form fields.

    Buffers hold raw text exactly as typed; trimming and validation happen
    in the catalog store on submit.
    """

    def __init__(self) -> None:
        self.name: RxStr = RxStr("")
        self.location: RxStr = RxStr("")
        self.flowers: RxStr = RxStr("")

    def _field(self, field: str) -> RxStr:
        if field not in FORM_FIELDS:
            raise KeyError(f"Unknown form field: {field!r}")
        return getattr(self, field)

    def update_field(self, field: str, value: str) -> None:
        """Replace the buffered value for ``field``. No validation."""
        self._field(field).value = value or ""

    def get(self, field: str) -> str:
        return self._field(field).value

    def values(self) -> Tuple[str, str, str]:
        """Current buffers as ``(name, location, flowers)``."""
        return self.name.value, self.location.value, self.flowers.value

    def as_dict(self) -> Dict[str, str]:
        return dict(zip(FORM_FIELDS, self.values()))

    def clear(self) -> None:
        """Reset every buffer to empty."""
        for field in FORM_FIELDS:
            self._field(field).value = ""

    @property
    def is_blank(self) -> bool:
        return not any(value for value in self.values())
