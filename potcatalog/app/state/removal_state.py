"""Confirmation state machine for pot removal.

    Idle --request(id)--> ConfirmationPending --cancel()--> Idle
                                              --confirm()--> Idle (caller removes id)

Only one confirmation can be pending at a time; the modal prompt serializes
removal attempts.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from fletx.core import RxStr

logger = logging.getLogger(__name__)


class RemovalPhase(Enum):
    IDLE = "idle"
    CONFIRMATION_PENDING = "confirmation_pending"


class RemovalState:
    """Tracks the pot currently awaiting removal confirmation."""

    def __init__(self) -> None:
        # Empty string means Idle
        self.pending_id: RxStr = RxStr("")

    @property
    def phase(self) -> RemovalPhase:
        if self.pending_id.value:
            return RemovalPhase.CONFIRMATION_PENDING
        return RemovalPhase.IDLE

    @property
    def is_pending(self) -> bool:
        return self.phase is RemovalPhase.CONFIRMATION_PENDING

    def request(self, pot_id: str) -> bool:
        """Enter ConfirmationPending for ``pot_id`` (a catalog record id).

        Returns:
            False if another confirmation is already pending (request refused)
        """
        if self.is_pending:
            logger.debug(f"Removal request for {pot_id} refused; {self.pending_id.value} is pending")
            return False
        self.pending_id.value = pot_id
        return True

    def cancel(self) -> Optional[str]:
        """Return to Idle without removing anything.

        Returns:
            The id whose confirmation was cancelled, or None if already idle
        """
        return self._reset()

    def confirm(self) -> Optional[str]:
        """Return to Idle and hand back the id the caller must remove.

        Returns:
            The confirmed id, or None if nothing was pending
        """
        return self._reset()

    def _reset(self) -> Optional[str]:
        pot_id = self.pending_id.value
