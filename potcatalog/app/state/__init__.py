"""FletXr Reactive State Management.

Architecture:
- AppState: Catalog snapshot, status line and logs
- FormState: The three pot form input buffers
- RemovalState: Idle / ConfirmationPending machine for pot removal
- Store: Service locator for accessing state from any component
"""

from .app_state import AppState
from .form_state import FORM_FIELDS, FormState
from .removal_state import RemovalPhase, RemovalState
from .store import Store

__all__ = [
    "AppState",
    "FORM_FIELDS",
    "FormState",
    "RemovalPhase",
    "RemovalState",
    "Store",
]
