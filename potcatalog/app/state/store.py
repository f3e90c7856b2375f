"""Session State Store.

Groups the reactive state of one Flet session. Each session (one desktop
window, or one browser tab in web mode) builds its own ``Store`` in
``main`` and hands it to the shell; controllers keep the references they
are given, so sessions never share catalog or form state.
"""

from __future__ import annotations

from typing import Optional

from potcatalog.shared.core.configuration import SystemConfig
from potcatalog.shared.core.event_bus import EventBus
from potcatalog.shared.domain.catalog import PotCatalogStore

from .app_state import AppState
from .form_state import FormState
from .removal_state import RemovalState


class Store:
    """State store for one catalog session.

    Usage:
        store = Store(event_bus, config)
        await store.app.initialize()
        page.views.append(build_shell(page, store))
    """

    def __init__(
        self,
        event_bus: EventBus,
        config: Optional[SystemConfig] = None,
        catalog: Optional[PotCatalogStore] = None,
    ) -> None:
        self.config = config or SystemConfig()
        self.app = AppState(event_bus, catalog)
        self.form = FormState()
        self.removal = RemovalState()
