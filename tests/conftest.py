"""Shared fixtures for the pot catalog test suite.

The Flet ``Page`` is replaced by a MagicMock with a real ``overlay`` list so
dialogs can be opened and closed without a running Flet session.
"""

from __future__ import annotations

import asyncio
import itertools
import os
import sys
from unittest.mock import MagicMock

import pytest

# Ensure project root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from potcatalog.app.state import AppState, FormState, RemovalState, Store  # noqa: E402
from potcatalog.shared.core.configuration import SystemConfig, TextConfig  # noqa: E402
from potcatalog.shared.core.event_bus import EventBus  # noqa: E402
from potcatalog.shared.domain.catalog import PotCatalogStore  # noqa: E402


async def drain_tasks(timeout: float = 2.0) -> None:
    """Let tasks spawned by Flet event handlers (``asyncio.create_task``) finish."""
    current = asyncio.current_task()
    for _ in range(10):
        pending = [task for task in asyncio.all_tasks() if task is not current and not task.done()]
        if not pending:
            return
        await asyncio.wait(pending, timeout=timeout)


# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------

@pytest.fixture
def sequential_ids():
    """Deterministic id factory: pot-1, pot-2, ..."""
    counter = itertools.count(1)
    return lambda: f"pot-{next(counter)}"


@pytest.fixture
def catalog(sequential_ids):
    return PotCatalogStore(id_factory=sequential_ids)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def app_state(event_bus, catalog):
    return AppState(event_bus, catalog)


@pytest.fixture
def form_state():
    return FormState()


@pytest.fixture
def removal_state():
    return RemovalState()


@pytest.fixture
def store(event_bus, catalog):
    return Store(event_bus, SystemConfig(), catalog)


# ---------------------------------------------------------------------------
# UI
# ---------------------------------------------------------------------------

@pytest.fixture
def page():
    """Stand-in for ft.Page."""
    mock_page = MagicMock(name="page")
    mock_page.overlay = []
    mock_page.views = []
    return mock_page


@pytest.fixture
def text():
    return TextConfig()


@pytest.fixture
def drain():
    return drain_tasks
