"""Tests for the ListPresenter row mapping and removal confirmation flow."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from potcatalog.app.controllers.list_presenter import ListPresenter, PotRow
from potcatalog.app.state import RemovalPhase
from potcatalog.shared.core import events


@pytest.fixture
def presenter(app_state, removal_state, page, text):
    return ListPresenter(app_state, removal_state, page, text)


# ---------------------------------------------------------------------------
# Row mapping
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_rows_map_records_newest_first(presenter, app_state):
    first = await app_state.add_pot("Vaso 1", "Sala", "Rosa, Lírio")
    second = await app_state.add_pot("Vaso 2", "Varanda", "")

    assert presenter.rows() == [
        PotRow(pot_id=second.id, title="Vaso 2", location_line="Location: Varanda", flowers_line=None),
        PotRow(
            pot_id=first.id,
            title="Vaso 1",
            location_line="Location: Sala",
            flowers_line="Flowers: Rosa, Lírio",
        ),
    ]


def test_empty_catalog_shows_placeholder(presenter, text):
    assert presenter.is_empty

    view = presenter.build_view()

    assert len(view.controls) == 1
    assert view.controls[0].content.value == text.empty_message


@pytest.mark.asyncio
async def test_build_view_renders_one_row_per_pot(presenter, app_state):
    await app_state.add_pot("Vaso 1", "Sala")
    await app_state.add_pot("Vaso 2", "Sala")

    view = presenter.build_view()

    assert not presenter.is_empty
    assert len(view.controls) == 2


# ---------------------------------------------------------------------------
# Removal confirmation
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_cancel_leaves_catalog_unchanged(presenter, app_state, removal_state, event_bus, page):
    cancelled = []

    async def on_cancelled(payload):
        cancelled.append(payload["id"])

    await event_bus.subscribe(events.TOPIC_REMOVAL_CANCELLED, on_cancelled)
    record = await app_state.add_pot("Vaso 1", "Sala")

    assert await presenter.request_removal(record.id)
    assert removal_state.phase is RemovalPhase.CONFIRMATION_PENDING
    dialog = presenter.confirm_dialog
    assert dialog.open is True and dialog in page.overlay

    await presenter.cancel_removal()
    await event_bus.wait_until_idle()

    assert removal_state.phase is RemovalPhase.IDLE
    assert list(app_state.pots.value) == [record]
    assert dialog.open is False
    assert page.overlay == []
    assert cancelled == [record.id]


@pytest.mark.asyncio
async def test_confirm_removes_exactly_that_pot(presenter, app_state, removal_state):
    keep = await app_state.add_pot("Vaso 1", "Sala")
    drop = await app_state.add_pot("Vaso 2", "Sala")

    await presenter.request_removal(drop.id)
    removed = await presenter.confirm_removal()

    assert removed == drop
    assert list(app_state.pots.value) == [keep]
    assert removal_state.phase is RemovalPhase.IDLE
    assert presenter.confirm_dialog is None


@pytest.mark.asyncio
async def test_only_one_confirmation_at_a_time(presenter, app_state, page):
    first = await app_state.add_pot("Vaso 1", "Sala")
    second = await app_state.add_pot("Vaso 2", "Sala")

    assert await presenter.request_removal(first.id)
    dialog = presenter.confirm_dialog
    assert not await presenter.request_removal(second.id)

    assert presenter.confirm_dialog is dialog
    assert page.overlay == [dialog]


@pytest.mark.asyncio
async def test_confirm_while_idle_is_noop(presenter, app_state):
    await app_state.add_pot("Vaso 1", "Sala")

    assert await presenter.confirm_removal() is None
    assert len(app_state.catalog) == 1


@pytest.mark.asyncio
async def test_confirm_for_already_removed_pot_is_noop(presenter, app_state):
    record = await app_state.add_pot("Vaso 1", "Sala")
    await presenter.request_removal(record.id)
    await app_state.remove_pot(record.id)

    assert await presenter.confirm_removal() is None
    assert list(app_state.pots.value) == []


@pytest.mark.asyncio
async def test_confirm_dialog_uses_configured_labels(presenter, app_state, text):
    record = await app_state.add_pot("Vaso 1", "Sala")

    await presenter.request_removal(record.id)

    dialog = presenter.confirm_dialog
    assert dialog.title.value == text.confirm_remove_title
    assert dialog.content.value == text.confirm_remove_message


@pytest.mark.asyncio
async def test_dismissed_prompt_returns_to_idle(presenter, app_state, removal_state, page, drain):
    first = await app_state.add_pot("Vaso 1", "Sala")
    second = await app_state.add_pot("Vaso 2", "Sala")

    await presenter.request_removal(first.id)
    # Back button / Escape closes the dialog without pressing an action
    presenter.confirm_dialog.on_dismiss(MagicMock())
    await drain()

    assert removal_state.phase is RemovalPhase.IDLE
    assert page.overlay == []
    assert len(app_state.catalog) == 2
    assert await presenter.request_removal(second.id)
    assert removal_state.pending_id.value == second.id


@pytest.mark.asyncio
async def test_late_dismiss_of_answered_prompt_is_ignored(presenter, app_state, removal_state, page, drain):
    first = await app_state.add_pot("Vaso 1", "Sala")
    second = await app_state.add_pot("Vaso 2", "Sala")

    await presenter.request_removal(first.id)
    answered = presenter.confirm_dialog
    await presenter.confirm_removal()
    await presenter.request_removal(second.id)

    answered.on_dismiss(MagicMock())
    await drain()

    assert removal_state.pending_id.value == second.id
    assert page.overlay == [presenter.confirm_dialog]
    assert len(dialog.actions) == 2


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_add_remove_back_to_placeholder(presenter, app_state, form_state, page, text):
    from potcatalog.app.controllers.form_controller import FormController

    form = FormController(app_state, form_state, page, text)
    form.update_field("name", "Orquídea")
    form.update_field("location", "Varanda")
    form.update_field("flowers", "Orquídea")

    record = await form.submit()

    assert [(r.name, r.location, list(r.flowers)) for r in app_state.pots.value] == [
        ("Orquídea", "Varanda", ["Orquídea"]),
    ]

    await presenter.request_removal(record.id)
    await presenter.confirm_removal()

    assert list(app_state.pots.value) == []
    view = presenter.build_view()
    assert view.controls[0].content.value == text.empty_message


# ---------------------------------------------------------------------------
# Row and prompt buttons
# ---------------------------------------------------------------------------

def _remove_button(row):
    return row.content.controls[1]


@pytest.mark.asyncio
async def test_remove_button_opens_prompt_for_its_row(presenter, app_state, removal_state, page, drain):
    older = await app_state.add_pot("Vaso 1", "Sala")
    newer = await app_state.add_pot("Vaso 2", "Sala")
    view = presenter.build_view()

    button = _remove_button(view.controls[1])
    button.on_click(MagicMock())
    await drain()

    assert removal_state.pending_id.value == older.id
    assert presenter.confirm_dialog in page.overlay
    assert presenter.confirm_dialog.open is True
    assert len(app_state.catalog) == 2
    assert newer in app_state.pots.value


@pytest.mark.asyncio
async def test_prompt_yes_button_removes_the_pot(presenter, app_state, removal_state, page, text, drain):
    record = await app_state.add_pot("Vaso 1", "Sala")
    view = presenter.build_view()

    _remove_button(view.controls[0]).on_click(MagicMock())
    await drain()
    cancel_button, confirm_button = presenter.confirm_dialog.actions
    confirm_button.on_click(MagicMock())
    await drain()

    assert record not in app_state.pots.value
    assert removal_state.phase is RemovalPhase.IDLE
    assert page.overlay == []
    assert presenter.build_view().controls[0].content.value == text.empty_message


@pytest.mark.asyncio
async def test_prompt_cancel_button_keeps_the_pot(presenter, app_state, removal_state, page, drain):
    record = await app_state.add_pot("Vaso 1", "Sala")
    view = presenter.build_view()

    _remove_button(view.controls[0]).on_click(MagicMock())
    await drain()
    cancel_button, confirm_button = presenter.confirm_dialog.actions
    cancel_button.on_click(MagicMock())
    await drain()

    assert list(app_state.pots.value) == [record]
    assert removal_state.phase is RemovalPhase.IDLE
    assert page.overlay == []
