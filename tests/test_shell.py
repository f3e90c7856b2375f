"""Tests for the catalog screen layout."""

from __future__ import annotations

from unittest.mock import MagicMock

import flet as ft
import pytest

from potcatalog.app.ui.layouts.shell import build_shell


def _parts(view):
    """Return (gesture detector, column) of the shell view."""
    gesture = view.controls[0].content
    column = gesture.content.content
    return gesture, column


def _inputs(form_card):
    return [control for control in form_card.content.controls if isinstance(control, ft.TextField)]


def test_build_shell_lays_out_screen(page, store):
    view = build_shell(page, store)

    assert isinstance(view, ft.View)
    assert page.title == store.config.text.title

    gesture, column = _parts(view)
    assert isinstance(gesture, ft.GestureDetector)

    title, form_card, status, pot_list = column.controls
    assert title.value == store.config.text.title
    assert len(_inputs(form_card)) == 3
    assert status.value == store.app.status_text.value
    assert isinstance(pot_list, ft.ListView)
    assert pot_list.controls[0].content.value == store.config.text.empty_message


def test_tap_outside_inputs_dismisses_focus(page, store):
    view = build_shell(page, store)
    gesture, column = _parts(view)
    inputs = _inputs(column.controls[1])
    page.update.reset_mock()

    gesture.on_tap(MagicMock())

    assert page.update.call_count == 2
    assert all(not text_field.disabled for text_field in inputs)


@pytest.mark.asyncio
async def test_shell_submit_flow(page, store, drain):
    await store.app.initialize()
    view = build_shell(page, store)
    _, column = _parts(view)
    form_card = column.controls[1]
    name, location, flowers = _inputs(form_card)

    for text_field, value in ((name, "Orquídea"), (location, "Varanda"), (flowers, "Orquídea")):
        event = MagicMock()
        event.control.value = value
        text_field.on_change(event)
    form_card.content.controls[-1].on_click(MagicMock())
    await drain()

    assert [pot.name for pot in store.app.pots.value] == ["Orquídea"]
    assert store.app.status_text.value == "1 pot catalogued"
