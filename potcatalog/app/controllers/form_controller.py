"""Form Controller - collects pot input and submits it to the catalog."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Dict, Optional

import flet as ft

from potcatalog.app.ui.components.dialogs import build_notice_dialog, close_dialog, open_dialog
from potcatalog.app.ui.theme import (
    BG_CARD, BG_INPUT, BORDER_INPUT,
    BUTTON_PRIMARY_BG, BUTTON_PRIMARY_TEXT, BUTTON_TEXT_SIZE,
    CARD_PADDING, CARD_RADIUS, INPUT_RADIUS, INPUT_SIZE, LABEL_SIZE, SHADOW,
    TEXT_LABEL, TEXT_PLACEHOLDER,
)
from potcatalog.shared.core.configuration import TextConfig
from potcatalog.shared.domain.catalog import PotRecord, ValidationError

if TYPE_CHECKING:
    from potcatalog.app.state.app_state import AppState
    from potcatalog.app.state.form_state import FormState

logger = logging.getLogger(__name__)


class FormController:
    """Owns the pot form: buffers input, validates on submit, reports problems."""

    def __init__(
        self,
        app_state: AppState,
        form_state: FormState,
        page: ft.Page,
        text: Optional[TextConfig] = None,
    ):
        self.app_state = app_state
        self.form = form_state
        self.page = page
        self.text = text or TextConfig()
        self.notice_dialog: Optional[ft.AlertDialog] = None
        self._inputs: Dict[str, ft.TextField] = {}
        self._listening = False

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def update_field(self, field: str, value: str) -> None:
        """Replace the buffered value of ``field`` (name, location or flowers)."""
        self.form.update_field(field, value)

    async def submit(self) -> Optional[PotRecord]:
        """Send the buffered values to the catalog.

        On success the buffers are cleared and input focus is dismissed.
        On a missing name or location the buffers are kept and the user is
        prompted to fill them in.

        Returns:
            The created record, or None if the submission was rejected
        """
        name, location, flowers = self.form.values()
        try:
            record = await self.app_state.add_pot(name, location, flowers)
        except ValidationError as exc:
            logger.info(f"Pot submission rejected: {exc}")
            self.show_missing_fields_notice()
            return None

        logger.info(f"Pot '{record.name}' added with id {record.id}")
        self.form.clear()
        self.dismiss_focus()
        return record

    def show_missing_fields_notice(self) -> None:
        """Open the 'fill in name and location' prompt."""
        self.close_notice()

        def on_dismiss(e=None):
            # Late dismiss events from an older notice must not close a newer one
            if self.notice_dialog is dialog:
                self.close_notice()

        dialog = build_notice_dialog(
            self.text.missing_fields_title,
            self.text.missing_fields_message,
            self.text.dismiss_button,
            on_dismiss,
        )
        self.notice_dialog = dialog
        open_dialog(self.page, dialog)

    def close_notice(self) -> None:
        if self.notice_dialog is None:
            return
        close_dialog(self.page, self.notice_dialog)
        self.notice_dialog = None

    def dismiss_focus(self) -> None:
        """Drop keyboard focus from the form inputs.

        Flutter releases focus (and hides the soft keyboard) when a focused
        field is disabled, so each input is toggled off and back on.
        """
        if not self._inputs:
            return
        for text_field in self._inputs.values():
            text_field.disabled = True
        self._safe_update()
        for text_field in self._inputs.values():
            text_field.disabled = False
        self._safe_update()

    # =========================================================================
    # VIEW
    # =========================================================================

    def build_view(self) -> ft.Control:
        """Build the form card: three labelled inputs and the submit button."""
        fields = [
            ("name", self.text.name_label, self.text.name_hint),
            ("location", self.text.location_label, self.text.location_hint),
            ("flowers", self.text.flowers_label, self.text.flowers_hint),
        ]

        controls: list[ft.Control] = []
        for field, label, hint in fields:
            text_field = self._build_input(field, hint)
            self._inputs[field] = text_field
            controls.append(ft.Text(label, size=LABEL_SIZE, weight=ft.FontWeight.W_600, color=TEXT_LABEL))
            controls.append(text_field)

        # Enter on the last field submits, like the button
        self._inputs["flowers"].on_submit = lambda e: asyncio.create_task(self.submit())

        controls.append(
            ft.Container(
                content=ft.Text(
                    self.text.submit_button,
                    size=BUTTON_TEXT_SIZE,
                    weight=ft.FontWeight.BOLD,
                    color=BUTTON_PRIMARY_TEXT,
                ),
                bgcolor=BUTTON_PRIMARY_BG,
                border_radius=INPUT_RADIUS,
                padding=ft.Padding.symmetric(vertical=15),
                alignment=ft.Alignment(0, 0),
                on_click=lambda e: asyncio.create_task(self.submit()),
            )
        )

        self._bind_listeners()

        return ft.Container(
            bgcolor=BG_CARD,
            border_radius=CARD_RADIUS,
            padding=CARD_PADDING,
            shadow=ft.BoxShadow(blur_radius=4, offset=ft.Offset(0, 2), color=SHADOW),
            content=ft.Column(controls, spacing=5),
        )

    def _build_input(self, field: str, hint: str) -> ft.TextField:
        def on_change(e, field=field):
            self.update_field(field, e.control.value)

        return ft.TextField(
            value=self.form.get(field),
            hint_text=hint,
            hint_style=ft.TextStyle(color=TEXT_PLACEHOLDER),
            text_size=INPUT_SIZE,
            bgcolor=BG_INPUT,
            border_color=BORDER_INPUT,
            border_radius=INPUT_RADIUS,
            on_change=on_change,
        )

    def _bind_listeners(self) -> None:
        if self._listening:
            return
        self.form.name.listen(self._sync_inputs)
        self.form.location.listen(self._sync_inputs)
        self.form.flowers.listen(self._sync_inputs)
        self._listening = True

    def _sync_inputs(self) -> None:
        """Push buffer values back into the inputs (e.g. after clearing)."""
        changed = False
        for field, text_field in self._inputs.items():
            value = self.form.get(field)
            if text_field.value != value:
                text_field.value = value
                changed = True
        if changed:
            self._safe_update()

    def _safe_update(self) -> None:
        try:
            self.page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass
