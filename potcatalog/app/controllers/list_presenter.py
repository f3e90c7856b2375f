"""List Presenter - renders the catalog and guards removal behind a prompt."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, List, Optional

import flet as ft
from pydantic import BaseModel, ConfigDict

from potcatalog.app.ui.components.dialogs import build_confirm_dialog, close_dialog, open_dialog
from potcatalog.app.ui.theme import (
    BG_CARD, BORDER_CARD, BUTTON_DESTRUCTIVE,
    CARD_PADDING, CARD_RADIUS, EMPTY_TEXT_SIZE, POT_DETAIL_SIZE, POT_NAME_SIZE,
    TEXT_EMPTY, TEXT_POT_FLOWERS, TEXT_POT_LOCATION, TEXT_POT_NAME,
)
from potcatalog.shared.core import events
from potcatalog.shared.core.configuration import TextConfig
from potcatalog.shared.domain.catalog import PotRecord, format_flowers

if TYPE_CHECKING:
    from potcatalog.app.state.app_state import AppState
    from potcatalog.app.state.removal_state import RemovalState

logger = logging.getLogger(__name__)


class PotRow(BaseModel):
    """Display data for one catalog row."""
    model_config = ConfigDict(frozen=True)

    pot_id: str
    title: str
    location_line: str
    flowers_line: Optional[str] = None


class ListPresenter:
    """Maps catalog records to rows and runs the remove confirmation flow."""

    def __init__(
        self,
        app_state: AppState,
        removal_state: RemovalState,
        page: ft.Page,
        text: Optional[TextConfig] = None,
    ):
        self.app_state = app_state
        self.removal = removal_state
        self.page = page
        self.text = text or TextConfig()
        self.confirm_dialog: Optional[ft.AlertDialog] = None
        self._list_view: Optional[ft.ListView] = None

    # =========================================================================
    # ROW MAPPING
    # =========================================================================

    def to_row(self, record: PotRecord) -> PotRow:
        flowers_line = None
        if record.has_flowers:
            flowers_line = f"{self.text.flowers_prefix}{format_flowers(record.flowers)}"
        return PotRow(
            pot_id=record.id,
            title=record.name,
            location_line=f"{self.text.location_prefix}{record.location}",
            flowers_line=flowers_line,
        )

    def rows(self) -> List[PotRow]:
        """Rows for the current catalog snapshot, newest first."""
        return [self.to_row(record) for record in self.app_state.pots.value]

    @property
    def is_empty(self) -> bool:
        return not self.app_state.pots.value

    # =========================================================================
    # REMOVAL FLOW
    # =========================================================================

    async def request_removal(self, pot_id: str) -> bool:
        """Ask the user to confirm removing ``pot_id``.

        Returns:
            False if another confirmation is already open
        """
        if not self.removal.request(pot_id):
            return False

        await self.app_state.publish(
            events.TOPIC_REMOVAL_REQUESTED, events.create_removal_event(pot_id)
        )
        dialog = build_confirm_dialog(
            self.text.confirm_remove_title,
            self.text.confirm_remove_message,
            self.text.cancel_button,
            self.text.confirm_remove_button,
            on_cancel=lambda e: asyncio.create_task(self.cancel_removal()),
            on_confirm=lambda e: asyncio.create_task(self.confirm_removal()),
            on_dismiss=lambda e: asyncio.create_task(self.prompt_dismissed(dialog)),
        )
        self.confirm_dialog = dialog
        open_dialog(self.page, dialog)
        return True

    async def prompt_dismissed(self, dialog: ft.AlertDialog) -> None:
        """A prompt closed without an answer counts as cancelled.

        Dismiss events from a prompt that was already answered are ignored.
        """
        if dialog is not self.confirm_dialog:
            return
        await self.cancel_removal()

    async def cancel_removal(self) -> None:
        """Dismiss the prompt and leave the catalog untouched."""
        pot_id = self.removal.cancel()
        self._close_prompt()
        if pot_id is None:
            return
        logger.debug(f"Removal of {pot_id} cancelled")
        await self.app_state.publish(
            events.TOPIC_REMOVAL_CANCELLED, events.create_removal_event(pot_id)
        )

    async def confirm_removal(self) -> Optional[PotRecord]:
        """Dismiss the prompt and remove the pending pot.

        Returns:
            The removed record, or None if nothing was pending or the pot
            was already gone
        """
        pot_id = self.removal.confirm()
        self._close_prompt()
        if pot_id is None:
            return None
        return await self.app_state.remove_pot(pot_id)

    def _close_prompt(self) -> None:
        if self.confirm_dialog is None:
            return
        close_dialog(self.page, self.confirm_dialog)
        self.confirm_dialog = None

    # =========================================================================
    # VIEW
    # =========================================================================

    def build_view(self) -> ft.Control:
        """Build the scrollable pot list and keep it in sync with the catalog."""
        if self._list_view is None:
            self._list_view = ft.ListView(expand=True, spacing=10)
            self.app_state.pots.listen(self._sync)
        self._list_view.controls = self._build_rows()
        return self._list_view

    def _build_rows(self) -> List[ft.Control]:
        if self.is_empty:
            return [self._build_empty_state()]
        return [self._build_row(row) for row in self.rows()]

    def _build_empty_state(self) -> ft.Control:
        return ft.Container(
            margin=ft.Margin.only(top=30),
            content=ft.Text(
                self.text.empty_message,
                size=EMPTY_TEXT_SIZE,
                color=TEXT_EMPTY,
                text_align=ft.TextAlign.CENTER,
            ),
            alignment=ft.Alignment(0, 0),
        )

    def _build_row(self, row: PotRow) -> ft.Control:
        details: List[ft.Control] = [
            ft.Text(row.title, size=POT_NAME_SIZE, weight=ft.FontWeight.BOLD, color=TEXT_POT_NAME),
            ft.Text(row.location_line, size=POT_DETAIL_SIZE, color=TEXT_POT_LOCATION),
        ]
        if row.flowers_line:
            details.append(
                ft.Text(row.flowers_line, size=POT_DETAIL_SIZE, color=TEXT_POT_FLOWERS, italic=True)
            )

        def on_remove(e, pot_id=row.pot_id):
            asyncio.create_task(self.request_removal(pot_id))

        return ft.Container(
            bgcolor=BG_CARD,
            border_radius=CARD_RADIUS,
            border=ft.Border.all(1, BORDER_CARD),
            padding=CARD_PADDING,
            content=ft.Row(
                [
                    ft.Column(details, spacing=4, expand=True),
                    ft.TextButton(
                        self.text.remove_button,
                        on_click=on_remove,
                        style=ft.ButtonStyle(color=BUTTON_DESTRUCTIVE),
                    ),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )

    def _sync(self) -> None:
        if self._list_view is None:
            return
        self._list_view.controls = self._build_rows()
        try:
            self.page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass
