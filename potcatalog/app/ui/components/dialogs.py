"""Modal prompt primitives: single-action notices and two-option confirmations."""

from __future__ import annotations

from typing import Any, Callable, Optional

import flet as ft

from potcatalog.app.ui.theme import BUTTON_DESTRUCTIVE, TEXT_BODY, TEXT_DARK

DialogCallback = Callable[..., Any]


def open_dialog(page: ft.Page, dialog: ft.AlertDialog) -> None:
    """Attach ``dialog`` to the page overlay and show it."""
    if dialog not in page.overlay:
        page.overlay.append(dialog)
    dialog.open = True
    page.update()


def close_dialog(page: ft.Page, dialog: ft.AlertDialog) -> None:
    """Hide ``dialog`` and drop it from the overlay."""
    dialog.open = False
    if dialog in page.overlay:
        page.overlay.remove(dialog)
    page.update()


def build_notice_dialog(
    title: str,
    message: str,
    button_label: str,
    on_dismiss: DialogCallback,
) -> ft.AlertDialog:
    """Build a modal notice with a single dismiss action.

    ``on_dismiss`` also runs when the platform closes the dialog (back
    button, Escape).
    """
    return ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight=ft.FontWeight.W_700, color=TEXT_DARK),
        content=ft.Text(message, color=TEXT_BODY),
        actions=[ft.TextButton(button_label, on_click=on_dismiss)],
        actions_alignment=ft.MainAxisAlignment.END,
        on_dismiss=on_dismiss,
    )


def build_confirm_dialog(
    title: str,
    message: str,
    cancel_label: str,
    confirm_label: str,
    on_cancel: DialogCallback,
    on_confirm: DialogCallback,
    on_dismiss: Optional[DialogCallback] = None,
) -> ft.AlertDialog:
    """Build a modal two-option prompt; the confirm action is styled destructive.

    A dialog closed without pressing either action runs ``on_dismiss``,
    falling back to ``on_cancel``.
    """
    return ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight=ft.FontWeight.W_700, color=TEXT_DARK),
        content=ft.Text(message, color=TEXT_BODY),
        actions=[
            ft.TextButton(cancel_label, on_click=on_cancel),
            ft.TextButton(
                confirm_label,
                on_click=on_confirm,
                style=ft.ButtonStyle(color=BUTTON_DESTRUCTIVE),
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        on_dismiss=on_dismiss or on_cancel,
    )
