from __future__ import annotations

import flet as ft

from potcatalog.app.controllers.form_controller import FormController
from potcatalog.app.controllers.list_presenter import ListPresenter
from potcatalog.app.state import Store
from potcatalog.app.ui.theme import (
    BG_SCREEN, BLUE_PRIMARY,
    SCREEN_PADDING, TITLE_SIZE,
    TEXT_STATUS, TEXT_TITLE,
    get_log_color,
)


def apply_shell_theme(page: ft.Page, store: Store) -> None:
    """Apply the light catalog theme and the desktop window size."""
    ui = store.config.ui
    page.title = store.config.text.title
    page.theme = ft.Theme(
        color_scheme_seed=ui.primary_color or BLUE_PRIMARY,
    )
    page.theme_mode = ft.ThemeMode.DARK if ui.theme_mode == "dark" else ft.ThemeMode.LIGHT
    page.bgcolor = BG_SCREEN
    page.padding = 0
    page.window.width = ui.window_width
    page.window.height = ui.window_height


def build_shell(page: ft.Page, store: Store) -> ft.View:
    """Build the single catalog screen: title, form card, status line, pot list."""
    apply_shell_theme(page, store)
    text = store.config.text

    form_controller = FormController(store.app, store.form, page, text)
    list_presenter = ListPresenter(store.app, store.removal, page, text)

    status_text = ft.Text(store.app.status_text.value, color=TEXT_STATUS, size=12)

    def _sync_status() -> None:
        status_text.value = store.app.status_text.value
        logs = store.app.logs.value
        status_text.color = get_log_color(logs[-1].get("level", "info")) if logs else TEXT_STATUS
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    # --- Listener Bindings ---
    store.app.status_text.listen(_sync_status)
    store.app.logs.listen(_sync_status)

    content = ft.Container(
        expand=True,
        padding=SCREEN_PADDING,
        content=ft.Column(
            [
                ft.Text(
                    text.title,
                    size=TITLE_SIZE,
                    weight=ft.FontWeight.BOLD,
                    color=TEXT_TITLE,
                    text_align=ft.TextAlign.CENTER,
                ),
                form_controller.build_view(),
                status_text,
                list_presenter.build_view(),
            ],
            spacing=20,
            expand=True,
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        ),
    )

    # Tapping anywhere outside the inputs drops keyboard focus
    chrome = ft.GestureDetector(
        content=content,
        expand=True,
        on_tap=lambda e: form_controller.dismiss_focus(),
    )

    return ft.View(
        route="/",
        controls=[ft.SafeArea(content=chrome, expand=True)],
        bgcolor=BG_SCREEN,
        padding=0,
    )
