"""Pot Catalog - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import flet as ft
from dotenv import load_dotenv

from potcatalog.app.state import Store
from potcatalog.app.ui.layouts.shell import build_shell
from potcatalog.shared.core import events
from potcatalog.shared.core.configuration import LoggingConfig, ValidationLevel, get_config
from potcatalog.shared.core.event_bus import EventBus

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig) -> Path:
    """Configure root logging.

    File handler logs at the configured level to ``<log_dir>/potcatalog.log``;
    the console only gets warnings and errors by default.

    Returns:
        The log file path
    """
    log_dir = Path(config.log_dir)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / "potcatalog.log"

    file_level = logging.getLevelName(config.level.upper())
    if not isinstance(file_level, int):
        file_level = logging.DEBUG
    console_level = logging.getLevelName(config.console_level.upper())
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(min(file_level, console_level))

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)

    return log_file_path


async def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    config = get_config(ValidationLevel.LENIENT)
    logger.info("Initializing Pot Catalog...")

    # Per-session bus and store
    event_bus = EventBus()
    store = Store(event_bus, config)
    await store.app.initialize()

    page.views.append(build_shell(page, store))
    await store.app.publish(events.TOPIC_LOGS_EVENT, events.create_logs_event("Pot catalog ready"))
    page.update()

    logger.info("Application initialized successfully")


def run() -> None:
    """Load .env, configure logging and start Flet in desktop or web mode."""
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

    config = get_config(ValidationLevel.LENIENT)
    log_file_path = configure_logging(config.logging)
    logger.info(f"Logging configured: file={log_file_path}, console={config.logging.console_level}+")

    ui = config.ui
    if ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {ui.flet_port}")
        renderer = ft.WebRenderer.AUTO if ui.flet_web_renderer.lower() == "auto" else ft.WebRenderer.CANVAS_KIT
        ft.run(
            main,
            view=ft.AppView.WEB_BROWSER,
            port=ui.flet_port,
            host="127.0.0.1",
            web_renderer=renderer,
        )
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
