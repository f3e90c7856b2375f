from .dialogs import build_confirm_dialog, build_notice_dialog, close_dialog, open_dialog

__all__ = ["build_confirm_dialog", "build_notice_dialog", "close_dialog", "open_dialog"]
