"""
gui_notify.py - Message Box Notifications

Shows the result of a run in a PySide6 message box
"""

import sys
from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

APP_TITLE = "Renamer"

_app: Optional[QApplication] = None


def _ensure_app() -> QApplication:
    """QMessageBox needs a QApplication; reuse the running one if any"""
    global _app
    app = QApplication.instance()
    if app is None:
        _app = QApplication(sys.argv[:1])
        _app.setApplicationName(APP_TITLE)
        app = _app
    return app


def show_message(text: str, is_error: bool = False) -> None:
    """
    Show a modal message box

    Args:
        text: Message
        is_error: Use the error icon
    """
    _ensure_app()
    if is_error:
        QMessageBox.critical(None, APP_TITLE, text)
    else:
        QMessageBox.information(None, APP_TITLE, text)
