"""
gui - PySide6 notifications for Directory Renamer
"""

from .gui_notify import show_message

__all__ = ["show_message"]
