"""
cli - Command Line Interface for Directory Renamer
"""

from .cli_entry import main

__all__ = ["main"]
