"""
cli_entry.py - CLI Entry Point

Usage:
  -d DIRECTORY   Rename every file in the directory
  -f FILE        Rename one file

The outcome is reported through a notifier: a PySide6 message box by
default, or the console with --no-dialog.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from core import RenameOptions, RenamerError, rename_directory, rename_file

logger = logging.getLogger(__name__)

# notifier(text, is_error)
Notifier = Callable[[str, bool], None]

ARG_ERROR = (
    "You must first specify one of the flags:\n"
    "    -d - rename every file in the given folder.\n"
    "    -f - rename the single given file.\n\n"
    "Then pass the matching path to the file or folder."
)
PATH_ERROR = "The specified path does not exist!"
DIR_SUCCESS = "Files renamed successfully!"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class UsageError(Exception):
    """Raised instead of letting argparse print and exit"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = _Parser(
        prog="dir-renamer",
        description="Rename files to <n>_<folder name> inside their folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rename every file in a folder
  python main.py -d "./My Photos"

  # Rename one file, report errors on the console
  python main.py -f "./My Photos/IMG_0001.jpg" --no-dialog
"""
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-d", dest="directory", metavar="DIRECTORY", help="Rename all files in the folder")
    mode.add_argument("-f", dest="file", metavar="FILE", help="Rename the single file")

    parser.add_argument("--no-dialog", action="store_true", help="Report to the console instead of a message box")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--log-dir", type=str, default=None, help="Write a JSON log of the renamed files here")

    return parser


def console_notifier(text: str, is_error: bool) -> None:
    """Print a notification instead of showing a dialog"""
    stream = sys.stderr if is_error else sys.stdout
    print(text, file=stream)


def dialog_notifier(text: str, is_error: bool) -> None:
    """Show a notification in a message box"""
    from gui import show_message
    show_message(text, is_error)


def _wants_console(argv: List[str]) -> bool:
    """Read --no-dialog the way the full parser will, even if the rest is invalid"""
    pre = _Parser(add_help=False)
    pre.add_argument("-d", nargs="?")
    pre.add_argument("-f", nargs="?")
    pre.add_argument("--no-dialog", action="store_true")
    try:
        known, _ = pre.parse_known_args(argv)
    except UsageError:
        return False
    return known.no_dialog


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def cmd_directory(directory: Path, options: RenameOptions, notify: Notifier) -> int:
    """Handle -d"""
    try:
        result = rename_directory(directory, options)
    except (RenamerError, OSError) as e:
        notify(f"Error:\n{e}", True)
        return EXIT_FAILURE

    logger.info(result.summary())
    notify(DIR_SUCCESS, False)
    return EXIT_OK


def cmd_file(file: Path, options: RenameOptions, notify: Notifier) -> int:
    """Handle -f; success stays silent so scripted runs do not pop a dialog per file"""
    try:
        result = rename_file(file, options)
    except (RenamerError, OSError) as e:
        notify(f"Error:\n{e}", True)
        return EXIT_FAILURE

    logger.info(result.summary())
    return EXIT_OK


def main(argv: Optional[List[str]] = None, notifier: Optional[Notifier] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    if notifier is None:
        notifier = console_notifier if _wants_console(argv) else dialog_notifier

    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        logger.debug("Invalid arguments: %s", e)
        notifier(ARG_ERROR, True)
        return EXIT_USAGE

    setup_logging(args.verbose)

    raw_path = args.directory if args.directory is not None else args.file
    if not raw_path:
        notifier(ARG_ERROR, True)
        return EXIT_USAGE

    options = RenameOptions()
    if args.log_dir:
        options.log_dir = Path(args.log_dir)

    path = Path(os.path.abspath(raw_path))
    if args.directory is not None and path.is_dir():
        return cmd_directory(path, options, notifier)
    if args.file is not None and path.is_file():
        return cmd_file(path, options, notifier)

    notifier(PATH_ERROR, False)
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
