#!/usr/bin/env python3
"""
Directory Renamer - Main Entry

Usage:
    python main.py -d ./dir              # Rename every file in ./dir
    python main.py -f ./dir/file.txt     # Rename one file
    python main.py -d ./dir --no-dialog  # Report on the console
"""

import sys

from cli import main


if __name__ == "__main__":
    sys.exit(main())
