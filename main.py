#!/usr/bin/env python3
"""Diablo 4 Events - desktop countdown widget.

Shows the time left until the next World Boss, Legion Event and Realm
Walker, refreshed every second. Qt (PySide6) by default; tkinter and a
Flask browser page are also available.

Usage:
    python main.py [--frontend qt|tk|web] [-f SIZE] [-D]   # from project root
    python -m d4events.main [--frontend qt|tk|web] [-f SIZE] [-D]
"""
import sys
from pathlib import Path

# Ensure the project root (this file's directory) is on sys.path so that
# `import d4events` works regardless of how the script is invoked.
_root = str(Path(__file__).resolve().parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

from d4events.main import main


if __name__ == '__main__':
    main()
