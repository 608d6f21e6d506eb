#!/usr/bin/env python3
"""Diablo 4 Events - countdowns to the next World Boss, Legion Event and
Realm Walker.

Usage:
    python -m d4events.main [--frontend qt|tk|web] [-f SIZE] [-D]
    python d4events/main.py [--frontend qt|tk|web] [-f SIZE] [-D]
"""
import argparse
import logging
import math
import os
import sys
from pathlib import Path

# Allow running as a script (python d4events/main.py) in addition to
# running as a module (python -m d4events.main).
if not __package__:
    _parent = str(Path(__file__).resolve().parent.parent)
    if _parent not in sys.path:
        sys.path.insert(0, _parent)
    __package__ = "d4events"

from .board import Board, Ticker
from .core.log import setup_logging
from .core.settings import FRONTENDS, Settings

log = logging.getLogger(__name__)


def positive_float(text):
    """argparse type: a finite number greater than zero."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number: {text!r}")
    return value


def non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog='d4events',
        description='Countdown timers for periodic Diablo 4 events')
    parser.add_argument('-f', '--font-size', type=positive_float, default=None,
                        help='Set the font size (default 30)')
    parser.add_argument('-D', '--debug', action='store_true',
                        help='Turn on debug output')
    parser.add_argument('--frontend', choices=FRONTENDS, default=None,
                        help='Which front-end to show (default qt)')
    parser.add_argument('--threshold', type=non_negative_int, default=None,
                        help='Highlight events this many seconds away or closer (default 300)')
    parser.add_argument('--host', type=str, default=None,
                        help='Web front-end bind address (default 127.0.0.1)')
    parser.add_argument('--port', type=int, default=None,
                        help='Web front-end port (default 5000)')
    parser.add_argument('--config', type=str, default=None,
                        help='Settings file (default ~/.config/d4events/settings.json)')
    return parser


def resolve_options(args, settings: Settings) -> Settings:
    """Apply command-line overrides on top of the settings file."""
    if args.font_size is not None:
        settings.font_size = args.font_size
    if args.threshold is not None:
        settings.threshold = args.threshold
    if args.frontend is not None:
        settings.frontend = args.frontend
    if args.host is not None:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    return settings


def run_qt(board, settings) -> int:
    from PySide6.QtWidgets import QApplication
    from .ui.qt_window import CountdownWindow

    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle('Fusion')
    window = CountdownWindow(board, font_size=settings.font_size,
                             size=(settings.window_width, settings.window_height))
    window.show()
    return app.exec()


def run_tk(board, settings) -> int:
    from .ui.tk_window import CountdownWindow

    window = CountdownWindow(board, font_size=settings.font_size,
                             size=(settings.window_width, settings.window_height))
    window.mainloop()
    return window.exit_code


def _abort(exc):
    # Called from the ticker thread; Flask's server loop would otherwise
    # keep serving a frozen board.
    os._exit(1)


def run_web(board, settings) -> int:
    from .web import create_app

    board.refresh()
    ticker = Ticker(board, period=1.0, on_error=_abort)
    ticker.start()
    app = create_app(board, font_size=settings.font_size)
    log.info("Diablo 4 Events -> http://%s:%d", settings.host, settings.port)
    try:
        app.run(host=settings.host, port=settings.port)
    finally:
        ticker.stop()
    return 0


RUNNERS = {
    'qt': run_qt,
    'tk': run_tk,
    'web': run_web,
}


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    settings = resolve_options(args, Settings(args.config))
    log.debug("Settings: %s", settings.to_dict())

    board = Board(threshold=settings.threshold)
    runner = RUNNERS[settings.frontend]
    try:
        code = runner(board, settings)
    except ImportError as e:
        log.error("The %s front-end is unavailable: %s", settings.frontend, e)
        code = 1
    except Exception:
        log.exception("The %s front-end failed", settings.frontend)
        code = 1
    sys.exit(code)


if __name__ == '__main__':
    main()
