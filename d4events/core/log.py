"""stderr logging for the widget.

Lines look like:
    2024-10-08T19:05:00+02:00 - DEBUG - events.py:71 d4events.events - Got delta of: 512
"""

import logging
import sys
from datetime import datetime

FORMAT = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d %(name)s - %(message)s'


class _LocalIsoFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        return datetime.fromtimestamp(record.created).astimezone().isoformat(
            timespec='seconds')


def setup_logging(debug=False, stream=None):
    """Install the stderr handler on the root logger (DEBUG or INFO)."""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_LocalIsoFormatter(FORMAT))

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    # werkzeug request lines are noise unless debugging
    logging.getLogger('werkzeug').setLevel(
        logging.DEBUG if debug else logging.WARNING)
    return handler
