"""User-facing settings - read from ~/.config/d4events/settings.json.

The file is optional and never written by the widget. Command-line options
override anything set here.
"""

import json
import logging
import math
from pathlib import Path

log = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / '.config' / 'd4events' / 'settings.json'

FRONTENDS = ('qt', 'tk', 'web')

DEFAULTS = {
    'font_size': 30.0,
    'threshold': 300,          # seconds; rows at or below this are highlighted
    'frontend': 'qt',
    'host': '127.0.0.1',       # web front-end bind address
    'port': 5000,
    'window_width': 340,
    'window_height': 140,
}


class Settings:
    def __init__(self, path=None):
        self.path = Path(path) if path else CONFIG_PATH
        self.font_size: float = DEFAULTS['font_size']
        self.threshold: int = DEFAULTS['threshold']
        self.frontend: str = DEFAULTS['frontend']
        self.host: str = DEFAULTS['host']
        self.port: int = DEFAULTS['port']
        self.window_width: int = DEFAULTS['window_width']
        self.window_height: int = DEFAULTS['window_height']
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            with open(self.path) as f:
                d = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return
        if not isinstance(d, dict):
            log.warning("Ignoring settings file %s: not a JSON object", self.path)
            return

        self.font_size = self._get(d, 'font_size', float,
                                   lambda v: math.isfinite(v) and v > 0)
        self.threshold = self._get(d, 'threshold', int, lambda v: v >= 0)
        self.host = self._get(d, 'host', str)
        self.port = self._get(d, 'port', int)
        self.window_width = self._get(d, 'window_width', int)
        self.window_height = self._get(d, 'window_height', int)
        frontend = self._get(d, 'frontend', str)
        if frontend in FRONTENDS:
            self.frontend = frontend
        else:
            log.warning("Unknown frontend %r in settings, using %r",
                        frontend, self.frontend)

    def _get(self, d, key, conv, check=None):
        """Convert d[key], falling back to the current value on bad input.

        JSON booleans and null never count as numbers or strings.
        """
        current = getattr(self, key)
        if key not in d:
            return current
        value = d[key]
        if conv is str:
            ok = isinstance(value, str)
        elif conv is int:
            ok = isinstance(value, int) and not isinstance(value, bool)
        else:
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        if ok:
            value = conv(value)
            ok = check is None or check(value)
        if not ok:
            log.warning("Bad value for %r in settings: %r", key, d[key])
            return current
        return value

    def to_dict(self) -> dict:
        return {key: getattr(self, key) for key in DEFAULTS}
