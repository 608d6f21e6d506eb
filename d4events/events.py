"""Periodic in-game event catalogue and countdown arithmetic.

Every tracked event repeats on a fixed interval counted from a known past
occurrence (its epoch). The time to the next occurrence is therefore a
single modulo away from the current unix time.
"""

import logging
import time
from enum import Enum

log = logging.getLogger(__name__)

# Seconds at or below which a countdown is highlighted
IMMINENT_THRESHOLD = 300


class EventType(Enum):
    """Tracked events: (label, epoch, every)."""

    WB = ('World Boss', 1708381800, 60 * 210)      # every 3.5 hours
    LE = ('Legion Event', 1708381200, 60 * 25)     # every 25 minutes
    RW = ('Realm Walker', 1728414300, 60 * 15)     # every 15 minutes

    def __init__(self, label, epoch, every):
        self.label = label
        self.epoch = epoch
        self.every = every

    @property
    def key(self) -> str:
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> 'EventType':
        """Look up an event by its short key ('wb', 'LE', ...)."""
        try:
            return cls[key.upper()]
        except KeyError:
            raise KeyError(f"Unknown event: {key!r}") from None


# Display order for every front-end
EVENT_ORDER = (EventType.WB, EventType.LE, EventType.RW)


def now() -> int:
    """Current unix time in whole seconds."""
    return int(time.time())


def calc_delta(ev: EventType, ts=None) -> int:
    """Seconds until the next occurrence of `ev`.

    `ts` is the unix timestamp to measure from and defaults to the current
    time. The result is always in the range (0, ev.every]; an event that is
    firing exactly now reports a full interval.
    """
    if ts is None:
        ts = now()
    ts = int(ts)
    if ts < ev.epoch:
        raise ValueError(
            f"Timestamp {ts} is before the {ev.label} epoch ({ev.epoch})")

    elapsed = (ts - ev.epoch) % ev.every
    delta = ev.every - elapsed

    log.debug("Got delta of: %d", delta)
    return delta


def get_hms(delta: int) -> str:
    """Format a number of seconds as a padded '  H:MM:SS  ' string."""
    if delta < 0:
        raise ValueError(f"Negative duration: {delta}")
    mins, seconds = divmod(int(delta), 60)
    hours, mins = divmod(mins, 60)
    return f"  {hours}:{mins:02}:{seconds:02}  "


def is_imminent(delta: int, threshold: int = IMMINENT_THRESHOLD) -> bool:
    return delta <= threshold
