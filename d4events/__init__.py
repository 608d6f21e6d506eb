"""Countdown timers for periodic Diablo 4 events.

Public surface:
  EventType, EVENT_ORDER          – the tracked events
  calc_delta, get_hms, is_imminent – countdown arithmetic and formatting
  Board, Countdown, Ticker        – shared display state for the front-ends
"""

from .events import (
    EventType, EVENT_ORDER, IMMINENT_THRESHOLD,
    calc_delta, get_hms, is_imminent, now,
)
from .board import Board, Countdown, Ticker

__version__ = '0.1.0'

__all__ = [
    "EventType", "EVENT_ORDER", "IMMINENT_THRESHOLD",
    "calc_delta", "get_hms", "is_imminent", "now",
    "Board", "Countdown", "Ticker",
]
