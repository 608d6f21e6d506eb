"""Countdown board - the state every front-end renders.

One refresh reads the clock once and recomputes every row, then notifies
listeners (observer pattern, same as the arranger's AppState). The web
front-end drives refreshes from a Ticker thread; the Qt and Tk windows use
their own toolkit timers instead.
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from .events import (
    EVENT_ORDER, IMMINENT_THRESHOLD, EventType,
    calc_delta, get_hms, is_imminent, now,
)

log = logging.getLogger(__name__)

# Row colours, shared by the Qt / Tk / web front-ends
COLOR_NORMAL = '#a0a0a0'     # gray
COLOR_IMMINENT = '#ff7f7f'   # light red
COLOR_TEXT = '#000000'


@dataclass
class Countdown:
    event: EventType
    delta: int
    text: str
    imminent: bool

    @property
    def background(self) -> str:
        return COLOR_IMMINENT if self.imminent else COLOR_NORMAL

    def to_dict(self) -> dict:
        return {
            'key': self.event.key,
            'label': self.event.label,
            'delta': self.delta,
            'text': self.text,
            'imminent': self.imminent,
        }


class Board:
    """Current countdowns for a fixed set of events."""

    def __init__(self, threshold: int = IMMINENT_THRESHOLD,
                 events=EVENT_ORDER):
        self.threshold = threshold
        self.events: tuple[EventType, ...] = tuple(events)
        self.timestamp: Optional[int] = None
        self._rows: list[Countdown] = []
        self._lock = threading.Lock()
        self._listeners: list[Callable] = []

    @property
    def rows(self) -> list[Countdown]:
        with self._lock:
            return list(self._rows)

    def subscribe(self, callback: Callable):
        self._listeners.append(callback)

    def notify(self):
        for cb in self._listeners:
            cb(self)

    def refresh(self, ts=None) -> list[Countdown]:
        """Recompute every row against one timestamp and notify listeners."""
        if ts is None:
            ts = now()
        rows = []
        for ev in self.events:
            delta = calc_delta(ev, ts)
            rows.append(Countdown(ev, delta, get_hms(delta),
                                  is_imminent(delta, self.threshold)))
        with self._lock:
            self._rows = rows
            self.timestamp = ts
        self.notify()
        return list(rows)

    def row(self, ev: EventType) -> Optional[Countdown]:
        for r in self.rows:
            if r.event is ev:
                return r
        return None

    def to_dict(self) -> dict:
        with self._lock:
            rows = list(self._rows)
            ts = self.timestamp
        return {
            'timestamp': ts,
            'threshold': self.threshold,
            'events': [r.to_dict() for r in rows],
        }


class Ticker:
    """Background thread that refreshes a Board once per period.

    Exceptions from a refresh (e.g. a failed clock read) are logged and end
    the thread; `error` keeps the exception and `on_error` is called with it.
    """

    def __init__(self, board: Board, period: float = 1.0,
                 on_error: Optional[Callable] = None):
        self.board = board
        self.period = period
        self.on_error = on_error
        self.error: Optional[BaseException] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.is_running:
            return
        self._stop.clear()
        self.error = None
        self._thread = threading.Thread(target=self._run, name='d4events-ticker',
                                        daemon=True)
        self._thread.start()
        log.debug("Ticker started (period %.2fs)", self.period)

    def stop(self, timeout: float = 2.0):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        log.debug("Ticker stopped")

    def _run(self):
        while not self._stop.wait(self.period):
            try:
                self.board.refresh()
            except Exception as e:
                log.exception("Countdown refresh failed")
                self.error = e
                if self.on_error is not None:
                    self.on_error(e)
                return
