"""tkinter countdown window - same grid as the Qt one, driven by after()."""

import logging
import tkinter as tk
from tkinter import font as tkfont

from ..board import Board, COLOR_TEXT

log = logging.getLogger(__name__)

TITLE = 'Diablo 4 Events'


class CountdownWindow(tk.Tk):
    """Root window with one label row per event."""

    def __init__(self, board: Board, font_size=30.0, size=(340, 140)):
        super().__init__()
        self.board = board
        self.exit_code = 0
        self._values = {}
        self._after_id = None

        self.title(TITLE)
        self.geometry(f'{size[0]}x{size[1]}')

        # Tk font sizes are integer points
        pt = max(1, round(font_size))
        self._f_name = tkfont.Font(size=pt, weight='bold')
        self._f_value = tkfont.Font(size=pt)

        self._build()
        board.subscribe(self._on_board)
        self._tick()

    def _build(self):
        for row, ev in enumerate(self.board.events):
            tk.Label(self, text=ev.label, font=self._f_name).grid(
                row=row, column=0, sticky='w', padx=8, pady=2)
            value = tk.Label(self, text='', font=self._f_value, fg=COLOR_TEXT)
            value.grid(row=row, column=1, sticky='ew', padx=8, pady=2)
            self._values[ev] = value
        self.columnconfigure(1, weight=1)

    def _tick(self):
        self.board.refresh()
        self._after_id = self.after(1000, self._tick)

    def _on_board(self, board):
        for cd in board.rows:
            label = self._values.get(cd.event)
            if label is not None:
                label.configure(text=cd.text, bg=cd.background)

    def destroy(self):
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None
        super().destroy()

    def report_callback_exception(self, exc, val, tb):
        # Any failure inside a timer callback (clock read) ends the program
        log.error("Countdown refresh failed", exc_info=(exc, val, tb))
        self.exit_code = 1
        self.destroy()
