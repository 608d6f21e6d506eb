"""PySide6 countdown window - one row per event, refreshed by a QTimer."""

import logging

from PySide6.QtWidgets import QWidget, QLabel, QGridLayout, QApplication
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont

from ..board import Board, COLOR_TEXT

log = logging.getLogger(__name__)

TITLE = 'Diablo 4 Events'


class CountdownWindow(QWidget):
    """Grid of event names and their countdowns."""

    def __init__(self, board: Board, font_size=30.0, size=(340, 140)):
        super().__init__()
        self.board = board
        self.font_size = font_size
        self._values = {}

        self.setWindowTitle(TITLE)
        self.resize(*size)
        self._build()

        board.subscribe(self._on_board)
        # No event loop yet, so a clock failure here must reach the caller
        board.refresh()

        self._timer = QTimer(self)
        self._timer.setInterval(1000)
        self._timer.timeout.connect(self._tick)
        self._timer.start()

    def _build(self):
        layout = QGridLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        name_font = QFont()
        name_font.setPointSizeF(self.font_size)
        name_font.setBold(True)
        value_font = QFont()
        value_font.setPointSizeF(self.font_size)

        for row, ev in enumerate(self.board.events):
            name = QLabel(ev.label)
            name.setFont(name_font)
            layout.addWidget(name, row, 0)

            value = QLabel('')
            value.setFont(value_font)
            value.setAlignment(Qt.AlignCenter)
            layout.addWidget(value, row, 1)
            self._values[ev] = value

    def _tick(self):
        try:
            self.board.refresh()
        except Exception:
            # Clock failure: nothing sensible to show, take the app down
            log.exception("Countdown refresh failed")
            self._timer.stop()
            QApplication.exit(1)

    def _on_board(self, board):
        for cd in board.rows:
            label = self._values.get(cd.event)
            if label is None:
                continue
            label.setText(cd.text)
            label.setStyleSheet(
                f'color: {COLOR_TEXT}; background-color: {cd.background};')
