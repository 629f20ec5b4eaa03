"""Canvas widget that paints every label on a :class:`LabelBoard`."""

from __future__ import annotations

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from label_decor import LabelBoard

CANVAS_BACKGROUND = QColor(255, 255, 255)


class LabelCanvas(QWidget):
    """Fixed-size white canvas; repaints whenever the board changes."""

    def __init__(self, board: LabelBoard, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._board = board
        config = board.config
        self.setFixedSize(config.canvas_width, config.canvas_height)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self.paint_count = 0
        self._board.add_listener(self._handle_board_changed)

    @property
    def board(self) -> LabelBoard:
        return self._board

    def sizeHint(self) -> QSize:  # type: ignore[override]
        return QSize(self._board.config.canvas_width, self._board.config.canvas_height)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHints(QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing)
        painter.fillRect(self.rect(), CANVAS_BACKGROUND)
        self._board.draw(painter)
        painter.end()
        self.paint_count += 1

    def detach(self) -> None:
        self._board.remove_listener(self._handle_board_changed)

    def _handle_board_changed(self, _board: LabelBoard) -> None:
        self.update()
