"""Desktop window hosting the label canvas and its decorator controls."""

from __future__ import annotations

from PySide6.QtWidgets import QVBoxLayout, QWidget

from lab_ui import DecoratorPanel, LabelCanvas
from label_decor import LabelBoard


class LabelBoardWindow(QWidget):
    def __init__(self, board: LabelBoard) -> None:
        super().__init__()
        self.setWindowTitle("Label Decorators")
        self._board = board
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.canvas = LabelCanvas(self._board)
        layout.addWidget(self.canvas)

        self.panel = DecoratorPanel(self._board)
        layout.addWidget(self.panel)

    def shutdown(self) -> None:
        self.panel.shutdown()
        self.canvas.detach()
