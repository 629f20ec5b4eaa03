"""Bar chart view of the sorting model."""

from __future__ import annotations

from typing import Optional, Tuple

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from sort_viz import DataStructureModel, SortStep

BACKGROUND = QColor(255, 255, 255)
BAR_COLOR = QColor(120, 130, 220)
HIGHLIGHT_COLOR = QColor(235, 90, 90)
TEXT_COLOR = QColor(40, 40, 60)


class SortBarsWidget(QWidget):
    """Observer widget drawing one bar per value, highlighting the last step."""

    def __init__(self, model: DataStructureModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(480, 280)
        self._model = model
        self._data: Tuple[int, ...] = model.data
        self._highlight: Tuple[int, ...] = ()
        self._model.add_observer(self)

    @property
    def data(self) -> Tuple[int, ...]:
        return self._data

    @property
    def highlighted(self) -> Tuple[int, ...]:
        return self._highlight

    def data_changed(self, data: Tuple[int, ...], step: Optional[SortStep] = None) -> None:
        self._data = data
        self._highlight = step.indices if step is not None else ()
        self.update()

    def detach(self) -> None:
        self._model.remove_observer(self)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        rect = self.rect()
        painter.fillRect(rect, BACKGROUND)

        if not self._data:
            painter.setPen(QPen(TEXT_COLOR))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, "Insert values to start")
            painter.end()
            return

        margin = 16.0
        label_height = float(painter.fontMetrics().height()) + 4.0
        usable_width = rect.width() - margin * 2
        usable_height = rect.height() - margin * 2 - label_height
        slot = usable_width / len(self._data)
        bar_width = max(2.0, slot * 0.8)
        peak = max(max(self._data), 1)

        for index, value in enumerate(self._data):
            height = usable_height * max(value, 0) / peak
            left = margin + index * slot + (slot - bar_width) / 2
            top = margin + usable_height - height
            color = HIGHLIGHT_COLOR if index in self._highlight else BAR_COLOR
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(color)
            painter.drawRect(QRectF(left, top, bar_width, height))

            painter.setPen(QPen(TEXT_COLOR))
            painter.drawText(
                QRectF(left - slot * 0.1, margin + usable_height + 2.0, slot, label_height),
                Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
                str(value),
            )
        painter.end()
