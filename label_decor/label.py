"""Plain text label drawn centered on its anchor point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen

DEFAULT_X = 200.0
DEFAULT_Y = 200.0
TEXT_COLOR = QColor(0, 0, 0)


class Drawable(Protocol):
    """Anything that can be painted like a :class:`Label`."""

    @property
    def text(self) -> str:  # pragma: no cover - Protocol helper
        ...

    @property
    def x(self) -> float:  # pragma: no cover - Protocol helper
        ...

    @property
    def y(self) -> float:  # pragma: no cover - Protocol helper
        ...

    def draw(self, painter: QPainter) -> None:  # pragma: no cover - Protocol helper
        ...


@dataclass(slots=True)
class Label:
    """A drawable text element anchored at ``(x, y)``."""

    text: str = ""
    x: float = DEFAULT_X
    y: float = DEFAULT_Y

    def copy(self) -> "Label":
        return Label(self.text, self.x, self.y)

    def draw(self, painter: QPainter) -> None:
        metrics = painter.fontMetrics()
        width = float(metrics.horizontalAdvance(self.text))
        height = float(metrics.height())
        painter.save()
        painter.setPen(QPen(TEXT_COLOR, 1))
        painter.drawText(
            QRectF(self.x - width / 2, self.y - height / 2, width, height),
            Qt.AlignmentFlag.AlignCenter,
            self.text,
        )
        painter.restore()


def text_width(painter: QPainter, label: Drawable) -> float:
    """Return the rendered width of *label*'s text for the painter's font."""

    return float(painter.fontMetrics().horizontalAdvance(label.text))
