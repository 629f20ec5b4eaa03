"""Cosmetic wrappers that add borders or a background fill to a label."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen

from .label import Drawable, text_width

BORDER_COLOR = QColor(0, 0, 0)
DOT_COLOR = QColor(255, 0, 0)
DEFAULT_BACKGROUND: Tuple[int, int, int] = (200, 200, 255)

THIN_PADDING = 20.0
THIN_HEIGHT = 40.0
THICK_PADDING = 30.0
THICK_HEIGHT = 50.0
DOT_SPACING = 10.0
DOT_DIAMETER = 5.0


class DecoratorKind(str, Enum):
    """Names recorded in a label's decorator stack."""

    THIN = "thin"
    THICK = "thick"
    DOTS = "dots"
    BACKGROUND = "background"


def centered_rect(x: float, y: float, width: float, height: float) -> QRectF:
    return QRectF(x - width / 2, y - height / 2, width, height)


class LabelDecorator:
    """Base wrapper; forwards drawing and geometry to the wrapped label."""

    kind: DecoratorKind | None = None

    def __init__(self, label: Drawable) -> None:
        self.label = label

    @property
    def text(self) -> str:
        return self.label.text

    @property
    def x(self) -> float:
        return self.label.x

    @property
    def y(self) -> float:
        return self.label.y

    def draw(self, painter: QPainter) -> None:
        self.label.draw(painter)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"


class ThinBorderDecorator(LabelDecorator):
    kind = DecoratorKind.THIN

    def draw(self, painter: QPainter) -> None:
        super().draw(painter)
        width = text_width(painter, self) + THIN_PADDING
        painter.save()
        painter.setPen(QPen(BORDER_COLOR, 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(centered_rect(self.x, self.y, width, THIN_HEIGHT))
        painter.restore()


class ThickBorderDecorator(LabelDecorator):
    kind = DecoratorKind.THICK

    def draw(self, painter: QPainter) -> None:
        super().draw(painter)
        width = text_width(painter, self) + THICK_PADDING
        painter.save()
        painter.setPen(QPen(BORDER_COLOR, 3))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(centered_rect(self.x, self.y, width, THICK_HEIGHT))
        painter.restore()


class DotsBorderDecorator(LabelDecorator):
    """Outline the label with small red dots spaced every 10px."""

    kind = DecoratorKind.DOTS

    def draw(self, painter: QPainter) -> None:
        super().draw(painter)
        width = text_width(painter, self) + THIN_PADDING
        painter.save()
        painter.setPen(QPen(DOT_COLOR, 1))
        painter.setBrush(DOT_COLOR)
        radius = DOT_DIAMETER / 2
        for center in self.dot_centers(width, THIN_HEIGHT):
            painter.drawEllipse(center, radius, radius)
        painter.restore()

    def dot_centers(self, width: float, height: float) -> list[QPointF]:
        left = self.x - width / 2
        right = self.x + width / 2
        top = self.y - height / 2
        bottom = self.y + height / 2

        centers: list[QPointF] = []
        for i in range(math.ceil(width / DOT_SPACING + 1)):
            offset = left + i * DOT_SPACING
            centers.append(QPointF(offset, top))
            centers.append(QPointF(offset, bottom))
        # Side columns skip the corners already covered by the rows.
        for i in range(math.ceil(height / DOT_SPACING - 1)):
            offset = top + (i + 1) * DOT_SPACING
            centers.append(QPointF(left, offset))
            centers.append(QPointF(right, offset))
        return centers


class BackgroundColorDecorator(LabelDecorator):
    """Fill a box behind the label before the wrapped chain is drawn."""

    kind = DecoratorKind.BACKGROUND

    def __init__(
        self,
        label: Drawable,
        color: QColor | Tuple[int, int, int] = DEFAULT_BACKGROUND,
    ) -> None:
        super().__init__(label)
        self.color = color if isinstance(color, QColor) else QColor(*color)

    def draw(self, painter: QPainter) -> None:
        width = text_width(painter, self) + THIN_PADDING
        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self.color)
        painter.drawRect(centered_rect(self.x, self.y, width, THIN_HEIGHT))
        painter.restore()
        super().draw(painter)


_DECORATORS: Dict[DecoratorKind, Callable[[Drawable], LabelDecorator]] = {
    DecoratorKind.THIN: ThinBorderDecorator,
    DecoratorKind.THICK: ThickBorderDecorator,
    DecoratorKind.DOTS: DotsBorderDecorator,
    DecoratorKind.BACKGROUND: BackgroundColorDecorator,
}


def as_kind(kind: DecoratorKind | str) -> DecoratorKind:
    """Normalize *kind*, raising ``ValueError`` listing the known kinds."""

    try:
        return DecoratorKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown decorator '{kind}'. Available: {tuple(k.value for k in DecoratorKind)}"
        ) from None


def wrap(label: Drawable, kind: DecoratorKind | str) -> LabelDecorator:
    """Return *label* wrapped in the decorator registered for *kind*."""

    return _DECORATORS[as_kind(kind)](label)
