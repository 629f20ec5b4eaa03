from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from sort_viz import AnimationController


class FakeFontMetrics:
    """Fixed-width metrics so decorator geometry is predictable."""

    def __init__(self, char_width: int = 8, line_height: int = 14) -> None:
        self.char_width = char_width
        self.line_height = line_height

    def horizontalAdvance(self, text: str) -> int:
        return len(text) * self.char_width

    def height(self) -> int:
        return self.line_height


class RecordingPainter:
    """Stand-in for QPainter that records draw calls in order."""

    def __init__(self, metrics: FakeFontMetrics | None = None) -> None:
        self.metrics = metrics or FakeFontMetrics()
        self.calls: list[tuple] = []
        self.pen = None
        self.brush = None
        self.depth = 0

    def fontMetrics(self) -> FakeFontMetrics:
        return self.metrics

    def save(self) -> None:
        self.depth += 1

    def restore(self) -> None:
        self.depth -= 1

    def setPen(self, pen) -> None:
        self.pen = pen

    def setBrush(self, brush) -> None:
        self.brush = brush

    def drawRect(self, rect) -> None:
        self.calls.append(("rect", rect, self.pen, self.brush))

    def drawEllipse(self, center, rx, ry) -> None:
        self.calls.append(("ellipse", center, rx, ry))

    def drawText(self, rect, flags, text) -> None:
        self.calls.append(("text", rect, text))

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    def of_kind(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def painter() -> RecordingPainter:
    return RecordingPainter()


@pytest.fixture(autouse=True)
def fresh_controller():
    AnimationController.reset_instance()
    yield
    AnimationController.reset_instance()
