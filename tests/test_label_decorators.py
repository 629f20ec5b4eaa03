import pytest
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor

from label_decor import (
    BackgroundColorDecorator,
    DecoratorKind,
    DotsBorderDecorator,
    Label,
    ThickBorderDecorator,
    ThinBorderDecorator,
    wrap,
)

# "Label 1" is 7 characters wide at 8px per character.
TEXT_WIDTH = 56


@pytest.fixture
def label() -> Label:
    return Label("Label 1", 200, 200)


def test_label_defaults():
    label = Label()
    assert label.text == ""
    assert (label.x, label.y) == (200, 200)


def test_label_draws_centered_text(painter, label):
    label.draw(painter)

    (call,) = painter.calls
    assert call[0] == "text"
    assert call[1] == QRectF(200 - TEXT_WIDTH / 2, 200 - 7, TEXT_WIDTH, 14)
    assert call[2] == "Label 1"
    assert painter.depth == 0


def test_thin_border_draws_after_text(painter, label):
    ThinBorderDecorator(label).draw(painter)

    assert painter.kinds() == ["text", "rect"]
    _, rect, pen, brush = painter.of_kind("rect")[0]
    assert rect == QRectF(200 - 38, 200 - 20, TEXT_WIDTH + 20, 40)
    assert pen.width() == 1
    assert brush == Qt.BrushStyle.NoBrush


def test_thick_border_is_wider_and_heavier(painter, label):
    ThickBorderDecorator(label).draw(painter)

    _, rect, pen, _ = painter.of_kind("rect")[0]
    assert rect == QRectF(200 - 43, 200 - 25, TEXT_WIDTH + 30, 50)
    assert pen.width() == 3


def test_background_fills_before_text(painter, label):
    BackgroundColorDecorator(label).draw(painter)

    assert painter.kinds() == ["rect", "text"]
    _, rect, pen, brush = painter.of_kind("rect")[0]
    assert rect == QRectF(200 - 38, 200 - 20, TEXT_WIDTH + 20, 40)
    assert pen == Qt.PenStyle.NoPen
    assert brush == QColor(200, 200, 255)


def test_background_accepts_custom_color(painter, label):
    BackgroundColorDecorator(label, (10, 20, 30)).draw(painter)

    assert painter.of_kind("rect")[0][3] == QColor(10, 20, 30)


def test_dots_border_outlines_the_label(painter, label):
    DotsBorderDecorator(label).draw(painter)

    dots = painter.of_kind("ellipse")
    # width 76 -> 9 dots per row, height 40 -> 3 dots per side column
    assert len(dots) == 9 * 2 + 3 * 2
    centers = [call[1] for call in dots]
    assert centers[0] == QPointF(162, 180)
    assert centers[1] == QPointF(162, 220)
    assert QPointF(238, 190) in centers
    assert all(call[2] == 2.5 and call[3] == 2.5 for call in dots)


def test_decorators_chain_and_expose_label_geometry(painter, label):
    chained = ThickBorderDecorator(ThinBorderDecorator(label))

    assert (chained.text, chained.x, chained.y) == ("Label 1", 200, 200)
    chained.draw(painter)
    rects = [call[1] for call in painter.of_kind("rect")]
    assert painter.kinds() == ["text", "rect", "rect"]
    assert rects[0].width() == TEXT_WIDTH + 20
    assert rects[1].width() == TEXT_WIDTH + 30


def test_background_under_border_keeps_drawing_order(painter, label):
    ThinBorderDecorator(BackgroundColorDecorator(label)).draw(painter)

    assert painter.kinds() == ["rect", "text", "rect"]


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("thin", ThinBorderDecorator),
        ("thick", ThickBorderDecorator),
        ("dots", DotsBorderDecorator),
        (DecoratorKind.BACKGROUND, BackgroundColorDecorator),
    ],
)
def test_wrap_builds_decorator_for_kind(label, kind, expected):
    decorated = wrap(label, kind)

    assert isinstance(decorated, expected)
    assert decorated.label is label


def test_wrap_rejects_unknown_kind(label):
    with pytest.raises(ValueError, match="Unknown decorator 'sparkles'"):
        wrap(label, "sparkles")
