"""Drawable labels and the border/background decorators stacked on them."""

from .board import LabelBoard, LabelBoardConfig
from .commands import AddDecoratorCommand, RemoveLastDecoratorCommand, SelectLabelCommand
from .decorators import (
    BackgroundColorDecorator,
    DecoratorKind,
    DotsBorderDecorator,
    LabelDecorator,
    ThickBorderDecorator,
    ThinBorderDecorator,
    as_kind,
    wrap,
)
from .label import Label
from .stack import DecoratedLabel

__all__ = [
    "AddDecoratorCommand",
    "BackgroundColorDecorator",
    "DecoratedLabel",
    "DecoratorKind",
    "DotsBorderDecorator",
    "Label",
    "LabelBoard",
    "LabelBoardConfig",
    "LabelDecorator",
    "RemoveLastDecoratorCommand",
    "SelectLabelCommand",
    "ThickBorderDecorator",
    "ThinBorderDecorator",
    "as_kind",
    "wrap",
]
