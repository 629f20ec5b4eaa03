"""Shared Qt widgets for the label board and sorting demos."""

from .decorator_panel import DecoratorPanel
from .label_canvas import LabelCanvas
from .palette import apply_canvas_palette
from .sort_bars import SortBarsWidget
from .sort_panel import SortControlPanel

__all__ = [
    "DecoratorPanel",
    "LabelCanvas",
    "SortBarsWidget",
    "SortControlPanel",
    "apply_canvas_palette",
]
