"""Runtime wiring for the Qt demos: animation loop and top-level windows."""

from .runtime import LabelBoardWindow, SortAnimator, SortWindow

__all__ = [
    "LabelBoardWindow",
    "SortAnimator",
    "SortWindow",
]
