"""Qt runtime pieces for the demos."""

from .label_window import LabelBoardWindow
from .sort_animator import SortAnimator
from .sort_window import SortWindow

__all__ = ["LabelBoardWindow", "SortAnimator", "SortWindow"]
