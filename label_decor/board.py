"""Collection of decorated labels with a current selection."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from PySide6.QtGui import QPainter

from .decorators import DecoratorKind
from .label import Label
from .stack import DecoratedLabel

LOGGER = logging.getLogger(__name__)

BoardListener = Callable[["LabelBoard"], None]


@dataclass(slots=True)
class LabelBoardConfig:
    canvas_width: int = 600
    canvas_height: int = 500
    label_count: int = 5
    margin_x: float = 50.0
    margin_y: float = 20.0
    seed: int | None = None


class LabelBoard:
    """Own the labels shown on the canvas and route edits to the selected one."""

    def __init__(
        self,
        config: Optional[LabelBoardConfig] = None,
        *,
        labels: Sequence[Label] | None = None,
    ) -> None:
        self._config = config or LabelBoardConfig()
        if labels is None:
            labels = self._scatter_labels()
        self._labels: Tuple[DecoratedLabel, ...] = tuple(DecoratedLabel(label) for label in labels)
        self._selected = 0
        self._listeners: list[BoardListener] = []

    @property
    def config(self) -> LabelBoardConfig:
        return self._config

    @property
    def labels(self) -> Tuple[DecoratedLabel, ...]:
        return self._labels

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def selected(self) -> DecoratedLabel:
        return self._labels[self._selected]

    def __len__(self) -> int:
        return len(self._labels)

    def select(self, index: int) -> None:
        if not 0 <= index < len(self._labels):
            raise IndexError(f"Label index {index} out of range (0..{len(self._labels) - 1})")
        if index == self._selected:
            return
        self._selected = index
        LOGGER.debug("Selected %s", self.selected.base.text)
        self._notify()

    def add_decorator(self, kind: DecoratorKind | str) -> DecoratorKind:
        added = self.selected.add(kind)
        LOGGER.info("Added %s decorator to %s", added.value, self.selected.base.text)
        self._notify()
        return added

    def remove_last_decorator(self) -> Optional[DecoratorKind]:
        removed = self.selected.remove_last()
        if removed is None:
            LOGGER.info("%s has no decorators to remove", self.selected.base.text)
            return None
        LOGGER.info("Removed %s decorator from %s", removed.value, self.selected.base.text)
        self._notify()
        return removed

    def add_listener(self, listener: BoardListener) -> None:
        """Register *listener* to be called after every board change."""

        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: BoardListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def draw(self, painter: QPainter) -> None:
        for label in self._labels:
            label.draw(painter)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _scatter_labels(self) -> list[Label]:
        config = self._config
        rng = random.Random(config.seed)
        return [
            Label(
                f"Label {index + 1}",
                rng.uniform(config.margin_x, config.canvas_width - config.margin_x),
                rng.uniform(config.margin_y, config.canvas_height - config.margin_y),
            )
            for index in range(config.label_count)
        ]
