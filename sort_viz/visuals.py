"""Console renderers for the data model and the factory that builds them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from .algorithms import SortStep
from .model import DataStructureModel

LOGGER = logging.getLogger(__name__)

BAR_CHAR = "#"
HIGHLIGHT_CHAR = "*"


class VisualRepresentation(ABC):
    """Observer base that renders the model whenever it changes.

    Subclasses override :meth:`render` and return the text to show; the
    base class takes care of subscribing and emitting the result.
    """

    kind = "abstract"

    def __init__(self, model: DataStructureModel) -> None:
        self.model = model
        self.last_rendered: Optional[str] = None
        self.render_count = 0
        self.model.add_observer(self)

    def data_changed(self, data: Tuple[int, ...], step: Optional[SortStep] = None) -> None:
        self.last_rendered = self.render(data, step)
        self.render_count += 1
        self.emit(self.last_rendered)

    @abstractmethod
    def render(self, data: Tuple[int, ...], step: Optional[SortStep] = None) -> str:
        ...

    def emit(self, rendered: str) -> None:
        LOGGER.info("%s", rendered)

    def detach(self) -> None:
        self.model.remove_observer(self)


class BarVisual(VisualRepresentation):
    kind = "bar"

    def render(self, data: Tuple[int, ...], step: Optional[SortStep] = None) -> str:
        if not data:
            return "Rendering bars: (empty)"
        touched = set(step.indices) if step is not None else set()
        width = len(str(max(abs(value) for value in data)))
        rows = []
        for index, value in enumerate(data):
            char = HIGHLIGHT_CHAR if index in touched else BAR_CHAR
            rows.append(f"{value:>{width}} | {char * max(value, 0)}")
        return "Rendering bars:\n" + "\n".join(rows)


class TextVisual(VisualRepresentation):
    kind = "text"

    def render(self, data: Tuple[int, ...], step: Optional[SortStep] = None) -> str:
        suffix = f" ({step.action} {list(step.indices)})" if step is not None else ""
        return f"Rendering text: {list(data)}{suffix}"


class VisualFactory:
    """Build visuals by name."""

    _visuals: Dict[str, type[VisualRepresentation]] = {
        BarVisual.kind: BarVisual,
        TextVisual.kind: TextVisual,
    }

    @classmethod
    def available_types(cls) -> Tuple[str, ...]:
        return tuple(cls._visuals)

    @classmethod
    def create_visual(cls, kind: str, model: DataStructureModel) -> VisualRepresentation:
        visual_cls = cls._visuals.get(kind)
        if visual_cls is None:
            raise ValueError(f"Invalid visual type: {kind!r}")
        return visual_cls(model)
