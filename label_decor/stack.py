"""Per-label record of applied decorators that can be rebuilt after removal."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from PySide6.QtGui import QPainter

from .decorators import DecoratorKind, as_kind, wrap
from .label import Drawable, Label

LOGGER = logging.getLogger(__name__)


class DecoratedLabel:
    """Keep a base :class:`Label`, its decorator kinds and the drawable chain."""

    def __init__(self, base: Label) -> None:
        self._base = base
        self._kinds: List[DecoratorKind] = []
        self._drawable: Drawable = base

    @property
    def base(self) -> Label:
        return self._base

    @property
    def kinds(self) -> Tuple[DecoratorKind, ...]:
        return tuple(self._kinds)

    @property
    def depth(self) -> int:
        return len(self._kinds)

    @property
    def drawable(self) -> Drawable:
        return self._drawable

    def add(self, kind: DecoratorKind | str) -> DecoratorKind:
        """Wrap the current chain with *kind* and record it."""

        decorator_kind = as_kind(kind)
        self._drawable = wrap(self._drawable, decorator_kind)
        self._kinds.append(decorator_kind)
        LOGGER.debug("%s: added %s (depth %d)", self._base.text, decorator_kind.value, self.depth)
        return decorator_kind

    def remove_last(self) -> Optional[DecoratorKind]:
        """Drop the newest decorator and rebuild the chain from a fresh base.

        Returns the removed kind, or ``None`` when nothing was applied.
        """

        if not self._kinds:
            return None

        removed = self._kinds.pop()
        self._drawable = self._rebuild()
        LOGGER.debug("%s: removed %s (depth %d)", self._base.text, removed.value, self.depth)
        return removed

    def clear(self) -> None:
        self._kinds.clear()
        self._drawable = self._rebuild()

    def draw(self, painter: QPainter) -> None:
        self._drawable.draw(painter)

    def _rebuild(self) -> Drawable:
        drawable: Drawable = self._base.copy()
        for kind in self._kinds:
            drawable = wrap(drawable, kind)
        return drawable
