"""Button actions for the label board, wrapped as command objects."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .board import LabelBoard
from .decorators import DecoratorKind, as_kind


class LabelCommand(ABC):
    def __init__(self, board: LabelBoard) -> None:
        self.board = board

    @abstractmethod
    def execute(self) -> None:
        ...


class AddDecoratorCommand(LabelCommand):
    def __init__(self, board: LabelBoard, kind: DecoratorKind | str) -> None:
        super().__init__(board)
        self.kind = as_kind(kind)

    def execute(self) -> None:
        self.board.add_decorator(self.kind)


class RemoveLastDecoratorCommand(LabelCommand):
    def execute(self) -> None:
        self.board.remove_last_decorator()


class SelectLabelCommand(LabelCommand):
    def __init__(self, board: LabelBoard, index: int) -> None:
        super().__init__(board)
        self.index = index

    def execute(self) -> None:
        self.board.select(self.index)
