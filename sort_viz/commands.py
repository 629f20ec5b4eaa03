"""User actions for the sorting demo, wrapped as command objects."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .algorithms import SortAlgorithm
from .animation import AnimationController
from .model import DataStructureModel


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        ...


class PlayCommand(Command):
    def __init__(self, controller: AnimationController) -> None:
        self.controller = controller

    def execute(self) -> None:
        self.controller.play()


class PauseCommand(Command):
    def __init__(self, controller: AnimationController) -> None:
        self.controller = controller

    def execute(self) -> None:
        self.controller.pause()


class SetSpeedCommand(Command):
    def __init__(self, controller: AnimationController, speed: float) -> None:
        self.controller = controller
        self.speed = speed

    def execute(self) -> None:
        self.controller.set_speed(self.speed)


class ResetCommand(Command):
    def __init__(self, model: DataStructureModel) -> None:
        self.model = model

    def execute(self) -> None:
        self.model.reset()


class InsertCommand(Command):
    def __init__(self, model: DataStructureModel, value: int) -> None:
        self.model = model
        self.value = value

    def execute(self) -> None:
        self.model.insert(self.value)


class SortCommand(Command):
    def __init__(self, model: DataStructureModel, algorithm: SortAlgorithm) -> None:
        self.model = model
        self.algorithm = algorithm

    def execute(self) -> None:
        self.model.sort(self.algorithm)
