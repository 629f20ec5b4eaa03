"""Play/pause state and speed shared by every view of the sorting demo."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, List, Optional

from .model import DataStructureModel

LOGGER = logging.getLogger(__name__)

StateListener = Callable[["AnimationController"], None]


class AnimationState(ABC):
    name = "abstract"
    is_playing = False

    @abstractmethod
    def play(self, controller: "AnimationController") -> None:
        ...

    @abstractmethod
    def pause(self, controller: "AnimationController") -> None:
        ...


class PausedState(AnimationState):
    name = "paused"

    def play(self, controller: "AnimationController") -> None:
        controller._transition(PlayingState())
        LOGGER.info("Animation playing...")

    def pause(self, controller: "AnimationController") -> None:
        LOGGER.debug("Animation already paused")


class PlayingState(AnimationState):
    name = "playing"
    is_playing = True

    def play(self, controller: "AnimationController") -> None:
        LOGGER.debug("Animation already playing")

    def pause(self, controller: "AnimationController") -> None:
        controller._transition(PausedState())
        LOGGER.info("Animation paused...")


class AnimationController:
    """Process-wide animation controller.

    The first construction creates the instance; later calls return it
    unchanged (a model passed later is only adopted when none was set).
    """

    _instance: ClassVar[Optional["AnimationController"]] = None

    def __new__(cls, model: DataStructureModel | None = None) -> "AnimationController":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._initialized = False
            cls._instance = instance
        return cls._instance

    def __init__(self, model: DataStructureModel | None = None) -> None:
        if self._initialized:
            if self.model is None and model is not None:
                self.model = model
            return
        self._initialized = True
        self.model = model
        self._state: AnimationState = PausedState()
        self._speed = 1.0
        self._listeners: List[StateListener] = []

    @classmethod
    def instance(cls) -> "AnimationController":
        return cls()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance so a fresh one can be created."""

        cls._instance = None

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def speed(self) -> float:
        return self._speed

    def play(self) -> None:
        self._state.play(self)

    def pause(self) -> None:
        self._state.pause(self)

    def toggle(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def set_speed(self, speed: float) -> None:
        speed = float(speed)
        if speed <= 0:
            raise ValueError(f"Animation speed must be positive, got {speed}")
        self._speed = speed
        LOGGER.info("Speed set to: %s", speed)
        self._notify()

    def interval_ms(self, base_interval_ms: int) -> int:
        """Timer interval for *base_interval_ms* scaled by the current speed."""

        return max(1, int(round(base_interval_ms / self._speed)))

    def add_listener(self, listener: StateListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _transition(self, state: AnimationState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
