"""Observable data model, sorting strategies and console views."""

from .algorithms import (
    BubbleSort,
    InsertionSort,
    SortAlgorithm,
    SortStep,
    available_algorithms,
    get_algorithm,
)
from .animation import AnimationController, PausedState, PlayingState
from .commands import (
    Command,
    InsertCommand,
    PauseCommand,
    PlayCommand,
    ResetCommand,
    SetSpeedCommand,
    SortCommand,
)
from .config import SortDemoConfig
from .model import DataStructureModel
from .visuals import BarVisual, TextVisual, VisualFactory, VisualRepresentation

__all__ = [
    "AnimationController",
    "BarVisual",
    "BubbleSort",
    "Command",
    "DataStructureModel",
    "InsertCommand",
    "InsertionSort",
    "PauseCommand",
    "PausedState",
    "PlayCommand",
    "PlayingState",
    "ResetCommand",
    "SetSpeedCommand",
    "SortAlgorithm",
    "SortCommand",
    "SortDemoConfig",
    "SortStep",
    "TextVisual",
    "VisualFactory",
    "VisualRepresentation",
    "available_algorithms",
    "get_algorithm",
]
