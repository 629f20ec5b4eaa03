"""Scripted console walkthrough of the sorting model.

Inserts a few values, starts the animation, sorts them and resets the model;
every step is rendered by the bar and text visuals through the log.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from sort_viz import (
    AnimationController,
    DataStructureModel,
    InsertCommand,
    PauseCommand,
    PlayCommand,
    ResetCommand,
    SortCommand,
    VisualFactory,
    VisualRepresentation,
    available_algorithms,
    get_algorithm,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_VALUES = (5, 3, 8)
DEFAULT_ALGORITHM = "bubble"
DEFAULT_LOG_LEVEL = "INFO"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Console walkthrough of the sorting patterns")
    parser.add_argument(
        "--algorithm",
        choices=available_algorithms(),
        default=DEFAULT_ALGORITHM,
        help="Sorting strategy to apply",
    )
    parser.add_argument(
        "--values",
        type=int,
        nargs="+",
        default=list(DEFAULT_VALUES),
        help="Values inserted before sorting",
    )
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Python logging level")
    return parser.parse_args(argv)


def run_walkthrough(
    values: Sequence[int],
    algorithm: str = DEFAULT_ALGORITHM,
    *,
    model: DataStructureModel | None = None,
) -> tuple[int, ...]:
    """Insert *values*, play, sort and reset; return the sorted snapshot."""

    model = model or DataStructureModel()
    controller = AnimationController(model)
    visuals: list[VisualRepresentation] = [
        VisualFactory.create_visual("bar", model),
        VisualFactory.create_visual("text", model),
    ]

    try:
        for value in values:
            InsertCommand(model, value).execute()

        PlayCommand(controller).execute()
        SortCommand(model, get_algorithm(algorithm)).execute()
        sorted_values = model.data

        ResetCommand(model).execute()
    finally:
        PauseCommand(controller).execute()
        for visual in visuals:
            visual.detach()
    return sorted_values


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.log_level)
    sorted_values = run_walkthrough(args.values, args.algorithm)
    LOGGER.info("Sorted result: %s", list(sorted_values))
    return 0


if __name__ == "__main__":
    sys.exit(main())
