from __future__ import annotations

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from lab_runtime.runtime import SortWindow
from lab_ui import apply_canvas_palette
from sort_viz import AnimationController, DataStructureModel, SortDemoConfig, available_algorithms

LOGGER = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    defaults = SortDemoConfig()
    parser = argparse.ArgumentParser(description="Sorting visualizer")
    parser.add_argument(
        "--algorithm",
        choices=available_algorithms(),
        default=defaults.algorithm,
        help="Algorithm preselected in the control panel",
    )
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=defaults.step_interval_ms,
        help="Delay between sort steps at 1.0x speed",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=defaults.speed,
        help="Initial animation speed multiplier",
    )
    parser.add_argument("--values", type=int, nargs="*", default=[], help="Initial values")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Python logging level")
    args = parser.parse_args(argv)
    if args.speed <= 0:
        parser.error("--speed must be positive")
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.log_level)

    app = QApplication(sys.argv)
    app.setApplicationDisplayName("Sorting Visualizer")
    app.setStyle("Fusion")
    apply_canvas_palette(app)

    config = SortDemoConfig(
        algorithm=args.algorithm,
        step_interval_ms=args.interval_ms,
        speed=args.speed,
    )
    model = DataStructureModel(args.values)
    controller = AnimationController(model)
    window = SortWindow(model, controller, config)

    app.aboutToQuit.connect(window.shutdown)
    window.resize(900, 480)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
