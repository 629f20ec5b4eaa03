from __future__ import annotations

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from lab_runtime.runtime import LabelBoardWindow
from lab_ui import apply_canvas_palette
from label_decor import LabelBoard, LabelBoardConfig

LOGGER = logging.getLogger(__name__)

DEFAULT_LABEL_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Label decorator board")
    parser.add_argument(
        "--labels",
        type=int,
        default=DEFAULT_LABEL_COUNT,
        help="Number of labels scattered on the canvas",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for label placement")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Python logging level")
    args = parser.parse_args(argv)
    if args.labels < 1:
        parser.error("--labels must be at least 1")
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.log_level)

    app = QApplication(sys.argv)
    app.setApplicationDisplayName("Label Decorators")
    app.setStyle("Fusion")
    apply_canvas_palette(app)

    board = LabelBoard(LabelBoardConfig(label_count=args.labels, seed=args.seed))
    window = LabelBoardWindow(board)

    app.aboutToQuit.connect(window.shutdown)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
