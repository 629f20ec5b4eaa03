"""Qt-aware loop that replays sort steps at the controller's speed."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from sort_viz import AnimationController, DataStructureModel, SortAlgorithm, SortStep, get_algorithm

LOGGER = logging.getLogger(__name__)

DEFAULT_STEP_INTERVAL_MS = 300


class SortAnimator(QObject):
    """Advance one sort step per timer tick while the controller is playing."""

    stepApplied = Signal(object)
    sortStarted = Signal(str)
    sortFinished = Signal(int)
    runningChanged = Signal(bool)

    def __init__(
        self,
        model: DataStructureModel,
        controller: AnimationController,
        base_interval_ms: int = DEFAULT_STEP_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        self._controller = controller
        self._base_interval = base_interval_ms
        self._steps: Iterator[SortStep] | None = None
        self._step_count = 0
        self._timer = QTimer(self)
        self._timer.setInterval(self._controller.interval_ms(base_interval_ms))
        self._timer.timeout.connect(self.advance)
        self._controller.add_listener(self._handle_controller_changed)

    @property
    def is_running(self) -> bool:
        return self._steps is not None

    @property
    def timer_active(self) -> bool:
        return self._timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self, algorithm: SortAlgorithm | str) -> None:
        """Begin animating *algorithm* over the model's current data."""

        if isinstance(algorithm, str):
            algorithm = get_algorithm(algorithm)
        self.cancel()
        self._steps = self._model.iter_sort(algorithm)
        self._step_count = 0
        self.runningChanged.emit(True)
        self.sortStarted.emit(algorithm.display_name)
        self._sync_timer()

    def advance(self) -> bool:
        """Apply a single step. Returns ``False`` once the sort is complete."""

        if self._steps is None:
            return False
        try:
            step = next(self._steps)
        except StopIteration:
            self._finish()
            return False
        self._step_count += 1
        self.stepApplied.emit(step)
        return True

    def cancel(self) -> None:
        if self._steps is None:
            return
        self._timer.stop()
        self._steps.close()
        self._steps = None
        LOGGER.info("Sort cancelled after %d steps", self._step_count)
        self.runningChanged.emit(False)

    def shutdown(self) -> None:
        self.cancel()
        self._controller.remove_listener(self._handle_controller_changed)

    def _finish(self) -> None:
        self._timer.stop()
        self._steps = None
        LOGGER.info("Sort finished after %d steps", self._step_count)
        self.runningChanged.emit(False)
        self.sortFinished.emit(self._step_count)

    def _handle_controller_changed(self, controller: AnimationController) -> None:
        self._timer.setInterval(controller.interval_ms(self._base_interval))
        self._sync_timer()

    def _sync_timer(self) -> None:
        if self._steps is not None and self._controller.is_playing:
            if not self._timer.isActive():
                self._timer.start()
        else:
            self._timer.stop()
