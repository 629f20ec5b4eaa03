"""Desktop window for the sorting visualizer."""

from __future__ import annotations

import random

from PySide6.QtWidgets import QHBoxLayout, QWidget

from lab_ui import SortBarsWidget, SortControlPanel
from sort_viz import AnimationController, DataStructureModel, ResetCommand, SortDemoConfig

from .sort_animator import SortAnimator


class SortWindow(QWidget):
    def __init__(
        self,
        model: DataStructureModel,
        controller: AnimationController,
        config: SortDemoConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Sorting Visualizer")
        self._model = model
        self._controller = controller
        self._config = config or SortDemoConfig()
        self._controller.set_speed(self._config.speed)
        self.animator = SortAnimator(model, controller, self._config.step_interval_ms, parent=self)
        self._build_ui(rng)

    def _build_ui(self, rng: random.Random | None) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        self.bars = SortBarsWidget(self._model)
        layout.addWidget(self.bars, 3)

        self.panel = SortControlPanel(self._model, self._controller, self._config, rng=rng)
        self.panel.setFixedWidth(240)
        self.panel.sortRequested.connect(self.animator.start)
        self.panel.resetRequested.connect(self._reset)
        self.animator.runningChanged.connect(self.panel.set_sort_running)
        layout.addWidget(self.panel, 1)

    def _reset(self) -> None:
        self.animator.cancel()
        ResetCommand(self._model).execute()

    def shutdown(self) -> None:
        self.animator.shutdown()
        self.panel.shutdown()
        self.bars.detach()
