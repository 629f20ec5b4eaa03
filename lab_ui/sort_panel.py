"""Interactive control column for the sorting demo."""

from __future__ import annotations

import random
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from sort_viz import (
    AnimationController,
    DataStructureModel,
    InsertCommand,
    PauseCommand,
    PlayCommand,
    SetSpeedCommand,
    SortDemoConfig,
    available_algorithms,
)

# Slider positions map to speed in tenths: 1 -> 0.1x, 40 -> 4.0x.
SPEED_SCALE = 10


class SortControlPanel(QWidget):
    """Buttons bound to sorting commands plus algorithm and speed selectors."""

    sortRequested = Signal(str)
    resetRequested = Signal()

    def __init__(
        self,
        model: DataStructureModel,
        controller: AnimationController,
        config: Optional[SortDemoConfig] = None,
        *,
        rng: random.Random | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        self._controller = controller
        self._config = config or SortDemoConfig()
        self._rng = rng or random.Random()
        self.buttons: dict[str, QPushButton] = {}
        self._build_ui()
        self._controller.add_listener(self._handle_controller_changed)
        self._handle_controller_changed(self._controller)

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        title = QLabel("Data")
        title.setStyleSheet("font-size: 16px; font-weight: 600;")
        layout.addWidget(title)

        insert_btn = QPushButton("Insert Random")
        insert_btn.clicked.connect(self._insert_random)
        layout.addWidget(insert_btn)
        self.buttons["insert"] = insert_btn

        reset_btn = QPushButton("Reset")
        reset_btn.clicked.connect(self.resetRequested.emit)
        layout.addWidget(reset_btn)
        self.buttons["reset"] = reset_btn

        layout.addSpacing(12)

        algo_title = QLabel("Algorithm")
        algo_title.setStyleSheet("font-size: 16px; font-weight: 600;")
        layout.addWidget(algo_title)

        self.algorithm_combo = QComboBox()
        self.algorithm_combo.addItems(available_algorithms())
        self.algorithm_combo.setCurrentText(self._config.algorithm)
        layout.addWidget(self.algorithm_combo)

        sort_btn = QPushButton("Sort")
        sort_btn.clicked.connect(
            lambda _checked=False: self.sortRequested.emit(self.algorithm_combo.currentText())
        )
        layout.addWidget(sort_btn)
        self.buttons["sort"] = sort_btn

        layout.addSpacing(12)

        anim_title = QLabel("Animation")
        anim_title.setStyleSheet("font-size: 16px; font-weight: 600;")
        layout.addWidget(anim_title)

        play_btn = QPushButton("Play")
        play_btn.clicked.connect(lambda _checked=False: PlayCommand(self._controller).execute())
        layout.addWidget(play_btn)
        self.buttons["play"] = play_btn

        pause_btn = QPushButton("Pause")
        pause_btn.clicked.connect(lambda _checked=False: PauseCommand(self._controller).execute())
        layout.addWidget(pause_btn)
        self.buttons["pause"] = pause_btn

        grid = QGridLayout()
        grid.setHorizontalSpacing(10)
        grid.setColumnStretch(1, 1)
        grid.addWidget(QLabel("Speed"), 0, 0)

        self.speed_slider = QSlider(Qt.Orientation.Horizontal)
        self.speed_slider.setRange(1, 40)
        self.speed_slider.setValue(int(round(self._controller.speed * SPEED_SCALE)))
        self.speed_slider.valueChanged.connect(self._handle_speed_slider)
        grid.addWidget(self.speed_slider, 0, 1)

        self.speed_label = QLabel()
        self.speed_label.setFixedWidth(48)
        self.speed_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        grid.addWidget(self.speed_label, 0, 2)
        layout.addLayout(grid)

        self.state_label = QLabel()
        self.state_label.setStyleSheet("color: rgba(0,0,0,0.6); font-size: 12px;")
        layout.addWidget(self.state_label)

        layout.addStretch(1)

    def set_sort_running(self, running: bool) -> None:
        self.buttons["insert"].setEnabled(not running)
        self.buttons["sort"].setEnabled(not running)
        self.algorithm_combo.setEnabled(not running)

    def shutdown(self) -> None:
        """Stop listening to the shared controller."""

        self._controller.remove_listener(self._handle_controller_changed)

    def _insert_random(self) -> None:
        if len(self._model) >= self._config.max_items:
            self.state_label.setText(f"At most {self._config.max_items} values")
            return
        value = self._rng.randint(self._config.min_value, self._config.max_value)
        InsertCommand(self._model, value).execute()

    def _handle_speed_slider(self, value: int) -> None:
        SetSpeedCommand(self._controller, value / SPEED_SCALE).execute()

    def _handle_controller_changed(self, controller: AnimationController) -> None:
        self.speed_label.setText(f"{controller.speed:.1f}x")
        self.state_label.setText(f"Animation {controller.state.name}")
