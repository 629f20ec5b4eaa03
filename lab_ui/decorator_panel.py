"""Buttons and label selector that drive a :class:`LabelBoard`."""

from __future__ import annotations

from functools import partial
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from label_decor import (
    AddDecoratorCommand,
    DecoratorKind,
    LabelBoard,
    RemoveLastDecoratorCommand,
    SelectLabelCommand,
)
from label_decor.commands import LabelCommand

BUTTON_TITLES = (
    (DecoratorKind.THICK, "Add Thick Border"),
    (DecoratorKind.THIN, "Add Thin Border"),
    (DecoratorKind.DOTS, "Add Dots Border"),
    (DecoratorKind.BACKGROUND, "Add Background Color"),
)


class DecoratorPanel(QWidget):
    """Row of decorator buttons above a radio group choosing the label."""

    def __init__(self, board: LabelBoard, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._board = board
        self.buttons: Dict[str, QPushButton] = {}
        self.radio_buttons: list[QRadioButton] = []
        self._radio_group = QButtonGroup(self)
        self._build_ui()
        self._board.add_listener(self._handle_board_changed)

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        button_row = QHBoxLayout()
        button_row.setSpacing(8)
        for kind, title in BUTTON_TITLES:
            self._add_button(button_row, kind.value, title, AddDecoratorCommand(self._board, kind))
        self._add_button(button_row, "remove", "Remove Last", RemoveLastDecoratorCommand(self._board))
        button_row.addStretch(1)
        layout.addLayout(button_row)

        radio_row = QHBoxLayout()
        radio_row.setSpacing(12)
        for index, label in enumerate(self._board.labels):
            radio = QRadioButton(label.base.text)
            radio.setChecked(index == self._board.selected_index)
            radio.toggled.connect(partial(self._handle_radio_toggled, SelectLabelCommand(self._board, index)))
            self._radio_group.addButton(radio, index)
            radio_row.addWidget(radio)
            self.radio_buttons.append(radio)
        radio_row.addStretch(1)
        layout.addLayout(radio_row)

    def shutdown(self) -> None:
        self._board.remove_listener(self._handle_board_changed)

    def _handle_board_changed(self, board: LabelBoard) -> None:
        # Selection can change outside the radios, e.g. from a command.
        button = self._radio_group.button(board.selected_index)
        if button is not None and not button.isChecked():
            button.setChecked(True)

    def _handle_radio_toggled(self, command: SelectLabelCommand, checked: bool) -> None:
        if checked:
            command.execute()

    def _add_button(self, row: QHBoxLayout, key: str, title: str, command: LabelCommand) -> None:
        button = QPushButton(title)
        button.clicked.connect(lambda _checked=False, command=command: command.execute())
        row.addWidget(button)
        self.buttons[key] = button
