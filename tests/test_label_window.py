from PySide6.QtCore import Qt

from lab_runtime.runtime import LabelBoardWindow
from label_decor import DecoratorKind, Label, LabelBoard, LabelBoardConfig, SelectLabelCommand


def make_window(qtbot, board=None):
    board = board or LabelBoard(labels=[Label("Label 1", 100, 100), Label("Label 2", 300, 200)])
    window = LabelBoardWindow(board)
    qtbot.addWidget(window)
    return window, board


def test_buttons_decorate_selected_label(qtbot):
    window, board = make_window(qtbot)

    qtbot.mouseClick(window.panel.buttons["thin"], Qt.MouseButton.LeftButton)
    qtbot.mouseClick(window.panel.buttons["background"], Qt.MouseButton.LeftButton)

    assert board.labels[0].kinds == (DecoratorKind.THIN, DecoratorKind.BACKGROUND)
    assert board.labels[1].kinds == ()


def test_radio_selection_routes_edits(qtbot):
    window, board = make_window(qtbot)

    window.panel.radio_buttons[1].click()
    qtbot.mouseClick(window.panel.buttons["thick"], Qt.MouseButton.LeftButton)
    qtbot.mouseClick(window.panel.buttons["dots"], Qt.MouseButton.LeftButton)
    qtbot.mouseClick(window.panel.buttons["remove"], Qt.MouseButton.LeftButton)

    assert board.selected_index == 1
    assert board.labels[1].kinds == (DecoratorKind.THICK,)
    assert board.labels[0].kinds == ()


def test_remove_on_plain_label_keeps_board_unchanged(qtbot):
    window, board = make_window(qtbot)

    qtbot.mouseClick(window.panel.buttons["remove"], Qt.MouseButton.LeftButton)

    assert all(label.depth == 0 for label in board.labels)


def test_canvas_matches_config_and_paints_decorations(qtbot):
    board = LabelBoard(LabelBoardConfig(seed=1))
    window, _ = make_window(qtbot, board)
    for kind in ("thin", "thick", "dots", "background"):
        board.add_decorator(kind)

    image = window.canvas.grab().toImage()

    assert (window.canvas.width(), window.canvas.height()) == (600, 500)
    assert window.canvas.paint_count >= 1
    assert not image.isNull()
    assert len(window.panel.radio_buttons) == 5


def test_radios_follow_selection_made_outside_panel(qtbot):
    window, board = make_window(qtbot)

    SelectLabelCommand(board, 1).execute()

    assert window.panel.radio_buttons[1].isChecked()
    assert not window.panel.radio_buttons[0].isChecked()

    board.select(0)

    assert window.panel.radio_buttons[0].isChecked()
    assert board.selected_index == 0


def test_shutdown_stops_following_board(qtbot):
    window, board = make_window(qtbot)
    window.shutdown()

    board.select(1)

    assert window.panel.radio_buttons[0].isChecked()
