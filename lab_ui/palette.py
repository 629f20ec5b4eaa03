from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication


def apply_canvas_palette(app: QApplication) -> None:
    """Apply the light palette shared by the label board and the sorting demo."""

    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(236, 238, 244))
    palette.setColor(QPalette.ColorRole.WindowText, Qt.GlobalColor.black)
    palette.setColor(QPalette.ColorRole.Base, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(246, 247, 251))
    palette.setColor(QPalette.ColorRole.ToolTipBase, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.ToolTipText, Qt.GlobalColor.black)
    palette.setColor(QPalette.ColorRole.Text, Qt.GlobalColor.black)
    palette.setColor(QPalette.ColorRole.Button, QColor(220, 224, 236))
    palette.setColor(QPalette.ColorRole.ButtonText, Qt.GlobalColor.black)
    palette.setColor(QPalette.ColorRole.Highlight, QColor(200, 200, 255))
    palette.setColor(QPalette.ColorRole.HighlightedText, Qt.GlobalColor.black)
    app.setPalette(palette)

    app.setStyleSheet(
        """
        QComboBox, QSlider, QPushButton, QRadioButton { font-size: 13px; }
        QPushButton { background-color: rgba(120, 120, 220, 0.16); border: 1px solid rgba(90, 90, 180, 0.35); padding: 6px 10px; border-radius: 5px; }
        QPushButton:hover { background-color: rgba(120, 120, 220, 0.28); }
        QPushButton:pressed { background-color: rgba(120, 120, 220, 0.42); }
        QSlider::groove:horizontal { height: 6px; background: rgba(0,0,0,0.12); border-radius: 3px; }
        QSlider::handle:horizontal { background: rgba(90,90,200,0.9); width: 16px; margin: -5px 0; border-radius: 8px; }
        """
    )
