import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

DARK = QColor(53, 53, 53)
DARKER = QColor(35, 35, 35)
BUTTON_COLOR = QColor(66, 66, 66)
ACCENT_COLOR = QColor(42, 130, 218)
MUTED_COLOR = QColor(127, 127, 127)
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)

# (role, colour) for the active group
PALETTE_ROLES = (
    (QPalette.Window, DARK),
    (QPalette.WindowText, Qt.white),
    (QPalette.Base, DARKER),
    (QPalette.AlternateBase, DARK),
    (QPalette.ToolTipBase, Qt.white),
    (QPalette.ToolTipText, Qt.black),
    (QPalette.Text, Qt.white),
    (QPalette.Button, BUTTON_COLOR),
    (QPalette.ButtonText, Qt.white),
    (QPalette.BrightText, Qt.red),
    (QPalette.Link, ACCENT_COLOR),
    (QPalette.Highlight, ACCENT_COLOR),
    (QPalette.HighlightedText, Qt.white),
    (QPalette.PlaceholderText, PLACEHOLDER_TEXT_COLOR),
)

# greyed out text when widgets are disabled (finished board, etc.)
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def build_palette():
    """
    dark theme palette from the constants above
    """
    palette = QPalette()
    for role, color in PALETTE_ROLES:
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED_COLOR)
    return palette


# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    app = QApplication(sys.argv if argv is None else argv)
    app.setStyle('Fusion')
    app.setPalette(build_palette())

    window = TicTacToeWindow()
    window.show()
    return app.exec()
