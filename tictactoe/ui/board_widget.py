from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Mark, index_of, initial_state
from ..messages import cell_label

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
WIN_FILL_COLOR = QColor(42, 130, 218, 90)
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
MARK_PEN_WIDTH = 4
MARK_SCALE = 0.7                      # mark radius as share of half a cell
DISABLED_OPACITY = 0.6

# keys 1..9 pick cells 0..8, same numbering as the cell labels;
# qt key codes for digits are their ascii codes
KEY_TO_INDEX = {ord(str(n)): n - 1 for n in range(1, 10)}


class BoardWidget(QWidget):
    """
    draws a game state and reports which cell the user picked

    never changes the game itself; the window passes every new state in
    through set_state().
    """
    cell_clicked = Signal(int)  # emits cell index on click / key

    def __init__(self, parent=None):
        super().__init__(parent)
        self.state = initial_state()
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAccessibleName("3 by 3 Tic Tac Toe board")
        self._refresh_description()

    def set_state(self, state):
        # swap in new snapshot and repaint
        self.state = state
        self._refresh_description()
        self.update()

    def is_disabled(self):
        return self.state.is_over

    def _refresh_description(self):
        labels = [cell_label(self.state, i) for i in range(len(self.state.board))]
        self.setAccessibleDescription("; ".join(labels))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centred in the widget: offset_x, offset_y, side
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0:
            return None
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return index_of(row, col)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            cell_size = side / BOARD_SIZE
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            # winning cells first so marks sit on top
            for index in self.state.winning_line or ():
                painter.fillRect(self.cell_rect(index), WIN_FILL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            winning = set(self.state.winning_line or ())
            for index, mark in enumerate(self.state.board):
                if mark is Mark.EMPTY:
                    continue
                # winning marks stay fully opaque
                painter.setOpacity(1.0 if index in winning or not self.is_disabled()
                                   else DISABLED_OPACITY)
                centre = self.cell_rect(index).center()
                cx, cy = centre.x(), centre.y()
                rad = cell_size / 2 * MARK_SCALE
                if mark is Mark.X:
                    painter.setPen(QPen(X_COLOR, MARK_PEN_WIDTH))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(O_COLOR, MARK_PEN_WIDTH))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        index = self.cell_at(event.position().x(), event.position().y())
        if index is not None:
            self.cell_clicked.emit(index)  # window decides if it counts

    def keyPressEvent(self, event):
        index = KEY_TO_INDEX.get(event.key())
        if index is None:
            super().keyPressEvent(event)
            return
        self.cell_clicked.emit(index)
