from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Mark

GRID_SIZE = 3

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_FILL_COLOR = "#4d5a2a"
LOCKED_FILL_COLOR = "#2b2b2b"


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0..8 on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setAccessibleName("3 by 3 Tic Tac Toe board")
        self.refresh()

    def accepts_clicks(self):
        # locked once the round is decided
        return not self.engine.status.is_over

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def cell_label(self, index):
        """
        screen-reader label for one cell, 1-based like the buttons it mimics
        """
        mark = self.engine.board[index]
        if mark is None:
            return f"Square {index + 1}"
        return f"Square {index + 1}, {mark.value}"

    def refresh(self):
        # sync accessible text and repaint after engine changes
        labels = [self.cell_label(i) for i in range(GRID_SIZE * GRID_SIZE)]
        self.setAccessibleDescription("; ".join(labels))
        self.update()

    def _geometry(self):
        # square board centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0:
            return None
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / GRID_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp float edge cases
        row = max(0, min(row, GRID_SIZE - 1)); col = max(0, min(col, GRID_SIZE - 1))
        return row * GRID_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            cell_size = side / GRID_SIZE
            status = self.engine.status
            board = self.engine.board
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            # cell backgrounds
            winning = status.winning_line or ()
            for idx in range(GRID_SIZE * GRID_SIZE):
                r, c = divmod(idx, GRID_SIZE)
                rect = QRectF(ox + c*cell_size, oy + r*cell_size, cell_size, cell_size)
                if idx in winning:
                    painter.fillRect(rect, QColor(WIN_FILL_COLOR))
                elif status.is_over:
                    painter.fillRect(rect, QColor(LOCKED_FILL_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, GRID_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            for idx, mark in enumerate(board):
                if mark is None:
                    continue
                r, c = divmod(idx, GRID_SIZE)
                cx = ox + c*cell_size + cell_size/2
                cy = oy + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.6
                width = 6 if idx in winning else 4
                if mark is Mark.X:
                    painter.setPen(QPen(QColor(X_COLOR), width))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), width))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self.accepts_clicks():
            return
        pos = event.position()
        idx = self.cell_at(pos.x(), pos.y())
        if idx is None or not self.engine.is_cell_empty(idx):
            return  # filled cells act like disabled buttons
        self.cell_clicked.emit(idx)  # notify main window
