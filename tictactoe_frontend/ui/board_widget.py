from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QPen

from ..config import BOARD_MIN_SIZE, PLAYER_X
from ..outcome import winning_line
from .theme import theme_color


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(BOARD_MIN_SIZE, BOARD_MIN_SIZE))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), or None outside the grid
        """
        ox, oy, side = self._geometry()
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        size = self.game_logic.board_size
        cell = side / size
        if cell <= 0:
            return None
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp to valid range
        row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
        return row, col

    def is_cell_enabled(self, row, col):
        # same rule a disabled button would follow
        return not self.game_logic.game_over and self.game_logic.is_cell_empty(row, col)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        theme = self.game_logic.theme
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), theme_color(theme, "board_bg"))
            size = self.game_logic.board_size
            cell_size = side / size
            # grid lines
            painter.setPen(QPen(theme_color(theme, "grid"), 2))
            for i in range(1, size):
                x = offset_x + i * cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y + side))
                y = offset_y + i * cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x + side), int(y))

            def centre(r, c):
                return QPointF(offset_x + c * cell_size + cell_size / 2,
                               offset_y + r * cell_size + cell_size / 2)

            # draw marks
            for r in range(size):
                for c in range(size):
                    sym = self.game_logic.game_board[r][c]
                    if not sym:
                        continue
                    p = centre(r, c)
                    cx, cy = p.x(), p.y()
                    rad = cell_size / 2 * 0.6
                    if sym == PLAYER_X:
                        painter.setPen(QPen(theme_color(theme, "x_mark"), 4))
                        # two crossing lines
                        painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                        painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                    else:
                        painter.setPen(QPen(theme_color(theme, "o_mark"), 4))
                        painter.drawEllipse(p, rad, rad)
            # strike through the winning line
            line = winning_line(self.game_logic.game_board)
            if line is not None:
                pen = QPen(theme_color(theme, "win_line"), 6, Qt.SolidLine,
                           Qt.RoundCap, Qt.RoundJoin)
                painter.setPen(pen)
                painter.drawLine(centre(*line[0]), centre(*line[-1]))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if self.game_logic.game_over:
            return
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is None or not self.is_cell_enabled(*cell):
            return
        self.cell_clicked.emit(*cell)  # notify main window
