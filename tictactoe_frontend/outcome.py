"""
win detection for a 3x3 board
"""
from .config import EMPTY

# every line that wins: rows top to bottom, cols left to right, then diagonals
WINNING_LINES = (
    # rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # cols
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # main diag
    ((0, 0), (1, 1), (2, 2)),
    # anti-diag
    ((0, 2), (1, 1), (2, 0)),
)


def winning_line(board):
    """
    first line holding three equal marks, or None
    """
    for line in WINNING_LINES:
        (r1, c1), (r2, c2), (r3, c3) = line
        first = board[r1][c1]
        if first != EMPTY and first == board[r2][c2] == board[r3][c3]:
            return line
    return None


def evaluate(board):
    """
    'X' or 'O' if that symbol owns a full line, else None
    """
    line = winning_line(board)
    if line is None:
        return None
    r, c = line[0]
    return board[r][c]
