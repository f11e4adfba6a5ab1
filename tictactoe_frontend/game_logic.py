import logging
from enum import Enum

from .config import (BOARD_SIZE, EMPTY, PLAYER_X, PLAYER_O, SYMBOLS,
                     FIRST_PLAYER, DEFAULT_THEME)
from .outcome import evaluate

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


def other_player(symbol):
    return PLAYER_O if symbol == PLAYER_X else PLAYER_X


class GameLogic:
    """
    tic-tac-toe rules, turn order, scores and theme
    """
    def __init__(self, theme=DEFAULT_THEME):
        """
        init board, counters and session scores
        """
        self.board_size = BOARD_SIZE               # fixed 3x3 grid
        self.scores = {s: 0 for s in SYMBOLS}      # survives restarts
        self.theme = theme                         # cosmetic only
        self.restart()

    @property
    def game_over(self):
        return self.status != Status.IN_PROGRESS

    def make_move(self, row, col):
        """
        place current player's mark, check result
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        # only if in range, cell empty and game not over
        if self.game_over or not self.is_cell_empty(row, col):
            logger.debug("rejected move at (%s, %s)", row, col)
            return "invalid"

        player = self.turn
        self.game_board[row][col] = player
        self.move_count += 1               # count this move
        winner = evaluate(self.game_board)
        if winner is not None:
            self.status = Status.WON; self.winner = winner
            self.scores[winner] += 1
            result = "win"
            logger.info("player %s wins, score X %d - O %d",
                        winner, self.scores[PLAYER_X], self.scores[PLAYER_O])
        elif self.move_count == self.board_size * self.board_size:
            self.status = Status.DRAW
            result = "draw"
            logger.info("draw after %d moves", self.move_count)
        else:
            result = "continue"
        # flips on the final move too
        self.turn = other_player(self.turn)
        logger.debug("%s placed at (%d, %d), move %d", player, row, col,
                     self.move_count)
        return result

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return self.game_board[row][col] == EMPTY
        return False

    def restart(self):
        """
        clear board, X to move; scores kept
        """
        self.game_board = [[EMPTY for _ in range(self.board_size)]
                           for _ in range(self.board_size)]  # empty cells
        self.turn = FIRST_PLAYER
        self.move_count = 0
        self.status = Status.IN_PROGRESS; self.winner = None
        logger.debug("board restarted")

    def reset_scores(self):
        """
        zero both tallies, then restart
        """
        for s in SYMBOLS:
            self.scores[s] = 0
        logger.debug("scores reset")
        self.restart()

    def toggle_theme(self):
        self.theme = self.theme.opposite()
        logger.debug("theme is now %s", self.theme.value)
        return self.theme

    def status_text(self):
        """
        one-line status for the header
        """
        if self.status == Status.WON:
            return f"{self.winner} wins!"
        if self.status == Status.DRAW:
            return "Draw"
        return f"Turn: {self.turn}"

    def scoreboard_text(self, symbol):
        return f"{symbol}: {self.scores[symbol]}"

    def snapshot(self):
        """
        plain copy of everything the view reads
        """
        return {
            "board": [list(row) for row in self.game_board],
            "turn": self.turn,
            "move_count": self.move_count,
            "status": self.status,
            "winner": self.winner,
            "scores": dict(self.scores),
            "theme": self.theme,
        }
