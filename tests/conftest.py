import os

# no display needed for the widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe_frontend.game_logic import GameLogic


@pytest.fixture
def game():
    return GameLogic()


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def play(game, moves):
    """apply (row, col) moves in order, return the last result"""
    res = None
    for r, c in moves:
        res = game.make_move(r, c)
    return res
