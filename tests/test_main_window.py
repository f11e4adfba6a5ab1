import pytest

pytest.importorskip("PySide6")

from tictactoe_frontend.config import Theme, THEME_TOGGLE_LABELS, COLORS
from tictactoe_frontend.game_logic import Status
from tictactoe_frontend.ui.board_widget import BoardWidget
from tictactoe_frontend.ui.main_window import TicTacToeWindow
from tictactoe_frontend.ui.theme import build_palette

from PySide6.QtGui import QPalette, QColor

X_ROW_WIN = [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]


@pytest.fixture
def window(qapp):
    w = TicTacToeWindow()
    yield w
    w.close()


def click(window, moves):
    for r, c in moves:
        window.board_widget.cell_clicked.emit(r, c)


def test_window_starts_fresh(window):
    assert window.message_label.text() == "Turn: X"
    assert window.score_x_label.text() == "X: 0"
    assert window.score_o_label.text() == "O: 0"
    assert window.theme_button.text() == THEME_TOGGLE_LABELS[Theme.LIGHT]


def test_clicks_drive_the_game(window):
    click(window, [(1, 1)])
    assert window.game_logic.game_board[1][1] == "X"
    assert window.message_label.text() == "Turn: O"


def test_win_updates_status_and_scoreboard(window):
    click(window, X_ROW_WIN)
    assert window.game_logic.status == Status.WON
    assert window.message_label.text() == "X wins!"
    assert window.score_x_label.text() == "X: 1"


def test_restart_button_keeps_scores(window):
    click(window, X_ROW_WIN)
    window.restart_button.click()
    assert window.message_label.text() == "Turn: X"
    assert window.score_x_label.text() == "X: 1"
    assert window.game_logic.move_count == 0


def test_reset_scores_button(window):
    click(window, X_ROW_WIN)
    window.reset_scores_button.click()
    assert window.score_x_label.text() == "X: 0"
    assert window.game_logic.move_count == 0


def test_theme_button_toggles_palette_only(window, qapp):
    click(window, [(0, 0), (1, 1)])
    before = window.game_logic.snapshot(); before.pop("theme")
    window.theme_button.click()
    assert window.game_logic.theme == Theme.DARK
    assert window.theme_button.text() == THEME_TOGGLE_LABELS[Theme.DARK]
    assert qapp.palette().color(QPalette.Window) == QColor(COLORS[Theme.DARK]["window"])
    after = window.game_logic.snapshot(); after.pop("theme")
    assert after == before
    window.theme_button.click()
    assert window.game_logic.theme == Theme.LIGHT


def test_window_can_start_dark(qapp):
    w = TicTacToeWindow(theme=Theme.DARK)
    assert w.theme_button.text() == THEME_TOGGLE_LABELS[Theme.DARK]
    w.close()


@pytest.mark.parametrize("theme", list(Theme))
def test_palette_uses_theme_colors(theme):
    palette = build_palette(theme)
    assert palette.color(QPalette.Window) == QColor(COLORS[theme]["window"])
    assert palette.color(QPalette.Button) == QColor(COLORS[theme]["button"])


def test_board_maps_points_to_cells(qapp, game):
    board = BoardWidget(game)
    board.resize(300, 300)
    assert board.cell_at(10, 10) == (0, 0)
    assert board.cell_at(150, 150) == (1, 1)
    assert board.cell_at(290, 150) == (1, 2)
    assert board.cell_at(20, 290) == (2, 0)
    assert board.cell_at(-5, 10) is None
    assert board.cell_at(10, 300) is None


def test_board_centres_grid_in_wide_widget(qapp, game):
    board = BoardWidget(game)
    board.resize(400, 300)
    # 50px margin either side of a 300px square
    assert board.cell_at(20, 150) is None
    assert board.cell_at(60, 150) == (1, 0)
    assert board.cell_at(340, 150) == (1, 2)


def test_board_disables_filled_and_finished_cells(qapp, game):
    board = BoardWidget(game)
    assert board.is_cell_enabled(0, 0)
    game.make_move(0, 0)
    assert not board.is_cell_enabled(0, 0)
    for r, c in X_ROW_WIN[1:]:
        game.make_move(r, c)
    assert not board.is_cell_enabled(2, 0)


def test_board_paints_in_both_themes(qapp, game):
    board = BoardWidget(game)
    board.resize(120, 120)
    for r, c in X_ROW_WIN:
        game.make_move(r, c)
    for _ in Theme:
        image = board.grab()
        assert not image.isNull()
        game.toggle_theme()
