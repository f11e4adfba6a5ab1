import logging

from ..config import (WINDOW_TITLE, WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT,
                      THEME_TOGGLE_LABELS, PLAYER_X, PLAYER_O, DEFAULT_THEME)
from ..game_logic import GameLogic
from .board_widget import BoardWidget
from .theme import apply_theme, button_stylesheet

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, theme=DEFAULT_THEME):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic(theme=theme)
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._apply_theme()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # toggle, title, status, scores
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # restart + reset scores
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        restart_action = QAction("Restart Game", self)
        restart_action.triggered.connect(self.restart_game)
        reset_action = QAction("Reset Scores", self)
        reset_action.triggered.connect(self.reset_scores)
        theme_action = QAction("Toggle Theme", self)
        theme_action.triggered.connect(self.toggle_theme)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (restart_action, reset_action, theme_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        # theme toggle, title, status line, scoreboard
        self.header_widget = QWidget()
        vl = QVBoxLayout(self.header_widget)
        self.theme_button = QPushButton("")
        self.theme_button.clicked.connect(self.toggle_theme)
        vl.addWidget(self.theme_button, alignment=Qt.AlignRight)

        self.title_label = QLabel(WINDOW_TITLE)
        f = QFont(); f.setPointSize(20); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        vl.addWidget(self.title_label)

        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        vl.addWidget(self.message_label)

        scores = QHBoxLayout()
        self.score_x_label = QLabel(""); self.score_x_label.setObjectName("score_x")
        self.score_o_label = QLabel(""); self.score_o_label.setObjectName("score_o")
        scores.addStretch(1)
        for w in (self.score_x_label, self.score_o_label): scores.addWidget(w)
        scores.addStretch(1)
        vl.addLayout(scores)

    def _create_bottom_controls(self):
        # restart/reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.restart_button = QPushButton("Restart Game"); self.restart_button.setObjectName("accent")
        self.restart_button.clicked.connect(self.restart_game)
        self.reset_scores_button = QPushButton("Reset Scores"); self.reset_scores_button.setObjectName("secondary")
        self.reset_scores_button.clicked.connect(self.reset_scores)
        hl.addStretch(1)
        for w in (self.restart_button, self.reset_scores_button): hl.addWidget(w)
        hl.addStretch(1)

    def _apply_theme(self):
        # palette for the whole app, stylesheet for this window
        theme = self.game_logic.theme
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, theme)
        self.setStyleSheet(button_stylesheet(theme))
        self.theme_button.setText(THEME_TOGGLE_LABELS[theme])

    def _refresh(self):
        # re-read state into labels + board
        gl = self.game_logic
        self.message_label.setText(gl.status_text())
        self.score_x_label.setText(gl.scoreboard_text(PLAYER_X))
        self.score_o_label.setText(gl.scoreboard_text(PLAYER_O))
        self.board_widget.update()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        res = self.game_logic.make_move(r, c)
        if res != "invalid":
            self._refresh()

    @Slot()
    def restart_game(self):
        self.game_logic.restart()
        self._refresh()

    @Slot()
    def reset_scores(self):
        self.game_logic.reset_scores()
        self._refresh()

    @Slot()
    def toggle_theme(self):
        self.game_logic.toggle_theme()
        self._apply_theme()
        self.board_widget.update()
