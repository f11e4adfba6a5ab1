from enum import Enum

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

BOARD_SIZE = 3          # fixed 3x3 grid
EMPTY = ''
PLAYER_X = 'X'
PLAYER_O = 'O'
SYMBOLS = (PLAYER_X, PLAYER_O)
FIRST_PLAYER = PLAYER_X


class Theme(Enum):
    """
    light/dark look, no effect on the game
    """
    LIGHT = "light"
    DARK = "dark"

    def opposite(self):
        return Theme.DARK if self == Theme.LIGHT else Theme.LIGHT


DEFAULT_THEME = Theme.LIGHT

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic Tac Toe"
WINDOW_MIN_WIDTH = 360
WINDOW_MIN_HEIGHT = 480
BOARD_MIN_SIZE = 150

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

# one hex string per role, keyed by theme
COLORS = {
    Theme.LIGHT: {
        "window": "#f8f9fa",
        "window_text": "#282c34",
        "base": "#ffffff",
        "alt_base": "#e9ecef",
        "button": "#e9ecef",
        "button_text": "#282c34",
        "highlight": "#1976d2",
        "highlighted_text": "#ffffff",
        "placeholder": "#6c757d",
        "disabled_text": "#adb5bd",
        "board_bg": "#ffffff",
        "grid": "#dee2e6",
        "x_mark": "#1976d2",
        "o_mark": "#e53935",
        "win_line": "#ffc107",
        "accent": "#1976d2",
        "secondary": "#6c757d",
    },
    Theme.DARK: {
        "window": "#1a1a1a",
        "window_text": "#eeeeee",
        "base": "#232323",
        "alt_base": "#353535",
        "button": "#424242",
        "button_text": "#eeeeee",
        "highlight": "#2a82da",
        "highlighted_text": "#ffffff",
        "placeholder": "#a0a0a0",
        "disabled_text": "#7f7f7f",
        "board_bg": "#333333",
        "grid": "#555555",
        "x_mark": "#8acaff",
        "o_mark": "#ff8a8a",
        "win_line": "#ffd54f",
        "accent": "#2a82da",
        "secondary": "#616161",
    },
}

# labels shown on the toggle: names the theme you switch *to*
THEME_TOGGLE_LABELS = {
    Theme.LIGHT: "🌙 Dark",
    Theme.DARK: "☀️ Light",
}
