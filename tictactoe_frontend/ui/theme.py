from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor

from ..config import COLORS


def theme_color(theme, role):
    """
    QColor for a named role in the given theme
    """
    return QColor(COLORS[theme][role])


def build_palette(theme):
    """
    Build the application palette for a theme from the color constants.
    """
    c = COLORS[theme]
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, QColor(c["window"]))
    palette.setColor(QPalette.WindowText, QColor(c["window_text"]))
    palette.setColor(QPalette.Base, QColor(c["base"]))
    palette.setColor(QPalette.AlternateBase, QColor(c["alt_base"]))
    palette.setColor(QPalette.ToolTipBase, QColor(c["base"]))
    palette.setColor(QPalette.ToolTipText, QColor(c["window_text"]))
    palette.setColor(QPalette.Text, QColor(c["window_text"]))
    palette.setColor(QPalette.Button, QColor(c["button"]))
    palette.setColor(QPalette.ButtonText, QColor(c["button_text"]))
    palette.setColor(QPalette.Highlight, QColor(c["highlight"]))
    palette.setColor(QPalette.HighlightedText, QColor(c["highlighted_text"]))
    palette.setColor(QPalette.PlaceholderText, QColor(c["placeholder"]))
    # Disabled roles
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, QColor(c["disabled_text"]))
    return palette


def button_stylesheet(theme):
    """
    accent/secondary look for the control buttons
    """
    c = COLORS[theme]
    return f"""
        QPushButton#accent {{ background-color: {c['accent']}; color: #fff;
                              border-radius: 6px; padding: 6px 14px; }}
        QPushButton#secondary {{ background-color: {c['secondary']}; color: #fff;
                                 border-radius: 6px; padding: 6px 14px; }}
        QLabel#score_x {{ color: {c['x_mark']}; font-weight: bold; }}
        QLabel#score_o {{ color: {c['o_mark']}; font-weight: bold; }}
    """


def apply_theme(app: QApplication, theme):
    """
    Apply the palette for ``theme`` to the whole application.
    """
    app.setPalette(build_palette(theme))
