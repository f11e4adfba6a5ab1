import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from tictactoe_frontend.config import Theme, DEFAULT_THEME
from tictactoe_frontend.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# ARGUMENTS
# -----------------------------------------------------------------------------

def build_parser():
    p = argparse.ArgumentParser(prog="tictactoe", description="Two-player Tic Tac Toe")
    p.add_argument(
        "--theme",
        choices=[t.value for t in Theme],
        default=DEFAULT_THEME.value,
        help="Starting theme (default: %(default)s)",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return p

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    window = TicTacToeWindow(theme=Theme(args.theme))
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
