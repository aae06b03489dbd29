import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .config import GameConfig, LOG_LEVELS
from .game_logic import MODES, SYMBOLS
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(245, 247, 251)
WINDOW_TEXT_COLOR = QColor(33, 33, 33)
BASE_COLOR = Qt.white
ALT_BASE_COLOR = QColor(227, 234, 247)
TEXT_COLOR = QColor(33, 33, 33)
BUTTON_COLOR = QColor(227, 234, 247)
BUTTON_TEXT_COLOR = QColor(25, 118, 210)
HIGHLIGHT_COLOR = QColor(25, 118, 210)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(160, 160, 160)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the light theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE + LOGGING
# -----------------------------------------------------------------------------

def build_parser():
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe")
    parser.add_argument("--mode", choices=MODES,
                        help="pvp (two players) or pvc (against the computer)")
    parser.add_argument("--play-as", choices=SYMBOLS,
                        help="your symbol when playing the computer")
    parser.add_argument("--delay", type=int, metavar="MS",
                        help="milliseconds before the computer moves")
    parser.add_argument("--seed", type=int,
                        help="seed for the computer's random moves")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="logging level (default WARNING)")
    return parser


def parse_config(argv=None):
    """
    Parse command line arguments into a GameConfig.
    Qt's own arguments are not passed here.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return GameConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))


def configure_logging(level):
    """
    Send log records to stderr, replacing earlier handlers.
    """
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run(argv=None):
    config = parse_config(sys.argv[1:] if argv is None else argv)
    configure_logging(config.log_level_value)

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(config)
    window.resize(420, 560)
    window.show()
    logging.getLogger(__name__).info("started in %s mode", config.mode)
    return app.exec()
