"""
Settings for the game window and the computer player.
Defaults match the shipped behaviour; main.py overrides them from the command line.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .game_logic import MODES, SYMBOLS, PLAYER_VS_PLAYER

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

COMPUTER_DELAY_MS = 400   # pause before the computer plays
STATUS_PULSE_MS = 350     # how long the status line stays highlighted
WINDOW_TITLE = "Tic Tac Toe"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    """
    Configuration for one run of the game.

    Args:
        mode: starting mode, 'pvp' or 'pvc'.
        human_symbol: symbol the human plays in 'pvc' mode.
        computer_delay_ms: delay before the computer's move.
        status_pulse_ms: duration of the status line pulse.
        seed: seed for the computer's random choices, None for system entropy.
        log_level: name of the root log level.
        window_title: main window title.
    """
    mode: str = PLAYER_VS_PLAYER
    human_symbol: str = 'X'
    computer_delay_ms: int = COMPUTER_DELAY_MS
    status_pulse_ms: int = STATUS_PULSE_MS
    seed: Optional[int] = None
    log_level: str = "WARNING"
    window_title: str = WINDOW_TITLE

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.human_symbol not in SYMBOLS:
            raise ValueError(f"human_symbol must be one of {SYMBOLS}, got {self.human_symbol!r}")
        if self.computer_delay_ms < 0:
            raise ValueError("computer_delay_ms cannot be negative")
        if self.status_pulse_ms < 0:
            raise ValueError("status_pulse_ms cannot be negative")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    @property
    def log_level_value(self):
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_args(cls, args):
        """
        Build a config from an argparse namespace.
        Attributes missing from the namespace keep their defaults.
        """
        fields = {
            "mode": getattr(args, "mode", None),
            "human_symbol": getattr(args, "play_as", None),
            "computer_delay_ms": getattr(args, "delay", None),
            "seed": getattr(args, "seed", None),
            "log_level": getattr(args, "log_level", None),
        }
        return cls(**{k: v for k, v in fields.items() if v is not None})
