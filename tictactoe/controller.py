import logging
import random

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .config import GameConfig
from .game_logic import GameSession, select_move

logger = logging.getLogger(__name__)


class GameController(QObject):
    """
    owns the game session, publishes snapshots and plays the computer side
    """
    snapshot_changed = Signal(object)   # GameSnapshot after every change
    move_rejected = Signal(int)         # index of an illegal move

    def __init__(self, config=None, session=None, rng=None, parent=None):
        """
        init session, rng and the computer move timer
        """
        super().__init__(parent)
        self.config = config or GameConfig()
        self.session = session or GameSession(self.config.mode, self.config.human_symbol)
        self.rng = rng or random.Random(self.config.seed)
        # single shot: at most one computer move waiting
        self._computer_timer = QTimer(self)
        self._computer_timer.setSingleShot(True)
        self._computer_timer.setInterval(self.config.computer_delay_ms)
        self._computer_timer.timeout.connect(self.play_computer_move)

    @property
    def is_computer_move_pending(self):
        return self._computer_timer.isActive()

    def snapshot(self):
        return self.session.snapshot()

    def start(self):
        """
        publish the first snapshot, schedule the computer if it opens
        """
        self._publish()

    @Slot(int)
    def human_move(self, index):
        """
        move from a click; not allowed while the computer is to play
        returns: session result string
        """
        if self.session.is_computer_turn:
            logger.debug("rejected move %s: computer's turn", index)
            self.move_rejected.emit(index)
            return "invalid"
        return self._submit(index, "human")

    @Slot()
    def play_computer_move(self):
        """
        pick a random empty cell and play it for the computer
        """
        self._computer_timer.stop()  # no-op when fired by the timer
        if not self.session.is_computer_turn:
            return None
        symbol = self.session.next_mover
        index = select_move(self.session.board, symbol, self.rng)
        if index is None:
            # full board should already be a draw
            logger.warning("computer has no move on a full board")
            return None
        return self._submit(index, "computer")

    @Slot()
    def reset(self):
        self._computer_timer.stop()
        self.session.reset()
        logger.info("game reset")
        self._publish()

    @Slot(str)
    def set_mode(self, mode):
        self._computer_timer.stop()
        self.session.set_mode(mode)
        logger.info("mode set to %s", mode)
        self._publish()

    @Slot(str)
    def set_human_symbol(self, symbol):
        self._computer_timer.stop()
        self.session.set_human_symbol(symbol)
        logger.info("human plays %s", symbol)
        self._publish()

    @Slot()
    def stop(self):
        # cancel a queued computer move
        self._computer_timer.stop()

    def _submit(self, index, who):
        mover = self.session.next_mover
        res = self.session.submit_move(index)
        if res == "invalid":
            logger.debug("rejected %s move %s", who, index)
            self.move_rejected.emit(index)
            return res
        logger.debug("%s played %s at %d -> %s", who, mover, index, res)
        if res == "win":
            logger.info("%s wins on line %s", mover, self.session.outcome.line)
        elif res == "draw":
            logger.info("game drawn")
        self._publish()
        return res

    def _publish(self):
        # notify ui, then queue the computer if it is up
        self.snapshot_changed.emit(self.session.snapshot())
        if self.session.is_computer_turn:
            self._computer_timer.start()
