import random
from dataclasses import dataclass
from typing import Optional, Tuple

EMPTY = ''
SYMBOLS = ('X', 'O')
BOARD_CELLS = 9

PLAYER_VS_PLAYER = "pvp"
PLAYER_VS_COMPUTER = "pvc"
MODES = (PLAYER_VS_PLAYER, PLAYER_VS_COMPUTER)

IN_PROGRESS = "in_progress"
WIN = "win"
DRAW = "draw"

# rows, cols, diags -- scan order matters for malformed boards
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def other_symbol(symbol):
    # X <-> O
    return 'O' if symbol == 'X' else 'X'


@dataclass(frozen=True)
class Outcome:
    """
    result of looking at a board: in progress, won or drawn
    """
    status: str = IN_PROGRESS
    winner: Optional[str] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self):
        return self.status != IN_PROGRESS


def evaluate(board):
    """
    first winning triple in scan order, else draw if full, else in progress
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome(WIN, board[a], line)
    if all(cell != EMPTY for cell in board):
        return Outcome(DRAW)
    return Outcome(IN_PROGRESS)


def empty_cells(board):
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def select_move(board, symbol, rng=None):
    """
    pick a random empty cell for the computer
    returns: index, or None if the board is full

    symbol is not used: the computer does not look for wins or blocks
    """
    choices = empty_cells(board)
    if not choices:
        return None
    return (rng or random).choice(choices)


@dataclass(frozen=True)
class GameSnapshot:
    """
    read-only copy of a session handed to the ui
    """
    board: Tuple[str, ...]
    next_mover: str
    mode: str
    human_symbol: str
    outcome: Outcome

    @classmethod
    def blank(cls, mode=PLAYER_VS_PLAYER, human_symbol='X'):
        # empty board, X to move
        return cls((EMPTY,) * BOARD_CELLS, 'X', mode, human_symbol, Outcome())

    @property
    def is_over(self):
        return self.outcome.is_terminal

    @property
    def winning_line(self):
        return self.outcome.line

    @property
    def computer_symbol(self):
        return other_symbol(self.human_symbol)

    @property
    def is_computer_turn(self):
        return (self.mode == PLAYER_VS_COMPUTER and not self.is_over
                and self.next_mover != self.human_symbol)


def describe_status(snapshot):
    """
    status line text: winner, draw, or whose turn
    """
    outcome = snapshot.outcome
    if outcome.status == WIN:
        return f"Winner: {outcome.winner}"
    if outcome.status == DRAW:
        return "It's a draw!"
    if snapshot.mode == PLAYER_VS_COMPUTER:
        return "Computer's turn" if snapshot.is_computer_turn else "Your turn"
    return f"Next player: {snapshot.next_mover}"


class GameSession:
    """
    tic-tac-toe rules and state for one game in progress
    """
    def __init__(self, mode=PLAYER_VS_PLAYER, human_symbol='X'):
        """
        init board and settings
        """
        _check_mode(mode)
        _check_symbol(human_symbol)
        self.mode = mode                  # pvp or pvc
        self.human_symbol = human_symbol  # only used in pvc
        self.reset()

    def reset(self):
        """
        clear board, X to move
        """
        self.board = [EMPTY] * BOARD_CELLS
        self.next_mover = 'X'             # X always starts
        self.outcome = Outcome()

    def set_mode(self, mode):
        _check_mode(mode)
        self.mode = mode
        self.reset()

    def set_human_symbol(self, symbol):
        _check_symbol(symbol)
        self.human_symbol = symbol
        self.reset()

    @property
    def game_over(self):
        return self.outcome.is_terminal

    @property
    def is_computer_turn(self):
        return (self.mode == PLAYER_VS_COMPUTER and not self.game_over
                and self.next_mover != self.human_symbol)

    def submit_move(self, index):
        """
        place the mover's mark at index, check result
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        # only if game running, index on the board and cell empty
        if self.game_over or not self.is_cell_empty(index):
            return "invalid"
        self.board[index] = self.next_mover
        self.outcome = evaluate(self.board)
        if self.outcome.status == WIN:
            return "win"
        if self.outcome.status == DRAW:
            return "draw"
        self.next_mover = other_symbol(self.next_mover)
        return "continue"

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if 0 <= index < BOARD_CELLS:
            return self.board[index] == EMPTY
        return False

    def snapshot(self):
        return GameSnapshot(
            board=tuple(self.board),
            next_mover=self.next_mover,
            mode=self.mode,
            human_symbol=self.human_symbol,
            outcome=self.outcome,
        )


def _check_mode(mode):
    if mode not in MODES:
        raise ValueError(f"unknown mode {mode!r}, expected one of {MODES}")


def _check_symbol(symbol):
    if symbol not in SYMBOLS:
        raise ValueError(f"unknown symbol {symbol!r}, expected one of {SYMBOLS}")
