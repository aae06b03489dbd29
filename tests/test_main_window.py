"""Smoke tests for the main window wiring."""

import random

import pytest
from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest
from tictactoe.config import GameConfig
from tictactoe.controller import GameController
from tictactoe.game_logic import EMPTY, PLAYER_VS_COMPUTER, PLAYER_VS_PLAYER, GameSession, GameSnapshot
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import PULSE_STYLE, TURN_STYLE, TicTacToeWindow


@pytest.fixture
def window(qapp):
    config = GameConfig()
    win = TicTacToeWindow(config, GameController(config, rng=random.Random(0)))
    yield win
    win.close()


class TestTicTacToeWindow:
    """Test status, board and controls."""

    def test_initial_status(self, window) -> None:
        assert window.message_label.text() == "Next player: X"
        assert window.status_pulsing
        assert not window.symbol_widget.isVisibleTo(window)

    def test_click_updates_board_and_status(self, window) -> None:
        window.board_widget.cell_clicked.emit(4)
        assert window.board_widget.snapshot.board[4] == "X"
        assert window.message_label.text() == "Next player: O"

    def test_win_disables_board(self, window) -> None:
        for i in (0, 4, 1, 3, 2):
            window.board_widget.cell_clicked.emit(i)
        assert window.message_label.text() == "Winner: X"
        assert not window.board_widget.accepts_clicks()
        assert set(window.board_widget.snapshot.winning_line) == {0, 1, 2}

    def test_mode_switch_resets_and_shows_picker(self, window) -> None:
        window.board_widget.cell_clicked.emit(0)
        window.pvc_radio.setChecked(True)
        assert window.controller.session.mode == PLAYER_VS_COMPUTER
        assert window.symbol_widget.isVisibleTo(window)
        assert window.board_widget.snapshot.board == (EMPTY,) * 9
        assert window.message_label.text() == "Your turn"
        window.pvp_radio.setChecked(True)
        assert window.controller.session.mode == PLAYER_VS_PLAYER

    def test_play_as_o_hands_first_move_to_computer(self, window) -> None:
        window.pvc_radio.setChecked(True)
        window.play_o_radio.setChecked(True)
        assert window.message_label.text() == "Computer's turn"
        assert not window.board_widget.accepts_clicks()
        window.controller.play_computer_move()
        assert window.message_label.text() == "Your turn"
        assert window.board_widget.accepts_clicks()

    def test_reset_button(self, window) -> None:
        window.board_widget.cell_clicked.emit(0)
        window.reset_button.click()
        assert window.board_widget.snapshot.board == (EMPTY,) * 9
        assert window.message_label.text() == "Next player: X"

    def test_cell_at_maps_coordinates(self, window) -> None:
        window.board_widget.resize(300, 300)
        assert window.board_widget.cell_at(10, 10) == 0
        assert window.board_widget.cell_at(150, 150) == 4
        assert window.board_widget.cell_at(290, 290) == 8
        assert window.board_widget.cell_at(-1, 10) is None

    def test_reset_on_fresh_board_pulses(self, window) -> None:
        window._pulse_timer.stop()
        window._end_status_pulse()
        assert not window.status_pulsing
        window.reset_button.click()
        assert window.message_label.text() == "Next player: X"
        assert window.status_pulsing
        assert window.message_label.styleSheet() == PULSE_STYLE

    def test_pulse_ends_after_delay(self, qapp) -> None:
        config = GameConfig(status_pulse_ms=10)
        win = TicTacToeWindow(config)
        try:
            assert win.status_pulsing
            QTest.qWait(50)
            assert not win.status_pulsing
            assert win.message_label.styleSheet() == TURN_STYLE
        finally:
            win.close()

    def test_mouse_click_plays_center(self, window) -> None:
        window.show()
        QTest.qWait(20)
        board = window.board_widget
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, board.rect().center())
        assert window.controller.snapshot().board[4] == "X"
        assert board.snapshot.board[4] == "X"
        assert window.message_label.text() == "Next player: O"


@pytest.fixture
def board(qapp):
    widget = BoardWidget()
    widget.resize(300, 300)
    widget.clicks = []
    widget.cell_clicked.connect(widget.clicks.append)
    yield widget
    widget.close()


def won_snapshot() -> GameSnapshot:
    session = GameSession()
    for i in (0, 4, 1, 3, 2):
        session.submit_move(i)
    return session.snapshot()


class TestBoardWidget:
    """Test painting and click mapping on the board itself."""

    def test_starts_blank(self, board) -> None:
        assert board.snapshot == GameSnapshot.blank()
        assert board.snapshot == GameSession().snapshot()

    def test_click_emits_cell_index(self, board) -> None:
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(10, 10))
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(150, 150))
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(290, 290))
        assert board.clicks == [0, 4, 8]

    def test_click_on_occupied_cell_ignored(self, board) -> None:
        session = GameSession()
        session.submit_move(4)
        board.set_snapshot(session.snapshot())
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(150, 150))
        assert board.clicks == []

    def test_clicks_ignored_when_disabled_or_over(self, board) -> None:
        board.set_accept_clicks(False)
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(250, 250))
        board.set_accept_clicks(True)
        board.set_snapshot(won_snapshot())
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(250, 250))
        assert board.clicks == []

    def test_paint_highlights_winning_line(self, board) -> None:
        board.set_snapshot(won_snapshot())
        image = board.grab().toImage()
        assert not image.isNull()
        # corner of cell 0 (on the line) vs corner of empty cell 6
        assert image.pixelColor(10, 10) != image.pixelColor(10, 210)

    def test_paint_blank_board(self, board) -> None:
        image = board.grab().toImage()
        assert image.pixelColor(10, 10) == image.pixelColor(10, 210)
