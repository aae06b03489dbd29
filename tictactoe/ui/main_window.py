import logging

from ..config import GameConfig
from ..controller import GameController
from ..game_logic import PLAYER_VS_COMPUTER, PLAYER_VS_PLAYER, describe_status
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu,
    QRadioButton, QGroupBox, QButtonGroup, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)

BASE_STYLE = "color: #333;"
TURN_STYLE = "color: #1976d2;"
SUCCESS_STYLE = "color: #2e7d32; font-weight: bold;"
PULSE_STYLE = "color: #e53935; font-weight: bold;"


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, config=None, controller=None):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.config = config or GameConfig()
        self.controller = controller or GameController(self.config, parent=self)
        self.board_widget = BoardWidget(parent=self)
        self._status_style = BASE_STYLE
        # clears the pulse style after each status change
        self._pulse_timer = QTimer(self)
        self._pulse_timer.setSingleShot(True)
        self._pulse_timer.setInterval(self.config.status_pulse_ms)
        self._pulse_timer.timeout.connect(self._end_status_pulse)

        self._setup_ui()
        self.controller.snapshot_changed.connect(self._on_snapshot)
        self.controller.start()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.config.window_title)
        self.setStyleSheet("""
            QMainWindow { background-color: #f5f7fb; }
            QGroupBox { font-weight: bold; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_status_label()        # status above the board
        self.main_layout.addWidget(self.message_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.controller.human_move)

        self._create_game_controls()       # mode + symbol + reset
        self.main_layout.addWidget(self.controls_group)
        self._update_symbol_picker_visibility()

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.controller.reset)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_status_label(self):
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

    def _create_game_controls(self):
        '''mode, symbol picker and reset'''
        self.controls_group = QGroupBox("Game")
        layout = QVBoxLayout()
        # mode radios
        mode_layout = QHBoxLayout()
        self.pvp_radio = QRadioButton("Player vs Player")
        self.pvc_radio = QRadioButton("Player vs Computer")
        self.mode_buttons = QButtonGroup(self)
        for radio in (self.pvp_radio, self.pvc_radio):
            self.mode_buttons.addButton(radio); mode_layout.addWidget(radio)
        mode_layout.addStretch()
        layout.addLayout(mode_layout)
        # symbol picker, only shown vs computer
        self.symbol_widget = QWidget()
        symbol_layout = QHBoxLayout(self.symbol_widget)
        symbol_layout.setContentsMargins(0, 0, 0, 0)
        symbol_layout.addWidget(QLabel("Play as:"))
        self.play_x_radio = QRadioButton("X")
        self.play_o_radio = QRadioButton("O")
        self.symbol_buttons = QButtonGroup(self)
        for radio in (self.play_x_radio, self.play_o_radio):
            self.symbol_buttons.addButton(radio); symbol_layout.addWidget(radio)
        symbol_layout.addStretch()
        layout.addWidget(self.symbol_widget)
        # initial state from config, before signals are hooked up
        session = self.controller.session
        (self.pvc_radio if session.mode == PLAYER_VS_COMPUTER else self.pvp_radio).setChecked(True)
        (self.play_o_radio if session.human_symbol == 'O' else self.play_x_radio).setChecked(True)
        self.pvc_radio.toggled.connect(self._on_mode_toggled)
        self.play_o_radio.toggled.connect(self._on_symbol_toggled)

        self.reset_button = QPushButton("Reset Game")
        self.reset_button.clicked.connect(self.controller.reset)
        layout.addWidget(self.reset_button, alignment=Qt.AlignCenter)
        self.controls_group.setLayout(layout)

    def _update_symbol_picker_visibility(self):
        # picker only matters vs computer
        self.symbol_widget.setVisible(self.pvc_radio.isChecked())

    @Slot(bool)
    def _on_mode_toggled(self, checked):
        mode = PLAYER_VS_COMPUTER if checked else PLAYER_VS_PLAYER
        self._update_symbol_picker_visibility()
        if mode != self.controller.session.mode:
            self.controller.set_mode(mode)

    @Slot(bool)
    def _on_symbol_toggled(self, checked):
        symbol = 'O' if checked else 'X'
        if symbol != self.controller.session.human_symbol:
            self.controller.set_human_symbol(symbol)

    @Slot(object)
    def _on_snapshot(self, snapshot):
        # redraw board, refresh status; every state change pulses
        self.board_widget.set_snapshot(snapshot)
        self.board_widget.set_accept_clicks(not snapshot.is_computer_turn)
        self._update_message(describe_status(snapshot),
                             is_success=snapshot.is_over,
                             is_turn=not snapshot.is_over,
                             pulse=True)

    def _update_message(self, text, is_success=False, is_turn=False, pulse=False):
        # set message text + style, pulse on request or when it changes
        style = BASE_STYLE
        if is_success: style = SUCCESS_STYLE
        elif is_turn:  style = TURN_STYLE
        self._status_style = style
        changed = text != self.message_label.text()
        self.message_label.setText(text)
        if pulse or changed:
            self.message_label.setStyleSheet(PULSE_STYLE)
            self._pulse_timer.start()
        elif not self._pulse_timer.isActive():
            self.message_label.setStyleSheet(style)

    @property
    def status_pulsing(self):
        return self._pulse_timer.isActive()

    @Slot()
    def _end_status_pulse(self):
        self.message_label.setStyleSheet(self._status_style)

    def closeEvent(self, event):
        # drop any pending computer move
        self.controller.stop()
        self._pulse_timer.stop()
        logger.debug("window closed")
        event.accept()
