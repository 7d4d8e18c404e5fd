from ..game_logic import Draw, Mark, Won, apply_move, initial_state, reset
from ..messages import status_message, turn_label
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

# status label looks, keyed by what the game is doing
TURN_STYLE = "color: #8acaff; font-weight: bold;"
WIN_STYLE = "color: lime; font-weight: bold;"
DRAW_STYLE = "color: #eee; font-weight: bold;"
PILL_X_STYLE = "color: #8acaff; border: 1px solid #8acaff; border-radius: 8px; padding: 2px 8px;"
PILL_O_STYLE = "color: #ff8a8a; border: 1px solid #ff8a8a; border-radius: 8px; padding: 2px 8px;"


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_state = initial_state()
        self.game_number = 1              # bumped on every new game
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui()
        self._render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setAccessibleName("Tic Tac Toe Game")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + subtitle + status
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # new game + turn pill
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        self.header_widget = QWidget()
        vl = QVBoxLayout(self.header_widget)
        title = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(18); f.setBold(True); title.setFont(f)
        subtitle = QLabel("Two players on the same device")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAccessibleName("Game status")
        for w in (title, subtitle, self.message_label):
            w.setAlignment(Qt.AlignCenter)
            vl.addWidget(w)

    def _create_bottom_controls(self):
        # new game button + turn pill
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.reset_button = QPushButton("New Game")
        self.reset_button.setAccessibleName("Reset and start a new game")
        self.reset_button.clicked.connect(self.reset_game)
        self.turn_pill = QLabel("")
        self.turn_pill.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Preferred)
        hl.addWidget(self.reset_button); hl.addStretch(1); hl.addWidget(self.turn_pill)

    def _update_message(self, text, style):
        # set message text + style
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _render(self):
        # push current state into every widget
        state = self.game_state
        status = state.status
        if isinstance(status, Won):
            style = WIN_STYLE
        elif isinstance(status, Draw):
            style = DRAW_STYLE
        else:
            style = TURN_STYLE
        self._update_message(status_message(state), style)
        self.board_widget.set_state(state)
        pill = turn_label(state)
        self.turn_pill.setText(pill)
        self.turn_pill.setVisible(bool(pill))
        self.turn_pill.setStyleSheet(PILL_X_STYLE if state.active_player is Mark.X
                                     else PILL_O_STYLE)

    @Slot(int)
    def _on_cell_clicked(self, index):
        new_state = apply_move(self.game_state, index)
        # same object back means the click was ignored
        if new_state is self.game_state:
            return
        self.game_state = new_state
        self._render()

    @Slot()
    def reset_game(self):
        # fresh game, old one is discarded
        self.game_state = reset()
        self.game_number += 1
        print(f"new game #{self.game_number}")
        self._render()
