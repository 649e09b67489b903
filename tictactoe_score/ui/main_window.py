import logging

from ..game_logic import GameEngine, Mark, MoveResult
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic Tac Toe"
SUBTITLE = "Two players, one device. Take turns and win the line."

HELP_WIN = "Winning line highlighted."
HELP_DRAW = "No more moves - restart to play again."
HELP_PLAYING = "Tip: You can't overwrite a square once placed."

STYLE_PLAYING = "color: #8acaff; font-weight: bold;"
STYLE_WIN = "color: lime; font-weight: bold;"
STYLE_DRAW = "color: #f0c674; font-weight: bold;"


def status_text(status, current_mark):
    # headline shown above the board
    if status.winner is not None:
        return f"{status.winner.value} wins!"
    if status.is_draw:
        return "It's a draw!"
    return f"Current player: {current_mark.value}"


def helper_text(status):
    if status.winner is not None:
        return HELP_WIN
    if status.is_draw:
        return HELP_DRAW
    return HELP_PLAYING


class TicTacToeWindow(QMainWindow):
    """
    main window: scoreboard, board, restart buttons
    """
    def __init__(self, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + status + scores
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.helper_label = QLabel("")
        self.helper_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.helper_label)

        self._create_bottom_controls()     # restart buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.restart_game)
        scores_action = QAction("Reset Scores", self)
        scores_action.triggered.connect(self.reset_game_and_scores)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, scores_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        '''title, status line and scoreboard'''
        self.header_widget = QWidget()
        layout = QVBoxLayout(self.header_widget)
        title = QLabel(WINDOW_TITLE)
        f = QFont(); f.setPointSize(18); f.setBold(True); title.setFont(f)
        subtitle = QLabel(SUBTITLE)
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAccessibleName("Game status")
        for w in (title, subtitle, self.status_label):
            w.setAlignment(Qt.AlignCenter)
            layout.addWidget(w)

        score_row = QHBoxLayout()
        self.score_x_label = QLabel(""); self.score_o_label = QLabel("")
        self.score_draws_label = QLabel("")
        for w in (self.score_x_label, self.score_o_label, self.score_draws_label):
            w.setAlignment(Qt.AlignCenter)
            w.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
            score_row.addWidget(w)
        layout.addLayout(score_row)

    def _create_bottom_controls(self):
        # restart keeps score, reset clears it
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.restart_button = QPushButton("Restart Game")
        self.restart_button.clicked.connect(self.restart_game)
        self.reset_scores_button = QPushButton("Reset Game && Scores")
        self.reset_scores_button.setAccessibleName("Reset Game & Scores")
        self.reset_scores_button.clicked.connect(self.reset_game_and_scores)
        for w in (None, self.restart_button, self.reset_scores_button, None):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def refresh(self):
        """
        re-render every label from the engine snapshot
        """
        status = self.engine.status
        self.status_label.setText(status_text(status, self.engine.current_mark))
        if status.winner is not None:
            style = STYLE_WIN
        elif status.is_draw:
            style = STYLE_DRAW
        else:
            style = STYLE_PLAYING
        self.status_label.setStyleSheet(style)
        self.helper_label.setText(helper_text(status))

        score = self.engine.score
        for mark, label in ((Mark.X, self.score_x_label), (Mark.O, self.score_o_label)):
            label.setText(f"{mark.value}: {score.wins_for(mark)}")
        self.score_draws_label.setText(f"Draws: {score.draws}")

        self.board_widget.refresh()

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.engine.apply_move(index)
        if not res.accepted:
            # board already disables these; nothing to show
            logger.debug("click on %d rejected: %s", index, res.value)
            return
        if res is not MoveResult.CONTINUE:
            logger.info("round over: %s", status_text(self.engine.status,
                                                     self.engine.current_mark))
        self.refresh()

    @Slot()
    def restart_game(self):
        # new round, scores kept
        self.engine.reset(keep_score=True)
        self.refresh()

    @Slot()
    def reset_game_and_scores(self):
        self.engine.reset(keep_score=False)
        self.refresh()
