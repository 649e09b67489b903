import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

BOARD_CELLS = 9

# rows, cols, diags - scan order decides ties
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(Enum):
    """
    symbol a player puts on a cell
    """
    X = "X"
    O = "O"

    def opposite(self):
        return Mark.O if self is Mark.X else Mark.X


STARTING_MARK = Mark.X


class GamePhase(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class MoveResult(Enum):
    """
    outcome of apply_move: three accepted, three rejected
    """
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    GAME_OVER = "game_over"
    CELL_OCCUPIED = "cell_occupied"
    INDEX_OUT_OF_RANGE = "index_out_of_range"

    @property
    def accepted(self):
        return self in (MoveResult.CONTINUE, MoveResult.WIN, MoveResult.DRAW)


@dataclass(frozen=True)
class GameStatus:
    """
    derived from the board, never stored
    """
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False

    @property
    def is_over(self):
        return self.winner is not None or self.is_draw

    @property
    def phase(self):
        if self.winner is not None:
            return GamePhase.WON
        if self.is_draw:
            return GamePhase.DRAWN
        return GamePhase.IN_PROGRESS


@dataclass
class Score:
    """
    running totals across rounds
    """
    x: int = 0
    o: int = 0
    draws: int = 0

    def add_win(self, mark):
        if mark is Mark.X:
            self.x += 1
        else:
            self.o += 1

    def add_draw(self):
        self.draws += 1

    def wins_for(self, mark):
        return self.x if mark is Mark.X else self.o

    def as_dict(self):
        return {"X": self.x, "O": self.o, "draws": self.draws}


def evaluate(board) -> GameStatus:
    """
    scan win lines in order, first uniform line wins;
    full board with no line is a draw
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return GameStatus(winner=board[a], winning_line=line)
    full = all(cell is not None for cell in board)
    return GameStatus(is_draw=full)


class GameEngine:
    """
    tic-tac-toe rules, turn order and score for one device.
    the ui reads board/current_mark/status/score and calls
    apply_move() on clicks and reset() on restart.
    """
    def __init__(self):
        self._board = [None] * BOARD_CELLS   # None = empty
        self._current_mark = STARTING_MARK
        self._score = Score()

    @property
    def board(self):
        # copy so callers can't write cells behind our back
        return list(self._board)

    @property
    def current_mark(self):
        return self._current_mark

    @property
    def status(self):
        return evaluate(self._board)

    @property
    def phase(self):
        return self.status.phase

    @property
    def score(self):
        s = self._score
        return Score(s.x, s.o, s.draws)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if _valid_index(index):
            return self._board[index] is None
        return False

    def empty_cells(self):
        return [i for i, cell in enumerate(self._board) if cell is None]

    def apply_move(self, index):
        """
        place current mark at index, score a decided game, flip turn.
        rejected moves leave every piece of state untouched.
        """
        if self.status.is_over:
            logger.debug("move at %r ignored: game over", index)
            return MoveResult.GAME_OVER
        if not _valid_index(index):
            logger.debug("move at %r ignored: out of range", index)
            return MoveResult.INDEX_OUT_OF_RANGE
        if self._board[index] is not None:
            logger.debug("move at %d ignored: cell taken", index)
            return MoveResult.CELL_OCCUPIED

        mark = self._current_mark
        self._board[index] = mark
        logger.debug("%s placed at %d", mark.value, index)

        result = evaluate(self._board)
        if result.winner is not None:
            self._score.add_win(result.winner)
            outcome = MoveResult.WIN
            logger.info("%s wins on line %s", result.winner.value, result.winning_line)
        elif result.is_draw:
            self._score.add_draw()
            outcome = MoveResult.DRAW
            logger.info("game drawn")
        else:
            outcome = MoveResult.CONTINUE

        # flips even on the final move; nothing can observe it until reset
        self._current_mark = mark.opposite()
        return outcome

    def reset(self, keep_score=True):
        """
        empty board, X to move; zero the score unless keep_score
        """
        self._board = [None] * BOARD_CELLS
        self._current_mark = STARTING_MARK
        if not keep_score:
            self._score = Score()
        logger.info("board reset (keep_score=%s)", keep_score)


def _valid_index(index):
    # bool is an int subclass, keep it out
    return isinstance(index, int) and not isinstance(index, bool) \
        and 0 <= index < BOARD_CELLS
