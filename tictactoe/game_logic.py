from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

BOARD_SIZE = 3                       # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# checked in this order: rows, cols, diagonals
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(Enum):
    """
    content of one cell
    """
    EMPTY = ''
    X = 'X'
    O = 'O'

    @property
    def other(self):
        # swap X <-> O, empty stays empty
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.EMPTY


Board = Tuple[Mark, ...]


@dataclass(frozen=True)
class Ongoing:
    pass


@dataclass(frozen=True)
class Won:
    player: Mark
    line: Tuple[int, int, int]


@dataclass(frozen=True)
class Draw:
    pass


Status = Union[Ongoing, Won, Draw]

EMPTY_BOARD: Board = (Mark.EMPTY,) * CELL_COUNT


def index_of(row: int, col: int) -> int:
    """
    row-major cell index for (row, col)
    """
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"cell ({row}, {col}) is off the board")
    return row * BOARD_SIZE + col


def evaluate_status(board: Board) -> Status:
    """
    scan the win lines in fixed order, then check for a full board
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not Mark.EMPTY and board[a] is board[b] is board[c]:
            return Won(board[a], line)
    if all(cell is not Mark.EMPTY for cell in board):
        return Draw()
    return Ongoing()


@dataclass(frozen=True)
class GameState:
    """
    one immutable snapshot of the game

    status is derived from the board every time it is read, so it can
    never disagree with the cells.
    """
    board: Board = EMPTY_BOARD
    active_player: Mark = Mark.X

    def __post_init__(self):
        if len(self.board) != CELL_COUNT:
            raise ValueError(f"board needs {CELL_COUNT} cells, got {len(self.board)}")
        if self.active_player is Mark.EMPTY:
            raise ValueError("active player must be X or O")
        # accept lists from callers but always store a tuple
        object.__setattr__(self, 'board', tuple(self.board))

    @property
    def status(self) -> Status:
        return evaluate_status(self.board)

    @property
    def is_over(self) -> bool:
        return not isinstance(self.status, Ongoing)

    @property
    def winner(self) -> Optional[Mark]:
        status = self.status
        return status.player if isinstance(status, Won) else None

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        status = self.status
        return status.line if isinstance(status, Won) else None

    @property
    def move_count(self) -> int:
        return sum(1 for cell in self.board if cell is not Mark.EMPTY)

    def cell(self, row: int, col: int) -> Mark:
        return self.board[index_of(row, col)]


def initial_state() -> GameState:
    """
    empty board, X to move
    """
    return GameState(EMPTY_BOARD, Mark.X)


def reset() -> GameState:
    """
    throw the old game away and start a fresh one
    """
    return initial_state()


def is_legal_move(state: GameState, index) -> bool:
    """
    true if index is on the board, the cell is empty and nobody has won
    """
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    if not 0 <= index < CELL_COUNT:
        return False
    return state.board[index] is Mark.EMPTY and not state.is_over


def apply_move(state: GameState, index) -> GameState:
    """
    place the active player's mark at index and hand the turn over

    illegal clicks (filled cell, finished game, bad index) are ignored:
    the same state object comes back untouched.
    """
    if not is_legal_move(state, index):
        return state
    board = list(state.board)
    board[index] = state.active_player
    return GameState(tuple(board), state.active_player.other)
