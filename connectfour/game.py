"""Game logic: board state, gravity drops, turn order, and win detection."""

from __future__ import annotations

import logging
from typing import Callable, Literal

logger = logging.getLogger(__name__)

ROWS = 4
COLS = 4
WIN_LENGTH = 4

RED = "red"
BLACK = "black"

Player = Literal["red", "black"]
Cell = Player | None
Board = list[list[Cell]]

PLAYING = "playing"
WON = "won"

# Four directions: horizontal, vertical, diagonal ↘, diagonal ↙
DIRECTIONS = [
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
]


class MoveError(Exception):
    """A drop the engine refuses. State is left untouched."""

    code = "invalid_move"
    message = "Invalid move"

    def __init__(self, column: int | None = None):
        super().__init__(self.message)
        self.column = column


class InvalidColumn(MoveError):
    code = "invalid_column"
    message = "Column out of range"


class ColumnFull(MoveError):
    code = "column_full"
    message = "Column is full"


class GameAlreadyWon(MoveError):
    code = "game_already_won"
    message = "Game is already over"


def empty_board(rows: int = ROWS, cols: int = COLS) -> Board:
    return [[None] * cols for _ in range(rows)]


def check_win(board: Board, row: int, col: int, player: Cell) -> bool:
    """Check if the piece at (row, col) gives ``player`` four in a row."""
    if player is None:
        return False
    rows, cols = len(board), len(board[0])

    for dr, dc in DIRECTIONS:
        count = 1

        # Extend in positive direction
        for i in range(1, WIN_LENGTH):
            r, c = row + dr * i, col + dc * i
            if r < 0 or r >= rows or c < 0 or c >= cols:
                break
            if board[r][c] != player:
                break
            count += 1

        # Extend in negative direction
        for i in range(1, WIN_LENGTH):
            r, c = row - dr * i, col - dc * i
            if r < 0 or r >= rows or c < 0 or c >= cols:
                break
            if board[r][c] != player:
                break
            count += 1

        if count >= WIN_LENGTH:
            return True

    return False


Listener = Callable[["GameState"], None]


class GameState:
    def __init__(self, rows: int = ROWS, cols: int = COLS):
        self.rows = rows
        self.cols = cols
        self._board: Board = empty_board(rows, cols)
        self.current_turn: Player = RED
        self.status: str = PLAYING
        self.winner: Player | None = None
        self.move_count: int = 0
        self._listeners: list[Listener] = []

    @property
    def board(self) -> Board:
        """Snapshot of the grid; mutating it does not touch the game."""
        return [row[:] for row in self._board]

    @property
    def is_game_over(self) -> bool:
        return self.status == WON

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    def _in_range(self, column) -> bool:
        # bool is an int subclass but never a column
        if not isinstance(column, int) or isinstance(column, bool):
            return False
        return 0 <= column < self.cols

    def is_column_full(self, column: int) -> bool:
        if not self._in_range(column):
            raise InvalidColumn(column)
        return self._board[0][column] is not None

    def full_columns(self) -> list[bool]:
        return [cell is not None for cell in self._board[0]]

    def valid_columns(self) -> list[int]:
        if self.is_game_over:
            return []
        return [c for c in range(self.cols) if self._board[0][c] is None]

    def validate_drop(self, column: int) -> MoveError | None:
        """Return the error a drop into ``column`` would hit, or None if valid."""
        if self.is_game_over:
            return GameAlreadyWon(column)
        if not self._in_range(column):
            return InvalidColumn(column)
        if self._board[0][column] is not None:
            return ColumnFull(column)
        return None

    def drop(self, column: int) -> int | None:
        """Drop the current player's piece. Invalid drops are a no-op returning None."""
        error = self.validate_drop(column)
        if error:
            logger.debug("Ignored drop into column %s: %s", column, error.message)
            return None
        return self._place(column)

    def play(self, column: int) -> int:
        """Like drop(), but raises a MoveError instead of ignoring the move."""
        error = self.validate_drop(column)
        if error:
            raise error
        return self._place(column)

    def _place(self, column: int) -> int:
        player = self.current_turn
        for row in range(self.rows - 1, -1, -1):
            if self._board[row][column] is None:
                break
        else:
            raise ColumnFull(column)

        self._board[row][column] = player
        self.move_count += 1
        logger.info("%s dropped into column %d, landed on row %d", player, column, row)

        if check_win(self._board, row, column, player):
            self.status = WON
            self.winner = player
            logger.info("%s wins after %d moves", player, self.move_count)
        else:
            # Switch turn
            self.current_turn = BLACK if player == RED else RED

        self._notify()
        return row

    def reset(self):
        self._board = empty_board(self.rows, self.cols)
        self.current_turn = RED
        self.status = PLAYING
        self.winner = None
        self.move_count = 0
        logger.info("Board reset")
        self._notify()
