"""
Board Model

Pure helpers over a 6x7 grid of ints (0=Empty, 1=Player1, 2=Player2).
Row 0 is the TOP of the board, row 5 the BOTTOM. Nothing here mutates the
board it is given, except `played`, which works on a private search copy.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List

from backend.app.engine.constants import ROWS, COLS, EMPTY, COLUMN_FULL

logger = logging.getLogger(__name__)

Board = List[List[int]]

# Directions: Horizontal, Vertical, Diagonal /, Diagonal \
DIRECTIONS = ((0, 1), (1, 0), (1, -1), (1, 1))


class ColumnFullError(ValueError):
    """Raised when a piece is dropped into a column with no empty cell."""


def empty_board() -> Board:
    return [[EMPTY for _ in range(COLS)] for _ in range(ROWS)]


def copy_board(board: Board) -> Board:
    return [list(row) for row in board]


def legal_columns(board: Board) -> List[int]:
    """Returns the column indices (ascending) whose top cell is empty."""
    return [c for c in range(COLS) if board[0][c] == EMPTY]


def landing_row(board: Board, col: int) -> int:
    """Lowest empty row in `col`, or COLUMN_FULL."""
    if board[0][col] != EMPTY:
        return COLUMN_FULL
    # Gravity: Find the lowest empty row
    for r in range(ROWS - 1, -1, -1):
        if board[r][col] == EMPTY:
            return r
    return COLUMN_FULL


def drop(board: Board, col: int, player: int) -> Board:
    """Returns a NEW board with `player`'s piece dropped into `col`."""
    row = landing_row(board, col)
    if row == COLUMN_FULL:
        raise ColumnFullError(f"Column {col} is full")
    new_board = copy_board(board)
    new_board[row][col] = player
    return new_board


@contextmanager
def played(board: Board, col: int, player: int) -> Iterator[int]:
    """
    Places a piece in-place for the duration of the block, then reverts it.
    Yields the row the piece landed on. Only used on search-private copies.
    """
    row = landing_row(board, col)
    if row == COLUMN_FULL:
        raise ColumnFullError(f"Column {col} is full")
    board[row][col] = player
    try:
        yield row
    finally:
        board[row][col] = EMPTY


def is_winning_line(board: Board, r: int, c: int) -> bool:
    """Checks for 4-in-a-row passing through the piece at (r, c)."""
    player = board[r][c]
    if player == EMPTY:
        return False

    for dr, dc in DIRECTIONS:
        count = 1
        # Check positive direction
        for i in range(1, 4):
            nr, nc = r + dr * i, c + dc * i
            if 0 <= nr < ROWS and 0 <= nc < COLS and board[nr][nc] == player:
                count += 1
            else:
                break
        # Check negative direction
        for i in range(1, 4):
            nr, nc = r - dr * i, c - dc * i
            if 0 <= nr < ROWS and 0 <= nc < COLS and board[nr][nc] == player:
                count += 1
            else:
                break

        if count >= 4:
            return True
    return False


def is_full(board: Board) -> bool:
    return all(board[0][c] != EMPTY for c in range(COLS))


def is_terminal(board: Board) -> bool:
    """Full board, or any occupied cell is part of a four."""
    if is_full(board):
        return True
    for r in range(ROWS):
        for c in range(COLS):
            if board[r][c] != EMPTY and is_winning_line(board, r, c):
                return True
    return False


def piece_count(board: Board) -> int:
    return sum(1 for row in board for cell in row if cell != EMPTY)


def render(board: Board) -> str:
    """Generates an ASCII grid representation."""
    symbols = {0: ".", 1: "X", 2: "O"}
    header = " " + " ".join(str(i) for i in range(COLS))
    rows_str = ["|" + "|".join(symbols[cell] for cell in row) + "|" for row in board]
    return header + "\n" + "\n".join(rows_str)
