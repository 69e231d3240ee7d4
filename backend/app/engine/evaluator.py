"""
Static Evaluator

Heuristic score of a position from the perspective of `player`:
center control + every 4-cell window + a fixed set of key squares.
The weights are fixed: the rationale cutoffs in search.py (500, 900)
assume this exact scale.
"""

from typing import List, Sequence

from backend.app.engine.board import Board
from backend.app.engine.constants import ROWS, COLS, CENTER_COL, EMPTY, other_player

CENTER_WEIGHT = 3
KEY_SQUARE_WEIGHT = 2

# Bottom row + the central band of rows 2-3
KEY_SQUARES = tuple(
    [(ROWS - 1, c) for c in range(COLS)]
    + [(2, 0), (2, 6), (2, 1), (2, 5), (2, 2), (2, 3), (2, 4)]
    + [(3, 1), (3, 2), (3, 3), (3, 4), (3, 5)]
)


def _windows(board: Board) -> List[Sequence[int]]:
    windows = []
    # Horizontal
    for r in range(ROWS):
        for c in range(COLS - 3):
            windows.append([board[r][c + i] for i in range(4)])
    # Vertical
    for r in range(ROWS - 3):
        for c in range(COLS):
            windows.append([board[r + i][c] for i in range(4)])
    # Diagonal \ (down-right)
    for r in range(ROWS - 3):
        for c in range(COLS - 3):
            windows.append([board[r + i][c + i] for i in range(4)])
    # Diagonal / (up-right)
    for r in range(3, ROWS):
        for c in range(COLS - 3):
            windows.append([board[r - i][c + i] for i in range(4)])
    return windows


def score_window(window: Sequence[int], player: int) -> int:
    opponent = other_player(player)
    own = window.count(player)
    theirs = window.count(opponent)
    empty = window.count(EMPTY)

    # Dead window: neither side can complete it
    if own > 0 and theirs > 0:
        return 0

    if own == 4:
        return 100
    if own == 3 and empty == 1:
        return 5
    if own == 2 and empty == 2:
        return 2
    if own == 1 and empty == 3:
        return 1

    # Opponent three is an immediate tactical emergency
    if theirs == 3 and empty == 1:
        return -10
    if theirs == 2 and empty == 2:
        return -2
    return 0


def score_center(board: Board, player: int) -> int:
    opponent = other_player(player)
    score = 0
    for r in range(ROWS):
        cell = board[r][CENTER_COL]
        if cell == player:
            score += CENTER_WEIGHT
        elif cell == opponent:
            score -= CENTER_WEIGHT
    return score


def score_key_squares(board: Board, player: int) -> int:
    opponent = other_player(player)
    score = 0
    for r, c in KEY_SQUARES:
        cell = board[r][c]
        if cell == player:
            score += KEY_SQUARE_WEIGHT
        elif cell == opponent:
            score -= KEY_SQUARE_WEIGHT
    return score


def evaluate(board: Board, player: int) -> int:
    score = score_center(board, player)
    score += sum(score_window(w, player) for w in _windows(board))
    score += score_key_squares(board, player)
    return score
