"""
Cheap deterministic move used when a search misses its time budget:
win now if possible, else block the opponent's immediate win, else play
the center-most legal column.
"""

from backend.app.engine.board import Board, legal_columns, drop, landing_row, is_winning_line
from backend.app.engine.constants import COLUMN_ORDER, NO_MOVE, other_player


def find_winning_column(board: Board, player: int) -> int:
    """First column (left to right) where `player` completes four, or NO_MOVE."""
    for col in legal_columns(board):
        row = landing_row(board, col)
        if is_winning_line(drop(board, col, player), row, col):
            return col
    return NO_MOVE


def fallback_move(board: Board, player: int) -> int:
    winning = find_winning_column(board, player)
    if winning != NO_MOVE:
        return winning

    blocking = find_winning_column(board, other_player(player))
    if blocking != NO_MOVE:
        return blocking

    legal = set(legal_columns(board))
    for col in COLUMN_ORDER:
        if col in legal:
            return col
    return NO_MOVE
