import logging
import random
from typing import Optional

from backend.app.engine.board import Board, piece_count
from backend.app.engine.constants import ROWS, CENTER_COL, EMPTY, NO_MOVE

logger = logging.getLogger(__name__)

# Center column is the strongest first move
EMPTY_BOARD_REPLIES = (3,)
# Good responses to an opponent center opening
CENTER_OPENING_REPLIES = (2, 3, 4)


def lookup(board: Board, mover: int, rng: Optional[random.Random] = None) -> int:
    """
    Returns a book column for the first or second move of a game, or NO_MOVE.
    Both book lines are colour-independent, so `mover` only feeds the log.
    """
    count = piece_count(board)

    if count == 0:
        logger.debug("Opening book: empty board, player %s", mover)
        return EMPTY_BOARD_REPLIES[0]

    if count == 1 and board[ROWS - 1][CENTER_COL] != EMPTY:
        rng = rng or random.Random()
        column = rng.choice(CENTER_OPENING_REPLIES)
        logger.debug("Opening book: reply %s to center opening", column)
        return column

    return NO_MOVE
