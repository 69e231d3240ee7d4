"""
Search Engine

Depth-limited minimax with alpha-beta pruning. Every legal root column is
searched with a full window so each one gets its own exact score for the
ranked explanation, not just the best one.

Candidate columns are tried center-out (COLUMN_ORDER) at every ply; the
node counts asserted in tests depend on that order.
"""

import logging
import math
from typing import List

from pydantic import BaseModel, Field

from backend.app.engine.board import Board, copy_board, legal_columns, played, is_winning_line, is_terminal
from backend.app.engine.constants import COLUMN_ORDER, EMPTY, WIN_SCORE, NO_MOVE, other_player
from backend.app.engine.evaluator import evaluate
from backend.app.models.enums import Rationale

logger = logging.getLogger(__name__)


class SearchThought(BaseModel):
    column: int = Field(description="Column index (0-6).")
    score: int
    reason: Rationale
    depth: int = Field(description="Search depth in plies.")
    evaluations: int = Field(default=0, description="Leaf evaluations for this branch.")


class SearchReport(BaseModel):
    thoughts: List[SearchThought] = Field(default_factory=list)
    evaluations: int = 0

    @property
    def best_column(self) -> int:
        return self.thoughts[0].column if self.thoughts else NO_MOVE


def classify(score: int) -> Rationale:
    """Buckets a root score into a short rationale tag."""
    if score > 900:
        return Rationale.WIN_DETECTED
    if score > 500:
        return Rationale.VERY_STRONG
    if score > 100:
        return Rationale.GOOD
    if score < -900:
        return Rationale.OPPONENT_WIN
    if score < -500:
        return Rationale.DANGEROUS
    if score == 0:
        return Rationale.NEUTRAL
    return Rationale.EVALUATED


class MinimaxSearch:
    def __init__(self, mover: int):
        self.mover = mover
        self.evaluations = 0

    def minimax(self, board: Board, depth: int, alpha: float, beta: float,
                maximizing: bool, current: int) -> int:
        # Base case: depth limit or game over
        if depth <= 0 or is_terminal(board):
            self.evaluations += 1
            return evaluate(board, self.mover)

        best = -math.inf if maximizing else math.inf

        for col in COLUMN_ORDER:
            if board[0][col] != EMPTY:
                continue

            with played(board, col, current) as row:
                # Immediate win for the side to move: prefer quicker ones
                if is_winning_line(board, row, col):
                    return WIN_SCORE * (depth + 1) if maximizing else -WIN_SCORE * (depth + 1)

                score = self.minimax(board, depth - 1, alpha, beta, not maximizing, other_player(current))

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)

            if beta <= alpha:
                break  # Alpha-beta cutoff

        return best


def choose_move(board: Board, mover: int, depth: int) -> SearchReport:
    """
    Evaluates every legal column for `mover` and returns the thoughts
    sorted by descending score. A full board yields an empty report.
    """
    report = SearchReport()
    columns = set(legal_columns(board))
    if not columns:
        logger.debug("No legal columns, nothing to search")
        return report

    # Private copy: the caller's board is never touched
    work = copy_board(board)
    opponent = other_player(mover)

    for col in COLUMN_ORDER:
        if col not in columns:
            continue

        search = MinimaxSearch(mover)
        with played(work, col, mover) as row:
            if is_winning_line(work, row, col):
                thought = SearchThought(
                    column=col,
                    score=WIN_SCORE * (depth + 1),
                    reason=Rationale.WINNING_MOVE,
                    depth=depth,
                    evaluations=1,
                )
            else:
                score = search.minimax(work, depth - 1, -math.inf, math.inf, False, opponent)
                thought = SearchThought(
                    column=col,
                    score=score,
                    reason=classify(score),
                    depth=depth,
                    evaluations=search.evaluations,
                )

        report.thoughts.append(thought)
        report.evaluations += thought.evaluations

    # Stable sort: equal scores keep center-out order
    report.thoughts.sort(key=lambda t: t.score, reverse=True)

    logger.debug(
        "Searched %d columns at depth %d for player %s: best=%s, evaluations=%d",
        len(report.thoughts), depth, mover, report.best_column, report.evaluations
    )
    return report
