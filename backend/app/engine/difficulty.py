"""
Difficulty Policy

Maps a named difficulty to a search depth and a randomization probability,
and picks the column actually played from the ranked search results.
Lower difficulties occasionally play a uniformly random legal column, which
is what makes "easy" beatable.
"""

import logging
import random
from typing import List, Optional

from pydantic import BaseModel, Field

from backend.app.core.difficulty_registry import DifficultyProfile, registry
from backend.app.engine import opening_book
from backend.app.engine.board import Board
from backend.app.engine.constants import NO_MOVE, OPENING_BOOK_SCORE
from backend.app.engine.search import SearchThought, choose_move
from backend.app.models.enums import Rationale

logger = logging.getLogger(__name__)


class UnknownDifficultyError(ValueError):
    pass


class MoveDecision(BaseModel):
    column: int = Field(description="Column index (0-6), or -1 when no move is possible.")
    thoughts: List[SearchThought] = Field(default_factory=list)
    evaluations: int = 0
    from_opening_book: bool = False


def get_profile(difficulty: str) -> DifficultyProfile:
    profile = registry.get(difficulty)
    if profile is None:
        raise UnknownDifficultyError(f"Unknown difficulty: {difficulty}")
    return profile


def select_column(thoughts: List[SearchThought], random_factor: float, rng: random.Random) -> int:
    """
    Picks the top-ranked column, or with probability `random_factor` a
    uniformly random one from the full candidate list (not score weighted).
    `thoughts` must already be sorted by descending score.
    """
    if not thoughts:
        return NO_MOVE

    if rng.random() < random_factor:
        column = rng.choice(thoughts).column
        logger.debug("Random alternative chosen: column %s", column)
        return column

    return thoughts[0].column


def get_ai_move(board: Board, difficulty: str, player: int = 2,
                rng: Optional[random.Random] = None) -> MoveDecision:
    """Main entry point: opening book, then search, then the selection policy."""
    profile = get_profile(difficulty)
    rng = rng or random.Random()

    if profile.use_opening_book:
        book_move = opening_book.lookup(board, player, rng)
        if book_move != NO_MOVE:
            thought = SearchThought(
                column=book_move,
                score=OPENING_BOOK_SCORE,
                reason=Rationale.OPENING_BOOK,
                depth=0,
                evaluations=1,
            )
            return MoveDecision(column=book_move, thoughts=[thought], evaluations=1, from_opening_book=True)

    report = choose_move(board, player, profile.depth)
    column = select_column(report.thoughts, profile.random_factor, rng)

    logger.debug("AI (%s, player %s) plays column %s", difficulty, player, column)
    return MoveDecision(column=column, thoughts=report.thoughts, evaluations=report.evaluations)
