"""
Move Service - Off-thread AI dispatch

The engine is synchronous and CPU bound. This service:
- runs each move computation on a worker thread so the event loop stays free
- applies a wall-clock budget and falls back to a cheap heuristic on timeout
- tracks the latest request per game and rejects results for superseded ones

The engine never sees cancellation; a timed out or stale search simply
finishes on its thread and its result is dropped.
"""

import asyncio
import logging
import random
import time
import uuid
from typing import Callable, Dict, Optional, Tuple

from backend.app.core.settings import AI_MOVE_TIMEOUT
from backend.app.engine.board import Board, copy_board
from backend.app.engine.constants import NO_MOVE
from backend.app.engine.difficulty import MoveDecision, get_ai_move, get_profile
from backend.app.engine.fallback import fallback_move
from backend.app.engine.search import SearchThought
from backend.app.models.enums import Rationale

logger = logging.getLogger(__name__)


class StaleRequestError(Exception):
    """A newer request for the same game superseded this one."""


class MoveResult:
    """Represents one answered move request for API responses"""
    def __init__(self, decision: MoveDecision, request_id: str, time_elapsed: float, fallback: bool = False):
        self.column = decision.column
        self.thoughts = decision.thoughts
        self.evaluations = decision.evaluations
        self.request_id = request_id
        self.time_elapsed = time_elapsed
        self.fallback = fallback


class MoveService:
    def __init__(self, timeout: float = AI_MOVE_TIMEOUT, move_fn: Callable[..., MoveDecision] = get_ai_move):
        self.timeout = timeout
        self.move_fn = move_fn
        self.latest_requests: Dict[str, str] = {}  # game_id -> request_id

    async def request_move(
        self,
        board: Board,
        difficulty: str,
        player: int = 2,
        game_id: Optional[str] = None,
        request_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> MoveResult:
        # Fail fast on a bad difficulty instead of inside the worker
        get_profile(difficulty)

        request_id = request_id or uuid.uuid4().hex
        if game_id is not None:
            self.latest_requests[game_id] = request_id

        # Snapshot: the caller may keep mutating its own board while we think
        snapshot = copy_board(board)
        start_time = time.perf_counter()

        try:
            decision, fallback = await self._think(snapshot, difficulty, player, rng)
            time_elapsed = round((time.perf_counter() - start_time) * 1000, 3)

            if game_id is not None and self.latest_requests.get(game_id) != request_id:
                logger.warning("Dropping stale AI result %s for game %s", request_id, game_id)
                raise StaleRequestError(f"Request {request_id} was superseded")
        finally:
            # Only the newest request for a game owns its tracking entry
            if game_id is not None and self.latest_requests.get(game_id) == request_id:
                del self.latest_requests[game_id]

        logger.info("AI calculated move %s in %.2fms", decision.column, time_elapsed)
        return MoveResult(decision, request_id, time_elapsed, fallback)

    async def _think(self, board: Board, difficulty: str, player: int,
                     rng: Optional[random.Random]) -> Tuple[MoveDecision, bool]:
        try:
            call = asyncio.to_thread(self.move_fn, board, difficulty, player, rng)
            if self.timeout > 0:
                return await asyncio.wait_for(call, timeout=self.timeout), False
            return await call, False
        except asyncio.TimeoutError:
            logger.info("AI move timed out after %.2fs (%s), using fallback", self.timeout, difficulty)
            return self._fallback_decision(board, player), True

    def _fallback_decision(self, board: Board, player: int) -> MoveDecision:
        column = fallback_move(board, player)
        if column == NO_MOVE:
            return MoveDecision(column=NO_MOVE)
        thought = SearchThought(column=column, score=0, reason=Rationale.FALLBACK, depth=0, evaluations=0)
        return MoveDecision(column=column, thoughts=[thought])

    def is_pending(self, game_id: str) -> bool:
        return game_id in self.latest_requests

    def forget(self, game_id: str):
        """Drop tracking for a game; any in-flight result for it becomes stale."""
        self.latest_requests.pop(game_id, None)


# Singleton
move_service = MoveService()
