from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from backend.app.core.difficulty_registry import registry
from backend.app.engine.constants import ROWS, COLS, EMPTY, PLAYERS

class ThoughtRecord(BaseModel):
    column: int
    score: int
    reason: str
    depth: int
    evaluations: int = 0

class MoveRequest(BaseModel):
    # Ignore unknown fields sent by older clients
    model_config = ConfigDict(extra='ignore')

    board: List[List[int]]
    difficulty: str = "medium"
    player: int = 2
    request_id: Optional[str] = None
    game_id: Optional[str] = None

    @field_validator("board")
    @classmethod
    def check_board(cls, board: List[List[int]]) -> List[List[int]]:
        if len(board) != ROWS or any(len(row) != COLS for row in board):
            raise ValueError(f"board must be {ROWS} rows x {COLS} columns")
        if any(cell not in (EMPTY, *PLAYERS) for row in board for cell in row):
            raise ValueError("board cells must be 0, 1 or 2")
        # Gravity: no empty cell below an occupied one
        for c in range(COLS):
            for r in range(ROWS - 1):
                if board[r][c] != EMPTY and board[r + 1][c] == EMPTY:
                    raise ValueError(f"column {c} has a floating piece at row {r}")
        return board

    @field_validator("player")
    @classmethod
    def check_player(cls, player: int) -> int:
        if player not in PLAYERS:
            raise ValueError("player must be 1 or 2")
        return player

    @field_validator("difficulty")
    @classmethod
    def check_difficulty(cls, difficulty: str) -> str:
        if registry.get(difficulty) is None:
            raise ValueError(f"difficulty must be one of {sorted(registry.list_all())}")
        return difficulty

class MoveResponse(BaseModel):
    column: int = Field(description="Chosen column, or -1 when the board is full.")
    thoughts: List[ThoughtRecord]
    request_id: Optional[str] = None
    time_elapsed: float = Field(description="Milliseconds spent computing the move.")
    evaluations: int = Field(default=0, description="Leaf evaluations across all root columns.")
    fallback: bool = False

class DifficultyInfo(BaseModel):
    name: str
    depth: int
    random_factor: float
    use_opening_book: bool
    description: Optional[str] = None
