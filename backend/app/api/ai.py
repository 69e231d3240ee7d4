from fastapi import APIRouter, HTTPException

from backend.app.schemas.move_schema import MoveRequest, MoveResponse, ThoughtRecord
from backend.app.services.move_service import move_service, StaleRequestError

router = APIRouter()

@router.post("/move", response_model=MoveResponse)
async def calculate_move(request: MoveRequest):
    """
    Computes the AI move for the given board.
    Thoughts are sorted by descending score; column is -1 on a full board.
    """
    try:
        result = await move_service.request_move(
            request.board,
            request.difficulty,
            request.player,
            game_id=request.game_id,
            request_id=request.request_id,
        )
    except StaleRequestError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return MoveResponse(
        column=result.column,
        thoughts=[ThoughtRecord(**t.model_dump(mode="json")) for t in result.thoughts],
        request_id=result.request_id,
        time_elapsed=result.time_elapsed,
        evaluations=result.evaluations,
        fallback=result.fallback,
    )
