import logging
from fastapi import APIRouter, HTTPException
from typing import List, Literal
from pydantic import BaseModel, Field
from .board import (
    InvalidDimensions,
    Mark,
    board_from_text,
    board_to_text,
    is_full,
    mark_to_text,
    winner,
)
from .engine import apply_best_move

logger = logging.getLogger(__name__)

router = APIRouter()

# --- Pydantic Schemas ---

class MoveRequest(BaseModel):
    board: List[List[str]] = Field(
        ..., description='3x3 grid of "X", "O" or "_" (any other value is empty)'
    )

class MoveResponse(BaseModel):
    board: List[List[str]] = Field(..., description="Board after the engine's move")
    won: Literal["X", "O", "_"] = Field(..., description='Winning mark, "_" if none')
    full: bool = Field(..., description="True if no empty cells remain")

# --- Move handling ---

def _move(request: MoveRequest, player: Mark) -> MoveResponse:
    """Play the best move for player on the requested board."""
    try:
        board = board_from_text(request.board)
    except InvalidDimensions as exc:
        logger.warning("Rejected board for %s: %s", player.name, exc)
        raise HTTPException(status_code=400, detail=str(exc))

    apply_best_move(board, player)
    won = winner(board)
    logger.info("Move for %s played, won=%s", player.name, mark_to_text(won))
    return MoveResponse(
        board=board_to_text(board),
        won=mark_to_text(won),
        full=is_full(board),
    )

# --- REST Endpoints ---

# PUBLIC_INTERFACE
@router.post("/move/x", response_model=MoveResponse, summary="Best move for X", tags=["Move"])
def move_x(request: MoveRequest):
    """Plays the optimal move for X (the minimizer) and reports the result."""
    return _move(request, Mark.X)

# PUBLIC_INTERFACE
@router.post("/move/o", response_model=MoveResponse, summary="Best move for O", tags=["Move"])
def move_o(request: MoveRequest):
    """Plays the optimal move for O (the maximizer) and reports the result."""
    return _move(request, Mark.O)
