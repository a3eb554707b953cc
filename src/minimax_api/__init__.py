"""
Tic tac toe minimax move service.

The core (board model and search engine) has no web dependencies; the
FastAPI app in ``minimax_api.main`` is a thin shell around it.
"""

from .board import (
    Board,
    InvalidDimensions,
    Mark,
    board_from_text,
    board_to_text,
    is_full,
    winner,
)
from .engine import apply_best_move, best_move, evaluate, placed

__version__ = "0.1.0"
__all__ = [
    "Board",
    "InvalidDimensions",
    "Mark",
    "board_from_text",
    "board_to_text",
    "is_full",
    "winner",
    "apply_best_move",
    "best_move",
    "evaluate",
    "placed",
]
