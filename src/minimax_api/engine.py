"""
Exhaustive minimax search for the next move.

X minimizes and O maximizes; scores are -1 (X wins), 0 (draw), +1 (O wins).
The full game tree is searched on every call: no pruning, no cache, no
depth limit. At most 9! leaves, so brute force is fast enough.
"""

import logging
import math
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from .board import Board, Mark, is_full, winner

logger = logging.getLogger(__name__)


@contextmanager
def placed(board: Board, row: int, col: int, mark: Mark) -> Iterator[Board]:
    """Put mark on an empty cell for the duration of the block, then clear it."""
    board.set(row, col, mark)
    try:
        yield board
    finally:
        board.set(row, col, Mark.EMPTY)


def _is_terminal(board: Board) -> bool:
    return winner(board) is not None or is_full(board)


# PUBLIC_INTERFACE
def evaluate(board: Board, maximizer_to_move: bool) -> int:
    """
    Minimax value of a position under perfect play.

    Args:
        board: Position to score. Restored to its original state on return.
        maximizer_to_move: True if O moves next, False if X does.

    Returns:
        -1, 0 or +1.
    """
    won = winner(board)
    if won is not None:
        return int(won)
    if is_full(board):
        return 0

    mover = Mark.O if maximizer_to_move else Mark.X
    scores = []
    for row, col in board.empty_cells():
        with placed(board, row, col, mover):
            scores.append(evaluate(board, not maximizer_to_move))
    return max(scores) if maximizer_to_move else min(scores)


# PUBLIC_INTERFACE
def best_move(board: Board, player: Optional[Mark]) -> Optional[Tuple[int, int]]:
    """
    Pick the best cell for player without placing it.

    Ties keep the earliest cell in row-major order.

    Returns:
        (row, col), or None if player is unset or the game is already over.
    """
    if player is None or player == Mark.EMPTY:
        return None
    if _is_terminal(board):
        return None

    maximizer = player == Mark.O
    best_score = -math.inf if maximizer else math.inf
    best = (0, 0)

    for row, col in board.empty_cells():
        with placed(board, row, col, player):
            score = evaluate(board, not maximizer)
        if (maximizer and score > best_score) or (not maximizer and score < best_score):
            best_score = score
            best = (row, col)

    logger.debug("Best move for %s: %s (score %s)", player.name, best, best_score)
    return best


# PUBLIC_INTERFACE
def apply_best_move(board: Board, player: Optional[Mark]) -> None:
    """Place player's mark on its best cell. No-op if there is nothing to do."""
    move = best_move(board, player)
    if move is None:
        return
    row, col = move
    board.set(row, col, player)
