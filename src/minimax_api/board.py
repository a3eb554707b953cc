"""
Board model for the minimax move service.

A board is a flat list of 9 cells, row-major, each holding a Mark.
Mark values double as minimax scores: X (the minimizer) is -1, O (the
maximizer) is +1, so the winner's mark is also the value of the position.
"""

from enum import IntEnum
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

SIZE = 3


class Mark(IntEnum):
    """Contents of a single cell."""
    X = -1
    EMPTY = 0
    O = 1

    def opponent(self) -> "Mark":
        """The other player's mark. EMPTY maps to itself."""
        return Mark(-self.value)


class InvalidDimensions(ValueError):
    """Raised when a textual grid is not exactly 3 rows of 3 columns."""


# Text codes on the wire, compared after upper-casing
_FROM_TEXT = {"X": Mark.X, "O": Mark.O}
_TO_TEXT = {Mark.X: "X", Mark.O: "O", Mark.EMPTY: "_"}


def _index(row: int, col: int) -> int:
    return row * SIZE + col


@dataclass
class Board:
    """A 3x3 tic tac toe grid. Mutable; callers own their instance."""
    cells: List[Mark] = field(default_factory=lambda: [Mark.EMPTY] * (SIZE * SIZE))

    def __post_init__(self):
        if len(self.cells) != SIZE * SIZE:
            raise InvalidDimensions(f"board needs {SIZE * SIZE} cells, got {len(self.cells)}")

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    def get(self, row: int, col: int) -> Mark:
        return self.cells[_index(row, col)]

    def set(self, row: int, col: int, mark: Mark) -> None:
        self.cells[_index(row, col)] = mark

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Coordinates of empty cells in row-major scan order."""
        return [
            (row, col)
            for row in range(SIZE)
            for col in range(SIZE)
            if self.get(row, col) == Mark.EMPTY
        ]

    def copy(self) -> "Board":
        return Board(list(self.cells))


def _lines() -> List[List[Tuple[int, int]]]:
    # Row i then column i, then both diagonals
    lines = []
    for i in range(SIZE):
        lines.append([(i, c) for c in range(SIZE)])
        lines.append([(r, i) for r in range(SIZE)])
    lines.append([(i, i) for i in range(SIZE)])
    lines.append([(SIZE - 1 - i, i) for i in range(SIZE)])
    return lines


WIN_LINES = _lines()


# PUBLIC_INTERFACE
def winner(board: Board) -> Optional[Mark]:
    """Return the mark holding a full row, column or diagonal, or None."""
    for line in WIN_LINES:
        first = board.get(*line[0])
        if first != Mark.EMPTY and all(board.get(r, c) == first for r, c in line[1:]):
            return first
    return None


# PUBLIC_INTERFACE
def is_full(board: Board) -> bool:
    """True if no empty cells on the board."""
    return all(cell != Mark.EMPTY for cell in board.cells)


# PUBLIC_INTERFACE
def check_dimensions(grid: Sequence[Sequence[str]]) -> bool:
    """True if the grid is exactly 3 rows of exactly 3 columns."""
    if grid is None or len(grid) != SIZE:
        return False
    return all(row is not None and len(row) == SIZE for row in grid)


# PUBLIC_INTERFACE
def board_from_text(grid: Sequence[Sequence[str]]) -> Board:
    """
    Build a Board from a 3x3 grid of single character codes.

    "X" and "O" are matched case-insensitively; any other value is empty.

    Raises:
        InvalidDimensions: if the grid is not 3x3.
    """
    if not check_dimensions(grid):
        raise InvalidDimensions("board must be 3 rows of 3 columns")
    board = Board.empty()
    for row in range(SIZE):
        for col in range(SIZE):
            code = grid[row][col]
            key = code.upper() if isinstance(code, str) else ""
            board.set(row, col, _FROM_TEXT.get(key, Mark.EMPTY))
    return board


# PUBLIC_INTERFACE
def board_to_text(board: Board) -> List[List[str]]:
    """Encode a Board as a 3x3 grid of "X", "O" and "_"."""
    return [[_TO_TEXT[board.get(row, col)] for col in range(SIZE)] for row in range(SIZE)]


# PUBLIC_INTERFACE
def mark_to_text(mark: Optional[Mark]) -> str:
    """Single character code for a mark; "_" for None or EMPTY."""
    if mark is None:
        return "_"
    return _TO_TEXT[mark]
