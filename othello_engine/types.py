"""
Core Othello Types

Small value types shared by every other module:

    - Color: BLACK / WHITE, stored directly in the board grid (+1 / -1)
    - Move: a concrete (x, y) placement; a pass is represented by None
    - SquarePosition: classification of a cell used by the positional evaluator

Coordinate Convention:
    - x and y both run 0..7
    - Row-major descriptions index cell i as (x = i % 8, y = i // 8)
    - Initial setup: BLACK at (4,3) and (3,4), WHITE at (3,3) and (4,4)
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

BOARD_SIZE = 8

# The eight ray directions, as (dx, dy)
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class Color(Enum):
    """Stone color. The value is what the board grid stores for the color."""

    BLACK = 1
    WHITE = -1

    @property
    def opposite(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    def __str__(self) -> str:
        return self.name


class SquarePosition(Enum):
    """Position class of a cell, as seen by the positional heuristic."""

    CORNER = "corner"
    EDGE = "edge"
    NEXT_TO_CORNER = "next_to_corner"
    DIAGONAL_TO_CORNER = "diagonal_to_corner"
    OTHER = "other"


@dataclass(frozen=True)
class Move:
    """
    A concrete stone placement at (x, y).

    Passing is not a Move: everywhere in the engine a pass is ``None``.

    Raises:
        ValueError: If either coordinate is outside the 8x8 board
    """

    x: int
    y: int

    def __post_init__(self):
        if not (0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE):
            raise ValueError(f"Move ({self.x}, {self.y}) is off the board")

    def __str__(self) -> str:
        return f"Move: ({self.x}, {self.y})"


def format_move(move: Optional[Move]) -> str:
    """Render a move for logs, with None shown as PASS."""
    return "PASS" if move is None else str(move)


def on_board(x: int, y: int, size: int = BOARD_SIZE) -> bool:
    return 0 <= x < size and 0 <= y < size


def classify_square(x: int, y: int, size: int = BOARD_SIZE) -> SquarePosition:
    """
    Classify a cell by its relation to the corners.

    When several classes would apply, the first match in this order wins:
    CORNER, DIAGONAL_TO_CORNER, NEXT_TO_CORNER, EDGE, OTHER.

    Args:
        x: Column index (0..size-1)
        y: Row index (0..size-1)
        size: Board size (default: 8)

    Returns:
        SquarePosition of the cell
    """
    last = size - 1
    border = (0, last)
    inner = (1, last - 1)

    if x in border and y in border:
        return SquarePosition.CORNER
    if x in inner and y in inner:
        return SquarePosition.DIAGONAL_TO_CORNER
    if (x in border and y in inner) or (x in inner and y in border):
        return SquarePosition.NEXT_TO_CORNER
    if x in border or y in border:
        return SquarePosition.EDGE
    return SquarePosition.OTHER
