"""
Othello Board State

BoardState holds one 8x8 position and implements the rules of the game:
legality testing, move application (placing and flipping), stone counts and
heuristic scoring.

Grid Representation:
    numpy int8 array of shape (8, 8), indexed grid[x, y]
        0  = empty
        +1 = BLACK   (Color.BLACK.value)
        -1 = WHITE   (Color.WHITE.value)

    An empty cell has no color, so get(color, x, y) is False for both colors.

Legality:
    A concrete move (x, y) is legal for a color if the cell is empty and at
    least one of the eight rays from it starts with one or more opposite
    stones immediately followed by a stone of the mover's color (an
    outflanking line). Passing (move = None) is legal only when no concrete
    move is.

Application:
    apply() is the unchecked path used by the search and the agent for moves
    they already validated; an illegal move leaves the board untouched.
    apply_checked() raises IllegalMoveError instead, for moves that come from
    outside the engine.
"""

from typing import List, Optional, Union

import numpy as np

from othello_engine.evaluation import EvalMode, get_evaluator
from othello_engine.types import BOARD_SIZE, DIRECTIONS, Color, Move, format_move, on_board

_SYMBOLS = {Color.BLACK.value: 'b', Color.WHITE.value: 'w', 0: '.'}


class IllegalMoveError(ValueError):
    """Raised when a checked move application receives an illegal move."""

    def __init__(self, move: Optional[Move], color: Color):
        self.move = move
        self.color = color
        super().__init__(f"Illegal move {format_move(move)} for {color}")


class BoardState:
    """
    A standard 8x8 Othello position.

    Attributes:
        grid: (8, 8) int8 array indexed [x, y]; see module docstring
    """

    def __init__(self):
        """Create a board in the standard starting setup."""
        self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self.set(Color.WHITE, 3, 3)
        self.set(Color.WHITE, 4, 4)
        self.set(Color.BLACK, 4, 3)
        self.set(Color.BLACK, 3, 4)

    @classmethod
    def from_string(cls, data: str) -> "BoardState":
        """Build a board from a 64-symbol row-major description."""
        board = cls()
        board.set_board(data)
        return board

    def clone(self) -> "BoardState":
        """Return an independent deep copy of this board."""
        new_board = BoardState.__new__(BoardState)
        new_board.grid = self.grid.copy()
        return new_board

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def occupied(self, x: int, y: int) -> bool:
        return bool(self.grid[x, y] != 0)

    def get(self, color: Color, x: int, y: int) -> bool:
        return bool(self.grid[x, y] == color.value)

    def set(self, color: Color, x: int, y: int):
        self.grid[x, y] = color.value

    def set_board(self, data: str):
        """
        Set the board from a 64-symbol row-major description.

        Symbol i describes cell (i % 8, i // 8): 'b' is a black stone, 'w' a
        white stone, anything else an empty cell. The board is cleared first.
        Mainly for setting up test positions.

        Args:
            data: 64-character description

        Raises:
            ValueError: If ``data`` is not exactly 64 symbols long
        """
        if len(data) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"Board description must have {BOARD_SIZE * BOARD_SIZE} symbols, got {len(data)}"
            )

        self.grid.fill(0)
        for i, symbol in enumerate(data):
            x, y = i % BOARD_SIZE, i // BOARD_SIZE
            if symbol == 'b':
                self.set(Color.BLACK, x, y)
            elif symbol == 'w':
                self.set(Color.WHITE, x, y)

    def to_string(self) -> str:
        """Row-major description accepted by set_board ('.' for empty)."""
        return "".join(
            _SYMBOLS[int(self.grid[i % BOARD_SIZE, i // BOARD_SIZE])]
            for i in range(BOARD_SIZE * BOARD_SIZE)
        )

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _outflanks(self, x: int, y: int, dx: int, dy: int, color: Color) -> bool:
        """True if the ray from (x, y) in direction (dx, dy) captures stones."""
        mine = color.value
        theirs = -mine
        cx, cy = x + dx, y + dy
        if not on_board(cx, cy) or self.grid[cx, cy] != theirs:
            return False

        while on_board(cx, cy) and self.grid[cx, cy] == theirs:
            cx += dx
            cy += dy

        return on_board(cx, cy) and self.grid[cx, cy] == mine

    def is_legal_move(self, move: Optional[Move], color: Color) -> bool:
        """
        Check whether ``move`` is legal for ``color``.

        Args:
            move: Move to test, or None for a pass
            color: Side making the move

        Returns:
            bool: True if legal
        """
        # Passing is only legal if there are no moves.
        if move is None:
            return not self.has_legal_move(color)

        if self.occupied(move.x, move.y):
            return False

        return any(
            self._outflanks(move.x, move.y, dx, dy, color) for dx, dy in DIRECTIONS
        )

    def legal_moves(self, color: Color) -> List[Move]:
        """All legal concrete moves for ``color`` in row-major order (x outer)."""
        moves = []
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                move = Move(x, y)
                if self.is_legal_move(move, color):
                    moves.append(move)
        return moves

    def has_legal_move(self, color: Color) -> bool:
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                if self.is_legal_move(Move(x, y), color):
                    return True
        return False

    def is_terminal(self) -> bool:
        """The game is over when neither side has a legal move."""
        return not (self.has_legal_move(Color.BLACK) or self.has_legal_move(Color.WHITE))

    def apply(self, move: Optional[Move], color: Color):
        """
        Play ``move`` for ``color``, flipping every outflanked line.

        A pass (None) and an illegal move both leave the board unchanged.
        """
        if move is None:
            return

        if not self.is_legal_move(move, color):
            return

        x, y = move.x, move.y
        for dx, dy in DIRECTIONS:
            if not self._outflanks(x, y, dx, dy, color):
                continue
            cx, cy = x + dx, y + dy
            while self.grid[cx, cy] == -color.value:
                self.set(color, cx, cy)
                cx += dx
                cy += dy

        self.set(color, x, y)

    def apply_checked(self, move: Optional[Move], color: Color):
        """
        Play ``move`` for ``color``, rejecting illegal moves.

        Raises:
            IllegalMoveError: If the move (or pass) is not legal for ``color``;
                the board is left unchanged
        """
        if not self.is_legal_move(move, color):
            raise IllegalMoveError(move, color)
        self.apply(move, color)

    # ------------------------------------------------------------------
    # Counting and scoring
    # ------------------------------------------------------------------

    def count_stones(self, color: Color) -> int:
        return int(np.count_nonzero(self.grid == color.value))

    def count_black(self) -> int:
        return self.count_stones(Color.BLACK)

    def count_white(self) -> int:
        return self.count_stones(Color.WHITE)

    def score(self, color: Color, mode: Union[EvalMode, str] = EvalMode.PRODUCTION) -> int:
        """
        Heuristic desirability of this position for ``color``.

        Zero-sum: score(color, mode) == -score(color.opposite, mode).

        Args:
            color: Side to score for
            mode: EvalMode.DIAGNOSTIC (stone differential) or
                EvalMode.PRODUCTION (positional weights)

        Returns:
            int: Signed score
        """
        return get_evaluator(mode).evaluate(self, color)

    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"BoardState(black={self.count_black()}, white={self.count_white()})"
