"""
Classical Othello Evaluation

Two evaluators share this module:

    1. StoneDifferenceEvaluator (diagnostic): own stones minus opponent stones
    2. PositionalEvaluator (production): square-weighted stone sum

Square Weights:
    Corners can never be flipped, so they are worth the most. The cells that
    hand the opponent a corner (next to and diagonal to a corner) are
    penalised. Edges are stable-ish and worth a bonus.

        CORNER              3
        EDGE                2
        NEXT_TO_CORNER     -2
        DIAGONAL_TO_CORNER -3
        OTHER               1

    The table is applied to the grid (+1 BLACK, -1 WHITE) and the total is
    multiplied by the color's sign, which makes both evaluators zero-sum by
    construction.
"""

import numpy as np

from othello_engine.evaluation.base import Evaluator, EvalMode
from othello_engine.types import BOARD_SIZE, Color, SquarePosition, classify_square

SQUARE_WEIGHTS = {
    SquarePosition.CORNER: 3,
    SquarePosition.EDGE: 2,
    SquarePosition.NEXT_TO_CORNER: -2,
    SquarePosition.DIAGONAL_TO_CORNER: -3,
    SquarePosition.OTHER: 1,
}


def build_weight_table(size: int = BOARD_SIZE) -> np.ndarray:
    """
    Build the (size, size) weight table indexed [x, y].

    Returns:
        numpy int32 array of per-cell weights
    """
    table = np.zeros((size, size), dtype=np.int32)
    for x in range(size):
        for y in range(size):
            table[x, y] = SQUARE_WEIGHTS[classify_square(x, y, size)]
    return table


#fmt: off
# Indexed [x, y]; symmetric, so rows read the same either way.
# Must equal build_weight_table().
WEIGHT_TABLE = np.array([
    [ 3, -2,  2,  2,  2,  2, -2,  3],
    [-2, -3,  1,  1,  1,  1, -3, -2],
    [ 2,  1,  1,  1,  1,  1,  1,  2],
    [ 2,  1,  1,  1,  1,  1,  1,  2],
    [ 2,  1,  1,  1,  1,  1,  1,  2],
    [ 2,  1,  1,  1,  1,  1,  1,  2],
    [-2, -3,  1,  1,  1,  1, -3, -2],
    [ 3, -2,  2,  2,  2,  2, -2,  3],
], dtype=np.int32)
#fmt: on


class StoneDifferenceEvaluator(Evaluator):
    """Diagnostic evaluator: stone count of ``color`` minus the opponent's."""

    mode = EvalMode.DIAGNOSTIC

    def evaluate(self, board, color: Color) -> int:
        return board.count_stones(color) - board.count_stones(color.opposite)


class PositionalEvaluator(Evaluator):
    """
    Production evaluator using square weights.

    Every occupied cell contributes its weight, positive if the stone belongs
    to ``color`` and negative otherwise. Empty cells contribute nothing.

    Attributes:
        weights: (8, 8) weight table indexed [x, y]
    """

    mode = EvalMode.PRODUCTION

    def __init__(self, weights: np.ndarray = WEIGHT_TABLE):
        self.weights = weights

    def evaluate(self, board, color: Color) -> int:
        """
        Args:
            board: Position to evaluate
            color: Side whose desirability is measured

        Returns:
            int: Weighted stone sum for ``color``
        """
        black_minus_white = int(np.sum(self.weights * board.grid))
        return black_minus_white * color.value
