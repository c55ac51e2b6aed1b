"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, the search can run on any evaluator
without modification.

Key Principles:
    1. Evaluators are stateless
    2. evaluate(board, color) returns the desirability of the position for
       ``color`` as a signed integer (positive = good for ``color``)
    3. Evaluators MUST be zero-sum:

           evaluate(board, color) == -evaluate(board, color.opposite)

       The negamax search scores every leaf from the root player's point of
       view and relies on this identity to orient the value for the side to
       move. An asymmetric term (e.g. a bonus that only one side receives)
       silently corrupts move selection.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from othello_engine.types import Color

if TYPE_CHECKING:
    from othello_engine.board.state import BoardState


class EvalMode(Enum):
    """
    Which heuristic a BoardState is scored with.

    DIAGNOSTIC: raw stone differential, used when validating search
    PRODUCTION: square-weighted positional score, used for real play
    """

    DIAGNOSTIC = "diagnostic"
    PRODUCTION = "production"


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method.
    """

    mode: EvalMode

    @abstractmethod
    def evaluate(self, board: "BoardState", color: Color) -> int:
        """
        Evaluate an Othello position for ``color``.

        Args:
            board: Position to evaluate
            color: Side whose desirability is measured

        Returns:
            int: Signed score, positive when the position favours ``color``
        """
        pass

    def evaluate_for_side(self, board: "BoardState", root_color: Color, side: Color) -> int:
        """
        Score from ``root_color``'s point of view, then orient it for ``side``.

        This is how the search turns a fixed-perspective leaf score into the
        side-to-move value negamax expects.
        """
        value = self.evaluate(board, root_color)
        return value if side is root_color else -value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
