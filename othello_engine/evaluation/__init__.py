"""
Evaluation Module

Position evaluators for the Othello engine. Evaluators are SWAPPABLE: the
search works with any evaluator that implements the base interface and
keeps the zero-sum contract documented in ``base.py``.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - EvalMode: DIAGNOSTIC (stone differential) or PRODUCTION (positional)
    - StoneDifferenceEvaluator: diagnostic evaluator
    - PositionalEvaluator: square-weighted production evaluator

Data Flow:
    BoardState → evaluator.evaluate(board, color) → int
                                                    Positive = good for color
"""

from typing import Union

from othello_engine.evaluation.base import Evaluator, EvalMode
from othello_engine.evaluation.classical import (
    PositionalEvaluator,
    StoneDifferenceEvaluator,
    WEIGHT_TABLE,
)

_EVALUATORS = {
    EvalMode.DIAGNOSTIC: StoneDifferenceEvaluator(),
    EvalMode.PRODUCTION: PositionalEvaluator(),
}


def get_evaluator(mode: Union[EvalMode, str] = EvalMode.PRODUCTION) -> Evaluator:
    """
    Return the shared evaluator instance for a mode.

    Raises:
        ValueError: If ``mode`` is not a known EvalMode or mode name
    """
    return _EVALUATORS[EvalMode(mode)]


__all__ = [
    'Evaluator',
    'EvalMode',
    'PositionalEvaluator',
    'StoneDifferenceEvaluator',
    'WEIGHT_TABLE',
    'get_evaluator',
]
