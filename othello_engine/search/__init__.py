"""
Search Module

Adversarial search for the Othello engine: a fixed-depth negamax with
alpha-beta pruning over BoardState, scoring leaves with a swappable
Evaluator.

Key Components:
    - negamax: Core recursive search with a fail-hard alpha-beta window
    - find_best_move: Root-level search returning a SearchResult
    - SearchResult: best move, value, node count and depth
"""

from othello_engine.search.negamax import (
    ALPHA_INIT,
    BETA_INIT,
    DEFAULT_DEPTH,
    SearchResult,
    find_best_move,
    negamax,
)

__all__ = [
    'ALPHA_INIT',
    'BETA_INIT',
    'DEFAULT_DEPTH',
    'SearchResult',
    'find_best_move',
    'negamax',
]
