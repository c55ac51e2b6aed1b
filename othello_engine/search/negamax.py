"""
Negamax Search with Alpha-Beta Pruning

This module implements the search the agent uses to pick its moves.
Negamax is the single-formula form of minimax: the value of a node for the
side to move is the maximum over its moves of the negated value of the
child for the opponent.

Key Concepts:
    - Negamax: value(node) = max(-value(child)) over legal moves
    - Alpha-Beta: the window [alpha, beta] is negated and swapped at every
      ply; a move scoring above beta is a cutoff (fail-hard: return beta)
    - Row-major move order: cells are tried x outer, y inner; a move only
      replaces the current best when strictly better, so the first of
      several equally good moves is kept
    - Leaf perspective: leaves are scored for the root color and then
      oriented for the side to move (see Evaluator.evaluate_for_side)

Each child is searched on its own clone of the board, so sibling branches
never share state.

References:
    - Negamax: https://www.chessprogramming.org/Negamax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

from othello_engine.board.state import BoardState
from othello_engine.evaluation import EvalMode, Evaluator, get_evaluator
from othello_engine.types import BOARD_SIZE, Color, Move, format_move

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 7

# Search window bounds. The lower bound is one above the true minimum so that
# negating it never overflows a fixed-width integer.
MAX_SCORE = sys.maxsize
MIN_SCORE = -sys.maxsize - 1
ALPHA_INIT = MIN_SCORE + 1
BETA_INIT = MAX_SCORE


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move: Best move found, or None if the side to move must pass
        value: Negamax value of the root for the searching color
        nodes: Number of nodes visited
        depth: Depth searched
    """
    move: Optional[Move]
    value: int
    nodes: int
    depth: int


def negamax(
    board: BoardState,
    side_to_move: Color,
    depth: int,
    alpha: int,
    beta: int,
    root_color: Color,
    evaluator: Evaluator,
    nodes_searched: Optional[List[int]] = None,
) -> Tuple[int, Optional[Move]]:
    """
    Negamax search with alpha-beta pruning.

    Args:
        board: Position to search (not modified)
        side_to_move: Color to play at this node
        depth: Remaining plies (0 = evaluate)
        alpha: Lower bound of the window
        beta: Upper bound of the window
        root_color: Color that started the search; leaves are scored for it
        evaluator: Leaf evaluator (must be zero-sum)
        nodes_searched: Optional mutable list [count] to track visited nodes

    Returns:
        Tuple of (value, best_move) where value is from side_to_move's point
        of view. best_move is None at leaves, when no move raised alpha, or
        when the side to move has to pass.

    Algorithm:
        1. depth == 0 or no legal move → leaf value, no move
        2. For each cell in row-major order that is legal:
            a. Clone the board and play the move on the clone
            b. value = -negamax(child, opponent, depth - 1, -beta, -alpha)
            c. value > beta → return (beta, move)
            d. value > alpha → alpha = value, best = move
        3. Return (alpha, best)
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth == 0 or not board.has_legal_move(side_to_move):
        return evaluator.evaluate_for_side(board, root_color, side_to_move), None

    opponent = side_to_move.opposite
    best_move = None

    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            move = Move(x, y)
            if not board.is_legal_move(move, side_to_move):
                continue

            child = board.clone()
            child.apply(move, side_to_move)

            child_value, _ = negamax(
                child,
                opponent,
                depth - 1,
                -beta,
                -alpha,
                root_color,
                evaluator,
                nodes_searched,
            )
            value = -child_value

            # Beta cutoff: the opponent will never allow this line
            if value > beta:
                return beta, move

            if value > alpha:
                alpha = value
                best_move = move

    return alpha, best_move


def find_best_move(
    board: BoardState,
    color: Color,
    depth: int = DEFAULT_DEPTH,
    evaluator: Optional[Evaluator] = None,
) -> SearchResult:
    """
    Find the best move for ``color`` in the current position.

    Args:
        board: Current position (not modified)
        color: Side to move
        depth: Search depth in plies (default: 7)
        evaluator: Leaf evaluator (default: production positional evaluator)

    Returns:
        SearchResult; its move is None when ``color`` has no legal move

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"Search depth must be non-negative, got {depth}")

    if evaluator is None:
        evaluator = get_evaluator(EvalMode.PRODUCTION)

    nodes = [0]
    value, move = negamax(
        board,
        color,
        depth,
        ALPHA_INIT,
        BETA_INIT,
        color,
        evaluator,
        nodes_searched=nodes,
    )

    logger.debug(
        f"Search {color} depth={depth}: best={format_move(move)} value={value} nodes={nodes[0]}"
    )

    return SearchResult(move=move, value=value, nodes=nodes[0], depth=depth)
