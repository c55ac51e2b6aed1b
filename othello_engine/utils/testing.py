"""
Othello Engine Testing and Benchmarking

This module provides a small suite of Othello positions with known answers
and helpers to run the search on them.

Suite:
    Positions are chosen so the correct reply does not depend on the
    evaluator or the search depth: forced captures, symmetric openings and
    forced passes. They check that the search returns a legal, expected move
    and give a stable workload for timing.

Evaluation Metrics:
    - Correct Moves: positions where the engine played an expected move
    - Time per Position: average thinking time
    - Nodes Searched: total nodes visited
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from othello_engine.board.state import BoardState
from othello_engine.evaluation.base import Evaluator
from othello_engine.search.negamax import find_best_move
from othello_engine.types import Color, Move, format_move

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkPosition:
    """
    A position with its expected best move(s).

    Attributes:
        board: 64-symbol row-major description (see BoardState.set_board)
        to_move: Color to move
        best_moves: Acceptable replies; None stands for a pass
        description: Human-readable description of the position
        id: Position identifier (e.g., "OT.01")
    """
    board: str
    to_move: Color
    best_moves: List[Optional[Move]] = field(default_factory=list)
    description: str = ""
    id: str = ""


@dataclass
class BenchmarkResult:
    """
    Result of searching a single position.

    Attributes:
        position: The benchmark position
        found_move: Move the engine chose (None = pass)
        score: Search value of the chosen move
        correct: Whether the engine found an expected move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes visited
        depth: Search depth used
    """
    position: BenchmarkPosition
    found_move: Optional[Move]
    score: int
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


EMPTY_ROW = "." * 8

BENCHMARK_POSITIONS = [
    BenchmarkPosition(
        id="OT.01",
        board=BoardState().to_string(),
        to_move=Color.BLACK,
        best_moves=[Move(2, 3), Move(3, 2), Move(4, 5), Move(5, 4)],
        description="Opening: all four replies are symmetric"
    ),
    BenchmarkPosition(
        id="OT.02",
        board=EMPTY_ROW * 2 + "..bwwww." + EMPTY_ROW * 5,
        to_move=Color.BLACK,
        best_moves=[Move(7, 2)],
        description="Black closes the row and flips four stones"
    ),
    BenchmarkPosition(
        id="OT.03",
        board=EMPTY_ROW + ".w......" + "..b....." + EMPTY_ROW * 5,
        to_move=Color.BLACK,
        best_moves=[Move(0, 0)],
        description="Black takes the corner and wipes out White"
    ),
    BenchmarkPosition(
        id="OT.04",
        board="wwb....." + EMPTY_ROW * 7,
        to_move=Color.BLACK,
        best_moves=[None],
        description="Black has no move and must pass"
    ),
    BenchmarkPosition(
        id="OT.05",
        board="wwb....." + EMPTY_ROW * 7,
        to_move=Color.WHITE,
        best_moves=[Move(3, 0)],
        description="White recaptures along the top edge"
    ),
]


def evaluate_position(
    position: BenchmarkPosition,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    verbose: bool = False,
) -> BenchmarkResult:
    """
    Search a single benchmark position.

    Args:
        position: Position to search
        depth: Search depth
        evaluator: Leaf evaluator (default: production evaluator)
        verbose: If True, print detailed output

    Returns:
        BenchmarkResult with the engine's move and whether it was expected
    """
    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(f"Expected moves: {[format_move(m) for m in position.best_moves]}")

    start_time = time.time()

    try:
        board = BoardState.from_string(position.board)
    except ValueError as e:
        logger.error(f"Bad benchmark position {position.id}: {e}")
        return BenchmarkResult(
            position=position,
            found_move=None,
            score=0,
            correct=False,
            time_taken=time.time() - start_time,
            depth=depth,
        )

    result = find_best_move(board, position.to_move, depth=depth, evaluator=evaluator)

    time_taken = time.time() - start_time
    correct = result.move in position.best_moves

    if verbose:
        print(f"Engine found: {format_move(result.move)} (score: {result.value})")
        print(f"Nodes searched: {result.nodes:,}")
        print(f"Time: {time_taken:.2f}s")
        print(f"Result: {'CORRECT' if correct else 'WRONG'}")

    return BenchmarkResult(
        position=position,
        found_move=result.move,
        score=result.value,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=result.nodes,
        depth=depth,
    )


def run_suite(
    depth: int = 3,
    evaluator: Optional[Evaluator] = None,
    positions: Optional[List[BenchmarkPosition]] = None,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run a benchmark suite.

    Args:
        depth: Search depth (default: 3)
        evaluator: Leaf evaluator (default: production evaluator)
        positions: Positions to run (default: BENCHMARK_POSITIONS)
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of BenchmarkResult objects
            - avg_time: Average time per position
            - total_time: Total search time
    """
    if positions is None:
        positions = BENCHMARK_POSITIONS

    if verbose:
        print("=" * 70)
        print(f"OTHELLO BENCHMARK SUITE (depth {depth})")
        print("=" * 70)

    results = []
    correct_count = 0
    total_time = 0.0

    for position in positions:
        result = evaluate_position(position, depth, evaluator, verbose=verbose)
        results.append(result)

        if result.correct:
            correct_count += 1

        total_time += result.time_taken

    avg_time = total_time / len(positions) if positions else 0
    percentage = (correct_count / len(positions) * 100) if positions else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{len(positions)} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.2f}s")
        print(f"Total time: {total_time:.2f}s")

    return {
        'score': correct_count,
        'total': len(positions),
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }
