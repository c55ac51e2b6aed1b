#!/usr/bin/env python3
"""
Othello Benchmark Runner

Runs the benchmark suite at multiple depths to measure search speed and
check that the engine finds the expected replies.

Usage:
    python tools/run_benchmark.py [--depths 1,3,5] [--eval production] [--verbose]
"""

import sys
import argparse
import logging
import time
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from othello_engine.evaluation import EvalMode, get_evaluator
from othello_engine.types import format_move
from othello_engine.utils.testing import BENCHMARK_POSITIONS, evaluate_position


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], eval_mode: EvalMode, verbose: bool = False):
    """
    Run the benchmark suite at multiple depths.

    Args:
        depths: List of depths to test
        eval_mode: Leaf evaluator to search with
        verbose: If True, print detailed results for each position
    """
    evaluator = get_evaluator(eval_mode)

    print("=" * 80)
    print("OTHELLO BENCHMARK")
    print("=" * 80)
    print(f"Evaluator: {evaluator!r} ({eval_mode.value})")
    print(f"Search: Negamax with Alpha-Beta Pruning")
    print(f"Depths: {depths}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        start_time = time.time()
        results = []
        for position in tqdm(BENCHMARK_POSITIONS, desc=f"Depth {depth}", unit="pos"):
            results.append(evaluate_position(position, depth, evaluator, verbose=verbose))
        total_time = time.time() - start_time

        correct = sum(1 for r in results if r.correct)
        total_nodes = sum(r.nodes_searched for r in results)
        nodes_per_sec = total_nodes / total_time if total_time > 0 else 0

        all_results.append({
            'depth': depth,
            'score': correct,
            'total': len(results),
            'avg_time': total_time / len(results) if results else 0,
            'total_nodes': total_nodes,
            'nodes_per_sec': nodes_per_sec,
            'results': results,
        })

        failed = [r for r in results if not r.correct]
        if failed:
            print(f"\n  Failed positions at depth {depth}:")
            for r in failed:
                expected = [format_move(m) for m in r.position.best_moves]
                print(f"    {r.position.id}: Expected {expected}, got {format_move(r.found_move)}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Correct':<12} {'Avg Time':<12} {'Nodes':<14} {'Nodes/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(
            f"{r['depth']:<8} {r['score']}/{r['total']:<10} {format_time(r['avg_time']):<12} "
            f"{r['total_nodes']:<14,} {r['nodes_per_sec']:>12,.0f}"
        )

    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the Othello benchmark suite at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,3,5",
        help="Comma-separated list of depths to test (default: 1,3,5)"
    )
    parser.add_argument(
        "--eval",
        choices=[mode.value for mode in EvalMode],
        default=EvalMode.PRODUCTION.value,
        help="Leaf evaluator (default: production)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(depths, EvalMode(args.eval), verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
