"""
Utilities Module

Benchmarking helpers for the Othello engine.

Key Components:
    - BENCHMARK_POSITIONS: positions with known replies
    - evaluate_position: search one position and check the reply
    - run_suite: search a list of positions and summarise
"""

from othello_engine.utils.testing import (
    BENCHMARK_POSITIONS,
    BenchmarkPosition,
    BenchmarkResult,
    evaluate_position,
    run_suite,
)

__all__ = [
    'BENCHMARK_POSITIONS',
    'BenchmarkPosition',
    'BenchmarkResult',
    'evaluate_position',
    'run_suite',
]
