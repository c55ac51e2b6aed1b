"""
Unit Tests for Evaluation Module

Tests for position evaluation functions, focusing on:
    - Square classification and the weight table
    - Stone differential (diagnostic) and positional (production) scores
    - Zero-sum symmetry: score(color) == -score(color.opposite)
    - Evaluator lookup by mode
"""

import numpy as np
import pytest

from othello_engine.board import BoardState, Color, Move, SquarePosition, classify_square
from othello_engine.evaluation import (
    EvalMode,
    Evaluator,
    PositionalEvaluator,
    StoneDifferenceEvaluator,
    WEIGHT_TABLE,
    get_evaluator,
)
from othello_engine.evaluation.classical import build_weight_table
from tests.helpers import EMPTY_ROW, board_from, random_playout


class TestSquareClassification:
    """Tests for classify_square()."""

    @pytest.mark.parametrize("x,y", [(0, 0), (0, 7), (7, 0), (7, 7)])
    def test_corners(self, x, y):
        assert classify_square(x, y) is SquarePosition.CORNER

    @pytest.mark.parametrize("x,y", [(1, 1), (1, 6), (6, 1), (6, 6)])
    def test_diagonal_to_corner(self, x, y):
        assert classify_square(x, y) is SquarePosition.DIAGONAL_TO_CORNER

    @pytest.mark.parametrize(
        "x,y", [(1, 0), (0, 1), (0, 6), (1, 7), (6, 7), (7, 6), (6, 0), (7, 1)]
    )
    def test_next_to_corner(self, x, y):
        assert classify_square(x, y) is SquarePosition.NEXT_TO_CORNER

    @pytest.mark.parametrize("x,y", [(0, 2), (5, 0), (7, 4), (3, 7)])
    def test_edges(self, x, y):
        assert classify_square(x, y) is SquarePosition.EDGE

    @pytest.mark.parametrize("x,y", [(2, 2), (3, 4), (5, 1), (1, 5)])
    def test_other(self, x, y):
        assert classify_square(x, y) is SquarePosition.OTHER

    def test_class_counts(self):
        counts = {}
        for x in range(8):
            for y in range(8):
                position = classify_square(x, y)
                counts[position] = counts.get(position, 0) + 1

        assert counts == {
            SquarePosition.CORNER: 4,
            SquarePosition.DIAGONAL_TO_CORNER: 4,
            SquarePosition.NEXT_TO_CORNER: 8,
            SquarePosition.EDGE: 16,
            SquarePosition.OTHER: 32,
        }

    def test_weight_table(self):
        assert WEIGHT_TABLE.shape == (8, 8)
        assert WEIGHT_TABLE[0, 0] == 3
        assert WEIGHT_TABLE[0, 3] == 2
        assert WEIGHT_TABLE[0, 1] == -2
        assert WEIGHT_TABLE[1, 1] == -3
        assert WEIGHT_TABLE[3, 3] == 1
        assert int(WEIGHT_TABLE.sum()) == 48
        assert np.array_equal(WEIGHT_TABLE, WEIGHT_TABLE.T), "Table should be symmetric"

    def test_weight_table_matches_classification(self):
        """The literal table agrees with the per-square classification."""
        built = build_weight_table()

        assert built.dtype == WEIGHT_TABLE.dtype
        assert np.array_equal(WEIGHT_TABLE, built)


class TestStoneDifferenceEvaluator:
    """Tests for the diagnostic evaluator."""

    @pytest.fixture
    def evaluator(self):
        return StoneDifferenceEvaluator()

    def test_starting_position_is_even(self, evaluator):
        assert evaluator.evaluate(BoardState(), Color.BLACK) == 0

    def test_after_opening_move(self, evaluator):
        board = BoardState()
        board.apply(Move(2, 3), Color.BLACK)

        assert evaluator.evaluate(board, Color.BLACK) == 3
        assert evaluator.evaluate(board, Color.WHITE) == -3

    def test_board_score_uses_diagnostic_mode(self):
        board = board_from("bbb" + "w" + "." * 60)
        assert board.score(Color.BLACK, EvalMode.DIAGNOSTIC) == 2
        assert board.score(Color.WHITE, "diagnostic") == -2


class TestPositionalEvaluator:
    """Tests for the production evaluator."""

    @pytest.fixture
    def evaluator(self):
        return PositionalEvaluator()

    def test_starting_position_is_even(self, evaluator):
        assert evaluator.evaluate(BoardState(), Color.BLACK) == 0

    def test_after_opening_move(self, evaluator):
        """Four central black stones against one central white stone."""
        board = BoardState()
        board.apply(Move(2, 3), Color.BLACK)

        assert evaluator.evaluate(board, Color.BLACK) == 3

    def test_corner_stone(self, evaluator):
        board = board_from("b" + "." * 63)
        assert evaluator.evaluate(board, Color.BLACK) == 3
        assert evaluator.evaluate(board, Color.WHITE) == -3

    def test_x_square_stone(self, evaluator):
        data = ["."] * 64
        data[1 + 8 * 1] = "w"
        board = board_from("".join(data))

        assert evaluator.evaluate(board, Color.WHITE) == -3
        assert evaluator.evaluate(board, Color.BLACK) == 3

    def test_corner_beats_next_to_corner(self, evaluator):
        corner = board_from("b" + "." * 63)
        next_to_corner = board_from(".b" + "." * 62)

        assert evaluator.evaluate(corner, Color.BLACK) > evaluator.evaluate(next_to_corner, Color.BLACK)

    def test_full_black_board(self, evaluator):
        board = board_from("b" * 64)
        assert evaluator.evaluate(board, Color.BLACK) == 48

    def test_empty_board(self, evaluator):
        assert evaluator.evaluate(board_from(EMPTY_ROW * 8), Color.BLACK) == 0

    def test_board_score_defaults_to_production(self):
        board = board_from("b" + "." * 63)
        assert board.score(Color.BLACK) == 3


class TestZeroSum:
    """The search depends on every evaluator being zero-sum."""

    @pytest.mark.parametrize("mode", list(EvalMode))
    @pytest.mark.parametrize("seed", range(6))
    def test_symmetry(self, mode, seed):
        board = random_playout(seed=seed, plies=10 + 8 * seed)
        assert board.score(Color.BLACK, mode) == -board.score(Color.WHITE, mode)

    @pytest.mark.parametrize("mode", list(EvalMode))
    def test_evaluate_for_side(self, mode):
        board = random_playout(seed=42, plies=20)
        evaluator = get_evaluator(mode)

        assert evaluator.evaluate_for_side(board, Color.BLACK, Color.BLACK) == board.score(Color.BLACK, mode)
        assert evaluator.evaluate_for_side(board, Color.BLACK, Color.WHITE) == board.score(Color.WHITE, mode)


class TestEvaluatorInterface:
    """Tests for Evaluator abstract interface and lookup."""

    def test_evaluator_is_abstract(self):
        with pytest.raises(TypeError):
            Evaluator()

    def test_get_evaluator_by_mode(self):
        assert isinstance(get_evaluator(EvalMode.DIAGNOSTIC), StoneDifferenceEvaluator)
        assert isinstance(get_evaluator(EvalMode.PRODUCTION), PositionalEvaluator)

    def test_get_evaluator_by_name(self):
        assert get_evaluator("diagnostic").mode is EvalMode.DIAGNOSTIC
        assert get_evaluator("production").mode is EvalMode.PRODUCTION

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError):
            get_evaluator("material")

    def test_repr(self):
        assert repr(PositionalEvaluator()) == "PositionalEvaluator()"
