"""
Board Module

The Othello board model and the rules of the game.

Key Components:
    - BoardState: 8x8 position with legality testing, move application,
      stone counts and heuristic scoring
    - IllegalMoveError: raised by the checked move-application path
    - Color, Move, SquarePosition: value types (re-exported from types)

Data Flow:
    BoardState + Move → is_legal_move() → apply() → mutated BoardState
"""

from othello_engine.board.state import BoardState, IllegalMoveError
from othello_engine.types import BOARD_SIZE, Color, Move, SquarePosition, classify_square

__all__ = [
    'BOARD_SIZE',
    'BoardState',
    'Color',
    'IllegalMoveError',
    'Move',
    'SquarePosition',
    'classify_square',
]
