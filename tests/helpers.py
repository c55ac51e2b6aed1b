"""
Shared positions and helpers for the test modules.
"""

import numpy as np

from othello_engine.board import BoardState
from othello_engine.types import BOARD_SIZE, DIRECTIONS, Color

EMPTY_ROW = "." * 8

INITIAL_DESCRIPTION = EMPTY_ROW * 3 + "...wb..." + "...bw..." + EMPTY_ROW * 3

# Black on (2,2), White on (3,2)..(6,2), (7,2) empty
CAPTURE_LINE = EMPTY_ROW * 2 + "..bwwww." + EMPTY_ROW * 5

# Black to move with no legal move; White can play (3,0)
FORCED_PASS = "wwb....." + EMPTY_ROW * 7

# Black playing (2,2) flips (3,2) and (2,3); the (1,2) ray runs into an
# empty cell and flips nothing
TWO_LINE_CAPTURE = EMPTY_ROW * 2 + ".w.wb..." + "..w....." + "..b....." + EMPTY_ROW * 3


def board_from(description: str) -> BoardState:
    return BoardState.from_string(description)


def brute_force_flips(board: BoardState, x: int, y: int, color: Color) -> int:
    """Count the stones a placement at (x, y) would flip, straight from the rules."""
    if board.grid[x, y] != 0:
        return 0

    total = 0
    for dx, dy in DIRECTIONS:
        run = 0
        cx, cy = x + dx, y + dy
        while 0 <= cx < BOARD_SIZE and 0 <= cy < BOARD_SIZE and board.grid[cx, cy] == -color.value:
            run += 1
            cx += dx
            cy += dy
        if 0 <= cx < BOARD_SIZE and 0 <= cy < BOARD_SIZE and board.grid[cx, cy] == color.value:
            total += run
    return total


def random_playout(seed: int, plies: int) -> BoardState:
    """Play random legal moves from the start, passing when forced."""
    rng = np.random.default_rng(seed)
    board = BoardState()
    color = Color.BLACK
    for _ in range(plies):
        if board.is_terminal():
            break
        moves = board.legal_moves(color)
        if moves:
            board.apply(moves[rng.integers(len(moves))], color)
        color = color.opposite
    return board
