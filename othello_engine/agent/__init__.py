"""
Agent Interface

The in-process surface a match harness drives: construct a Player for a
color, then call do_move() once per turn.

Turn Flow:
    harness → player.do_move(opponents_move, ms_left)
    player  → apply opponent move (checked)
    player  → find_best_move(board, color, depth)
    player  → apply own move, return it (None = pass)
"""

from othello_engine.agent.player import Player, setup_logger

__all__ = ['Player', 'setup_logger']
