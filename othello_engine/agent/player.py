"""
Othello Player

The Player is the object a match harness talks to. It keeps its own copy of
the game position, applies the opponent's reported move, searches for its
reply, plays that reply on its board and returns it.

Harness Contract:
    player = Player(Color.BLACK)
    move = player.do_move(opponents_move, ms_left)

    - opponents_move is None on the first move of the game and right after
      the opponent passed
    - ms_left is the time left for the whole game in milliseconds, -1 for no
      limit; the search runs to a fixed depth and does not use it
    - the returned move is always legal; None means the player passes

Errors:
    The opponent's move comes from outside the engine, so it goes through
    BoardState.apply_checked(). An illegal move raises IllegalMoveError and
    the player's board is left as it was.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

from othello_engine.board.state import BoardState, IllegalMoveError
from othello_engine.config import EngineConfig
from othello_engine.evaluation import Evaluator, get_evaluator
from othello_engine.search.negamax import find_best_move
from othello_engine.types import Color, Move, format_move

LOGGER_NAME = "othello_engine"


def setup_logger(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the engine logger.

    Args:
        level: Logging level name
        log_file: If given, log to this file; otherwise log to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for old_handler in logger.handlers:
        old_handler.close()
    logger.handlers.clear()

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class Player:
    """
    Othello agent playing one color.

    Attributes:
        color: Color this player moves for
        board: The player's view of the current game position
        config: Search and logging settings
        evaluator: Leaf evaluator used by the search
    """

    def __init__(
        self,
        color: Color,
        config: Optional[EngineConfig] = None,
        evaluator: Optional[Evaluator] = None,
    ):
        """
        Initialize a player with the standard starting position.

        Args:
            color: Color to play
            config: Engine settings (default: EngineConfig())
            evaluator: Leaf evaluator (default: the one for config.eval_mode)
        """
        self.color = color
        self.config = config if config else EngineConfig()
        self.evaluator = evaluator if evaluator else get_evaluator(self.config.eval_mode)
        self.board = BoardState()

        self.logger = setup_logger(self.config.log_level, self.config.log_file)
        self.logger.info(f"Player {self.color} ready: {self.config}")

    def set_board(self, board: BoardState):
        """
        Replace the player's position, e.g. to start from a test setup.

        The player keeps its own copy; later changes to ``board`` do not
        reach it.
        """
        self.board = board.clone()
        self.logger.debug(f"Board set: {board.to_string()}")

    def do_move(self, opponents_move: Optional[Move], ms_left: int = -1) -> Optional[Move]:
        """
        Compute the next move given the opponent's last move.

        Args:
            opponents_move: Opponent's last move, or None on the first move or
                after the opponent passed
            ms_left: Milliseconds left for the game (-1 = no limit); not used
                to bound the search

        Returns:
            The move played, or None to pass

        Raises:
            IllegalMoveError: If ``opponents_move`` is illegal for the opponent
        """
        opponent = self.color.opposite

        if opponents_move is not None:
            try:
                self.board.apply_checked(opponents_move, opponent)
            except IllegalMoveError:
                self.logger.error(
                    f"Rejected {format_move(opponents_move)} from {opponent}: not legal"
                )
                raise
            self.logger.debug(f"Opponent {opponent} played {format_move(opponents_move)}")

        self.logger.debug(f"Searching depth={self.config.search_depth} ms_left={ms_left}")
        start_time = time.time()

        result = find_best_move(
            self.board,
            self.color,
            depth=self.config.search_depth,
            evaluator=self.evaluator,
        )

        elapsed_ms = int((time.time() - start_time) * 1000)

        if result.move is None:
            self.logger.info(f"{self.color} passes (nodes={result.nodes}, time={elapsed_ms}ms)")
            return None

        self.board.apply(result.move, self.color)
        self.logger.info(
            f"{self.color} plays {format_move(result.move)}: value={result.value}, "
            f"nodes={result.nodes}, time={elapsed_ms}ms"
        )
        return result.move
