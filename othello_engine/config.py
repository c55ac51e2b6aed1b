"""
Engine configuration for the Othello agent.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from othello_engine.evaluation import EvalMode
from othello_engine.search.negamax import DEFAULT_DEPTH


@dataclass
class EngineConfig:
    """Configuration for an Othello player.

    Collects the search and logging settings in one place so a player can be
    built from a single object.
    """

    # Search
    search_depth: int = DEFAULT_DEPTH
    """Fixed number of plies searched for every move"""

    eval_mode: Union[EvalMode, str] = EvalMode.PRODUCTION
    """Leaf evaluator: "production" (positional) or "diagnostic" (stone count)"""

    # Logging
    log_level: str = "INFO"
    """Level for the othello_engine logger (DEBUG, INFO, WARNING, ...)"""

    log_file: Optional[Path] = None
    """Write engine logs to this file instead of stderr"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.eval_mode = EvalMode(self.eval_mode)

        if self.log_file is not None:
            self.log_file = Path(self.log_file)

        if self.search_depth < 1:
            raise ValueError(f"search_depth must be at least 1, got {self.search_depth}")

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")

    def __repr__(self) -> str:
        return (
            f"EngineConfig(depth={self.search_depth}, eval={self.eval_mode.value}, "
            f"log_level={self.log_level})"
        )
