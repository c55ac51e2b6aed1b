"""
Othello Engine

Move-legality rules and a negamax agent for Othello/Reversi.

## Architecture

1. **board**: Board model and game rules
   - BoardState: 8x8 position, legality, move application, stone counts
   - Checked move application for moves coming from outside the engine

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable, zero-sum)
   - StoneDifferenceEvaluator: diagnostic stone differential
   - PositionalEvaluator: square-weighted production heuristic

3. **search**: Search algorithms
   - Negamax with fail-hard alpha-beta pruning
   - Deterministic row-major move order and tie-breaking

4. **agent**: The object a match harness drives
   - Player.do_move(opponents_move, ms_left) → move or None (pass)

5. **utils**: Benchmark positions and suite runner

## Quick Start

```python
from othello_engine import Color, Player

black = Player(Color.BLACK)
move = black.do_move(None, -1)
print(move)
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from othello_engine.agent import Player
from othello_engine.board import BoardState, IllegalMoveError
from othello_engine.config import EngineConfig
from othello_engine.evaluation import EvalMode
from othello_engine.search import find_best_move
from othello_engine.types import Color, Move

__all__ = [
    'BoardState',
    'Color',
    'EngineConfig',
    'EvalMode',
    'IllegalMoveError',
    'Move',
    'Player',
    'find_best_move',
]
