"""Tic-tac-toe engine package providing game state, evaluation, and search.

Modules:
- core.board: 3x3 state with in-place apply/undo
- core.evaluator: completed-line scoring
- core.search: minimax, alpha-beta, randomized and random move choice
- main: Engine wrapper used by the console interface
"""

from .core import (
    Board,
    InvalidMoveError,
    NoAvailableMoveError,
    Player,
    SearchEngine,
    TicTacToeError,
    new_game,
)

__version__ = "1.0.0"

__all__ = [
    "Board",
    "InvalidMoveError",
    "NoAvailableMoveError",
    "Player",
    "SearchEngine",
    "TicTacToeError",
    "new_game",
]
