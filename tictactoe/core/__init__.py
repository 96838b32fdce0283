"""Core engine components: board, evaluator, search, and error types."""

from .board import Board, new_game
from .errors import InvalidMoveError, NoAvailableMoveError, TicTacToeError
from .player import Player
from .search import SearchEngine
