import logging
import random
from typing import List, Optional, Tuple

from tictactoe.config import CONFIG
from tictactoe.core.board import Board, new_game
from tictactoe.core.player import Player
from tictactoe.core.search import SearchEngine

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, variant: Optional[str] = None, seed: Optional[int] = None):
        variant = variant or CONFIG.search.variant
        seed = seed if seed is not None else CONFIG.search.seed
        self.board = new_game()
        self.search = SearchEngine(variant, rng=random.Random(seed))

    def get_best_move(self) -> Tuple[int, int]:
        return self.search.search_best_move(self.board)

    def computer_move(self) -> int:
        move, _ = self.get_best_move()
        self.make_move(move)
        return move

    def make_move(self, pos: int):
        mover = self.board.turn
        self.board.apply(pos)
        logger.debug("%s plays %d (score %d)", mover.mark, pos, self.board.score())

    def available_moves(self) -> List[int]:
        return self.board.available_moves()

    def is_game_over(self) -> bool:
        return self.board.is_terminal()

    def score(self) -> int:
        return self.board.score()

    def turn(self) -> Player:
        return self.board.turn

    def winner(self) -> Optional[Player]:
        return self.board.winner()

    def reset(self):
        self.board = new_game()

    def print_board(self):
        self.board.print_board(CONFIG.ui.show_score)
