import logging
import random
import time
from typing import Optional, Tuple

from tictactoe.core.board import Board
from tictactoe.core.errors import NoAvailableMoveError
from tictactoe.core.player import Player
from tictactoe.core.utils import format_info

logger = logging.getLogger(__name__)

# Any bound beyond the reachable score range (|score| <= 8) works.
INF = 1000

VARIANT_ALPHABETA = "alphabeta"
VARIANT_MINIMAX = "minimax"
VARIANT_RANDOMIZED = "randomized"
VARIANT_RANDOM = "random"
VARIANTS = (VARIANT_ALPHABETA, VARIANT_MINIMAX, VARIANT_RANDOMIZED, VARIANT_RANDOM)

# best_move_randomized plays a random move RANDOM_MOVE_CHANCE times in RANDOM_MOVE_DRAWS.
RANDOM_MOVE_CHANCE = 2
RANDOM_MOVE_DRAWS = 10


class SearchEngine:
    def __init__(self, variant: str = VARIANT_ALPHABETA, rng: Optional[random.Random] = None):
        if variant not in VARIANTS:
            raise ValueError(f"Unknown search variant {variant!r}, expected one of {VARIANTS}")
        self.variant = variant
        self.rng = rng or random.Random()
        self.nodes = 0

    def search_best_move(self, board: Board) -> Tuple[int, int]:
        """Pick a move with the configured variant. Returns (move, score).

        The search runs on a copy, so ``board`` is left untouched. Random
        choices report the score of the position right after the move.
        """
        search_board = board.copy()
        depth = len(search_board.available_moves())
        self.nodes = 0
        start_time = time.time()

        if self.variant == VARIANT_RANDOM:
            move = self.random_move(search_board)
            score = self._score_after(search_board, move)
        elif self.variant == VARIANT_RANDOMIZED:
            move = self.best_move_randomized(search_board)
            score = self._score_after(search_board, move)
        else:
            move, score = self._best_move_scored(search_board, self.variant == VARIANT_ALPHABETA)

        elapsed = time.time() - start_time
        logger.info(format_info(self.variant, depth, score, self.nodes, elapsed, move))
        return move, score

    def minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        self.nodes += 1
        if board.is_terminal() or depth == 0:
            return board.score()

        if maximizing:
            max_eval = -INF
            for pos in board.available_moves():
                board.apply(pos)
                try:
                    value = self.minimax(board, depth - 1, False)
                finally:
                    board.undo(pos)
                max_eval = max(max_eval, value)
            return max_eval
        else:
            min_eval = INF
            for pos in board.available_moves():
                board.apply(pos)
                try:
                    value = self.minimax(board, depth - 1, True)
                finally:
                    board.undo(pos)
                min_eval = min(min_eval, value)
            return min_eval

    def minimax_alpha_beta(self, board: Board, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        self.nodes += 1
        if board.is_terminal() or depth == 0:
            return board.score()

        if maximizing:
            max_eval = -INF
            for pos in board.available_moves():
                board.apply(pos)
                try:
                    value = self.minimax_alpha_beta(board, depth - 1, alpha, beta, False)
                finally:
                    board.undo(pos)
                max_eval = max(max_eval, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break  # beta cut-off
            return max_eval
        else:
            min_eval = INF
            for pos in board.available_moves():
                board.apply(pos)
                try:
                    value = self.minimax_alpha_beta(board, depth - 1, alpha, beta, True)
                finally:
                    board.undo(pos)
                min_eval = min(min_eval, value)
                beta = min(beta, value)
                if beta <= alpha:
                    break  # alpha cut-off
            return min_eval

    def best_move(self, board: Board, use_alpha_beta: bool = True) -> int:
        """Full-depth search for the side to move; ties keep the lowest position."""
        move, _ = self._best_move_scored(board, use_alpha_beta)
        return move

    def best_move_randomized(self, board: Board) -> int:
        """Unpruned best move, except for a random move 2 times in 10."""
        if self.rng.randrange(RANDOM_MOVE_DRAWS) < RANDOM_MOVE_CHANCE:
            return self.random_move(board)
        return self.best_move(board, use_alpha_beta=False)

    def random_move(self, board: Board) -> int:
        available = board.available_moves()
        if not available:
            raise NoAvailableMoveError()
        return self.rng.choice(available)

    def _best_move_scored(self, board: Board, use_alpha_beta: bool) -> Tuple[int, int]:
        available = board.available_moves()
        if not available:
            raise NoAvailableMoveError()

        # Scores are positive for PLAYER_A: A maximizes at the root and the
        # reply is searched as the minimizer; PLAYER_B mirrors both.
        sign = 1 if board.turn == Player.PLAYER_A else -1
        reply_maximizing = board.turn != Player.PLAYER_A
        depth = len(available) - 1

        best_value = -INF
        best_score = 0
        best = available[0]
        for pos in available:
            board.apply(pos)
            try:
                if use_alpha_beta:
                    score = self.minimax_alpha_beta(board, depth, -INF, INF, reply_maximizing)
                else:
                    score = self.minimax(board, depth, reply_maximizing)
            finally:
                board.undo(pos)
            if sign * score > best_value:
                best_value = sign * score
                best_score = score
                best = pos

        return best, best_score

    @staticmethod
    def _score_after(board: Board, move: int) -> int:
        board.apply(move)
        try:
            return board.score()
        finally:
            board.undo(move)
