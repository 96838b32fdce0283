"""
Integration test suite for the tic-tac-toe engine.

Tests components working together end-to-end:
- Full game simulations (engine vs engine, engine vs random mover)
- Engine wrapper (move application, winner reporting, reset)
- Console driver (prompting, re-prompting on bad input, end of input)
"""

import ast
import logging
import random

import pytest
from unittest.mock import patch

from interface import cli
from tictactoe.core.board import new_game
from tictactoe.core.errors import InvalidMoveError, NoAvailableMoveError
from tictactoe.core.player import Player
from tictactoe.core.search import (
    VARIANT_ALPHABETA,
    VARIANT_MINIMAX,
    VARIANT_RANDOM,
    VARIANT_RANDOMIZED,
    SearchEngine,
)
from tictactoe.main import Engine

# ════════════════════════════════════════════════════════════════════════════
#  ENGINE VS ENGINE — FULL GAME SIMULATIONS
# ════════════════════════════════════════════════════════════════════════════


class TestFullGame:
    """Complete games driven through the public board/search API."""

    def test_optimal_play_from_empty_is_a_draw(self):
        """Both sides use the best move every turn: drawn, score 0."""
        engine = SearchEngine(VARIANT_ALPHABETA)
        board = new_game()
        moves = []

        while not board.is_terminal():
            move = engine.best_move(board, use_alpha_beta=True)
            assert move in board.available_moves()
            board.apply(move)
            moves.append(move)

        assert len(moves) == 9
        assert board.score() == 0
        assert board.winner() is None

    def test_unpruned_play_from_midgame_is_a_draw(self):
        engine = SearchEngine(VARIANT_MINIMAX)
        board = new_game()
        board.apply(5)
        board.apply(1)

        while not board.is_terminal():
            board.apply(engine.best_move(board, use_alpha_beta=False))

        assert board.score() == 0
        assert board.winner() is None

    def test_pruned_and_unpruned_choose_same_moves(self):
        pruned = SearchEngine(VARIANT_ALPHABETA)
        plain = SearchEngine(VARIANT_MINIMAX)
        board = new_game()
        board.apply(1)

        while not board.is_terminal():
            move = pruned.best_move(board, use_alpha_beta=True)
            assert move == plain.best_move(board, use_alpha_beta=False)
            board.apply(move)

    @pytest.mark.parametrize("seed", range(8))
    def test_engine_never_loses_to_random_as_player_a(self, seed):
        engine = SearchEngine(VARIANT_ALPHABETA)
        opponent = SearchEngine(VARIANT_RANDOM, rng=random.Random(seed))
        board = new_game()
        board.apply(5)  # skip the expensive empty-board search

        while not board.is_terminal():
            if board.turn == Player.PLAYER_A:
                board.apply(engine.best_move(board))
            else:
                board.apply(opponent.random_move(board))

        assert board.winner() != Player.PLAYER_B
        assert board.score() >= 0

    @pytest.mark.parametrize("seed", range(8))
    def test_engine_never_loses_to_random_as_player_b(self, seed):
        engine = SearchEngine(VARIANT_ALPHABETA)
        opponent = SearchEngine(VARIANT_RANDOM, rng=random.Random(seed))
        board = new_game()

        while not board.is_terminal():
            if board.turn == Player.PLAYER_B:
                board.apply(engine.best_move(board))
            else:
                board.apply(opponent.random_move(board))

        assert board.winner() != Player.PLAYER_A
        assert board.score() <= 0

    def test_randomized_engine_completes_game(self):
        engine = SearchEngine(VARIANT_RANDOMIZED, rng=random.Random(11))
        board = new_game()
        board.apply(5)
        board.apply(1)

        while not board.is_terminal():
            move = engine.best_move_randomized(board)
            assert move in board.available_moves()
            board.apply(move)

        assert board.n_moves <= 9
        with pytest.raises(NoAvailableMoveError):
            engine.best_move_randomized(board)


# ════════════════════════════════════════════════════════════════════════════
#  ENGINE WRAPPER
# ════════════════════════════════════════════════════════════════════════════


class TestEngineWrapper:
    def test_get_best_move_does_not_play(self):
        eng = Engine(variant=VARIANT_ALPHABETA)
        eng.make_move(5)
        move, score = eng.get_best_move()
        assert move in eng.available_moves()
        assert score == 0
        assert eng.board.n_moves == 1

    def test_computer_move_plays(self):
        eng = Engine(variant=VARIANT_RANDOM, seed=1)
        move = eng.computer_move()
        assert 1 <= move <= 9
        assert eng.board.n_moves == 1
        assert eng.turn() == Player.PLAYER_B

    def test_make_illegal_move(self):
        eng = Engine(variant=VARIANT_RANDOM)
        eng.make_move(1)
        with pytest.raises(InvalidMoveError):
            eng.make_move(1)

    def test_seed_makes_random_play_repeatable(self):
        first = Engine(variant=VARIANT_RANDOM, seed=42)
        second = Engine(variant=VARIANT_RANDOM, seed=42)
        for _ in range(5):
            assert first.computer_move() == second.computer_move()

    def test_winner_and_reset(self):
        eng = Engine(variant=VARIANT_RANDOM)
        for pos in (1, 4, 2, 5, 3):
            eng.make_move(pos)
        assert eng.is_game_over()
        assert eng.winner() == Player.PLAYER_A
        assert eng.score() == 1
        eng.reset()
        assert not eng.is_game_over()
        assert eng.available_moves() == list(range(1, 10))

    def test_make_move_logs_at_debug(self, caplog):
        eng = Engine(variant=VARIANT_RANDOM)
        with caplog.at_level(logging.DEBUG, logger="tictactoe.main"):
            eng.make_move(5)
            eng.make_move(1)
        messages = [r.getMessage() for r in caplog.records if r.name == "tictactoe.main"]
        assert messages == ["O plays 5 (score 0)", "X plays 1 (score 0)"]

    def test_reset_starts_a_fresh_board(self):
        eng = Engine(variant=VARIANT_RANDOM)
        eng.make_move(5)
        old_board = eng.board
        eng.reset()
        assert eng.board is not old_board
        assert old_board.n_moves == 1
        assert eng.board.n_moves == 0
        assert eng.turn() == Player.PLAYER_A

    def test_unknown_variant(self):
        with pytest.raises(ValueError):
            Engine(variant="montecarlo")

    def test_default_variant_from_config(self):
        with patch("tictactoe.main.CONFIG") as cfg:
            cfg.search.variant = VARIANT_MINIMAX
            cfg.search.seed = None
            eng = Engine()
        assert eng.search.variant == VARIANT_MINIMAX


# ════════════════════════════════════════════════════════════════════════════
#  CONSOLE DRIVER
# ════════════════════════════════════════════════════════════════════════════


def lowest_available(prompt):
    """Answer a prompt with the lowest position it offers."""
    offered = ast.literal_eval(prompt[prompt.index("["):prompt.rindex("]") + 1])
    return str(offered[0])


class TestConsoleDriver:
    def test_parse_args_defaults(self):
        args = cli.parse_args([])
        assert args.variant in (VARIANT_ALPHABETA, VARIANT_MINIMAX, VARIANT_RANDOMIZED, VARIANT_RANDOM)
        assert args.log_level

    def test_parse_args_rejects_unknown_variant(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--variant", "negamax"])

    def test_parse_args_log_level(self):
        assert cli.parse_args(["--log-level", "debug"]).log_level == "DEBUG"
        with pytest.raises(SystemExit):
            cli.parse_args(["--log-level", "LOUD"])

    def test_parse_args_who_moves_first(self):
        assert cli.parse_args(["--human-first"]).computer_first is False
        assert cli.parse_args(["--no-computer-first"]).computer_first is False
        assert cli.parse_args(["--computer-first"]).computer_first is True

    def test_computer_first_overrides_config(self):
        with patch("interface.cli.CONFIG") as cfg:
            cfg.ui.engine_name = "TicTacToe"
            cfg.ui.computer_first = False
            cfg.search.variant = VARIANT_RANDOM
            cfg.search.seed = None
            cfg.log_level = "INFO"
            assert cli.parse_args([]).computer_first is False
            assert cli.parse_args(["--computer-first"]).computer_first is True

    def test_human_first_game_against_alphabeta(self, monkeypatch, capsys):
        answers = iter(["abc", "0", "1", "1"])

        def fake_input(prompt):
            answer = next(answers, None)
            return answer if answer is not None else lowest_available(prompt)

        monkeypatch.setattr("builtins.input", fake_input)
        code = cli.main(["--human-first", "--variant", "alphabeta", "--log-level", "WARNING"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Please type a number 1..9." in out
        assert "Illegal move" in out
        assert "Game Over" in out
        # the engine plays X and never loses
        assert "Result: O wins" not in out

    def test_computer_first_random_game(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lowest_available)
        code = cli.main(["--variant", "random", "--seed", "5", "--log-level", "WARNING"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Engine plays:" in out
        assert "Current Score:" in out
        assert "Result:" in out

    def test_prompt_names_mark_and_moves(self, monkeypatch, capsys):
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return lowest_available(prompt)

        monkeypatch.setattr("builtins.input", fake_input)
        cli.main(["--variant", "random", "--seed", "1", "--log-level", "WARNING"])
        capsys.readouterr()

        assert prompts[0].startswith("Enter the Position to put X (Available Actions: [")

    def test_end_of_input_aborts(self, monkeypatch, capsys):
        def closed(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)
        code = cli.main(["--human-first", "--variant", "random", "--log-level", "WARNING"])
        out = capsys.readouterr().out

        assert code == 1
        assert "game aborted" in out
