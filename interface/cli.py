import argparse
import logging
import sys

from tictactoe.config import CONFIG, LOG_LEVELS
from tictactoe.core.errors import InvalidMoveError
from tictactoe.core.player import Player
from tictactoe.core.search import VARIANTS
from tictactoe.main import Engine


def parse_args(argv=None):
    p = argparse.ArgumentParser(description=f"{CONFIG.ui.engine_name}: play against the engine")
    p.add_argument("--variant", choices=VARIANTS, default=CONFIG.search.variant,
                   help="how the engine picks its moves")
    p.add_argument("--computer-first", action=argparse.BooleanOptionalAction,
                   default=CONFIG.ui.computer_first,
                   help="let the engine make the opening move")
    p.add_argument("--human-first", dest="computer_first", action="store_false",
                   help="same as --no-computer-first")
    p.add_argument("--seed", type=int, default=CONFIG.search.seed,
                   help="seed for the randomized variants")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=CONFIG.log_level)
    return p.parse_args(argv)


def read_human_move(engine: Engine) -> bool:
    """Prompt until a legal position is played. Returns False when input runs out."""
    mark = engine.turn().mark
    while True:
        try:
            raw = input(f"Enter the Position to put {mark} (Available Actions: {engine.available_moves()}): ")
        except EOFError:
            return False
        try:
            engine.make_move(int(raw.strip()))
            return True
        except InvalidMoveError as e:
            print(f"Illegal move: {e}. Try again.")
        except ValueError:
            print("Please type a number 1..9.")


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s: %(message)s")

    engine = Engine(variant=args.variant, seed=args.seed)
    human = Player.PLAYER_B if args.computer_first else Player.PLAYER_A

    print("Index map:\n1|2|3\n4|5|6\n7|8|9")
    if not args.computer_first:
        engine.print_board()

    while not engine.is_game_over():
        if engine.turn() != human:
            move = engine.computer_move()
            print(f"Engine plays: {move}")
            engine.print_board()
            continue

        if not read_human_move(engine):
            print("\nInput closed, game aborted.")
            return 1
        engine.print_board()

    winner = engine.winner()
    print("Game Over")
    print(f"Result: {winner.mark + ' wins' if winner else 'Draw'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
