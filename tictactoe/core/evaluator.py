"""Line-counting evaluator for the 3x3 board.

Scores are tallies of completed lines rather than a heuristic: a position
with no completed line is worth 0 to both sides.
"""

from typing import Sequence, Tuple

from tictactoe.core.player import Player

BOARD_CELLS = 9

# 0-based cell indexes of every line that wins the game.
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def count_lines(cells: Sequence[int]) -> Tuple[int, int]:
    """Return (player_score, opp_score): lines fully owned by PLAYER_A and by PLAYER_B."""
    player_score = 0
    opp_score = 0
    for a, b, c in WINNING_LINES:
        owner = cells[a]
        if owner == Player.EMPTY or owner != cells[b] or owner != cells[c]:
            continue
        if owner == Player.PLAYER_A:
            player_score += 1
        else:
            opp_score += 1
    return player_score, opp_score


def evaluate(cells: Sequence[int], n_moves: int, turn: Player) -> Tuple[bool, int]:
    """Return (terminal, score) for a position.

    ``turn`` is the side that has just been credited with the last move: the
    board calls this before flipping the turn. PLAYER_A is scored with its own
    line count, PLAYER_B with the negated count of its lines.
    """
    player_score, opp_score = count_lines(cells)

    # A full board or any completed line ends the game, even if both sides
    # somehow own a line.
    terminal = n_moves == BOARD_CELLS or player_score != 0 or opp_score != 0

    if turn == Player.PLAYER_A:
        return terminal, player_score
    return terminal, -opp_score
