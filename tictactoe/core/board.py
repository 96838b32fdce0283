"""3x3 game state with in-place apply/undo used by the search."""

from typing import Iterable, List, Optional, Tuple

from tictactoe.core.errors import InvalidMoveError
from tictactoe.core.evaluator import BOARD_CELLS, count_lines, evaluate
from tictactoe.core.player import Player


class Board:
    def __init__(self):
        """Create an empty board with PLAYER_A to move."""
        self._cells: List[Player] = [Player.EMPTY] * BOARD_CELLS
        self._turn = Player.PLAYER_A
        self._n_moves = 0
        self._terminal = False
        self._score = 0

    @classmethod
    def from_cells(cls, cells: Iterable[int], turn: Optional[Player] = None) -> "Board":
        """Build a position from 9 cell values.

        The side to move defaults to PLAYER_A when an even number of cells is
        occupied. Terminal flag and score are evaluated as if the other side
        had just moved.
        """
        board = cls()
        board._cells = [Player(c) for c in cells]
        if len(board._cells) != BOARD_CELLS:
            raise ValueError(f"Expected {BOARD_CELLS} cells, got {len(board._cells)}")
        board._n_moves = sum(1 for c in board._cells if c != Player.EMPTY)
        if turn is None:
            turn = Player.PLAYER_A if board._n_moves % 2 == 0 else Player.PLAYER_B
        board._turn = turn
        board._terminal, board._score = evaluate(board._cells, board._n_moves, turn.opposite())
        return board

    def copy(self) -> "Board":
        """Independent snapshot; searches on the copy never touch this board."""
        clone = Board()
        clone._cells = list(self._cells)
        clone._turn = self._turn
        clone._n_moves = self._n_moves
        clone._terminal = self._terminal
        clone._score = self._score
        return clone

    @property
    def cells(self) -> Tuple[Player, ...]:
        """Read-only view of the 9 cells; apply and undo are the only writers."""
        return tuple(self._cells)

    @property
    def turn(self) -> Player:
        return self._turn

    @property
    def n_moves(self) -> int:
        return self._n_moves

    def is_terminal(self) -> bool:
        """True once a line is completed or the board is full."""
        return self._terminal

    def score(self) -> int:
        """Score cached by the last apply/undo."""
        return self._score

    def available_moves(self) -> List[int]:
        """Empty cells as 1-based positions, ascending. Empty once the game is over."""
        if self._terminal:
            return []
        return [i + 1 for i, c in enumerate(self._cells) if c == Player.EMPTY]

    def apply(self, pos: int):
        """Mark ``pos`` for the side to move, re-evaluate, then pass the turn."""
        index = self._index(pos)
        if self._cells[index] != Player.EMPTY:
            raise InvalidMoveError(pos)

        self._cells[index] = self._turn
        self._n_moves += 1
        self._terminal, self._score = evaluate(self._cells, self._n_moves, self._turn)
        self._turn = self._turn.opposite()

    def undo(self, pos: int):
        """Inverse of apply. Only the most recently applied move may be undone."""
        index = self._index(pos)
        self._cells[index] = Player.EMPTY
        self._n_moves -= 1
        self._terminal, self._score = evaluate(self._cells, self._n_moves, self._turn)
        self._turn = self._turn.opposite()

    def evaluate(self) -> Tuple[bool, int]:
        """Recompute (terminal, score) for the current cells and turn."""
        return evaluate(self._cells, self._n_moves, self._turn)

    def line_tallies(self) -> Tuple[int, int]:
        """Completed lines owned by (PLAYER_A, PLAYER_B)."""
        return count_lines(self._cells)

    def winner(self) -> Optional[Player]:
        """The side owning a completed line, or None for a draw or unfinished game."""
        player_score, opp_score = count_lines(self._cells)
        if player_score and not opp_score:
            return Player.PLAYER_A
        if opp_score and not player_score:
            return Player.PLAYER_B
        return None

    def render(self, show_score: bool = True) -> str:
        """Framed 3x3 grid, optionally followed by the current score."""
        separator = "-------------"
        lines = ["", separator]
        for row in range(3):
            marks = [self._cells[row * 3 + col].mark for col in range(3)]
            lines.append("| " + " | ".join(marks) + " |")
            lines.append(separator)
        if show_score:
            lines.append(f"Current Score:  {self._score}")
        return "\n".join(lines)

    def print_board(self, show_score: bool = True):
        """Print the grid and score."""
        print(self.render(show_score))

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def _index(pos: int) -> int:
        if isinstance(pos, bool) or not isinstance(pos, int) or not 1 <= pos <= BOARD_CELLS:
            raise InvalidMoveError(pos, "Position out of range 1..9")
        return pos - 1


def new_game() -> Board:
    """Fresh game state."""
    return Board()
