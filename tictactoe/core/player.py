"""Cell contents and side-to-move markers."""

from enum import IntEnum


class Player(IntEnum):
    """Contents of a board cell. The two non-empty values double as turn markers."""

    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = -1

    @property
    def mark(self) -> str:
        """Character printed for this cell."""
        return _MARKS[self]

    def opposite(self) -> "Player":
        """Get the opposite player."""
        if self == Player.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Player.PLAYER_B if self == Player.PLAYER_A else Player.PLAYER_A


_MARKS = {Player.EMPTY: " ", Player.PLAYER_A: "O", Player.PLAYER_B: "X"}
