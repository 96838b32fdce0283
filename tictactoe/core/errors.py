"""Exception types raised by the board and the search."""


class TicTacToeError(Exception):
    """Base class for engine errors."""


class InvalidMoveError(TicTacToeError, ValueError):
    """A move targets an occupied cell or a position outside 1..9."""

    def __init__(self, position, reason: str = "Position already marked!"):
        self.position = position
        super().__init__(f"{reason} (position {position!r})")


class NoAvailableMoveError(TicTacToeError, RuntimeError):
    """A move was requested but no empty cell remains."""

    def __init__(self, message: str = "No available moves: the game is over"):
        super().__init__(message)
