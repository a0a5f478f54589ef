"""
Custom exceptions shared by all layers.

Every exception derives from GameError, so a caller can catch one top-level type without knowing which layer raised it.
"""


class GameError(Exception):
    """Base class of all custom errors in this application."""


class OutOfBoundsError(GameError):
    """A coordinate that does not lie on the 8x8 board."""


class IllegalMoveError(GameError):
    """The target square is occupied or does not bracket any opponent discs."""


class NotYourTurnError(GameError):
    """A player tried to act while it is the other player's turn."""


class GameStateError(GameError):
    """The request does not fit the current state of the game (ex. the game is already over)."""


class InvalidNotationError(GameError):
    """A board notation string could not be parsed."""


class InvalidRequestError(GameError):
    """Boundary validation of an incoming request failed."""


class RepositoryError(GameError):
    """Session could not be found / stored."""
