class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class InvalidSize(GameException):
    """Raised when a board is created with an unsupported size."""
    pass


class InvalidMove(GameException):
    """Raised when a move is out of bounds or targets an occupied cell."""
    pass


class NoLegalMoves(GameException):
    """Raised when a move selector is asked to move on a full board."""
    pass


class GameEnded(GameException):
    """Raised when trying to move in an ended game."""
    pass


class NotYourTurn(GameException):
    """Raised when a human tries to move while the computer is to play."""
    pass


class SessionNotFound(GameException):
    """Raised when a game session is not found."""
    pass


class InvalidRequest(GameException):
    """Raised when a service rejects its arguments."""
    pass


class SessionLimitReached(GameException):
    """Raised when the registry is full of games still being played."""
    pass
