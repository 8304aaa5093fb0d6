"""Custom exceptions. Everything raised by the layers around the engine derives from GameError."""


class GameError(Exception):
    """Top-level exception: catch this one if the specific reason does not matter."""


class InvalidRequestError(GameError):
    """Input at the boundary cannot be interpreted.

    NOTE: deliberately not a ValueError, so pydantic validators let it propagate as-is.
    """


class RepositoryError(GameError):
    """Requested record is not known to the repository."""


class GameStateError(GameError):
    """A stored game cannot be turned back into a valid Board."""
