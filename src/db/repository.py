"""Protocol repository (implemented with SQLAlchemy, the service only depends on this protocol)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """
    Storage of game sessions.
    ---

    A stored game is the list of committed moves plus session fields (turn, result, selection, last message).
    The pieces themselves are never stored: the service rebuilds the Board by replaying the moves.
    """

    def get_game(self, game_id: UUID) -> GameModel | None:
        """None if no session with this ID exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a new session, the repository hands out the ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the session after a move, undo or selection change. None if the ID is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove the session and return what was stored (None if the ID is unknown)."""
        ...
