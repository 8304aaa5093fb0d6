"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and the db layer (lower) use the model defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
StoredMove = list[int]  # [from_file, from_rank, to_file, to_rank]
StoredSquare = list[int]  # [file, rank]


@dataclass
class GameModel:
    """Transport-safe representation of a game session used between API, Service and DB layers.

    NOTE: The moves are the source of truth. The Board (incl. its undo history) gets rebuilt by replaying them.
    current_turn, game_over and winner are stored as well: loading a game checks them against the replayed Board.
    """

    moves: list[StoredMove] = field(default_factory=list)
    current_turn: str = "white"
    game_over: bool = False
    winner: str = "none"
    selected_square: Optional[StoredSquare] = None
    status_message: str = ""
