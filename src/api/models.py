"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, MoveResult, PieceType

SquareCoordinates = list[int]


def _validate_coordinates(value: SquareCoordinates) -> SquareCoordinates:
    """
    A square is sent as [file, rank].

    NOTE: The range is NOT checked here. Squares off the board are a normal (rejected) move attempt, the engine deals with those.
    """
    if len(value) != 2:
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a square: expected [file, rank]."
        )
    return value


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class SelectSquareRequest(BaseModel):
    """The user clicked on a square"""

    game_id: UUID
    square: SquareCoordinates

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: SquareCoordinates) -> SquareCoordinates:
        return _validate_coordinates(value)


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareCoordinates
    to_square: SquareCoordinates

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: SquareCoordinates) -> SquareCoordinates:
        return _validate_coordinates(value)


class LegalMovesRequest(BaseModel):
    game_id: UUID
    square: SquareCoordinates

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: SquareCoordinates) -> SquareCoordinates:
        return _validate_coordinates(value)


class UndoRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    type: PieceType
    color: Color
    square: SquareCoordinates
    has_moved: bool


class GameResponse(BaseModel):
    game_id: UUID
    pieces: list[PieceResponse]
    current_turn: Color
    game_over: bool
    winner: Color
    move_count: int
    selected_square: Optional[SquareCoordinates] = None
    last_result: Optional[MoveResult] = None
    status_message: str = ""


class LegalMovesResponse(BaseModel):
    game_id: UUID
    square: SquareCoordinates
    legal_moves: list[SquareCoordinates]
