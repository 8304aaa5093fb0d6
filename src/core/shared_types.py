"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    """The side a piece belongs to.

    NOTE: NONE never labels an actual piece. It is only used as "no winner" (draw / game not over).
    """

    WHITE = "white"
    BLACK = "black"
    NONE = "none"


class PieceType(StrEnum):
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"
    PAWN = "pawn"


class MoveResult(StrEnum):
    """Outcome of a move attempt. Every rejected attempt is reported as INVALID, whatever the reason."""

    INVALID = "invalid"
    SUCCESS = "success"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


# Results for which the move was actually committed to the board
COMMITTED_RESULTS: frozenset[MoveResult] = frozenset(
    {MoveResult.SUCCESS, MoveResult.CHECK, MoveResult.CHECKMATE, MoveResult.STALEMATE}
)


def opponent(color: Color) -> Color:
    """The other side. (NONE has no opponent, so it maps onto itself)"""
    if color == Color.WHITE:
        return Color.BLACK
    if color == Color.BLACK:
        return Color.WHITE
    return Color.NONE
