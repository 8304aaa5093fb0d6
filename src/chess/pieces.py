"""Defines the chess pieces, and the factory to create them"""

from dataclasses import dataclass, replace
from typing import Self

from src.chess.square import BOARD_SIZE, Square
from src.core.shared_types import Color, PieceType

# Pawns start on these ranks. White moves up the board (towards rank 0), Black moves down.
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: BOARD_SIZE - 2, Color.BLACK: 1}
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: BOARD_SIZE - 1}


@dataclass
class Piece:
    type: PieceType
    color: Color
    position: Square
    has_moved: bool = False

    def clone(self) -> Self:
        """Independent copy (Square is immutable, so a shallow replace is a deep copy here)"""
        return replace(self)

    def is_promotion_eligible(self) -> bool:
        """Only pawns that reached the far side of the board"""
        return (
            self.type == PieceType.PAWN
            and self.position.rank == PROMOTION_RANK[self.color]
        )


def create_piece(piece_type: PieceType, color: Color, position: Square) -> Piece:
    """Piece factory: the single place where new pieces get made (board setup + promotion)"""
    if color == Color.NONE:
        raise ValueError(f"Cannot create a {piece_type} without a color.")
    return Piece(piece_type, color, position)


# Back rank, read from file 0 to file 7. Identical for both colors.
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def starting_pieces() -> list[Piece]:
    """All 32 pieces of the standard starting position"""
    pieces: list[Piece] = []
    back_ranks = {Color.BLACK: 0, Color.WHITE: BOARD_SIZE - 1}
    for color, back_rank in back_ranks.items():
        for file, piece_type in enumerate(BACK_RANK):
            pieces.append(create_piece(piece_type, color, Square(file, back_rank)))
        for file in range(BOARD_SIZE):
            pieces.append(
                create_piece(
                    PieceType.PAWN, color, Square(file, PAWN_STARTING_RANK[color])
                )
            )
    return pieces
