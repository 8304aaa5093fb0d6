"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import (
    BACK_RANK,
    Piece,
    create_piece,
    starting_pieces,
)
from src.chess.square import Square
from src.core.shared_types import Color, PieceType

PLAYING_COLORS = [Color.WHITE, Color.BLACK]


@pytest.mark.parametrize("piece_type", list(PieceType))
@pytest.mark.parametrize("color", PLAYING_COLORS)
def test_factory_creates_requested_piece(piece_type: PieceType, color: Color) -> None:
    square = Square(3, 4)
    piece = create_piece(piece_type, color, square)
    assert piece.type == piece_type
    assert piece.color == color
    assert piece.position == square
    assert not piece.has_moved


def test_factory_refuses_pieces_without_color() -> None:
    with pytest.raises(ValueError):
        create_piece(PieceType.QUEEN, Color.NONE, Square(0, 0))


def test_clone_is_independent() -> None:
    """Changing the copy must not change the original (the move history depends on this)"""
    piece = Piece(PieceType.ROOK, Color.WHITE, Square(0, 7))
    copy = piece.clone()
    assert copy == piece
    assert copy is not piece

    copy.has_moved = True
    copy.position = Square(0, 3)
    assert not piece.has_moved
    assert piece.position == Square(0, 7)


@pytest.mark.parametrize(
    "color, rank, expected",
    [
        (Color.WHITE, 0, True),
        (Color.WHITE, 1, False),
        (Color.WHITE, 7, False),
        (Color.BLACK, 7, True),
        (Color.BLACK, 6, False),
        (Color.BLACK, 0, False),
    ],
)
def test_pawn_promotion_eligibility(color: Color, rank: int, expected: bool) -> None:
    """White promotes on rank 0, Black on rank 7"""
    pawn = Piece(PieceType.PAWN, color, Square(2, rank))
    assert pawn.is_promotion_eligible() == expected


@pytest.mark.parametrize(
    "piece_type", [piece_type for piece_type in PieceType if piece_type != PieceType.PAWN]
)
def test_only_pawns_promote(piece_type: PieceType) -> None:
    piece = Piece(piece_type, Color.WHITE, Square(2, 0))
    assert not piece.is_promotion_eligible()


def test_starting_pieces() -> None:
    """16 pieces per side, pawns on the 2nd rank from each side, identical back ranks"""
    pieces = starting_pieces()
    assert len(pieces) == 32
    by_square = {piece.position: piece for piece in pieces}
    assert len(by_square) == 32

    for file, piece_type in enumerate(BACK_RANK):
        assert by_square[Square(file, 0)] == Piece(piece_type, Color.BLACK, Square(file, 0))
        assert by_square[Square(file, 7)] == Piece(piece_type, Color.WHITE, Square(file, 7))
        assert by_square[Square(file, 1)] == Piece(PieceType.PAWN, Color.BLACK, Square(file, 1))
        assert by_square[Square(file, 6)] == Piece(PieceType.PAWN, Color.WHITE, Square(file, 6))


def test_one_king_per_side() -> None:
    kings = [piece for piece in starting_pieces() if piece.type == PieceType.KING]
    assert sorted(king.color for king in kings) == sorted(PLAYING_COLORS)
    assert all(king.position.file == 4 for king in kings)
