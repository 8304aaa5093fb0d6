"""Unit tests for /src/chess/square.py"""

import pytest

from src.chess.square import ALL_SQUARES, BOARD_SIZE, Square


def test_square_within_bounds() -> None:
    """happy case: all squares of the 8x8 board"""
    for file in range(BOARD_SIZE):
        for rank in range(BOARD_SIZE):
            square = Square(file, rank)
            assert square.is_within_bounds()


@pytest.mark.parametrize(
    "file, rank",
    [(-1, 0), (0, -1), (BOARD_SIZE, 0), (0, BOARD_SIZE), (-1, -1), (8, 8)],
)
def test_square_out_of_bounds(file: int, rank: int) -> None:
    assert not Square(file, rank).is_within_bounds()


def test_squares_compare_by_value() -> None:
    """Two separately created squares with the same coordinates are the same square (and can be used as dict keys)"""
    assert Square(3, 4) == Square(3, 4)
    assert Square(3, 4) != Square(4, 3)
    assert len({Square(3, 4), Square(3, 4)}) == 1


def test_square_is_immutable() -> None:
    square = Square(1, 1)
    with pytest.raises(AttributeError):
        square.file = 2  # type: ignore[misc]


def test_flat_index_roundtrip() -> None:
    """Every square gets its own slot in the flat array"""
    indices = [square.index() for square in ALL_SQUARES]
    assert indices == list(range(BOARD_SIZE * BOARD_SIZE))
    for square in ALL_SQUARES:
        assert Square.from_index(square.index()) == square


def test_index_is_row_by_row() -> None:
    assert Square(0, 0).index() == 0
    assert Square(7, 0).index() == 7
    assert Square(0, 1).index() == 8
    assert Square(7, 7).index() == 63


def test_shifted() -> None:
    assert Square(4, 4).shifted((1, -2)) == Square(5, 2)
    # shifting off the board is allowed, bounds get checked separately
    assert not Square(0, 0).shifted((-1, 0)).is_within_bounds()
