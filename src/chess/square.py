"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8.
BOARD_SIZE = 8

Vector = tuple[int, int]


@dataclass(frozen=True)
class Square:
    """
    Coordinates on the board, both counted from 0.
    ---

    * file: the column, 0 is the left-most column (the a-file)
    * rank: the row, 0 is the top row. Black starts at the top (ranks 0 and 1), White at the bottom (ranks 6 and 7).
    """

    file: int
    rank: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index % BOARD_SIZE, index // BOARD_SIZE)

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_SIZE) and (0 <= self.rank < BOARD_SIZE)

    def index(self) -> int:
        """Position in a flat, row-by-row array of all squares"""
        return self.rank * BOARD_SIZE + self.file

    def shifted(self, delta: Vector) -> Square:
        df, dr = delta
        return Square(self.file + df, self.rank + dr)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square.from_index(index) for index in range(BOARD_SIZE * BOARD_SIZE)
)
