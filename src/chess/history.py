"""
Command log of the committed moves.

Every record holds copies of the pieces involved (never the live pieces on the board),
so reversing the move only requires putting those copies back.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color


@dataclass(frozen=True)
class MoveRecord:
    """Snapshot taken right before a move is made"""

    from_square: Square
    to_square: Square
    moved_piece: Piece  # as it was before moving (incl. the original has_moved flag)
    captured_piece: Optional[Piece]
    promotion: bool
    previous_turn: Color

    def to_list(self) -> list[int]:
        """[from_file, from_rank, to_file, to_rank]: how a move gets stored"""
        return [
            self.from_square.file,
            self.from_square.rank,
            self.to_square.file,
            self.to_square.rank,
        ]


class MoveHistory:
    """Stack of MoveRecords: push on commit, pop on undo"""

    def __init__(self) -> None:
        self._records: list[MoveRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MoveRecord]:
        """oldest move first"""
        return iter(self._records)

    def push(self, record: MoveRecord) -> None:
        self._records.append(record)

    def pop(self) -> Optional[MoveRecord]:
        """Most recent record, or None if nothing left to undo"""
        if not self._records:
            return None
        return self._records.pop()

    def peek(self) -> Optional[MoveRecord]:
        return self._records[-1] if self._records else None

    def clear(self) -> None:
        self._records.clear()
