"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the candidate destination squares for each piece type.

These are pseudo-legal moves: the movement pattern + occupancy rules of the piece only.
Whether the move leaves your own king in check is verified later by the Board.
"""

from typing import Callable, Optional, Protocol

from src.chess.pieces import PAWN_DIRECTION, PAWN_STARTING_RANK, Piece
from src.chess.square import Square, Vector
from src.core.shared_types import PieceType


class BoardView(Protocol):
    """Just the parts the movement strategies need (read-only)"""

    def piece(self, square: Square) -> Optional[Piece]: ...


STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]
KNIGHT_JUMPS: list[Vector] = [
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
]
KING_STEPS: list[Vector] = STRAIGHTS + DIAGONALS


# --- MOVEMENT RULES ---
def raycasting_moves(piece: Piece, board: BoardView, directions: list[Vector]) -> list[Square]:
    """
    Raycasting algorithm
    -----

    Move along each direction until we hit another piece or the edge of the board.
    An opponent's piece can be captured (so it is included), one of your own pieces blocks the line of sight.
    """
    squares: list[Square] = []
    for direction in directions:
        target = piece.position.shifted(direction)
        while target.is_within_bounds():
            occupant = board.piece(target)
            if occupant is None:
                squares.append(target)
                target = target.shifted(direction)
                continue

            if occupant.color != piece.color:
                squares.append(target)
            break
    return squares


def single_step_moves(piece: Piece, board: BoardView, deltas: list[Vector]) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump to a fixed set of squares"""
    squares: list[Square] = []
    for delta in deltas:
        target = piece.position.shifted(delta)
        if not target.is_within_bounds():
            continue

        occupant = board.piece(target)
        if occupant is None or occupant.color != piece.color:
            squares.append(target)
    return squares


def candidate_pawn_moves(piece: Piece, board: BoardView) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward (only onto an empty square).
    - It can move by two when still on its starting rank (both squares must be empty)
    - takes diagonally (only when there is an opponent's piece to take)

    NOTE: 'never moved' is inferred from the starting rank, not from Piece.has_moved
    """
    squares: list[Square] = []
    direction = PAWN_DIRECTION[piece.color]

    one_step = piece.position.shifted((0, direction))
    if one_step.is_within_bounds() and board.piece(one_step) is None:
        squares.append(one_step)

        two_steps = one_step.shifted((0, direction))
        on_starting_rank = piece.position.rank == PAWN_STARTING_RANK[piece.color]
        if (
            on_starting_rank
            and two_steps.is_within_bounds()
            and board.piece(two_steps) is None
        ):
            squares.append(two_steps)

    for df in (-1, 1):
        target = piece.position.shifted((df, direction))
        if not target.is_within_bounds():
            continue
        occupant = board.piece(target)
        if occupant is not None and occupant.color != piece.color:
            squares.append(target)
    return squares


def candidate_knight_moves(piece: Piece, board: BoardView) -> list[Square]:
    """Knights always move such that |delta_rank| + |delta_file| = 3"""
    return single_step_moves(piece, board, KNIGHT_JUMPS)


def candidate_bishop_moves(piece: Piece, board: BoardView) -> list[Square]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_moves(piece, board, DIAGONALS)


def candidate_rook_moves(piece: Piece, board: BoardView) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_moves(piece, board, STRAIGHTS)


def candidate_queen_moves(piece: Piece, board: BoardView) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_moves(piece, board, STRAIGHTS + DIAGONALS)


def candidate_king_moves(piece: Piece, board: BoardView) -> list[Square]:
    """
    The king can move by a single square at the time. (No castling)
    """
    return single_step_moves(piece, board, KING_STEPS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Piece, BoardView], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def candidate_moves(piece: Piece, board: BoardView) -> list[Square]:
    """Dispatch on the piece type"""
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, board)
