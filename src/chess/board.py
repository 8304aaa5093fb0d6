"""
The Board implements all rules of the game: it owns the pieces, knows whose turn it is, and decides if a move is legal.

The presentation layer only talks to the Board through:
* initialize()
* piece_at()
* attempt_move()
* undo()
* the readable fields current_turn, game_over, winner
"""

import logging
from typing import Optional, Self

from src.chess.history import MoveHistory, MoveRecord
from src.chess.moves import candidate_moves
from src.chess.pieces import Piece, create_piece, starting_pieces
from src.chess.square import ALL_SQUARES, BOARD_SIZE, Square
from src.core.shared_types import Color, MoveResult, PieceType, opponent

logger = logging.getLogger(__name__)


class Board:
    def __init__(self) -> None:
        # flat array, indexed by Square.index(). A slot is the sole owner of the piece standing on it.
        self._squares: list[Optional[Piece]] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self.current_turn: Color = Color.WHITE
        self.game_over: bool = False
        self.winner: Color = Color.NONE
        self.history = MoveHistory()

    @classmethod
    def empty(cls) -> Self:
        """No pieces at all. White to move. (Use place_piece() to set up a position)"""
        return cls()

    @classmethod
    def standard(cls) -> Self:
        board = cls()
        board.initialize()
        return board

    # --- SETUP ---
    def initialize(self) -> None:
        """Put all pieces in the standard starting position and start a fresh game"""
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        for piece in starting_pieces():
            self._squares[piece.position.index()] = piece
        self.current_turn = Color.WHITE
        self.game_over = False
        self.winner = Color.NONE
        self.history.clear()

    def place_piece(self, piece: Piece, square: Square) -> None:
        """Put a piece on a square (replaces whatever was standing there)"""
        if not square.is_within_bounds():
            raise ValueError(f"Cannot place a piece on {square}: not on the board.")
        piece.position = square
        self._squares[square.index()] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Take the piece off the board (None for an empty square or a square off the board)"""
        if not square.is_within_bounds():
            return None
        piece = self._squares[square.index()]
        self._squares[square.index()] = None
        return piece

    # --- READ-ONLY ACCESS ---
    def piece(self, square: Square) -> Optional[Piece]:
        """The live piece on the square. Used by the movement rules, which must not modify it."""
        if not square.is_within_bounds():
            return None
        return self._squares[square.index()]

    def piece_at(self, square: Square) -> Optional[Piece]:
        """Copy of the piece on the square: callers outside of the engine cannot change the board this way"""
        piece = self.piece(square)
        return piece.clone() if piece is not None else None

    def pieces(self) -> dict[Square, Piece]:
        """Copies of all pieces on the board, by square"""
        return {
            square: piece.clone()
            for square in ALL_SQUARES
            if (piece := self._squares[square.index()]) is not None
        }

    def find_king(self, color: Color) -> Optional[Square]:
        return next(
            (
                piece.position
                for piece in self._pieces_of(color)
                if piece.type == PieceType.KING
            ),
            None,
        )

    # --- CHECK DETECTION ---
    def is_in_check(self, color: Color) -> bool:
        """
        Can any of the opponent's pieces move onto the square of your king?

        NOTE: without a king on the board, you cannot be in check.
        """
        king_square = self.find_king(color)
        if king_square is None:
            return False

        return any(
            king_square in candidate_moves(attacker, self)
            for attacker in self._pieces_of(opponent(color))
        )

    def has_any_legal_move(self, color: Color) -> bool:
        """
        Brute force: try every candidate move of every piece, until one is found that does not leave you in check.
        """
        for piece in self._pieces_of(color):
            for target in candidate_moves(piece, self):
                if not self._leaves_own_king_in_check(piece, target):
                    return True
        return False

    def legal_destinations(self, square: Square) -> list[Square]:
        """All squares the piece on the given square can legally move to (for highlighting)"""
        piece = self.piece(square)
        if self.game_over or piece is None:
            return []
        return [
            target
            for target in candidate_moves(piece, self)
            if not self._leaves_own_king_in_check(piece, target)
        ]

    # --- MAKING MOVES ---
    def attempt_move(self, from_square: Square, to_square: Square) -> MoveResult:
        """
        Attempt to make a move
        -----

        1. reject if game is over, square(s) are not on the board, or there is no piece of the side to move
        2. reject if the piece cannot move to the target square
        3. snapshot what is needed to reverse the move
        4. make the move (a pawn reaching the final rank becomes a queen)
        5. reject (and restore the board) if this leaves your own king in check
        6. commit: switch turns, store the snapshot in the history
        7. evaluate the position for the side that now has to move
        """
        if self.game_over:
            logger.debug("Rejected %s -> %s: game is over", from_square, to_square)
            return MoveResult.INVALID

        if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
            logger.debug("Rejected %s -> %s: off the board", from_square, to_square)
            return MoveResult.INVALID

        piece = self.piece(from_square)
        if piece is None or piece.color != self.current_turn:
            logger.debug(
                "Rejected %s -> %s: no %s piece to move",
                from_square,
                to_square,
                self.current_turn,
            )
            return MoveResult.INVALID

        if to_square not in candidate_moves(piece, self):
            logger.debug(
                "Rejected %s -> %s: not a %s move", from_square, to_square, piece.type
            )
            return MoveResult.INVALID

        moved_piece = piece.clone()
        captured = self.piece(to_square)
        captured_piece = captured.clone() if captured is not None else None
        previous_turn = self.current_turn

        promotion = self._relocate(from_square, to_square)
        record = MoveRecord(
            from_square=from_square,
            to_square=to_square,
            moved_piece=moved_piece,
            captured_piece=captured_piece,
            promotion=promotion,
            previous_turn=previous_turn,
        )

        if self.is_in_check(previous_turn):
            self._restore(record)
            logger.debug(
                "Rejected %s -> %s: leaves the %s king in check",
                from_square,
                to_square,
                previous_turn,
            )
            return MoveResult.INVALID

        self.current_turn = opponent(previous_turn)
        self.history.push(record)
        logger.debug("Committed %s %s -> %s", piece.type, from_square, to_square)

        return self._evaluate_position()

    def undo(self) -> bool:
        """
        Reverse the most recent move.
        ---

        NOTE: Only resets the raw game fields. Check status is not recomputed (no need: a position a move was played from cannot be game over).
        """
        record = self.history.pop()
        if record is None:
            logger.debug("Nothing to undo")
            return False

        self._restore(record)
        self.current_turn = record.previous_turn
        self.game_over = False
        self.winner = Color.NONE
        logger.debug("Undid %s -> %s", record.from_square, record.to_square)
        return True

    # -- PRIVATE HELPERS ---
    def _pieces_of(self, color: Color) -> list[Piece]:
        return [
            piece
            for piece in self._squares
            if piece is not None and piece.color == color
        ]

    def _relocate(self, from_square: Square, to_square: Square) -> bool:
        """Move the piece (ownership moves along with it). Returns True if the pawn got promoted."""
        piece = self._squares[from_square.index()]
        assert piece is not None

        self._squares[from_square.index()] = None
        piece.position = to_square
        piece.has_moved = True
        self._squares[to_square.index()] = piece

        if piece.is_promotion_eligible():
            self._squares[to_square.index()] = create_piece(
                PieceType.QUEEN, piece.color, to_square
            )
            return True
        return False

    def _restore(self, record: MoveRecord) -> None:
        """Put the snapshot copies back: the moved piece on its original square, and the captured piece (if any)"""
        self.place_piece(record.moved_piece.clone(), record.from_square)
        if record.captured_piece is None:
            self.remove_piece(record.to_square)
        else:
            self.place_piece(record.captured_piece.clone(), record.to_square)

    def _leaves_own_king_in_check(self, piece: Piece, target: Square) -> bool:
        """
        Provisionally move the piece, look for check, and always move it back.

        (No promotion here: the piece type of the mover does not matter for whether its own king is attacked)
        """
        origin = piece.position
        original_occupant = self._squares[target.index()]

        self._squares[origin.index()] = None
        self._squares[target.index()] = piece
        piece.position = target
        try:
            return self.is_in_check(piece.color)
        finally:
            piece.position = origin
            self._squares[origin.index()] = piece
            self._squares[target.index()] = original_occupant

    def _evaluate_position(self) -> MoveResult:
        """Classify the position for the side that has to move next"""
        side_to_move = self.current_turn
        in_check = self.is_in_check(side_to_move)
        if not self.has_any_legal_move(side_to_move):
            self.game_over = True
            if in_check:
                self.winner = opponent(side_to_move)
                logger.info("Checkmate, %s wins", self.winner)
                return MoveResult.CHECKMATE
            self.winner = Color.NONE
            logger.info("Stalemate")
            return MoveResult.STALEMATE

        if in_check:
            return MoveResult.CHECK
        return MoveResult.SUCCESS
