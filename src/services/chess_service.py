"""Orchestration of communication from the presentation layer to the rules engine and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    PieceResponse,
    SelectSquareRequest,
    SquareCoordinates,
    UndoRequest,
)
from src.chess.board import Board
from src.chess.square import Square
from src.core.exceptions import GameStateError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import COMMITTED_RESULTS, Color, MoveResult
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)

UNDO_SUCCESSFUL = "Undo successful!"
NOTHING_TO_UNDO = "No moves to undo!"
STALEMATE_MESSAGE = "Stalemate! Game ended in a draw."


def outcome_message(result: Optional[MoveResult], board: Board) -> str:
    """Text to show the players after a move attempt. Derived only from the result and the game-over fields."""
    if board.game_over:
        if board.winner == Color.NONE:
            return STALEMATE_MESSAGE
        return f"Checkmate! {board.winner.capitalize()} wins!"
    if result == MoveResult.CHECK:
        return f"{board.current_turn.capitalize()} is in check!"
    return ""


class ChessService:
    """Orchestration of layers for a chess game session."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- PRESENTATION LAYER INTENTS ---
    def create_new_game(self) -> GameResponse:
        """Start a game in the standard starting position."""
        board = Board.standard()
        stored_game, game_id = self.repo.create_game(self._to_model(board))
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game, board)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Everything needed to render: the pieces, whose turn it is, and if/how the game ended.
        """
        game_model = self._fetch_game(request.game_id)
        board = self._load_board(game_model)
        return self._create_game_response(request.game_id, game_model, board)

    def select_square(self, request: SelectSquareRequest) -> GameResponse:
        """
        The user clicked a square.
        ----

        1. Game over? Nothing happens.
        2. Nothing selected yet: select the square if one of your own pieces stands there.
        3. A piece was selected: this click is the target square of a move.
            * the move got made: clear the selection
            * illegal move, clicked the selected square again: clear the selection
            * illegal move, clicked another one of your own pieces: select that one instead
        """
        stored_model = self._fetch_game(request.game_id)
        board = self._load_board(stored_model)
        clicked = Square(*request.square)
        selected = (
            Square(*stored_model.selected_square)
            if stored_model.selected_square is not None
            else None
        )

        result: Optional[MoveResult] = None
        if board.game_over:
            pass
        elif selected is None:
            if self._is_own_piece(board, clicked):
                selected = clicked
        else:
            result = board.attempt_move(selected, clicked)
            if result in COMMITTED_RESULTS or clicked == selected:
                selected = None
            elif self._is_own_piece(board, clicked):
                selected = clicked

        updated = self._to_model(board, selected, outcome_message(result, board))
        self.repo.update_game(request.game_id, updated)
        return self._create_game_response(request.game_id, updated, board, result)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt (without going through the selection)."""
        stored_model = self._fetch_game(request.game_id)
        board = self._load_board(stored_model)

        result = board.attempt_move(
            Square(*request.from_square), Square(*request.to_square)
        )
        selected = (
            None
            if result in COMMITTED_RESULTS
            else self._stored_selection(stored_model)
        )

        updated = self._to_model(board, selected, outcome_message(result, board))
        self.repo.update_game(request.game_id, updated)
        return self._create_game_response(request.game_id, updated, board, result)

    def undo_move(self, request: UndoRequest) -> GameResponse:
        """Take back the last move (one at a time)."""
        stored_model = self._fetch_game(request.game_id)
        board = self._load_board(stored_model)

        if board.undo():
            updated = self._to_model(board, None, UNDO_SUCCESSFUL)
        else:
            updated = self._to_model(
                board, self._stored_selection(stored_model), NOTHING_TO_UNDO
            )
        self.repo.update_game(request.game_id, updated)
        return self._create_game_response(request.game_id, updated, board)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Squares the piece on the requested square can move to (e.g. to highlight them)."""
        board = self._load_board(self._fetch_game(request.game_id))
        destinations = board.legal_destinations(Square(*request.square))
        return LegalMovesResponse(
            game_id=request.game_id,
            square=request.square,
            legal_moves=[self._to_coordinates(square) for square in destinations],
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model

    def _load_board(self, model: GameModel) -> Board:
        """
        Replay the stored moves from the starting position. This rebuilds the undo history as well.

        The stored turn and result must agree with the replayed Board, otherwise the record cannot be trusted.
        """
        board = Board.standard()
        for stored_move in model.moves:
            if len(stored_move) != 4:
                raise GameStateError(f"Cannot interpret stored move {stored_move!r}.")
            from_file, from_rank, to_file, to_rank = stored_move
            result = board.attempt_move(
                Square(from_file, from_rank), Square(to_file, to_rank)
            )
            if result == MoveResult.INVALID:
                raise GameStateError(
                    f"Stored move {stored_move!r} is illegal in the replayed position."
                )

        replayed = (board.current_turn.value, board.game_over, board.winner.value)
        stored = (model.current_turn, model.game_over, model.winner)
        if replayed != stored:
            raise GameStateError(
                f"Stored game fields {stored} do not match the replayed moves {replayed}."
            )
        return board

    def _is_own_piece(self, board: Board, square: Square) -> bool:
        piece = board.piece_at(square)
        return piece is not None and piece.color == board.current_turn

    def _stored_selection(self, model: GameModel) -> Optional[Square]:
        if model.selected_square is None:
            return None
        return Square(*model.selected_square)

    def _to_coordinates(self, square: Square) -> SquareCoordinates:
        return [square.file, square.rank]

    def _to_model(
        self,
        board: Board,
        selected: Optional[Square] = None,
        status_message: str = "",
    ) -> GameModel:
        """Capture the session state in a GameModel"""
        return GameModel(
            moves=[record.to_list() for record in board.history],
            current_turn=board.current_turn.value,
            game_over=board.game_over,
            winner=board.winner.value,
            selected_square=(
                self._to_coordinates(selected) if selected is not None else None
            ),
            status_message=status_message,
        )

    def _create_game_response(
        self,
        game_id: UUID,
        model: GameModel,
        board: Board,
        last_result: Optional[MoveResult] = None,
    ) -> GameResponse:
        """Convert info in GameModel + the pieces on the Board to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            pieces=[
                PieceResponse(
                    type=piece.type,
                    color=piece.color,
                    square=self._to_coordinates(square),
                    has_moved=piece.has_moved,
                )
                for square, piece in board.pieces().items()
            ],
            current_turn=board.current_turn,
            game_over=board.game_over,
            winner=board.winner,
            move_count=len(model.moves),
            selected_square=model.selected_square,
            last_result=last_result,
            status_message=model.status_message,
        )
