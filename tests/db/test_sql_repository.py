"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.sql_repository import SQLGameRepository


def _mock_model() -> GameModel:
    return GameModel(
        moves=[[6, 6, 6, 4], [1, 1, 1, 3]],
        current_turn="white",
        game_over=False,
        winner="none",
        selected_square=[4, 6],
        status_message="",
    )


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = _mock_model()
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_create_game_without_selection(db_session_repo: Session) -> None:
    model = GameModel()
    repo = SQLGameRepository(db_session_repo)
    record_in_db, game_id = repo.create_game(model)
    assert record_in_db == model
    assert repo.get_game(game_id) == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(_mock_model())
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(_mock_model())
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session) -> None:
    """Update an earlier created record: a move got made and the game ended."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(_mock_model())

    updated = GameModel(
        moves=[[5, 6, 5, 5], [4, 1, 4, 3], [6, 6, 6, 4], [3, 0, 7, 4]],
        current_turn="white",
        game_over=True,
        winner="black",
        selected_square=None,
        status_message="Checkmate! Black wins!",
    )
    record = repo.update_game(game_id, updated)
    assert record == updated
    assert repo.get_game(game_id) == updated


def test_update_unknown_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), _mock_model()) is None


def test_delete_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    model = _mock_model()
    _, game_id = repo.create_game(model)

    deleted = repo.delete_game(game_id)
    assert deleted == model
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None
