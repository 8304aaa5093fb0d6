"""Wiring of the layers: settings -> logging + database session -> repository -> ChessService."""

import logging
from typing import Optional

from src.core.config import Settings, configure_logging
from src.db.database import build_session_factory
from src.db.sql_repository import SQLGameRepository
from src.services.chess_service import ChessService

logger = logging.getLogger(__name__)


def build_service(settings: Optional[Settings] = None) -> ChessService:
    """
    Ready-to-use ChessService backed by the configured SQL database.
    ---

    Without explicit settings, they are read from the CHESS_* environment variables.
    NOTE: The service keeps its session open for its whole lifetime (one caller, one intent at a time).
    """
    if settings is None:
        settings = Settings.from_env()
    configure_logging(settings)

    session_factory = build_session_factory(settings)
    logger.info("Chess service ready")
    return ChessService(SQLGameRepository(session_factory()))
