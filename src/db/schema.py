"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    moves: Mapped[list[list[int]]] = mapped_column(JSON, default=list)
    current_turn: Mapped[str]
    game_over: Mapped[bool] = mapped_column(default=False)
    winner: Mapped[str]
    selected_square: Mapped[Optional[list[int]]] = mapped_column(JSON, nullable=True)
    status_message: Mapped[str] = mapped_column(default="")
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
