"""
Application settings + logging setup.

Settings are read from environment variables (prefixed with CHESS_). Pydantic takes care of turning the raw strings into the proper types.
"""

import logging
import os
import sys
from typing import Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError

ENV_PREFIX = "CHESS_"
LOG_FORMAT = "%(asctime)s [%(name)s] %(message)s"


class Settings(BaseModel):
    database_url: str = "sqlite:///chess.db"
    echo_sql: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise InvalidRequestError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Only the variables that are actually set override the defaults."""
        overrides = {
            field: os.environ[f"{ENV_PREFIX}{field.upper()}"]
            for field in cls.model_fields
            if f"{ENV_PREFIX}{field.upper()}" in os.environ
        }
        return cls(**overrides)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
