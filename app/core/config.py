from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings
import os

from app.core.game_config import DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE, MAX_BOARD_SIZE, is_valid_board_size


class Settings(BaseSettings):
    DEBUG: bool = os.getenv("DEBUG", "False") == "True"
    DEFAULT_BOARD_SIZE: int = DEFAULT_BOARD_SIZE
    SAVE_DIR: str = os.getenv("SAVE_DIR", "./saved_games")
    MAX_TOURNAMENT_GAMES: int = 1000
    # Registry size past which the oldest finished games are dropped
    MAX_SESSIONS: int = 1000
    # Process pool size for root-level exhaustive search; None keeps it sequential
    EXHAUSTIVE_WORKERS: Optional[int] = None

    @field_validator("DEFAULT_BOARD_SIZE")
    @classmethod
    def check_default_board_size(cls, v):
        if not is_valid_board_size(v):
            raise ValueError(f"DEFAULT_BOARD_SIZE must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}")
        return v

    @field_validator("MAX_SESSIONS")
    @classmethod
    def check_max_sessions(cls, v):
        if v < 1:
            raise ValueError("MAX_SESSIONS must be at least 1")
        return v

    @field_validator("EXHAUSTIVE_WORKERS")
    @classmethod
    def check_exhaustive_workers(cls, v):
        if v is not None and v < 1:
            raise ValueError("EXHAUSTIVE_WORKERS must be at least 1 when set")
        return v

    class Config:
        env_file = ".env"

settings = Settings()
