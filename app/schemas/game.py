from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from datetime import datetime

from app.core.config import settings
from app.core.game_config import MIN_BOARD_SIZE, MAX_BOARD_SIZE
from app.models.board import Mark
from app.models.game import Difficulty, GameMode, GameStatus


class GameCreate(BaseModel):
    board_size: int = Field(
        default_factory=lambda: settings.DEFAULT_BOARD_SIZE,
        ge=MIN_BOARD_SIZE,
        le=MAX_BOARD_SIZE,
        description=f"Board size ({MIN_BOARD_SIZE}x{MIN_BOARD_SIZE} to {MAX_BOARD_SIZE}x{MAX_BOARD_SIZE})"
    )
    mode: GameMode = Field(GameMode.PVP, description="pvp (two humans) or pve (human vs computer)")
    difficulty: Optional[Difficulty] = Field(None, description="Computer strength, required for pve")

    @model_validator(mode="after")
    def check_difficulty(self):
        if self.mode == GameMode.PVE and self.difficulty is None:
            raise ValueError("difficulty is required for pve games")
        return self


class MoveCreate(BaseModel):
    row: int = Field(..., ge=1, description="Row, 1-indexed (validated against the game's board size)")
    col: int = Field(..., ge=1, description="Column, 1-indexed (validated against the game's board size)")


class MoveRecordResponse(BaseModel):
    move_number: int
    mark: Mark
    row: int
    col: int


class MoveResponse(BaseModel):
    game_id: int
    moves: List[MoveRecordResponse]
    game_status: GameStatus
    winner: Optional[Mark] = None
    is_draw: bool = False
    current_mark: Optional[Mark] = None


class GameState(BaseModel):
    id: int
    board_size: int
    mode: GameMode
    difficulty: Optional[Difficulty]
    status: GameStatus
    current_mark: Optional[Mark]
    winner: Optional[Mark]
    board: List[List[Optional[Mark]]]
    moves_count: int
    elapsed_seconds: int
    started_at: datetime
    ended_at: Optional[datetime]


class SaveResponse(BaseModel):
    game_id: int
    filename: str
