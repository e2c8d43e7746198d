from pydantic import BaseModel, Field
from typing import Optional

from app.core.game_config import MIN_BOARD_SIZE, MAX_BOARD_SIZE, DEFAULT_BOARD_SIZE
from app.models.game import Difficulty


class StatsResponse(BaseModel):
    total_games: int
    x_wins: int
    o_wins: int
    draws: int
    x_win_rate: float = Field(..., description="Percentage of games won by X")
    o_win_rate: float = Field(..., description="Percentage of games won by O")


class TournamentCreate(BaseModel):
    num_games: int = Field(..., ge=1, description="Number of games to play")
    board_size: int = Field(DEFAULT_BOARD_SIZE, ge=MIN_BOARD_SIZE, le=MAX_BOARD_SIZE)
    x_difficulty: Difficulty = Difficulty.RANDOM
    o_difficulty: Difficulty = Difficulty.RANDOM
    seed: Optional[int] = Field(None, description="Seed for reproducible runs")


class TournamentResponse(BaseModel):
    games: int
    board_size: int
    x_difficulty: Difficulty
    o_difficulty: Difficulty
    x_wins: int
    o_wins: int
    draws: int
