from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.models.board import Mark


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameMode(str, Enum):
    PVP = "pvp"
    PVE = "pve"


class Difficulty(str, Enum):
    RANDOM = "random"
    HEURISTIC = "heuristic"
    EXHAUSTIVE = "exhaustive"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of a game at some point in time.

    Always derived from the board after a placement, never stored as
    independent truth.
    """
    status: GameStatus
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark) -> "GameOutcome":
        return cls(GameStatus.WON, mark)

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(GameStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def describe(self) -> str:
        if self.status == GameStatus.WON:
            return f"{self.winner.value} wins"
        if self.status == GameStatus.DRAW:
            return "Draw"
        return "In progress"
