"""
Cumulative win/draw tallies across finished games.
"""
import logging
import threading

from app.models.board import Mark
from app.models.game import GameOutcome, GameStatus

logger = logging.getLogger(__name__)


def _percentage(part: int, total: int) -> float:
    return round(part * 100.0 / total, 1) if total else 0.0


class StatsTracker:
    """Keeps running totals; one record() call per finished game."""

    def __init__(self):
        self._lock = threading.Lock()
        self.total_games = 0
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def record(self, outcome: GameOutcome) -> None:
        """Called when a game ends."""
        if not outcome.is_terminal:
            raise ValueError("Cannot record a game that is still in progress")

        with self._lock:
            self.total_games += 1
            if outcome.status == GameStatus.DRAW:
                self.draws += 1
            elif outcome.winner == Mark.X:
                self.x_wins += 1
            else:
                self.o_wins += 1

        logger.info(f"Recorded result: {outcome.describe()} (total games: {self.total_games})")

    def reset(self) -> None:
        with self._lock:
            self.total_games = self.x_wins = self.o_wins = self.draws = 0
        logger.info("Statistics reset")

    def snapshot(self) -> dict:
        """Tallies plus win percentages (one decimal), read under one lock."""
        with self._lock:
            total, x_wins, o_wins, draws = self.total_games, self.x_wins, self.o_wins, self.draws
        return {
            "total_games": total,
            "x_wins": x_wins,
            "o_wins": o_wins,
            "draws": draws,
            "x_win_rate": _percentage(x_wins, total),
            "o_win_rate": _percentage(o_wins, total),
        }


stats_tracker_obj = StatsTracker()
