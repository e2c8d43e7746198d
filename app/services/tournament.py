"""
Batch play: many computer-vs-computer games with aggregated results.
"""
import logging
import random
from dataclasses import dataclass, asdict
from typing import Optional

from app.core.config import settings
from app.core.exceptions import InvalidRequest
from app.core.game_config import DEFAULT_BOARD_SIZE
from app.models.board import Mark
from app.models.game import Difficulty, GameStatus
from app.services.game_session import GameSession
from app.services.move_selectors import create_selector

logger = logging.getLogger(__name__)


@dataclass
class TournamentResult:
    games: int
    board_size: int
    x_difficulty: Difficulty
    o_difficulty: Difficulty
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def run_tournament(num_games: int, board_size: int = DEFAULT_BOARD_SIZE,
                   x_difficulty: Difficulty = Difficulty.RANDOM,
                   o_difficulty: Difficulty = Difficulty.RANDOM,
                   seed: Optional[int] = None) -> TournamentResult:
    """
    Play `num_games` fresh sessions to completion.

    Both sides share one RNG so a seed reproduces the whole run.
    """
    if not (1 <= num_games <= settings.MAX_TOURNAMENT_GAMES):
        raise InvalidRequest(
            f"Number of games must be between 1 and {settings.MAX_TOURNAMENT_GAMES}, got {num_games}"
        )

    rng = random.Random(seed)
    selectors = {
        Mark.X: create_selector(x_difficulty, rng, settings.EXHAUSTIVE_WORKERS),
        Mark.O: create_selector(o_difficulty, rng, settings.EXHAUSTIVE_WORKERS),
    }
    result = TournamentResult(
        games=num_games,
        board_size=board_size,
        x_difficulty=x_difficulty,
        o_difficulty=o_difficulty,
    )

    for game_num in range(num_games):
        session = GameSession(board_size=board_size, session_id=game_num + 1)
        outcome = session.play_out(selectors)

        if outcome.status == GameStatus.DRAW:
            result.draws += 1
        elif outcome.winner == Mark.X:
            result.x_wins += 1
        else:
            result.o_wins += 1

    logger.info(
        f"Tournament of {num_games} games ({board_size}x{board_size}, "
        f"X={x_difficulty.value}, O={o_difficulty.value}): "
        f"X {result.x_wins}, O {result.o_wins}, draws {result.draws}"
    )
    return result
