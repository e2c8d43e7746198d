"""
Tournament API endpoints.
"""
from fastapi import APIRouter

from app.schemas import stats as stats_schemas
from app.services.tournament import run_tournament

router = APIRouter(
    prefix="/tournaments",
    tags=["tournaments"]
)


@router.post("", response_model=stats_schemas.TournamentResponse)
def create_tournament(tournament: stats_schemas.TournamentCreate):
    """
    Play a batch of computer vs computer games and return the tallies.

    Exhaustive players on 4x4 and 5x5 boards take a very long time.
    """
    result = run_tournament(
        tournament.num_games,
        board_size=tournament.board_size,
        x_difficulty=tournament.x_difficulty,
        o_difficulty=tournament.o_difficulty,
        seed=tournament.seed,
    )
    return result.to_dict()
