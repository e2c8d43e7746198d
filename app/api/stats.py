"""
Statistics API endpoints.
"""
from fastapi import APIRouter, Depends

from app.api.deps import get_stats_tracker
from app.schemas import stats as stats_schemas
from app.services.stats_tracker import StatsTracker

router = APIRouter(
    prefix="/stats",
    tags=["stats"]
)


@router.get("", response_model=stats_schemas.StatsResponse)
def get_stats(tracker: StatsTracker = Depends(get_stats_tracker)):
    """
    Get cumulative results of finished interactive games.

    Tournament games are not counted.
    """
    return tracker.snapshot()


@router.delete("", response_model=stats_schemas.StatsResponse)
def reset_stats(tracker: StatsTracker = Depends(get_stats_tracker)):
    """Reset all tallies to zero."""
    tracker.reset()
    return tracker.snapshot()
