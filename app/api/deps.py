"""
Dependency injection for API endpoints.
"""
from app.services.game_service import GameService, game_service_obj
from app.services.stats_tracker import StatsTracker, stats_tracker_obj


def get_game_service() -> GameService:
    """Shared in-memory session registry."""
    return game_service_obj


def get_stats_tracker() -> StatsTracker:
    return stats_tracker_obj
