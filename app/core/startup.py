"""
Application startup and shutdown logic for the board game API.
"""
import logging
from pathlib import Path

from app.core.config import settings
from app.services.game_service import game_service_obj

logger = logging.getLogger(__name__)


def initialize_archive() -> None:
    """Make sure saved games have somewhere to go."""
    try:
        Path(settings.SAVE_DIR).mkdir(parents=True, exist_ok=True)
        logger.info(f"Saved games directory ready: {settings.SAVE_DIR}")
    except OSError as e:
        logger.error(f"Failed to create saved games directory {settings.SAVE_DIR}: {e}")
        raise


def shutdown_sessions() -> None:
    """Log the sessions being dropped; nothing is persisted."""
    logger.info(f"Discarding {game_service_obj.session_count()} in-memory game sessions")
