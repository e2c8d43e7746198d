import os
import tempfile
import pytest
from fastapi.testclient import TestClient

# Keep the app's saved-games directory out of the working tree
os.environ.setdefault("SAVE_DIR", tempfile.mkdtemp(prefix="saved_games_"))

from app.api.deps import get_game_service, get_stats_tracker
from app.services.game_service import GameService
from app.services.stats_tracker import StatsTracker
from main import app


@pytest.fixture
def stats_tracker():
    return StatsTracker()


@pytest.fixture
def game_service(stats_tracker, tmp_path):
    return GameService(stats=stats_tracker, save_dir=str(tmp_path / "saved_games"))


@pytest.fixture
def client(game_service, stats_tracker):
    app.dependency_overrides[get_game_service] = lambda: game_service
    app.dependency_overrides[get_stats_tracker] = lambda: stats_tracker
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
