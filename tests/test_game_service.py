import pytest

from app.core.config import settings
from app.core.exceptions import InvalidRequest, SessionLimitReached, SessionNotFound
from app.models.game import GameMode
from app.services.game_service import GameService

X_WINS = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]


def finish(service, session):
    for row, col in X_WINS:
        service.make_move(session.id, row, col)
    assert session.is_over


class TestGameService:

    def test_default_board_size_comes_from_settings(self, game_service, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_BOARD_SIZE", 4)
        assert game_service.create_game().board_size == 4

    def test_pve_requires_difficulty(self, game_service):
        with pytest.raises(InvalidRequest):
            game_service.create_game(mode=GameMode.PVE)
        assert game_service.session_count() == 0

    def test_finished_game_is_recorded_once(self, game_service, stats_tracker):
        session = game_service.create_game()
        finish(game_service, session)
        assert stats_tracker.snapshot()["x_wins"] == 1

    def test_delete_game(self, game_service):
        session = game_service.create_game()
        game_service.delete_game(session.id)

        assert game_service.session_count() == 0
        with pytest.raises(SessionNotFound):
            game_service.get_game(session.id)
        with pytest.raises(SessionNotFound):
            game_service.delete_game(session.id)

    def test_oldest_finished_game_is_evicted(self, stats_tracker, tmp_path):
        service = GameService(stats=stats_tracker, save_dir=str(tmp_path), max_sessions=3)
        first, second, third = (service.create_game() for _ in range(3))
        finish(service, second)
        finish(service, third)

        fourth = service.create_game()

        assert service.session_count() == 3
        with pytest.raises(SessionNotFound):
            service.get_game(second.id)
        # One slot was needed: the running first game and the newer finished game stay
        assert service.get_game(first.id) is first
        assert service.get_game(third.id) is third
        assert service.get_game(fourth.id) is fourth

    def test_registry_stays_bounded(self, stats_tracker, tmp_path):
        service = GameService(stats=stats_tracker, save_dir=str(tmp_path), max_sessions=10)
        for _ in range(50):
            finish(service, service.create_game())

        assert service.session_count() == 10
        assert stats_tracker.snapshot()["total_games"] == 50

    def test_full_registry_of_running_games(self, stats_tracker, tmp_path):
        service = GameService(stats=stats_tracker, save_dir=str(tmp_path), max_sessions=2)
        service.create_game()
        service.create_game()

        with pytest.raises(SessionLimitReached):
            service.create_game()
        assert service.session_count() == 2
