import itertools
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from app.core.config import settings
from app.core.exceptions import InvalidRequest, SessionLimitReached, SessionNotFound
from app.models.game import Difficulty, GameMode
from app.services.game_archive import GameArchive
from app.services.game_session import GameSession
from app.services.move_selectors import create_selector
from app.services.stats_tracker import StatsTracker, stats_tracker_obj

logger = logging.getLogger(__name__)


class GameService:
    """
    In-memory registry of running and finished game sessions.

    Sessions are not persisted. They stay until deleted, or until the
    registry holds `max_sessions` games, at which point the oldest finished
    ones are dropped to make room. Each finished session is reported to the
    stats tracker exactly once.
    """

    def __init__(self, stats: Optional[StatsTracker] = None, save_dir: Optional[str] = None,
                 max_sessions: Optional[int] = None):
        self.stats = stats or stats_tracker_obj
        self.archive = GameArchive(save_dir or settings.SAVE_DIR)
        self.max_sessions = max_sessions or settings.MAX_SESSIONS
        self._sessions: Dict[int, GameSession] = {}
        self._ids = itertools.count(1)
        self._session_locks: Dict[int, threading.Lock] = {}
        self._lock = threading.Lock()

    def create_game(self, board_size: Optional[int] = None, mode: GameMode = GameMode.PVP,
                    difficulty: Optional[Difficulty] = None) -> GameSession:
        if board_size is None:
            board_size = settings.DEFAULT_BOARD_SIZE
        selector = None
        if mode == GameMode.PVE:
            if difficulty is None:
                raise InvalidRequest("A difficulty is required for player vs computer games")
            selector = create_selector(difficulty, max_workers=settings.EXHAUSTIVE_WORKERS)
        else:
            difficulty = None

        with self._lock:
            self._make_room()
            session_id = next(self._ids)
            session = GameSession(
                board_size=board_size,
                mode=mode,
                difficulty=difficulty,
                selector=selector,
                session_id=session_id,
            )
            self._sessions[session_id] = session
            self._session_locks[session_id] = threading.Lock()

        logger.info(
            f"Game {session_id} ({board_size}x{board_size}, {mode.value}"
            f"{', ' + difficulty.value if difficulty else ''}) created"
        )
        return session

    def _make_room(self) -> None:
        """Drop finished games, oldest first, until a new one fits. Caller holds self._lock."""
        while len(self._sessions) >= self.max_sessions:
            finished = next((gid for gid, s in self._sessions.items() if s.is_over), None)
            if finished is None:
                raise SessionLimitReached(
                    f"{len(self._sessions)} games are still in progress; finish or delete one first"
                )
            del self._sessions[finished]
            del self._session_locks[finished]
            logger.info(f"Game {finished} evicted from the registry")

    def get_game(self, game_id: int) -> GameSession:
        session = self._sessions.get(game_id)
        if session is None:
            raise SessionNotFound(f"Game {game_id} not found")
        return session

    def _get_locked_game(self, game_id: int) -> Tuple[GameSession, threading.Lock]:
        with self._lock:
            session = self.get_game(game_id)
            return session, self._session_locks[game_id]

    def delete_game(self, game_id: int) -> None:
        """Forget a session, finished or not."""
        with self._lock:
            if game_id not in self._sessions:
                raise SessionNotFound(f"Game {game_id} not found")
            del self._sessions[game_id]
            del self._session_locks[game_id]
        logger.info(f"Game {game_id} deleted")

    def session_count(self) -> int:
        return len(self._sessions)

    def make_move(self, game_id: int, row: int, col: int) -> dict:
        """
        Apply a human move (0-indexed). In PVE games the computer replies
        right away while the game is still running.
        """
        session, lock = self._get_locked_game(game_id)
        with lock:
            session.play(row, col)
            placed = [session.move_log[-1]]

            if session.is_computer_turn:
                session.play_computer()
                placed.append(session.move_log[-1])

            if session.is_over:
                self.stats.record(session.outcome)

        return {
            "game_id": game_id,
            "moves": [record.to_dict() for record in placed],
            "game_status": session.outcome.status,
            "winner": session.outcome.winner,
            "is_draw": session.outcome.is_draw,
            "current_mark": None if session.is_over else session.current_mark,
        }

    def get_game_state(self, game_id: int) -> dict:
        session = self.get_game(game_id)
        return {
            "id": session.id,
            "board_size": session.board_size,
            "mode": session.mode,
            "difficulty": session.difficulty,
            "status": session.outcome.status,
            "current_mark": None if session.is_over else session.current_mark,
            "winner": session.outcome.winner,
            "board": [
                [cell.value if cell is not None else None for cell in row]
                for row in session.board.rows()
            ],
            "moves_count": len(session.move_log),
            "elapsed_seconds": session.elapsed_seconds,
            "started_at": session.started_at,
            "ended_at": session.ended_at,
        }

    def get_move_log(self, game_id: int) -> List[dict]:
        session = self.get_game(game_id)
        return [record.to_dict() for record in session.move_log]

    def save_game(self, game_id: int) -> Path:
        session = self.get_game(game_id)
        return self.archive.save(session)


game_service_obj = GameService()
