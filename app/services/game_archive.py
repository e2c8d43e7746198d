"""
Writes a game's move log to a plain text file.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from app.services.game_session import GameSession

logger = logging.getLogger(__name__)


class GameArchive:
    def __init__(self, directory: str):
        self.directory = Path(directory)

    def save(self, session: GameSession, now: Optional[datetime] = None) -> Path:
        """Save the session's header and move history; returns the file path."""
        now = now or datetime.now()
        self.directory.mkdir(parents=True, exist_ok=True)

        filename = f"game_{now.strftime('%Y%m%d_%H%M%S')}"
        if session.id is not None:
            filename += f"_{session.id}"
        path = self.directory / f"{filename}.txt"

        lines = [
            "Tic-Tac-Toe Game Save",
            f"Date: {now.isoformat()}",
            f"Board Size: {session.board_size}",
            f"Duration: {session.elapsed_seconds} seconds",
            f"Result: {session.outcome.describe()}",
            "",
            "Move History:",
        ]
        for record in session.move_log:
            lines.append(f"Player {record.mark.value}: ({record.row + 1},{record.col + 1})")

        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info(f"Game {session.id} saved as {path}")
        return path
