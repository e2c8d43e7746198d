from dataclasses import dataclass
from typing import NamedTuple

from app.models.board import Mark


class Move(NamedTuple):
    """A 0-indexed (row, col) board coordinate."""
    row: int
    col: int


@dataclass(frozen=True)
class MoveRecord:
    """One placement in a session's move log."""
    move_number: int        # 1-based position in the log
    mark: Mark
    row: int                # 0-indexed
    col: int                # 0-indexed

    def to_dict(self) -> dict:
        """Render for the human-facing boundary (1-indexed coordinates)."""
        return {
            "move_number": self.move_number,
            "mark": self.mark.value,
            "row": self.row + 1,
            "col": self.col + 1,
        }
