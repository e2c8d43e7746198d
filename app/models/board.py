"""
Square game board holding the two players' marks.
"""
from enum import Enum
from typing import List, Optional

from app.core.exceptions import InvalidSize, InvalidMove
from app.core.game_config import MIN_BOARD_SIZE, MAX_BOARD_SIZE, is_valid_board_size


class Mark(str, Enum):
    """The two player marks. X is defined first and always opens the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X


class Board:
    """
    A size x size grid of cells, each empty (None) or holding a Mark.

    The grid is only ever changed through place(); the board keeps no
    history of its own.
    """

    def __init__(self, size: int = 3):
        if not isinstance(size, int) or not is_valid_board_size(size):
            raise InvalidSize(
                f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}"
            )
        self.size = size
        self._cells: List[List[Optional[Mark]]] = [
            [None for _ in range(size)] for _ in range(size)
        ]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if a position lies on this board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Optional[Mark]:
        if not self.is_valid_position(row, col):
            raise InvalidMove(f"Position ({row}, {col}) is invalid for {self.size}x{self.size} board")
        return self._cells[row][col]

    def place(self, row: int, col: int, mark: Mark) -> bool:
        """
        Put a mark on an empty cell.

        Returns False without touching the grid when the position is off
        the board or already occupied.
        """
        if not self.is_valid_position(row, col):
            return False
        if self._cells[row][col] is not None:
            return False
        self._cells[row][col] = mark
        return True

    def is_full(self) -> bool:
        for row in self._cells:
            if None in row:
                return False
        return True

    def count(self, mark: Optional[Mark]) -> int:
        """Count the cells holding `mark` (None counts empty cells)."""
        return sum(row.count(mark) for row in self._cells)

    def rows(self) -> List[List[Optional[Mark]]]:
        """Get the grid as a fresh 2D list."""
        return [list(row) for row in self._cells]

    def copy(self) -> "Board":
        """Create an independent snapshot of the board."""
        new_board = Board(self.size)
        new_board._cells = [list(row) for row in self._cells]
        return new_board

    @classmethod
    def from_rows(cls, rows: List[List[Optional[str]]]) -> "Board":
        """
        Build a board from a square 2D list of "X", "O" or None.

        Convenient for setting up positions; cells are written directly,
        so any pattern (including impossible ones) can be expressed.
        """
        board = cls(len(rows))
        for r, row in enumerate(rows):
            if len(row) != board.size:
                raise InvalidSize(f"Row {r} has {len(row)} cells, expected {board.size}")
            for c, cell in enumerate(row):
                board._cells[r][c] = Mark(cell) if cell is not None else None
        return board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __str__(self) -> str:
        return "\n".join(
            " ".join(cell.value if cell is not None else "-" for cell in row)
            for row in self._cells
        )
