"""
Win, draw and legal-move rules shared by every game mode and move selector.
"""
from typing import List

from app.models.board import Board, Mark
from app.models.game import GameOutcome
from app.models.move import Move


def has_line(board: Board, mark: Mark) -> bool:
    """Check if `mark` fills a whole row, column or diagonal."""
    grid = board.rows()
    size = board.size

    # Check rows
    for row in grid:
        if all(cell == mark for cell in row):
            return True

    # Check columns
    for col in range(size):
        if all(grid[row][col] == mark for row in range(size)):
            return True

    # Check main diagonal (top-left to bottom-right)
    if all(grid[i][i] == mark for i in range(size)):
        return True

    # Check anti-diagonal (top-right to bottom-left)
    if all(grid[i][size - 1 - i] == mark for i in range(size)):
        return True

    return False


def legal_moves(board: Board) -> List[Move]:
    """All empty cells in row-major order."""
    grid = board.rows()
    return [
        Move(row, col)
        for row in range(board.size)
        for col in range(board.size)
        if grid[row][col] is None
    ]


def outcome(board: Board, last_mark: Mark) -> GameOutcome:
    """
    Evaluate the board right after `last_mark` placed.

    A placement can only complete a line for the mark that made it, so
    only `last_mark` is tested.
    """
    if has_line(board, last_mark):
        return GameOutcome.win(last_mark)
    if board.is_full():
        return GameOutcome.draw()
    return GameOutcome.in_progress()
