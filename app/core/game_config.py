"""
Configuration constants for the board game engine.
"""

# Board size limits
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 5
DEFAULT_BOARD_SIZE = 3


def is_valid_board_size(board_size: int) -> bool:
    """Check if a board size is supported."""
    return MIN_BOARD_SIZE <= board_size <= MAX_BOARD_SIZE
