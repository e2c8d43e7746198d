from app.core.exceptions import GameEnded, InvalidMove, NotYourTurn
from app.models.board import Board, Mark
from app.models.game import GameOutcome


class GameValidator:
    """Validates human moves and state transitions."""

    def validate_move(self, board: Board, outcome: GameOutcome, current_mark: Mark,
                      human_marks, row: int, col: int) -> None:
        """Validate a human move is legal for any board size."""
        # Check if game is still running
        if outcome.is_terminal:
            raise GameEnded(f"Game has already ended ({outcome.describe()})")

        # Check if it's a human's turn
        if current_mark not in human_marks:
            raise NotYourTurn(f"It's the computer's turn ({current_mark.value})")

        # Validate position bounds for the board size
        if not board.is_valid_position(row, col):
            raise InvalidMove(f"Row {row + 1}, column {col + 1} is off the {board.size}x{board.size} board")

        # Check if cell is already occupied
        occupant = board.get(row, col)
        if occupant is not None:
            raise InvalidMove(f"Row {row + 1}, column {col + 1} is already occupied by {occupant.value}")
