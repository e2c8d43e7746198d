"""
A single match from the empty board to a win or a draw.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from app.core.exceptions import GameEnded, InvalidMove, NotYourTurn
from app.core.game_config import DEFAULT_BOARD_SIZE
from app.models.board import Board, Mark
from app.models.game import Difficulty, GameMode, GameOutcome
from app.models.move import Move, MoveRecord
from app.services.move_selectors import MoveSelector, create_selector
from app.services.rules import outcome as evaluate_outcome
from app.services.validators import GameValidator

logger = logging.getLogger(__name__)

FIRST_MARK = Mark.X
# In PVE games the human always plays the opening mark
HUMAN_MARK = Mark.X
COMPUTER_MARK = Mark.O


class GameSession:
    """
    Turn sequencing for one game, independent of where moves come from.

    Humans move through play(); the computer side (PVE) moves through
    play_computer(); batch games are driven by play_out(). Every
    placement goes through Board.place and is followed by an outcome
    check for the mark that just moved.
    """

    def __init__(self, board_size: int = DEFAULT_BOARD_SIZE, mode: GameMode = GameMode.PVP,
                 difficulty: Optional[Difficulty] = None, selector: Optional[MoveSelector] = None,
                 session_id: Optional[int] = None):
        self.id = session_id
        self.mode = mode
        self.difficulty = difficulty
        self._board = Board(board_size)

        if mode == GameMode.PVE:
            if selector is None:
                if difficulty is None:
                    raise ValueError("PVE games need a difficulty")
                selector = create_selector(difficulty)
            self.human_marks = (HUMAN_MARK,)
            self.computer_mark: Optional[Mark] = COMPUTER_MARK
        else:
            self.human_marks = (Mark.X, Mark.O)
            self.computer_mark = None
        self.selector = selector

        self.current_mark = FIRST_MARK
        self._outcome = GameOutcome.in_progress()
        self._moves = []
        self.validator = GameValidator()

        self.started_at = datetime.now(timezone.utc)
        self.ended_at: Optional[datetime] = None

    @property
    def board_size(self) -> int:
        return self._board.size

    @property
    def board(self) -> Board:
        """Snapshot of the board; changing it does not affect the game."""
        return self._board.copy()

    @property
    def outcome(self) -> GameOutcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def move_log(self) -> Tuple[MoveRecord, ...]:
        return tuple(self._moves)

    @property
    def elapsed_seconds(self) -> int:
        end = self.ended_at or datetime.now(timezone.utc)
        return int((end - self.started_at).total_seconds())

    @property
    def is_computer_turn(self) -> bool:
        return not self.is_over and self.current_mark == self.computer_mark

    def play(self, row: int, col: int) -> GameOutcome:
        """Place the current mark for a human player (0-indexed)."""
        self.validator.validate_move(
            self._board, self._outcome, self.current_mark, self.human_marks, row, col
        )
        return self._apply(Move(row, col), self.current_mark)

    def play_computer(self) -> Move:
        """Let the configured selector move for the computer side."""
        if self.is_over:
            raise GameEnded(f"Game has already ended ({self._outcome.describe()})")
        if self.selector is None or self.current_mark != self.computer_mark:
            raise NotYourTurn(f"No computer player for {self.current_mark.value}")

        move = self.selector.select_move(self._board.copy(), self.current_mark)
        self._apply(move, self.current_mark)
        return move

    def play_out(self, selectors: Dict[Mark, MoveSelector]) -> GameOutcome:
        """Drive the game to the end with one selector per mark."""
        while not self.is_over:
            mark = self.current_mark
            move = selectors[mark].select_move(self._board.copy(), mark)
            self._apply(move, mark)
        return self._outcome

    def _apply(self, move: Move, mark: Mark) -> GameOutcome:
        if self.is_over:
            raise GameEnded(f"Game has already ended ({self._outcome.describe()})")
        if not self._board.place(move.row, move.col, mark):
            raise InvalidMove(f"Cannot place {mark.value} at ({move.row}, {move.col})")

        self._moves.append(MoveRecord(len(self._moves) + 1, mark, move.row, move.col))
        self._outcome = evaluate_outcome(self._board, mark)

        if self._outcome.is_terminal:
            self.ended_at = datetime.now(timezone.utc)
            logger.info(
                f"Game {self.id} ({self.board_size}x{self.board_size}) ended after "
                f"{len(self._moves)} moves: {self._outcome.describe()}"
            )
        else:
            self.current_mark = mark.opposite()

        return self._outcome
