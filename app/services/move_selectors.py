"""
Computer move selection strategies, one per difficulty tier.
"""
import logging
import random
from abc import ABC, abstractmethod
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import List, Optional, Tuple

from app.core.exceptions import NoLegalMoves
from app.models.board import Board, Mark
from app.models.game import Difficulty, GameStatus
from app.models.move import Move
from app.services.rules import has_line, legal_moves, outcome

logger = logging.getLogger(__name__)


class MoveSelector(ABC):
    """Picks a legal move for `mark` without touching the caller's board."""

    @abstractmethod
    def select_move(self, board: Board, mark: Mark) -> Move:
        raise NotImplementedError

    def _require_moves(self, board: Board) -> List[Move]:
        moves = legal_moves(board)
        if not moves:
            raise NoLegalMoves(f"{type(self).__name__} called on a full {board.size}x{board.size} board")
        return moves


class RandomSelector(MoveSelector):
    """Uniformly random legal move."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def select_move(self, board: Board, mark: Mark) -> Move:
        return self.rng.choice(self._require_moves(board))


class HeuristicSelector(MoveSelector):
    """
    One-ply lookahead: take a win if there is one, otherwise block the
    opponent's win, otherwise play randomly.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.fallback = RandomSelector(rng)

    def select_move(self, board: Board, mark: Mark) -> Move:
        moves = self._require_moves(board)

        win_move = self._find_completing_move(board, moves, mark)
        if win_move is not None:
            logger.debug(f"Heuristic {mark.value}: winning at {win_move}")
            return win_move

        block_move = self._find_completing_move(board, moves, mark.opposite())
        if block_move is not None:
            logger.debug(f"Heuristic {mark.value}: blocking at {block_move}")
            return block_move

        return self.fallback.select_move(board, mark)

    @staticmethod
    def _find_completing_move(board: Board, moves: List[Move], mark: Mark) -> Optional[Move]:
        """First move (row-major) that would give `mark` a line."""
        for move in moves:
            candidate = board.copy()
            candidate.place(move.row, move.col, mark)
            if has_line(candidate, mark):
                return move
        return None


class _MinimaxSearch:
    """Plain minimax from the point of view of `maximizing_mark`."""

    def __init__(self, maximizing_mark: Mark):
        self.maximizing_mark = maximizing_mark
        # Positions visited, for debug logging
        self.positions_evaluated = 0

    def score_move(self, board: Board, move: Move, acting: Mark) -> int:
        """Score the position reached when `acting` plays `move` on `board`."""
        child = board.copy()
        child.place(move.row, move.col, acting)
        self.positions_evaluated += 1

        result = outcome(child, acting)
        if result.status == GameStatus.WON:
            return 1 if acting == self.maximizing_mark else -1
        if result.status == GameStatus.DRAW:
            return 0

        next_mark = acting.opposite()
        scores = [self.score_move(child, reply, next_mark) for reply in legal_moves(child)]
        if next_mark == self.maximizing_mark:
            return max(scores)
        return min(scores)


def _search_candidate(board: Board, move: Move, mark: Mark) -> Tuple[int, int]:
    """Score one root move; module-level so a process pool can pickle it."""
    search = _MinimaxSearch(mark)
    score = search.score_move(board, move, mark)
    return score, search.positions_evaluated


class ExhaustiveSelector(MoveSelector):
    """
    Full-depth minimax with no pruning and no caching.

    Scores are +1 for a line of the selector's mark, -1 for an opponent
    line and 0 for a full board. Ties keep the first move in row-major
    order, so results are reproducible. Beyond 3x3 the search is very
    slow.

    When `max_workers` is set, root moves are scored in a process pool;
    results are consumed in move order so the chosen move is the same as
    the sequential one.
    """

    def __init__(self, max_workers: Optional[int] = None):
        self.max_workers = max_workers
        self.positions_evaluated = 0

    def select_move(self, board: Board, mark: Mark) -> Move:
        moves = self._require_moves(board)
        snapshot = board.copy()

        if self.max_workers and len(moves) > 1:
            with ProcessPoolExecutor(max_workers=self.max_workers) as pool:
                results = list(pool.map(_search_candidate, repeat(snapshot), moves, repeat(mark)))
        else:
            results = [_search_candidate(snapshot, move, mark) for move in moves]

        best_move = moves[0]
        best_score = None
        self.positions_evaluated = 0
        for move, (score, evaluated) in zip(moves, results):
            self.positions_evaluated += evaluated
            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            f"Exhaustive {mark.value} evaluated {self.positions_evaluated} positions. "
            f"Best move: {best_move} (score: {best_score})"
        )
        return best_move


def create_selector(difficulty: Difficulty, rng: Optional[random.Random] = None,
                    max_workers: Optional[int] = None) -> MoveSelector:
    """Build the selector for a difficulty tier."""
    if difficulty == Difficulty.RANDOM:
        return RandomSelector(rng)
    if difficulty == Difficulty.HEURISTIC:
        return HeuristicSelector(rng)
    if difficulty == Difficulty.EXHAUSTIVE:
        return ExhaustiveSelector(max_workers=max_workers)
    raise ValueError(f"Unknown difficulty: {difficulty}")
