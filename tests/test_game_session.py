import random

import pytest

from app.core.exceptions import GameEnded, InvalidMove, InvalidSize, NotYourTurn
from app.models.board import Mark
from app.models.game import Difficulty, GameMode, GameOutcome, GameStatus
from app.services.game_session import GameSession
from app.services.move_selectors import HeuristicSelector, MoveSelector, RandomSelector


class FirstFreeSelector(MoveSelector):
    """Always plays the first empty cell."""

    def select_move(self, board, mark):
        return self._require_moves(board)[0]


class TestPlayerVsPlayer:

    def test_initial_state(self):
        session = GameSession()
        assert session.board_size == 3
        assert session.current_mark == Mark.X
        assert session.outcome == GameOutcome.in_progress()
        assert session.move_log == ()
        assert not session.is_over

    def test_invalid_board_size(self):
        with pytest.raises(InvalidSize):
            GameSession(board_size=6)

    def test_marks_alternate(self):
        session = GameSession(board_size=4)
        session.play(0, 0)
        assert session.current_mark == Mark.O
        session.play(1, 1)
        assert session.current_mark == Mark.X
        assert [(r.mark, r.row, r.col) for r in session.move_log] == [
            (Mark.X, 0, 0), (Mark.O, 1, 1)
        ]
        assert [r.move_number for r in session.move_log] == [1, 2]

    def test_x_wins_top_row(self):
        session = GameSession()
        for row, col in [(0, 0), (1, 0), (0, 1), (2, 2)]:
            assert session.play(row, col) == GameOutcome.in_progress()
        assert session.play(0, 2) == GameOutcome.win(Mark.X)
        assert session.is_over
        assert session.ended_at is not None

    def test_draw(self):
        session = GameSession()
        # Ends as X O X / X O O / O X X
        plays = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (2, 0), (2, 1), (1, 2), (2, 2)]
        for row, col in plays[:-1]:
            assert session.play(row, col) == GameOutcome.in_progress()
        assert session.play(*plays[-1]) == GameOutcome.draw()
        assert session.is_over
        assert session.outcome.winner is None

    def test_occupied_cell_is_rejected_without_changing_turn(self):
        session = GameSession()
        session.play(1, 1)
        with pytest.raises(InvalidMove):
            session.play(1, 1)
        assert session.current_mark == Mark.O
        assert len(session.move_log) == 1
        assert session.board.get(1, 1) == Mark.X

    @pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, 3)])
    def test_off_board_move_is_rejected(self, row, col):
        session = GameSession()
        with pytest.raises(InvalidMove):
            session.play(row, col)
        assert session.move_log == ()

    def test_no_moves_after_win(self):
        session = GameSession()
        for row, col in [(0, 0), (1, 0), (0, 1), (2, 2), (0, 2)]:
            session.play(row, col)
        with pytest.raises(GameEnded):
            session.play(1, 1)
        assert len(session.move_log) == 5

    def test_board_property_is_a_snapshot(self):
        session = GameSession()
        snapshot = session.board
        snapshot.place(0, 0, Mark.O)
        session.play(0, 0)
        assert session.board.get(0, 0) == Mark.X

    def test_no_computer_in_pvp(self):
        session = GameSession()
        with pytest.raises(NotYourTurn):
            session.play_computer()


class TestPlayerVsComputer:

    def test_requires_difficulty(self):
        with pytest.raises(ValueError):
            GameSession(mode=GameMode.PVE)

    def test_human_then_computer(self):
        session = GameSession(mode=GameMode.PVE, selector=RandomSelector(random.Random(3)))
        session.play(1, 1)
        assert session.is_computer_turn

        with pytest.raises(NotYourTurn):
            session.play(0, 0)

        move = session.play_computer()
        assert session.board.get(move.row, move.col) == Mark.O
        assert session.current_mark == Mark.X
        assert not session.is_computer_turn

    def test_computer_cannot_move_for_human(self):
        session = GameSession(mode=GameMode.PVE, difficulty=Difficulty.RANDOM)
        with pytest.raises(NotYourTurn):
            session.play_computer()

    def test_computer_win_ends_game(self):
        session = GameSession(mode=GameMode.PVE, selector=FirstFreeSelector())
        for row, col in [(2, 2), (2, 1), (1, 0)]:
            session.play(row, col)
            session.play_computer()

        # The computer filled the top row from the left
        assert session.outcome == GameOutcome.win(Mark.O)
        assert (session.move_log[-1].row, session.move_log[-1].col) == (0, 2)
        with pytest.raises(GameEnded):
            session.play(1, 1)
        with pytest.raises(GameEnded):
            session.play_computer()


class TestPlayOut:

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_random_games_finish(self, size):
        rng = random.Random(size)
        selectors = {Mark.X: RandomSelector(rng), Mark.O: RandomSelector(rng)}
        session = GameSession(board_size=size)
        result = session.play_out(selectors)

        assert result.is_terminal
        log = session.move_log
        assert [r.mark for r in log] == [Mark.X if i % 2 == 0 else Mark.O for i in range(len(log))]
        if result.status == GameStatus.DRAW:
            assert len(log) == size * size
        else:
            assert log[-1].mark == result.winner

    def test_heuristic_game_finishes(self):
        rng = random.Random(11)
        selectors = {Mark.X: HeuristicSelector(rng), Mark.O: HeuristicSelector(rng)}
        session = GameSession()
        assert session.play_out(selectors).is_terminal
        assert session.elapsed_seconds >= 0

    def test_play_out_twice_is_a_no_op(self):
        rng = random.Random(5)
        selectors = {Mark.X: RandomSelector(rng), Mark.O: RandomSelector(rng)}
        session = GameSession()
        first = session.play_out(selectors)
        moves = len(session.move_log)
        assert session.play_out(selectors) == first
        assert len(session.move_log) == moves
