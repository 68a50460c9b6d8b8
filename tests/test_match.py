"""
Tests for ttt_opponent.match

Tests the turn loop, move validation and series scoring.
"""

import numpy as np
import pytest

from ttt_opponent.core.errors import InvalidMove
from ttt_opponent.core.types import ONGOING, TIE, Difficulty, Marker, Outcome, Status, Tier, won
from ttt_opponent.match import Match, Series, Side, human_index_from_input


class TestHumanIndex:
    """human_index_from_input tests."""

    @pytest.mark.parametrize("text, expected", [("1", 0), ("5", 4), (" 9 ", 8)])
    def test_maps_one_based(self, text: str, expected: int):
        assert human_index_from_input(text) == expected

    @pytest.mark.parametrize("text", ["0", "10", "-3", "abc", ""])
    def test_rejects_bad_input(self, text: str):
        with pytest.raises(InvalidMove):
            human_index_from_input(text)


class TestMatchSetup:
    """Construction tests."""

    def test_initial_state(self, match: Match):
        assert match.board.empty_indices() == frozenset(range(9))
        assert match.to_move is Side.HUMAN
        assert match.outcome == ONGOING
        assert match.is_over is False

    def test_same_markers_raise(self):
        with pytest.raises(ValueError):
            Match(Marker.X, Marker.X)

    def test_marker_for(self, match: Match):
        assert match.marker_for(Side.HUMAN) is Marker.X
        assert match.marker_for(Side.COMPUTER) is Marker.O


class TestTurns:
    """Turn order and validation."""

    def test_human_move(self, match: Match):
        result = match.play_human(0)
        assert result == ONGOING
        assert match.board[0] is Marker.X
        assert match.to_move is Side.COMPUTER

    def test_out_of_turn_raises(self, match: Match):
        match.play_human(0)
        with pytest.raises(InvalidMove):
            match.play_human(1)

    def test_occupied_leaves_state(self, match: Match):
        match.play_human(0)
        match.play_computer()
        history = list(match.history)
        with pytest.raises(InvalidMove):
            match.play_human(0)
        assert match.history == history
        assert match.to_move is Side.HUMAN

    def test_out_of_range_raises(self, match: Match):
        with pytest.raises(InvalidMove):
            match.play_human(9)

    def test_computer_first_takes_center(self):
        match = Match(Marker.X, Marker.O, rng=np.random.default_rng(0), first=Side.COMPUTER)
        square, result = match.play_computer()
        assert square == 4
        assert match.last_tier is Tier.CENTER
        assert result == ONGOING


class TestFullMatch:
    """A scripted match against the hard computer."""

    def test_computer_wins(self, match: Match):
        match.play_human(0)
        assert match.play_computer() == (4, ONGOING)
        match.play_human(1)
        assert match.play_computer() == (2, ONGOING)
        assert match.last_tier is Tier.BLOCK
        match.play_human(3)
        assert match.play_computer() == (6, won(Marker.O))
        assert match.last_tier is Tier.WIN
        assert match.history == [
            (Side.HUMAN, 0), (Side.COMPUTER, 4),
            (Side.HUMAN, 1), (Side.COMPUTER, 2),
            (Side.HUMAN, 3), (Side.COMPUTER, 6),
        ]

    def test_no_moves_after_end(self, match: Match):
        for square in (0, 1, 3):
            match.play_human(square)
            match.play_computer()
        assert match.is_over
        with pytest.raises(InvalidMove):
            match.play_human(5)
        with pytest.raises(InvalidMove):
            match.play_computer()

    def test_easy_match_finishes(self):
        match = Match(Marker.X, Marker.O, Difficulty.EASY, rng=np.random.default_rng(3))
        while not match.is_over:
            if match.to_move is Side.HUMAN:
                match.play_human(min(match.board.empty_indices()))
            else:
                match.play_computer()
        assert match.outcome.status in (Status.WON, Status.TIE)


class TestSeries:
    """Series scoring tests."""

    def test_record(self):
        series = Series()
        series.record(won(Marker.X), Marker.X)
        series.record(won(Marker.O), Marker.X)
        series.record(TIE, Marker.X)
        assert (series.wins, series.losses, series.ties) == (1, 1, 1)
        assert series.leader is None
        assert series.summary() == "1 Wins / 1 Losses / 1 Ties"

    def test_decided_at_winning_score(self):
        series = Series(winning_score=2)
        series.record(won(Marker.O), Marker.X)
        assert series.is_decided is False
        series.record(won(Marker.O), Marker.X)
        assert series.is_decided is True
        assert series.leader is Side.COMPUTER

    def test_ties_never_decide(self):
        series = Series(winning_score=1)
        for _ in range(5):
            series.record(TIE, Marker.X)
        assert series.is_decided is False

    def test_ongoing_raises(self):
        with pytest.raises(ValueError):
            Series().record(Outcome(Status.ONGOING), Marker.X)
