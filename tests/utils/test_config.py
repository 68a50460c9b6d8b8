"""
Tests for ttt_opponent.utils.config

Tests configuration and marker/difficulty registries.
"""

import pytest

from ttt_opponent.core.types import Difficulty, Marker
from ttt_opponent.utils.config import DEFAULT_CONFIG, DIFFICULTIES, MARKERS, Config


class TestRegistries:
    """MARKERS / DIFFICULTIES tests."""

    def test_marker_names(self):
        assert set(MARKERS) == {"x", "o", "diagonals", "minimalist"}
        assert Marker.EMPTY not in MARKERS.values()

    def test_difficulties(self):
        assert DIFFICULTIES == {"easy": Difficulty.EASY, "hard": Difficulty.HARD}


class TestConfig:
    """Config class tests."""

    def test_defaults(self):
        config = Config()
        assert config.human_marker is Marker.X
        assert config.computer_marker is None
        assert config.difficulty is Difficulty.HARD
        assert config.seed is None
        assert config.winning_score == 3

    def test_default_instance(self):
        assert DEFAULT_CONFIG.difficulty is Difficulty.HARD

    def test_case_insensitive(self):
        config = Config(human_marker="O", computer_marker="Diagonals", difficulty="EASY")
        assert config.human_marker is Marker.O
        assert config.computer_marker is Marker.DIAGONALS
        assert config.difficulty is Difficulty.EASY

    def test_unknown_marker_raises(self):
        with pytest.raises(KeyError):
            Config(human_marker="triangle")

    def test_unknown_difficulty_raises(self):
        with pytest.raises(KeyError):
            Config(difficulty="impossible")

    def test_same_markers_raise(self):
        with pytest.raises(ValueError):
            Config(human_marker="o", computer_marker="o")

    def test_winning_score_positive(self):
        with pytest.raises(ValueError):
            Config(winning_score=0)


class TestWinningScore:
    """WINNING_SCORE lives with the core constants."""

    def test_shared_default(self):
        from ttt_opponent.core.types import WINNING_SCORE
        from ttt_opponent.match import Series
        assert WINNING_SCORE == 3
        assert Config().winning_score == WINNING_SCORE
        assert Series().winning_score == WINNING_SCORE
