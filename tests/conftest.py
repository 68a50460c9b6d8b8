"""
Shared test fixtures for ttt_opponent tests.

Design principles:
- Boards built from row strings so positions read like the game
- Seeded generators so random tie-breaks are reproducible
"""

import numpy as np
import pytest

from ttt_opponent.core.types import Marker
from ttt_opponent.games.board import Board
from ttt_opponent.match import Match, Side


# =============================================================================
# Generator Fixtures
# =============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0)


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def fork_board() -> Board:
    """X on two opposite corners, O in the center."""
    return Board.from_rows("X..", ".O.", "..X")


@pytest.fixture
def tie_board() -> Board:
    """Full board with no complete line."""
    return Board.from_rows("XOX", "XOO", "OXX")


# =============================================================================
# Match Fixtures
# =============================================================================

@pytest.fixture
def match() -> Match:
    """Human X moves first against the hard computer O."""
    return Match(Marker.X, Marker.O, rng=np.random.default_rng(0), first=Side.HUMAN)
