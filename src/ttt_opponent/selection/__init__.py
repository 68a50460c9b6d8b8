"""
Selection module - move selection for the computer opponent.

Provides the main entry points:
- select_square(): square index for the computer's next move
- select_choice(): same, plus the heuristic tier that produced it
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ttt_opponent.core.errors import NoLegalMove
from ttt_opponent.core.types import Difficulty, Marker, Tier, validate_markers
from ttt_opponent.games.board import Board
from ttt_opponent.selection import heuristic
from ttt_opponent.selection.heuristic import Choice

logger = logging.getLogger(__name__)


def select_choice(
    board: Board,
    me: Marker,
    other: Marker,
    *,
    rng: Optional[np.random.Generator] = None,
    difficulty: Difficulty = Difficulty.HARD,
) -> Choice:
    """
    Pick the computer's square.

    Args:
        board: Current board (not modified)
        me: The computer's marker
        other: The human's marker
        rng: Source for tie-breaks. None uses a fresh default_rng().
        difficulty: EASY picks any empty square; HARD runs the tiers.

    Returns:
        Choice(square, tier)

    Raises:
        NoLegalMove: board is full
    """
    validate_markers(me, other)
    if board.is_full():
        raise NoLegalMove("No empty squares left to choose from")
    if rng is None:
        rng = np.random.default_rng()

    if Difficulty(difficulty) is Difficulty.EASY:
        choice = Choice(heuristic.pick(rng, board.empty_indices()), Tier.RANDOM)
    else:
        choice = heuristic.choose(board, me, other, rng)

    logger.debug("%s picks square %d (%s)", Marker(me).name, choice.square, choice.tier.name)
    return choice


def select_square(
    board: Board,
    me: Marker,
    other: Marker,
    *,
    rng: Optional[np.random.Generator] = None,
    difficulty: Difficulty = Difficulty.HARD,
) -> int:
    """Square index (0-8) for the computer's next move. See select_choice()."""
    return select_choice(board, me, other, rng=rng, difficulty=difficulty).square


__all__ = [
    "Choice",
    "select_choice",
    "select_square",
]
