"""
Factory functions for creating generators, markers and matches.
"""

from typing import Optional

import numpy as np

from ttt_opponent.core.types import PLAYER_MARKERS, Marker
from ttt_opponent.match import Match, Series, Side
from ttt_opponent.utils.config import Config


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seeded generator for tie-breaks (unseeded when seed is None)."""
    return np.random.default_rng(seed)


def pick_computer_marker(config: Config, rng: np.random.Generator) -> Marker:
    """Configured computer marker, or a random style the human did not take."""
    if config.computer_marker is not None:
        return config.computer_marker
    remaining = [m for m in PLAYER_MARKERS if m is not config.human_marker]
    return remaining[int(rng.integers(len(remaining)))]


def create_match(
    config: Config,
    rng: np.random.Generator,
    computer_marker: Marker,
    first: Side = Side.HUMAN,
) -> Match:
    """
    Create a fresh match from a configuration.

    Args:
        config: Match settings
        rng: Shared generator, so a seeded series replays identically
        computer_marker: Fixed for the whole series
        first: Who moves first

    Returns:
        Match with an empty board
    """
    return Match(
        human_marker=config.human_marker,
        computer_marker=computer_marker,
        difficulty=config.difficulty,
        rng=rng,
        first=first,
    )


def create_series(config: Config) -> Series:
    return Series(winning_score=config.winning_score)
