"""
Configuration and marker/difficulty registries.
"""

from typing import Optional

from ttt_opponent.core.types import (
    PLAYER_MARKERS,
    WINNING_SCORE,
    Difficulty,
    Marker,
    validate_markers,
)


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

MARKERS = {m.name.lower(): m for m in PLAYER_MARKERS}

DIFFICULTIES = {d.value: d for d in Difficulty}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Match settings with sensible defaults."""

    def __init__(
        self,
        human_marker: str = "x",
        computer_marker: Optional[str] = None,
        difficulty: str = "hard",
        seed: Optional[int] = None,
        winning_score: int = WINNING_SCORE,
    ):
        self.human_marker: Marker = MARKERS[human_marker.lower()]
        # None: drawn from the remaining styles when the match is built
        self.computer_marker: Optional[Marker] = (
            MARKERS[computer_marker.lower()] if computer_marker is not None else None
        )
        if self.computer_marker is not None:
            validate_markers(self.human_marker, self.computer_marker)
        self.difficulty: Difficulty = DIFFICULTIES[difficulty.lower()]
        self.seed = seed
        if winning_score < 1:
            raise ValueError(f"winning_score must be at least 1, got {winning_score}")
        self.winning_score = winning_score


# Default configuration
DEFAULT_CONFIG = Config()
