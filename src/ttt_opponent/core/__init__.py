"""
Core module - fundamental types, board geometry and errors.
"""

from ttt_opponent.core.types import (
    Marker,
    Status,
    Outcome,
    Tier,
    Difficulty,
    ONGOING,
    TIE,
    won,
    GLYPHS,
    PLAYER_MARKERS,
    BOARD_SIZE,
    WIN_LINES,
    CENTER,
    CORNERS,
    WINNING_SCORE,
    validate_markers,
)
from ttt_opponent.core.errors import InvalidMove, NoLegalMove

__all__ = [
    # Types
    "Marker",
    "Status",
    "Outcome",
    "Tier",
    "Difficulty",
    # Constants
    "ONGOING",
    "TIE",
    "GLYPHS",
    "PLAYER_MARKERS",
    "BOARD_SIZE",
    "WIN_LINES",
    "CENTER",
    "CORNERS",
    "WINNING_SCORE",
    # Functions
    "won",
    "validate_markers",
    # Errors
    "InvalidMove",
    "NoLegalMove",
]
