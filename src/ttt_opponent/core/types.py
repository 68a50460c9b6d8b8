"""
Core types and constants.

This module contains the fundamental types shared by the board, the line
evaluator and the move selector:
- Marker: cell values stored in the int8 board
- Outcome: result of evaluating a board
- Tier: which heuristic rule produced a move
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import NamedTuple, Optional, Tuple


class Marker(IntEnum):
    """Cell values. EMPTY is 0 so a fresh int8 board is all empty."""

    EMPTY = 0
    X = 1
    O = 2
    DIAGONALS = 3
    MINIMALIST = 4

    @property
    def glyph(self) -> str:
        return GLYPHS[self]


# Single-character display string per marker
GLYPHS = {
    Marker.EMPTY: " ",
    Marker.X: "X",
    Marker.O: "O",
    Marker.DIAGONALS: "\\",
    Marker.MINIMALIST: ".",
}

PLAYER_MARKERS = tuple(m for m in Marker if m is not Marker.EMPTY)


class Status(Enum):
    ONGOING = auto()
    WON = auto()
    TIE = auto()


class Outcome(NamedTuple):
    """Board result: status plus the winning marker (WON only)."""

    status: Status
    winner: Optional[Marker] = None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.ONGOING


ONGOING = Outcome(Status.ONGOING)
TIE = Outcome(Status.TIE)


def won(marker: Marker) -> Outcome:
    return Outcome(Status.WON, Marker(marker))


class Tier(Enum):
    """Heuristic tiers in evaluation order. RANDOM is the easy opponent."""

    WIN = 1
    BLOCK = 2
    FORK = 3
    BLOCK_FORK = 4
    CENTER = 5
    CORNER = 6
    FALLBACK = 7
    RANDOM = 8


class Difficulty(Enum):
    EASY = "easy"
    HARD = "hard"


# ---------------------------------------------------------------------------
# Board geometry (flat, row-major 0-8)
# ---------------------------------------------------------------------------

BOARD_SIZE = 9

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diagonals
)

CENTER = 4
CORNERS = (0, 2, 6, 8)

# Matches needed to take a series
WINNING_SCORE = 3


def validate_markers(me: Marker, other: Marker) -> None:
    """Raise ValueError unless me/other are two distinct player markers."""
    if Marker(me) is Marker.EMPTY or Marker(other) is Marker.EMPTY:
        raise ValueError("EMPTY is not a player marker")
    if me == other:
        raise ValueError(f"Both players cannot use {Marker(me).name}")
