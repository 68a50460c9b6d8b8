"""
Games module - the 3x3 board and line evaluation.
"""

from ttt_opponent.games.board import Board
from ttt_opponent.games.lines import (
    has_won,
    is_tie,
    outcome,
    winning_line,
    open_lines,
    threat_squares,
    creates_fork,
    fork_squares,
)

__all__ = [
    "Board",
    "has_won",
    "is_tie",
    "outcome",
    "winning_line",
    "open_lines",
    "threat_squares",
    "creates_fork",
    "fork_squares",
]
