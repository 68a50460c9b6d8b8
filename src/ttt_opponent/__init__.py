"""
ttt_opponent - a layered-heuristic computer opponent for tic-tac-toe.

Quick Start:
    from ttt_opponent import Board, Marker, select_square, outcome

    board = Board.from_rows("X..", ".O.", "..X")
    square = select_square(board, Marker.X, Marker.O)
    board.place(square, Marker.X)
    outcome(board, Marker.X, Marker.O)

Modules:
    core       - Markers, outcomes, board geometry and errors
    games      - Board state and line evaluation
    selection  - The tiered move selector
    match      - Turn loop and series scoring
    utils      - Configuration and factories
"""

from ttt_opponent.core import (
    Marker,
    Status,
    Outcome,
    Tier,
    Difficulty,
    InvalidMove,
    NoLegalMove,
)
from ttt_opponent.games import Board, has_won, is_tie, outcome
from ttt_opponent.selection import select_square, select_choice
from ttt_opponent.match import Match, Series, Side

__version__ = "1.0.0"

__all__ = [
    # Main API
    "select_square",
    "select_choice",
    "outcome",
    "has_won",
    "is_tie",
    "Board",
    "Match",
    "Series",
    "Side",
    # Types
    "Marker",
    "Status",
    "Outcome",
    "Tier",
    "Difficulty",
    # Errors
    "InvalidMove",
    "NoLegalMove",
]
