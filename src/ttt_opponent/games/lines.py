"""
Line evaluation over the eight winning lines.

Everything here is a pure query on a Board. The move selector builds its
tiers from these helpers; the match uses outcome() after every placement.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from ttt_opponent.core.types import (
    ONGOING,
    TIE,
    WIN_LINES,
    Marker,
    Outcome,
    won,
)
from ttt_opponent.games.board import Board

Line = Tuple[int, int, int]

_LINES = np.array(WIN_LINES, dtype=np.int8)


def _line_counts(board: Board, marker: Marker) -> np.ndarray:
    """Number of marker's cells on each of the eight lines."""
    return np.count_nonzero(board.cells[_LINES] == marker, axis=1)


def has_won(board: Board, marker: Marker) -> bool:
    """True if any line is entirely marker."""
    flat = board.cells
    for a, b, c in WIN_LINES:
        if flat[a] == marker and flat[b] == marker and flat[c] == marker:
            return True
    return False


def winning_line(board: Board, marker: Marker) -> Optional[Line]:
    """First complete line for marker, or None."""
    flat = board.cells
    for line in WIN_LINES:
        a, b, c = line
        if flat[a] == marker and flat[b] == marker and flat[c] == marker:
            return line
    return None


def is_tie(board: Board, *markers: Marker) -> bool:
    """
    Full board with no complete line.

    With no markers given, every non-empty value on the board is checked.
    """
    if not board.is_full():
        return False
    candidates = markers or {Marker(int(v)) for v in board.cells}
    return not any(has_won(board, m) for m in candidates)


def outcome(board: Board, marker_a: Marker, marker_b: Marker) -> Outcome:
    """
    ONGOING, WON(marker) or TIE.

    A win always takes precedence: a full board with a complete line is a
    win, not a tie.
    """
    for marker in (marker_a, marker_b):
        if has_won(board, marker):
            return won(marker)
    if board.is_full():
        return TIE
    return ONGOING


def open_lines(board: Board, me: Marker, other: Marker) -> List[Line]:
    """Lines holding at least one of me's marks and none of other's."""
    mine = _line_counts(board, me)
    theirs = _line_counts(board, other)
    return [WIN_LINES[i] for i in np.flatnonzero((mine > 0) & (theirs == 0))]


def threat_squares(board: Board, me: Marker, other: Marker) -> List[int]:
    """
    Empty squares that complete a line for me, in line order.

    Called with (me, other) this finds wins; with the roles swapped it
    finds the squares that must be blocked.
    """
    flat = board.cells
    squares: List[int] = []
    for line in WIN_LINES:
        mine = [sq for sq in line if flat[sq] == me]
        empty = [sq for sq in line if flat[sq] == Marker.EMPTY]
        if len(mine) == 2 and len(empty) == 1 and empty[0] not in squares:
            squares.append(empty[0])
    return squares


def creates_fork(board: Board, square: int, me: Marker) -> bool:
    """
    True if claiming square gives me two or more distinct lines that each
    hold exactly one other me mark, the square itself, and one empty cell.
    """
    if not board.is_empty(square):
        return False
    flat = board.cells
    threats = 0
    for line in WIN_LINES:
        if square not in line:
            continue
        rest = [flat[sq] for sq in line if sq != square]
        if rest.count(me) == 1 and rest.count(Marker.EMPTY) == 1:
            threats += 1
            if threats >= 2:
                return True
    return False


def fork_squares(board: Board, me: Marker) -> List[int]:
    """Every empty square where me would create a double threat, ascending."""
    return [sq for sq in sorted(board.empty_indices()) if creates_fork(board, sq, me)]
