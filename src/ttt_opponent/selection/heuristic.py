"""
Layered move selection for the computer opponent.

Tiers are tried strictly in order and the first one with candidates wins:

    1. WIN         complete one of our own two-in-a-rows
    2. BLOCK       complete one of the opponent's (same test, roles swapped)
    3. FORK        create two threats at once
    4. BLOCK_FORK  deny the opponent's fork squares
    5. CENTER      square 4
    6. CORNER      any empty corner
    7. FALLBACK    any empty square

Ties inside a tier are broken by the injected generator, always over a
sorted candidate list so a fixed seed reproduces the same move.

This is not a full game-tree search. It can lose in some
adversarial fork-block positions.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from ttt_opponent.core.types import CENTER, CORNERS, Marker, Tier
from ttt_opponent.games.board import Board
from ttt_opponent.games.lines import fork_squares, open_lines, threat_squares


class Choice(NamedTuple):
    square: int
    tier: Tier


def pick(rng: np.random.Generator, candidates: Sequence[int]) -> int:
    """Uniform choice over sorted candidates."""
    ordered = sorted(candidates)
    if len(ordered) == 1:
        return ordered[0]
    return int(rng.choice(ordered))


# ---------------------------------------------------------------------------
# Tiers
# ---------------------------------------------------------------------------

def _win(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[int]:
    squares = threat_squares(board, me, other)
    return squares[0] if squares else None


def _block(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[int]:
    return _win(board, other, me, rng)


def _fork(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[int]:
    squares = fork_squares(board, me)
    return pick(rng, squares) if squares else None


def _block_fork(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[int]:
    """
    One opponent fork square: take it. Several: build our own threat on a
    square that is not a fork square and whose forced reply is not one
    either, so the opponent's block cannot double as a fork. With no such
    square, take a fork square on one of our own open lines, or any fork
    square when we have none.
    """
    their_forks = fork_squares(board, other)
    if not their_forks:
        return None
    if len(their_forks) == 1:
        return their_forks[0]

    forks = set(their_forks)
    on_my_lines = {sq for line in open_lines(board, me, other) for sq in line}

    candidates: List[int] = []
    for sq in sorted(board.empty_indices()):
        if sq in forks or sq not in on_my_lines:
            continue
        trial = board.copy()
        trial.place(sq, me)
        forced = threat_squares(trial, me, other)
        if any(reply in forks for reply in forced):
            continue
        candidates.append(sq)

    preferred = [sq for sq in their_forks if sq in on_my_lines]
    return pick(rng, candidates or preferred or their_forks)


def _center(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[int]:
    return CENTER if board.is_empty(CENTER) else None


def _corner(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[int]:
    corners = [sq for sq in CORNERS if board.is_empty(sq)]
    return pick(rng, corners) if corners else None


def _fallback(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[int]:
    empty = board.empty_indices()
    return pick(rng, empty) if empty else None


TierRule = Callable[[Board, Marker, Marker, np.random.Generator], Optional[int]]

TIERS: List[Tuple[Tier, TierRule]] = [
    (Tier.WIN, _win),
    (Tier.BLOCK, _block),
    (Tier.FORK, _fork),
    (Tier.BLOCK_FORK, _block_fork),
    (Tier.CENTER, _center),
    (Tier.CORNER, _corner),
    (Tier.FALLBACK, _fallback),
]


def choose(board: Board, me: Marker, other: Marker, rng: np.random.Generator) -> Optional[Choice]:
    """First tier with a candidate, or None on a full board."""
    for tier, rule in TIERS:
        square = rule(board, me, other, rng)
        if square is not None:
            return Choice(int(square), tier)
    return None
