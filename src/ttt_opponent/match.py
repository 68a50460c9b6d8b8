"""
Match orchestration: one human, one computer, one board.

The match owns its Board exclusively. The selector and the line evaluator
are only ever called between placements, never during one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from ttt_opponent.core.errors import InvalidMove, NoLegalMove
from ttt_opponent.core.types import (
    BOARD_SIZE,
    ONGOING,
    Difficulty,
    Marker,
    Outcome,
    Status,
    Tier,
    WINNING_SCORE,
    validate_markers,
)
from ttt_opponent.games.board import Board
from ttt_opponent.games.lines import outcome as evaluate
from ttt_opponent.selection import select_choice

logger = logging.getLogger(__name__)


class Side(Enum):
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Side":
        return Side.COMPUTER if self is Side.HUMAN else Side.HUMAN


def human_index_from_input(text: str) -> int:
    """Map the human's 1-9 numbering to a 0-8 square index."""
    try:
        number = int(text.strip())
    except ValueError as e:
        raise InvalidMove(f"{text!r} is not a number between 1 and {BOARD_SIZE}") from e
    if not 1 <= number <= BOARD_SIZE:
        raise InvalidMove(f"{number} is not between 1 and {BOARD_SIZE}", number - 1)
    return number - 1


class Match:
    """
    A single game of tic-tac-toe.

    Turn order alternates starting from `first`. Every placement is
    followed by an outcome check; once the outcome is not ONGOING the
    match refuses further moves.
    """

    def __init__(
        self,
        human_marker: Marker,
        computer_marker: Marker,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[np.random.Generator] = None,
        first: Side = Side.HUMAN,
    ):
        validate_markers(human_marker, computer_marker)
        self.human_marker = Marker(human_marker)
        self.computer_marker = Marker(computer_marker)
        self.difficulty = Difficulty(difficulty)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.board = Board()
        self.to_move = first
        self.outcome: Outcome = ONGOING
        self.history: List[Tuple[Side, int]] = []
        self.last_tier: Optional[Tier] = None

    @property
    def is_over(self) -> bool:
        return self.outcome.is_over

    def marker_for(self, side: Side) -> Marker:
        return self.human_marker if side is Side.HUMAN else self.computer_marker

    def _place(self, side: Side, index: int) -> Outcome:
        if self.is_over:
            raise InvalidMove("The match is already over", index)
        if side is not self.to_move:
            raise InvalidMove(f"It is the {self.to_move.value}'s turn", index)

        self.board.place(index, self.marker_for(side))
        self.history.append((side, index))
        self.outcome = evaluate(self.board, self.human_marker, self.computer_marker)
        self.to_move = side.opposite()

        logger.info("%s took square %d", side.value, index)
        if self.is_over:
            if self.outcome.status is Status.WON:
                logger.info("Match over: %s wins", self.outcome.winner.name)
            else:
                logger.info("Match over: tie")
        return self.outcome

    def play_human(self, index: int) -> Outcome:
        """Apply the human's square. Raises InvalidMove if illegal."""
        return self._place(Side.HUMAN, index)

    def play_computer(self) -> Tuple[int, Outcome]:
        """Let the computer choose and apply its square."""
        if self.is_over:
            raise InvalidMove("The match is already over")
        if self.board.is_full():
            raise NoLegalMove("Board is full")
        choice = select_choice(
            self.board.snapshot(),
            self.computer_marker,
            self.human_marker,
            rng=self.rng,
            difficulty=self.difficulty,
        )
        self.last_tier = choice.tier
        return choice.square, self._place(Side.COMPUTER, choice.square)


@dataclass
class Series:
    """Wins/losses/ties from the human's point of view, first to winning_score."""

    winning_score: int = WINNING_SCORE
    wins: int = 0
    losses: int = 0
    ties: int = 0

    def record(self, outcome: Outcome, human_marker: Marker) -> None:
        if outcome.status is Status.ONGOING:
            raise ValueError("Cannot record an unfinished match")
        if outcome.status is Status.TIE:
            self.ties += 1
        elif outcome.winner == human_marker:
            self.wins += 1
        else:
            self.losses += 1

    @property
    def is_decided(self) -> bool:
        return max(self.wins, self.losses) >= self.winning_score

    @property
    def leader(self) -> Optional[Side]:
        if self.wins > self.losses:
            return Side.HUMAN
        if self.losses > self.wins:
            return Side.COMPUTER
        return None

    def summary(self) -> str:
        return f"{self.wins} Wins / {self.losses} Losses / {self.ties} Ties"
