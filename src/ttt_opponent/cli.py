"""
Command-line interface: play a series against the computer.
"""

import argparse
import logging
from typing import Callable, Optional

from ttt_opponent.core.errors import InvalidMove
from ttt_opponent.core.types import Status
from ttt_opponent.match import Match, Series, Side, human_index_from_input
from ttt_opponent.utils.config import DIFFICULTIES, MARKERS, Config
from ttt_opponent.utils.factory import (
    create_match,
    create_rng,
    create_series,
    pick_computer_marker,
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against a heuristic computer opponent"
    )
    parser.add_argument(
        "--marker", "-m",
        choices=list(MARKERS.keys()),
        default="x",
        help="Your marker (default: x)",
    )
    parser.add_argument(
        "--computer-marker",
        choices=list(MARKERS.keys()),
        default=None,
        help="Computer's marker (default: random from the rest)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=list(DIFFICULTIES.keys()),
        default="hard",
        help="easy = random squares, hard = layered heuristic (default: hard)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for the computer's tie-breaks",
    )
    parser.add_argument(
        "--first",
        choices=[s.value for s in Side],
        default=Side.HUMAN.value,
        help="Who moves first in each match (default: human)",
    )
    parser.add_argument(
        "--winning-score",
        type=int,
        default=3,
        help="Matches needed to win the series (default: 3)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log the computer's reasoning",
    )
    return parser.parse_args(argv)


def _render(match: Match, series: Series) -> str:
    return (
        f"CURRENT SCORE: {series.summary()}\n\n"
        f"{match.board.state_string()}\n\n"
        f"Select an available square between 1 and 9\n"
        f"{match.board.legend_string()}"
    )


def _human_turn(match: Match, read: Callable[[str], str]) -> None:
    """Prompt until the human enters a legal square."""
    while True:
        try:
            match.play_human(human_index_from_input(read("Square: ")))
            return
        except InvalidMove as e:
            print(f"Invalid move: {e}")


def _result_message(match: Match) -> str:
    if match.outcome.status is Status.TIE:
        return "Tied."
    if match.outcome.winner == match.human_marker:
        return "Congratulations! You won!"
    return "You lost at tic-tac-toe."


def play_match(match: Match, series: Series, read: Callable[[str], str] = input) -> None:
    print(_render(match, series))
    while not match.is_over:
        if match.to_move is Side.HUMAN:
            _human_turn(match, read)
        else:
            square, _ = match.play_computer()
            print(f"\nComputer took square {square + 1}")
        print(_render(match, series))
    print(_result_message(match))


def play_series(config: Config, first: Side = Side.HUMAN, read: Callable[[str], str] = input) -> Series:
    """Play matches until someone reaches the winning score or the human quits."""
    rng = create_rng(config.seed)
    computer_marker = pick_computer_marker(config, rng)
    series = create_series(config)

    while True:
        match = create_match(config, rng, computer_marker, first)
        play_match(match, series, read)
        series.record(match.outcome, match.human_marker)
        logger.info("Series: %s", series.summary())
        if series.is_decided:
            break
        if read("Enter 'y' to play again: ").strip().lower() != "y":
            break

    if series.leader is Side.HUMAN and series.is_decided:
        print(f"You beat the computer {series.wins} games to {series.losses}.")
    elif series.leader is Side.COMPUTER and series.is_decided:
        print(f"You lost to the computer {series.losses} games to {series.wins}.")
    print("Thanks for playing!")
    return series


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        human_marker=args.marker,
        computer_marker=args.computer_marker,
        difficulty=args.difficulty,
        seed=args.seed,
        winning_score=args.winning_score,
    )

    try:
        play_series(config, first=Side(args.first))
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - goodbye.")


if __name__ == "__main__":
    main()
