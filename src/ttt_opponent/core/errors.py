"""
Error types raised by the board and the move selector.
"""

from typing import Optional


class InvalidMove(ValueError):
    """Square is outside 0-8, already occupied, or the match is over."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class NoLegalMove(ValueError):
    """A move was requested on a full board. Always a caller bug."""
