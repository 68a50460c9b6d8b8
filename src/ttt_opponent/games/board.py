"""
Board - the nine cells of a 3x3 match.

Uses a flat int8 array indexed by square (row-major 0-8):
    0 = empty
    n = Marker(n)

Rows and columns only matter for rendering: square i is row i // 3,
column i % 3.
"""

from __future__ import annotations

import operator
from typing import FrozenSet, Iterable, Optional

import numpy as np

from ttt_opponent.core.errors import InvalidMove
from ttt_opponent.core.types import BOARD_SIZE, GLYPHS, Marker

# Glyph (case-insensitive) -> marker, for Board.from_rows
_GLYPH_LOOKUP = {g.upper(): m for m, g in GLYPHS.items()}
_GLYPH_LOOKUP["."] = Marker.EMPTY
_GLYPH_LOOKUP["M"] = Marker.MINIMALIST
_GLYPH_LOOKUP["D"] = Marker.DIAGONALS


class Board:
    """
    Mutable 3x3 board.

    Cells are monotonic during a match: place() only ever turns an empty
    cell into an occupied one. The only way back to empty is reset(),
    which starts a new match.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[Iterable[int]] = None):
        if cells is None:
            self._cells = np.zeros(BOARD_SIZE, dtype=np.int8)
        else:
            arr = np.array(list(cells), dtype=np.int8).ravel()
            if arr.size != BOARD_SIZE:
                raise ValueError(f"Board needs {BOARD_SIZE} cells, got {arr.size}")
            # Reject values that are not markers
            for value in arr:
                Marker(int(value))
            self._cells = arr

    @classmethod
    def from_rows(cls, *rows: str) -> "Board":
        """
        Build a board from row strings, e.g. Board.from_rows("X..", ".O.", "..X").

        '.' and ' ' are empty; other characters are marker glyphs
        ('D' and 'M' also accepted for DIAGONALS and MINIMALIST).
        """
        text = "".join(rows)
        if len(text) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} cells, got {len(text)}: {text!r}")
        try:
            return cls(_GLYPH_LOOKUP[ch.upper()] for ch in text)
        except KeyError as e:
            raise ValueError(f"Unknown glyph {e.args[0]!r}") from e

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the nine cells."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, index: int) -> Marker:
        return Marker(int(self._cells[index]))

    def __len__(self) -> int:
        return BOARD_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Board({self._cells.tolist()})"

    def occupants_of(self, marker: Marker) -> FrozenSet[int]:
        """Squares currently holding marker."""
        return frozenset(int(i) for i in np.flatnonzero(self._cells == marker))

    def empty_indices(self) -> FrozenSet[int]:
        return self.occupants_of(Marker.EMPTY)

    def is_empty(self, index: int) -> bool:
        return self._cells[index] == Marker.EMPTY

    def is_full(self) -> bool:
        return not np.any(self._cells == Marker.EMPTY)

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def place(self, index: int, marker: Marker) -> None:
        """Claim an empty square. Raises InvalidMove otherwise."""
        if Marker(marker) is Marker.EMPTY:
            raise ValueError("Cannot place EMPTY")
        if isinstance(index, bool):
            raise InvalidMove(f"Square {index!r} is not an integer")
        try:
            index = operator.index(index)
        except TypeError as e:
            raise InvalidMove(f"Square {index!r} is not an integer") from e
        if not 0 <= index < BOARD_SIZE:
            raise InvalidMove(f"Square {index} is outside 0-{BOARD_SIZE - 1}", index)
        if self._cells[index] != Marker.EMPTY:
            raise InvalidMove(
                f"Square {index} is already taken by {self[index].name}", index
            )
        self._cells[index] = marker

    def reset(self) -> None:
        """Clear all cells for a new match."""
        self._cells[:] = Marker.EMPTY

    def copy(self) -> "Board":
        """Independent mutable copy."""
        b = Board.__new__(Board)
        b._cells = self._cells.copy()
        return b

    def snapshot(self) -> "Board":
        """Independent copy whose cells can no longer be written."""
        b = self.copy()
        b._cells.flags.writeable = False
        return b

    # -----------------------------------------------------------------------
    # Display
    # -----------------------------------------------------------------------

    def state_string(self) -> str:
        lines = ["╭───┬───┬───╮"]
        for r in range(3):
            row = "│ " + " │ ".join(self[r * 3 + c].glyph for c in range(3)) + " │"
            lines.append(row)
            if r < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)

    def legend_string(self) -> str:
        """Human numbering (1-9) for empty squares, blanks for taken ones."""
        rows = []
        for r in range(3):
            labels = [
                f" {i + 1} " if self.is_empty(i) else "   "
                for i in range(r * 3, r * 3 + 3)
            ]
            rows.append("|".join(labels))
        return "\n---+---+---\n".join(rows)
