"""
Board model: grid state, placement rules, winner/draw checks.
Teaching notes:
- The grid is ``moves[y][x]``: rows first, then columns. Empty cells are None.
- Every win direction is an "axis": an ordered list of lines. Rows, columns and
  the two diagonals are all fed to the same reduction, ``axis_to_winner``.
- Line order matters: the first uniform full line wins, so projections must
  never reorder lines.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

BOARD_SIZE = 3
EMPTY = "."

Cell = Optional[str]
Line = List[Cell]


class OccupiedCellError(ValueError):
    """Raised by ``place_mark`` when the target cell already holds a mark."""

    def __init__(self, x: int, y: int, occupant: str):
        super().__init__(f"Cell ({x}, {y}) is already occupied by {occupant!r}")
        self.x = x
        self.y = y
        self.occupant = occupant


class OutOfBoundsError(IndexError):
    """Raised by ``place_mark`` for coordinates outside the grid."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"Cell ({x}, {y}) is outside the {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


def axis_to_winner(lines: Sequence[Sequence[Cell]]) -> Optional[str]:
    """Return the mark of the first full line holding a single value, else None."""
    full = [line for line in lines if all(cell is not None for cell in line)]
    for line in full:
        if len(set(line)) == 1:
            return line[0]
    return None


class Board:
    def __init__(self, size: int = BOARD_SIZE):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self._moves: List[Line] = [[None] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        """Build a board from an existing square grid (rows of cells)."""
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise ValueError("Rows must form a non-empty square grid")
        board = cls(size)
        board._moves = [list(row) for row in rows]
        return board

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse ``size*size`` characters, ``.`` for empty, anything else a mark.

        e.g. ``"XXXO..O.."`` is X across the top row.
        """
        raw = text.strip()
        size = int(round(len(raw) ** 0.5))
        if size == 0 or size * size != len(raw) or any(c.isspace() for c in raw):
            raise ValueError(f"Invalid board string: {text!r}")
        cells = [None if c == EMPTY else c for c in raw]
        return cls.from_rows([cells[i:i + size] for i in range(0, len(cells), size)])

    @property
    def moves(self) -> List[Line]:
        return self._moves

    def __str__(self) -> str:
        return "".join(EMPTY if cell is None else cell for row in self._moves for cell in row)

    def __repr__(self) -> str:
        return f"Board.from_string({str(self)!r})"

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def place_mark(self, mark: str, x: int, y: int) -> "Board":
        """Put ``mark`` at column ``x``, row ``y`` and return the board.

        Raises OutOfBoundsError for coordinates off the grid and
        OccupiedCellError when the cell is already taken.
        """
        if not self._in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
        occupant = self._moves[y][x]
        if occupant is not None:
            raise OccupiedCellError(x, y, occupant)
        self._moves[y][x] = mark
        return self

    def is_open_spot(self, x: int, y: int) -> bool:
        return self._in_bounds(x, y) and self._moves[y][x] is None

    def is_full(self) -> bool:
        return all(cell is not None for row in self._moves for cell in row)

    # Axis projections
    def _grid(self) -> np.ndarray:
        return np.array(self._moves, dtype=object)

    def horizontals(self) -> List[Line]:
        return [list(row) for row in self._moves]

    def verticals(self) -> List[Line]:
        return self._grid().T.tolist()

    def diagonals(self) -> List[Line]:
        grid = self._grid()
        return [grid.diagonal().tolist(), np.fliplr(grid).diagonal().tolist()]

    # Winner checks
    def horizontal_winner(self) -> Optional[str]:
        return axis_to_winner(self.horizontals())

    def vertical_winner(self) -> Optional[str]:
        return axis_to_winner(self.verticals())

    def diagonal_winner(self) -> Optional[str]:
        return axis_to_winner(self.diagonals())

    def winner(self) -> Optional[str]:
        for check in (self.horizontal_winner, self.vertical_winner, self.diagonal_winner):
            mark = check()
            if mark is not None:
                return mark
        return None

    def is_draw(self) -> bool:
        return self.winner() is None and self.is_full()

    def is_game_over(self) -> bool:
        return self.is_draw() or self.winner() is not None
