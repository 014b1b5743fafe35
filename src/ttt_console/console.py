"""
Console rendering and move input.
Teaching notes:
- Coordinates are typed as "x,y": column first, then row, both 0-indexed.
- Malformed text and unavailable spots are re-prompted here; the board only
  ever sees moves that passed ``is_open_spot``.
"""
from __future__ import annotations

import re
from typing import Callable, Optional, Tuple

from .board import Board
from .player import Player

MOVE_RE = re.compile(r"^\s*(\d+)\s*,\s*(\d+)\s*$")


def render_board(board: Board) -> str:
    n = board.size
    width = len(str(n - 1))
    pad = " " * (width + 1)
    header = pad + " ".join(f" {x:>{width}} " for x in range(n)).rstrip()
    divider = pad + "+".join("-" * (width + 2) for _ in range(n))
    lines = [header]
    for y, row in enumerate(board.horizontals()):
        cells = "|".join(f" {(c or ' '):>{width}} " for c in row)
        lines.append(f"{y:>{width}} {cells}".rstrip())
        if y < n - 1:
            lines.append(divider)
    return "\n".join(lines)


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    m = MOVE_RE.match(text)
    if m is None:
        return None
    return int(m.group(1)), int(m.group(2))


def prompt_move(
    board: Board,
    player: Player,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Tuple[int, int]:
    """Ask ``player`` for a move until it is well-formed and open on ``board``."""
    while True:
        text = read(f"{player}, enter your move as x,y: ")
        move = parse_move(text)
        if move is None:
            write("Please enter two non-negative numbers separated by a comma, e.g. 1,2")
            continue
        x, y = move
        if not board.is_open_spot(x, y):
            write(f"Spot {x},{y} is not available.")
            continue
        return x, y
