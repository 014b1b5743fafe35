"""Game configuration.

Environment-first (TTT_MARKS, TTT_PLAYER_NAMES, TTT_ROUNDS); command-line
flags override whatever the environment provides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .board import EMPTY

DEFAULT_MARKS = ("X", "O")
DEFAULT_NAMES = ("Player 1", "Player 2")


def _split_pair(raw: str, what: str) -> Tuple[str, str]:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected two comma-separated {what}, got {raw!r}")
    return parts[0], parts[1]


@dataclass(frozen=True)
class GameConfig:
    marks: Tuple[str, str] = DEFAULT_MARKS
    names: Tuple[str, str] = DEFAULT_NAMES
    rounds: int = 1

    def __post_init__(self) -> None:
        if len(self.marks) != 2:
            raise ValueError("Exactly two marks are required")
        for m in self.marks:
            if len(m) != 1 or m.isspace() or m == EMPTY:
                raise ValueError(f"Invalid mark {m!r}: must be one non-blank character other than {EMPTY!r}")
        if self.marks[0] == self.marks[1]:
            raise ValueError(f"Marks must differ, got {self.marks[0]!r} twice")
        if len(self.names) != 2 or not all(n.strip() for n in self.names):
            raise ValueError("Exactly two non-empty player names are required")
        if self.rounds < 1:
            raise ValueError(f"Rounds must be at least 1, got {self.rounds}")


def load_config(
    env: Optional[Mapping[str, str]] = None,
    marks: Optional[str] = None,
    names: Optional[str] = None,
    rounds: Optional[int] = None,
) -> GameConfig:
    """Build a GameConfig, taking each field from the argument, then the
    environment, then the default. Validation runs once on the merged result.
    """
    env = os.environ if env is None else env
    marks = marks or env.get("TTT_MARKS")
    names = names or env.get("TTT_PLAYER_NAMES")
    if rounds is None and env.get("TTT_ROUNDS"):
        raw = env["TTT_ROUNDS"]
        try:
            rounds = int(raw)
        except ValueError:
            raise ValueError(f"TTT_ROUNDS must be an integer, got {raw!r}") from None
    return GameConfig(
        marks=_split_pair(marks, "marks") if marks else DEFAULT_MARKS,
        names=_split_pair(names, "names") if names else DEFAULT_NAMES,
        rounds=1 if rounds is None else rounds,
    )
