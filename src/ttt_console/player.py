"""Player records and the in-memory scoreboard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class Player:
    name: str
    mark: str
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def __str__(self) -> str:
        return f"{self.name} ({self.mark})"

    @property
    def record(self) -> Tuple[int, int, int]:
        return self.wins, self.losses, self.draws

    def record_win(self) -> None:
        self.wins += 1

    def record_loss(self) -> None:
        self.losses += 1

    def record_draw(self) -> None:
        self.draws += 1


def render_scoreboard(players: List[Player]) -> str:
    width = max(len(str(p)) for p in players)
    lines = [f"{'player':<{width}}  W  L  D"]
    for p in players:
        lines.append(f"{str(p):<{width}} {p.wins:2d} {p.losses:2d} {p.draws:2d}")
    return "\n".join(lines)
