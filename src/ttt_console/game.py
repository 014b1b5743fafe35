"""
Turn loop and multi-round sessions.

The Game owns one Board and rotates between two players until the board
reaches a terminal state; a Session plays several games with fresh boards and
keeps each player's record.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .board import Board
from .config import GameConfig
from .console import prompt_move, render_board
from .player import Player, render_scoreboard


@dataclass
class GameResult:
    winner: Optional[Player]
    board: Board
    turns: int

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class Game:
    def __init__(
        self,
        players: Sequence[Player],
        board: Optional[Board] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        if len(players) != 2:
            raise ValueError(f"A game needs exactly two players, got {len(players)}")
        if players[0].mark == players[1].mark:
            raise ValueError(f"Players must use different marks, both use {players[0].mark!r}")
        self.players = list(players)
        self.board = board if board is not None else Board()
        self.read = read
        self.write = write
        self.turn = self._check_position()

    def _check_position(self) -> int:
        """Return the number of moves already on the board.

        Raises ValueError unless every mark belongs to a player and the first
        player has made the same number of moves as the second, or one more.
        """
        cells = [c for row in self.board.moves for c in row if c is not None]
        first, second = (p.mark for p in self.players)
        stray = sorted(set(cells) - {first, second})
        if stray:
            raise ValueError(f"Board holds marks no player uses: {stray}")
        n_first, n_second = cells.count(first), cells.count(second)
        if n_first - n_second not in (0, 1):
            raise ValueError(
                f"Board has {n_first} {first!r} and {n_second} {second!r}; "
                f"{first!r} moves first so that position is unreachable"
            )
        return len(cells)

    @property
    def current_player(self) -> Player:
        return self.players[self.turn % 2]

    def player_for_mark(self, mark: str) -> Player:
        for p in self.players:
            if p.mark == mark:
                return p
        raise KeyError(f"No player uses mark {mark!r}")

    def play_turn(self) -> None:
        player = self.current_player
        x, y = prompt_move(self.board, player, read=self.read, write=self.write)
        self.board.place_mark(player.mark, x, y)
        logging.debug("turn=%d player=%s move=%d,%d board=%s", self.turn, player.name, x, y, self.board)
        self.turn += 1

    def play(self) -> GameResult:
        while not self.board.is_game_over():
            self.write(render_board(self.board))
            self.play_turn()
        self.write(render_board(self.board))

        mark = self.board.winner()
        winner = self.player_for_mark(mark) if mark is not None else None
        if winner is None:
            self.write("It's a draw.")
            for p in self.players:
                p.record_draw()
        else:
            self.write(f"{winner} wins!")
            winner.record_win()
            for p in self.players:
                if p is not winner:
                    p.record_loss()
        logging.info("game over after %d turns: %s", self.turn, f"winner={winner.mark}" if winner else "draw")
        return GameResult(winner=winner, board=self.board, turns=self.turn)


class Session:
    def __init__(
        self,
        config: GameConfig,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.config = config
        self.players = [Player(name, mark) for name, mark in zip(config.names, config.marks)]
        self.read = read
        self.write = write

    def run(self) -> List[GameResult]:
        results: List[GameResult] = []
        for n in range(1, self.config.rounds + 1):
            if self.config.rounds > 1:
                self.write(f"Round {n} of {self.config.rounds}")
            game = Game(self.players, board=Board(), read=self.read, write=self.write)
            results.append(game.play())
        self.write(render_scoreboard(self.players))
        return results
