from __future__ import annotations

import argparse
import logging

from .board import EMPTY, Board
from .config import load_config
from .game import Session


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Two-player console tic-tac-toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_play = sub.add_parser("play", help="Play an interactive game in the console")
    p_play.add_argument(
        "--marks", help='Comma-separated marks for player 1 and 2, e.g. "X,O" (env: TTT_MARKS)'
    )
    p_play.add_argument(
        "--names", help='Comma-separated player names, e.g. "Alice,Bob" (env: TTT_PLAYER_NAMES)'
    )
    p_play.add_argument(
        "--rounds", type=int, default=None, help="Number of games to play (env: TTT_ROUNDS, default: 1)"
    )

    p_chk = sub.add_parser(
        "check",
        help=f"Report winner/draw for a board (9 chars, {EMPTY!r}=empty, anything else a mark)",
    )
    p_chk.add_argument("--board", help="Board string, e.g., XXXO..O.. (omit with --stdin)")
    p_chk.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _parse_board(raw: str) -> Board | None:
    raw = raw.strip()
    if len(raw) != 9:
        return None
    try:
        return Board.from_string(raw)
    except ValueError:
        return None


def _verdict(board: Board) -> tuple[str, bool, bool]:
    return board.winner() or "none", board.is_draw(), board.is_game_over()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    level = logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("ttt-console"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        try:
            config = load_config(marks=ns.marks, names=ns.names, rounds=ns.rounds)
        except ValueError as e:
            logging.error("Invalid configuration: %s", e)
            return 2
        logging.debug("config=%s", config)
        try:
            Session(config).run()
        except EOFError:
            logging.warning("Input closed before the game finished.")
            return 1
        except KeyboardInterrupt:
            logging.warning("Game interrupted.")
            return 130
        return 0

    if ns.cmd == "check":
        if ns.stdin:
            import csv as _csv
            import sys as _sys

            w = _csv.writer(_sys.stdout)
            w.writerow(["board", "winner", "draw", "game_over"])
            for line in _sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                b = _parse_board(raw)
                if b is None:
                    logging.debug("skipping malformed board %r", raw)
                    continue
                w.writerow([raw, *_verdict(b)])
            return 0
        b = _parse_board(ns.board or "")
        if b is None:
            logging.error("Invalid board string. Must be 9 non-blank chars, %r for empty.", EMPTY)
            return 2
        winner, draw, over = _verdict(b)
        logging.info("winner=%s draw=%s game_over=%s", winner, draw, over)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
