from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Optional

from .board import Board, Cell
from .config import Config
from .evaluator import best_move, is_immediately_winnable, score
from .game import is_over, play, watch
from .symmetry import canonical_form
from .tactics import fork_moves, gives_opponent_immediate_win, winning_moves

Handler = Callable[[argparse.Namespace, Config], int]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe against a perfect player")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--debug", dest="verbose", action="store_true", help="Alias for --verbose")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    sub.add_parser("help", help=COMMAND_HELP["help"])

    p_play = sub.add_parser("play", help=COMMAND_HELP["play"])
    p_play.add_argument("--human", choices=["X", "O"], default=None, help="Your symbol (X moves first)")
    p_play.add_argument("--no-timing", dest="timing", action="store_false", default=None,
                        help="Do not report thinking time")
    p_play.add_argument("--debug", "-v", dest="verbose", action="store_true", default=argparse.SUPPRESS,
                        help="Enable verbose logging")

    p_watch = sub.add_parser("watch", help=COMMAND_HELP["watch"])
    p_watch.add_argument("--no-timing", dest="timing", action="store_false", default=None,
                         help="Do not report elapsed time")
    p_watch.add_argument("--debug", "-v", dest="verbose", action="store_true", default=argparse.SUPPRESS,
                         help="Enable verbose logging")

    p_sol = sub.add_parser("solve", help=COMMAND_HELP["solve"])
    p_sol.add_argument(
        "--board",
        help="Board string, e.g., XX_OO____ (omit with --stdin). Must be reachable by "
        "alternating play with X first; other boards exit with code 2",
    )
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    return p


def _print_info() -> None:
    import importlib.util
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _parse_board(raw: str) -> Optional[Board]:
    try:
        board = Board.from_string(raw)
    except ValueError:
        logging.error("Invalid board string. Must be 9 chars of X/O/_.")
        return None
    if not board.is_reachable():
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def cmd_help(ns: argparse.Namespace, config: Config) -> int:
    width = 20
    for name in sorted(COMMANDS):
        print(name.ljust(width) + COMMAND_HELP[name])
    return 0


def cmd_play(ns: argparse.Namespace, config: Config) -> int:
    try:
        play(config)
    except (EOFError, KeyboardInterrupt):
        print()
        logging.info("Game aborted.")
        return 1
    return 0


def cmd_watch(ns: argparse.Namespace, config: Config) -> int:
    watch(config)
    return 0


def cmd_solve(ns: argparse.Namespace, config: Config) -> int:
    if ns.stdin:
        import csv as _csv
        w = _csv.writer(sys.stdout)
        w.writerow(["board", "canonical_form", "to_move", "score", "best_move"])
        for line in sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            try:
                board = Board.from_string(raw)
            except ValueError:
                continue
            if not board.is_reachable() or is_over(board):
                continue
            w.writerow([
                raw,
                canonical_form(board),
                board.player_to_move().symbol,
                score(board),
                best_move(board),
            ])
        return 0

    board = _parse_board((ns.board or "").strip())
    if board is None:
        return 2
    if is_over(board):
        w = board.winner()
        logging.info("winner=%s full=%s", w.symbol if w != Cell.EMPTY else "none", board.is_full())
        return 0
    to_move = board.player_to_move()
    logging.info(
        "to_move=%s canonical=%s winnable=%s score=%d best=%d wins=%s forks=%s blunders=%s",
        to_move.symbol,
        canonical_form(board),
        is_immediately_winnable(board),
        score(board),
        best_move(board),
        winning_moves(board, to_move),
        fork_moves(board, to_move),
        [i for i in board.empty_positions() if gives_opponent_immediate_win(board, to_move, i)],
    )
    return 0


COMMAND_HELP: Dict[str, str] = {
    "help": "Prints information about each possible action.",
    "play": "Starts a game against the AI.",
    "watch": "Watches the AI play against itself.",
    "solve": "Scores a reachable board and finds the best move for the side to move.",
}

COMMANDS: Dict[str, Handler] = {
    "help": cmd_help,
    "play": cmd_play,
    "watch": cmd_watch,
    "solve": cmd_solve,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    try:
        config = Config.from_env().override(
            debug=ns.verbose,
            human=getattr(ns, "human", None),
            timing=getattr(ns, "timing", None),
        )
    except ValueError as e:
        logging.error("%s", e)
        return 2
    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if ns.cmd == "solve" and not ns.stdin and not ns.board:
        logging.error("solve needs --board or --stdin")
        return 2

    handler = COMMANDS[ns.cmd or "play"]
    return handler(ns, config)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
