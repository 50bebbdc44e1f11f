"""
Interactive and self-play game loops.

Input and output are injectable so the loops can be driven by scripts
and tests; by default they use ``input`` and standard output.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO, Tuple

from .board import Board, Cell
from .config import Config
from .evaluator import best_move
from .stopwatch import Stopwatch

InputFn = Callable[[str], str]


@dataclass
class GameResult:
    board: Board
    winner: Cell
    moves: List[int] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner == Cell.EMPTY

    def describe(self) -> str:
        if self.is_draw:
            return "Draw."
        return f"{self.winner.symbol} wins."


def is_over(board: Board) -> bool:
    return board.winner() != Cell.EMPTY or board.is_full()


def parse_move(raw: str) -> Optional[Tuple[int, int]]:
    """Parse ``"row col"`` (1-based) into zero-based coordinates, or None."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        r, c = int(parts[0]) - 1, int(parts[1]) - 1
    except ValueError:
        return None
    if not (0 <= r < 3 and 0 <= c < 3):
        return None
    return r, c


def read_move(board: Board, input_fn: InputFn, out: TextIO) -> int:
    while True:
        parsed = parse_move(input_fn("Move: "))
        if parsed is None:
            print("Enter a row and a column, each between 1 and 3.", file=out)
            continue
        pos = 3 * parsed[0] + parsed[1]
        if not board.is_free(pos):
            print("That cell is taken.", file=out)
            continue
        return pos


def play(
    config: Optional[Config] = None,
    input_fn: Optional[InputFn] = None,
    out: Optional[TextIO] = None,
) -> GameResult:
    """Human against the computer; X always moves first."""
    config = config or Config()
    input_fn = input_fn or input
    out = out or sys.stdout
    board = Board()
    moves: List[int] = []
    human = Stopwatch("You")
    computer = Stopwatch("The computer")
    print(board, end="\n\n", file=out)
    while not is_over(board):
        to_move = board.player_to_move()
        if to_move == config.human:
            human.start()
            pos = read_move(board, input_fn, out)
            human.pause()
            header = "After you:"
        else:
            computer.start()
            pos = best_move(board)
            computer.pause()
            logging.debug("computer plays row=%d col=%d", pos // 3 + 1, pos % 3 + 1)
            header = "After the computer:"
        board.set(pos, to_move)
        moves.append(pos)
        print(header, file=out)
        print(board, end="\n\n", file=out)
    result = GameResult(board=board, winner=board.winner(), moves=moves)
    print(result.describe(), file=out)
    if config.timing:
        print(human.report(), file=out)
        print(computer.report(), file=out)
    return result


def watch(config: Optional[Config] = None, out: Optional[TextIO] = None) -> GameResult:
    """The computer plays both sides from an empty board."""
    config = config or Config()
    out = out or sys.stdout
    board = Board()
    moves: List[int] = []
    stopwatch = Stopwatch()
    print(board, end="\n\n", file=out)
    stopwatch.start()
    while not is_over(board):
        to_move = board.player_to_move()
        pos = best_move(board)
        board.set(pos, to_move)
        moves.append(pos)
        print(board, end="\n\n", file=out)
    stopwatch.pause()
    result = GameResult(board=board, winner=board.winner(), moves=moves)
    print(result.describe(), file=out)
    if config.timing:
        print(stopwatch.report(), file=out)
    return result
