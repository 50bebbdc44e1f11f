"""
Exhaustive minimax evaluator, from the side-to-move perspective.
Scale:
- Scores are integers in [0, WIN]; higher is better for the player to move.
- A move's value is WIN minus the opponent's score, decayed by 7/8 per ply,
  so faster wins and slower losses score higher.
- A full board with no winning move scores 0.
Tie-break policy:
- best_move takes an immediate win at the lowest index.
- Otherwise, among equally scored moves the highest index wins.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from .board import Board, Cell

WIN = 512


def decay(score: int) -> int:
    return 7 * score // 8


@contextmanager
def placed(board: Board, pos: int, player: Cell) -> Iterator[Board]:
    """Temporarily occupy ``pos``; the cell is emptied again on every exit path."""
    board.set(pos, player)
    try:
        yield board
    finally:
        board.unset(pos)


def is_immediately_winnable(board: Board) -> bool:
    to_move = board.player_to_move()
    for pos in board.empty_positions():
        with placed(board, pos, to_move):
            if board.winner() == to_move:
                return True
    return False


def score(board: Board, limit: Optional[int] = None, prune: bool = True) -> int:
    """Minimax value of ``board`` for the player to move.

    With ``limit`` the search stops as soon as the value reaches it; the result
    is then only known to be ``>= limit``. Below the limit it is exact.
    ``prune=False`` ignores limits and visits every line of play.
    """
    if is_immediately_winnable(board):
        return WIN
    to_move = board.player_to_move()
    best = 0
    for pos in board.empty_positions():
        # a child value of WIN - best or more cannot beat best
        child_limit = WIN - best if prune else None
        with placed(board, pos, to_move):
            value = decay(WIN - score(board, child_limit, prune))
        if value > best:
            best = value
            if prune and limit is not None and best >= limit:
                break
    return best


def best_move(board: Board, prune: bool = True) -> int:
    """Best position for the player to move. The board is left unchanged."""
    if board.is_full() or board.winner() != Cell.EMPTY:
        raise ValueError(f"No move to search on a finished board: {board.to_string()}")
    to_move = board.player_to_move()
    best_so_far = -1
    choice = -1
    for pos in board.empty_positions():
        with placed(board, pos, to_move):
            if board.winner() == to_move:
                best_so_far = WIN
                choice = pos
                break
            # a child scoring above WIN - best_so_far loses the comparison below
            limit = WIN - best_so_far + 1 if prune and best_so_far >= 0 else None
            evaluation = WIN - score(board, limit, prune)
        if evaluation >= best_so_far:
            best_so_far = evaluation
            choice = pos
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        logging.debug("to_move=%s winnable=%s", to_move.symbol, is_immediately_winnable(board))
        logging.debug("best=%d evaluation=%d", choice, best_so_far)
    return choice
