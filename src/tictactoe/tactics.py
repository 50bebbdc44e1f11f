"""
Tactics and simple motifs: immediate wins and forks.
Teaching notes:
- Moves are tried in place and undone, like the evaluator does.
- A fork is a move after which the same player has two or more winning moves.
"""
from typing import List

from .board import Board, Cell
from .evaluator import placed


def winning_moves(board: Board, player: Cell) -> List[int]:
    wins: List[int] = []
    for i in board.empty_positions():
        with placed(board, i, player):
            if board.winner() == player:
                wins.append(i)
    return wins


def fork_moves(board: Board, player: Cell) -> List[int]:
    forks: List[int] = []
    for i in board.empty_positions():
        with placed(board, i, player):
            if board.winner() != player and len(winning_moves(board, player)) >= 2:
                forks.append(i)
    return forks


def gives_opponent_immediate_win(board: Board, player: Cell, move: int) -> bool:
    if not board.is_free(move):
        return False
    with placed(board, move, player):
        if board.winner() == player:
            return False
        return len(winning_moves(board, player.opponent)) > 0
