import pytest

pytest.importorskip("pytest_benchmark")

from tictactoe.board import Board  # noqa: E402
from tictactoe.evaluator import best_move, score  # noqa: E402


def test_benchmark_best_move_after_opening(benchmark):
    board = Board.from_string("X___O____")

    mv = benchmark(best_move, board)
    assert mv in board.empty_positions()
    assert board == Board.from_string("X___O____")


def test_benchmark_score_midgame(benchmark):
    board = Board.from_string("X_O_O__X_")

    value = benchmark(score, board)
    assert 0 <= value <= 512
