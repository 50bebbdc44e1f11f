"""tictactoe package.

Board representation, an exhaustive minimax opponent, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, Cell
from .evaluator import WIN, best_move, is_immediately_winnable, score

__all__ = [
    "Board",
    "Cell",
    "WIN",
    "best_move",
    "is_immediately_winnable",
    "score",
]
