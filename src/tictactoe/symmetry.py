"""
Symmetries of the Tic-Tac-Toe board.
Teaching notes:
- There are 8 symmetries (the dihedral group of the square).
- Each symmetry is stored as an index map: the cell at ``i`` moves to ``map[i]``.
- Positions (moves) transform with the board, so a symmetric board has the
  same score and its best moves map through the same index map.
"""
from typing import Dict, List

import numpy as np

from .board import Board, Cell, TILES

ALL_SYMS = ['id', 'rot90', 'rot180', 'rot270', 'hflip', 'vflip', 'd1', 'd2']

_GRID = np.arange(TILES).reshape(3, 3)


def _image(kind: str) -> np.ndarray:
    # image[r, c] = index of the source cell that lands on (r, c)
    if kind == 'id':
        return _GRID
    elif kind == 'rot90':
        return np.rot90(_GRID, k=-1)
    elif kind == 'rot180':
        return np.rot90(_GRID, k=2)
    elif kind == 'rot270':
        return np.rot90(_GRID, k=1)
    elif kind == 'hflip':
        return np.fliplr(_GRID)
    elif kind == 'vflip':
        return np.flipud(_GRID)
    elif kind == 'd1':
        return _GRID.T
    elif kind == 'd2':
        return np.rot90(_GRID, k=2).T
    else:
        raise ValueError(f"Unknown transformation: {kind}")


def sym_index_map(kind: str) -> List[int]:
    source = _image(kind).ravel()
    mapping = np.empty(TILES, dtype=int)
    mapping[source] = np.arange(TILES)
    return mapping.tolist()


SYMM_INDEX_MAPS: Dict[str, List[int]] = {k: sym_index_map(k) for k in ALL_SYMS}

def apply_action_transform(action: int, kind: str) -> int:
    if kind not in SYMM_INDEX_MAPS:
        raise ValueError(f"Unknown transformation: {kind}")
    return SYMM_INDEX_MAPS[kind][action]


def transform_board(board: Board, kind: str) -> Board:
    if kind not in SYMM_INDEX_MAPS:
        raise ValueError(f"Unknown transformation: {kind}")
    cells = board.cells
    out = [Cell.EMPTY] * TILES
    for i, j in enumerate(SYMM_INDEX_MAPS[kind]):
        out[j] = cells[i]
    return Board(out)


def canonical_form(board: Board) -> str:
    """Lexicographically smallest string among the 8 images of ``board``."""
    return min(transform_board(board, k).to_string() for k in ALL_SYMS)
