"""
Board representation: cells, lines, parsing/rendering, winner and turn checks.
Teaching notes:
- State is a list of 9 cells indexed row-major (row = pos // 3, col = pos % 3).
- X always starts, so the side to move follows from the number of free cells.
- The board is mutated in place; search code places and removes symbols
  instead of copying the board.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Tuple


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return SYMBOLS[self]

    @property
    def opponent(self) -> "Cell":
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        return Cell.EMPTY

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        try:
            return _BY_SYMBOL[symbol]
        except KeyError:
            raise ValueError(f"Unknown cell symbol: {symbol!r}") from None


SYMBOLS = {Cell.EMPTY: '_', Cell.X: 'X', Cell.O: 'O'}
_BY_SYMBOL = {s: c for c, s in SYMBOLS.items()}

TILES = 9

# Scan order matters for boards that were not reached by legal play.
LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def _check_pos(pos: int) -> None:
    if not 0 <= pos < TILES:
        raise IndexError(f"Position out of range: {pos}")


class Board:
    """Mutable 3x3 board.

    ``winner()`` returns the first completed line in ``LINES`` order. Under
    alternating play at most one player can own a line; for arbitrary boards
    built from strings the answer is that scan-order choice.
    """

    __slots__ = ('_cells', '_free')

    def __init__(self, cells: Iterable[Cell] | None = None):
        if cells is None:
            self._cells: List[Cell] = [Cell.EMPTY] * TILES
        else:
            self._cells = [Cell(c) for c in cells]
            if len(self._cells) != TILES:
                raise ValueError(f"A board has {TILES} cells, got {len(self._cells)}")
        self._free = self._cells.count(Cell.EMPTY)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        if len(text) != TILES:
            raise ValueError(f"Board string must have {TILES} characters, got {len(text)}")
        return cls(Cell.from_symbol(ch) for ch in text)

    def to_string(self) -> str:
        return ''.join(c.symbol for c in self._cells)

    def render(self) -> str:
        rows = []
        for r in range(3):
            rows.append(' '.join(c.symbol for c in self._cells[3 * r:3 * r + 3]))
        return '\n'.join(rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def copy(self) -> "Board":
        return Board(self._cells)

    def reset(self) -> None:
        self._cells = [Cell.EMPTY] * TILES
        self._free = TILES

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def get(self, pos: int) -> Cell:
        _check_pos(pos)
        return self._cells[pos]

    def set(self, pos: int, player: Cell) -> None:
        _check_pos(pos)
        old = self._cells[pos]
        if old == Cell.EMPTY and player != Cell.EMPTY:
            self._free -= 1
        elif old != Cell.EMPTY and player == Cell.EMPTY:
            self._free += 1
        self._cells[pos] = player

    def unset(self, pos: int) -> None:
        self.set(pos, Cell.EMPTY)

    def is_free(self, pos: int) -> bool:
        return self.get(pos) == Cell.EMPTY

    def is_full(self) -> bool:
        return self._free == 0

    def free_count(self) -> int:
        return self._free

    def empty_positions(self) -> List[int]:
        return [i for i, c in enumerate(self._cells) if c == Cell.EMPTY]

    def player_to_move(self) -> Cell:
        # odd number of free cells -> even number of moves made -> X
        return Cell.X if self._free % 2 == 1 else Cell.O

    def winner(self) -> Cell:
        b = self._cells
        for a, c, d in LINES:
            v = b[a]
            if v != Cell.EMPTY and v == b[c] and v == b[d]:
                return v
        return Cell.EMPTY

    def piece_counts(self) -> Tuple[int, int]:
        return self._cells.count(Cell.X), self._cells.count(Cell.O)

    def is_reachable(self) -> bool:
        """Whether the position can arise from alternating play starting with X."""
        x_count, o_count = self.piece_counts()
        if not (x_count == o_count or x_count == o_count + 1):
            return False

        def count_wins(p: Cell) -> int:
            return sum(1 for line in LINES if all(self._cells[i] == p for i in line))

        x_wins = count_wins(Cell.X)
        o_wins = count_wins(Cell.O)
        if x_wins and o_wins:
            return False
        if x_wins and x_count != o_count + 1:
            return False
        if o_wins and x_count != o_count:
            return False
        return True
