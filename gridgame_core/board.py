from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]  # (row, col)


class Tile(Enum):
    """What a board cell holds. The value is the symbol used for text boards."""

    EMPTY = ' '
    ENEMY = 'E'
    HEALTH = 'H'
    BOMB = 'B'
    GOAL = 'G'

    @property
    def symbol(self) -> str:
        return self.value


_BY_SYMBOL: Dict[str, Tile] = {t.value: t for t in Tile}
_BY_SYMBOL['.'] = Tile.EMPTY


@dataclass
class Board:
    """One player's square grid of tiles. The player's position lives on the Player, not here."""
    size: int
    grid: List[Tile] = field(default_factory=list)  # row-major, length == size * size

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError('Board size must be positive')
        if not self.grid:
            self.grid = [Tile.EMPTY] * (self.size * self.size)
        elif len(self.grid) != self.size * self.size:
            raise ValueError(f'Grid has {len(self.grid)} cells, expected {self.size * self.size}')

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.size + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def at(self, r: int, c: int) -> Tile:
        """Gets the tile at a given row and column with wrap-around logic."""
        return self.grid[self.index(r % self.size, c % self.size)]

    def set(self, r: int, c: int, tile: Tile) -> None:
        if not isinstance(tile, Tile):
            raise TypeError('tile must be a Tile member')
        if not self.in_bounds(r, c):
            raise IndexError(f'Coordinates out of bounds: ({r}, {c}) for board {self.size}x{self.size}')
        self.grid[self.index(r, c)] = tile

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def cells_of(self, tile: Tile) -> List[Coord]:
        return [coord for coord in self.coords() if self.at(*coord) is tile]

    def count(self, tile: Tile) -> int:
        return sum(1 for t in self.grid if t is tile)

    def empty_cells(self) -> List[Coord]:
        return self.cells_of(Tile.EMPTY)

    def snapshot(self) -> Tuple[Tuple[Tile, ...], ...]:
        """Read-only copy of the grid, one tuple per row."""
        return tuple(tuple(self.grid[r * self.size:(r + 1) * self.size]) for r in range(self.size))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """Builds a board from text rows, e.g. ``['E..', '.H.', '..G']``. '.' and ' ' are empty."""
        size = len(rows)
        flat: List[Tile] = []
        for i, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f'Board must be square; row {i} has {len(row)} cells, expected {size}')
            for ch in row:
                try:
                    flat.append(_BY_SYMBOL[ch])
                except KeyError:
                    raise ValueError(f'Unknown tile symbol {ch!r}') from None
        return cls(size=size, grid=flat)

    def to_rows(self) -> List[str]:
        """Text rows using '.' for empty cells (debugging/tests)."""
        return [
            ''.join('.' if t is Tile.EMPTY else t.symbol for t in row)
            for row in self.snapshot()
        ]
