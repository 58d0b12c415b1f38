from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .board import Coord

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Orthogonal directions keyed by the letter the player types."""

    UP = 'W'
    DOWN = 'S'
    LEFT = 'A'
    RIGHT = 'D'

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]

    @classmethod
    def from_key(cls, key: str) -> 'Direction':
        return cls(key.upper())


_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Move:
    """A validated move: how many cells and which way."""
    distance: int
    direction: Direction

    def reversed(self) -> 'Move':
        return Move(self.distance, self.direction.opposite)

    def __str__(self) -> str:
        return f'{self.distance}{self.direction.value}'


def wrap_step(size: int, r: int, c: int) -> Coord:
    """Wraps coordinates around the board."""
    return r % size, c % size


def move_position(pos: Coord, move: Move, size: int) -> Coord:
    """Where a player at ``pos`` ends up after ``move`` on a toroidal board of ``size``."""
    dr, dc = move.direction.delta
    r, c = pos
    dest = wrap_step(size, r + dr * move.distance, c + dc * move.distance)
    logger.debug('Move %s from %s to %s', move, pos, dest)
    return dest
