from __future__ import annotations

import logging
from typing import Iterable

from .board import Board, Coord, Tile
from .player import Player

logger = logging.getLogger(__name__)

BLAST_RADIUS = 2


def blast_cells(board: Board, center: Coord, radius: int = BLAST_RADIUS) -> Iterable[Coord]:
    """Cells within Chebyshev distance ``radius`` of ``center``.

    Unlike movement, the blast does not wrap: cells past the edge are dropped.
    """
    r0, c0 = center
    for r in range(r0 - radius, r0 + radius + 1):
        for c in range(c0 - radius, c0 + radius + 1):
            if board.in_bounds(r, c):
                yield (r, c)


def detonate(board: Board, player: Player) -> int:
    """Clears enemies around the player and spends the bomb. Returns how many were destroyed."""
    destroyed = 0
    for r, c in blast_cells(board, player.position):
        if board.at(r, c) is Tile.ENEMY:
            board.set(r, c, Tile.EMPTY)
            destroyed += 1
    player.has_bomb = False
    logger.debug('%s detonated a bomb at %s, %d enemies destroyed', player.name, player.position, destroyed)
    return destroyed
