from __future__ import annotations

import logging
import random
from typing import Optional

from .board import Board, Coord, Tile
from .placement import place_random

logger = logging.getLogger(__name__)


def redistribute(
    board: Board,
    player_pos: Coord,
    tile: Tile = Tile.HEALTH,
    rng: Optional[random.Random] = None,
) -> int:
    """Lifts every ``tile`` off the board and drops the same number back on random free cells."""
    rng = rng or random.Random()
    cells = board.cells_of(tile)
    for r, c in cells:
        board.set(r, c, Tile.EMPTY)
    for _ in cells:
        place_random(board, player_pos, tile, rng)
    logger.debug('Redistributed %d %s tile(s)', len(cells), tile.name)
    return len(cells)
