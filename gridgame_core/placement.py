from __future__ import annotations

import logging
import math
import random
from typing import Callable, Optional

from .board import Board, Coord, Tile
from .errors import PlacementError

logger = logging.getLogger(__name__)

CellPredicate = Callable[[Board, Coord], bool]

# Random draws per cell before falling back to scanning the board.
TRIES_PER_CELL = 4


def straight_distance(a: Coord, b: Coord) -> float:
    """Euclidean distance on the flat grid, ignoring wraparound."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def toroidal_distance(a: Coord, b: Coord, size: int) -> float:
    """Euclidean distance taking the shorter way around each axis."""
    dr = abs(a[0] - b[0]) % size
    dc = abs(a[1] - b[1]) % size
    return math.hypot(min(dr, size - dr), min(dc, size - dc))


def min_goal_distance(size: int) -> float:
    return (size - 1) / 2.0


def is_free(board: Board, player_pos: Coord, cell: Coord) -> bool:
    """A cell can take a marker when it is empty and the player is not standing on it."""
    return cell != player_pos and board.at(*cell) is Tile.EMPTY


def is_goal_candidate(board: Board, player_pos: Coord, cell: Coord, toroidal: bool = False) -> bool:
    """Free cell far enough from the player.

    By default the distance is measured on the flat grid, so a goal can end up
    closer than intended through the wrapped edges. Pass ``toroidal=True`` to
    measure the wrapped distance instead.
    """
    if not is_free(board, player_pos, cell):
        return False
    if toroidal:
        dist = toroidal_distance(cell, player_pos, board.size)
    else:
        dist = straight_distance(cell, player_pos)
    return dist >= min_goal_distance(board.size)


def _pick_cell(board: Board, rng: random.Random, accept: Callable[[Coord], bool], what: Tile) -> Coord:
    tries = board.size * board.size * TRIES_PER_CELL
    for _ in range(tries):
        cell = (rng.randrange(board.size), rng.randrange(board.size))
        if accept(cell):
            return cell
    # Unlucky or nearly full board: choose among what is left, or report the misconfiguration.
    eligible = [cell for cell in board.coords() if accept(cell)]
    if not eligible:
        raise PlacementError(f'No free cell left for {what.name} on a {board.size}x{board.size} board')
    logger.debug('Falling back to scan for %s after %d draws (%d eligible)', what.name, tries, len(eligible))
    return rng.choice(eligible)


def place_random(board: Board, player_pos: Coord, tile: Tile, rng: Optional[random.Random] = None) -> Coord:
    """Writes ``tile`` on a uniformly random empty cell other than the player's and returns it."""
    rng = rng or random.Random()
    cell = _pick_cell(board, rng, lambda cell: is_free(board, player_pos, cell), tile)
    board.set(cell[0], cell[1], tile)
    logger.debug('Placed %s at %s', tile.name, cell)
    return cell


def place_goal(
    board: Board,
    player_pos: Coord,
    rng: Optional[random.Random] = None,
    toroidal: bool = False,
) -> Coord:
    """Places the goal at least (size - 1) / 2 away from the player."""
    rng = rng or random.Random()
    cell = _pick_cell(
        board,
        rng,
        lambda cell: is_goal_candidate(board, player_pos, cell, toroidal=toroidal),
        Tile.GOAL,
    )
    board.set(cell[0], cell[1], Tile.GOAL)
    logger.debug('Placed GOAL at %s (player at %s, toroidal=%s)', cell, player_pos, toroidal)
    return cell
