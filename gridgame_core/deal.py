from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .board import Board, Tile
from .difficulty import Difficulty
from .errors import PlacementError
from .placement import place_goal, place_random
from .player import Player

logger = logging.getLogger(__name__)

HEALTH_PICKUPS = 2
BOMB_PICKUPS = 1


def _rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    return rng if rng is not None else random.Random(seed)


def deal_board(
    difficulty: Difficulty,
    player: Player,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    toroidal_goal: bool = False,
) -> Board:
    """Creates a board for ``player`` and moves the player to a random start cell.

    Order matters: start cell, goal, enemies, health pickups, bomb. Each
    placement only sees the cells still empty at that point, so nothing is
    overwritten.
    """
    if difficulty.occupancy() > difficulty.board_size ** 2:
        raise PlacementError(
            f'{difficulty.occupancy()} entities do not fit on a '
            f'{difficulty.board_size}x{difficulty.board_size} board'
        )
    rng = _rng(rng, seed)
    size = difficulty.board_size
    board = Board(size=size)

    player.position = (rng.randrange(size), rng.randrange(size))
    pos = player.position
    place_goal(board, pos, rng, toroidal=toroidal_goal)
    for _ in range(difficulty.enemy_count):
        place_random(board, pos, Tile.ENEMY, rng)
    for _ in range(HEALTH_PICKUPS):
        place_random(board, pos, Tile.HEALTH, rng)
    for _ in range(BOMB_PICKUPS):
        place_random(board, pos, Tile.BOMB, rng)

    logger.debug('Dealt %dx%d board for %s starting at %s', size, size, player.name, pos)
    return board


def deal_boards(
    difficulty: Difficulty,
    players: Sequence[Player],
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    toroidal_goal: bool = False,
) -> List[Board]:
    """One independent board per player, all drawn from the same generator."""
    rng = _rng(rng, seed)
    return [deal_board(difficulty, p, rng=rng, toroidal_goal=toroidal_goal) for p in players]
