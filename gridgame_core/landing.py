from __future__ import annotations

import logging
from enum import Enum

from .board import Board, Tile
from .player import Player

logger = logging.getLogger(__name__)


class LandingSignal(Enum):
    """What happened when the player landed on their new cell."""

    ENEMY_HIT = 'enemy_hit'
    HEALTH_FOUND = 'health_found'
    BOMB_FOUND = 'bomb_found'
    GOAL_REACHED = 'goal_reached'
    EMPTY_TILE = 'empty_tile'


def resolve_landing(board: Board, player: Player) -> LandingSignal:
    """Applies the effect of the tile under the player.

    Enemy, health and bomb tiles are used up and become empty. The goal is left
    in place; deciding the win is up to the turn controller.
    """
    r, c = player.position
    tile = board.at(r, c)
    if tile is Tile.ENEMY:
        player.health -= 1
        board.set(r, c, Tile.EMPTY)
        signal = LandingSignal.ENEMY_HIT
    elif tile is Tile.HEALTH:
        player.health += 1
        board.set(r, c, Tile.EMPTY)
        signal = LandingSignal.HEALTH_FOUND
    elif tile is Tile.BOMB:
        player.has_bomb = True
        board.set(r, c, Tile.EMPTY)
        signal = LandingSignal.BOMB_FOUND
    elif tile is Tile.GOAL:
        signal = LandingSignal.GOAL_REACHED
    else:
        signal = LandingSignal.EMPTY_TILE
    logger.debug('%s landed on %s at %s: %s (health=%d)', player.name, tile.name, player.position, signal.name, player.health)
    return signal
