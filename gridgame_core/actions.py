from __future__ import annotations

import logging
import random
from typing import Optional

from .board import Board, Tile
from .bomb import detonate
from .errors import ActionError, PlayerDeadError
from .landing import LandingSignal, resolve_landing
from .moves import Move, move_position
from .player import Player
from .redistribute import redistribute

logger = logging.getLogger(__name__)


def _require_alive(player: Player, action: str) -> None:
    if player.is_dead:
        raise PlayerDeadError(f'{player.name} is dead and cannot {action}')


def count_enemies(board: Board) -> int:
    """Number of enemies left on the board. Does not touch the board."""
    return board.count(Tile.ENEMY)


def move(board: Board, player: Player, mv: Move, rng: Optional[random.Random] = None) -> LandingSignal:
    """Moves the player, resolves the landing, then shuffles the health pickups."""
    _require_alive(player, 'move')
    rng = rng or random.Random()
    player.position = move_position(player.position, mv, board.size)
    signal = resolve_landing(board, player)
    redistribute(board, player.position, Tile.HEALTH, rng)
    return signal


def use_bomb(board: Board, player: Player) -> int:
    _require_alive(player, 'use a bomb')
    if not player.has_bomb:
        raise ActionError(f'{player.name} has no bomb')
    return detonate(board, player)


def use_count(board: Board, player: Player) -> int:
    """Spends the one-shot count ability: costs one health and reports the enemies left."""
    _require_alive(player, 'count enemies')
    if not player.has_count:
        raise ActionError(f'{player.name} already used the enemy count')
    player.has_count = False
    player.health -= 1
    found = count_enemies(board)
    logger.debug('%s counted %d enemies (health now %d)', player.name, found, player.health)
    return found
