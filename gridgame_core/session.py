from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .board import Board, Tile
from .deal import deal_boards
from .difficulty import Difficulty
from .player import Player

logger = logging.getLogger(__name__)

MAX_PLAYERS = 9


class Mode(Enum):
    SP = 'single'
    MP = 'multi'


def menu_range(player: Player) -> Tuple[int, int]:
    """Lowest and highest menu option the player may pick this turn.

    0 (count) is offered only while the count is unused; 3 (bomb) only while a
    bomb is held. 1 (move) and 2 (legend) are always available.
    """
    lo = 0 if player.has_count else 1
    hi = 3 if player.has_bomb else 2
    return lo, hi


@dataclass
class Session:
    """Everything one match needs: players, their boards, the generator and the outcome."""
    difficulty: Difficulty
    players: List[Player]
    boards: List[Board]
    rng: random.Random = field(default_factory=random.Random)
    winner: Optional[int] = None
    game_over: bool = False

    @classmethod
    def start(
        cls,
        difficulty: Difficulty,
        names: Sequence[str],
        seed: Optional[int] = None,
        toroidal_goal: bool = False,
    ) -> 'Session':
        if not 1 <= len(names) <= MAX_PLAYERS:
            raise ValueError(f'Expected 1 to {MAX_PLAYERS} players, got {len(names)}')
        rng = random.Random(seed)
        players = [Player.for_difficulty(difficulty, name, str(i + 1)) for i, name in enumerate(names)]
        boards = deal_boards(difficulty, players, rng=rng, toroidal_goal=toroidal_goal)
        logger.debug('Started %d-player match on a %dx%d board', len(players), difficulty.board_size, difficulty.board_size)
        return cls(difficulty=difficulty, players=players, boards=boards, rng=rng)

    @property
    def mode(self) -> Mode:
        return Mode.SP if len(self.players) == 1 else Mode.MP

    def reached_goal(self, index: int) -> bool:
        player = self.players[index]
        return self.boards[index].at(*player.position) is Tile.GOAL

    def alive_players(self) -> List[int]:
        return [i for i, p in enumerate(self.players) if not p.is_dead]

    def last_one_standing(self) -> bool:
        """In multiplayer, the match ends once a single player is left alive."""
        return self.mode is Mode.MP and len(self.alive_players()) == 1

    def finish(self, winner: Optional[int]) -> None:
        self.game_over = True
        self.winner = winner
        logger.debug('Match over, winner=%s', winner)
