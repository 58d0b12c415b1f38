from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Difficulty:
    """Board dimensions and player stats for one difficulty level."""
    board_size: int
    enemy_count: int
    initial_health: int
    movement_range: int = 3

    def occupancy(self) -> int:
        """Cells taken at deal time: player, goal, enemies, two health pickups and a bomb."""
        return 1 + 1 + self.enemy_count + 2 + 1


PRESETS: Dict[int, Difficulty] = {
    1: Difficulty(board_size=6, enemy_count=8, initial_health=4),
    2: Difficulty(board_size=12, enemy_count=32, initial_health=4),
    3: Difficulty(board_size=24, enemy_count=128, initial_health=3),
}

LEVELS = tuple(sorted(PRESETS))


def difficulty_for_level(level: int) -> Difficulty:
    """Returns the preset for a level selector (1-3)."""
    try:
        return PRESETS[level]
    except KeyError:
        raise ValueError(f'Unknown difficulty level: {level!r} (expected one of {LEVELS})') from None
