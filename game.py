from __future__ import annotations

# Facade module that re-exports GridGame core functionality.
# Tests and tools import from here; single-responsibility modules live under gridgame_core/*.

from gridgame_core.board import Board, Coord, Tile
from gridgame_core.player import Player
from gridgame_core.difficulty import PRESETS, Difficulty, difficulty_for_level
from gridgame_core.errors import ActionError, GridGameError, PlacementError, PlayerDeadError
from gridgame_core.placement import (
    is_free,
    is_goal_candidate,
    min_goal_distance,
    place_goal,
    place_random,
    straight_distance,
    toroidal_distance,
)
from gridgame_core.deal import deal_board, deal_boards
from gridgame_core.moves import Direction, Move, move_position, wrap_step
from gridgame_core.landing import LandingSignal, resolve_landing
from gridgame_core.redistribute import redistribute
from gridgame_core.bomb import blast_cells, detonate
from gridgame_core.actions import count_enemies, move, use_bomb, use_count
from gridgame_core.validation import (
    MoveError,
    MoveFormatError,
    bounded_int,
    is_cheat,
    is_int,
    is_name_invalid,
    is_name_taken,
    is_yes_no,
    int_in_range,
    parse_move,
    validate_move,
)
from gridgame_core.messages import Language, Messages, detect_language, parse_language
from gridgame_core.render import render_board, render_legend
from gridgame_core.session import Mode, Session, menu_range


def main() -> None:
    # CLI driver delegated to gridgame_core.cli
    from gridgame_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
