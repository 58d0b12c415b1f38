from __future__ import annotations

from typing import Dict, List

from .board import Board, Tile
from .messages import Messages
from .player import Player

_RESET = '\x1b[0m'

# Foreground black on a coloured background, bold.
_TILE_STYLES: Dict[Tile, str] = {
    Tile.EMPTY: '\x1b[1;7m',
    Tile.ENEMY: '\x1b[1;30;101m',
    Tile.HEALTH: '\x1b[1;30;102m',
    Tile.GOAL: '\x1b[1;30;103m',
    Tile.BOMB: '\x1b[1;30;47m',
}
_PLAYER_STYLE = '\x1b[1;30;104m'


def _cell(symbol: str, style: str, color: bool) -> str:
    if not color:
        return symbol if symbol != ' ' else '.'
    return f'{style} {symbol} {_RESET}'


def tile_cell(tile: Tile, color: bool = False) -> str:
    return _cell(tile.symbol, _TILE_STYLES[tile], color)


def player_cell(player: Player, color: bool = False) -> str:
    return _cell(player.marker, _PLAYER_STYLE, color)


def render_board(board: Board, player: Player, color: bool = False) -> str:
    """Generates a human-readable view of ``board`` as ``player`` sees it.

    Enemies are drawn as empty cells unless the player has cheat mode on.
    """
    lines: List[str] = []
    sep = '' if color else ' '
    for r, row in enumerate(board.snapshot()):
        cells: List[str] = []
        for c, tile in enumerate(row):
            if (r, c) == player.position:
                cells.append(player_cell(player, color))
            elif tile is Tile.ENEMY and not player.cheat_mode:
                cells.append(tile_cell(Tile.EMPTY, color))
            else:
                cells.append(tile_cell(tile, color))
        lines.append(sep.join(cells))
    return '\n'.join(lines)


def render_legend(player: Player, messages: Messages, color: bool = False) -> str:
    lines = [
        messages.get(
            'legend_main',
            tile_cell(Tile.EMPTY, color),
            player_cell(player, color),
            player.name,
            tile_cell(Tile.GOAL, color),
            tile_cell(Tile.HEALTH, color),
            tile_cell(Tile.BOMB, color),
        )
    ]
    if player.cheat_mode:
        lines.append(messages.get('legend_enemy', tile_cell(Tile.ENEMY, color)))
    return '\n'.join(lines)
