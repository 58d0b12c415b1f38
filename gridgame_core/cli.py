from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional, Sequence, TextIO

from .actions import move, use_bomb, use_count
from .config import load_settings
from .difficulty import LEVELS, difficulty_for_level
from .errors import GridGameError
from .landing import LandingSignal
from .messages import Language, Messages, detect_language, parse_language
from .render import render_board, render_legend
from .session import MAX_PLAYERS, Mode, Session, menu_range
from .validation import (
    bounded_int,
    is_cheat,
    is_int,
    is_name_invalid,
    is_name_taken,
    is_yes_no,
    parse_move,
    validate_move,
)

logger = logging.getLogger(__name__)

_LANDING_MESSAGES = {
    LandingSignal.ENEMY_HIT: 'enemy_met',
    LandingSignal.HEALTH_FOUND: 'potion_found',
    LandingSignal.BOMB_FOUND: 'bomb_found',
}


class Console:
    """Line-oriented terminal I/O; tests swap in scripted input and a StringIO."""

    def __init__(self, input_fn: Callable[[], str] = input, out: Optional[TextIO] = None) -> None:
        self._input = input_fn
        self._out = out if out is not None else sys.stdout

    def write(self, text: str = '') -> None:
        print(text, file=self._out)

    def show(self, text: str) -> None:
        """Writes without a trailing newline, for prompts answered on the same line."""
        self._out.write(text)
        self._out.flush()

    def prompt(self, text: str) -> str:
        self.show(text)
        return self._input().strip()


def read_int_in_range(console: Console, msgs: Messages, lo: int, hi: int) -> int:
    while True:
        text = console.prompt('')
        if not is_int(text):
            console.show(msgs.get('invalid_characters'))
            continue
        value = bounded_int(text, lo, hi)
        if value is None:
            console.show(msgs.get('invalid_range', lo, hi))
            continue
        return value


def read_yes_no(console: Console, msgs: Messages) -> bool:
    while True:
        text = console.prompt('')
        if is_yes_no(text):
            return text.upper() == 'Y'
        console.show(msgs.get('invalid_YN'))


def read_names(console: Console, msgs: Messages, count: int) -> List[str]:
    names: List[str] = []
    while len(names) < count:
        name = console.prompt(msgs.get('ask_player_name', len(names) + 1))
        if is_name_invalid(name):
            console.write(msgs.get('invalid_name'))
        elif is_name_taken(name, names):
            console.write(msgs.get('name_already_taken'))
        else:
            names.append(name)
    return names


def _names_ok(names: Sequence[str]) -> bool:
    return all(
        not is_name_invalid(name) and not is_name_taken(name, names[:i])
        for i, name in enumerate(names)
    )


class TurnLoop:
    """Drives one match: whose turn it is, the menu, and the end-of-match checks."""

    def __init__(self, session: Session, console: Console, msgs: Messages, color: bool = True) -> None:
        self.session = session
        self.console = console
        self.msgs = msgs
        self.color = color

    def _toggle_cheat(self, index: int) -> None:
        on = self.session.players[index].toggle_cheat()
        self.console.write(self.msgs.get('cheat_on' if on else 'cheat_off'))

    def _show_board(self, index: int) -> None:
        self.console.write()
        self.console.write(render_board(self.session.boards[index], self.session.players[index], self.color))
        self.console.write()

    def _read_option(self, index: int) -> Optional[int]:
        """Menu choice, or None when the player typed the cheat word instead."""
        player = self.session.players[index]
        lo, hi = menu_range(player)
        self.console.write(self.msgs.get('main_menu_head', player.name))
        if player.has_count:
            self.console.write(self.msgs.get('main_menu_count'))
        self.console.write(self.msgs.get('main_menu_options'))
        if player.has_bomb:
            self.console.write(self.msgs.get('main_menu_bomb'))
        text = self.console.prompt(self.msgs.get('main_menu_foot'))
        while True:
            if is_cheat(text):
                self._toggle_cheat(index)
                return None
            if not is_int(text):
                text = self.console.prompt(self.msgs.get('invalid_characters'))
                continue
            option = bounded_int(text, lo, hi)
            if option is not None:
                return option
            text = self.console.prompt(self.msgs.get('invalid_range', lo, hi))

    def _do_move(self, index: int) -> bool:
        """Reads and plays a move. Returns False when the player typed the cheat word instead."""
        player = self.session.players[index]
        board = self.session.boards[index]
        movement_range = self.session.difficulty.movement_range
        text = self.console.prompt(self.msgs.get('movement_prompt'))
        while True:
            if is_cheat(text):
                self._toggle_cheat(index)
                return False
            error = validate_move(text, movement_range)
            if error is None:
                break
            text = self.console.prompt(self.msgs.get(f'invalid_format_{error.value}', movement_range))
        signal = move(board, player, parse_move(text, movement_range), self.session.rng)
        self._show_board(index)
        key = _LANDING_MESSAGES.get(signal)
        if key is not None:
            self.console.write(self.msgs.get(key, player.name))
        return True

    def _report_count(self, index: int) -> None:
        player = self.session.players[index]
        found = use_count(self.session.boards[index], player)
        if found > 1:
            self.console.write(self.msgs.get('enemies_left', player.name, found))
        elif found == 1:
            self.console.write(self.msgs.get('enemy_left', player.name))
        else:
            self.console.write(self.msgs.get('no_enemies_left', player.name))

    def play_turn(self, index: int) -> None:
        player = self.session.players[index]
        show_legend = False
        while True:
            self._show_board(index)
            if show_legend:
                self.console.write(render_legend(player, self.msgs, self.color))
                show_legend = False
            option = self._read_option(index)
            if option is None:
                continue
            if option == 0:
                self._report_count(index)
            elif option == 1:
                if not self._do_move(index):
                    continue
            elif option == 2:
                show_legend = True
                continue
            elif option == 3:
                destroyed = use_bomb(self.session.boards[index], player)
                self._show_board(index)
                self.console.write(self.msgs.get('bomb_used_one' if destroyed == 1 else 'bomb_used', player.name, destroyed))
            return

    def _report_health(self, index: int) -> None:
        player = self.session.players[index]
        if player.is_dead:
            self.console.write(self.msgs.get('out_of_lives', player.name))
        elif player.health > 1:
            self.console.write(self.msgs.get('lives_left', player.name, player.health))
        else:
            self.console.write(self.msgs.get('life_left', player.name))

    def _round(self) -> None:
        session = self.session
        for i, player in enumerate(session.players):
            if session.mode is Mode.MP:
                alive = session.alive_players()
                if not alive:
                    session.finish(None)
                    return
                if session.last_one_standing():
                    survivor = alive[0]
                    self.console.write(self.msgs.get('players_are_dead', session.players[survivor].name))
                    session.finish(survivor)
                    return
                if player.is_dead:
                    continue
            elif player.is_dead:
                self.console.write(self.msgs.get('player_is_dead', player.name))
                session.finish(None)
                return

            key = 'turn_begins_lives' if player.health > 1 else 'turn_begins_life'
            self.console.write(self.msgs.get(key, player.name, player.health))
            self.play_turn(i)

            if session.reached_goal(i):
                self.console.write(self.msgs.get('congratulations'))
                session.finish(i)
                return
            self._report_health(i)
            self.console.prompt(self.msgs.get('next_turn_mp' if session.mode is Mode.MP else 'next_turn_sp'))
            self.console.write()

    def run(self) -> Optional[int]:
        """Plays rounds until someone wins or everyone who matters is dead. Returns the winner index."""
        while not self.session.game_over:
            self._round()
        winner = self.session.winner
        if self.session.mode is Mode.MP and winner is not None:
            self.console.write(self.msgs.get('winner', self.session.players[winner].name))
        elif self.session.mode is Mode.SP and winner is not None:
            self.console.write(self.msgs.get('winner_sp'))
        else:
            self.console.write(self.msgs.get('game_over'))
        return winner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='GridGame: reach the goal on a wrapping board full of hidden enemies')
    parser.add_argument('--players', type=int, default=None, help=f'Number of players (1-{MAX_PLAYERS})')
    parser.add_argument('--level', type=int, choices=list(LEVELS), default=None, help='Difficulty level')
    parser.add_argument('--name', action='append', default=None, help='Player name (repeat once per player)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for reproducible boards')
    parser.add_argument('--lang', choices=['en', 'es'], default=None, help='Interface language')
    parser.add_argument('--no-color', action='store_true', help='Plain text boards without ANSI colours')
    parser.add_argument('--toroidal-goal', action='store_true',
                        help='Measure the goal distance around the wrapped edges')
    parser.add_argument('--log-level', default=None, help='Logging level (default from GRIDGAME_LOG_LEVEL or WARNING)')
    return parser


def _choose_language(args: argparse.Namespace, configured: Optional[str], console: Console) -> Language:
    if args.lang:
        return parse_language(args.lang)
    if configured:
        return parse_language(configured)
    answer = console.prompt(Messages(detect_language()).get('choose_language_prompt'))
    return Language.ES if answer.upper() == 'ES' else Language.EN


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    level_name = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    console = console or Console()
    seed = args.seed if args.seed is not None else settings.seed
    seeds = random.Random(seed)

    try:
        msgs = Messages(_choose_language(args, settings.lang, console))
        console.write(msgs.get('welcome'))
        first = True
        while True:
            if first and args.players is not None and 1 <= args.players <= MAX_PLAYERS:
                count = args.players
            else:
                console.show(msgs.get('ask_player_amount'))
                count = read_int_in_range(console, msgs, 1, MAX_PLAYERS)
            if first and args.level is not None:
                level = args.level
            else:
                console.show(msgs.get('ask_difficulty'))
                level = read_int_in_range(console, msgs, LEVELS[0], LEVELS[-1])
            if first and args.name and len(args.name) == count and _names_ok(args.name):
                names = list(args.name)
            else:
                names = read_names(console, msgs, count)
            first = False

            try:
                session = Session.start(
                    difficulty_for_level(level),
                    names,
                    seed=seeds.randrange(2 ** 32),
                    toroidal_goal=args.toroidal_goal,
                )
            except GridGameError as exc:
                logger.error('Board setup failed: %s', exc)
                console.write(msgs.get('config_error', exc))
                return 1
            TurnLoop(session, console, msgs, color=not args.no_color).run()

            console.show(msgs.get('play_again'))
            if not read_yes_no(console, msgs):
                break
        console.write(msgs.get('thanks'))
        return 0
    except (EOFError, KeyboardInterrupt):
        console.write()
        return 130
