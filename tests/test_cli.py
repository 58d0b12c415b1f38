import io
import random
import unittest
from unittest.mock import patch

from game import Board, Language, Messages, Player, Session, Tile, difficulty_for_level
from gridgame_core import cli
from gridgame_core.cli import Console, TurnLoop


def _scripted(lines):
    it = iter(lines)

    def _read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _read


def _session(rows, players):
    boards = [Board.from_rows(rows) for _ in players]
    return Session(
        difficulty=difficulty_for_level(1),
        players=list(players),
        boards=boards,
        rng=random.Random(0),
    )


GOAL_RIGHT = [
    '..G...',
    '......',
    '......',
    '......',
    '....E.',
    '.....E',
]


def _play(session, inputs):
    out = io.StringIO()
    console = Console(input_fn=_scripted(inputs), out=out)
    winner = TurnLoop(session, console, Messages(Language.EN), color=False).run()
    return winner, out.getvalue()


class TestTurnLoop(unittest.TestCase):
    def test_given_goal_two_right_when_moving_then_player_wins(self):
        s = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0))])
        winner, out = _play(s, ['1', '2D'])
        self.assertEqual(winner, 0)
        self.assertTrue(s.game_over)
        self.assertIn('Congratulations', out)
        self.assertIn('You win!', out)

    def test_given_last_life_when_hitting_enemy_then_game_over(self):
        rows = ['.E....'] + ['......'] * 4 + ['.....G']
        s = _session(rows, [Player('ana', '1', 1, (0, 0))])
        winner, out = _play(s, ['1', '1D', ''])
        self.assertIsNone(winner)
        self.assertIn('ran into an enemy', out)
        self.assertIn('ana is out of lives.', out)
        self.assertIn('ana has died.', out)
        self.assertIn('Game over.', out)

    def test_given_cheat_and_bad_input_when_playing_then_reprompted_and_toggled(self):
        s = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0))])
        winner, out = _play(s, ['cheat', '9', 'x', '1', 'cheat', '1', '5D', '2Q', 'DD2', '2D'])
        self.assertEqual(winner, 0)
        self.assertIn(';)', out)
        self.assertIn(';(', out)
        self.assertIn('between 0 and 2', out)
        self.assertIn('Please type a number', out)
        self.assertIn('between 1 and 3', out)
        self.assertIn('W, A, S or D', out)
        self.assertIn('exactly two characters', out)
        self.assertFalse(s.players[0].cheat_mode)

    def test_given_count_used_when_next_turn_then_option_zero_gone(self):
        s = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0))])
        winner, out = _play(s, ['0', '', '0', '1', '2D'])
        self.assertEqual(winner, 0)
        self.assertIn('ana, there are 2 enemies left.', out)
        self.assertIn('between 1 and 2', out)
        self.assertEqual(s.players[0].health, 3)
        self.assertIn('ana has 3 lives left.', out)

    def test_given_bomb_held_when_using_bomb_then_nearby_enemy_destroyed(self):
        rows = ['.E....', '......', '......', 'G.....', '......', '.....E']
        s = _session(rows, [Player('ana', '1', 4, (0, 0), has_bomb=True)])
        winner, out = _play(s, ['2', '3', '', '1', '3S'])
        self.assertIn('Legend:', out)
        self.assertIn('ana used the bomb and destroyed 1 enemy nearby.', out)
        self.assertFalse(s.players[0].has_bomb)
        self.assertIs(s.boards[0].at(5, 5), Tile.ENEMY)
        self.assertEqual(winner, 0)

    def test_given_two_enemies_in_blast_when_using_bomb_then_plural_message(self):
        rows = ['.E....', '.E....', '......', 'G.....', '......', '.....E']
        s = _session(rows, [Player('ana', '1', 4, (0, 0), has_bomb=True)])
        winner, out = _play(s, ['3', '', '1', '3S'])
        self.assertIn('ana used the bomb and destroyed 2 enemies nearby.', out)
        self.assertNotIn('1 enemy nearby', out)
        self.assertEqual(winner, 0)

    def test_given_huge_number_at_menu_when_playing_then_reprompted_without_crash(self):
        s = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0))])
        winner, out = _play(s, ['9' * 5000, '1', '2D'])
        self.assertEqual(winner, 0)
        self.assertIn('between 0 and 2', out)

    def test_given_other_players_dead_when_round_starts_then_survivor_wins(self):
        s = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0)), Player('bob', '2', 0, (0, 0))])
        winner, out = _play(s, [])
        self.assertEqual(winner, 0)
        self.assertIn('ana survives', out)
        self.assertIn('The winner is ana!', out)


class TestMain(unittest.TestCase):
    def test_given_flags_when_running_then_game_played_and_exit_zero(self):
        crafted = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0))])
        out = io.StringIO()
        console = Console(input_fn=_scripted(['1', '2D', 'n']), out=out)
        with patch.object(cli.Session, 'start', return_value=crafted) as start:
            code = cli.main(
                ['--players', '1', '--level', '1', '--name', 'ana', '--seed', '3', '--lang', 'en', '--no-color'],
                console=console,
            )
        self.assertEqual(code, 0)
        self.assertEqual(start.call_args[0][1], ['ana'])
        text = out.getvalue()
        self.assertIn('Welcome', text)
        self.assertIn('You win!', text)
        self.assertIn('Thanks for playing!', text)

    def test_given_toroidal_goal_flag_when_running_then_session_started_with_it(self):
        crafted = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0))])
        console = Console(input_fn=_scripted(['1', '2D', 'n']), out=io.StringIO())
        argv = ['--players', '1', '--level', '1', '--name', 'ana', '--lang', 'en', '--no-color']
        with patch.object(cli.Session, 'start', return_value=crafted) as start:
            self.assertEqual(cli.main(argv + ['--toroidal-goal'], console=console), 0)
        self.assertTrue(start.call_args[1]['toroidal_goal'])

        crafted = _session(GOAL_RIGHT, [Player('ana', '1', 4, (0, 0))])
        console = Console(input_fn=_scripted(['1', '2D', 'n']), out=io.StringIO())
        with patch.object(cli.Session, 'start', return_value=crafted) as start:
            self.assertEqual(cli.main(argv, console=console), 0)
        self.assertFalse(start.call_args[1]['toroidal_goal'])

    def test_given_huge_player_count_when_prompted_then_reprompted_without_crash(self):
        out = io.StringIO()
        console = Console(input_fn=_scripted(['9' * 5000, '1', '1', 'ana']), out=out)
        code = cli.main(['--seed', '1', '--lang', 'en', '--no-color'], console=console)
        self.assertEqual(code, 130)  # input exhausted at the first menu
        text = out.getvalue()
        self.assertIn('between 1 and 9', text)
        self.assertIn("ana's turn", text)

    def test_given_prompts_when_answering_then_spanish_game_starts(self):
        out = io.StringIO()
        console = Console(input_fn=_scripted(['es', 'x', '1', '4', '1', '', 'ana']), out=out)
        code = cli.main(['--seed', '1', '--no-color'], console=console)
        self.assertEqual(code, 130)  # input exhausted at the first menu
        text = out.getvalue()
        self.assertIn('Bienvenido', text)
        self.assertIn('Escribe un número', text)
        self.assertIn('entre 1 y 3', text)
        self.assertIn('Turno de ana', text)


if __name__ == '__main__':
    unittest.main()
