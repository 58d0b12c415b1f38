import random
import unittest

from game import (
    ActionError,
    Board,
    Direction,
    LandingSignal,
    Move,
    Player,
    PlayerDeadError,
    Tile,
    count_enemies,
    move,
    use_bomb,
    use_count,
)


def _mk_board():
    return Board.from_rows([
        '..E...',
        '......',
        '...H..',
        '......',
        'E...H.',
        '....GE',
    ])


class TestBoardActions(unittest.TestCase):
    def test_given_three_enemies_when_counting_then_three_and_board_unchanged(self):
        board = _mk_board()
        before = board.snapshot()
        self.assertEqual(count_enemies(board), 3)
        self.assertEqual(count_enemies(board), 3)
        self.assertEqual(board.snapshot(), before)

    def test_given_enemy_ahead_when_moving_then_hit_and_pickups_shuffled(self):
        board = _mk_board()
        p = Player(name='ana', marker='1', health=4, position=(0, 0))
        signal = move(board, p, Move(2, Direction.RIGHT), random.Random(5))
        self.assertIs(signal, LandingSignal.ENEMY_HIT)
        self.assertEqual(p.position, (0, 2))
        self.assertEqual(p.health, 3)
        self.assertIs(board.at(0, 2), Tile.EMPTY)
        self.assertEqual(board.count(Tile.HEALTH), 2)
        self.assertNotIn((0, 2), board.cells_of(Tile.HEALTH))
        self.assertEqual(board.count(Tile.ENEMY), 2)

    def test_given_wrapped_move_onto_goal_when_moving_then_goal_reached(self):
        board = _mk_board()
        p = Player(name='ana', marker='1', health=4, position=(2, 4))
        signal = move(board, p, Move(3, Direction.DOWN), random.Random(0))
        self.assertIs(signal, LandingSignal.GOAL_REACHED)
        self.assertEqual(p.position, (5, 4))
        self.assertIs(board.at(5, 4), Tile.GOAL)

    def test_given_health_pickup_when_moving_then_one_fewer_left_after_shuffle(self):
        board = _mk_board()
        p = Player(name='ana', marker='1', health=2, position=(2, 0))
        signal = move(board, p, Move(3, Direction.RIGHT), random.Random(2))
        self.assertIs(signal, LandingSignal.HEALTH_FOUND)
        self.assertEqual(p.health, 3)
        self.assertEqual(board.count(Tile.HEALTH), 1)

    def test_given_bomb_held_when_using_bomb_then_enemies_cleared_and_bomb_spent(self):
        board = _mk_board()
        p = Player(name='ana', marker='1', health=4, position=(1, 1), has_bomb=True)
        destroyed = use_bomb(board, p)
        self.assertEqual(destroyed, 1)  # (0,2); (4,0) is three rows away
        self.assertFalse(p.has_bomb)
        with self.assertRaises(ActionError):
            use_bomb(board, p)

    def test_given_count_ability_when_used_then_costs_health_and_only_once(self):
        board = _mk_board()
        p = Player(name='ana', marker='1', health=4, position=(1, 1))
        self.assertEqual(use_count(board, p), 3)
        self.assertEqual(p.health, 3)
        self.assertFalse(p.has_count)
        with self.assertRaises(ActionError):
            use_count(board, p)
        self.assertEqual(p.health, 3)

    def test_given_dead_player_when_acting_then_player_dead_error(self):
        board = _mk_board()
        p = Player(name='ana', marker='1', health=0, position=(1, 1), has_bomb=True)
        before = list(board.grid)
        with self.assertRaises(PlayerDeadError):
            move(board, p, Move(1, Direction.UP), random.Random(0))
        with self.assertRaises(PlayerDeadError):
            use_bomb(board, p)
        with self.assertRaises(PlayerDeadError):
            use_count(board, p)
        self.assertEqual(p.position, (1, 1))
        self.assertTrue(p.has_bomb)
        self.assertEqual(board.grid, before)
        self.assertTrue(issubclass(PlayerDeadError, ActionError))


if __name__ == '__main__':
    unittest.main()
