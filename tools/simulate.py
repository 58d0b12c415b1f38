from __future__ import annotations

import argparse
import os
import random
import sys
import time
from typing import Dict, List

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import (  # type: ignore
    Direction,
    LandingSignal,
    Move,
    Session,
    Tile,
    difficulty_for_level,
    menu_range,
    move,
    use_bomb,
    use_count,
)


def check_board(session: Session, index: int, health_pickups: int) -> List[str]:
    """Invariants that must hold after every action."""
    problems: List[str] = []
    board = session.boards[index]
    player = session.players[index]
    r, c = player.position
    if not (0 <= r < board.size and 0 <= c < board.size):
        problems.append(f'player {index} off board at {player.position}')
    if board.count(Tile.GOAL) != 1:
        problems.append(f'board {index} has {board.count(Tile.GOAL)} goals')
    if board.count(Tile.HEALTH) != health_pickups:
        problems.append(f'board {index} has {board.count(Tile.HEALTH)} health pickups, expected {health_pickups}')
    return problems


def play_random_match(level: int, players: int, rng: random.Random, max_turns: int) -> Dict[str, int]:
    names = [f'p{i + 1}' for i in range(players)]
    session = Session.start(difficulty_for_level(level), names, seed=rng.randrange(2 ** 32))
    movement_range = session.difficulty.movement_range
    pickups = [board.count(Tile.HEALTH) for board in session.boards]
    stats = {'turns': 0, 'wins': 0, 'deaths': 0, 'problems': 0}

    for _ in range(max_turns):
        if session.game_over:
            break
        for i, player in enumerate(session.players):
            if player.is_dead:
                continue
            lo, hi = menu_range(player)
            option = rng.choice([o for o in range(lo, hi + 1) if o != 2])
            if option == 0:
                use_count(session.boards[i], player)
            elif option == 3:
                use_bomb(session.boards[i], player)
            else:
                mv = Move(rng.randint(1, movement_range), rng.choice(list(Direction)))
                signal = move(session.boards[i], player, mv, session.rng)
                if signal is LandingSignal.HEALTH_FOUND:
                    pickups[i] -= 1
            stats['turns'] += 1
            for problem in check_board(session, i, pickups[i]):
                print('PROBLEM:', problem)
                stats['problems'] += 1
            if session.reached_goal(i):
                session.finish(i)
                stats['wins'] += 1
                break
        if not session.alive_players():
            session.finish(None)
    stats['deaths'] = sum(1 for p in session.players if p.is_dead)
    return stats


def main() -> None:
    parser = argparse.ArgumentParser(description='Play random GridGame matches and check board invariants')
    parser.add_argument('--games', type=int, default=200)
    parser.add_argument('--level', type=int, choices=[1, 2, 3], default=1)
    parser.add_argument('--players', type=int, default=1)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--max-turns', type=int, default=500)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    totals = {'turns': 0, 'wins': 0, 'deaths': 0, 'problems': 0}
    t0 = time.time()
    for _ in range(args.games):
        stats = play_random_match(args.level, args.players, rng, args.max_turns)
        for key, value in stats.items():
            totals[key] += value
    took = int((time.time() - t0) * 1000)
    print(f"games={args.games} turns={totals['turns']} wins={totals['wins']} "
          f"deaths={totals['deaths']} problems={totals['problems']} took={took}ms")
    if totals['problems']:
        sys.exit(1)


if __name__ == '__main__':
    main()
