#!/usr/bin/env python3
"""Watch the Logic agent play Minesweeper."""
import time
import os
from typing import Optional

from src.minebot.agents import LogicAgent
from src.minebot.game import ActionFailed, BoardConfig, GameOver, Minefield


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9, mines: Optional[int] = None):
    """Run demo games with visualization."""
    config = BoardConfig.square(size, mines)
    mines = config.num_mines
    agent = LogicAgent()

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        minefield = Minefield(config)
        turn = 1

        while not minefield.is_solved():
            try:
                board = minefield.snapshot()
            except GameOver as error:
                print(f"\n*** LOST ({error}) ***")
                break

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Turn {turn} ===")
            print(f"Wins so far: {wins}\n")
            print(board.render())

            actions = agent.select_moves(board, turn)
            if not actions:
                break
            for action in actions:
                if not minefield.execute(action):
                    raise ActionFailed(action)
            print(f"\nMoves: {', '.join(str(action) for action in actions)}")

            turn += 1
            time.sleep(delay)

        if minefield.is_solved():
            wins += 1
            clear_screen()
            print(f"=== Game {game + 1}/{games} ===\n")
            print(minefield.snapshot().render())
            print(f"\n*** WIN! ***")

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between turns")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~12%% of cells)")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines)
