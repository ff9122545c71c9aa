#!/usr/bin/env python3
"""Watch the probability agent play Minesweeper."""
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import Board, BoardConfig, BoardGrid
from agents import ProbabilityAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 9, mines: int = 10):
    """Run demo games with visualization."""
    config = BoardConfig(height=size, width=size, num_mines=mines)
    agent = ProbabilityAgent(size, size)

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        board = Board(config)
        grid = BoardGrid(board)
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(board.render())
        time.sleep(delay)

        step = 0
        while board.is_playing:
            move = agent.next_move(grid)
            if move is None:
                break
            step += 1
            kind = "certain" if move.forced else f"guess {move.probability:.2f}"

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {move.kind.value} ({move.row}, {move.col}) [{kind}]\n")
            print(board.render())
            time.sleep(delay)

        if board.is_won:
            wins += 1
            print(f"\n*** WIN! ***")
        else:
            print(f"\n*** LOST (hit mine) ***")

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")
    print(f"Certain moves: {agent.certain_moves} | Guesses: {agent.guesses_made}")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~15%% of cells)")
    args = parser.parse_args()

    mines = args.mines if args.mines else int(args.size * args.size * 0.15)

    demo(delay=args.delay, games=args.games, size=args.size, mines=mines)
