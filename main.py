#!/usr/bin/env python3
"""
Minesweeper probability agent - Main entry point.

Usage:
    python main.py play [--difficulty D] [--seed S] [--show-probabilities]
    python main.py evaluate [--agent {probability,random}] [--games N]
    python main.py compare [--games N]
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import Board, BoardGrid, DIFFICULTIES
from agents import ProbabilityAgent, RandomAgent, format_probabilities
from evaluation import EvaluationConfig, Evaluator, save_results


def play(args: argparse.Namespace) -> None:
    """Let the probability agent play one game on a live board."""
    config = DIFFICULTIES[args.difficulty]
    board = Board(config, seed=args.seed)
    grid = BoardGrid(board)
    agent = ProbabilityAgent.for_grid(grid, seed=args.seed)

    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    step = 0
    while board.is_playing:
        move = agent.next_move(grid)
        if move is None:
            break
        step += 1
        certainty = "certain" if move.forced else f"guess p={move.probability:.2f}"
        print(f"\nStep {step}: {move.kind.value} ({move.row}, {move.col}) [{certainty}]")
        if args.show_probabilities:
            print(format_probabilities(agent.probabilities))
            print()
        print(board.render())

    result = "WIN" if board.is_won else "LOST (hit mine)"
    print(f"\n*** {result} *** after {step} moves "
          f"({agent.certain_moves} certain, {agent.guesses_made} guesses)")


def build_agent(name: str, config, seed):
    if name == "random":
        return RandomAgent(config.height, config.width, seed=seed)
    return ProbabilityAgent(config.height, config.width, seed=seed)


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    config = DIFFICULTIES[args.difficulty]
    evaluator = Evaluator(
        config, EvaluationConfig(num_episodes=args.games, seed=args.seed)
    )
    agent = build_agent(args.agent, config, args.seed)

    print(f"Evaluating {args.agent} over {args.games} {args.difficulty} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {args.agent}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    print(f"  Avg flags: {results['avg_flags']:.1f}")
    if results["certain_moves"] or results["guesses_made"]:
        print(f"  Certain moves: {results['certain_moves']}")
        print(f"  Guesses: {results['guesses_made']}")

    if args.output:
        path = save_results(results, args.output)
        print(f"Results saved to: {path}")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents on the same boards."""
    config = DIFFICULTIES[args.difficulty]
    evaluator = Evaluator(
        config, EvaluationConfig(num_episodes=args.games, seed=args.seed)
    )
    agents = {
        "Random": build_agent("random", config, args.seed),
        "Probability": build_agent("probability", config, args.seed),
    }
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )

    if args.output:
        path = save_results(results, args.output)
        print(f"\nResults saved to: {path}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper probability agent - play and evaluate"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--difficulty",
            choices=sorted(DIFFICULTIES),
            default="beginner",
            help="Board preset",
        )
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    # Play command
    play_parser = subparsers.add_parser("play", help="Watch one game")
    add_common(play_parser)
    play_parser.add_argument(
        "--show-probabilities",
        action="store_true",
        help="Print the probability grid before each board",
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    add_common(eval_parser)
    eval_parser.add_argument(
        "--agent",
        choices=["probability", "random"],
        default="probability",
        help="Agent to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--output", default=None, help="Write JSON results")

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    add_common(compare_parser)
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )
    compare_parser.add_argument("--output", default=None, help="Write JSON results")

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "compare":
        compare(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
