#!/usr/bin/env python3
"""
Minebot - Main entry point.

Usage:
    python main.py play [--preset {beginner,intermediate,expert}] [--seed N]
    python main.py evaluate [--agent {logic,random}] [--games N]
    python main.py compare [--games N]
"""
import argparse

from src.minebot.agents import LogicAgent, RandomAgent
from src.minebot.driver import DriverConfig, Evaluator, TurnDriver
from src.minebot.game import PRESETS, Minefield, MinebotError


AGENTS = {
    "logic": ("Logic", LogicAgent),
    "random": ("Random", RandomAgent),
}


def play(args: argparse.Namespace) -> None:
    """Play a single simulated game with the logic agent."""
    config = PRESETS[args.preset]
    minefield = Minefield(config, seed=args.seed)
    agent = LogicAgent(seed=args.seed)
    driver_config = DriverConfig(
        max_turns=args.max_turns,
        verbose=not args.quiet,
        output_dir=args.output,
    )

    print(
        f"Playing {args.preset} ({config.width}x{config.height}, "
        f"{config.num_mines} mines)..."
    )
    try:
        result = TurnDriver(minefield, minefield, agent, driver_config).run()
    except MinebotError as error:
        print(f"Run aborted: {error}")
        raise SystemExit(1)

    print(f"\nResult: {result.outcome.name}")
    print(f"  Turns: {result.turns}")
    print(f"  Actions: {result.actions_taken}")
    print(f"  Revealed: {minefield.revealed_count} cells")
    if result.last_board is not None:
        print("\nLast board:")
        print(result.last_board.render())


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    name, agent_class = AGENTS[args.agent]
    agent = agent_class(seed=args.seed)
    evaluator = Evaluator(PRESETS[args.preset], num_games=args.games, seed=args.seed)

    print(f"\nEvaluating {name} over {args.games} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {name}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg turns: {results['avg_turns']:.1f}")
    print(f"  Avg actions: {results['avg_actions']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")

    if args.save:
        evaluator.save_results({name: results}, args.save)
        print(f"Results saved to: {args.save}")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents."""
    agents = {
        name: agent_class(seed=args.seed)
        for name, agent_class in AGENTS.values()
    }

    evaluator = Evaluator(PRESETS[args.preset], num_games=args.games, seed=args.seed)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Turns':<12} {'Revealed':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_turns']:>10.1f} "
            f"{metrics['avg_revealed']:>10.1f}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minebot - Play Minesweeper by neighbor-count deduction"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--preset",
            choices=sorted(PRESETS),
            default="beginner",
            help="Board difficulty",
        )
        sub.add_argument(
            "--seed", type=int, default=None, help="Random seed for reproducibility"
        )

    # Play command
    play_parser = subparsers.add_parser("play", help="Play one simulated game")
    add_common(play_parser)
    play_parser.add_argument(
        "--max-turns", type=int, default=None, help="Stop after N turns"
    )
    play_parser.add_argument(
        "--output", default=None, help="Directory for per-turn board dumps"
    )
    play_parser.add_argument(
        "--quiet", action="store_true", help="Only print the final result"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    add_common(eval_parser)
    eval_parser.add_argument(
        "--agent",
        choices=sorted(AGENTS),
        default="logic",
        help="Agent to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--save", default=None, help="Write results to this JSON file"
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    add_common(compare_parser)
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )

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
