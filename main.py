#!/usr/bin/env python3
"""
Weavesolve

Finds the shortest word ladder between two words, changing one letter
at a time and only stepping through dictionary words.
"""

import argparse
import sys

from rich.console import Console
from rich.text import Text

from weavesolve.dictionary import load_dictionary
from weavesolve.display import print_ladder
from weavesolve.errors import WeavesolveError
from weavesolve.ladder_solver import LadderSolver, SolverConfig
from weavesolve.ladder_solver.config import NEIGHBOR_STRATEGIES
from weavesolve.logger import configure_logging, logger

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest word ladder between two words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py cold warm                      # Bundled four-letter list
  python main.py cold warm --strategy graph     # Precomputed adjacency graph
  python main.py stone money --dict words.txt   # Custom word list
        """,
    )

    parser.add_argument("start", help="Starting word")
    parser.add_argument("stop", help="Ending word")
    parser.add_argument(
        "--dict",
        dest="dict_path",
        default=None,
        help="Word list file (defaults to the bundled four-letter list)",
    )
    parser.add_argument(
        "--strategy",
        choices=NEIGHBOR_STRATEGIES,
        default="substitution",
        help="How neighboring words are found",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require start and stop to be dictionary words",
    )
    parser.add_argument(
        "--max-steps", type=int, default=None, help="Give up on longer ladders"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log search progress to stderr"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    log = logger.bind(component="cli")
    console = Console()

    try:
        config = SolverConfig(
            neighbor_strategy=args.strategy,
            require_known_endpoints=args.strict,
            max_steps=args.max_steps,
        )
        dictionary = load_dictionary(args.dict_path)
        result = LadderSolver(config).solve(dictionary, args.start, args.stop)
    except (WeavesolveError, FileNotFoundError, ValueError) as e:
        log.debug(f"Query rejected: {e}")
        Console(stderr=True).print(
            Text(f"error: {e}", style="red"), soft_wrap=True
        )
        return EXIT_ERROR

    if not result.success:
        console.print(f"No ladder exists between {result.start} and {result.end}")
        return EXIT_NOT_FOUND

    print_ladder(result.ladder, result.end, console=console)
    log.debug(
        f"{result.steps} steps, {result.nodes_explored} words explored "
        f"in {result.time_taken_ms:.1f}ms"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
