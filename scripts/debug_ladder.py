#!/usr/bin/env python3
"""
Debug script for the ladder solver - runs every neighbor strategy with
verbose logging and reports how much of the graph each one explored.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import weavesolve
sys.path.insert(0, str(Path(__file__).parent.parent))

from weavesolve.dictionary import load_dictionary
from weavesolve.display import print_ladder
from weavesolve.ladder_solver import LadderSolver, SolverConfig
from weavesolve.ladder_solver.config import NEIGHBOR_STRATEGIES
from weavesolve.logger import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Debug the word ladder solver")
    parser.add_argument("start", help="Starting word")
    parser.add_argument("stop", help="Ending word")
    parser.add_argument("--dict", dest="dict_path", default=None, help="Word list file")
    args = parser.parse_args()

    configure_logging(verbose=True)
    dictionary = load_dictionary(args.dict_path)
    print("=== Ladder Solver Debug Session ===")
    print(f"Dictionary: {dictionary!r}")
    print(f"Partition size: {len(dictionary.words_of_length(len(args.start)))}")
    print()

    for strategy in NEIGHBOR_STRATEGIES:
        solver = LadderSolver(SolverConfig(neighbor_strategy=strategy))
        result = solver.solve(dictionary, args.start, args.stop)

        print(f"--- {strategy} ---")
        if result.success:
            print_ladder(result.ladder, result.end)
        else:
            print("No ladder found")
        print(f"Steps: {result.steps}")
        print(f"Nodes explored: {result.nodes_explored}")
        print(f"Time: {result.time_taken_ms:.1f}ms")
        print()


if __name__ == "__main__":
    main()
