"""
Word ladder solver.

Finds shortest one-letter-change ladders between two words by
breadth-first search.
"""

from .config import SolverConfig
from .graph import build_word_graph, hamming_distance, is_one_letter_apart
from .solver import LadderResult, LadderSolver, solve

__all__ = [
    "SolverConfig",
    "LadderSolver",
    "LadderResult",
    "solve",
    "build_word_graph",
    "hamming_distance",
    "is_one_letter_apart",
]
