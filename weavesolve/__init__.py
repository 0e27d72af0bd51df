"""
Weavesolve: shortest word ladders by breadth-first search.

Usage:
    from weavesolve import load_dictionary, solve

    dictionary = load_dictionary()
    result = solve(dictionary, "cold", "warm")
    print(result.ladder)
"""

from .dictionary import Dictionary, Word, build, load_dictionary
from .errors import InvalidDictionary, InvalidWord, WeavesolveError
from .ladder_solver import LadderResult, LadderSolver, SolverConfig, solve

__all__ = [
    "Dictionary",
    "Word",
    "build",
    "load_dictionary",
    "LadderSolver",
    "LadderResult",
    "SolverConfig",
    "solve",
    "WeavesolveError",
    "InvalidDictionary",
    "InvalidWord",
]

__version__ = "1.0.0"
