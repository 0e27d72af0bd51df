"""
Configuration for the ladder solver.
"""

from dataclasses import dataclass
from typing import Optional

from ..dictionary import ASCII_LOWERCASE

NEIGHBOR_STRATEGIES = ("substitution", "graph")


@dataclass
class SolverConfig:
    """
    Configuration for the ladder solver.

    Attributes:
        alphabet: Letters accepted in query words and tried during substitution
        neighbor_strategy: "substitution" generates candidates letter by letter,
            "graph" precomputes an adjacency map over the length partition
        require_known_endpoints: Reject start/end words missing from the dictionary
        max_steps: Longest ladder (in steps) to search for; None for no cap
    """

    alphabet: str = ASCII_LOWERCASE
    neighbor_strategy: str = "substitution"
    require_known_endpoints: bool = False
    max_steps: Optional[int] = None

    def __post_init__(self):
        """Validate configuration parameters."""
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")

        if not set(self.alphabet) <= set(ASCII_LOWERCASE):
            raise ValueError("alphabet must only contain lower-case ASCII letters")

        # Substitution order follows the alphabet, so keep it sorted
        self.alphabet = "".join(sorted(set(self.alphabet)))

        if self.neighbor_strategy not in NEIGHBOR_STRATEGIES:
            raise ValueError(
                f"neighbor_strategy must be one of: {', '.join(NEIGHBOR_STRATEGIES)}"
            )

        if self.max_steps is not None and self.max_steps <= 0:
            raise ValueError("max_steps must be positive")
