"""
Tests for solver configuration.
"""

import pytest

from weavesolve.ladder_solver import SolverConfig


class TestSolverConfig:
    def test_defaults(self):
        config = SolverConfig()
        assert config.alphabet == "abcdefghijklmnopqrstuvwxyz"
        assert config.neighbor_strategy == "substitution"
        assert config.require_known_endpoints is False
        assert config.max_steps is None

    def test_alphabet_is_sorted_and_deduplicated(self):
        assert SolverConfig(alphabet="cabba").alphabet == "abc"

    def test_invalid_values(self):
        with pytest.raises(ValueError, match="alphabet must not be empty"):
            SolverConfig(alphabet="")
        with pytest.raises(ValueError, match="lower-case"):
            SolverConfig(alphabet="ABC")
        with pytest.raises(ValueError, match="neighbor_strategy"):
            SolverConfig(neighbor_strategy="dfs")
        with pytest.raises(ValueError, match="max_steps"):
            SolverConfig(max_steps=0)
