"""
Error types raised by the dictionary index and the ladder solver.
"""


class WeavesolveError(Exception):
    """Base class for all weavesolve errors."""


class InvalidDictionary(WeavesolveError, ValueError):
    """The word list is empty or holds no usable entries."""


class InvalidWord(WeavesolveError, ValueError):
    """A query word failed a length, emptiness or alphabet constraint.

    Attributes:
        word: The offending input as supplied by the caller
        reason: Which constraint was violated
    """

    def __init__(self, word, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Invalid word {word!r}: {reason}")
