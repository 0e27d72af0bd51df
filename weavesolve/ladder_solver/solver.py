"""
Breadth-first word ladder solver.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..dictionary import Dictionary, Word
from ..errors import InvalidWord
from ..logger import logger
from .config import SolverConfig
from .graph import build_word_graph

Ladder = Tuple[Word, ...]
NeighborFn = Callable[[Word], Iterable[Word]]


@dataclass
class LadderResult:
    """Result of a ladder search. ``ladder`` is None when no ladder exists."""

    start: Word
    end: Word
    ladder: Optional[Ladder]
    nodes_explored: int
    time_taken_ms: float
    success: bool

    @property
    def steps(self) -> int:
        """Number of one-letter changes, 0 when not found."""
        return len(self.ladder) - 1 if self.ladder else 0


class LadderSolver:
    """Shortest word ladder search over the implicit one-letter-change graph.

    Interior ladder words are always dictionary members. The start and end
    words only need to pass validation, unless ``require_known_endpoints``
    is set.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self.logger = logger.bind(component="ladder_solver")

    def solve(self, dictionary: Dictionary, start: str, end: str) -> LadderResult:
        """Find a shortest ladder from start to end.

        Args:
            dictionary: Index supplying the intermediate words
            start: Start word
            end: End word

        Returns:
            LadderResult with the ladder if one exists

        Raises:
            InvalidWord: If either word fails validation, before any search
        """
        start_time = time.time()
        start_word, end_word = self._validate(dictionary, start, end)
        log = self.logger.bind(query=f"{start_word}..{end_word}")

        if start_word == end_word:
            log.debug("Start equals end, trivial ladder")
            return self._result(start_word, end_word, (start_word,), 1, start_time)

        neighbors = self._neighbor_fn(dictionary, start_word, end_word)
        max_steps = self.config.max_steps

        came_from: Dict[Word, Optional[Word]] = {start_word: None}
        queue = deque([(start_word, 0)])
        nodes_explored = 0

        while queue:
            word, depth = queue.popleft()
            nodes_explored += 1

            if max_steps is not None and depth >= max_steps:
                continue

            for candidate in neighbors(word):
                if candidate in came_from:
                    continue
                came_from[candidate] = word
                if candidate == end_word:
                    ladder = self._reconstruct(came_from, end_word)
                    log.info(f"Found {len(ladder) - 1}-step ladder")
                    return self._result(
                        start_word, end_word, ladder, nodes_explored, start_time
                    )
                queue.append((candidate, depth + 1))

        log.info(f"No ladder after exploring {nodes_explored} words")
        return self._result(start_word, end_word, None, nodes_explored, start_time)

    def _validate(
        self, dictionary: Dictionary, start: str, end: str
    ) -> Tuple[Word, Word]:
        start_word = Word.parse(start, self.config.alphabet)
        end_word = Word.parse(end, self.config.alphabet)

        if len(start_word) != len(end_word):
            raise InvalidWord(
                end,
                f"length {len(end_word)} does not match start word "
                f"{start_word!r} of length {len(start_word)}",
            )

        if self.config.require_known_endpoints:
            for raw, word in ((start, start_word), (end, end_word)):
                if not dictionary.contains(word):
                    raise InvalidWord(raw, "not in the dictionary")

        return start_word, end_word

    def _neighbor_fn(
        self, dictionary: Dictionary, start: Word, end: Word
    ) -> NeighborFn:
        partition = dictionary.words_of_length(len(start))
        alphabet = self.config.alphabet

        if self.config.neighbor_strategy == "graph":
            # Substitution can never reach words outside the alphabet
            allowed = set(alphabet)
            partition = frozenset(w for w in partition if set(w) <= allowed)
            graph = build_word_graph(partition | {start, end})
            self.logger.debug(f"Built graph over {len(graph)} words")
            return graph.__getitem__

        def substitutions(word: Word) -> Iterable[Word]:
            # Positions left to right, letters in alphabet order
            letters = list(word)
            for i, original in enumerate(word):
                for letter in alphabet:
                    if letter == original:
                        continue
                    letters[i] = letter
                    candidate = "".join(letters)
                    if candidate == end or candidate in partition:
                        yield Word(candidate)
                letters[i] = original

        return substitutions

    @staticmethod
    def _reconstruct(came_from: Dict[Word, Optional[Word]], end: Word) -> Ladder:
        path = []
        word: Optional[Word] = end
        while word is not None:
            path.append(word)
            word = came_from[word]
        return tuple(reversed(path))

    @staticmethod
    def _result(
        start: Word,
        end: Word,
        ladder: Optional[Ladder],
        nodes_explored: int,
        start_time: float,
    ) -> LadderResult:
        return LadderResult(
            start=start,
            end=end,
            ladder=ladder,
            nodes_explored=nodes_explored,
            time_taken_ms=(time.time() - start_time) * 1000,
            success=ladder is not None,
        )


def solve(
    dictionary: Dictionary,
    start: str,
    end: str,
    config: Optional[SolverConfig] = None,
) -> LadderResult:
    """Solve a single query with a throwaway solver."""
    return LadderSolver(config).solve(dictionary, start, end)
