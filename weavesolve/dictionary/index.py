"""
Length-partitioned, immutable word index.
"""

import string
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Set, Tuple

from ..errors import InvalidDictionary, InvalidWord
from ..logger import logger

ASCII_LOWERCASE = string.ascii_lowercase

log = logger.bind(component="dictionary")


def normalize(raw: str) -> str:
    return raw.strip().lower()


class Word(str):
    """A lower-case word over a fixed alphabet.

    Subclasses ``str`` so equality, hashing and ordering are by exact
    character sequence and words can be used directly as set members.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, raw, alphabet: str = ASCII_LOWERCASE) -> "Word":
        """Normalize and validate raw input.

        Args:
            raw: Caller-supplied text
            alphabet: Accepted characters

        Returns:
            The validated Word

        Raises:
            InvalidWord: If the input is not an ASCII string, is empty
                after trimming, or contains characters outside the alphabet
        """
        if not isinstance(raw, str):
            raise InvalidWord(raw, f"expected a string, got {type(raw).__name__}")
        if not raw.isascii():
            raise InvalidWord(raw, "non-ASCII characters")
        text = normalize(raw)

        if not text:
            raise InvalidWord(raw, "word is empty")

        bad = sorted(set(text) - set(alphabet))
        if bad:
            raise InvalidWord(raw, f"characters outside the alphabet: {''.join(bad)}")

        return cls(text)


class Dictionary:
    """Set of words partitioned by length.

    Normally built via ``build``, which cleans raw entries. Constructing
    directly only checks that each partition holds words of its own length.
    Read-only thereafter, so it can be shared between solvers without copying.
    """

    def __init__(self, partitions: Dict[int, FrozenSet[Word]]):
        for n, words in partitions.items():
            misfits = sorted(w for w in words if len(w) != n)
            if misfits:
                raise InvalidDictionary(
                    f"Partition {n} holds words of another length: {misfits[:5]}"
                )
        self._partitions = MappingProxyType(
            {n: frozenset(Word(w) for w in words) for n, words in partitions.items()}
        )
        self._size = sum(len(words) for words in self._partitions.values())

    @property
    def lengths(self) -> Tuple[int, ...]:
        return tuple(sorted(self._partitions))

    def contains(self, word) -> bool:
        """Exact, case-normalized membership check."""
        if not isinstance(word, str) or not word.isascii():
            return False
        text = normalize(word)
        return text in self._partitions.get(len(text), ())

    def words_of_length(self, n: int) -> FrozenSet[Word]:
        return self._partitions.get(n, frozenset())

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Word]:
        for n in self.lengths:
            yield from sorted(self._partitions[n])

    def __repr__(self) -> str:
        return f"Dictionary(words={self._size}, lengths={list(self.lengths)})"


def build(words: Iterable[str], length: Optional[int] = None) -> Dictionary:
    """Build a Dictionary from raw entries.

    Entries are trimmed and lower-cased; empty entries, non-strings and
    entries with characters outside a-z are dropped. Duplicates collapse.

    Args:
        words: Raw word entries from any source
        length: If given, keep only entries of exactly this length

    Returns:
        Immutable Dictionary

    Raises:
        InvalidDictionary: If no usable entries remain
    """
    if length is not None and length <= 0:
        raise InvalidDictionary(f"length must be positive, got {length}")

    grouped: Dict[int, Set[Word]] = {}
    seen = 0
    rejected = 0

    for raw in words:
        seen += 1
        try:
            word = Word.parse(raw)
        except InvalidWord as e:
            rejected += 1
            log.debug(f"Skipping entry: {e.reason}")
            continue
        if length is not None and len(word) != length:
            continue
        grouped.setdefault(len(word), set()).add(word)

    if not grouped:
        if length is not None:
            raise InvalidDictionary(
                f"No usable words of length {length} among {seen} entries"
            )
        raise InvalidDictionary(f"No usable words among {seen} entries")

    dictionary = Dictionary({n: frozenset(ws) for n, ws in grouped.items()})
    log.info(
        f"Built dictionary: {len(dictionary)} words from {seen} entries "
        f"({rejected} malformed), lengths {list(dictionary.lengths)}"
    )
    return dictionary
