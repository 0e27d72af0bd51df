"""
Explicit one-letter-difference graph over a set of equal-length words.
"""

from typing import Dict, Iterable, List

import numpy as np

from ..dictionary import Word

WordGraph = Dict[Word, List[Word]]

# Rows compared per block, bounds the (rows, n, length) comparison array
CHUNK_ROWS = 512


def hamming_distance(a: str, b: str) -> int:
    if len(a) != len(b):
        raise ValueError(f"Words differ in length: {a!r} ({len(a)}), {b!r} ({len(b)})")
    return sum(1 for x, y in zip(a, b) if x != y)


def is_one_letter_apart(a: str, b: str) -> bool:
    return len(a) == len(b) and hamming_distance(a, b) == 1


def encode_words(words: List[Word]) -> np.ndarray:
    """Pack equal-length words into a (n, length) uint8 array of character codes."""
    length = len(words[0])
    data = "".join(words).encode("ascii")
    return np.frombuffer(data, dtype=np.uint8).reshape(len(words), length)


def build_word_graph(words: Iterable[Word]) -> WordGraph:
    """Build the adjacency map joining words at Hamming distance 1.

    Every word gets an entry, isolated words map to an empty list.
    Neighbor lists are in lexicographic order.

    Args:
        words: Words that all share one length

    Returns:
        Mapping from each word to its neighbors

    Raises:
        ValueError: If the words do not all have the same length
    """
    nodes = sorted(set(words))
    graph: WordGraph = {word: [] for word in nodes}
    if len(nodes) < 2:
        return graph

    lengths = {len(word) for word in nodes}
    if len(lengths) != 1:
        raise ValueError(f"Words must share one length, got {sorted(lengths)}")

    codes = encode_words(nodes)
    for lo in range(0, len(nodes), CHUNK_ROWS):
        block = codes[lo : lo + CHUNK_ROWS]
        distances = (block[:, None, :] != codes[None, :, :]).sum(axis=2)
        rows, cols = np.nonzero(distances == 1)
        for row, col in zip(rows.tolist(), cols.tolist()):
            graph[nodes[lo + row]].append(nodes[col])

    return graph
