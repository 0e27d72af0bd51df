"""
Dictionary index for the word ladder solver.

Normalizes raw word lists into an immutable, length-partitioned index.
"""

from .index import ASCII_LOWERCASE, Dictionary, Word, build
from .loader import BUNDLED_WORDS_PATH, load_dictionary, load_word_file

__all__ = [
    "ASCII_LOWERCASE",
    "Dictionary",
    "Word",
    "build",
    "BUNDLED_WORDS_PATH",
    "load_dictionary",
    "load_word_file",
]
