"""
Word list loading: plain-text files and the bundled four-letter list.
"""

from pathlib import Path
from typing import List, Optional, Union

from .index import Dictionary, build

BUNDLED_WORDS_PATH = Path(__file__).parent / "data" / "words4.txt"


def load_word_file(path: Union[str, Path]) -> List[str]:
    """Read raw entries from a word file.

    Entries are whitespace separated; blank lines and lines starting
    with ``#`` are skipped. No normalization happens here, that is
    ``build``'s job.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")

    entries: List[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            entries.extend(line.split())
    return entries


def load_dictionary(
    path: Optional[Union[str, Path]] = None, length: Optional[int] = None
) -> Dictionary:
    """Build a Dictionary from a word file, or the bundled list if no path."""
    if path is None:
        path = BUNDLED_WORDS_PATH
    return build(load_word_file(path), length=length)
