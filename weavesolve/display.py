"""
Terminal rendering of ladders.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.text import Text

ARROW = " -> "
MATCH_STYLE = "green"


def render_ladder(ladder: Sequence[str], target: str) -> Text:
    """Join the ladder with arrows, highlighting letters already matching target."""
    text = Text()
    for i, word in enumerate(ladder):
        if i:
            text.append(ARROW)
        for letter, goal in zip(word, target):
            text.append(letter, style=MATCH_STYLE if letter == goal else None)
        # Letters past the end of the target are never matches
        text.append(word[len(target) :])
    return text


def print_ladder(
    ladder: Sequence[str], target: str, console: Optional[Console] = None
) -> None:
    console = console or Console()
    # One chain per line regardless of terminal width
    console.print(render_ladder(ladder, target), soft_wrap=True)
