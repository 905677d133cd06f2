"""
Progressive Hints

Hints for typed questions that reveal more of the book answer at each level.
"""

import math
from typing import Optional

from core.exceptions import ValidationError

MAX_HINT_LEVEL = 3


def reveal_letters(word: str, fraction: float, mask_char: str = "_") -> str:
    """
    Show the first part of ``word`` and mask the rest one-for-one.

    At least one character is shown for a non-empty word and never more
    than the whole word.

    Args:
        word: The book answer
        fraction: Share of characters to reveal, in (0, 1]
        mask_char: Character replacing each hidden character

    Raises:
        ValidationError: If ``fraction`` is outside (0, 1]
    """
    if not 0 < fraction <= 1:
        raise ValidationError("Reveal fraction must be in (0, 1]",
                              field_name="fraction", invalid_value=fraction)
    if not word:
        return ""

    count = min(len(word), max(1, math.floor(len(word) * fraction)))
    return word[:count] + mask_char * (len(word) - count)


def describe_word(word: str) -> str:
    """First-letter-and-length description used as the gentlest hint."""
    if not word:
        return "the answer is empty"
    noun = "letter" if len(word) == 1 else "letters"
    return f"starts with {word[0]} ({len(word)} {noun})"


def hint_for_level(word: str, level: int, partial_reveal: float = 0.3,
                   mostly_reveal: float = 0.8, mask_char: str = "_") -> Optional[str]:
    """Hint text for ``level`` (0 means no hint; levels above 3 are capped)."""
    if level <= 0:
        return None

    level = min(level, MAX_HINT_LEVEL)
    if level == 1:
        return describe_word(word)
    if level == 2:
        return reveal_letters(word, partial_reveal, mask_char)
    return reveal_letters(word, mostly_reveal, mask_char)
