"""
Phonetic Folding

Lossy rewriting that collapses spellings which sound alike, so that answers
which are phonetically right but orthographically off still compare close.
"""

import re
from typing import Optional

GERMAN = "de"

_GERMAN_EXPANSIONS = (
    ("ä", "ae"),
    ("ö", "oe"),
    ("ü", "ue"),
    ("ß", "ss"),
)

# Applied in order; later rules see the output of earlier ones.
_FOLDING_RULES = (
    (re.compile(r'ij|ei'), 'y'),
    (re.compile(r'ou|au'), 'w'),
    (re.compile(r'ph'), 'f'),
    (re.compile(r'v'), 'f'),
    (re.compile(r'z'), 's'),
    (re.compile(r'c'), 'k'),
    (re.compile(r'ch'), 'g'),
)

_SEPARATORS = re.compile(r'[-\s]')
_REPEATS = re.compile(r'(.)\1+')
_TRAILING_DT = re.compile(r'dt$')


def fold_phonetic(text: str, language: Optional[str] = None) -> str:
    """
    Fold an already-normalized string into its phonetic key.

    Args:
        text: Normalized text (see ``evaluation.normalizer.normalize``)
        language: Answer language tag; only ``"de"`` adds extra rules

    Returns:
        Folded string; unrelated words may collide
    """
    if language == GERMAN:
        for umlaut, expansion in _GERMAN_EXPANSIONS:
            text = text.replace(umlaut, expansion)

    text = _SEPARATORS.sub('', text)

    for pattern, replacement in _FOLDING_RULES:
        text = pattern.sub(replacement, text)

    text = _REPEATS.sub(r'\1', text)
    return _TRAILING_DT.sub('t', text)
