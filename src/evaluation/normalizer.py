"""
Text Normalization

Reduces superficial typing variance (case, accents, punctuation, spacing)
before answers are compared.
"""

import re
import unicodedata

_COMBINING_MARKS = re.compile('[\u0300-\u036f]')
_APOSTROPHES = re.compile(r"['’]")
_PUNCTUATION = re.compile(r'[.,!?;:()"]')
_WHITESPACE = re.compile(r'\s+')


def strip_diacritics(text: str) -> str:
    """Decompose ``text`` and drop combining diacritical marks."""
    return _COMBINING_MARKS.sub('', unicodedata.normalize('NFD', text))


def normalize(text: str) -> str:
    """
    Normalize text for answer comparison.

    Strips diacritics, lower-cases, trims, removes apostrophes and the
    punctuation set ``. , ! ? ; : ( ) "`` and collapses whitespace runs.
    The result is stable: normalizing it again returns it unchanged.

    Args:
        text: Raw text, may be empty

    Returns:
        Normalized text
    """
    if not text:
        return ""

    text = strip_diacritics(text)
    # Lower-casing can introduce new marks (e.g. 'İ' -> 'i' + U+0307)
    text = strip_diacritics(text.lower())
    text = text.strip()
    text = _APOSTROPHES.sub('', text)
    text = _PUNCTUATION.sub('', text)
    # Removals can leave combining marks adjacent in non-canonical order
    text = strip_diacritics(text)
    text = _WHITESPACE.sub(' ', text)

    # Punctuation next to outer whitespace leaves an edge space behind
    return text.strip()
