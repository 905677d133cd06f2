"""
Evaluation Module

Answer acceptance for typed vocabulary answers: normalization, phonetic
folding, edit distance, verdicts and progressive hints.
"""

from .normalizer import normalize
from .phonetics import fold_phonetic
from .distance import edit_distance
from .matcher import AnswerMatcher, MatchKind, MatchVerdict, evaluate
from .hints import reveal_letters, hint_for_level

__all__ = [
    "normalize",
    "fold_phonetic",
    "edit_distance",
    "AnswerMatcher",
    "MatchKind",
    "MatchVerdict",
    "evaluate",
    "reveal_letters",
    "hint_for_level",
]
