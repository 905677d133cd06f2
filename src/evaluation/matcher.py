"""
Answer Matching System

Decides whether a free-typed answer counts as correct against one or more
reference translations, tolerating small typos and sound-alike spellings.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from core.exceptions import ValidationError
from .distance import edit_distance
from .normalizer import normalize
from .phonetics import fold_phonetic


class MatchKind(str, Enum):
    """Classification of a typed answer."""
    EXACT = "exact"
    APPROXIMATE = "approximate"
    REJECTED = "rejected"


@dataclass(frozen=True)
class MatchVerdict:
    """Result of matching a candidate answer."""
    accepted: bool
    match_kind: MatchKind


EXACT = MatchVerdict(accepted=True, match_kind=MatchKind.EXACT)
APPROXIMATE = MatchVerdict(accepted=True, match_kind=MatchKind.APPROXIMATE)
REJECTED = MatchVerdict(accepted=False, match_kind=MatchKind.REJECTED)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


class AnswerMatcher:
    """Matches typed answers against reference translations."""

    def __init__(self,
                 raw_distance_ratio: float = 0.25,
                 phonetic_distance_ratio: float = 0.3,
                 min_tolerance: int = 1):
        """
        Initialize the matcher.

        Args:
            raw_distance_ratio: Allowed edits per character of the normalized reference
            phonetic_distance_ratio: Allowed edits per character of the folded reference
            min_tolerance: Lower bound on both edit allowances
        """
        self.raw_distance_ratio = raw_distance_ratio
        self.phonetic_distance_ratio = phonetic_distance_ratio
        self.min_tolerance = min_tolerance

    @classmethod
    def from_config(cls, config) -> "AnswerMatcher":
        """Create a matcher from ``AppConfig.matching``."""
        return cls(
            raw_distance_ratio=config.matching.raw_distance_ratio,
            phonetic_distance_ratio=config.matching.phonetic_distance_ratio,
            min_tolerance=config.matching.min_tolerance,
        )

    def raw_tolerance(self, reference: str) -> int:
        return max(self.min_tolerance, round_half_up(len(reference) * self.raw_distance_ratio))

    def phonetic_tolerance(self, folded_reference: str) -> int:
        return max(self.min_tolerance,
                   round_half_up(len(folded_reference) * self.phonetic_distance_ratio))

    def evaluate(self, candidate: str, references: Sequence[str],
                 answer_language: Optional[str] = None) -> MatchVerdict:
        """
        Judge ``candidate`` against ``references``.

        References are tried in order and the first one satisfying any rule
        decides the verdict: exact after normalization, then within the raw
        edit allowance, then within the phonetic edit allowance.

        Args:
            candidate: The answer as typed
            references: Acceptable answers, in preference order
            answer_language: Language tag of the expected answer

        Returns:
            MatchVerdict

        Raises:
            ValidationError: If ``references`` is empty
        """
        if not references:
            raise ValidationError("At least one reference answer is required",
                                  field_name="references", invalid_value=references)

        user = normalize(candidate)
        folded_user = None

        for reference in references:
            expected = normalize(reference)
            if user == expected:
                return EXACT

            if edit_distance(user, expected) <= self.raw_tolerance(expected):
                return APPROXIMATE

            if folded_user is None:
                folded_user = fold_phonetic(user, answer_language)
            folded_expected = fold_phonetic(expected, answer_language)
            if edit_distance(folded_user, folded_expected) <= self.phonetic_tolerance(folded_expected):
                return APPROXIMATE

        return REJECTED


_default_matcher = AnswerMatcher()


def evaluate(candidate: str, references: Sequence[str],
             answer_language: Optional[str] = None) -> MatchVerdict:
    """Judge a typed answer with the default tolerances."""
    return _default_matcher.evaluate(candidate, references, answer_language)
