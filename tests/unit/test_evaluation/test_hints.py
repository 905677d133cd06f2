"""
Unit tests for progressive hints.
"""

import pytest

from core.exceptions import ValidationError
from evaluation.hints import reveal_letters, describe_word, hint_for_level, MAX_HINT_LEVEL


class TestRevealLetters:
    """Test cases for reveal_letters."""

    def test_partial_reveal(self):
        """Test revealing a share of the word."""
        assert reveal_letters("kat", 0.3) == "k__"
        assert reveal_letters("schmetterling", 0.3) == "sch" + "_" * 10
        assert reveal_letters("schmetterling", 0.8) == "schmetterl___"

    def test_full_reveal(self):
        """Test that fraction 1 shows the whole word."""
        assert reveal_letters("kat", 1.0) == "kat"

    def test_at_least_one_letter(self):
        """Test that short words still show their first letter."""
        assert reveal_letters("a", 0.1) == "a"
        assert reveal_letters("ab", 0.1) == "a_"

    def test_length_preserved(self):
        """Test that masking is one-for-one."""
        for word in ["kat", "vogel", "Vater"]:
            assert len(reveal_letters(word, 0.5)) == len(word)

    def test_custom_mask(self):
        """Test a custom mask character."""
        assert reveal_letters("vogel", 0.3, mask_char="*") == "v****"

    def test_empty_word(self):
        """Test that an empty word reveals nothing."""
        assert reveal_letters("", 0.5) == ""

    @pytest.mark.parametrize("fraction", [0, -0.5, 1.5])
    def test_invalid_fraction(self, fraction):
        """Test that fractions outside (0, 1] are rejected."""
        with pytest.raises(ValidationError):
            reveal_letters("kat", fraction)


class TestHintForLevel:
    """Test cases for hint_for_level."""

    def test_no_hint_at_level_zero(self):
        """Test that level 0 gives no hint."""
        assert hint_for_level("vogel", 0) is None

    def test_levels(self):
        """Test each hint level."""
        assert hint_for_level("vogel", 1) == "starts with v (5 letters)"
        assert hint_for_level("vogel", 2) == "v____"
        assert hint_for_level("vogel", 3) == "voge_"

    def test_capped_level(self):
        """Test that levels above the maximum repeat the last hint."""
        assert hint_for_level("vogel", MAX_HINT_LEVEL + 2) == hint_for_level("vogel", MAX_HINT_LEVEL)

    def test_describe_single_letter(self):
        """Test singular wording."""
        assert describe_word("a") == "starts with a (1 letter)"
