"""
Word List Models

Pydantic models for the bilingual word lists produced by photo extraction,
plus the quiz direction that decides which side is asked and which answered.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, field_validator, ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from utils.logging import get_logger

logger = get_logger(__name__)


class WordPair(BaseModel):
    """A term in language A with one or more accepted translations in language B."""

    a: str
    b: List[str]

    @field_validator('a')
    @classmethod
    def validate_term(cls, v):
        """Validate the language A term."""
        if not v or not v.strip():
            raise ValueError("Term cannot be empty")
        return v.strip()

    @field_validator('b', mode='before')
    @classmethod
    def validate_translations(cls, v):
        """Validate the translations, dropping blank synonyms."""
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError("Translations must be a list of strings")
        cleaned = [item.strip() for item in v if isinstance(item, str) and item.strip()]
        if not cleaned:
            raise ValueError("At least one translation is required")
        return cleaned


class WordList(BaseModel):
    """Two language tags and the ordered word pairs between them."""

    language_a: str
    language_b: str
    items: List[WordPair]

    @field_validator('language_a', 'language_b', mode='before')
    @classmethod
    def validate_language(cls, v):
        """Validate a two-letter language tag."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Language tag is required")
        tag = v.strip().lower()
        if len(tag) != 2 or not tag.isalpha():
            raise ValueError("Language tag must be two letters")
        return tag

    @field_validator('items')
    @classmethod
    def validate_items(cls, v):
        """Validate that the list holds at least one pair."""
        if not v:
            raise ValueError("Word list must contain at least one item")
        return v

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "WordList":
        """
        Build a word list from the extraction wire format.

        Args:
            payload: ``{"languages": {"a": .., "b": ..}, "items": [{"a": .., "b": [..]}]}``

        Returns:
            Validated WordList

        Raises:
            ValidationError: If the payload is malformed
        """
        if not isinstance(payload, dict):
            raise ValidationError("Word list payload must be an object",
                                  field_name="payload", invalid_value=type(payload).__name__)

        languages = payload.get('languages') or {}
        if not isinstance(languages, dict):
            raise ValidationError("'languages' must be an object",
                                  field_name="languages", invalid_value=languages)

        try:
            return cls(
                language_a=languages.get('a'),
                language_b=languages.get('b'),
                items=payload.get('items') or [],
            )
        except PydanticValidationError as e:
            first = e.errors()[0]
            field_name = ".".join(str(part) for part in first['loc'])
            logger.debug(f"Rejected word list payload: {e}")
            raise ValidationError(
                f"Invalid word list: {field_name}: {first['msg']}",
                field_name=field_name,
                invalid_value=first.get('input'),
                error_count=e.error_count()
            )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize back to the extraction wire format."""
        return {
            'languages': {'a': self.language_a, 'b': self.language_b},
            'items': [{'a': item.a, 'b': list(item.b)} for item in self.items],
        }


class Direction(str, Enum):
    """Which side of a word pair is shown as the prompt."""
    A_TO_B = "A_TO_B"
    B_TO_A = "B_TO_A"

    def prompt_for(self, pair: WordPair) -> str:
        return pair.a if self is Direction.A_TO_B else pair.b[0]

    def references_for(self, pair: WordPair) -> List[str]:
        return list(pair.b) if self is Direction.A_TO_B else [pair.a]

    def answer_language(self, word_list: WordList) -> str:
        return word_list.language_b if self is Direction.A_TO_B else word_list.language_a
