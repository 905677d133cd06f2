"""
Extraction Output Parsing

Prompt for the vision model and recovery of the word list JSON from its
free-form reply.
"""

import json
from typing import Iterable, Optional

from core.exceptions import ExtractionError
from quiz.models import WordList
from utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGES = ("nl", "en", "de", "fr", "es")


def build_extraction_prompt(languages: Optional[Iterable[str]] = None) -> str:
    """Instructions sent alongside the word list photo."""
    codes = ", ".join(languages or DEFAULT_LANGUAGES)
    return f"""You extract vocabulary lists from school textbook pages.

Step 1: determine which TWO languages appear in the photo.
Use ISO codes: {codes}.
Example: nl + de.

Step 2: extract the word pairs from the photo.

Reply with EXACT JSON and no other text.

JSON schema:
{{
  "languages": {{ "a": "nl", "b": "de" }},
  "items": [
    {{ "a": "word in language a", "b": ["translation 1", "translation 2"] }}
  ]
}}

Rules:
- "a" and "b" are the two languages on the page.
- "b" may contain several synonyms.
- If something is unreadable: skip the item.
"""


def parse_extraction_output(text: Optional[str]) -> WordList:
    """
    Recover the word list from a model reply.

    The JSON object is taken from the first ``{`` to the last ``}`` so that
    prose or code fences around it are ignored.

    Args:
        text: Raw model output

    Returns:
        Validated WordList

    Raises:
        ExtractionError: If there is no text or no parseable JSON object
        ValidationError: If the JSON does not describe a valid word list
    """
    if not text or not text.strip():
        raise ExtractionError("No text received from the vision model")

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise ExtractionError("No JSON object found in model output", raw_output=text)

    try:
        payload = json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Could not parse JSON from model output: {e}", raw_output=text)

    word_list = WordList.from_payload(payload)
    logger.info(
        f"Extracted {len(word_list.items)} word pairs "
        f"({word_list.language_a} -> {word_list.language_b})"
    )
    return word_list
