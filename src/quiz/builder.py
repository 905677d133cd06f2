"""
Quiz Builder

Turns a word list into an ordered quiz: a multiple-choice series, a
matching series and a typed-answer series.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from core.exceptions import ValidationError
from evaluation.matcher import round_half_up
from utils.logging import get_logger
from .models import Direction, WordList, WordPair

logger = get_logger(__name__)


class QuestionMode(str, Enum):
    """Kinds of quiz questions."""
    MULTIPLE_CHOICE = "MC"
    MATCHING = "MATCH"
    TYPED = "TYPE"


@dataclass
class Question:
    """A single quiz question."""
    mode: QuestionMode
    item: Optional[WordPair] = None
    direction: Optional[Direction] = None
    items: List[WordPair] = field(default_factory=list)
    # Multiple-choice options, or the shuffled right column of a matching question
    options: List[str] = field(default_factory=list)

    @property
    def prompt(self) -> str:
        return self.direction.prompt_for(self.item)

    @property
    def references(self) -> List[str]:
        return self.direction.references_for(self.item)

    @property
    def book_answer(self) -> str:
        return self.references[0]


class QuizBuilder:
    """Builds quiz question sequences from word lists."""

    def __init__(self,
                 multiple_choice_share: float = 0.35,
                 matching_share: float = 0.35,
                 match_group_size: int = 3,
                 distractor_count: int = 3,
                 rng: Optional[random.Random] = None):
        """
        Initialize the builder.

        Args:
            multiple_choice_share: Share of kept items asked as multiple choice
            matching_share: Share of kept items asked in matching groups
            match_group_size: Pairs per matching question
            distractor_count: Wrong options per multiple-choice question
            rng: Random source (seed it for reproducible quizzes)
        """
        self.multiple_choice_share = multiple_choice_share
        self.matching_share = matching_share
        self.match_group_size = match_group_size
        self.distractor_count = distractor_count
        self.rng = rng or random.Random()

    @classmethod
    def from_config(cls, config, rng: Optional[random.Random] = None) -> "QuizBuilder":
        """Create a builder from ``AppConfig.quiz``."""
        quiz_config = config.quiz
        if rng is None:
            rng = random.Random(quiz_config.seed)
        return cls(
            multiple_choice_share=quiz_config.multiple_choice_share,
            matching_share=quiz_config.matching_share,
            match_group_size=quiz_config.match_group_size,
            distractor_count=quiz_config.distractor_count,
            rng=rng,
        )

    def _shuffled(self, values: list) -> list:
        values = list(values)
        self.rng.shuffle(values)
        return values

    def select_items(self, word_list: WordList, scope: float) -> List[WordPair]:
        """Shuffle the word list and keep ``scope`` of it (at least one pair)."""
        if not 0 < scope <= 1:
            raise ValidationError("Scope must be in (0, 1]", field_name="scope", invalid_value=scope)

        shuffled = self._shuffled(word_list.items)
        count = max(1, round_half_up(len(shuffled) * scope))
        return shuffled[:count]

    def build(self, word_list: WordList, scope: float = 1.0) -> List[Question]:
        """
        Build the question sequence for ``word_list``.

        Args:
            word_list: Validated word list
            scope: Fraction of the list to drill

        Returns:
            Multiple-choice questions, then matching questions, then typed questions
        """
        bank = self.select_items(word_list, scope)

        mc_count = round_half_up(len(bank) * self.multiple_choice_share)
        match_count = round_half_up(len(bank) * self.matching_share)

        mc_items = bank[:mc_count]
        match_items = bank[mc_count:mc_count + match_count]
        typed_items = bank[mc_count + match_count:]

        mc_questions = []
        for i, item in enumerate(mc_items):
            direction = Direction.A_TO_B if i % 2 == 0 else Direction.B_TO_A
            question = Question(mode=QuestionMode.MULTIPLE_CHOICE, item=item, direction=direction)
            question.options = self._options_for(question, bank)
            mc_questions.append(question)

        match_questions = []
        for start in range(0, len(match_items), self.match_group_size):
            group = match_items[start:start + self.match_group_size]
            if len(group) == self.match_group_size:
                match_questions.append(Question(
                    mode=QuestionMode.MATCHING,
                    items=group,
                    options=self._shuffled([pair.b[0] for pair in group]),
                ))

        typed_questions = [
            Question(
                mode=QuestionMode.TYPED,
                item=item,
                direction=Direction.A_TO_B if i % 2 == 0 else Direction.B_TO_A,
            )
            for i, item in enumerate(typed_items)
        ]

        questions = self._shuffled(mc_questions) + match_questions + self._shuffled(typed_questions)
        logger.info(
            f"Built quiz with {len(questions)} questions from {len(bank)}/{len(word_list.items)} pairs "
            f"({len(mc_questions)} MC, {len(match_questions)} matching, {len(typed_questions)} typed)"
        )
        return questions

    def _options_for(self, question: Question, bank: List[WordPair]) -> List[str]:
        """Book answer plus distractors taken from the same side of other pairs."""
        side = question.direction
        distractors = self._shuffled([
            side.references_for(pair)[0] for pair in bank if pair is not question.item
        ])[:self.distractor_count]
        return self._shuffled([question.book_answer] + distractors)
