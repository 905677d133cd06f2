"""
Quiz Session

Mutable progress record for one pass through a quiz: current question,
score, hint level and the feedback for the last answer.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from core.exceptions import QuizStateError, ValidationError
from evaluation.hints import MAX_HINT_LEVEL, hint_for_level
from evaluation.matcher import AnswerMatcher, MatchKind, round_half_up
from evaluation.normalizer import normalize
from utils.logging import get_quiz_logger
from .builder import Question, QuestionMode
from .models import WordList


class FeedbackKind(str, Enum):
    """Outcome shown after an answer."""
    CORRECT = "correct"
    ALMOST = "almost"
    WRONG = "wrong"


@dataclass
class Feedback:
    """Feedback for one answered question."""
    kind: FeedbackKind
    book_answer: str
    given: Optional[str] = None

    @property
    def scored(self) -> bool:
        return self.kind is not FeedbackKind.WRONG

    @property
    def message(self) -> str:
        if self.kind is FeedbackKind.CORRECT:
            return f'Correct! Book answer: "{self.book_answer}"'
        if self.kind is FeedbackKind.ALMOST:
            return f'Almost right! Your answer: "{self.given}" Book answer: "{self.book_answer}"'
        return f"Wrong. Correct answer: {self.book_answer}"


@dataclass
class QuizSummary:
    """Final result of a quiz."""
    score: int
    total: int
    percentage: int

    @property
    def tier(self) -> str:
        if self.percentage >= 80:
            return "excellent"
        if self.percentage >= 60:
            return "good"
        return "keep_practicing"


class QuizSession:
    """Walks through quiz questions and keeps score."""

    def __init__(self, word_list: WordList, questions: List[Question],
                 matcher: Optional[AnswerMatcher] = None, hint_config=None,
                 session_id: Optional[str] = None):
        """
        Initialize the session.

        Args:
            word_list: The word list the questions were built from
            questions: Ordered questions (see ``QuizBuilder.build``)
            matcher: Matcher for typed answers (default tolerances if None)
            hint_config: ``AppConfig.hints`` section (defaults if None)
            session_id: Identifier used in log records
        """
        if not questions:
            raise ValidationError("A quiz needs at least one question",
                                  field_name="questions", invalid_value=questions)

        self.word_list = word_list
        self.questions = questions
        self.matcher = matcher or AnswerMatcher()
        self.hint_config = hint_config
        self.session_id = session_id or uuid.uuid4().hex[:8]

        self.index = 0
        self.score = 0
        self.hint_level = 0
        self.feedback: Optional[Feedback] = None

        self.logger = get_quiz_logger(self.session_id)

    @property
    def finished(self) -> bool:
        return self.index >= len(self.questions)

    @property
    def current(self) -> Optional[Question]:
        if self.finished:
            return None
        return self.questions[self.index]

    @property
    def progress(self) -> int:
        """Percentage of the quiz reached, counting the current question."""
        position = min(self.index, len(self.questions) - 1) + 1
        return round_half_up(position / len(self.questions) * 100)

    def _require(self, mode: QuestionMode) -> Question:
        question = self.current
        if question is None:
            raise QuizStateError("The quiz is already finished", question_index=self.index)
        if question.mode is not mode:
            raise QuizStateError(
                f"Current question is {question.mode.value}, not {mode.value}",
                question_index=self.index
            )
        if self.feedback is not None:
            raise QuizStateError("Current question was already answered", question_index=self.index)
        return question

    def _record(self, feedback: Feedback) -> Feedback:
        if feedback.scored:
            self.score += 1
        self.feedback = feedback
        self.logger.debug(
            f"Question {self.index + 1}/{len(self.questions)}: {feedback.kind.value} "
            f"(score {self.score})",
            extra={'question_index': self.index}
        )
        return feedback

    def answer_typed(self, text: str) -> Feedback:
        """Judge a typed answer for the current question."""
        question = self._require(QuestionMode.TYPED)
        verdict = self.matcher.evaluate(
            text,
            question.references,
            question.direction.answer_language(self.word_list)
        )

        if verdict.match_kind is MatchKind.EXACT:
            kind = FeedbackKind.CORRECT
        elif verdict.accepted:
            kind = FeedbackKind.ALMOST
        else:
            kind = FeedbackKind.WRONG

        return self._record(Feedback(kind=kind, book_answer=question.book_answer, given=text))

    def choose_option(self, option: str) -> Feedback:
        """Judge a multiple-choice pick for the current question."""
        question = self._require(QuestionMode.MULTIPLE_CHOICE)
        correct = normalize(option) == normalize(question.book_answer)
        kind = FeedbackKind.CORRECT if correct else FeedbackKind.WRONG
        return self._record(Feedback(kind=kind, book_answer=question.book_answer, given=option))

    def submit_matches(self, pairing: Dict[int, int]) -> Feedback:
        """
        Judge a matching question.

        Args:
            pairing: Left item index -> index into ``question.options``

        Raises:
            QuizStateError: If not every left item is paired
        """
        question = self._require(QuestionMode.MATCHING)
        if sorted(pairing) != list(range(len(question.items))):
            raise QuizStateError(
                f"Pair all {len(question.items)} items before checking",
                question_index=self.index
            )
        for right in pairing.values():
            if not 0 <= right < len(question.options):
                raise QuizStateError(f"No option number {right + 1}", question_index=self.index)

        correct = all(
            question.options[right] == question.items[left].b[0]
            for left, right in pairing.items()
        )
        expected = ", ".join(f"{pair.a} = {pair.b[0]}" for pair in question.items)
        kind = FeedbackKind.CORRECT if correct else FeedbackKind.WRONG
        return self._record(Feedback(kind=kind, book_answer=expected))

    def request_hint(self) -> Optional[str]:
        """Raise the hint level for the current typed question and return the hint."""
        question = self._require(QuestionMode.TYPED)
        self.hint_level = min(self.hint_level + 1, MAX_HINT_LEVEL)

        if self.hint_config is None:
            return hint_for_level(question.book_answer, self.hint_level)
        return hint_for_level(
            question.book_answer,
            self.hint_level,
            partial_reveal=self.hint_config.partial_reveal,
            mostly_reveal=self.hint_config.mostly_reveal,
            mask_char=self.hint_config.mask_char,
        )

    def advance(self) -> Optional[Question]:
        """Move to the next question, resetting the hint level and feedback."""
        if self.finished:
            raise QuizStateError("The quiz is already finished", question_index=self.index)
        self.index += 1
        self.hint_level = 0
        self.feedback = None
        return self.current

    def summary(self) -> QuizSummary:
        total = len(self.questions)
        return QuizSummary(
            score=self.score,
            total=total,
            percentage=round_half_up(self.score / total * 100),
        )
