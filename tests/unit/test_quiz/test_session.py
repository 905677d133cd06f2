"""
Unit tests for QuizSession.
"""

import pytest

from core.config import HintConfig
from core.exceptions import QuizStateError, ValidationError
from quiz.builder import Question, QuestionMode
from quiz.models import Direction
from quiz.session import QuizSession, Feedback, FeedbackKind, QuizSummary


def typed(item, direction=Direction.A_TO_B):
    return Question(mode=QuestionMode.TYPED, item=item, direction=direction)


class TestTypedAnswers:
    """Test cases for typed questions."""

    @pytest.fixture(autouse=True)
    def setup_session(self, word_list):
        """Setup a session asking 'vader' then 'Hund'."""
        self.hond, self.vogel, self.vader, self.kat = word_list.items
        self.session = QuizSession(word_list, [
            typed(self.vader),
            typed(self.hond, Direction.B_TO_A),
        ], session_id="test")

    def test_correct(self):
        """Test an exact answer."""
        feedback = self.session.answer_typed("Vater")
        assert feedback.kind is FeedbackKind.CORRECT
        assert self.session.score == 1
        assert feedback.message == 'Correct! Book answer: "Vater"'

    def test_synonym_is_correct(self):
        """Test that any listed translation is accepted exactly."""
        assert self.session.answer_typed("papa").kind is FeedbackKind.CORRECT

    def test_almost(self):
        """Test that an approximate answer scores but is flagged."""
        feedback = self.session.answer_typed("fater")
        assert feedback.kind is FeedbackKind.ALMOST
        assert feedback.scored
        assert self.session.score == 1
        assert feedback.message == 'Almost right! Your answer: "fater" Book answer: "Vater"'

    def test_wrong(self):
        """Test a rejected answer."""
        feedback = self.session.answer_typed("xyz")
        assert feedback.kind is FeedbackKind.WRONG
        assert self.session.score == 0
        assert feedback.message == "Wrong. Correct answer: Vater"

    def test_reverse_direction(self):
        """Test answering in language A."""
        self.session.answer_typed("Vater")
        self.session.advance()
        assert self.session.current.prompt == "Hund"
        assert self.session.answer_typed("hond").kind is FeedbackKind.CORRECT
        assert self.session.score == 2

    def test_cannot_answer_twice(self):
        """Test that a question takes one answer."""
        self.session.answer_typed("Vater")
        with pytest.raises(QuizStateError):
            self.session.answer_typed("Vater")

    def test_wrong_mode(self):
        """Test that a typed question refuses a multiple-choice pick."""
        with pytest.raises(QuizStateError) as exc_info:
            self.session.choose_option("Vater")
        assert exc_info.value.question_index == 0


class TestHints:
    """Test cases for hints during typed questions."""

    def test_hint_levels(self, word_list):
        """Test that hints get stronger and stop at the last level."""
        session = QuizSession(word_list, [typed(word_list.items[2])])
        assert session.request_hint() == "starts with V (5 letters)"
        assert session.request_hint() == "V____"
        assert session.request_hint() == "Vate_"
        assert session.request_hint() == "Vate_"
        assert session.hint_level == 3

    def test_hint_config(self, word_list):
        """Test that configured reveal shares and mask are used."""
        session = QuizSession(word_list, [typed(word_list.items[2])],
                              hint_config=HintConfig(partial_reveal=0.5, mask_char="*"))
        session.request_hint()
        assert session.request_hint() == "Va***"

    def test_advance_resets_hints(self, word_list):
        """Test that hint level starts over on the next question."""
        session = QuizSession(word_list, [typed(word_list.items[2]), typed(word_list.items[0])])
        session.request_hint()
        session.answer_typed("Vater")
        session.advance()
        assert session.hint_level == 0
        assert session.feedback is None

    def test_no_hints_after_answer(self, word_list):
        """Test that hints are only offered before answering."""
        session = QuizSession(word_list, [typed(word_list.items[2])])
        session.answer_typed("Vater")
        with pytest.raises(QuizStateError):
            session.request_hint()


class TestMultipleChoice:
    """Test cases for multiple-choice questions."""

    def setup_question(self, word_list):
        question = Question(mode=QuestionMode.MULTIPLE_CHOICE, item=word_list.items[0],
                            direction=Direction.A_TO_B,
                            options=["Vogel", "Hund", "Katze", "Vater"])
        return QuizSession(word_list, [question])

    def test_correct_choice(self, word_list):
        """Test picking the book answer."""
        session = self.setup_question(word_list)
        assert session.choose_option("hund").kind is FeedbackKind.CORRECT
        assert session.score == 1

    def test_wrong_choice(self, word_list):
        """Test picking a distractor."""
        session = self.setup_question(word_list)
        feedback = session.choose_option("Vogel")
        assert feedback.kind is FeedbackKind.WRONG
        assert feedback.book_answer == "Hund"


class TestMatching:
    """Test cases for matching questions."""

    @pytest.fixture(autouse=True)
    def setup_session(self, word_list):
        """Setup a matching question over hond, vogel and kat."""
        hond, vogel, _, kat = word_list.items
        question = Question(mode=QuestionMode.MATCHING, items=[hond, vogel, kat],
                            options=["Katze", "Hund", "Vogel"])
        self.session = QuizSession(word_list, [question])

    def test_all_correct(self):
        """Test a fully correct pairing."""
        feedback = self.session.submit_matches({0: 1, 1: 2, 2: 0})
        assert feedback.kind is FeedbackKind.CORRECT
        assert self.session.score == 1

    def test_one_wrong(self):
        """Test that one wrong pair fails the question."""
        feedback = self.session.submit_matches({0: 0, 1: 2, 2: 1})
        assert feedback.kind is FeedbackKind.WRONG
        assert feedback.book_answer == "hond = Hund, vogel = Vogel, kat = Katze"

    def test_incomplete_pairing(self):
        """Test that every item must be paired."""
        with pytest.raises(QuizStateError):
            self.session.submit_matches({0: 1})
        assert self.session.feedback is None

    def test_option_out_of_range(self):
        """Test that option indexes are checked."""
        with pytest.raises(QuizStateError):
            self.session.submit_matches({0: 1, 1: 2, 2: 5})


class TestProgress:
    """Test cases for progress and completion."""

    def test_walk_to_end(self, word_list):
        """Test scoring and finishing a three-question quiz."""
        session = QuizSession(word_list, [typed(pair) for pair in word_list.items[:3]])
        assert session.progress == 33

        session.answer_typed("Hund")
        session.advance()
        session.answer_typed("xyz")
        session.advance()
        assert session.progress == 100
        session.answer_typed("Papa")
        assert session.advance() is None

        assert session.finished
        assert session.current is None
        assert session.progress == 100

        summary = session.summary()
        assert (summary.score, summary.total, summary.percentage) == (2, 3, 67)
        assert summary.tier == "good"

    def test_progress_clamped_at_end(self, word_list):
        """Test that progress counts the current question and stops at 100."""
        session = QuizSession(word_list, [typed(pair) for pair in word_list.items])
        percentages = []
        while not session.finished:
            percentages.append(session.progress)
            session.answer_typed("x")
            session.advance()

        assert percentages == [25, 50, 75, 100]
        assert session.index == 4
        assert session.progress == 100

    def test_advance_past_end(self, word_list):
        """Test that advancing a finished quiz is an error."""
        session = QuizSession(word_list, [typed(word_list.items[0])])
        session.advance()
        with pytest.raises(QuizStateError):
            session.advance()
        with pytest.raises(QuizStateError):
            session.answer_typed("Hund")

    def test_empty_quiz(self, word_list):
        """Test that a quiz needs questions."""
        with pytest.raises(ValidationError):
            QuizSession(word_list, [])

    @pytest.mark.parametrize("percentage,tier", [
        (100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"), (59, "keep_practicing"),
    ])
    def test_tiers(self, percentage, tier):
        """Test the end-of-quiz tiers."""
        assert QuizSummary(score=0, total=1, percentage=percentage).tier == tier

    def test_feedback_scored(self):
        """Test which feedback kinds score."""
        assert Feedback(FeedbackKind.CORRECT, "x").scored
        assert Feedback(FeedbackKind.ALMOST, "x").scored
        assert not Feedback(FeedbackKind.WRONG, "x").scored
