"""
Quiz Module

Word list models, quiz sequence construction and session progress.
"""

from .models import WordPair, WordList, Direction
from .builder import QuizBuilder, Question, QuestionMode
from .session import QuizSession, Feedback, FeedbackKind, QuizSummary

__all__ = [
    "WordPair",
    "WordList",
    "Direction",
    "QuizBuilder",
    "Question",
    "QuestionMode",
    "QuizSession",
    "Feedback",
    "FeedbackKind",
    "QuizSummary",
]
