# apps/domains/exams/models/__init__.py
from .question import Question, QuestionOption
from .mock_test import MockTest, MockTestQuestion

__all__ = [
    "Question",
    "QuestionOption",
    "MockTest",
    "MockTestQuestion",
]
