"""
공통 fixture
"""
import pytest

from academy.domain.exams.entities import QuestionType
from tests.builders import NOW, build_question, build_test


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def scenario_test():
    """Q1 multiple-choice 2점, Q2 true-false 3점, 감점 1, 합격 3, 총점 5."""
    q1 = build_question("q1", marks=2, subject="Math", difficulty="Easy")
    q2 = build_question(
        "q2",
        qtype=QuestionType.TRUE_FALSE,
        options=(("True", True), ("False", False)),
        marks=3,
        subject="Science",
        category="Physics",
        difficulty="Hard",
    )
    return build_test([q1, q2], total_marks=5, passing_marks=3, negative_marking=1, number_of_attempts=3)
