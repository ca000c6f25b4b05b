"""
테스트용 도메인 엔티티 빌더
"""
from datetime import datetime, timezone

from academy.domain.exams.entities import MockTest, Option, Question, QuestionType


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def build_question(
    qid="q1",
    qtype=QuestionType.MULTIPLE_CHOICE,
    options=(("A", True), ("B", False), ("C", False)),
    correct_answer=None,
    marks=None,
    subject="Math",
    category="Algebra",
    difficulty="Easy",
    level=None,
):
    return Question(
        id=qid,
        text=f"Question {qid}",
        type=qtype,
        options=tuple(Option(text=t, is_correct=c) for t, c in options),
        correct_answer=correct_answer,
        difficulty=difficulty,
        subject=subject,
        category=category,
        level=level,
        marks=marks,
    )


def build_test(
    questions,
    test_id="t1",
    marks_per_question=1.0,
    total_marks=None,
    passing_marks=1.0,
    negative_marking=0.0,
    number_of_attempts=1,
):
    questions = tuple(questions)
    if total_marks is None:
        total_marks = len(questions) * marks_per_question
    return MockTest(
        id=test_id,
        title=f"Test {test_id}",
        questions=questions,
        marks_per_question=marks_per_question,
        total_marks=total_marks,
        passing_marks=passing_marks,
        negative_marking=negative_marking,
        number_of_attempts=number_of_attempts,
        number_of_questions=len(questions),
        duration_minutes=60,
    )
