"""
MockTest 정의 규칙: 생성/수정 시점에만 강제 (채점 시 재검증 없음)
"""
from __future__ import annotations

from academy.domain.shared.errors import ValidationError


TOTAL_MARKS_TOLERANCE = 0.01


def validate_definition(
    *,
    number_of_questions: int,
    question_count: int,
    marks_per_question: float,
    total_marks: float,
    passing_marks: float,
    negative_marking: float = 0.0,
    number_of_attempts: int = 1,
    tolerance: float = TOTAL_MARKS_TOLERANCE,
) -> None:
    if question_count <= 0:
        raise ValidationError("At least one question must be selected")

    if question_count != number_of_questions:
        raise ValidationError(
            f"Number of selected questions ({question_count}) must match "
            f"the specified number of questions ({number_of_questions})",
            detail={"question_count": question_count, "number_of_questions": number_of_questions},
        )

    expected_total = number_of_questions * marks_per_question
    if abs(total_marks - expected_total) > tolerance:
        raise ValidationError(
            f"Total marks ({total_marks}) must equal numberOfQuestions ({number_of_questions}) "
            f"x marksPerQuestion ({marks_per_question}) = {expected_total}",
            detail={"total_marks": total_marks, "expected_total_marks": expected_total},
        )

    if passing_marks > total_marks:
        raise ValidationError(
            f"Passing marks ({passing_marks}) cannot exceed total marks ({total_marks})",
            detail={"passing_marks": passing_marks, "total_marks": total_marks},
        )

    if negative_marking < 0:
        raise ValidationError("negative_marking must be >= 0")

    if number_of_attempts < 1:
        raise ValidationError("number_of_attempts must be >= 1")
