"""
AnswerGrader: 문항 1개 채점 (순수 함수, 부수효과 없음)

정책:
- 미응답은 항상 0점, 오답 처리하지 않음 (감점 없음)
- multiple-select: 집합 일치만 정답 (부분점수 없음, 순서 무관)
- 그 외 타입: 정답 값과 정확히 일치해야 정답
- 오답: -negative_marking
"""
from __future__ import annotations

from typing import Any

from academy.domain.exams.entities import (
    Answer,
    Grade,
    MockTest,
    Multiple,
    Question,
    QuestionType,
    Single,
    Unanswered,
    parse_answer,
)


UNANSWERED_GRADE = Grade(is_correct=False, marks=0.0, is_answered=False)


def _is_correct_multi_select(answer: Answer, correct: tuple[str, ...]) -> bool:
    if isinstance(answer, Single):
        submitted = {answer.value}
    elif isinstance(answer, Multiple):
        submitted = set(answer.values)
    else:
        return False

    expected = set(correct)
    if not expected:
        return False
    return len(submitted) == len(expected) and all(v in expected for v in submitted)


def _is_correct_single(answer: Answer, correct: tuple[str, ...]) -> bool:
    # 단일 정답 타입에 배열 제출 → 값 불일치로 오답
    if not isinstance(answer, Single) or not correct:
        return False
    return answer.value == correct[0]


def is_correct(question: Question, answer: Answer) -> bool:
    correct = question.correct_values()
    if question.type == QuestionType.MULTIPLE_SELECT:
        return _is_correct_multi_select(answer, correct)
    return _is_correct_single(answer, correct)


def grade(question: Question, raw_answer: Any, test: MockTest) -> Grade:
    """
    raw_answer는 원본 값(str | list | None) 또는 이미 정규화된 Answer.
    """
    answer = raw_answer if isinstance(raw_answer, (Unanswered, Single, Multiple)) else parse_answer(raw_answer)

    if isinstance(answer, Unanswered):
        return UNANSWERED_GRADE

    if is_correct(question, answer):
        return Grade(is_correct=True, marks=test.marks_for(question), is_answered=True)

    penalty = float(test.negative_marking or 0.0)
    return Grade(is_correct=False, marks=-penalty if penalty else 0.0, is_answered=True)
