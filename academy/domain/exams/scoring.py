"""
ScoringEngine: 시험 전체 채점 + 집계 + 다차원 분석

- 순회 기준은 시험의 문항 목록 (제출 목록이 아님): 누락 문항도 전부 집계
- 점수 바닥(0) 처리와 percentage 계산 순서는 기존 동작 그대로 유지
    score      = max(0, raw)
    percentage = max(0, raw / total_marks * 100)   ← floored score가 아닌 raw 기준
    is_passed  = raw >= passing_marks              ← floored score가 아닌 raw 기준
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from academy.domain.exams.entities import (
    DEFAULT_CLASSIFICATION_LABEL,
    UNANSWERED,
    GradedAnswer,
    MockTest,
    Question,
    SubmissionType,
    SubmittedAnswer,
    answer_raw_value,
)
from academy.domain.exams.grader import grade


DIMENSIONS = ("subjectWise", "difficultyWise", "categoryWise")


@dataclass
class BreakdownBucket:
    attempted: int = 0
    correct: int = 0
    total: int = 0
    percentage: float = 0.0

    def as_dict(self) -> dict:
        return {
            "attempted": self.attempted,
            "correct": self.correct,
            "total": self.total,
            "percentage": self.percentage,
        }


@dataclass
class ResultDraft:
    """ResultMaterializer가 소비하는 채점 결과 (저장 전)."""
    answers: list[GradedAnswer]
    raw_score: float
    score: float
    total_marks: float
    percentage: float
    is_passed: bool
    correct_answers: int
    incorrect_answers: int
    unanswered_questions: int
    total_questions: int
    time_taken: float
    submission_type: SubmissionType
    detailed_analysis: dict[str, dict[str, dict]] = field(default_factory=dict)


def _label(value: Optional[str], default_label: str) -> str:
    if value is None:
        return default_label
    s = str(value).strip()
    return s or default_label


def _dimension_keys(q: Question, default_label: str) -> dict[str, str]:
    return {
        "subjectWise": _label(q.subject, default_label),
        "difficultyWise": _label(q.difficulty, default_label),
        "categoryWise": _label(q.category, default_label),
    }


def score(
    test: MockTest,
    submitted_answers: Mapping[str, SubmittedAnswer],
    time_taken: float,
    is_auto_submit: bool = False,
    *,
    default_label: str = DEFAULT_CLASSIFICATION_LABEL,
) -> ResultDraft:
    """
    submitted_answers: question_id(str) -> SubmittedAnswer
    시험에 없는 question_id 제출은 무시된다.
    """
    correct_count = 0
    incorrect_count = 0
    unanswered_count = 0
    total_score = 0.0

    graded: list[GradedAnswer] = []
    breakdown: dict[str, dict[str, BreakdownBucket]] = {d: {} for d in DIMENSIONS}

    for question in test.questions:
        submitted = submitted_answers.get(str(question.id))
        answer = submitted.answer if submitted else UNANSWERED
        time_spent = float(submitted.time_spent) if submitted else 0.0

        g = grade(question, answer, test)

        if not g.is_answered:
            unanswered_count += 1
        elif g.is_correct:
            correct_count += 1
        else:
            incorrect_count += 1
        total_score += g.marks

        graded.append(
            GradedAnswer(
                question_id=str(question.id),
                answer=answer_raw_value(answer),
                correct_answer=question.correct_snapshot(),
                is_correct=g.is_correct,
                is_answered=g.is_answered,
                marks=g.marks,
                time_spent=time_spent,
            )
        )

        # 차원별 bucket fold
        for dim, key in _dimension_keys(question, default_label).items():
            bucket = breakdown[dim].setdefault(key, BreakdownBucket())
            bucket.total += 1
            if g.is_answered:
                bucket.attempted += 1
            if g.is_correct:
                bucket.correct += 1

    for buckets in breakdown.values():
        for bucket in buckets.values():
            bucket.percentage = (
                bucket.correct / bucket.attempted * 100.0 if bucket.attempted else 0.0
            )

    total_marks = float(test.total_marks or 0.0)
    raw_percentage = (total_score / total_marks * 100.0) if total_marks > 0 else 0.0

    return ResultDraft(
        answers=graded,
        raw_score=total_score,
        score=max(0.0, total_score),
        total_marks=total_marks,
        percentage=max(0.0, raw_percentage),
        is_passed=total_score >= float(test.passing_marks),
        correct_answers=correct_count,
        incorrect_answers=incorrect_count,
        unanswered_questions=unanswered_count,
        total_questions=len(test.questions),
        time_taken=float(time_taken or 0.0),
        submission_type=SubmissionType.AUTO if is_auto_submit else SubmissionType.MANUAL,
        detailed_analysis={
            dim: {k: b.as_dict() for k, b in buckets.items()}
            for dim, buckets in breakdown.items()
        },
    )
