"""
시험/채점 도메인 엔티티: 순수 파이썬 (Django/ORM 미사용)

raw answer(str | list[str] | 없음)는 Answer 태그 변형으로 정규화해서 다룬다.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union


DEFAULT_CLASSIFICATION_LABEL = "General"


class QuestionType(str, Enum):
    """apps.domains.exams.models.Question.QuestionType choices와 동기화."""
    MULTIPLE_CHOICE = "multiple-choice"
    MULTIPLE_SELECT = "multiple-select"
    TRUE_FALSE = "true-false"
    TEXT = "text"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class SubmissionType(str, Enum):
    MANUAL = "manual"
    AUTO = "auto"


@dataclass(frozen=True)
class Option:
    text: str
    is_correct: bool = False


@dataclass(frozen=True)
class Question:
    """
    제출 시점의 문항 상태 스냅샷.
    marks가 None이면 시험 기본값(marks_per_question) 사용.
    """
    id: str
    text: str
    type: QuestionType
    options: tuple[Option, ...] = ()
    correct_answer: Optional[str] = None
    difficulty: Optional[str] = None
    subject: Optional[str] = None
    category: Optional[str] = None
    level: Optional[str] = None
    marks: Optional[float] = None

    def correct_values(self) -> tuple[str, ...]:
        """
        정답 값 목록.
        - multiple-select: is_correct 옵션 텍스트 전부
        - 그 외: correct_answer 우선, 없으면 첫 번째 is_correct 옵션
        """
        flagged = tuple(o.text for o in self.options if o.is_correct)
        if self.type == QuestionType.MULTIPLE_SELECT:
            return flagged
        if self.correct_answer not in (None, ""):
            return (str(self.correct_answer),)
        return flagged[:1]

    def correct_snapshot(self) -> Union[str, list[str], None]:
        """Result에 남길 정답 스냅샷 (표시용)."""
        values = self.correct_values()
        if self.type == QuestionType.MULTIPLE_SELECT:
            return list(values)
        return values[0] if values else None


@dataclass(frozen=True)
class MockTest:
    """
    시험 정의.
    numberOfQuestions/totalMarks 정합성은 생성/수정 시점에만 강제 (채점 시 재검증 없음).
    """
    id: str
    title: str
    questions: tuple[Question, ...]
    marks_per_question: float
    total_marks: float
    passing_marks: float
    negative_marking: float = 0.0
    number_of_attempts: int = 1
    number_of_questions: Optional[int] = None
    duration_minutes: Optional[int] = None

    def marks_for(self, question: Question) -> float:
        if question.marks is not None:
            return float(question.marks)
        return float(self.marks_per_question)


# ------------------------------------------------------------
# Answer 변형: Unanswered | Single | Multiple
# ------------------------------------------------------------

@dataclass(frozen=True)
class Unanswered:
    pass


@dataclass(frozen=True)
class Single:
    value: str


@dataclass(frozen=True)
class Multiple:
    values: tuple[str, ...]


Answer = Union[Unanswered, Single, Multiple]

UNANSWERED = Unanswered()


def parse_answer(raw: Any) -> Answer:
    """
    raw answer 정규화. 예외를 던지지 않는다.

    - str: trim 후 비어있지 않으면 Single (값 자체는 원본 그대로 보존)
    - list/tuple: 문자열 요소만 남기고, 비어있지 않으면 Multiple
    - 그 외(None, 숫자, dict, 빈 값): Unanswered
    """
    if isinstance(raw, str):
        return Single(raw) if raw.strip() else UNANSWERED
    if isinstance(raw, (list, tuple)):
        values = tuple(v for v in raw if isinstance(v, str))
        return Multiple(values) if values else UNANSWERED
    return UNANSWERED


def answer_raw_value(answer: Answer) -> Union[str, list[str]]:
    """저장용 raw 값. 미응답은 빈 문자열."""
    if isinstance(answer, Single):
        return answer.value
    if isinstance(answer, Multiple):
        return list(answer.values)
    return ""


@dataclass(frozen=True)
class SubmittedAnswer:
    question_id: str
    answer: Answer = UNANSWERED
    time_spent: float = 0.0


@dataclass(frozen=True)
class Grade:
    is_correct: bool
    marks: float
    is_answered: bool


@dataclass(frozen=True)
class GradedAnswer:
    question_id: str
    answer: Union[str, list[str]]
    correct_answer: Union[str, list[str], None]
    is_correct: bool
    is_answered: bool
    marks: float
    time_spent: float = 0.0


@dataclass
class ResultRecord:
    """영속화 대상 Result. 생성 후 불변."""
    student_id: int
    test_id: str
    attempt_number: int
    start_time: datetime
    end_time: datetime
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
    answers: list[GradedAnswer] = field(default_factory=list)
    detailed_analysis: dict[str, Any] = field(default_factory=dict)
    package_id: Optional[str] = None
    id: Optional[str] = None
