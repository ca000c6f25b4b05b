"""
시험 제출 Use Case (ResultMaterializer): 도메인/포트만 사용 (Django 미사용)

흐름:
  시험 로딩 → 기존 attempt 수 조회 → AttemptPolicy → ScoringEngine → Result insert

❗ attempt 번호는 "count → +1" 로 계산하지만 그것만 믿지 않는다.
   동시 제출 시 같은 번호로 insert 되면 저장소 unique 위반 → PersistenceConflict.
   호출자는 재조회 후 재제출 가능 (중복/누락 attempt 번호를 조용히 만들지 않음).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.exams.attempt_policy import next_attempt
from academy.domain.exams.entities import (
    DEFAULT_CLASSIFICATION_LABEL,
    ResultRecord,
    SubmittedAnswer,
    parse_answer,
)
from academy.domain.exams.scoring import score
from academy.domain.shared.errors import (
    AttemptLimitExceeded,
    NotFoundError,
    PersistenceConflict,
    ValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitTestCommand:
    test_id: str
    student_id: int
    answers: Any
    time_taken: Any = 0
    is_auto_submit: bool = False
    package_id: Optional[str] = None


@dataclass(frozen=True)
class SubmissionOutcome:
    result: ResultRecord

    def as_dict(self) -> dict[str, Any]:
        r = self.result
        return {
            "result_id": r.id,
            "score": r.score,
            "total_marks": r.total_marks,
            "percentage": r.percentage,
            "correct_answers": r.correct_answers,
            "incorrect_answers": r.incorrect_answers,
            "unanswered_questions": r.unanswered_questions,
            "is_passed": r.is_passed,
            "attempt_number": r.attempt_number,
        }


def _parse_time(value: Any) -> float:
    try:
        return max(0.0, float(value or 0))
    except (TypeError, ValueError):
        return 0.0


def parse_submitted_answers(answers: Any) -> dict[str, SubmittedAnswer]:
    """
    answers: {question_id: {"answer": str | list[str], "time_spent": seconds}}

    - answers 자체가 객체가 아니면 ValidationError (채점 전 거부)
    - 개별 answer 값이 깨져 있으면 미응답으로 처리 (예외 없음)
    - 값만 온 경우({question_id: "A"})도 허용
    """
    if answers is None:
        return {}
    if not isinstance(answers, Mapping):
        raise ValidationError("answers must be an object keyed by question id")

    out: dict[str, SubmittedAnswer] = {}
    for qid, entry in answers.items():
        if isinstance(entry, Mapping):
            raw = entry.get("answer")
            spent = entry.get("time_spent", entry.get("timeSpent"))
        else:
            raw = entry
            spent = 0
        out[str(qid)] = SubmittedAnswer(
            question_id=str(qid),
            answer=parse_answer(raw),
            time_spent=_parse_time(spent),
        )
    return out


def _validate_command(cmd: SubmitTestCommand) -> float:
    if not str(cmd.test_id or "").strip():
        raise ValidationError("test_id is required")
    if cmd.student_id in (None, ""):
        raise ValidationError("student_id is required")
    if isinstance(cmd.time_taken, bool):
        raise ValidationError("time_taken must be a number of seconds")
    try:
        time_taken = float(cmd.time_taken or 0)
    except (TypeError, ValueError):
        raise ValidationError("time_taken must be a number of seconds")
    if time_taken < 0:
        raise ValidationError("time_taken must be >= 0")
    return time_taken


def submit_test(
    uow: UnitOfWork,
    cmd: SubmitTestCommand,
    *,
    now: Optional[datetime] = None,
    default_label: str = DEFAULT_CLASSIFICATION_LABEL,
) -> SubmissionOutcome:
    """
    성공 시 불변 Result 1건 생성.

    Raises:
      ValidationError / NotFoundError / AttemptLimitExceeded / PersistenceConflict / UpstreamFailure
    """
    time_taken = _validate_command(cmd)
    submitted = parse_submitted_answers(cmd.answers)

    if now is None:
        now = datetime.now(timezone.utc)

    with uow:
        test = uow.mock_tests.get(str(cmd.test_id))
        if test is None:
            raise NotFoundError(
                "Mock test not found",
                code="test_not_found",
                detail={"test_id": str(cmd.test_id)},
            )
        if not test.questions:
            raise NotFoundError(
                "No questions found for this test",
                code="questions_not_found",
                detail={"test_id": str(cmd.test_id)},
            )

        used = uow.results.count_attempts(int(cmd.student_id), str(test.id))
        try:
            attempt_number = next_attempt(used, test.number_of_attempts)
        except AttemptLimitExceeded:
            logger.warning(
                "attempt_limit_exceeded test_id=%s student_id=%s used=%s max=%s",
                test.id,
                cmd.student_id,
                used,
                test.number_of_attempts,
            )
            raise

        draft = score(test, submitted, time_taken, cmd.is_auto_submit, default_label=default_label)

        record = ResultRecord(
            student_id=int(cmd.student_id),
            test_id=str(test.id),
            attempt_number=attempt_number,
            start_time=now - timedelta(seconds=time_taken),
            end_time=now,
            score=draft.score,
            total_marks=draft.total_marks,
            percentage=draft.percentage,
            is_passed=draft.is_passed,
            correct_answers=draft.correct_answers,
            incorrect_answers=draft.incorrect_answers,
            unanswered_questions=draft.unanswered_questions,
            total_questions=draft.total_questions,
            time_taken=draft.time_taken,
            submission_type=draft.submission_type,
            answers=draft.answers,
            detailed_analysis=draft.detailed_analysis,
            package_id=str(cmd.package_id) if cmd.package_id else None,
        )

        try:
            saved = uow.results.insert(record)
        except PersistenceConflict:
            logger.warning(
                "result_attempt_conflict test_id=%s student_id=%s attempt=%s",
                test.id,
                cmd.student_id,
                attempt_number,
            )
            raise

    logger.info(
        "test_submitted test_id=%s student_id=%s attempt=%s score=%s raw_score=%s passed=%s",
        saved.test_id,
        saved.student_id,
        saved.attempt_number,
        saved.score,
        draft.raw_score,
        saved.is_passed,
    )
    return SubmissionOutcome(result=saved)
