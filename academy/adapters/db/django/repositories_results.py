"""
Result Repository: Django ORM 구현

✅ insert-only
- (student_id, mock_test, attempt_number) unique_together 가 최종 방어선
- IntegrityError → PersistenceConflict (재시도 가능)
- 그 외 DatabaseError → UpstreamFailure
"""
from __future__ import annotations

import logging

from academy.adapters.db.django.db_errors import translate_db_errors
from academy.domain.exams.entities import GradedAnswer, ResultRecord, SubmissionType
from academy.domain.shared.errors import PersistenceConflict, UpstreamFailure

logger = logging.getLogger(__name__)


def _answer_to_entity(a) -> GradedAnswer:
    return GradedAnswer(
        question_id=str(a.question_id),
        answer=a.answer,
        correct_answer=a.correct_answer,
        is_correct=bool(a.is_correct),
        is_answered=bool(a.is_answered),
        marks=float(a.marks),
        time_spent=float(a.time_spent or 0),
    )


def _model_to_entity(m) -> ResultRecord:
    return ResultRecord(
        id=str(m.id),
        student_id=int(m.student_id),
        test_id=str(m.mock_test_id),
        attempt_number=int(m.attempt_number),
        start_time=m.start_time,
        end_time=m.end_time,
        score=float(m.score),
        total_marks=float(m.total_marks),
        percentage=float(m.percentage),
        is_passed=bool(m.is_passed),
        correct_answers=m.correct_answers,
        incorrect_answers=m.incorrect_answers,
        unanswered_questions=m.unanswered_questions,
        total_questions=m.total_questions,
        time_taken=float(m.time_taken),
        submission_type=SubmissionType(m.submission_type),
        answers=[_answer_to_entity(a) for a in m.answers.all()],
        detailed_analysis=m.detailed_analysis or {},
        package_id=str(m.package_id) if m.package_id else None,
    )


class DjangoResultRepository:
    """ResultRepository 구현."""

    @translate_db_errors("results.count_attempts")
    def count_attempts(self, student_id: int, test_id: str) -> int:
        from apps.domains.results.models import MockTestResult
        return MockTestResult.objects.filter(
            student_id=int(student_id),
            mock_test_id=int(test_id),
        ).count()

    def insert(self, record: ResultRecord) -> ResultRecord:
        from django.db import DatabaseError, IntegrityError, transaction
        from apps.domains.results.models import MockTestResult, MockTestResultAnswer

        try:
            # savepoint: unique 위반 시 이 블록만 롤백
            with transaction.atomic():
                m = MockTestResult.objects.create(
                    student_id=int(record.student_id),
                    mock_test_id=int(record.test_id),
                    package_id=int(record.package_id) if record.package_id else None,
                    attempt_number=record.attempt_number,
                    start_time=record.start_time,
                    end_time=record.end_time,
                    score=record.score,
                    total_marks=record.total_marks,
                    percentage=record.percentage,
                    is_passed=record.is_passed,
                    correct_answers=record.correct_answers,
                    incorrect_answers=record.incorrect_answers,
                    unanswered_questions=record.unanswered_questions,
                    total_questions=record.total_questions,
                    time_taken=record.time_taken,
                    submission_type=record.submission_type.value,
                    detailed_analysis=record.detailed_analysis,
                )
                MockTestResultAnswer.objects.bulk_create([
                    MockTestResultAnswer(
                        result=m,
                        question_id=int(a.question_id),
                        answer=a.answer,
                        correct_answer=a.correct_answer,
                        is_correct=a.is_correct,
                        is_answered=a.is_answered,
                        marks=a.marks,
                        time_spent=a.time_spent,
                    )
                    for a in record.answers
                ])
        except IntegrityError as e:
            raise PersistenceConflict(
                "Another submission took this attempt number; reload and retry",
                detail={
                    "test_id": record.test_id,
                    "attempt_number": record.attempt_number,
                },
            ) from e
        except DatabaseError as e:
            logger.exception(
                "result_insert_failed test_id=%s student_id=%s attempt=%s",
                record.test_id,
                record.student_id,
                record.attempt_number,
            )
            raise UpstreamFailure("Result storage is unavailable") from e

        record.id = str(m.id)
        return record

    @translate_db_errors("results.list_for_student")
    def list_for_student(self, student_id: int, test_id: str) -> list[ResultRecord]:
        from apps.domains.results.models import MockTestResult
        qs = (
            MockTestResult.objects
            .filter(student_id=int(student_id), mock_test_id=int(test_id))
            .prefetch_related("answers")
            .order_by("-attempt_number")
        )
        return [_model_to_entity(m) for m in qs]
