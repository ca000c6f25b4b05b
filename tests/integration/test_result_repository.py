"""
Tests for academy.adapters.db.django.repositories_results

Test Coverage:
- insert(): unique (student, test, attempt_number) → PersistenceConflict
- submit_test() through DjangoUnitOfWork with a stale attempt count
"""
import pytest

from academy.adapters.db.django.repositories_results import DjangoResultRepository
from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.results.submit_test import SubmitTestCommand, submit_test
from academy.domain.shared.errors import PersistenceConflict
from apps.api.common.models import AppendOnlyError
from apps.domains.results.models import MockTestResult


class StaleCountResultRepository(DjangoResultRepository):
    """두 요청이 같은 count 스냅샷(0)을 읽은 상황."""

    def count_attempts(self, student_id, test_id):
        return 0


class StaleCountUnitOfWork(DjangoUnitOfWork):

    @property
    def results(self):
        return StaleCountResultRepository()


def command(test, student, answers):
    return SubmitTestCommand(
        test_id=str(test.id),
        student_id=student.id,
        answers=answers,
        time_taken=60,
    )


@pytest.mark.django_db
class TestDjangoResultRepository:

    def test_submit_when_stored_then_result_and_answers_persisted(self, scenario_mock_test, scenario_questions, student):
        q1, q2 = scenario_questions

        outcome = submit_test(
            DjangoUnitOfWork(),
            command(scenario_mock_test, student, {str(q1.id): {"answer": "4"}, str(q2.id): {"answer": "True"}}),
        )

        row = MockTestResult.objects.get(id=int(outcome.result.id))
        assert row.score == 1
        assert row.percentage == pytest.approx(20)
        assert row.is_passed is False
        assert row.answers.count() == 2
        assert row.detailed_analysis["subjectWise"]["Math"]["correct"] == 1
        assert list(row.answers.values_list("correct_answer", flat=True)) == ["4", "False"]

    def test_submit_when_count_snapshot_stale_then_exactly_one_row(self, scenario_mock_test, student):
        first = submit_test(StaleCountUnitOfWork(), command(scenario_mock_test, student, {}))

        with pytest.raises(PersistenceConflict) as exc:
            submit_test(StaleCountUnitOfWork(), command(scenario_mock_test, student, {}))

        assert first.result.attempt_number == 1
        assert exc.value.http_status == 409
        assert MockTestResult.objects.filter(student_id=student.id, mock_test=scenario_mock_test).count() == 1

    def test_list_when_multiple_attempts_then_newest_first(self, scenario_mock_test, student):
        for _ in range(2):
            submit_test(DjangoUnitOfWork(), command(scenario_mock_test, student, {}))

        records = DjangoResultRepository().list_for_student(student.id, str(scenario_mock_test.id))

        assert [r.attempt_number for r in records] == [2, 1]
        assert all(len(r.answers) == 2 for r in records)

    def test_result_when_modified_then_append_only_error(self, scenario_mock_test, student):
        outcome = submit_test(DjangoUnitOfWork(), command(scenario_mock_test, student, {}))
        row = MockTestResult.objects.get(id=int(outcome.result.id))

        row.score = 5
        with pytest.raises(AppendOnlyError):
            row.save()
        with pytest.raises(AppendOnlyError):
            row.delete()
