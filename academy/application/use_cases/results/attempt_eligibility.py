"""
응시 가능 여부 조회 Use Case (부수효과 없음)
"""
from __future__ import annotations

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.exams.attempt_policy import AttemptEligibility, eligibility
from academy.domain.shared.errors import NotFoundError


def check_attempt_eligibility(uow: UnitOfWork, test_id: str, student_id: int) -> AttemptEligibility:
    with uow:
        test = uow.mock_tests.get(str(test_id))
        if test is None:
            raise NotFoundError("Mock test not found", code="test_not_found", detail={"test_id": str(test_id)})
        used = uow.results.count_attempts(int(student_id), str(test.id))
    return eligibility(used, test.number_of_attempts)
