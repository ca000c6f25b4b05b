"""
내 결과 조회 Use Case (읽기 전용)
"""
from __future__ import annotations

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.exams.entities import ResultRecord
from academy.domain.shared.errors import NotFoundError


def list_my_results(uow: UnitOfWork, test_id: str, student_id: int) -> list[ResultRecord]:
    with uow:
        test = uow.mock_tests.get(str(test_id))
        if test is None:
            raise NotFoundError("Mock test not found", code="test_not_found", detail={"test_id": str(test_id)})
        return uow.results.list_for_student(int(student_id), str(test.id))
