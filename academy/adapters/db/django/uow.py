"""
Django Unit of Work: transaction.atomic 래퍼 (lazy import)
"""
from __future__ import annotations

from academy.domain.shared.errors import UpstreamFailure


class DjangoUnitOfWork:
    """Django transaction.atomic으로 트랜잭션 경계. 메서드 내부에서 Django import."""

    def __init__(self) -> None:
        self._atomic = None
        self._mock_tests = None
        self._results = None
        self._packages = None
        self._memberships = None
        self._discount_rules = None

    @property
    def mock_tests(self):
        from academy.adapters.db.django.repositories_exams import DjangoMockTestRepository
        if self._mock_tests is None:
            self._mock_tests = DjangoMockTestRepository()
        return self._mock_tests

    @property
    def results(self):
        from academy.adapters.db.django.repositories_results import DjangoResultRepository
        if self._results is None:
            self._results = DjangoResultRepository()
        return self._results

    @property
    def packages(self):
        from academy.adapters.db.django.repositories_billing import DjangoPackageRepository
        if self._packages is None:
            self._packages = DjangoPackageRepository()
        return self._packages

    @property
    def memberships(self):
        from academy.adapters.db.django.repositories_billing import DjangoMembershipRepository
        if self._memberships is None:
            self._memberships = DjangoMembershipRepository()
        return self._memberships

    @property
    def discount_rules(self):
        from academy.adapters.db.django.repositories_billing import DjangoDiscountRuleRepository
        if self._discount_rules is None:
            self._discount_rules = DjangoDiscountRuleRepository()
        return self._discount_rules

    def __enter__(self) -> DjangoUnitOfWork:
        from django.db import DatabaseError, transaction
        atomic = transaction.atomic()
        try:
            atomic.__enter__()
        except DatabaseError as e:
            raise UpstreamFailure("Database is unavailable", detail={"operation": "uow.begin"}) from e
        self._atomic = atomic
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._atomic is not None:
            self._atomic.__exit__(exc_type, exc_val, exc_tb)
            self._atomic = None

    def commit(self) -> None:
        # atomic() 블록 내에서는 명시적 commit 없음; __exit__ 시 자동
        pass

    def rollback(self) -> None:
        from django.db import transaction
        transaction.set_rollback(True)
