"""
Unit of Work 포트: 트랜잭션 경계 (Django 미사용)
"""
from __future__ import annotations

from typing import Protocol

from academy.application.ports.repositories import (
    DiscountRuleRepository,
    MembershipRepository,
    MockTestRepository,
    PackageRepository,
    ResultRepository,
)


class UnitOfWork(Protocol):
    """트랜잭션 단위. __enter__에서 시작, __exit__에서 commit/rollback."""

    @property
    def mock_tests(self) -> MockTestRepository:
        ...

    @property
    def results(self) -> ResultRepository:
        ...

    @property
    def packages(self) -> PackageRepository:
        ...

    @property
    def memberships(self) -> MembershipRepository:
        ...

    @property
    def discount_rules(self) -> DiscountRuleRepository:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
