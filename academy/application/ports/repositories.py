"""
Repository 포트: 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Optional, Protocol

from academy.domain.billing.entities import (
    DiscountRuleSpec,
    OrganizationSnapshot,
    Package,
    StudyGroupSnapshot,
)
from academy.domain.exams.entities import MockTest, ResultRecord


class MockTestRepository(Protocol):
    """시험 정의 + 문항(분류 필드 포함) 조회 / 정의 저장."""

    @abstractmethod
    def get(self, test_id: str) -> Optional[MockTest]:
        """없으면 None."""
        ...

    @abstractmethod
    def get_definition(self, test_id: str) -> Optional[dict[str, Any]]:
        """수정 merge용 원본 필드 (question_ids 포함). 없으면 None."""
        ...

    @abstractmethod
    def existing_question_ids(self, question_ids: list[str]) -> set[str]:
        ...

    @abstractmethod
    def save_definition(
        self, test_id: Optional[str], fields: dict[str, Any], question_ids: list[str]
    ) -> str:
        """
        test_id None이면 생성. 문항 연결은 question_ids 순서대로 교체.
        title unique 위반 시 PersistenceConflict.
        Returns: test id
        """
        ...


class ResultRepository(Protocol):
    """
    Result 저장. (student, test, attempt_number) unique 는 저장소가 강제.
    """

    @abstractmethod
    def count_attempts(self, student_id: int, test_id: str) -> int:
        ...

    @abstractmethod
    def insert(self, record: ResultRecord) -> ResultRecord:
        """
        insert-only. unique 위반 시 PersistenceConflict,
        저장소 장애 시 UpstreamFailure.
        Returns: id가 채워진 record.
        """
        ...

    @abstractmethod
    def list_for_student(self, student_id: int, test_id: str) -> list[ResultRecord]:
        """최신 attempt 먼저. 채점 답안 포함."""
        ...


class PackageRepository(Protocol):

    @abstractmethod
    def get(self, package_id: str) -> Optional[Package]:
        ...

    @abstractmethod
    def save(self, package: Package, attributes: dict[str, Any]) -> Package:
        """
        pricing은 이미 normalize() 된 상태로 전달된다.
        attributes: 가격 외 필드 (description, duration 등)
        """
        ...


class MembershipRepository(Protocol):
    """그룹/기관 멤버십 조회 (읽기 전용, 자격 재계산 저장만 예외)."""

    @abstractmethod
    def get_group(self, group_id: str) -> Optional[StudyGroupSnapshot]:
        ...

    @abstractmethod
    def get_group_for_user(self, user_id: str, now: datetime) -> Optional[StudyGroupSnapshot]:
        """now 기준 미만료 active / eligible 그룹 중 할인율 최고. 없으면 None."""
        ...

    @abstractmethod
    def get_organization(self, organization_id: str) -> Optional[OrganizationSnapshot]:
        ...

    @abstractmethod
    def get_organization_for_user(
        self, user_id: str
    ) -> tuple[Optional[OrganizationSnapshot], Optional[str]]:
        """
        (organization, membership_status). verified 기관의 할인 대상 멤버십만.
        소속 없으면 (None, None).
        """
        ...

    @abstractmethod
    def get_membership_status(self, user_id: str, organization_id: str) -> Optional[str]:
        ...

    @abstractmethod
    def save_group_eligibility(self, group: StudyGroupSnapshot) -> None:
        ...


class DiscountRuleRepository(Protocol):

    @abstractmethod
    def list_rules(self) -> list[DiscountRuleSpec]:
        ...
