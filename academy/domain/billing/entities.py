"""
결제/할인 도메인 엔티티: 순수 파이썬 (Django/ORM 미사용)

StudyGroup / Organization / OrganizationMember / DiscountRule 은
외부 협력자 소유이며 여기서는 읽기 전용 스냅샷으로만 다룬다.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class DiscountType(str, Enum):
    NONE = "none"
    GROUP = "group"
    ORGANIZATION = "organization"


class GroupStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"
    EXPIRED = "expired"


class OrganizationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


class MemberStatus(str, Enum):
    INVITED = "invited"
    REGISTERED = "registered"
    ACTIVE = "active"
    REMOVED = "removed"


# 할인 대상 멤버 상태
DISCOUNTABLE_MEMBER_STATUSES = (MemberStatus.REGISTERED, MemberStatus.ACTIVE)


@dataclass(frozen=True)
class PackagePricing:
    """
    패키지 가격 필드.
    price는 (패키지 자체 할인 반영 후) 현재 판매가 = display price.
    """
    price: float
    original_price: Optional[float] = None
    discount_percentage: Optional[float] = None
    min_floor_price: Optional[float] = None
    max_additional_discount: Optional[float] = None
    eligibility_discount_enabled: bool = False

    @property
    def has_discount(self) -> bool:
        return bool(self.discount_percentage and self.discount_percentage > 0)


@dataclass(frozen=True)
class StudyGroupSnapshot:
    id: str
    name: str
    member_ids: frozenset[str]
    member_count: int
    is_eligible: bool
    status: str
    discount_percentage: float
    discount_tier: Optional[int] = None
    discount_expires_at: Optional[datetime] = None
    eligibility_date: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return bool(self.discount_expires_at and self.discount_expires_at < now)

    def is_discount_valid(self, now: datetime) -> bool:
        if not self.is_eligible:
            return False
        if self.status != GroupStatus.ACTIVE.value:
            return False
        return not self.is_expired(now)


@dataclass(frozen=True)
class OrganizationSnapshot:
    id: str
    name: str
    status: str
    discount_percentage: float
    tier: Optional[int] = None

    @property
    def is_verified(self) -> bool:
        return self.status == OrganizationStatus.VERIFIED.value


@dataclass(frozen=True)
class DiscountCandidate:
    type: DiscountType
    percentage: float
    source_id: str
    source_name: str = ""
    extra: Optional[dict[str, Any]] = None

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": self.type.value,
            "discount_percentage": self.percentage,
            "source_id": self.source_id,
            "source_name": self.source_name,
        }
        out.update(self.extra or {})
        return out


@dataclass(frozen=True)
class DiscountRuleSpec:
    id: str
    name: str
    type: DiscountType
    tier: int
    min_threshold: int
    discount_percentage: float
    max_threshold: Optional[int] = None
    is_active: bool = True
    expires_at: Optional[datetime] = None
    priority: int = 0

    def is_valid(self, now: datetime) -> bool:
        if not self.is_active:
            return False
        return not (self.expires_at and self.expires_at <= now)

    def matches(self, count: int) -> bool:
        if count < self.min_threshold:
            return False
        return self.max_threshold is None or count <= self.max_threshold


@dataclass(frozen=True)
class Package:
    """패키지 (가격 외 필드는 어댑터가 그대로 통과시킨다)."""
    id: Optional[str]
    name: str
    pricing: PackagePricing
