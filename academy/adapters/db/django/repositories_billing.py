"""
패키지 / 멤버십 / 할인 규칙 Repository: Django ORM 구현
(메서드 내부에서만 apps.domains.packages / apps.domains.discounts import)
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from academy.adapters.db.django.db_errors import translate_db_errors
from academy.domain.billing.entities import (
    DISCOUNTABLE_MEMBER_STATUSES,
    DiscountRuleSpec,
    DiscountType,
    GroupStatus,
    OrganizationSnapshot,
    OrganizationStatus,
    Package,
    PackagePricing,
    StudyGroupSnapshot,
)


def _pk(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# ------------------------------------------------------------
# Package
# ------------------------------------------------------------

def _package_to_entity(m) -> Optional[Package]:
    if m is None:
        return None
    return Package(
        id=str(m.id),
        name=m.name,
        pricing=PackagePricing(
            price=float(m.price),
            original_price=m.original_price,
            discount_percentage=m.discount_percentage,
            min_floor_price=m.min_floor_price,
            max_additional_discount=m.max_additional_discount,
            eligibility_discount_enabled=bool(m.eligibility_discount_enabled),
        ),
    )


class DjangoPackageRepository:

    @translate_db_errors("packages.get")
    def get(self, package_id: str) -> Optional[Package]:
        from apps.domains.packages.models import Package as PackageModel
        pk = _pk(package_id)
        if pk is None:
            return None
        return _package_to_entity(PackageModel.objects.filter(id=pk).first())

    @translate_db_errors("packages.save")
    def save(self, package: Package, attributes: dict[str, Any]) -> Package:
        from apps.domains.packages.models import Package as PackageModel

        attributes = dict(attributes)
        mock_test_ids = attributes.pop("mock_test_ids", None)

        if package.id is None:
            m = PackageModel(name=package.name)
        else:
            m = PackageModel.objects.get(id=_pk(package.id))
            m.name = package.name

        p = package.pricing
        m.price = p.price
        m.original_price = p.original_price
        m.discount_percentage = p.discount_percentage
        m.min_floor_price = p.min_floor_price
        m.max_additional_discount = p.max_additional_discount
        m.eligibility_discount_enabled = p.eligibility_discount_enabled
        for key, value in attributes.items():
            setattr(m, key, value)
        m.save()

        if mock_test_ids is not None:
            m.mock_tests.set([_pk(t) for t in mock_test_ids])

        return _package_to_entity(m)


# ------------------------------------------------------------
# Membership (StudyGroup / Organization)
# ------------------------------------------------------------

def _group_to_entity(m) -> Optional[StudyGroupSnapshot]:
    if m is None:
        return None
    member_ids = frozenset(str(uid) for uid in m.members.values_list("id", flat=True))
    return StudyGroupSnapshot(
        id=str(m.id),
        name=m.name,
        member_ids=member_ids,
        member_count=len(member_ids),
        is_eligible=bool(m.is_eligible),
        status=m.status,
        discount_percentage=float(m.discount_percentage or 0),
        discount_tier=m.discount_tier,
        discount_expires_at=m.discount_expires_at,
        eligibility_date=m.eligibility_date,
    )


def _organization_to_entity(m) -> Optional[OrganizationSnapshot]:
    if m is None:
        return None
    return OrganizationSnapshot(
        id=str(m.id),
        name=m.name,
        status=m.status,
        discount_percentage=float(m.discount_percentage or 0),
        tier=m.tier,
    )


class DjangoMembershipRepository:

    @translate_db_errors("memberships.get_group")
    def get_group(self, group_id: str) -> Optional[StudyGroupSnapshot]:
        from apps.domains.discounts.models import StudyGroup
        pk = _pk(group_id)
        if pk is None:
            return None
        return _group_to_entity(StudyGroup.objects.filter(id=pk).first())

    @translate_db_errors("memberships.get_group_for_user")
    def get_group_for_user(self, user_id: str, now: datetime) -> Optional[StudyGroupSnapshot]:
        """소속 active / eligible / 미만료 그룹 중 할인율이 가장 높은 그룹."""
        from django.db.models import Q
        from apps.domains.discounts.models import StudyGroup
        m = (
            StudyGroup.objects
            .filter(members__id=_pk(user_id), status=GroupStatus.ACTIVE.value, is_eligible=True)
            .filter(Q(discount_expires_at__isnull=True) | Q(discount_expires_at__gte=now))
            .order_by("-discount_percentage", "id")
            .first()
        )
        return _group_to_entity(m)

    @translate_db_errors("memberships.get_organization")
    def get_organization(self, organization_id: str) -> Optional[OrganizationSnapshot]:
        from apps.domains.discounts.models import Organization
        pk = _pk(organization_id)
        if pk is None:
            return None
        return _organization_to_entity(Organization.objects.filter(id=pk).first())

    @translate_db_errors("memberships.get_organization_for_user")
    def get_organization_for_user(
        self, user_id: str
    ) -> tuple[Optional[OrganizationSnapshot], Optional[str]]:
        """verified 기관의 할인 대상 멤버십 중 가장 최근 가입."""
        from apps.domains.discounts.models import OrganizationMember
        member = (
            OrganizationMember.objects
            .select_related("organization")
            .filter(
                user_id=_pk(user_id),
                status__in=[s.value for s in DISCOUNTABLE_MEMBER_STATUSES],
                organization__status=OrganizationStatus.VERIFIED.value,
            )
            .order_by("-joined_at", "-id")
            .first()
        )
        if member is None:
            return None, None
        return _organization_to_entity(member.organization), member.status

    @translate_db_errors("memberships.get_membership_status")
    def get_membership_status(self, user_id: str, organization_id: str) -> Optional[str]:
        from apps.domains.discounts.models import OrganizationMember
        member = (
            OrganizationMember.objects
            .filter(user_id=_pk(user_id), organization_id=_pk(organization_id))
            .order_by("-id")
            .first()
        )
        return member.status if member else None

    @translate_db_errors("memberships.save_group_eligibility")
    def save_group_eligibility(self, group: StudyGroupSnapshot) -> None:
        from apps.domains.discounts.models import StudyGroup
        StudyGroup.objects.filter(id=_pk(group.id)).update(
            is_eligible=group.is_eligible,
            eligibility_date=group.eligibility_date,
            discount_tier=group.discount_tier,
            discount_percentage=group.discount_percentage,
        )


# ------------------------------------------------------------
# DiscountRule
# ------------------------------------------------------------

def _rule_to_entity(m) -> DiscountRuleSpec:
    return DiscountRuleSpec(
        id=str(m.id),
        name=m.name,
        type=DiscountType(m.type),
        tier=m.tier,
        min_threshold=m.min_threshold,
        max_threshold=m.max_threshold,
        discount_percentage=float(m.discount_percentage),
        is_active=bool(m.is_active),
        expires_at=m.expires_at,
        priority=m.priority,
    )


class DjangoDiscountRuleRepository:

    @translate_db_errors("discount_rules.list_rules")
    def list_rules(self) -> list[DiscountRuleSpec]:
        from apps.domains.discounts.models import DiscountRule
        return [_rule_to_entity(m) for m in DiscountRule.objects.all().order_by("type", "tier")]
