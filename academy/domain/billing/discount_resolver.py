"""
DiscountResolver: 그룹/기관 자격 할인 선택 + 최종가 계산

정책 (고정):
1) package.eligibility_discount_enabled == False → 자격 할인 없음
2) group / organization 후보를 독립적으로 계산
3) 둘 다 유효하면 percentage 큰 쪽. 동률이면 group (비교식 group >= org)
   ※ 비즈니스 규칙이라기보다 비교 연산자 선택의 산물. 의도적으로 유지.
4) 캡 적용 순서 고정: min_floor_price → max_additional_discount
   (둘 중 더 빡빡한 쪽을 고르는 방식이 아님)
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from academy.domain.billing.entities import (
    DISCOUNTABLE_MEMBER_STATUSES,
    DiscountCandidate,
    DiscountType,
    OrganizationSnapshot,
    PackagePricing,
    StudyGroupSnapshot,
)
from academy.domain.billing.pricing_policy import display_price
from academy.domain.shared.result import Err, Ok, Outcome


CAPPED_BY_FLOOR = "min_floor_price"
CAPPED_BY_MAX_ADDITIONAL = "max_additional_discount"


# ------------------------------------------------------------
# 후보 계산
# ------------------------------------------------------------

def _group_as_candidate(group: StudyGroupSnapshot) -> DiscountCandidate:
    return DiscountCandidate(
        type=DiscountType.GROUP,
        percentage=float(group.discount_percentage or 0),
        source_id=str(group.id),
        source_name=group.name,
        extra={
            "member_count": group.member_count,
            "expires_at": group.discount_expires_at,
        },
    )


def group_candidate(group: Optional[StudyGroupSnapshot], now: datetime) -> Optional[DiscountCandidate]:
    if group is None or not group.is_discount_valid(now):
        return None
    return _group_as_candidate(group)


def organization_candidate(
    org: Optional[OrganizationSnapshot],
    membership_status: Optional[str],
) -> Optional[DiscountCandidate]:
    if org is None or not org.is_verified:
        return None
    if membership_status not in {s.value for s in DISCOUNTABLE_MEMBER_STATUSES}:
        return None
    return DiscountCandidate(
        type=DiscountType.ORGANIZATION,
        percentage=float(org.discount_percentage or 0),
        source_id=str(org.id),
        source_name=org.name,
        extra={"tier": org.tier},
    )


def best_candidate(
    group: Optional[DiscountCandidate],
    org: Optional[DiscountCandidate],
) -> Optional[DiscountCandidate]:
    if group and org:
        return group if group.percentage >= org.percentage else org
    return group or org


# ------------------------------------------------------------
# 가격 계산
# ------------------------------------------------------------

@dataclass(frozen=True)
class PriceQuote:
    display_price: float
    final_price: float
    discount_amount: float
    capped_by: Optional[str] = None
    capped_at: Optional[float] = None
    floor_applied: bool = False

    @property
    def effective_percentage(self) -> float:
        if not self.display_price:
            return 0.0
        return self.discount_amount / self.display_price * 100


def apply_discount(
    price: float,
    percentage: float,
    *,
    min_floor_price: Optional[float] = None,
    max_additional_discount: Optional[float] = None,
) -> PriceQuote:
    amount = price * (percentage / 100) if percentage > 0 else 0.0
    final = price - amount
    capped_by = None
    capped_at = None
    floor_applied = False

    if amount <= 0:
        return PriceQuote(display_price=price, final_price=price, discount_amount=0.0)

    if min_floor_price and final < min_floor_price:
        # 바닥가가 판매가보다 높아도 판매가 이상으로 올리지 않음
        final = min(min_floor_price, price)
        amount = price - final
        capped_by = CAPPED_BY_FLOOR
        capped_at = min_floor_price
        floor_applied = True

    if max_additional_discount:
        max_allowed = price * (max_additional_discount / 100)
        if amount > max_allowed:
            amount = max_allowed
            final = price - amount
            capped_by = CAPPED_BY_MAX_ADDITIONAL
            capped_at = max_additional_discount

    return PriceQuote(
        display_price=price,
        final_price=final,
        discount_amount=amount,
        capped_by=capped_by,
        capped_at=capped_at,
        floor_applied=floor_applied,
    )


@dataclass(frozen=True)
class DiscountQuote:
    eligible: bool
    discount: Optional[DiscountCandidate]
    price: PriceQuote
    reason: str = ""

    @property
    def final_price(self) -> float:
        return self.price.final_price

    def as_dict(self) -> dict[str, Any]:
        return {
            "eligible": self.eligible,
            "reason": self.reason,
            "discount": self.discount.as_dict() if self.discount else None,
            "display_price": self.price.display_price,
            "discount_amount": self.price.discount_amount,
            "effective_percentage": self.price.effective_percentage,
            "final_price": self.price.final_price,
            "capped_reason": self.price.capped_by,
            "capped_at": self.price.capped_at,
        }


def resolve(
    pkg: PackagePricing,
    group: Optional[DiscountCandidate],
    org: Optional[DiscountCandidate],
) -> DiscountQuote:
    price = display_price(pkg)

    if not pkg.eligibility_discount_enabled:
        return DiscountQuote(
            eligible=False,
            discount=None,
            price=PriceQuote(display_price=price, final_price=price, discount_amount=0.0),
            reason="This package does not qualify for group/organization discounts",
        )

    best = best_candidate(group, org)
    if best is None:
        return DiscountQuote(
            eligible=False,
            discount=None,
            price=PriceQuote(display_price=price, final_price=price, discount_amount=0.0),
            reason="No group or organization discounts available",
        )

    return DiscountQuote(
        eligible=True,
        discount=best,
        price=apply_discount(
            price,
            best.percentage,
            min_floor_price=pkg.min_floor_price,
            max_additional_discount=pkg.max_additional_discount,
        ),
        reason="User is eligible for discounts",
    )


# ------------------------------------------------------------
# 결제 직전 재검증 (fail closed)
# ------------------------------------------------------------

def validate_group_claim(
    user_id: str,
    group: Optional[StudyGroupSnapshot],
    now: datetime,
) -> Outcome[DiscountCandidate]:
    if group is None:
        return Err("Group not found", code="group_not_found")
    if str(user_id) not in group.member_ids:
        return Err("You are not a member of this group", code="not_group_member")
    if not group.is_eligible:
        return Err("Group does not meet minimum member requirement", code="below_minimum_members")
    if group.status != "active":
        return Err("Group is not active", code="group_not_active")
    if group.is_expired(now):
        return Err("Group discount has expired", code="group_discount_expired")

    return Ok(_group_as_candidate(group))


def validate_organization_claim(
    org: Optional[OrganizationSnapshot],
    membership_status: Optional[str],
) -> Outcome[DiscountCandidate]:
    if org is None:
        return Err("Organization not found", code="organization_not_found")
    if not org.is_verified:
        return Err("Organization is not verified", code="organization_not_verified")

    candidate = organization_candidate(org, membership_status)
    if candidate is None:
        return Err(
            "You are not a registered member of this organization",
            code="not_organization_member",
        )
    return Ok(candidate)
