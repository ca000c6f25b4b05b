"""
결제 직전 할인 재검증 Use Case

주문 생성 시점에 계산한 값을 신뢰하지 않는다.
호출 시점의 그룹/기관 상태를 다시 읽어 fail closed (구체적 사유와 함께 DiscountIneligible).
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.billing.discount_resolver import (
    apply_discount,
    validate_group_claim,
    validate_organization_claim,
)
from academy.domain.billing.entities import DiscountCandidate, DiscountType
from academy.domain.billing.pricing_policy import display_price, original_price
from academy.domain.shared.errors import NotFoundError, ValidationError
from academy.domain.shared.result import Err, Outcome, unwrap_or_ineligible

logger = logging.getLogger(__name__)


def validate_discount(
    uow: UnitOfWork,
    user_id: str,
    package_id: str,
    claimed_group_id: Optional[str] = None,
    claimed_organization_id: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    if not package_id:
        raise ValidationError("package_id is required")
    if now is None:
        now = datetime.now(timezone.utc)

    with uow:
        pkg = uow.packages.get(str(package_id))
        if pkg is None:
            raise NotFoundError(
                "Package not found",
                code="package_not_found",
                detail={"package_id": str(package_id)},
            )

        price = display_price(pkg.pricing)

        if not pkg.pricing.eligibility_discount_enabled:
            return {
                "valid": True,
                "discount_type": DiscountType.NONE.value,
                "final_price": price,
                "message": "No eligibility discount applied",
                "validated_at": now,
            }

        candidate = None

        if claimed_group_id:
            outcome = validate_group_claim(
                str(user_id),
                uow.memberships.get_group(str(claimed_group_id)),
                now,
            )
            candidate = _accept(outcome, user_id, package_id, price)

        # 그룹이 검증되지 않았을 때만 기관 검증
        if claimed_organization_id and candidate is None:
            org = uow.memberships.get_organization(str(claimed_organization_id))
            status = (
                uow.memberships.get_membership_status(str(user_id), str(claimed_organization_id))
                if org is not None else None
            )
            outcome = validate_organization_claim(org, status)
            candidate = _accept(outcome, user_id, package_id, price)

    percentage = candidate.percentage if candidate else 0.0
    quote = apply_discount(
        price,
        percentage,
        min_floor_price=pkg.pricing.min_floor_price,
        max_additional_discount=pkg.pricing.max_additional_discount,
    )

    return {
        "valid": True,
        "discount_type": candidate.type.value if candidate else DiscountType.NONE.value,
        "discount_percentage": percentage,
        "discount_source": candidate.as_dict() if candidate else None,
        "package_original_price": original_price(pkg.pricing),
        "package_discounted_price": price,
        "eligibility_discount_amount": quote.discount_amount,
        "final_price": quote.final_price,
        "floor_price_applied": quote.floor_applied,
        "capped_reason": quote.capped_by,
        "validated_at": now,
    }


def _accept(
    outcome: Outcome[DiscountCandidate],
    user_id: str,
    package_id: str,
    fallback_price: float,
) -> DiscountCandidate:
    if isinstance(outcome, Err):
        logger.info(
            "discount_validation_failed user_id=%s package_id=%s reason_code=%s",
            user_id,
            package_id,
            outcome.code,
        )
    return unwrap_or_ineligible(outcome, fallback_price=fallback_price)
