"""
할인 조회 Use Case: 사용자의 그룹/기관 후보 + (패키지 있으면) 최종가 계산
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.billing.discount_resolver import (
    best_candidate,
    group_candidate,
    organization_candidate,
    resolve,
)
from academy.domain.billing.pricing_policy import display_price, original_price
from academy.domain.shared.errors import NotFoundError


def _package_discount_summary(pkg) -> dict[str, Any]:
    return {
        "original_price": original_price(pkg.pricing),
        "discount_percentage": pkg.pricing.discount_percentage or 0,
        "display_price": display_price(pkg.pricing),
    }


def check_discount(
    uow: UnitOfWork,
    user_id: str,
    package_id: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    if now is None:
        now = datetime.now(timezone.utc)

    with uow:
        pkg = None
        if package_id:
            pkg = uow.packages.get(str(package_id))
            if pkg is None:
                raise NotFoundError(
                    "Package not found",
                    code="package_not_found",
                    detail={"package_id": str(package_id)},
                )

            # 자격 할인 비활성 패키지 → 멤버십 조회 없이 종료
            if not pkg.pricing.eligibility_discount_enabled:
                quote = resolve(pkg.pricing, None, None)
                return {
                    "eligible": False,
                    "reason": quote.reason,
                    "best_discount": None,
                    "package_discount": _package_discount_summary(pkg),
                    "eligibility_discount": None,
                    "final_price": quote.final_price,
                }

        group = group_candidate(uow.memberships.get_group_for_user(str(user_id), now), now)
        org, member_status = uow.memberships.get_organization_for_user(str(user_id))
        org_c = organization_candidate(org, member_status)

    best = best_candidate(group, org_c)

    if pkg is None:
        return {
            "eligible": best is not None,
            "discounts": [c.as_dict() for c in (group, org_c) if c is not None],
            "best_discount": best.as_dict() if best else None,
            "reason": (
                "User is eligible for discounts" if best
                else "No group or organization discounts available"
            ),
        }

    quote = resolve(pkg.pricing, group, org_c)
    base = original_price(pkg.pricing)
    savings = base - quote.final_price
    total_pct = (savings / base * 100) if base else 0.0

    eligibility_discount = None
    if quote.discount is not None:
        eligibility_discount = {
            **quote.discount.as_dict(),
            "discount_amount": quote.price.discount_amount,
            "effective_percentage": quote.price.effective_percentage,
            "capped_reason": quote.price.capped_by,
            "capped_at": quote.price.capped_at,
        }

    return {
        "eligible": quote.eligible,
        "reason": quote.reason,
        "best_discount": quote.discount.as_dict() if quote.discount else None,
        "package_discount": _package_discount_summary(pkg),
        "eligibility_discount": eligibility_discount,
        "available_discounts": {
            "group": group.as_dict() if group else None,
            "organization": org_c.as_dict() if org_c else None,
        },
        "final_price": quote.final_price,
        "total_savings": savings,
        "total_discount_percentage": round(total_pct, 2),
    }
