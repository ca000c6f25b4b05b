"""
DiscountRule 티어 해석 + 그룹 자격 재계산
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Optional

from academy.domain.billing.entities import DiscountRuleSpec, DiscountType, StudyGroupSnapshot


def active_rules(rules: Iterable[DiscountRuleSpec], now: datetime) -> list[DiscountRuleSpec]:
    return [r for r in rules if r.is_valid(now)]


def applicable_rule(
    rules: Iterable[DiscountRuleSpec],
    rule_type: DiscountType,
    count: int,
    now: datetime,
) -> Optional[DiscountRuleSpec]:
    """할인율 높은 순 → priority 높은 순."""
    matching = [
        r for r in active_rules(rules, now)
        if r.type == rule_type and r.matches(count)
    ]
    if not matching:
        return None
    return max(matching, key=lambda r: (r.discount_percentage, r.priority))


@dataclass(frozen=True)
class EligibilityChange:
    group: StudyGroupSnapshot
    became_eligible: bool
    lost_eligibility: bool


def refresh_group_eligibility(
    group: StudyGroupSnapshot,
    rules: Iterable[DiscountRuleSpec],
    now: datetime,
) -> EligibilityChange:
    """
    멤버 수 기준으로 적용 가능한 group 규칙을 찾아 자격/티어/할인율 갱신.
    최초 자격 획득 시에만 eligibility_date 기록.
    """
    rule = applicable_rule(rules, DiscountType.GROUP, group.member_count, now)
    was_eligible = group.is_eligible

    if rule is not None:
        updated = replace(
            group,
            is_eligible=True,
            discount_tier=rule.tier,
            discount_percentage=rule.discount_percentage,
            eligibility_date=group.eligibility_date if was_eligible else now,
        )
    else:
        updated = replace(
            group,
            is_eligible=False,
            discount_tier=None,
            discount_percentage=0.0,
        )

    return EligibilityChange(
        group=updated,
        became_eligible=(not was_eligible and updated.is_eligible),
        lost_eligibility=(was_eligible and not updated.is_eligible),
    )


def group_rules_by_type(rules: Iterable[DiscountRuleSpec], now: datetime) -> dict[str, list[dict]]:
    """표시용: 유효 규칙을 타입별로 (tier 오름차순)."""
    out: dict[str, list[dict]] = {DiscountType.GROUP.value: [], DiscountType.ORGANIZATION.value: []}
    for r in sorted(active_rules(rules, now), key=lambda r: (r.type.value, r.tier)):
        threshold_keys = ("min_members", "max_members") if r.type == DiscountType.GROUP else ("min_seats", "max_seats")
        out.setdefault(r.type.value, []).append(
            {
                "tier": r.tier,
                "name": r.name,
                threshold_keys[0]: r.min_threshold,
                threshold_keys[1]: r.max_threshold,
                "discount_percentage": r.discount_percentage,
                "expires_at": r.expires_at,
            }
        )
    return out
