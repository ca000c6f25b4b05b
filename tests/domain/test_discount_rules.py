"""
Tests for academy.domain.billing.discount_rules
"""
from datetime import timedelta

from academy.domain.billing.discount_rules import (
    applicable_rule,
    group_rules_by_type,
    refresh_group_eligibility,
)
from academy.domain.billing.entities import DiscountRuleSpec, DiscountType, StudyGroupSnapshot


def rule(tier, lo, hi, pct, kind=DiscountType.GROUP, **kw):
    return DiscountRuleSpec(
        id=f"{kind.value}-{tier}",
        name=f"Tier {tier}",
        type=kind,
        tier=tier,
        min_threshold=lo,
        max_threshold=hi,
        discount_percentage=pct,
        **kw,
    )


RULES = [
    rule(1, 3, 5, 10),
    rule(2, 6, 10, 15),
    rule(3, 11, None, 20),
    rule(1, 10, 49, 12, kind=DiscountType.ORGANIZATION),
]


def group(count, **kw):
    fields = dict(
        id="g1",
        name="G",
        member_ids=frozenset(str(i) for i in range(count)),
        member_count=count,
        is_eligible=False,
        status="active",
        discount_percentage=0.0,
    )
    fields.update(kw)
    return StudyGroupSnapshot(**fields)


class TestApplicableRule:

    def test_applicable_when_count_in_range_then_matching_tier(self, now):
        assert applicable_rule(RULES, DiscountType.GROUP, 7, now).tier == 2

    def test_applicable_when_open_ended_then_matches_large_counts(self, now):
        assert applicable_rule(RULES, DiscountType.GROUP, 500, now).tier == 3

    def test_applicable_when_below_minimum_then_none(self, now):
        assert applicable_rule(RULES, DiscountType.GROUP, 2, now) is None

    def test_applicable_when_expired_or_inactive_then_skipped(self, now):
        rules = [
            rule(1, 1, None, 30, expires_at=now),
            rule(2, 1, None, 25, is_active=False),
            rule(3, 1, None, 5),
        ]
        assert applicable_rule(rules, DiscountType.GROUP, 3, now).tier == 3

    def test_applicable_when_overlap_then_highest_percentage_then_priority(self, now):
        rules = [
            rule(1, 1, None, 10, priority=9),
            rule(2, 1, None, 10, priority=1),
            rule(3, 1, None, 8, priority=50),
        ]
        assert applicable_rule(rules, DiscountType.GROUP, 3, now).tier == 1


class TestRefreshGroupEligibility:

    def test_refresh_when_reaches_threshold_then_becomes_eligible(self, now):
        change = refresh_group_eligibility(group(4), RULES, now)

        assert change.became_eligible is True
        assert change.group.is_eligible is True
        assert change.group.discount_tier == 1
        assert change.group.discount_percentage == 10
        assert change.group.eligibility_date == now

    def test_refresh_when_already_eligible_then_eligibility_date_kept(self, now):
        first = now - timedelta(days=10)
        g = group(8, is_eligible=True, discount_tier=1, discount_percentage=10, eligibility_date=first)

        change = refresh_group_eligibility(g, RULES, now)

        assert change.became_eligible is False
        assert change.group.discount_tier == 2
        assert change.group.eligibility_date == first

    def test_refresh_when_drops_below_threshold_then_loses_eligibility(self, now):
        g = group(2, is_eligible=True, discount_tier=1, discount_percentage=10)

        change = refresh_group_eligibility(g, RULES, now)

        assert change.lost_eligibility is True
        assert change.group.discount_tier is None
        assert change.group.discount_percentage == 0


def test_group_rules_by_type_when_listed_then_threshold_keys_per_type(now):
    listed = group_rules_by_type(RULES, now)

    assert [r["tier"] for r in listed["group"]] == [1, 2, 3]
    assert listed["group"][0]["min_members"] == 3
    assert listed["organization"][0]["min_seats"] == 10
    assert listed["organization"][0]["max_seats"] == 49
