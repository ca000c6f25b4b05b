"""
Tests for academy.application.use_cases.billing

Test Coverage:
- check_discount(): with / without package, disabled package
- validate_discount(): fail closed with reason codes, claim precedence
- refresh_group() / list_active_rules()
"""
import logging
from datetime import timedelta

import pytest

from academy.application.use_cases.billing.check_discount import check_discount
from academy.application.use_cases.billing.discount_rules import list_active_rules, refresh_group
from academy.application.use_cases.billing.validate_discount import validate_discount
from academy.domain.billing.entities import (
    DiscountRuleSpec,
    DiscountType,
    OrganizationSnapshot,
    StudyGroupSnapshot,
)
from academy.domain.shared.errors import DiscountIneligible, NotFoundError, ValidationError
from tests.application.fakes import (
    InMemoryDiscountRuleRepository,
    InMemoryMembershipRepository,
    InMemoryPackageRepository,
    InMemoryUnitOfWork,
    package,
)


USER = "7"


def study_group(gid="g1", pct=20.0, members=(USER, "8", "9"), **kw):
    fields = dict(
        id=gid,
        name=f"Group {gid}",
        member_ids=frozenset(members),
        member_count=len(members),
        is_eligible=True,
        status="active",
        discount_percentage=pct,
        discount_tier=1,
    )
    fields.update(kw)
    return StudyGroupSnapshot(**fields)


def organization(oid="o1", pct=15.0, status="verified"):
    return OrganizationSnapshot(id=oid, name=f"Org {oid}", status=status, discount_percentage=pct, tier=1)


def make_uow(packages=(), groups=(), organizations=(), members=None, rules=()):
    return InMemoryUnitOfWork(
        packages=InMemoryPackageRepository(packages),
        memberships=InMemoryMembershipRepository(groups, organizations, members),
        discount_rules=InMemoryDiscountRuleRepository(rules),
    )


class TestCheckDiscount:

    def test_check_when_group_twenty_percent_then_final_800(self, now):
        uow = make_uow(
            packages=[package(eligibility_discount_enabled=True)],
            groups=[study_group()],
        )

        result = check_discount(uow, USER, "p1", now=now)

        assert result["eligible"] is True
        assert result["final_price"] == 800
        assert result["best_discount"]["type"] == "group"
        assert result["eligibility_discount"]["discount_amount"] == 200
        assert result["total_savings"] == 200
        assert result["total_discount_percentage"] == 20.0

    def test_check_when_tie_then_group_selected(self, now):
        uow = make_uow(
            packages=[package(eligibility_discount_enabled=True)],
            groups=[study_group(pct=25)],
            organizations=[organization(pct=25)],
            members={(USER, "o1"): "active"},
        )

        result = check_discount(uow, USER, "p1", now=now)

        assert result["best_discount"]["type"] == "group"
        assert result["available_discounts"]["organization"]["discount_percentage"] == 25

    def test_check_when_savings_include_package_discount_then_measured_from_original(self, now):
        uow = make_uow(
            packages=[package(price=800, original_price=1000, discount_percentage=20,
                              eligibility_discount_enabled=True)],
            groups=[study_group(pct=10)],
        )

        result = check_discount(uow, USER, "p1", now=now)

        assert result["final_price"] == pytest.approx(720)
        assert result["total_savings"] == pytest.approx(280)
        assert result["total_discount_percentage"] == 28.0
        assert result["package_discount"] == {
            "original_price": 1000,
            "discount_percentage": 20,
            "display_price": 800,
        }

    def test_check_when_package_disabled_then_display_price_and_no_lookup(self, now):
        uow = make_uow(packages=[package(price=600, original_price=1000, discount_percentage=40)],
                       groups=[study_group()])

        result = check_discount(uow, USER, "p1", now=now)

        assert result["eligible"] is False
        assert result["final_price"] == 600
        assert result["eligibility_discount"] is None
        assert result["package_discount"]["original_price"] == 1000

    def test_check_when_no_package_then_candidates_only(self, now):
        uow = make_uow(
            groups=[study_group(pct=10)],
            organizations=[organization(pct=15)],
            members={(USER, "o1"): "registered"},
        )

        result = check_discount(uow, USER, now=now)

        assert result["eligible"] is True
        assert len(result["discounts"]) == 2
        assert result["best_discount"]["type"] == "organization"
        assert "final_price" not in result

    def test_check_when_package_unknown_then_not_found(self, now):
        with pytest.raises(NotFoundError):
            check_discount(make_uow(), USER, "missing", now=now)


class TestValidateDiscount:

    def test_validate_when_group_valid_then_final_price(self, now):
        uow = make_uow(packages=[package(eligibility_discount_enabled=True, min_floor_price=850)],
                       groups=[study_group()])

        result = validate_discount(uow, USER, "p1", claimed_group_id="g1", now=now)

        assert result["valid"] is True
        assert result["discount_type"] == "group"
        assert result["final_price"] == 850
        assert result["floor_price_applied"] is True
        assert result["capped_reason"] == "min_floor_price"

    def test_validate_when_not_member_then_ineligible_with_fallback(self, now, caplog):
        uow = make_uow(packages=[package(eligibility_discount_enabled=True)],
                       groups=[study_group(members=("8", "9", "10"))])

        with caplog.at_level(logging.INFO):
            with pytest.raises(DiscountIneligible) as exc:
                validate_discount(uow, USER, "p1", claimed_group_id="g1", now=now)

        body = exc.value.as_dict()
        assert body["valid"] is False
        assert body["reason_code"] == "not_group_member"
        assert body["fallback_price"] == 1000
        assert "discount_validation_failed" in caplog.text

    def test_validate_when_group_expired_since_order_then_rejected(self, now):
        uow = make_uow(
            packages=[package(eligibility_discount_enabled=True)],
            groups=[study_group(discount_expires_at=now - timedelta(minutes=1))],
        )

        with pytest.raises(DiscountIneligible) as exc:
            validate_discount(uow, USER, "p1", claimed_group_id="g1", now=now)
        assert exc.value.reason_code == "group_discount_expired"

    def test_validate_when_org_unverified_then_rejected(self, now):
        uow = make_uow(
            packages=[package(eligibility_discount_enabled=True)],
            organizations=[organization(status="pending")],
            members={(USER, "o1"): "active"},
        )

        with pytest.raises(DiscountIneligible) as exc:
            validate_discount(uow, USER, "p1", claimed_organization_id="o1", now=now)
        assert exc.value.reason_code == "organization_not_verified"

    def test_validate_when_group_valid_then_org_claim_ignored(self, now):
        uow = make_uow(
            packages=[package(eligibility_discount_enabled=True)],
            groups=[study_group(pct=10)],
            organizations=[organization(status="suspended")],
        )

        result = validate_discount(
            uow, USER, "p1", claimed_group_id="g1", claimed_organization_id="o1", now=now
        )

        assert result["discount_type"] == "group"
        assert result["final_price"] == 900

    def test_validate_when_org_member_then_org_discount(self, now):
        uow = make_uow(
            packages=[package(eligibility_discount_enabled=True, max_additional_discount=10)],
            organizations=[organization(pct=15)],
            members={(USER, "o1"): "registered"},
        )

        result = validate_discount(uow, USER, "p1", claimed_organization_id="o1", now=now)

        assert result["discount_type"] == "organization"
        assert result["final_price"] == 900
        assert result["capped_reason"] == "max_additional_discount"
        assert result["floor_price_applied"] is False

    def test_validate_when_no_claims_then_display_price(self, now):
        uow = make_uow(packages=[package(eligibility_discount_enabled=True)])

        result = validate_discount(uow, USER, "p1", now=now)

        assert result["discount_type"] == "none"
        assert result["final_price"] == 1000

    def test_validate_when_package_disabled_then_no_discount(self, now):
        uow = make_uow(packages=[package()], groups=[study_group()])

        result = validate_discount(uow, USER, "p1", claimed_group_id="g1", now=now)

        assert result["discount_type"] == "none"
        assert result["final_price"] == 1000

    def test_validate_when_package_missing_then_errors(self, now):
        with pytest.raises(ValidationError):
            validate_discount(make_uow(), USER, "", now=now)
        with pytest.raises(NotFoundError):
            validate_discount(make_uow(), USER, "p404", now=now)


class TestDiscountRules:

    RULES = [
        DiscountRuleSpec(id="1", name="Small", type=DiscountType.GROUP, tier=1,
                         min_threshold=3, max_threshold=5, discount_percentage=10),
        DiscountRuleSpec(id="2", name="Large", type=DiscountType.GROUP, tier=2,
                         min_threshold=6, max_threshold=None, discount_percentage=18),
    ]

    def test_refresh_when_group_grows_then_tier_upgraded(self, now, caplog):
        members = tuple(str(i) for i in range(6))
        uow = make_uow(
            groups=[study_group(members=members, is_eligible=False, discount_tier=None, discount_percentage=0)],
            rules=self.RULES,
        )

        with caplog.at_level(logging.INFO):
            group = refresh_group(uow, "g1", now=now)

        assert group.is_eligible is True
        assert group.discount_tier == 2
        assert uow.memberships.groups["g1"].discount_percentage == 18
        assert "group_eligibility_changed" in caplog.text

    def test_refresh_when_group_unknown_then_not_found(self, now):
        with pytest.raises(NotFoundError) as exc:
            refresh_group(make_uow(), "nope", now=now)
        assert exc.value.code == "group_not_found"

    def test_list_active_rules_when_listed_then_grouped_by_type(self, now):
        listed = list_active_rules(make_uow(rules=self.RULES), now=now)

        assert [r["name"] for r in listed["group"]] == ["Small", "Large"]
        assert listed["organization"] == []
