"""
할인 규칙 조회 / 그룹 자격 재계산 Use Case
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.billing.discount_rules import group_rules_by_type, refresh_group_eligibility
from academy.domain.billing.entities import StudyGroupSnapshot
from academy.domain.shared.errors import NotFoundError

logger = logging.getLogger(__name__)


def list_active_rules(uow: UnitOfWork, *, now: Optional[datetime] = None) -> dict[str, list[dict]]:
    if now is None:
        now = datetime.now(timezone.utc)
    with uow:
        rules = uow.discount_rules.list_rules()
    return group_rules_by_type(rules, now)


def refresh_group(uow: UnitOfWork, group_id: str, *, now: Optional[datetime] = None) -> StudyGroupSnapshot:
    """멤버 수 변경 후 호출: 규칙 기준으로 is_eligible / tier / discount 갱신."""
    if now is None:
        now = datetime.now(timezone.utc)

    with uow:
        group = uow.memberships.get_group(str(group_id))
        if group is None:
            raise NotFoundError("Group not found", code="group_not_found", detail={"group_id": str(group_id)})

        change = refresh_group_eligibility(group, uow.discount_rules.list_rules(), now)
        uow.memberships.save_group_eligibility(change.group)

    if change.became_eligible or change.lost_eligibility:
        logger.info(
            "group_eligibility_changed group_id=%s eligible=%s tier=%s discount=%s members=%s",
            group_id,
            change.group.is_eligible,
            change.group.discount_tier,
            change.group.discount_percentage,
            change.group.member_count,
        )
    return change.group
