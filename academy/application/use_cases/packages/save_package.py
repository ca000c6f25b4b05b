"""
패키지 생성/수정 Use Case: 저장 직전 항상 PackagePricingPolicy.normalize()
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.billing.entities import Package, PackagePricing
from academy.domain.billing.pricing_policy import normalize
from academy.domain.shared.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


PRICING_FIELDS = (
    "price",
    "original_price",
    "discount_percentage",
    "min_floor_price",
    "max_additional_discount",
    "eligibility_discount_enabled",
)


def _validate_pricing(p: PackagePricing) -> None:
    if p.price is None or p.price < 0:
        raise ValidationError("price must be >= 0")
    if p.original_price is not None and p.original_price < 0:
        raise ValidationError("original_price must be >= 0")
    if p.discount_percentage is not None and not (0 <= p.discount_percentage <= 100):
        raise ValidationError("discount_percentage must be between 0 and 100")
    if p.min_floor_price is not None and p.min_floor_price < 0:
        raise ValidationError("min_floor_price must be >= 0")
    if p.max_additional_discount is not None and not (0 <= p.max_additional_discount <= 100):
        raise ValidationError("max_additional_discount must be between 0 and 100")


def _split(data: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    pricing = {k: data[k] for k in PRICING_FIELDS if k in data}
    attributes = {k: v for k, v in data.items() if k not in PRICING_FIELDS and k not in ("id", "name")}
    return pricing, attributes


def save_package(
    uow: UnitOfWork,
    data: Mapping[str, Any],
    *,
    package_id: Optional[str] = None,
) -> Package:
    """
    package_id 없으면 생성, 있으면 부분 수정 (기존 값 위에 merge).
    """
    pricing_data, attributes = _split(data)

    with uow:
        if package_id is None:
            if "price" not in pricing_data:
                raise ValidationError("price is required")
            name = str(data.get("name") or "").strip()
            if not name:
                raise ValidationError("name is required")
            current = Package(id=None, name=name, pricing=PackagePricing(**pricing_data))
        else:
            existing = uow.packages.get(str(package_id))
            if existing is None:
                raise NotFoundError(
                    "Package not found",
                    code="package_not_found",
                    detail={"package_id": str(package_id)},
                )
            current = replace(
                existing,
                name=str(data.get("name") or existing.name),
                pricing=replace(existing.pricing, **pricing_data),
            )

        _validate_pricing(current.pricing)
        normalized = normalize(current.pricing)

        if normalized != current.pricing:
            logger.info(
                "package_pricing_normalized package_id=%s price=%s->%s original_price=%s->%s discount=%s",
                package_id,
                current.pricing.price,
                normalized.price,
                current.pricing.original_price,
                normalized.original_price,
                normalized.discount_percentage,
            )

        saved = uow.packages.save(replace(current, pricing=normalized), attributes)

    return saved
