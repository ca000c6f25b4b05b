"""
PackagePricingPolicy: price / original_price / discount_percentage 파생 상태 정합성

불변식 (모든 write 이후):
  - 할인 없음: original_price is None
  - 할인 있음: original_price 설정 + price == original_price * (1 - pct/100)

write 경로가 저장 직전에 항상 normalize() 호출.
"""
from __future__ import annotations

from dataclasses import replace

from academy.domain.billing.entities import PackagePricing


def _discounted(original: float, pct: float) -> float:
    return original * (1 - pct / 100)


def normalize(pkg: PackagePricing) -> PackagePricing:
    """멱등: normalize(normalize(p)) == normalize(p)."""
    pct = pkg.discount_percentage or 0

    if pct > 0:
        # original이 없으면 현재 price를 원가로 본다
        # original이 있으면 price를 신뢰하지 않고 항상 original에서 재계산 (저장된 price 무시)
        original = pkg.original_price if pkg.original_price else pkg.price
        return replace(pkg, original_price=original, price=_discounted(original, pct))

    if pkg.original_price:
        # 할인 제거 → 원가 복원
        return replace(pkg, price=pkg.original_price, original_price=None)

    return pkg


def display_price(pkg: PackagePricing) -> float:
    """normalize 이후의 price는 이미 패키지 할인을 반영한 값."""
    return pkg.price


def original_price(pkg: PackagePricing) -> float:
    return pkg.original_price if pkg.original_price else pkg.price
