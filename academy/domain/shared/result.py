"""
도메인 공통: 자격 검증 결과 (Ok | Err)

검증 함수는 raise 대신 Ok/Err 를 돌려준다.
- Err.code 는 API 응답의 reason_code 로 그대로 노출된다 (구체적 사유 필수)
- 어떤 예외로 바꿀지는 Use Case 가 정한다
  (결제 직전 재검증: DiscountIneligible + fallback_price)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from academy.domain.shared.errors import DiscountIneligible

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    """message: 사용자 표시용 사유, code: reason_code."""

    message: str
    code: str = "error"

    def as_ineligible(self, fallback_price: float) -> DiscountIneligible:
        """할인 없이 결제할 가격(fallback_price)을 함께 실어 보낸다."""
        return DiscountIneligible(self.message, reason_code=self.code, fallback_price=fallback_price)


Outcome = Union[Ok[T], Err]


def unwrap_or_ineligible(outcome: Outcome[T], *, fallback_price: float) -> T:
    if isinstance(outcome, Err):
        raise outcome.as_ineligible(fallback_price)
    return outcome.value
