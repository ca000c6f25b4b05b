"""
도메인 공통 오류: 순수 파이썬 (Django/DRF 미사용)

HTTP 매핑은 apps.api.common.exceptions 에서 수행.
모든 오류는 code / message / http_status / detail 을 가진다.
"""
from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """비즈니스 규칙/인프라 오류의 공통 베이스."""

    code = "domain_error"
    http_status = 400
    retryable = False

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        detail: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = str(message)
        if code is not None:
            self.code = str(code)
        self.detail = dict(detail or {})

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"code": self.code, "detail": self.message}
        out.update(self.detail)
        if self.retryable:
            out["retryable"] = True
        return out


class ValidationError(DomainError):
    """입력 형식 오류. 채점/가격 계산 시작 전에 거부."""

    code = "validation_error"
    http_status = 400


class NotFoundError(DomainError):
    code = "not_found"
    http_status = 404


class AttemptLimitExceeded(DomainError):
    """응시 횟수 초과. 시스템 오류가 아닌 비즈니스 규칙."""

    code = "attempt_limit_exceeded"
    http_status = 400

    def __init__(self, *, max_attempts: int, attempts_used: int):
        super().__init__(
            f"Maximum attempts ({max_attempts}) reached for this mock test",
            detail={
                "max_attempts": int(max_attempts),
                "attempts_used": int(attempts_used),
            },
        )
        self.max_attempts = int(max_attempts)
        self.attempts_used = int(attempts_used)


class DiscountIneligible(DomainError):
    """할인 자격 없음. reason 문자열은 항상 구체적으로."""

    code = "discount_ineligible"
    http_status = 400

    def __init__(self, reason: str, *, reason_code: str, fallback_price: float):
        super().__init__(
            reason,
            detail={
                "valid": False,
                "reason": reason,
                "reason_code": reason_code,
                "fallback_price": fallback_price,
            },
        )
        self.reason = reason
        self.reason_code = reason_code
        self.fallback_price = fallback_price


class PersistenceConflict(DomainError):
    """
    저장 시점 unique 위반.
    동시 제출 경합의 최종 방어선: 호출자는 재조회 후 재시도 가능.
    """

    code = "persistence_conflict"
    http_status = 409
    retryable = True


class UpstreamFailure(DomainError):
    """DB 등 협력 시스템 장애. 성공 응답으로 삼키지 않는다."""

    code = "upstream_failure"
    http_status = 503
