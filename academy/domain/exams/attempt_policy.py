"""
AttemptPolicy: 응시 횟수 제한 + 다음 attempt 번호 계산

❗ count → +1 은 원자적이지 않다.
   최종 정합성은 저장소의 (student, test, attempt_number) unique 제약이 보장한다.
"""
from __future__ import annotations

from dataclasses import dataclass

from academy.domain.shared.errors import AttemptLimitExceeded


def next_attempt(existing_attempt_count: int, max_attempts: int) -> int:
    """
    existing_attempt_count: 해당 (student, test) 기존 Result 수
    초과 시 AttemptLimitExceeded: 호출자는 채점 없이 제출 전체를 거부해야 함.
    """
    used = int(existing_attempt_count or 0)
    limit = int(max_attempts or 1)
    if used >= limit:
        raise AttemptLimitExceeded(max_attempts=limit, attempts_used=used)
    return used + 1


@dataclass(frozen=True)
class AttemptEligibility:
    can_attempt: bool
    attempts_used: int
    max_attempts: int
    remaining_attempts: int

    def as_dict(self) -> dict:
        return {
            "can_attempt": self.can_attempt,
            "attempts_used": self.attempts_used,
            "max_attempts": self.max_attempts,
            "remaining_attempts": self.remaining_attempts,
        }


def eligibility(existing_attempt_count: int, max_attempts: int) -> AttemptEligibility:
    used = int(existing_attempt_count or 0)
    limit = int(max_attempts or 1)
    return AttemptEligibility(
        can_attempt=used < limit,
        attempts_used=used,
        max_attempts=limit,
        remaining_attempts=max(0, limit - used),
    )
