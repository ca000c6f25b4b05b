"""
Django DB 예외 → 도메인 오류 변환 (모든 Repository 메서드 공통)

- IntegrityError → PersistenceConflict (재조회 후 재시도 가능)
- 그 외 DatabaseError (연결 끊김, timeout 등) → UpstreamFailure (503)
- 메서드가 직접 변환한 도메인 오류는 그대로 통과
"""
from __future__ import annotations

import functools
import logging

from academy.domain.shared.errors import PersistenceConflict, UpstreamFailure

logger = logging.getLogger(__name__)


def translate_db_errors(operation: str):
    """Repository 메서드 데코레이터. operation은 로그/detail 용 이름."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            from django.db import DatabaseError, IntegrityError

            try:
                return func(*args, **kwargs)
            except IntegrityError as e:
                logger.warning("db_integrity_conflict operation=%s error=%s", operation, e)
                raise PersistenceConflict(
                    "Conflicting change detected; reload and retry",
                    detail={"operation": operation},
                ) from e
            except DatabaseError as e:
                logger.exception("db_unavailable operation=%s", operation)
                raise UpstreamFailure(
                    "Database is unavailable",
                    detail={"operation": operation},
                ) from e

        return wrapper

    return decorator
