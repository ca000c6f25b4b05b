# apps/api/common/exceptions.py
"""
DRF EXCEPTION_HANDLER

DomainError → {"code", "detail", ...structured detail} + http_status
그 외 → DRF 기본 핸들러
"""
from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from academy.domain.shared.errors import DomainError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        view = context.get("view")
        if exc.http_status >= 500:
            logger.error(
                "domain_error code=%s view=%s detail=%s",
                exc.code,
                type(view).__name__ if view else None,
                exc.message,
            )
        return Response(exc.as_dict(), status=exc.http_status)

    return exception_handler(exc, context)
