# apps/api/common/middleware.py
# 뷰에서 미처리 예외 발생 시 500 JSON 반환.
# process_exception 응답은 CorsMiddleware를 거치지 않으므로 여기서 CORS 헤더 추가.
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def _add_cors_headers_to_response(request, response):
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    allowed = getattr(settings, "CORS_ALLOWED_ORIGINS", []) or []
    if origin and origin in allowed:
        response["Access-Control-Allow-Origin"] = origin
    if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
        response["Access-Control-Allow-Credentials"] = "true"
    return response


class UnhandledExceptionMiddleware:
    """
    DRF 핸들러 밖으로 빠져나온 예외 → 500 JSON.
    DEBUG가 아니면 예외 메시지를 응답에 싣지 않는다.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception("unhandled_exception path=%s", request.path)
        body = {"code": "internal_error", "detail": "Internal server error"}
        if settings.DEBUG:
            body["error"] = str(exception)
        return _add_cors_headers_to_response(request, JsonResponse(body, status=500))
