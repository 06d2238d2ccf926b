from __future__ import annotations

import logging
import time
import uuid

from django.http import HttpRequest

from .request_context import reset_current_user, set_current_user, set_request_id


logger_perf = logging.getLogger("console.perf")


class RequestIDMiddleware:
    """Attach a request id to each request/response for traceability."""

    header_name = "X-Request-ID"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest):
        rid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        request.request_id = rid
        set_request_id(rid)
        response = self.get_response(request)
        response[self.header_name] = rid
        return response


class CurrentUserMiddleware:
    """Expose request.user to permission checks made from template helpers.

    Must run after AuthenticationMiddleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest):
        token = set_current_user(getattr(request, "user", None))
        try:
            return self.get_response(request)
        finally:
            reset_current_user(token)


class PerformanceLoggingMiddleware:
    """Log requests slower than settings.CONSOLE_PERF_REQUEST_MS.

    Enabled via settings.CONSOLE_PERF_LOGGING_ENABLED.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest):
        from django.conf import settings

        if not bool(getattr(settings, "CONSOLE_PERF_LOGGING_ENABLED", False)):
            return self.get_response(request)

        request_ms = int(getattr(settings, "CONSOLE_PERF_REQUEST_MS", 600))
        start = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = int((time.monotonic() - start) * 1000)
        if elapsed_ms >= request_ms:
            logger_perf.warning(
                "slow_request path=%s method=%s status=%s ms=%s",
                request.path,
                request.method,
                getattr(response, "status_code", "?"),
                elapsed_ms,
            )
        return response
