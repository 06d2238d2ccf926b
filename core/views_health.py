from __future__ import annotations

import time
from datetime import datetime, timezone as dt_timezone

from django.conf import settings
from django.core.cache import cache
from django.db import connection
from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET


def _utc_now_iso() -> str:
    return datetime.now(dt_timezone.utc).isoformat()


def _db_check() -> str:
    try:
        with connection.cursor() as cur:
            cur.execute("SELECT 1")
            cur.fetchone()
        return "ok"
    except Exception:
        return "error"


def _cache_check() -> str:
    try:
        key = "console:health:cache"
        cache.set(key, "1", timeout=10)
        if cache.get(key) != "1":
            return "degraded"
        return "ok"
    except Exception:
        return "error"


def _aggregate_status(parts: dict[str, str]) -> str:
    # error > degraded > ok
    if any(v == "error" for v in parts.values()):
        return "error"
    if any(v == "degraded" for v in parts.values()):
        return "degraded"
    return "ok"


@require_GET
def health(request: HttpRequest) -> JsonResponse:
    """Health endpoint for load balancers and uptime monitors.

    - Returns 200 when status=ok
    - Returns 503 when status=degraded|error
    """
    start = time.monotonic()

    parts = {"database": _db_check(), "cache": _cache_check()}
    status = _aggregate_status(parts)

    payload = {
        "status": status,
        **parts,
        "appliance": getattr(settings, "CONSOLE_APPLIANCE_NAME", ""),
        "version": getattr(settings, "CONSOLE_VERSION", ""),
        "build": getattr(settings, "CONSOLE_BUILD", "") or getattr(settings, "RELEASE_SHA", ""),
        "timestamp": _utc_now_iso(),
        "latency_ms": int((time.monotonic() - start) * 1000),
    }
    return JsonResponse(payload, status=200 if status == "ok" else 503)
