from __future__ import annotations

from .base import *  # noqa


# --------------------------------------------------------------------------------------
# Development settings
# --------------------------------------------------------------------------------------

DEBUG = True

# Re-apply derived defaults that depend on DEBUG (imported from base.py)
apply_runtime_defaults()

# Local-only safe hosts/origins
if not ALLOWED_HOSTS:
    ALLOWED_HOSTS = ["127.0.0.1", "localhost"]

if not CSRF_TRUSTED_ORIGINS:
    CSRF_TRUSTED_ORIGINS = ["http://127.0.0.1:8000", "http://localhost:8000"]

# Lightweight performance logging, on by default locally
CONSOLE_PERF_LOGGING_ENABLED = _getenv_bool("CONSOLE_PERF_LOGGING_ENABLED", True)

# Insert perf middleware early so it captures the full request.
if CONSOLE_PERF_LOGGING_ENABLED:
    _mw = list(MIDDLEWARE)
    if "core.middleware.PerformanceLoggingMiddleware" not in _mw:
        if "django.middleware.common.CommonMiddleware" in _mw:
            idx = _mw.index("django.middleware.common.CommonMiddleware") + 1
        else:
            idx = 0
        _mw.insert(idx, "core.middleware.PerformanceLoggingMiddleware")
    MIDDLEWARE = _mw

LOGGING["loggers"]["console"]["level"] = _getenv("CONSOLE_LOG_LEVEL", "DEBUG")

# Optional monitoring in dev (only if SENTRY_DSN is set)
init_sentry_if_configured()
