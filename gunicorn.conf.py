"""Gunicorn configuration for the console.

Start command:

    gunicorn config.wsgi:application -c gunicorn.conf.py

Link generation is CPU-light and request scoped, so a few sync workers cover
most appliances. Tune via env vars as needed.
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


# -----------------------------------------------------------------------------
# Core bind/logging
# -----------------------------------------------------------------------------

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:" + (os.getenv("PORT") or "3000"))
accesslog = "-"  # stdout
errorlog = "-"   # stderr
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")


# -----------------------------------------------------------------------------
# Concurrency
# -----------------------------------------------------------------------------

workers = _env_int("WEB_CONCURRENCY", 2)
worker_class = os.getenv("GUNICORN_WORKER_CLASS", "sync")
threads = _env_int("GUNICORN_THREADS", 1)


# -----------------------------------------------------------------------------
# Timeouts
# -----------------------------------------------------------------------------

timeout = _env_int("GUNICORN_TIMEOUT", 60)
graceful_timeout = _env_int("GUNICORN_GRACEFUL_TIMEOUT", 30)
keepalive = _env_int("GUNICORN_KEEPALIVE", 5)


# -----------------------------------------------------------------------------
# Worker recycling
# -----------------------------------------------------------------------------

max_requests = _env_int("GUNICORN_MAX_REQUESTS", 1000)
max_requests_jitter = _env_int("GUNICORN_MAX_REQUESTS_JITTER", 100)

preload_app = _env_bool("GUNICORN_PRELOAD_APP", False)
