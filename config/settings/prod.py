from __future__ import annotations

from .base import *  # noqa


DEBUG = False

# In production you MUST set ALLOWED_HOSTS (and CSRF_TRUSTED_ORIGINS) via env.
# Example:
#   ALLOWED_HOSTS=console.example.com
#   CSRF_TRUSTED_ORIGINS=https://console.example.com

apply_runtime_defaults()

SECURE_REFERRER_POLICY = _getenv("SECURE_REFERRER_POLICY", "same-origin")

# If behind a proxy/load balancer
USE_X_FORWARDED_HOST = _getenv_bool("USE_X_FORWARDED_HOST", True)

# Trust X-Forwarded-Proto from proxy
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# Monitoring / Observability
init_sentry_if_configured()
