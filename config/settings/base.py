from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


# Base directory (project root)
BASE_DIR = Path(__file__).resolve().parents[2]

# Load environment variables from .env (if present)
load_dotenv(BASE_DIR / ".env")


def _getenv(name: str, default: str | None = None) -> str:
    val = os.getenv(name)
    if val is None:
        return "" if default is None else default
    return str(val)


def _getenv_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "y", "on"}


def _getenv_int(name: str, default: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


def _getenv_list(name: str, default: str = "") -> list[str]:
    return [v.strip() for v in _getenv(name, default).split(",") if v.strip()]


DEBUG = _getenv_bool("DEBUG", False)
SECRET_KEY = _getenv("SECRET_KEY", "django-insecure-CHANGE_ME")

ENVIRONMENT = _getenv("CONSOLE_ENV", "dev")
RELEASE_SHA = _getenv("CONSOLE_RELEASE_SHA", "")


# Hosts / origins
ALLOWED_HOSTS = _getenv_list("ALLOWED_HOSTS")
CSRF_TRUSTED_ORIGINS = _getenv_list("CSRF_TRUSTED_ORIGINS")


# Application definition
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Project apps
    "core",
    "console",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "core.middleware.RequestIDMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "core.middleware.CurrentUserMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "console.middleware.ViewContextMiddleware",
]


ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "console.context_processors.view_dispatch",
            ],
        },
    }
]

WSGI_APPLICATION = "config.wsgi.application"


# Database
# The console keeps only auth/session rows locally; inventory lives upstream.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": _getenv("SQLITE_PATH", str(BASE_DIR / "db.sqlite3")),
        "CONN_MAX_AGE": _getenv_int("DB_CONN_MAX_AGE", 0),
    }
}


# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = _getenv("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True


# Static
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Auth UX defaults
LOGIN_URL = "/admin/login/"
LOGIN_REDIRECT_URL = "/"
LOGOUT_REDIRECT_URL = "/"


# -------------------------
# Console
# -------------------------
CONSOLE_PRODUCT_NAME = _getenv("CONSOLE_PRODUCT_NAME", "ManageIQ")
CONSOLE_APPLIANCE_NAME = _getenv("CONSOLE_APPLIANCE_NAME", "EVM")
CONSOLE_VERSION = _getenv("CONSOLE_VERSION", "master")
CONSOLE_BUILD = _getenv("CONSOLE_BUILD", "")
CONSOLE_SERVER_TIMEZONE = _getenv("CONSOLE_SERVER_TIMEZONE", TIME_ZONE)

# Dotted path to a callable(user, *, feature, **options) -> bool.
# Empty means Django permissions ("console.<feature>").
CONSOLE_RBAC_CHECKER = _getenv("CONSOLE_RBAC_CHECKER", "")

CONSOLE_MENU_SECTIONS = {
    "cloud_inventory": {
        "name": "Clouds",
        "items": ["ems_cloud", "availability_zone", "host_aggregate", "cloud_tenant", "flavor",
                  "security_group", "orchestration_stack", "vm_cloud"],
    },
    "infrastructure": {
        "name": "Infrastructure",
        "items": ["ems_infra", "ems_cluster", "host", "vm_infra", "resource_pool", "storage", "pxe"],
    },
    "container": {
        "name": "Containers",
        "items": ["ems_container", "container_project", "container_route", "container_service",
                  "container_group", "container_node", "container", "container_image"],
    },
    "vi": {
        "name": "Cloud Intel",
        "items": ["dashboard", "report", "chargeback", "timeline", "miq_capacity_utilization"],
    },
    "set": {
        "name": "Settings",
        "items": ["ops", "my_tasks", "my_settings", "about"],
    },
}

# Per-user display settings defaults (per page, default views, ...).
CONSOLE_USER_SETTINGS = {
    "perpage": {"list": 20, "tile": 20, "grid": 20, "reports": 20},
    "views": {},
    "display": {"startpage": "/dashboard/show", "timezone": CONSOLE_SERVER_TIMEZONE},
}

CONSOLE_PERF_LOGGING_ENABLED = _getenv_bool("CONSOLE_PERF_LOGGING_ENABLED", False)
CONSOLE_PERF_REQUEST_MS = _getenv_int("CONSOLE_PERF_REQUEST_MS", 600)


# -------------------------
# Logging
# -------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "request_id": {"()": "core.logging.RequestIDLogFilter"},
    },
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s [rid=%(request_id)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "filters": ["request_id"],
            "formatter": "standard",
        },
    },
    "root": {"handlers": ["console"], "level": _getenv("DJANGO_LOG_LEVEL", "INFO")},
    "loggers": {
        "django.request": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "console": {"handlers": ["console"], "level": _getenv("CONSOLE_LOG_LEVEL", "INFO"), "propagate": False},
    },
}


def apply_runtime_defaults() -> None:
    """Recompute settings that depend on DEBUG (call again after overriding it)."""
    global SECURE_SSL_REDIRECT, SESSION_COOKIE_SECURE, CSRF_COOKIE_SECURE
    global SESSION_COOKIE_HTTPONLY, CSRF_COOKIE_HTTPONLY
    global SESSION_COOKIE_SAMESITE, CSRF_COOKIE_SAMESITE
    global SECURE_HSTS_SECONDS, SECURE_HSTS_INCLUDE_SUBDOMAINS, SECURE_HSTS_PRELOAD

    _secure_default = not DEBUG
    SECURE_SSL_REDIRECT = _getenv_bool("SECURE_SSL_REDIRECT", _secure_default)
    SESSION_COOKIE_SECURE = _getenv_bool("SESSION_COOKIE_SECURE", _secure_default)
    CSRF_COOKIE_SECURE = _getenv_bool("CSRF_COOKIE_SECURE", _secure_default)

    SESSION_COOKIE_HTTPONLY = True
    CSRF_COOKIE_HTTPONLY = False

    SESSION_COOKIE_SAMESITE = _getenv("SESSION_COOKIE_SAMESITE", "Lax")
    CSRF_COOKIE_SAMESITE = _getenv("CSRF_COOKIE_SAMESITE", "Lax")

    SECURE_HSTS_SECONDS = _getenv_int("SECURE_HSTS_SECONDS", 31536000 if _secure_default else 0)
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = False


def init_sentry_if_configured() -> None:
    dsn = _getenv("SENTRY_DSN", "").strip()
    if not dsn:
        return

    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    environment = _getenv("SENTRY_ENVIRONMENT", ENVIRONMENT).strip() or ENVIRONMENT
    try:
        traces = float(_getenv("SENTRY_TRACES_SAMPLE_RATE", "0.05") or "0.05")
    except ValueError:
        traces = 0.05

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=RELEASE_SHA or None,
        integrations=[DjangoIntegration()],
        traces_sample_rate=traces,
        send_default_pii=False,
    )


apply_runtime_defaults()
