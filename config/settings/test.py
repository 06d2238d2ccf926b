from __future__ import annotations

from .base import *  # noqa


DEBUG = False
SECRET_KEY = "test-secret-key"
ALLOWED_HOSTS = ["testserver", "localhost"]

apply_runtime_defaults()
SECURE_SSL_REDIRECT = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

CONSOLE_PRODUCT_NAME = "ManageIQ"
CONSOLE_APPLIANCE_NAME = "EVM"
CONSOLE_VERSION = "master"
CONSOLE_BUILD = "20260101000000_abc1234"
CONSOLE_RBAC_CHECKER = ""
CONSOLE_PERF_LOGGING_ENABLED = False
