from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable

from django.conf import settings
from django.utils.module_loading import import_string

from core.request_context import get_current_user


logger = logging.getLogger("console.permissions")


def default_role_checker(user: Any, *, feature: str, **options: Any) -> bool:
    """Feature check backed by Django permissions (``console.<feature>``)."""
    if not user or not getattr(user, "is_authenticated", False):
        return False
    if getattr(user, "is_superuser", False):
        # Superusers implicitly have every feature.
        return True
    return bool(user.has_perm(f"console.{feature}"))


@lru_cache(maxsize=8)
def _load_checker(path: str) -> Callable[..., bool]:
    return import_string(path)


def get_role_checker() -> Callable[..., bool]:
    path = getattr(settings, "CONSOLE_RBAC_CHECKER", "") or ""
    if not path:
        return default_role_checker
    return _load_checker(path)


def role_allows(*, feature: str | None = None, user: Any = None, **options: Any) -> bool:
    """Check role based authorization for a UI feature.

    Denies when no feature is named or when the checker blows up.
    """
    if feature is None:
        logger.debug("Auth failed - no feature was specified (required)")
        return False

    if user is None:
        user = get_current_user()

    try:
        return bool(get_role_checker()(user, feature=feature, **options))
    except Exception:
        logger.warning("Role check failed for feature=%s", feature, exc_info=True)
        return False
