"""Lookups of user settings, browser details and appliance identity."""

from __future__ import annotations

from typing import Any, Iterable

from django.conf import settings
from django.http import HttpRequest

from core.request_context import get_current_user

from .context import ViewContext, fetch_path


def _user_settings(ctx: ViewContext | None) -> Any:
    if ctx is not None and (ctx.extra or {}).get("settings") is not None:
        return ctx.extra["settings"]
    return getattr(settings, "CONSOLE_USER_SETTINGS", None) or {}


def settings_lookup(*path: str, ctx: ViewContext | None = None) -> Any:
    return fetch_path(_user_settings(ctx), *path)


def settings_default(default: Any, *path: str, ctx: ViewContext | None = None) -> Any:
    value = settings_lookup(*path, ctx=ctx)
    return default if value is None or value is False else value


def browser_info(ctx: ViewContext, typ: str) -> str:
    value = fetch_path(ctx.session or {}, "browser", typ)
    return "" if value is None else str(value)


def is_browser_ie(ctx: ViewContext) -> bool:
    return browser_info(ctx, "name") == "explorer"


def is_browser_ie7(ctx: ViewContext) -> bool:
    return is_browser_ie(ctx) and browser_info(ctx, "version").startswith("7")


def _matches(value: str, wanted: str | Iterable[str]) -> bool:
    if isinstance(wanted, str):
        return value == wanted
    return value in wanted


def is_browser(ctx: ViewContext, name: str | Iterable[str]) -> bool:
    return _matches(browser_info(ctx, "name"), name)


def is_browser_os(ctx: ViewContext, os_name: str | Iterable[str]) -> bool:
    return _matches(browser_info(ctx, "os"), os_name)


def websocket_origin(request: HttpRequest) -> str:
    """Origin the browser must present when opening console websockets."""
    proto = "wss" if request.is_secure() else "ws"
    forwarded = request.META.get("HTTP_X_FORWARDED_HOST")
    if forwarded:
        # first proxy in the chain
        host = forwarded.split(",")[0].strip()
    else:
        host = request.META.get("HTTP_HOST", "")
    return f"{proto}://{host}"


def appliance_name() -> str:
    return getattr(settings, "CONSOLE_APPLIANCE_NAME", "")


def vmdb_build_info(key: str) -> str | None:
    if key == "version":
        return getattr(settings, "CONSOLE_VERSION", None)
    if key == "build":
        return getattr(settings, "CONSOLE_BUILD", None)
    return None


def user_role_name(user: Any = None) -> str | None:
    user = user if user is not None else get_current_user()
    if user is None:
        return None
    role = getattr(user, "miq_user_role_name", None)
    if role:
        return role
    groups = getattr(user, "groups", None)
    if groups is not None and hasattr(groups, "values_list"):
        return next(iter(groups.values_list("name", flat=True)), None)
    return None
