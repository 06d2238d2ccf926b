from __future__ import annotations

import contextvars
from typing import Any

request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")
current_user_var: contextvars.ContextVar[Any] = contextvars.ContextVar("current_user", default=None)


def set_request_id(value: str) -> None:
    request_id_var.set(value or "")


def get_request_id() -> str:
    return request_id_var.get()


def set_current_user(user: Any) -> contextvars.Token:
    """Remember the authenticated user for helpers that run outside a view."""
    return current_user_var.set(user)


def get_current_user() -> Any:
    return current_user_var.get()


def reset_current_user(token: contextvars.Token) -> None:
    current_user_var.reset(token)
