"""Per-request view state handed to every console helper.

Controllers used to leave their state lying around as instance variables; the
helpers here receive it explicitly as one immutable :class:`ViewContext`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

from django.http import HttpRequest


@dataclass(frozen=True)
class ViewContext:
    layout: str = ""
    controller_name: str = ""
    action_name: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    session: MutableMapping[str, Any] = field(default_factory=dict)
    query_string: str = ""
    user: Any = None

    record: Any = None
    record_id: Any = None
    vm: Any = None
    host: Any = None
    explorer: bool = False
    lastaction: str | None = None
    display: str | None = None
    tabform: str | None = None
    showtype: str | None = None
    nodetype: str | None = None

    # Controller shape
    restful: bool = False
    vm_or_template_controller: bool = False
    custom_toolbar: Any = None
    center_toolbar: str | None = None

    # Lists and forms
    view: Any = None
    gtl_type: str | None = None
    tagitems: Any = None
    ownershipitems: Any = None
    retireitems: Any = None
    politems: Any = None
    in_a_form: bool = False
    compare: Any = None
    html: Any = None
    edit: Mapping[str, Any] | None = None
    expkey: str = "expression"
    sb: Mapping[str, Any] = field(default_factory=dict)
    toolbars: Mapping[str, Any] = field(default_factory=dict)
    targets_hash: Mapping[Any, Any] = field(default_factory=dict)
    perf_options: Mapping[str, Any] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)

    # Explorer trees
    x_tree: Mapping[str, Any] | None = None
    x_active_tree: str | None = None
    show_adv_search: bool = False

    # Preset answers (None means "compute it")
    show_taskbar: bool | None = None
    inner_layout: bool | None = None

    extra: Mapping[str, Any] = field(default_factory=dict)

    _memo: dict = field(default_factory=dict, init=False, repr=False, compare=False, hash=False)

    @property
    def request_controller(self) -> str:
        """Controller named by the incoming request parameters."""
        return str(self.params.get("controller") or self.controller_name or "")

    def param(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)

    def memoize(self, key: str, compute: Callable[[], Any]) -> Any:
        """Compute ``key`` once per context."""
        if key not in self._memo:
            self._memo[key] = compute()
        return self._memo[key]

    def replace(self, **changes: Any) -> "ViewContext":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_request(cls, request: HttpRequest, **state: Any) -> "ViewContext":
        """Build a context from a Django request plus controller-supplied state.

        ``controller`` and ``action`` fall back to the resolved URL route.
        """
        match = getattr(request, "resolver_match", None)
        route_kwargs = dict(getattr(match, "kwargs", None) or {})

        params: dict[str, Any] = {}
        for key in request.GET:
            params[key] = request.GET.get(key)
        if request.method == "POST":
            for key in request.POST:
                params[key] = request.POST.get(key)
        params.update(route_kwargs)
        params.update(state.pop("params", None) or {})

        controller = state.pop("controller_name", None) or params.get("controller") or ""
        action = state.pop("action_name", None) or params.get("action") or ""
        params.setdefault("controller", controller)
        params.setdefault("action", action)

        session = getattr(request, "session", None)
        if session is None:
            session = {}

        return cls(
            controller_name=str(controller),
            action_name=str(action),
            params=params,
            session=session,
            query_string=request.META.get("QUERY_STRING", ""),
            user=getattr(request, "user", None),
            **state,
        )


def fetch_path(data: Any, *path: Any) -> Any:
    """Walk nested mappings; ``None`` as soon as a step is missing."""
    current = data
    for key in path:
        if current is None:
            return None
        try:
            current = current.get(key)
        except AttributeError:
            return None
    return current
