"""Route probes.

Controllers live elsewhere; these endpoints only report how a console path
resolved, which keeps link generation testable end to end.
"""

from __future__ import annotations

from django.http import HttpRequest, JsonResponse

from .compressed_ids import from_cid
from .context import ViewContext
from .routing import restful_routed_action


def route_probe(request: HttpRequest, controller: str, action: str, id: str | None = None) -> JsonResponse:
    ctx = ViewContext.from_request(request)
    return JsonResponse(
        {
            "controller": ctx.controller_name,
            "action": ctx.action_name,
            "id": id,
            "record_id": from_cid(id),
            "query": {k: request.GET.get(k) for k in request.GET},
            "restful": restful_routed_action(ctx),
        }
    )


def resource_probe(request: HttpRequest, controller: str, pk: str | None = None) -> JsonResponse:
    action = "show" if pk is not None else "show_list"
    ctx = ViewContext.from_request(request, action_name=action)
    return JsonResponse(
        {
            "controller": ctx.controller_name,
            "action": ctx.action_name,
            "id": pk,
            "record_id": from_cid(pk),
            "query": {k: request.GET.get(k) for k in request.GET},
            "restful": True,
        }
    )
