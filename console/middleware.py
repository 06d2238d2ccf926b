from __future__ import annotations

from django.http import HttpRequest

from .context import ViewContext


class ViewContextMiddleware:
    """Attach ``request.view_context`` once the URL has been resolved."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest):
        return self.get_response(request)

    def process_view(self, request: HttpRequest, view_func, view_args, view_kwargs):
        request.view_context = ViewContext.from_request(request)
        return None
