from __future__ import annotations

import logging

from .context import ViewContext
from .visibility import inner_layout_present, render_flash_msg, taskbar_in_header


logger = logging.getLogger("console.context_processors")


def view_dispatch(request):
    """Expose the view context and the chrome flags used by the base layout.

    Never fails a render; flags fall back to False.
    """
    ctx = getattr(request, "view_context", None)
    if ctx is None:
        ctx = ViewContext.from_request(request)

    data = {
        "view_context": ctx,
        "taskbar_in_header": False,
        "inner_layout_present": False,
        "render_flash_msg": False,
    }
    try:
        data["taskbar_in_header"] = taskbar_in_header(ctx)
        data["inner_layout_present"] = inner_layout_present(ctx)
        data["render_flash_msg"] = render_flash_msg(ctx)
    except Exception:
        logger.exception("view_dispatch context failed path=%s", getattr(request, "path", ""))
    return data
