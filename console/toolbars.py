"""Pick which toolbars a screen renders.

Toolbar definitions and their button logic belong to a separate builder; this
module only decides the toolbar names per ``<div>`` and hands the builder the
request state it needs.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from .context import ViewContext
from .visibility import display_back_button, inner_layout_present, render_gtl_view_tb


logger = logging.getLogger("console.toolbars")


class ToolbarChooser(Protocol):
    def center_toolbar_filename(self) -> str | None: ...

    def history_toolbar_filename(self) -> str | None: ...

    def x_view_toolbar_filename(self) -> str | None: ...

    def view_toolbar_filename(self) -> str | None: ...


_CHOOSER_FIELDS = (
    "center_toolbar", "display", "explorer", "gtl_type", "lastaction", "layout",
    "nodetype", "record", "sb", "showtype", "tabform", "view", "x_active_tree",
)

_BUILDER_FIELDS = (
    "display", "edit", "explorer", "gtl_type", "html", "lastaction", "layout",
    "perf_options", "record", "sb", "showtype", "tabform",
)


def toolbar_builder_options(ctx: ViewContext) -> dict[str, Any]:
    options = {name: getattr(ctx, name) for name in _BUILDER_FIELDS}
    options["settings"] = (ctx.extra or {}).get("settings", {})
    return options


def toolbar_chooser_options(ctx: ViewContext) -> dict[str, Any]:
    """State a chooser needs to pick toolbar names."""
    return {name: getattr(ctx, name) for name in _CHOOSER_FIELDS}


class ContextToolbarChooser:
    """Default chooser driven by the context alone."""

    def __init__(self, ctx: ViewContext):
        self.ctx = ctx

    def center_toolbar_filename(self) -> str | None:
        if self.ctx.center_toolbar:
            return self.ctx.center_toolbar
        # explorer screens keep a placeholder so ajax updates have a target
        return "blank_view_tb" if self.ctx.explorer else None

    def history_toolbar_filename(self) -> str | None:
        return "x_history_tb"

    def x_view_toolbar_filename(self) -> str | None:
        if self.ctx.record is not None and self.ctx.explorer:
            return "x_summary_view_tb"
        return "x_gtl_view_tb" if self.ctx.gtl_type else "blank_view_tb"

    def view_toolbar_filename(self) -> str | None:
        if render_gtl_view_tb(self.ctx):
            return "gtl_view_tb"
        if self.ctx.record is not None and self.ctx.lastaction == "show":
            return "summary_view_tb"
        return None


def calculate_toolbars(ctx: ViewContext, chooser: ToolbarChooser | None = None) -> dict[str, str | None]:
    """Map toolbar ``<div>`` names to toolbar identifiers."""
    chooser = chooser or ContextToolbarChooser(ctx)
    toolbars: dict[str, str | None] = {}
    inner = inner_layout_present(ctx)

    if inner:
        toolbars["history_tb"] = chooser.history_toolbar_filename()
    elif display_back_button(ctx):
        toolbars["summary_center_tb"] = "summary_center_restful_tb" if ctx.restful else "summary_center_tb"

    toolbars["center_tb"] = chooser.center_toolbar_filename()

    custom = ctx.custom_toolbar
    if custom:
        toolbars["custom_tb"] = "blank_view_tb" if custom == "blank" else "custom_buttons_tb"

    toolbars["view_tb"] = chooser.x_view_toolbar_filename() if inner else chooser.view_toolbar_filename()
    return toolbars


def build_toolbar(tb_name: str, builder: Callable[..., Any], ctx: ViewContext) -> Any:
    """Render one toolbar through ``builder(tb_name, **options)``."""
    logger.debug("Building toolbar %s for layout=%s", tb_name, ctx.layout)
    return builder(tb_name, **toolbar_builder_options(ctx))
