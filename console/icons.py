"""List row icons.

Rows either get a font icon (``pficon``/``fa``/``product`` classes) or an image
from the static tree. Class names and path templates must stay exactly as the
stylesheets and image sets expect them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from django.forms.utils import flatatt
from django.templatetags.static import static
from django.utils.html import format_html
from django.utils.safestring import SafeString
from django.utils.translation import gettext as _

from .compressed_ids import from_cid
from .context import ViewContext
from .model_types import underscore


logger = logging.getLogger("console.icons")

GLYPH_DBS = frozenset({"MiqReportResult", "MiqSchedule", "MiqUserRole", "MiqWidget"})

REPORT_RESULT_GLYPHS = {
    "error": "pficon pficon-warning-triangle-o",
    "finished": "pficon pficon-ok",
    "running": "pficon pficon-running",
    "queued": "fa fa-pause",
}

WIDGET_CONTENT_GLYPHS = {
    "chart": "fa fa-pie-chart",
    "menu": "fa fa-share-square-o",
    "report": "fa fa-file-text-o",
    "rss": "fa fa-rss",
}

WIDGET_STATUS_GLYPHS = {
    "complete": "pficon pficon-ok",
    "queued": "fa fa-pause",
    "running": "pficon pficon-running",
    "error": "pficon pficon-warning-triangle-o",
}


@dataclass(frozen=True)
class ListIcon:
    icon_class: str | None = None
    image_path: str | None = None
    title: str | None = None
    secondary_class: str | None = None


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _lower(value: Any) -> str:
    return str(value or "").lower()


def _target(ctx: ViewContext, row: Any) -> Any:
    row_id = _field(row, "id")
    key = from_cid(row_id if row_id is not None else ctx.record_id)
    return (ctx.targets_hash or {}).get(key)


def _task_icon(row: Any) -> ListIcon | None:
    state = _lower(_field(row, "state"))
    status = _field(row, "status")
    if state == "finished" and status:
        title = _("Status = %(row)s") % {"row": str(status).capitalize()}
        cancel_msg = "cancel" in str(_field(row, "message") or "")
        status = _lower(status)
        icon = None
        if status == "ok" and not cancel_msg:
            icon = "pficon pficon-ok"
        elif status == "error" or cancel_msg:
            icon = "pficon pficon-error-circle-o"
        elif status == "warn":
            icon = "pficon pficon-warning-triangle-o"
        return ListIcon(icon_class=icon, title=title) if icon else None
    if state in ("queued", "waiting_to_start"):
        return ListIcon(icon_class="fa fa-step-forward", title=_("Status = Queued"))
    if state not in ("finished", "queued", "waiting_to_start"):
        return ListIcon(icon_class="pficon pficon-running", title=_("Status = Running"))
    return None


def _vendor_image(vendor: Any) -> str:
    return f"svg/vendor-{vendor or 'unknown'}.svg"


def image_icon_for(db: str, row: Any, ctx: ViewContext) -> ListIcon:
    default = ListIcon(image_path=f"100/{underscore(db)}.png")

    if db in ("Job", "MiqTask"):
        return _task_icon(row) or default

    if db in ("Vm", "VmOrTemplate"):
        vm = _target(ctx, row)
        return ListIcon(image_path=_vendor_image(getattr(vm, "vendor", None) if vm else None))

    if db == "Host":
        host = _target(ctx, row)
        vendor = _lower(getattr(host, "vmm_vendor_display", None)) if host else None
        return ListIcon(image_path=_vendor_image(vendor))

    if db == "MiqAction":
        action = (ctx.targets_hash or {}).get(_field(row, "id"))
        return ListIcon(icon_class=(getattr(action, "fonticon", None) if action else None) or "product product-action")

    if db == "MiqProvision":
        return ListIcon(image_path="100/miq_request.png")

    if db == "MiqWorker":
        worker = _target(ctx, row)
        if worker is None:
            logger.debug("No worker in targets for row %s", _field(row, "id"))
            return default
        return ListIcon(image_path=f"100/processmanager-{getattr(worker, 'normalized_type', '')}.png")

    if db == "ExtManagementSystem":
        ems = _target(ctx, row)
        return ListIcon(image_path=_vendor_image(getattr(ems, "image_name", None) if ems else None))

    if db == "Tenant":
        divisible = _field(row, "divisible")
        return ListIcon(icon_class="pficon pficon-tenant" if divisible else "pficon pficon-project")

    return default


def widget_status_class(widget: Any) -> str | None:
    return WIDGET_STATUS_GLYPHS.get(_lower(_field(widget, "status")))


def glyph_icon_for(db: str, row: Any) -> ListIcon:
    if db == "MiqSchedule":
        return ListIcon(icon_class="fa fa-clock-o")
    if db == "MiqReportResult":
        return ListIcon(icon_class=REPORT_RESULT_GLYPHS.get(_lower(_field(row, "status")), "fa fa-arrow-right"))
    if db == "MiqUserRole":
        return ListIcon(icon_class="product product-role")
    if db == "MiqWidget":
        # second icon shows the widget status
        return ListIcon(
            icon_class=WIDGET_CONTENT_GLYPHS.get(_lower(_field(row, "content_type"))),
            secondary_class=widget_status_class(row),
        )
    return ListIcon()


def icon_for(db: str, row: Any, ctx: ViewContext | None = None) -> ListIcon:
    """Icon class or image path (plus title) for one list row."""
    if db in GLYPH_DBS:
        return glyph_icon_for(db, row)
    return image_icon_for(db, row, ctx or ViewContext())


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


def _i_tag(icon_class: str | None, title: str | None = None, inner: str = "") -> SafeString:
    return format_html("<i{}>{}</i>", flatatt({"class": icon_class, "title": title}), inner)


def render_icon(icon: ListIcon) -> SafeString:
    if icon.image_path and not icon.icon_class:
        return format_html("<img{} />", flatatt({"src": static(icon.image_path), "title": icon.title}))
    inner = _i_tag(icon.secondary_class) if icon.secondary_class else ""
    return _i_tag(icon.icon_class, icon.title, inner)


def listicon_image_tag(db: str, row: Any, ctx: ViewContext | None = None) -> SafeString:
    return render_icon(image_icon_for(db, row, ctx or ViewContext()))


def listicon_glyphicon_tag_for_widget(widget: Any) -> str | None:
    return widget_status_class(widget)


def listicon_glyphicon_tag(db: str, row: Any) -> SafeString:
    return render_icon(glyph_icon_for(db, row))


def listicon_tag(db: str, row: Any, ctx: ViewContext | None = None) -> SafeString:
    if db in GLYPH_DBS:
        return listicon_glyphicon_tag(db, row)
    return listicon_image_tag(db, row, ctx)
