"""Small HTML fragments used across console templates.

Everything returns a ``SafeString`` built with ``format_html`` so callers can
drop the result straight into a template. Content passed in is escaped unless
it is already marked safe.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from django.conf import settings
from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe
from django.utils.translation import gettext as _

from .context import ViewContext
from .dictionary import ui_lookup
from .model_types import demodulize, pluralize, titleize, type_name_of
from .permissions import role_allows
from .routing import polymorphic_path, restful_routed, url_for_only_path


CHECK_FOR_CHANGES = "return miqCheckForChanges()"

_INVALID_ID_RE = re.compile(r"[^\w_]", re.ASCII)


def valid_html_id(value: Any) -> str:
    html_id = str(value).replace("::", "__")
    if _INVALID_ID_RE.search(html_id):
        raise ValueError("HTML ID is not valid")
    return html_id


def content_tag(tag: str, content: Any = "", attrs: Mapping[str, Any] | None = None) -> SafeString:
    return format_html("<{}{}>{}</{}>", mark_safe(tag), flatatt(dict(attrs or {})), content, mark_safe(tag))


def link_to(text: Any, href: str, attrs: Mapping[str, Any] | None = None) -> SafeString:
    merged = {"href": href}
    merged.update(attrs or {})
    return content_tag("a", text, merged)


def miq_accordion_panel(title: Any, condition: bool, panel_id: Any, body: Any = "") -> SafeString:
    """Panel that starts collapsed unless ``condition`` holds."""
    panel_id = valid_html_id(panel_id)
    heading_link = link_to(
        title,
        f"#{panel_id}",
        {
            "data-parent": "#accordion",
            "data-toggle": "collapse",
            "class": "" if condition else "collapsed",
        },
    )
    heading = content_tag("div", content_tag("h4", heading_link, {"class": "panel-title"}), {"class": "panel-heading"})
    collapse = content_tag(
        "div",
        content_tag("div", body, {"class": "panel-body"}),
        {"id": panel_id, "class": f"panel-collapse collapse {'in' if condition else ''}"},
    )
    return content_tag("div", heading + collapse, {"class": "panel panel-default"})


def hidden_tag_if(tag: str, condition: bool, options: Mapping[str, Any] | None = None,
                  content: Any = None) -> SafeString:
    """``tag`` hidden with an inline style when ``condition`` holds.

    Without content only the opening tag is returned.
    """
    attrs = dict(options or {})
    if condition:
        attrs["style"] = "display: none"
    if content is None:
        return format_html("<{}{}>", mark_safe(tag), flatatt(attrs))
    return content_tag(tag, content, attrs)


def hidden_div_if(condition: bool, options: Mapping[str, Any] | None = None, content: Any = None) -> SafeString:
    return hidden_tag_if("div", condition, options, content)


def hidden_span_if(condition: bool, options: Mapping[str, Any] | None = None, content: Any = None) -> SafeString:
    return hidden_tag_if("span", condition, options, content)


def hover_class(item: Mapping[str, Any]) -> str:
    value = item.get("value")
    if item.get("link") or (isinstance(value, (list, tuple)) and any(v.get("link") for v in value)):
        return ""
    return "no-hover"


def miq_tab_header(tab_id: str, active: str | None = None, options: Mapping[str, Any] | None = None,
                   content: Any = "") -> SafeString:
    options = options or {}
    attrs: dict[str, Any] = {
        "class": f"{options.get('class') or ''} {'active' if active == tab_id else ''}",
        "id": f"{tab_id}_tab",
    }
    if "ng-click" in options:
        attrs["ng-click"] = options["ng-click"]
    if "onclick" in options:
        attrs["onclick"] = options["onclick"]
    inner = content_tag("a", content, {"href": f"#{tab_id}", "data-toggle": "tab"})
    return content_tag("li", inner, attrs)


def miq_tab_content(tab_id: str, active: str | None = None, options: Mapping[str, Any] | None = None,
                    content: Any = "") -> SafeString:
    """Tab pane; lazy panes that are not active render empty."""
    options = options or {}
    lazy = bool(options.get("lazy")) and active != tab_id

    classname = ["tab-pane"]
    if options.get("class"):
        classname.append(options["class"])
    if active == tab_id:
        classname.append("active")
    if lazy:
        classname.append("lazy")

    return content_tag("div", "" if lazy else content, {"id": tab_id, "class": " ".join(classname)})


def build_link_text(args: Mapping[str, Any]) -> tuple[str | None, str | None]:
    link_text = title = None
    if "tables" in args:
        entity_name = ui_lookup(tables=args["tables"])
        label = args["link_text"] if "link_text" in args else entity_name
        link_text = f"{label} ({args.get('count')})"
        title = _("Show all %(names)s") % {"names": entity_name}
    elif "text" in args:
        count = f"({args['count']})" if args.get("count") else ""
        link_text = f"{args['text']} {count}"
    elif "table" in args:
        entity_name = ui_lookup(table=args["table"])
        link_text = args["link_text"] if "link_text" in args else entity_name
        if "count" in args:
            link_text = f"{link_text} ({args['count']})"
        title = _("Show %(name)s") % {"name": entity_name}
    if "title" in args:
        title = args["title"]
    return link_text, title


def li_link(args: Mapping[str, Any], ctx: ViewContext | None = None) -> SafeString:
    """List item linking to a related entity, or a disabled item.

    ``args``: ``if`` (condition, defaults to true; a ``count`` of 0 makes it
    false), one of ``table``/``tables``/``text``, optional ``link_text``,
    ``display``, ``count``, ``title``, and the target: ``record`` or
    ``record_id`` with optional ``controller``/``action``.
    """
    args = dict(args)
    if args.get("count") is not None:
        args["if"] = args["count"] != 0
    args.setdefault("if", True)

    link_text, title = build_link_text(args)

    if not args["if"]:
        disabled = link_to(link_text, "#", {"title": args.get("disabled_title")})
        return content_tag("li", disabled, {"class": "disabled"})

    tag_attrs: dict[str, Any] = {"title": title}
    if args.get("check_changes") or args.get("check_changes") is None:
        tag_attrs["onclick"] = CHECK_FOR_CHANGES

    record = args.get("record")
    if record is not None and restful_routed(record):
        link_args = {k: v for k, v in (("display", args.get("display")), ("vat", args.get("vat"))) if v is not None}
        href = polymorphic_path(record, **link_args)
    else:
        href = url_for_only_path(
            ctx,
            controller=args.get("controller"),
            action=args.get("action") or "show",
            id=record.id if record is not None else args.get("record_id"),
            display=args.get("display"),
        )
    return content_tag("li", link_to(link_text, href, tag_attrs))


def link_image_if(cond: bool, image: str, opts_true: Mapping[str, Any] | None = None,
                  opts_false: Mapping[str, Any] | None = None, link: str = "#",
                  opts_link: Mapping[str, Any] | None = None) -> SafeString:
    """Plain image when ``cond`` holds, otherwise the image wrapped in a link."""
    if cond:
        return format_html("<img{} />", flatatt({"src": image, **(opts_true or {})}))
    img = format_html("<img{} />", flatatt({"src": image, **(opts_false or {})}))
    return link_to(img, link, opts_link)


def link_to_with_icon(link_text: Any, href: str, tag_args: Mapping[str, Any] | None = None) -> SafeString:
    attrs = {"onclick": CHECK_FOR_CHANGES}
    attrs.update(tag_args or {})
    return link_to(link_text, href, attrs)


def single_relationship_link(record: Any, table_name: str, property_name: str | None = None,
                             ctx: ViewContext | None = None) -> SafeString | str:
    entity = getattr(record, property_name or table_name, None)
    name = ui_lookup(table=table_name)
    if entity is None or not role_allows(feature=f"{table_name}_show"):
        return ""

    if restful_routed(entity):
        href = polymorphic_path(entity)
    else:
        href = url_for_only_path(ctx, controller=table_name, action="show", id=str(entity.id))
    title = _("Show this %(entity_name)s's parent %(linked_entity_name)s") % {
        "entity_name": titleize(demodulize(type_name_of(record))),
        "linked_entity_name": name,
    }
    return content_tag("li", link_to(f"{name}: {entity.name}", href, {"title": title}))


def _responds_to(record: Any, association: str) -> bool:
    if hasattr(record, association):
        return True
    check = getattr(record, "has_association", None)
    return bool(check and check(association))


def multiple_relationship_link(record: Any, table_name: str, ctx: ViewContext | None = None) -> SafeString | str:
    if not role_allows(feature=f"{table_name}_show_list"):
        return ""
    if table_name == "container_route" and not _responds_to(record, "container_routes"):
        return ""

    plural = ui_lookup(tables=table_name)
    association = pluralize(table_name)
    count = record.number_of(association)
    label = f"{plural} ({count})"
    if count == 0:
        return content_tag("li", link_to(label, "#"), {"class": "disabled"})

    title = _("Show %(plural_linked_name)s") % {"plural_linked_name": plural}
    if restful_routed(record):
        href = polymorphic_path(record, display=association)
    else:
        ctx = ctx or ViewContext()
        href = url_for_only_path(ctx, controller=ctx.controller_name, action="show", id=record.id,
                                 display=association)
    return content_tag("li", link_to(label, href, {"title": title}))


def documentation_link(url: str | None = None, documentation_subject: str = "") -> SafeString | str:
    if not url:
        return ""
    text = _("For more information, visit the %(subject)s documentation.") % {"subject": documentation_subject}
    return link_to(text, url, {"rel": "external", "class": "documentation-link", "target": "_blank"})


def placeholder_if_present(password: Any) -> str:
    return "●" * 8 if str(password or "").strip() else ""


def pdf_page_size_style(ctx: ViewContext) -> str:
    options = ctx.options or {}
    return f"{options.get('page_size') or 'US-Legal'} {options.get('page_layout') or ''}"


def translate_header_text(text: str) -> str:
    if text == "Region":
        return f"{getattr(settings, 'CONSOLE_PRODUCT_NAME', 'ManageIQ')} {_(text)}"
    return _(text)
