"""Template access to the console view helpers.

Tags that build links never break a page: when a lookup fails they log and
render an empty string (or "#" for hrefs).
"""

from __future__ import annotations

import logging

from django import template

from console import icons, markup, routing, visibility
from console.compressed_ids import to_cid
from console.context import ViewContext
from console.permissions import role_allows


logger = logging.getLogger("console.templatetags")

register = template.Library()


def _view_context(context) -> ViewContext:
    ctx = context.get("view_context")
    if ctx is not None:
        return ctx
    request = context.get("request")
    if request is not None:
        return getattr(request, "view_context", None) or ViewContext.from_request(request)
    return ViewContext()


@register.simple_tag(takes_context=True)
def record_url(context, record, action: str = "show") -> str:
    """Usage: {% record_url vm "show" %}"""
    try:
        return routing.url_for_record(record, action, ctx=_view_context(context))
    except Exception:
        logger.warning("record_url failed for %r", record, exc_info=True)
        return "#"


@register.simple_tag(takes_context=True)
def db_url(context, db: str, action: str = "show", item=None) -> str:
    try:
        return routing.url_for_db(db, action, item, ctx=_view_context(context))
    except Exception:
        logger.warning("db_url failed for db=%s", db, exc_info=True)
        return "#"


@register.simple_tag(takes_context=True)
def view_url(context, view, parent=None) -> str:
    try:
        return routing.view_to_url(view, parent, ctx=_view_context(context))
    except Exception:
        logger.warning("view_url failed", exc_info=True)
        return "#"


@register.simple_tag(takes_context=True)
def db_controller(context, db: str, action: str = "show") -> str:
    controller, _action = routing.db_to_controller(db, action, ctx=_view_context(context))
    return controller


@register.simple_tag(takes_context=True)
def listicon(context, db: str, row):
    try:
        return icons.listicon_tag(db, row, _view_context(context))
    except Exception:
        logger.warning("listicon failed for db=%s", db, exc_info=True)
        return ""


@register.simple_tag(takes_context=True)
def li_link(context, **kwargs):
    """Usage: {% li_link table="host" record=host count=host_count %}"""
    try:
        return markup.li_link(kwargs, _view_context(context))
    except Exception:
        logger.warning("li_link failed", exc_info=True)
        return ""


@register.simple_tag(takes_context=True)
def single_relationship_link(context, record, table_name: str, property_name=None):
    try:
        return markup.single_relationship_link(record, table_name, property_name, _view_context(context))
    except Exception:
        logger.warning("single_relationship_link failed table=%s", table_name, exc_info=True)
        return ""


@register.simple_tag(takes_context=True)
def multiple_relationship_link(context, record, table_name: str):
    try:
        return markup.multiple_relationship_link(record, table_name, _view_context(context))
    except Exception:
        logger.warning("multiple_relationship_link failed table=%s", table_name, exc_info=True)
        return ""


@register.simple_tag(takes_context=True)
def primary_nav_class(context, nav_id: str):
    return visibility.primary_nav_class(_view_context(context), nav_id) or ""


@register.simple_tag(takes_context=True)
def secondary_nav_class(context, item):
    return visibility.secondary_nav_class(_view_context(context), item) or ""


@register.simple_tag(takes_context=True)
def tertiary_nav_class(context, item):
    return visibility.tertiary_nav_class(_view_context(context), item) or ""


@register.simple_tag(takes_context=True)
def listnav_filename(context) -> str:
    return visibility.render_listnav_filename(_view_context(context)) or ""


@register.simple_tag
def documentation_link(url=None, subject: str = ""):
    return markup.documentation_link(url, subject)


@register.filter(name="valid_html_id")
def valid_html_id(value) -> str:
    try:
        return markup.valid_html_id(value)
    except ValueError:
        logger.warning("Invalid HTML id %r", value)
        return ""


@register.filter(name="cid")
def cid(value) -> str:
    return to_cid(value) or ""


@register.filter(name="hover_class")
def hover_class(item) -> str:
    return markup.hover_class(item or {})


@register.filter(name="password_placeholder")
def password_placeholder(value) -> str:
    return markup.placeholder_if_present(value)


@register.filter(name="header_text")
def header_text(value) -> str:
    return markup.translate_header_text(str(value))


@register.filter(name="role_allows")
def role_allows_filter(user, feature: str) -> bool:
    """Usage: {% if request.user|role_allows:"vm_show" %}"""
    return role_allows(feature=feature, user=user)
