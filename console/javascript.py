"""Javascript lines returned to the browser for page updates."""

from __future__ import annotations

import json
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.safestring import SafeString, mark_safe

from .context import ViewContext
from .markup import valid_html_id


TIMER_SPANS = {
    "Monthly": (("weekly_span", "daily_span", "hourly_span"), "monthly_span"),
    "Weekly": (("daily_span", "hourly_span", "monthly_span"), "weekly_span"),
    "Daily": (("hourly_span", "monthly_span", "weekly_span"), "daily_span"),
    "Hourly": (("daily_span", "monthly_span", "weekly_span"), "hourly_span"),
}

ALL_TIMER_SPANS = ("daily_span", "hourly_span", "monthly_span", "weekly_span")

# Same escapes as django.utils.html.json_script.
_JSON_SCRIPT_ESCAPES = {
    ord(">"): "\\u003E",
    ord("<"): "\\u003C",
    ord("&"): "\\u0026",
}


def javascript_show(element: str) -> SafeString:
    return mark_safe(f"$('#{valid_html_id(element)}').show();")


def javascript_hide(element: str) -> SafeString:
    return mark_safe(f"$('#{valid_html_id(element)}').hide();")


def javascript_for_timer_type(timer_type: str | None) -> list[SafeString]:
    """Show the span for the chosen schedule interval and hide the others."""
    if timer_type is None:
        return []
    if timer_type in TIMER_SPANS:
        hidden, shown = TIMER_SPANS[timer_type]
        return [javascript_hide(span) for span in hidden] + [javascript_show(shown)]
    return [javascript_hide(span) for span in ALL_TIMER_SPANS]


def javascript_for_miq_button_visibility(display: Any, prefix: str | None = None) -> SafeString:
    state = "show" if display else "hide"
    if prefix:
        return mark_safe(f"miqButtons('{state}', '{prefix}');")
    return mark_safe(f"miqButtons('{state}');")


def javascript_for_miq_button_visibility_changed(ctx: ViewContext, changed: Any) -> SafeString | str:
    """Toggle the form buttons, only when the changed flag actually flipped."""
    if changed == ctx.session.get("changed"):
        return ""
    ctx.session["changed"] = changed
    return javascript_for_miq_button_visibility(changed)


def javascript_pf_toolbar_reload(div_id: str, toolbar: Any) -> SafeString:
    payload = json.dumps(toolbar, cls=DjangoJSONEncoder).translate(_JSON_SCRIPT_ESCAPES)
    return mark_safe(f"sendDataWithRx({{redrawToolbar: {payload}}});")
