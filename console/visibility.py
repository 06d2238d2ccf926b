"""Which parts of the console chrome show for the current screen.

Every predicate is a pure function of the :class:`ViewContext` and the lists
in :mod:`console.layouts`. The two that the layout templates ask repeatedly
(taskbar, inner layout) are memoized on the context.
"""

from __future__ import annotations

from typing import Any

from .context import ViewContext, fetch_path
from .layouts import (
    ADV_SEARCH_DISPLAY_LAYOUTS,
    ADVANCED_SEARCH_TREES,
    GTL_VIEW_LAYOUTS,
    LISTNAV_LAYOUTS,
    LISTNAV_SHOW_LIST_LAYOUTS,
    LISTNAV_VM_LAYOUTS,
    PRIMARY_NAV_ALIASES,
    QS_VALID_FIELD_TYPES,
    QS_VALID_USER_INPUT_OPERATORS,
    SAVED_REPORT_TREES,
    SHOW_ADV_SEARCH_LAYOUTS,
    TASK_LAYOUTS,
    TASKBAR_BLANK_LAYOUT_ACTIONS,
    TASKBAR_HIDDEN_LAYOUTS,
    VALID_PERF_PARENTS,
)
from .menu import item_in_section


BLANK_VIEW_TB = "blank_view_tb"


def taskbar_in_header(ctx: ViewContext) -> bool:
    def compute() -> bool:
        if ctx.show_taskbar is not None:
            return bool(ctx.show_taskbar)
        action = ctx.action_name or ""
        hidden = (
            (ctx.layout == "" and action in TASKBAR_BLANK_LAYOUT_ACTIONS)
            or ctx.layout in TASKBAR_HIDDEN_LAYOUTS
            or (ctx.layout == "configuration" and ctx.tabform != "ui_4")
        )
        return not hidden and not action.endswith("tagging_edit") and not ctx.explorer

    return ctx.memoize("taskbar_in_header", compute)


def toolbars_visible(ctx: ViewContext) -> bool:
    """True when any toolbar is set and none of them is the blank placeholder."""
    tb = ctx.toolbars or {}
    history, center, view = tb.get("history_tb"), tb.get("center_tb"), tb.get("view_tb")
    return bool(history or center or view) and history != BLANK_VIEW_TB and view != BLANK_VIEW_TB


def inner_layout_present(ctx: ViewContext) -> bool:
    def compute() -> bool:
        if ctx.inner_layout is not None:
            return bool(ctx.inner_layout)
        controller = ctx.request_controller
        action = ctx.param("action") or ctx.action_name
        return bool(
            ctx.explorer
            or action == "explorer"
            or (controller == "chargeback" and action == "chargeback")
            or (controller == "miq_ae_tools" and action in ("resolve", "show"))
            or (controller == "miq_policy" and action == "rsop")
            or controller == "miq_capacity"
        )

    return ctx.memoize("inner_layout_present", compute)


def display_back_button(ctx: ViewContext) -> bool:
    # Records without a name (MiqProvisionRequest, ...) never get a back button.
    if ctx.lastaction == "show" and ctx.display == "main":
        return False
    record = ctx.record
    return record is not None and getattr(record, "name", None) is not None


def display_adv_search(ctx: ViewContext) -> bool:
    return ctx.layout in ADV_SEARCH_DISPLAY_LAYOUTS


def clear_search_status(ctx: ViewContext) -> bool:
    """Show the clear_search link in the list view title."""
    return bool(ctx.edit and fetch_path(ctx.edit, "adv_search_applied", "text"))


def qs_show_user_input_checkbox(ctx: ViewContext) -> bool:
    """Offer the user input checkbox for an atom in the expression editor."""
    edit = ctx.edit or {}
    if not edit.get("adv_search_open"):
        return False
    exp = edit.get(ctx.expkey) or {}
    if exp.get("exp_key") not in QS_VALID_USER_INPUT_OPERATORS:
        return False

    typ = exp.get("exp_typ")
    if typ == "field":
        return str(fetch_path(exp, "val1", "type") or "") in QS_VALID_FIELD_TYPES
    if typ == "tag":
        return bool(exp.get("exp_tag"))
    if typ == "count":
        return bool(exp.get("exp_count"))
    return False


def adv_search_show_alias_checkbox(ctx: ViewContext) -> bool:
    return bool((ctx.edit or {}).get("adv_search_open"))


def saved_report_paging(ctx: ViewContext) -> bool:
    # saved reports page through stored html, not a live report object
    return bool((ctx.sb or {}).get("pages") and ctx.html and ctx.x_active_tree in SAVED_REPORT_TREES)


def perf_parent(ctx: ViewContext) -> bool:
    po = ctx.perf_options or {}
    return (
        po.get("model") == "VmOrTemplate"
        and po.get("typ") != "realtime"
        and po.get("parent") in VALID_PERF_PARENTS
    )


def render_gtl_view_tb(ctx: ViewContext) -> bool:
    return bool(
        ctx.layout in GTL_VIEW_LAYOUTS
        and ctx.gtl_type
        and not ctx.tagitems
        and not ctx.ownershipitems
        and not ctx.retireitems
        and not ctx.politems
        and not ctx.in_a_form
        and ctx.param("action") in ("show", "show_list")
    )


def _menu_click(ctx: ViewContext) -> bool:
    return bool((ctx.session or {}).get("menu_click"))


def render_listnav_filename(ctx: ViewContext) -> str | None:
    if (
        ctx.lastaction == "show_list"
        and not _menu_click(ctx)
        and ctx.layout in LISTNAV_SHOW_LIST_LAYOUTS
        and not ctx.in_a_form
    ):
        return "show_list"
    if ctx.compare:
        return "compare_sections"
    if ctx.explorer:
        return "explorer"
    if ctx.layout in LISTNAV_VM_LAYOUTS:
        return "vm"
    if ctx.layout in LISTNAV_LAYOUTS:
        return ctx.layout
    return None


def tree_with_advanced_search(ctx: ViewContext) -> bool:
    return (ctx.x_tree or {}).get("type") in ADVANCED_SEARCH_TREES


def show_adv_search(ctx: ViewContext) -> bool:
    list_screen = (
        ctx.lastaction == "show_list"
        and not _menu_click(ctx)
        and ctx.layout in SHOW_ADV_SEARCH_LAYOUTS
        and not ctx.in_a_form
    )
    explorer_tree = bool(ctx.explorer and ctx.x_tree and tree_with_advanced_search(ctx) and not ctx.record)
    return list_screen or explorer_tree


def show_advanced_search(ctx: ViewContext) -> bool:
    if not ctx.x_tree:
        return False
    return (tree_with_advanced_search(ctx) and not ctx.record) or bool(ctx.show_adv_search)


def render_flash_msg(ctx: ViewContext) -> bool:
    # The gtl partial already renders flash messages for these screens.
    controller = ctx.request_controller
    if controller == "miq_request" and ctx.lastaction == "show_list":
        return False
    if controller == "service" and ctx.lastaction == "show" and ctx.view:
        return False
    return True


def pagination_request(ctx: ViewContext) -> bool:
    return any(ctx.param(name) for name in ("ppsetting", "searchtag", "entry", "sortby", "sort_choice"))


def pagination_or_gtl_request(ctx: ViewContext) -> bool:
    # "type" is the gtl view type here
    return pagination_request(ctx) or bool(ctx.param("type")) or bool(ctx.param("page"))


def db_for_quadicon(ctx: ViewContext) -> str:
    if ctx.layout == "ems_infra":
        return "ems"
    if ctx.layout == "ems_cloud":
        return "ems_cloud"
    return "ems_container"


def primary_nav_class(ctx: ViewContext, nav_id: str) -> str | None:
    test_layout = ctx.layout
    if test_layout in TASK_LAYOUTS:
        test_layout = "my_tasks"
    test_layout = PRIMARY_NAV_ALIASES.get(test_layout, test_layout)
    return "active" if item_in_section(test_layout, nav_id) else None


def secondary_nav_class(ctx: ViewContext, item: Any) -> str | None:
    ids = [getattr(child, "id", None) for child in (getattr(item, "items", None) or ())]
    return "active" if ctx.layout in ids else None


def tertiary_nav_class(ctx: ViewContext, item: Any) -> str | None:
    return "active" if getattr(item, "id", None) == ctx.layout else None
