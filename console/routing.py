"""Map domain types and records onto controller/action paths.

``db_to_controller`` is the heart of it: an ordered override table, two
provider-name rules, then the snake-cased type name. Everything else builds
paths on top of it through Django's URL resolver.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Any, Iterable, Mapping

from django.http import QueryDict
from django.urls import NoReverseMatch, reverse
from django.utils.http import urlencode
from django.utils.translation import gettext as _

from .compressed_ids import to_cid
from .context import ViewContext
from .dictionary import ui_lookup
from .model_types import (
    ANSIBLE_TOWER_JOB,
    CLOUD_MANAGER,
    CLOUD_TEMPLATE,
    CLOUD_VM,
    CONTAINER_MANAGER,
    EMBEDDED_AUTHENTICATION,
    EMBEDDED_PLAYBOOK,
    EMBEDDED_SCRIPT_SOURCE,
    EXT_MANAGEMENT_SYSTEM,
    INFRA_MANAGER,
    INFRA_TEMPLATE,
    INFRA_VM,
    VM_OR_TEMPLATE,
    Record,
    base_class,
    base_model,
    controller_model,
    db_name,
    is_kind_of,
    pluralize,
    route_key,
    tableize,
    type_name_of,
    underscore,
)


logger = logging.getLogger("console.routing")

EMPTY_CONTEXT = ViewContext()

TREND_MODEL = "VimPerformanceTrend"

# Markers used in DB_CONTROLLERS
CURRENT_CONTROLLER = "<current controller>"
LAST_ACTION = "<last action>"

# db -> (controller, action). An action of None keeps the requested one.
DB_CONTROLLERS: dict[str, tuple[str, str | None]] = {
    "ActionSet": ("miq_action", "show_set"),
    "AutomationRequest": ("miq_request", "show"),
    "ConditionSet": ("condition", None),
    EMBEDDED_SCRIPT_SOURCE: ("ansible_repository", None),
    "ScanItemSet": ("ops", "ap_show"),
    "MiqEventDefinition": ("event", "_none_"),
    "User": ("vm", LAST_ACTION),
    "Group": ("vm", LAST_ACTION),
    "Patch": ("vm", LAST_ACTION),
    "GuestApplication": ("vm", LAST_ACTION),
    "MiqReportResult": ("report", "show_saved"),
    "MiqAeClass": ("miq_ae_class", "show_instances"),
    "MiqAeInstance": ("miq_ae_class", "show_details"),
    "SecurityGroup": ("security_group", "show"),
    "ServiceResource": ("catalog", None),
    "ServiceTemplate": ("catalog", None),
    EMBEDDED_PLAYBOOK: ("ansible_playbook", None),
    EMBEDDED_AUTHENTICATION: ("ansible_credential", None),
    "MiqWorker": (CURRENT_CONTROLLER, "diagnostics_worker_selected"),
    "OrchestrationStackOutput": (CURRENT_CONTROLLER, None),
    "OrchestrationStackParameter": (CURRENT_CONTROLLER, None),
    "OrchestrationStackResource": (CURRENT_CONTROLLER, None),
    "ManageIQ::Providers::CloudManager::OrchestrationStack": (CURRENT_CONTROLLER, None),
    ANSIBLE_TOWER_JOB: (CURRENT_CONTROLLER, None),
    "ContainerVolume": ("persistent_volume", None),
}

_MANAGER_RE = re.compile(r"\AManageIQ::Providers::(\w+)Manager\Z", re.ASCII)
_MANAGER_CHILD_RE = re.compile(r"\AManageIQ::Providers::(\w+)Manager::(\w+)\Z", re.ASCII)

# Items shown through the record currently selected on screen.
VM_CHILD_DBS = frozenset({"Account", "User", "Group", "Patch", "GuestApplication"})
HOST_CHILD_DBS = frozenset({"Patch", "GuestApplication"})
FOREMAN_CHILD_DBS = frozenset({"ConfiguredSystem", "ConfigurationProfile", "EmsFolder"})

# Lists of other CIs shown inside an explorer keep their own controller.
EXPLORER_FOREIGN_LIST_DBS = frozenset({
    "SecurityGroup",
    "FloatingIp",
    "NetworkRouter",
    "NetworkPort",
    "CloudNetwork",
    "CloudSubnet",
    "LoadBalancer",
    "CloudVolume",
})

# Provider controllers whose list links go to their resource collection.
COLLECTION_CONTROLLERS = (
    "ems_cloud",
    "ems_infra",
    "ems_physical_infra",
    "ems_container",
    "ems_middleware",
    "ems_datawarehouse",
    "ems_network",
)

STACK_ASSOCIATIONS = {
    "OrchestrationStackOutput": "outputs",
    "OrchestrationStackParameter": "parameters",
    "OrchestrationStackResource": "resources",
}

TABLEIZED_ASSOCIATION_DBS = frozenset({
    "AdvancedSetting",
    "Filesystem",
    "FirewallRule",
    "GuestApplication",
    "Patch",
    "RegistryItem",
    "ScanHistory",
    "OpenscapRuleResult",
})

VM_MODELS = (CLOUD_VM, INFRA_VM, CLOUD_TEMPLATE, INFRA_TEMPLATE)

VM_CONTROLLERS = {
    CLOUD_TEMPLATE: "vm_cloud",
    CLOUD_VM: "vm_cloud",
    INFRA_TEMPLATE: "vm_infra",
    INFRA_VM: "vm_infra",
}

ACTIVE_TREE_VM_MODELS = {
    "instances_filter_tree": CLOUD_VM,
    "images_filter_tree": CLOUD_TEMPLATE,
    "vms_filter_tree": INFRA_VM,
    "templates_filter_tree": INFRA_TEMPLATE,
    "templates_images_filter_tree": "MiqTemplate",
    "vms_instances_filter_tree": "Vm",
}

PAGING_EXCLUDED_PARAMS = frozenset({
    "button", "flash_msg", "page", "ppsetting", "pressed", "sortby", "sort_choice", "type",
})

_PRESSED_RE = re.compile(r"^(ems_cluster|miq_template|infra_networking)_(.*)$", re.DOTALL)


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def _to_param(value: Any) -> str | None:
    if value is None:
        return None
    rid = getattr(value, "id", value)
    if rid is None or rid == "":
        return None
    return str(rid)


def _with_query(path: str, query: Mapping[str, Any]) -> str:
    clean = {k: v for k, v in query.items() if v is not None}
    if not clean:
        return path
    return f"{path}?{urlencode(clean, doseq=True)}"


def url_for_only_path(ctx: ViewContext | None = None, *, controller: str | None = None,
                      action: str | None = None, id: Any = None,
                      query: Mapping[str, Any] | None = None, **params: Any) -> str:
    """Host-less path for a controller action.

    Missing controller/action fall back to the current request's.
    Raises ``NoReverseMatch`` when no route fits.
    """
    ctx = ctx or EMPTY_CONTEXT
    controller = controller or ctx.request_controller
    action = action or ctx.action_name or "index"

    kwargs = {"controller": str(controller), "action": str(action)}
    pk = _to_param(id)
    if pk is None:
        path = reverse("console:legacy-action", kwargs=kwargs)
    else:
        kwargs["id"] = pk
        path = reverse("console:legacy-action-id", kwargs=kwargs)

    merged = dict(query or {})
    merged.update(params)
    return _with_query(path, merged)


def collection_path(key: str) -> str:
    return reverse(f"console:{key}-list")


def polymorphic_path(record: Any, **query: Any) -> str:
    key = route_key(type_name_of(record))
    if key is None:
        raise NoReverseMatch(f"No resource route for {type_name_of(record)!r}")
    path = reverse(f"console:{key}-detail", kwargs={"pk": _to_param(record)})
    return _with_query(path, query)


def restful_routed(record_or_model: Any) -> bool:
    key = route_key(type_name_of(record_or_model))
    if key is None:
        return False
    try:
        collection_path(key)
    except NoReverseMatch:
        return False
    return True


def restful_routed_action(ctx: ViewContext | None = None, controller: str | None = None,
                          action: str | None = None) -> bool:
    ctx = ctx or EMPTY_CONTEXT
    controller = controller if controller is not None else ctx.controller_name
    action = action if action is not None else ctx.action_name
    model = controller_model(controller)
    if model is None:
        return False
    return restful_routed(model) and action not in ("explorer", "show_list")


def route_exists(ctx: ViewContext | None = None, **kwargs: Any) -> bool:
    try:
        url_for_only_path(ctx, **kwargs)
    except NoReverseMatch:
        return False
    return True


# ---------------------------------------------------------------------------
# Controller/action resolution
# ---------------------------------------------------------------------------


def db_to_controller(db: str, action: str | None = "show", *,
                     ctx: ViewContext | None = None) -> tuple[str, str | None]:
    """Convert a db name to a controller name and an action."""
    ctx = ctx or EMPTY_CONTEXT
    db = str(db or "")
    if ctx.explorer:
        action = "x_show"

    if db in DB_CONTROLLERS:
        controller, override = DB_CONTROLLERS[db]
        if controller == CURRENT_CONTROLLER:
            controller = ctx.request_controller
        if override == LAST_ACTION:
            action = ctx.lastaction
        elif override is not None:
            action = override
        return controller, action

    if db == "MiqSchedule":
        if ctx.request_controller == "report":
            return "report", "show_schedule"
        return "ops", "schedule_show"

    m = _MANAGER_RE.match(db)
    if m:
        return f"ems_{underscore(m.group(1))}", action

    m = _MANAGER_CHILD_RE.match(db)
    if m:
        return f"{underscore(m.group(2))}_{underscore(m.group(1))}", action

    return underscore(db), action


def model_to_controller(record: Any) -> str:
    # NB: differs from controller_for_vm, which splits VMs by provider family.
    return underscore(base_model(type_name_of(record)))


def controller_to_model(ctx: ViewContext | None = None, controller: str | None = None) -> str | None:
    ctx = ctx or EMPTY_CONTEXT
    model = controller_model(controller if controller is not None else ctx.controller_name)
    if model in VM_MODELS:
        return VM_OR_TEMPLATE
    return model


def controller_model_name(controller: str) -> str:
    return ui_lookup(model=controller_model(controller) or "")


def model_for_ems(record: Any) -> str:
    t = type_name_of(record)
    if not is_kind_of(t, EXT_MANAGEMENT_SYSTEM):
        raise ValueError(_("Record is not ExtManagementSystem class"))
    if is_kind_of(t, CLOUD_MANAGER):
        return CLOUD_MANAGER
    if is_kind_of(t, CONTAINER_MANAGER):
        return CONTAINER_MANAGER
    return INFRA_MANAGER


def model_for_vm(record: Any) -> str | None:
    t = type_name_of(record)
    if not is_kind_of(t, VM_OR_TEMPLATE):
        raise ValueError(_("Record is not VmOrTemplate class"))
    for model in VM_MODELS:
        if is_kind_of(t, model):
            return model
    return None


def controller_for_vm(model: str | None) -> str:
    return VM_CONTROLLERS.get(str(model or ""), "vm_or_template")


def controller_for_stack(model: str) -> str:
    if model == ANSIBLE_TOWER_JOB:
        return "configuration_job"
    return underscore(model)


def vm_model_from_active_tree(tree: str | None) -> str | None:
    return ACTIVE_TREE_VM_MODELS.get(str(tree or ""))


def pressed2model_action(pressed: str) -> tuple[str, ...]:
    m = _PRESSED_RE.match(pressed)
    if m:
        return m.group(1), m.group(2)
    return tuple(pressed.split("_", 1))


def model_report_type(model: str | None) -> str | None:
    """Report family (performance/trend/chargeback*) for a report model."""
    if model:
        if model.endswith(("Performance", "MetricsRollup")):
            return "performance"
        if model == TREND_MODEL:
            return "trend"
        if model.startswith("Chargeback"):
            return model.lower()
    return None


def field_to_col(field: str) -> str | None:
    """``Vm.hardware.disks-size`` -> ``disks.size``."""
    parts = field.split("-")
    dbs = parts[0]
    fld = parts[1] if len(parts) > 1 else None
    if "." in dbs:
        return f"{dbs.split('.')[-1]}.{fld or ''}"
    return fld


def parse_nodetype_and_id(x_node: str) -> list[str]:
    return x_node.split("_")[-1].split("-")


def rbac_common_feature_for_buttons(pressed: str) -> str:
    if pressed in ("rbac_project_add", "rbac_tenant_add"):
        return "rbac_tenant_add"
    return pressed


def action_url_for_views(ctx: ViewContext) -> str:
    if ctx.lastaction == "scan_history":
        return "scan_history"
    if ctx.lastaction in ("all_jobs", "jobs", "ui_jobs", "all_ui_jobs"):
        return "jobs"
    if ctx.lastaction and ctx.lastaction != "get_node_info":
        return ctx.lastaction
    return "show_list"


# ---------------------------------------------------------------------------
# URL builders
# ---------------------------------------------------------------------------


def url_for_record(record: Any, action: str = "show", *, ctx: ViewContext | None = None) -> str:
    ctx = ctx or EMPTY_CONTEXT
    record_id = to_cid(getattr(record, "id", None))
    t = type_name_of(record)

    if ctx.vm_or_template_controller:
        db = "vm_or_template"
    elif is_kind_of(t, VM_OR_TEMPLATE):
        db = controller_for_vm(model_for_vm(record))
    elif db_name(t):
        db = db_name(t)
    elif is_kind_of(t, EMBEDDED_PLAYBOOK):
        db = "ansible_playbook"
    elif is_kind_of(t, EMBEDDED_AUTHENTICATION):
        db = "ansible_credential"
    elif is_kind_of(t, EMBEDDED_SCRIPT_SOURCE):
        db = "ansible_repository"
    else:
        db = base_class(t)
    return url_for_db(db, action, record, ctx=ctx, record_id=record_id)


def url_for_db(db: str, action: str = "show", item: Any = None, *,
               ctx: ViewContext | None = None, record_id: Any = None) -> str:
    """Create a url for a record that links to the proper controller."""
    ctx = ctx or EMPTY_CONTEXT
    if item is not None and restful_routed(item):
        return polymorphic_path(item)

    show_id = record_id if record_id is not None else ctx.record_id

    if ctx.vm is not None and db in VM_CHILD_DBS:
        return url_for_only_path(ctx, controller="vm_or_template", action=ctx.lastaction,
                                 id=ctx.vm, show=show_id)
    if ctx.host is not None and db in HOST_CHILD_DBS:
        return url_for_only_path(ctx, controller="host", action=ctx.lastaction,
                                 id=ctx.host, show=show_id)
    if db in FOREMAN_CHILD_DBS:
        return url_for_only_path(ctx, controller="provider_foreman", action=ctx.lastaction,
                                 id=ctx.record, show=show_id)

    controller, action = db_to_controller(db, action, ctx=ctx)
    return url_for_only_path(ctx, controller=controller, action=action, id=show_id)


def view_to_association(view: Any, parent: Any = None, *, ctx: ViewContext | None = None) -> str | None:
    ctx = ctx or EMPTY_CONTEXT
    db = view.db
    if db in STACK_ASSOCIATIONS:
        return STACK_ASSOCIATIONS[db]
    if db in TABLEIZED_ASSOCIATION_DBS:
        return tableize(db)
    if db == "SystemService":
        parent_class = base_class(type_name_of(parent)).lower()
        if parent_class == "host":
            return "host_services"
        if parent_class == "vm":
            return ctx.lastaction
        return None
    if db == "CloudService":
        return "host_cloud_services"
    return getattr(view, "scoped_association", None)


def view_to_url(view: Any, parent: Any = None, *, ctx: ViewContext | None = None) -> str:
    """Create a url to show a record from the passed in view."""
    ctx = ctx or EMPTY_CONTEXT
    association = view_to_association(view, parent, ctx=ctx)

    if association is not None:
        if parent is not None and is_kind_of(type_name_of(parent), VM_OR_TEMPLATE) and not ctx.explorer:
            controller = underscore(base_model(type_name_of(parent)))
        else:
            controller = ctx.request_controller
        path = url_for_only_path(ctx, controller=controller, action=association,
                                 id=getattr(parent, "id", None))
        return path + ("?x_show=" if ctx.explorer else "?show=")

    controller, action = db_to_controller(view.db, ctx=ctx)
    if action == "show" and controller in COLLECTION_CONTROLLERS:
        return collection_path(controller)

    if not ctx.explorer:
        if controller == "template_cloud":
            controller = "vm_cloud"
        elif controller == "template_infra":
            controller = "vm_infra"
        return url_for_only_path(ctx, controller=controller, action=action) + "/"

    # In explorer, don't jump to other controllers
    current = ctx.request_controller
    if view.db in EXPLORER_FOREIGN_LIST_DBS:
        return url_for_only_path(ctx, controller=controller, action="show") + "/"
    if view.db == "Vm" and parent is not None and current != "vm":
        # link to a vm in the vm explorer from the service explorer
        return url_for_only_path(ctx, controller="vm_or_template", action="show") + "/"
    return url_for_only_path(ctx, action=action) + "/"


# ---------------------------------------------------------------------------
# Paging and redirects
# ---------------------------------------------------------------------------


def update_query_string_params(ctx: ViewContext, update_this_param: Mapping[str, Any] | None = None) -> dict[str, Any]:
    qd = QueryDict(ctx.query_string or "")
    updated: dict[str, Any] = {}
    for key in qd:
        if key in PAGING_EXCLUDED_PARAMS:
            continue
        values = qd.getlist(key)
        updated[key] = values if len(values) > 1 else values[-1]
    updated.update(update_this_param or {})
    return updated


def update_paging_url_parms(ctx: ViewContext, action_url: str,
                            parameter_to_update: Mapping[str, Any] | None = None,
                            post: bool = False) -> str:
    url = update_query_string_params(ctx, parameter_to_update)
    action, _sep, an_id = action_url.partition("/")
    if not post and ctx.restful and action == "show":
        return polymorphic_path(ctx.record, **url)
    url.pop("action", None)
    url.pop("controller", None)
    query_id = url.pop("id", None)
    return url_for_only_path(ctx, action=action, id=an_id or query_id, query=url)


def polymorphic_path_redirect(ctx: ViewContext, model: str, args: dict[str, Any]) -> str:
    record = args.pop("record", None)
    record_id = args.pop("id", None)
    if record is None:
        record = Record(id=record_id if record_id is not None else ctx.param("id"), type_name=model)
    return polymorphic_path(record, **args)


def javascript_process_redirect_args(ctx: ViewContext, args: Any) -> Any:
    # no model for some controllers; those keep traditional routing
    model = controller_model(ctx.controller_name)
    if model and isinstance(args, dict) and args.get("action") == "show" and restful_routed(model):
        args = dict(args)
        args.pop("action")
        return polymorphic_path_redirect(ctx, model, args)
    return args


def to_sentence(words: Iterable[str]) -> str:
    items = list(words)
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def object_types_for_flash_message(klass: str, records: list[Any]) -> str:
    if klass == VM_OR_TEMPLATE:
        counts = Counter(ui_lookup(model=model_for_vm(rec) or "") for rec in records)
        return to_sentence(sorted(k if v == 1 else pluralize(k) for k, v in counts.items()))
    name = ui_lookup(model=klass)
    return name if len(records) == 1 else pluralize(name)
