"""Static layout membership lists.

Each set answers one visibility question for the screen named by
``ViewContext.layout``.
"""

from __future__ import annotations


# Actions that hide the taskbar when no layout is set.
TASKBAR_BLANK_LAYOUT_ACTIONS = frozenset({
    "auth_error",
    "change_tab",
    "show",
})

# Layouts that never show the taskbar in the header.
TASKBAR_HIDDEN_LAYOUTS = frozenset({
    "about",
    "chargeback",
    "cloud_topology",
    "container_dashboard",
    "ems_infra_dashboard",
    "exception",
    "infra_topology",
    "middleware_topology",
    "miq_ae_automate_button",
    "miq_ae_class",
    "miq_ae_export",
    "miq_ae_tools",
    "miq_capacity_bottlenecks",
    "miq_capacity_planning",
    "miq_capacity_utilization",
    "miq_capacity_waste",
    "miq_policy",
    "miq_policy_export",
    "miq_policy_rsop",
    "monitor_alerts_overview",
    "monitor_alerts_list",
    "monitor_alerts_most_recent",
    "network_topology",
    "ops",
    "physical_infra_topology",
    "pxe",
    "report",
    "rss",
    "server_build",
})

ADV_SEARCH_DISPLAY_LAYOUTS = frozenset({
    "auth_key_pair_cloud",
    "availability_zone",
    "automation_manager",
    "cloud_network",
    "cloud_object_store_container",
    "cloud_subnet",
    "cloud_tenant",
    "cloud_volume",
    "configuration_job",
    "container_build",
    "container_group",
    "container_image",
    "container_image_registry",
    "container_node",
    "container_project",
    "container_replicator",
    "container_route",
    "container_service",
    "container_template",
    "ems_cloud",
    "ems_cluster",
    "ems_container",
    "ems_infra",
    "ems_middleware",
    "ems_network",
    "ems_physical_infra",
    "ems_storage",
    "flavor",
    "floating_ip",
    "host",
    "host_aggregate",
    "load_balancer",
    "middleware_datasource",
    "middleware_deployment",
    "middleware_domain",
    "middleware_messaging",
    "middleware_server",
    "miq_template",
    "network_port",
    "network_router",
    "offline",
    "orchestration_stack",
    "persistent_volume",
    "provider_foreman",
    "resource_pool",
    "retired",
    "security_group",
    "service",
    "storage",
    "storage_manager",
    "templates",
    "vm",
})

GTL_VIEW_LAYOUTS = frozenset({
    "action",
    "auth_key_pair_cloud",
    "availability_zone",
    "alerts_overview",
    "alerts_list",
    "alerts_most_recent",
    "cloud_network",
    "cloud_object_store_container",
    "cloud_object_store_object",
    "cloud_subnet",
    "cloud_tenant",
    "cloud_topology",
    "cloud_volume",
    "cloud_volume_backup",
    "cloud_volume_snapshot",
    "condition",
    "configuration_job",
    "configuration_script_source",
    "container_build",
    "container_dashboard",
    "container_group",
    "container_image",
    "container_image_registry",
    "container_node",
    "container_project",
    "container_replicator",
    "container_route",
    "container_service",
    "container_template",
    "container_topology",
    "ems_cloud",
    "ems_cluster",
    "ems_container",
    "ems_infra",
    "ems_infra_dashboard",
    "ems_middleware",
    "ems_network",
    "ems_physical_infra",
    "ems_storage",
    "infra_topology",
    "event",
    "flavor",
    "floating_ip",
    "host",
    "host_aggregate",
    "load_balancer",
    "manageiq/providers/embedded_ansible/automation_manager/playbook",
    "manageiq/providers/embedded_automation_manager/authentication",
    "middleware_datasource",
    "middleware_deployment",
    "middleware_domain",
    "middleware_messaging",
    "middleware_server",
    "middleware_server_group",
    "middleware_topology",
    "miq_schedule",
    "miq_template",
    "monitor_alerts_overview",
    "monitor_alerts_list",
    "monitor_alerts_most_recent",
    "network_port",
    "network_router",
    "network_topology",
    "offline",
    "orchestration_stack",
    "physical_infra_topology",
    "persistent_volume",
    "policy",
    "policy_group",
    "policy_profile",
    "resource_pool",
    "retired",
    "scan_profile",
    "security_group",
    "service",
    "storage",
    "storage_manager",
    "templates",
})

# Layouts whose list screens get the "show_list" list navigation.
LISTNAV_SHOW_LIST_LAYOUTS = frozenset({
    "auth_key_pair_cloud",
    "availability_zone",
    "cloud_network",
    "cloud_object_store_container",
    "cloud_object_store_object",
    "cloud_subnet",
    "cloud_tenant",
    "cloud_volume",
    "cloud_volume_backup",
    "cloud_volume_snapshot",
    "configuration_job",
    "container_build",
    "container_group",
    "container_image",
    "container_image_registry",
    "container_node",
    "container_project",
    "container_replicator",
    "container_route",
    "container_service",
    "container_template",
    "ems_cloud",
    "ems_cluster",
    "ems_container",
    "ems_datawarehouse",
    "ems_infra",
    "ems_middleware",
    "ems_network",
    "ems_physical_infra",
    "ems_storage",
    "flavor",
    "floating_ip",
    "host",
    "middleware_datasource",
    "middleware_deployment",
    "middleware_domain",
    "middleware_messaging",
    "middleware_server",
    "middleware_server_group",
    "miq_template",
    "network_port",
    "network_router",
    "offline",
    "orchestration_stack",
    "persistent_volume",
    "resource_pool",
    "retired",
    "security_group",
    "service",
    "storage",
    "templates",
    "vm",
})

LISTNAV_VM_LAYOUTS = frozenset({
    "offline",
    "retired",
    "templates",
    "vm",
    "vm_cloud",
    "vm_or_template",
})

# Layouts that render a list navigation partial named after themselves.
LISTNAV_LAYOUTS = frozenset({
    "action",
    "auth_key_pair_cloud",
    "availability_zone",
    "cloud_network",
    "cloud_object_store_container",
    "cloud_object_store_object",
    "cloud_subnet",
    "cloud_tenant",
    "cloud_volume",
    "cloud_volume_backup",
    "cloud_volume_snapshot",
    "condition",
    "configuration_job",
    "container_build",
    "container_group",
    "container_image",
    "container_image_registry",
    "container_node",
    "container_project",
    "container_replicator",
    "container_route",
    "container_service",
    "container_template",
    "ems_cloud",
    "ems_cluster",
    "ems_container",
    "ems_datawarehouse",
    "ems_infra",
    "ems_middleware",
    "ems_network",
    "ems_physical_infra",
    "ems_storage",
    "flavor",
    "floating_ip",
    "host",
    "host_aggregate",
    "load_balancer",
    "middleware_datasource",
    "middleware_deployment",
    "middleware_domain",
    "middleware_messaging",
    "middleware_server",
    "middleware_server_group",
    "miq_schedule",
    "miq_template",
    "network_port",
    "network_router",
    "orchestration_stack",
    "persistent_volume",
    "policy",
    "resource_pool",
    "scan_profile",
    "security_group",
    "service",
    "storage_manager",
    "timeline",
})

SHOW_ADV_SEARCH_LAYOUTS = frozenset({
    "auth_key_pair_cloud",
    "availability_zone",
    "automation_manager",
    "cloud_network",
    "cloud_object_store_container",
    "cloud_subnet",
    "cloud_tenant",
    "cloud_volume",
    "cloud_volume_backup",
    "cloud_volume_snapshot",
    "configuration_job",
    "container_build",
    "container_group",
    "container_image",
    "container_image_registry",
    "container_node",
    "container_project",
    "container_replicator",
    "container_route",
    "container_service",
    "container_template",
    "ems_cloud",
    "ems_cluster",
    "ems_container",
    "ems_infra",
    "ems_middleware",
    "ems_network",
    "ems_physical_infra",
    "ems_storage",
    "flavor",
    "floating_ip",
    "host",
    "host_aggregate",
    "load_balancer",
    "middleware_datasource",
    "middleware_deployment",
    "middleware_domain",
    "middleware_messaging",
    "middleware_server",
    "miq_template",
    "network_port",
    "network_router",
    "offline",
    "orchestration_stack",
    "persistent_volume",
    "provider_foreman",
    "resource_pool",
    "retired",
    "security_group",
    "service",
    "storage_manager",
    "templates",
    "vm",
})

# Explorer tree types that carry an advanced search box.
ADVANCED_SEARCH_TREES = frozenset({
    "automation_manager_providers",
    "automation_manager_cs_filter",
    "containers",
    "containers_filter",
    "configuration_manager_cs_filter",
    "configuration_scripts",
    "configuration_manager_providers",
    "images",
    "images_filter",
    "instances",
    "instances_filter",
    "providers",
    "storage",
    "templates_filter",
    "templates_images_filter",
    "vandt",
    "vms_filter",
    "vms_instances_filter",
})

SAVED_REPORT_TREES = frozenset({"reports_tree", "savedreports_tree", "cb_reports_tree"})

# Task screens share one primary navigation entry.
TASK_LAYOUTS = frozenset({"my_tasks", "my_ui_tasks", "all_tasks", "all_ui_tasks"})

# layout -> layout whose primary navigation entry it highlights
PRIMARY_NAV_ALIASES = {
    "cloud_volume_snapshot": "cloud_volume",
    "cloud_volume_backup": "cloud_volume",
    "cloud_object_store_object": "cloud_object_store_container",
}

QS_VALID_USER_INPUT_OPERATORS = (
    "=", "!=", ">", ">=", "<", "<=", "INCLUDES", "STARTS WITH", "ENDS WITH", "CONTAINS",
)
QS_VALID_FIELD_TYPES = frozenset({"string", "boolean", "integer", "float", "percent", "bytes", "megabytes"})

# Performance charts that may drill into a parent object.
VALID_PERF_PARENTS = {
    "EmsCluster": "ems_cluster",
    "Host": "host",
}
