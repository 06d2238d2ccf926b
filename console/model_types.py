"""Domain type names, their hierarchy, and light record/view values.

The console never loads ORM classes to decide where a link goes. Type names are
plain strings (``"ManageIQ::Providers::CloudManager::Vm"``) and the family
relationships the helpers care about live in :data:`TYPE_PARENTS`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping


VM_OR_TEMPLATE = "VmOrTemplate"
EXT_MANAGEMENT_SYSTEM = "ExtManagementSystem"

CLOUD_MANAGER = "ManageIQ::Providers::CloudManager"
INFRA_MANAGER = "ManageIQ::Providers::InfraManager"
CONTAINER_MANAGER = "ManageIQ::Providers::ContainerManager"

CLOUD_VM = "ManageIQ::Providers::CloudManager::Vm"
CLOUD_TEMPLATE = "ManageIQ::Providers::CloudManager::Template"
INFRA_VM = "ManageIQ::Providers::InfraManager::Vm"
INFRA_TEMPLATE = "ManageIQ::Providers::InfraManager::Template"

EMBEDDED_PLAYBOOK = "ManageIQ::Providers::EmbeddedAnsible::AutomationManager::Playbook"
EMBEDDED_AUTHENTICATION = "ManageIQ::Providers::EmbeddedAutomationManager::Authentication"
EMBEDDED_SCRIPT_SOURCE = "ManageIQ::Providers::EmbeddedAutomationManager::ConfigurationScriptSource"
ANSIBLE_TOWER_JOB = "ManageIQ::Providers::AnsibleTower::AutomationManager::Job"


# child -> parent. Types absent from both sides are their own base class.
TYPE_PARENTS: dict[str, str] = {
    # VMs and templates
    "Vm": VM_OR_TEMPLATE,
    "MiqTemplate": VM_OR_TEMPLATE,
    CLOUD_VM: "Vm",
    INFRA_VM: "Vm",
    CLOUD_TEMPLATE: "MiqTemplate",
    INFRA_TEMPLATE: "MiqTemplate",
    "ManageIQ::Providers::Amazon::CloudManager::Vm": CLOUD_VM,
    "ManageIQ::Providers::Amazon::CloudManager::Template": CLOUD_TEMPLATE,
    "ManageIQ::Providers::Azure::CloudManager::Vm": CLOUD_VM,
    "ManageIQ::Providers::Openstack::CloudManager::Vm": CLOUD_VM,
    "ManageIQ::Providers::Openstack::CloudManager::Template": CLOUD_TEMPLATE,
    "ManageIQ::Providers::Vmware::InfraManager::Vm": INFRA_VM,
    "ManageIQ::Providers::Vmware::InfraManager::Template": INFRA_TEMPLATE,
    "ManageIQ::Providers::Redhat::InfraManager::Vm": INFRA_VM,
    "ManageIQ::Providers::Redhat::InfraManager::Template": INFRA_TEMPLATE,
    "ManageIQ::Providers::Microsoft::InfraManager::Vm": INFRA_VM,
    # Providers
    "ManageIQ::Providers::BaseManager": EXT_MANAGEMENT_SYSTEM,
    CLOUD_MANAGER: "ManageIQ::Providers::BaseManager",
    INFRA_MANAGER: "ManageIQ::Providers::BaseManager",
    CONTAINER_MANAGER: "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::MiddlewareManager": "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::NetworkManager": "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::PhysicalInfraManager": "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::DatawarehouseManager": "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::StorageManager": "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::AutomationManager": "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::ConfigurationManager": "ManageIQ::Providers::BaseManager",
    "ManageIQ::Providers::Amazon::CloudManager": CLOUD_MANAGER,
    "ManageIQ::Providers::Azure::CloudManager": CLOUD_MANAGER,
    "ManageIQ::Providers::Openstack::CloudManager": CLOUD_MANAGER,
    "ManageIQ::Providers::Vmware::InfraManager": INFRA_MANAGER,
    "ManageIQ::Providers::Redhat::InfraManager": INFRA_MANAGER,
    "ManageIQ::Providers::Openstack::InfraManager": INFRA_MANAGER,
    "ManageIQ::Providers::Microsoft::InfraManager": INFRA_MANAGER,
    "ManageIQ::Providers::Kubernetes::ContainerManager": CONTAINER_MANAGER,
    "ManageIQ::Providers::Openshift::ContainerManager": CONTAINER_MANAGER,
    "ManageIQ::Providers::Hawkular::MiddlewareManager": "ManageIQ::Providers::MiddlewareManager",
    "ManageIQ::Providers::Amazon::NetworkManager": "ManageIQ::Providers::NetworkManager",
    "ManageIQ::Providers::Lenovo::PhysicalInfraManager": "ManageIQ::Providers::PhysicalInfraManager",
    "ManageIQ::Providers::AnsibleTower::AutomationManager": "ManageIQ::Providers::AutomationManager",
    "ManageIQ::Providers::Foreman::ConfigurationManager": "ManageIQ::Providers::ConfigurationManager",
    # Hosts and stacks
    "ManageIQ::Providers::Openstack::InfraManager::Host": "Host",
    "ManageIQ::Providers::Vmware::InfraManager::Host": "Host",
    "ManageIQ::Providers::CloudManager::OrchestrationStack": "OrchestrationStack",
    ANSIBLE_TOWER_JOB: "OrchestrationStack",
    # Embedded automation
    EMBEDDED_PLAYBOOK: "ConfigurationScriptBase",
    EMBEDDED_AUTHENTICATION: "Authentication",
    "ManageIQ::Providers::EmbeddedAnsible::AutomationManager::Credential": EMBEDDED_AUTHENTICATION,
    "ManageIQ::Providers::EmbeddedAnsible::AutomationManager::MachineCredential": EMBEDDED_AUTHENTICATION,
    EMBEDDED_SCRIPT_SOURCE: "ConfigurationScriptSource",
    "ManageIQ::Providers::EmbeddedAnsible::AutomationManager::ConfigurationScriptSource": EMBEDDED_SCRIPT_SOURCE,
}

# Classes that answer base_model with themselves instead of their base class.
BASE_MODEL_ROOTS = frozenset({"Vm", "MiqTemplate"})

# Provider families whose class-level db_name replaces the concrete class name.
DB_NAMES: dict[str, str] = {
    CLOUD_MANAGER: CLOUD_MANAGER,
    INFRA_MANAGER: INFRA_MANAGER,
    CONTAINER_MANAGER: CONTAINER_MANAGER,
    "ManageIQ::Providers::MiddlewareManager": "ManageIQ::Providers::MiddlewareManager",
    "ManageIQ::Providers::NetworkManager": "ManageIQ::Providers::NetworkManager",
    "ManageIQ::Providers::PhysicalInfraManager": "ManageIQ::Providers::PhysicalInfraManager",
    "ManageIQ::Providers::DatawarehouseManager": "ManageIQ::Providers::DatawarehouseManager",
}

# Types served by resource routes (list + detail) rather than controller/action.
RESTFUL_ROUTE_KEYS: dict[str, str] = {
    CLOUD_MANAGER: "ems_cloud",
    INFRA_MANAGER: "ems_infra",
    "ManageIQ::Providers::PhysicalInfraManager": "ems_physical_infra",
    CONTAINER_MANAGER: "ems_container",
    "ManageIQ::Providers::MiddlewareManager": "ems_middleware",
    "ManageIQ::Providers::DatawarehouseManager": "ems_datawarehouse",
    "ManageIQ::Providers::NetworkManager": "ems_network",
}

# controller name -> the model it lists
CONTROLLER_MODELS: dict[str, str] = {
    "auth_key_pair_cloud": "ManageIQ::Providers::CloudManager::AuthKeyPair",
    "availability_zone": "AvailabilityZone",
    "automation_manager": "ManageIQ::Providers::AutomationManager",
    "cloud_network": "CloudNetwork",
    "cloud_subnet": "CloudSubnet",
    "cloud_tenant": "CloudTenant",
    "cloud_volume": "CloudVolume",
    "container_group": "ContainerGroup",
    "container_node": "ContainerNode",
    "container_project": "ContainerProject",
    "ems_cloud": CLOUD_MANAGER,
    "ems_cluster": "EmsCluster",
    "ems_container": CONTAINER_MANAGER,
    "ems_datawarehouse": "ManageIQ::Providers::DatawarehouseManager",
    "ems_infra": INFRA_MANAGER,
    "ems_middleware": "ManageIQ::Providers::MiddlewareManager",
    "ems_network": "ManageIQ::Providers::NetworkManager",
    "ems_physical_infra": "ManageIQ::Providers::PhysicalInfraManager",
    "flavor": "Flavor",
    "floating_ip": "FloatingIp",
    "host": "Host",
    "load_balancer": "LoadBalancer",
    "miq_template": "MiqTemplate",
    "network_port": "NetworkPort",
    "network_router": "NetworkRouter",
    "orchestration_stack": "OrchestrationStack",
    "persistent_volume": "PersistentVolume",
    "provider_foreman": "ManageIQ::Providers::ConfigurationManager",
    "resource_pool": "ResourcePool",
    "security_group": "SecurityGroup",
    "service": "Service",
    "storage": "Storage",
    "vm": "Vm",
    "vm_cloud": CLOUD_VM,
    "vm_infra": INFRA_VM,
    "vm_or_template": VM_OR_TEMPLATE,
}


# ---------------------------------------------------------------------------
# Inflections
# ---------------------------------------------------------------------------

ACRONYMS = {"ManageIQ": "manageiq"}
_ACRONYM_RE = re.compile(r"(?:(?<=([A-Za-z\d]))|\b)(ManageIQ)(?=\b|[^a-z])")


def underscore(word: str) -> str:
    """``ManageIQ::Providers::CloudManager`` -> ``manageiq/providers/cloud_manager``."""
    text = str(word or "").replace("::", "/")
    text = _ACRONYM_RE.sub(lambda m: ("_" if m.group(1) else "") + ACRONYMS[m.group(2)], text)
    text = re.sub(r"([A-Z\d]+)([A-Z][a-z])", r"\1_\2", text)
    text = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", text)
    return text.replace("-", "_").lower()


def camelize(word: str) -> str:
    parts = str(word or "").split("/")
    return "::".join("".join(p[:1].upper() + p[1:] for p in part.split("_")) for part in parts)


def demodulize(type_name: str) -> str:
    return str(type_name or "").rsplit("::", 1)[-1]


def humanize(word: str) -> str:
    text = underscore(word).replace("/", " ")
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def titleize(word: str) -> str:
    return " ".join(w[:1].upper() + w[1:] for w in humanize(word).split(" "))


_IRREGULAR_PLURALS = {"person": "people", "child": "children", "status": "statuses"}


def pluralize(word: str) -> str:
    text = str(word or "")
    if not text:
        return text
    lower = text.lower()
    for singular, plural in _IRREGULAR_PLURALS.items():
        if lower.endswith(singular):
            return text[: len(text) - len(singular)] + (
                plural.capitalize() if text[-len(singular)].isupper() else plural
            )
    if re.search(r"[^aeiou]y$", lower):
        return text[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", lower):
        return text + "es"
    return text + "s"


def tableize(type_name: str) -> str:
    return pluralize(underscore(type_name))


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


def ancestors(type_name: str) -> Iterator[str]:
    """Yield ``type_name`` and then each parent up to its base class."""
    seen = set()
    current = type_name
    while current and current not in seen:
        seen.add(current)
        yield current
        current = TYPE_PARENTS.get(current)


def is_kind_of(type_name: str, ancestor: str) -> bool:
    return ancestor in ancestors(type_name)


def base_class(type_name: str) -> str:
    last = type_name
    for last in ancestors(type_name):
        pass
    return last


def base_model(type_name: str) -> str:
    for t in ancestors(type_name):
        if t in BASE_MODEL_ROOTS:
            return t
    return base_class(type_name)


def db_name(type_name: str) -> str | None:
    for t in ancestors(type_name):
        if t in DB_NAMES:
            return DB_NAMES[t]
    return None


def ui_base_model(type_name: str) -> str:
    """Nearest ancestor that owns a resource route, else the type itself."""
    for t in ancestors(type_name):
        if t in RESTFUL_ROUTE_KEYS:
            return t
    return type_name


def route_key(type_name: str) -> str | None:
    return RESTFUL_ROUTE_KEYS.get(ui_base_model(type_name))


def controller_model(controller: str) -> str | None:
    return CONTROLLER_MODELS.get(str(controller or ""))


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Record:
    """A row the console links to or draws an icon for.

    ``attrs`` carries whatever else the caller knows (vendor, image_name,
    normalized_type, relationship counts under ``counts``).
    """

    id: Any
    type_name: str
    name: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict)

    def __getattr__(self, item: str) -> Any:
        attrs = object.__getattribute__(self, "attrs")
        if item in attrs:
            return attrs[item]
        raise AttributeError(item)

    def number_of(self, association: str) -> int:
        counts = self.attrs.get("counts") or {}
        try:
            return int(counts.get(association, 0) or 0)
        except (TypeError, ValueError):
            return 0

    def has_association(self, association: str) -> bool:
        return association in (self.attrs.get("counts") or {})


@dataclass(frozen=True)
class ReportView:
    """The slice of a report definition the list helpers need."""

    db: str
    scoped_association: str | None = None


def type_name_of(record_or_type: Any) -> str:
    if record_or_type is None:
        return ""
    if isinstance(record_or_type, str):
        return record_or_type
    name = getattr(record_or_type, "type_name", None)
    if name:
        return str(name)
    return type(record_or_type).__name__
