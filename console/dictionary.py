"""Display names for tables and models."""

from __future__ import annotations

from django.utils.translation import gettext as _

from .model_types import pluralize, titleize


TABLE_NAMES: dict[str, str] = {
    "auth_key_pair_cloud": "Key Pair",
    "availability_zone": "Availability Zone",
    "cloud_network": "Cloud Network",
    "cloud_object_store_container": "Cloud Object Store Container",
    "cloud_subnet": "Cloud Subnet",
    "cloud_tenant": "Cloud Tenant",
    "cloud_volume": "Cloud Volume",
    "container_route": "Route",
    "ems_cloud": "Cloud Provider",
    "ems_cluster": "Cluster",
    "ems_container": "Containers Provider",
    "ems_infra": "Infrastructure Provider",
    "ems_middleware": "Middleware Provider",
    "ems_network": "Network Provider",
    "ems_physical_infra": "Physical Infrastructure Provider",
    "ext_management_system": "Provider",
    "flavor": "Flavor",
    "floating_ip": "Floating IP",
    "host": "Host",
    "miq_template": "Template",
    "orchestration_stack": "Orchestration Stack",
    "resource_pool": "Resource Pool",
    "security_group": "Security Group",
    "storage": "Datastore",
    "vm": "VM",
}

TABLE_PLURALS: dict[str, str] = {
    "ems_cluster": "Clusters",
    "floating_ip": "Floating IPs",
    "storage": "Datastores",
    "vm": "VMs",
}

MODEL_NAMES: dict[str, str] = {
    "ManageIQ::Providers::CloudManager": "Cloud Provider",
    "ManageIQ::Providers::CloudManager::Template": "Image",
    "ManageIQ::Providers::CloudManager::Vm": "Instance",
    "ManageIQ::Providers::ContainerManager": "Containers Provider",
    "ManageIQ::Providers::InfraManager": "Infrastructure Provider",
    "ManageIQ::Providers::InfraManager::Template": "Template",
    "ManageIQ::Providers::InfraManager::Vm": "VM",
    "MiqTemplate": "Template",
    "Vm": "VM",
    "VmOrTemplate": "VM or Template",
}


def _table_name(table: str) -> str:
    key = str(table or "")
    return _(TABLE_NAMES.get(key) or titleize(key))


def _table_plural(table: str) -> str:
    key = str(table or "")
    if key in TABLE_PLURALS:
        return _(TABLE_PLURALS[key])
    return pluralize(_table_name(key))


def _model_name(model: str) -> str:
    key = str(model or "")
    return _(MODEL_NAMES.get(key) or titleize(key.rsplit("::", 1)[-1]))


def ui_lookup(*, table: str | None = None, tables: str | None = None,
              model: str | None = None, models: str | None = None) -> str:
    """Human readable name for exactly one of the given keys."""
    if table is not None:
        return _table_name(table)
    if tables is not None:
        return _table_plural(tables)
    if model is not None:
        return _model_name(model)
    if models is not None:
        return pluralize(_model_name(models))
    return ""
