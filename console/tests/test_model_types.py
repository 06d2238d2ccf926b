from django.test import SimpleTestCase

from console.model_types import (
    CLOUD_MANAGER,
    CLOUD_VM,
    INFRA_TEMPLATE,
    Record,
    base_class,
    base_model,
    camelize,
    db_name,
    demodulize,
    is_kind_of,
    pluralize,
    route_key,
    tableize,
    titleize,
    type_name_of,
    underscore,
)


class InflectionTests(SimpleTestCase):
    def test_underscore_keeps_product_acronym_together(self):
        self.assertEqual(underscore("ManageIQ::Providers::CloudManager"), "manageiq/providers/cloud_manager")
        self.assertEqual(underscore("MiqReportResult"), "miq_report_result")
        self.assertEqual(underscore("VmOrTemplate"), "vm_or_template")

    def test_camelize(self):
        self.assertEqual(camelize("miq_report_result"), "MiqReportResult")
        self.assertEqual(camelize("providers/cloud_manager"), "Providers::CloudManager")

    def test_demodulize_and_titleize(self):
        self.assertEqual(demodulize(CLOUD_VM), "Vm")
        self.assertEqual(titleize("ems_cluster"), "Ems Cluster")

    def test_pluralize(self):
        self.assertEqual(pluralize("patch"), "patches")
        self.assertEqual(pluralize("registry_item"), "registry_items")
        self.assertEqual(pluralize("policy"), "policies")
        self.assertEqual(pluralize("vm"), "vms")

    def test_tableize(self):
        self.assertEqual(tableize("GuestApplication"), "guest_applications")
        self.assertEqual(tableize("ScanHistory"), "scan_histories")


class HierarchyTests(SimpleTestCase):
    def test_kind_of_walks_parents(self):
        amazon_vm = "ManageIQ::Providers::Amazon::CloudManager::Vm"
        self.assertTrue(is_kind_of(amazon_vm, CLOUD_VM))
        self.assertTrue(is_kind_of(amazon_vm, "VmOrTemplate"))
        self.assertFalse(is_kind_of(amazon_vm, "MiqTemplate"))

    def test_base_class_and_model(self):
        self.assertEqual(base_class(INFRA_TEMPLATE), "VmOrTemplate")
        self.assertEqual(base_model(INFRA_TEMPLATE), "MiqTemplate")
        self.assertEqual(base_class("Host"), "Host")

    def test_provider_db_name_and_route(self):
        amazon = "ManageIQ::Providers::Amazon::CloudManager"
        self.assertEqual(db_name(amazon), CLOUD_MANAGER)
        self.assertEqual(route_key(amazon), "ems_cloud")
        self.assertIsNone(route_key("Host"))


class RecordTests(SimpleTestCase):
    def test_attrs_are_readable_as_attributes(self):
        rec = Record(id=1, type_name="Host", attrs={"vmm_vendor_display": "VMware"})
        self.assertEqual(rec.vmm_vendor_display, "VMware")
        with self.assertRaises(AttributeError):
            rec.missing

    def test_number_of(self):
        rec = Record(id=1, type_name="Host", attrs={"counts": {"vms": 4}})
        self.assertEqual(rec.number_of("vms"), 4)
        self.assertEqual(rec.number_of("storages"), 0)
        self.assertTrue(rec.has_association("vms"))

    def test_type_name_of(self):
        self.assertEqual(type_name_of(Record(id=1, type_name="Host")), "Host")
        self.assertEqual(type_name_of("Storage"), "Storage")
        self.assertEqual(type_name_of(None), "")
