from django.template import Context, Template
from django.test import RequestFactory, SimpleTestCase
from django.urls import resolve

from console.context import ViewContext
from console.context_processors import view_dispatch
from console.middleware import ViewContextMiddleware
from console.model_types import CLOUD_MANAGER, Record
from console.routing import url_for_only_path


class RouteProbeTests(SimpleTestCase):
    def test_classic_route(self):
        resp = self.client.get("/host/show/1r12", {"display": "vms"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["controller"], "host")
        self.assertEqual(data["action"], "show")
        self.assertEqual(data["id"], "1r12")
        self.assertEqual(data["record_id"], 1_000_000_000_012)
        self.assertEqual(data["query"], {"display": "vms"})
        self.assertFalse(data["restful"])

    def test_namespaced_controller(self):
        data = self.client.get("/manageiq/providers/amazon/cloud_manager/show/3").json()
        self.assertEqual(data["controller"], "manageiq/providers/amazon/cloud_manager")
        self.assertEqual(data["action"], "show")

    def test_resource_route(self):
        data = self.client.get("/ems_cloud/7").json()
        self.assertEqual(data["controller"], "ems_cloud")
        self.assertEqual(data["action"], "show")
        self.assertEqual(data["record_id"], 7)
        self.assertTrue(data["restful"])

    def test_resource_route_compressed_id(self):
        data = self.client.get("/ems_cloud/1r12").json()
        self.assertEqual(data["action"], "show")
        self.assertEqual(data["record_id"], 1_000_000_000_012)

    def test_action_on_resource_controller(self):
        match = resolve("/ems_cloud/show_list")
        self.assertEqual(match.url_name, "legacy-action")
        data = self.client.get(url_for_only_path(controller="ems_cloud", action="show_list")).json()
        self.assertEqual(data["controller"], "ems_cloud")
        self.assertEqual(data["action"], "show_list")
        self.assertIsNone(data["id"])

    def test_resource_collection(self):
        data = self.client.get("/ems_infra").json()
        self.assertEqual(data["action"], "show_list")

    def test_request_id_header(self):
        resp = self.client.get("/host/show_list", HTTP_X_REQUEST_ID="abc-123")
        self.assertEqual(resp["X-Request-ID"], "abc-123")


class MiddlewareTests(SimpleTestCase):
    def test_view_context_attached(self):
        request = RequestFactory().get("/host/show/5")
        middleware = ViewContextMiddleware(lambda r: None)
        middleware.process_view(request, None, (), {"controller": "host", "action": "show", "id": "5"})
        self.assertIsInstance(request.view_context, ViewContext)


class ContextProcessorTests(SimpleTestCase):
    def test_flags(self):
        request = RequestFactory().get("/")
        request.view_context = ViewContext(layout="host", action_name="show_list", controller_name="host")
        data = view_dispatch(request)
        self.assertIs(data["view_context"], request.view_context)
        self.assertTrue(data["taskbar_in_header"])
        self.assertFalse(data["inner_layout_present"])
        self.assertTrue(data["render_flash_msg"])

    def test_builds_context_when_missing(self):
        data = view_dispatch(RequestFactory().get("/"))
        self.assertIsInstance(data["view_context"], ViewContext)


class TemplateTagTests(SimpleTestCase):
    def render(self, source, **context):
        return Template("{% load console_tags %}" + source).render(Context(context))

    def test_record_url(self):
        self.assertEqual(self.render("{% record_url rec %}", rec=Record(id=5, type_name="Host")), "/host/show/5")
        self.assertEqual(self.render("{% record_url rec %}", rec=Record(id=7, type_name=CLOUD_MANAGER)), "/ems_cloud/7")

    def test_db_url_and_controller(self):
        self.assertEqual(self.render('{% db_url "MiqReportResult" "show" %}'), "/report/show_saved")
        self.assertEqual(self.render('{% db_controller "SecurityGroup" %}'), "security_group")

    def test_record_url_failure_renders_hash(self):
        self.assertEqual(self.render("{% record_url rec %}", rec=None), "#")

    def test_listicon(self):
        self.assertEqual(self.render('{% listicon "MiqSchedule" row %}', row={}), '<i class="fa fa-clock-o"></i>')

    def test_li_link(self):
        html = self.render('{% li_link table="host" count=0 %}')
        self.assertIn('class="disabled"', html)

    def test_filters(self):
        self.assertEqual(self.render("{{ v|cid }}", v=1_000_000_000_012), "1r12")
        self.assertEqual(self.render("{{ v|valid_html_id }}", v="a::b"), "a__b")
        self.assertEqual(self.render("{{ v|valid_html_id }}", v="a b"), "")
        self.assertEqual(self.render('{{ "Region"|header_text }}'), "ManageIQ Region")

    def test_view_context_from_template_context(self):
        ctx = ViewContext(layout="host")
        self.assertEqual(self.render("{% listnav_filename %}", view_context=ctx), "host")
