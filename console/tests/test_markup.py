from django.test import SimpleTestCase, override_settings

from console.context import ViewContext
from console.markup import (
    build_link_text,
    documentation_link,
    hidden_div_if,
    hidden_span_if,
    hover_class,
    li_link,
    link_image_if,
    link_to_with_icon,
    miq_accordion_panel,
    miq_tab_content,
    miq_tab_header,
    multiple_relationship_link,
    pdf_page_size_style,
    placeholder_if_present,
    single_relationship_link,
    translate_header_text,
    valid_html_id,
)
from console.model_types import CLOUD_MANAGER, Record


class HtmlIdTests(SimpleTestCase):
    def test_namespaces_are_flattened(self):
        self.assertEqual(valid_html_id("ManageIQ::Providers"), "ManageIQ__Providers")

    def test_invalid_ids_raise(self):
        with self.assertRaises(ValueError):
            valid_html_id("bad id")
        with self.assertRaises(ValueError):
            valid_html_id("a.b")


class HiddenTagTests(SimpleTestCase):
    def test_open_tag_only(self):
        self.assertEqual(hidden_div_if(True, {"id": "x"}), '<div id="x" style="display: none">')
        self.assertEqual(hidden_div_if(False, {"id": "x"}), '<div id="x">')

    def test_with_content(self):
        self.assertEqual(hidden_span_if(False, content="hi"), "<span>hi</span>")
        self.assertEqual(hidden_span_if(True, content="<b>"), '<span style="display: none">&lt;b&gt;</span>')


class TabTests(SimpleTestCase):
    def test_header(self):
        self.assertHTMLEqual(
            miq_tab_header("summary", "summary", content="Summary"),
            '<li class=" active" id="summary_tab"><a href="#summary" data-toggle="tab">Summary</a></li>',
        )

    def test_header_passes_click_handlers(self):
        html = miq_tab_header("a", "b", {"class": "x", "onclick": "go()"}, "A")
        self.assertIn('class="x "', html)
        self.assertIn('onclick="go()"', html)

    def test_lazy_content_renders_empty(self):
        self.assertHTMLEqual(miq_tab_content("a", "b", {"lazy": True}, "body"), '<div id="a" class="tab-pane lazy"></div>')

    def test_active_content(self):
        self.assertHTMLEqual(
            miq_tab_content("a", "a", {"lazy": True, "class": "pad"}, "body"),
            '<div id="a" class="tab-pane pad active">body</div>',
        )


class PanelTests(SimpleTestCase):
    def test_open_panel(self):
        html = miq_accordion_panel("Props", True, "props", "body")
        self.assertIn('class="panel-collapse collapse in"', html)
        self.assertIn('href="#props"', html)
        self.assertIn('<div class="panel-body">body</div>', html)

    def test_collapsed_panel(self):
        html = miq_accordion_panel("Props", False, "props")
        self.assertIn('class="collapsed"', html)
        self.assertIn('class="panel-collapse collapse "', html)


class SmallHelperTests(SimpleTestCase):
    def test_hover_class(self):
        self.assertEqual(hover_class({"link": "/x"}), "")
        self.assertEqual(hover_class({"value": [{"link": "/y"}]}), "")
        self.assertEqual(hover_class({"value": [{"link": None}]}), "no-hover")
        self.assertEqual(hover_class({}), "no-hover")

    def test_placeholder(self):
        self.assertEqual(placeholder_if_present("secret"), "●" * 8)
        self.assertEqual(placeholder_if_present(""), "")
        self.assertEqual(placeholder_if_present("   "), "")
        self.assertEqual(placeholder_if_present(None), "")

    def test_documentation_link(self):
        self.assertEqual(documentation_link(None), "")
        html = documentation_link("https://docs.example.com", "Ansible")
        self.assertIn('href="https://docs.example.com"', html)
        self.assertIn("visit the Ansible documentation.", html)
        self.assertIn('target="_blank"', html)

    def test_pdf_page_size_style(self):
        self.assertEqual(pdf_page_size_style(ViewContext()), "US-Legal ")
        ctx = ViewContext(options={"page_size": "A4", "page_layout": "landscape"})
        self.assertEqual(pdf_page_size_style(ctx), "A4 landscape")

    @override_settings(CONSOLE_PRODUCT_NAME="ManageIQ")
    def test_translate_header_text(self):
        self.assertEqual(translate_header_text("Region"), "ManageIQ Region")
        self.assertEqual(translate_header_text("Name"), "Name")

    def test_link_image_if(self):
        self.assertHTMLEqual(link_image_if(True, "/a.png", {"alt": "a"}), '<img src="/a.png" alt="a" />')
        html = link_image_if(False, "/a.png", link="/go")
        self.assertHTMLEqual(html, '<a href="/go"><img src="/a.png" /></a>')

    def test_link_to_with_icon(self):
        html = link_to_with_icon("Edit", "/host/edit/1", {"title": "Edit"})
        self.assertIn('onclick="return miqCheckForChanges()"', html)
        self.assertIn('title="Edit"', html)


class LinkTextTests(SimpleTestCase):
    def test_tables(self):
        self.assertEqual(build_link_text({"tables": "vm", "count": 3}), ("VMs (3)", "Show all VMs"))

    def test_text(self):
        self.assertEqual(build_link_text({"text": "Drift", "count": 2}), ("Drift (2)", None))
        self.assertEqual(build_link_text({"text": "Drift"}), ("Drift ", None))

    def test_table_with_title(self):
        self.assertEqual(build_link_text({"table": "host", "title": "Go"}), ("Host", "Go"))


class LiLinkTests(SimpleTestCase):
    def test_disabled_when_count_is_zero(self):
        html = li_link({"table": "host", "count": 0, "disabled_title": "No Hosts"})
        self.assertEqual(html, '<li class="disabled"><a href="#" title="No Hosts">Host (0)</a></li>')

    def test_classic_route(self):
        html = li_link({"table": "host", "count": 2, "record_id": 5, "controller": "ems_cluster", "display": "hosts"})
        self.assertIn('href="/ems_cluster/show/5?display=hosts"', html)
        self.assertIn('title="Show Host"', html)
        self.assertIn('onclick="return miqCheckForChanges()"', html)
        self.assertIn(">Host (2)</a>", html)

    def test_resource_route(self):
        rec = Record(id=7, type_name=CLOUD_MANAGER)
        html = li_link({"tables": "vm", "count": 1, "record": rec, "display": "vms", "check_changes": False})
        self.assertIn('href="/ems_cloud/7?display=vms"', html)
        self.assertNotIn("onclick", html)


@override_settings(CONSOLE_RBAC_CHECKER="console.tests.checkers.allow_all")
class RelationshipLinkTests(SimpleTestCase):
    def test_single_relationship(self):
        vm = Record(id=1, type_name="Vm", attrs={"host": Record(id=7, type_name="Host", name="esx1")})
        html = single_relationship_link(vm, "host")
        self.assertIn('href="/host/show/7"', html)
        self.assertIn("Host: esx1", html)

    def test_single_relationship_missing(self):
        self.assertEqual(single_relationship_link(Record(id=1, type_name="Vm"), "host"), "")

    def test_multiple_relationship(self):
        host = Record(id=5, type_name="Host", attrs={"counts": {"vms": 3}})
        html = multiple_relationship_link(host, "vm", ViewContext(controller_name="host"))
        self.assertEqual(html, '<li><a href="/host/show/5?display=vms" title="Show VMs">VMs (3)</a></li>')

    def test_multiple_relationship_empty(self):
        host = Record(id=5, type_name="Host", attrs={"counts": {"vms": 0}})
        html = multiple_relationship_link(host, "vm", ViewContext(controller_name="host"))
        self.assertEqual(html, '<li class="disabled"><a href="#">VMs (0)</a></li>')

    def test_routes_need_association(self):
        project = Record(id=5, type_name="ContainerProject")
        self.assertEqual(multiple_relationship_link(project, "container_route"), "")

    @override_settings(CONSOLE_RBAC_CHECKER="console.tests.checkers.deny_all")
    def test_denied(self):
        host = Record(id=5, type_name="Host", attrs={"counts": {"vms": 3}})
        self.assertEqual(multiple_relationship_link(host, "vm"), "")
