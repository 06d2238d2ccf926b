from types import SimpleNamespace

from django.test import RequestFactory, SimpleTestCase, override_settings

from console.context import ViewContext
from console.environment import (
    appliance_name,
    browser_info,
    is_browser,
    is_browser_ie,
    is_browser_ie7,
    is_browser_os,
    settings_default,
    settings_lookup,
    user_role_name,
    vmdb_build_info,
    websocket_origin,
)
from core.request_context import reset_current_user, set_current_user


class BrowserTests(SimpleTestCase):
    def setUp(self):
        self.ctx = ViewContext(session={"browser": {"name": "explorer", "version": "7.0", "os": "windows"}})

    def test_browser_info(self):
        self.assertEqual(browser_info(self.ctx, "os"), "windows")
        self.assertEqual(browser_info(ViewContext(), "name"), "")

    def test_ie(self):
        self.assertTrue(is_browser_ie(self.ctx))
        self.assertTrue(is_browser_ie7(self.ctx))
        ie11 = ViewContext(session={"browser": {"name": "explorer", "version": "11"}})
        self.assertFalse(is_browser_ie7(ie11))

    def test_is_browser(self):
        self.assertTrue(is_browser(self.ctx, "explorer"))
        self.assertTrue(is_browser(self.ctx, ["chrome", "explorer"]))
        self.assertFalse(is_browser(self.ctx, "chrome"))

    def test_is_browser_os(self):
        self.assertTrue(is_browser_os(self.ctx, ["windows", "mac"]))
        self.assertFalse(is_browser_os(self.ctx, "linux"))


class WebsocketOriginTests(SimpleTestCase):
    def setUp(self):
        self.rf = RequestFactory()

    def test_forwarded_host_wins(self):
        request = self.rf.get("/", HTTP_HOST="testserver", HTTP_X_FORWARDED_HOST="proxy.example.com, inner.local")
        self.assertEqual(websocket_origin(request), "ws://proxy.example.com")

    def test_secure_host(self):
        request = self.rf.get("/", secure=True, HTTP_HOST="testserver")
        self.assertEqual(websocket_origin(request), "wss://testserver")


@override_settings(
    CONSOLE_USER_SETTINGS={"perpage": {"list": 20}},
    CONSOLE_APPLIANCE_NAME="EVM",
    CONSOLE_VERSION="master",
    CONSOLE_BUILD="20260101_abc",
)
class SettingsTests(SimpleTestCase):
    def test_lookup(self):
        self.assertEqual(settings_lookup("perpage", "list"), 20)
        self.assertIsNone(settings_lookup("perpage", "tile"))

    def test_lookup_prefers_context_settings(self):
        ctx = ViewContext(extra={"settings": {"perpage": {"list": 50}}})
        self.assertEqual(settings_lookup("perpage", "list", ctx=ctx), 50)

    def test_default(self):
        self.assertEqual(settings_default(10, "perpage", "tile"), 10)
        self.assertEqual(settings_default(10, "perpage", "list"), 20)

    def test_default_keeps_falsy_values(self):
        ctx = ViewContext(extra={"settings": {"perpage": {"list": 0, "tile": False, "grid": ""}}})
        self.assertEqual(settings_default(20, "perpage", "list", ctx=ctx), 0)
        self.assertEqual(settings_default(20, "perpage", "grid", ctx=ctx), "")
        self.assertEqual(settings_default(20, "perpage", "tile", ctx=ctx), 20)

    def test_appliance(self):
        self.assertEqual(appliance_name(), "EVM")
        self.assertEqual(vmdb_build_info("version"), "master")
        self.assertEqual(vmdb_build_info("build"), "20260101_abc")
        self.assertIsNone(vmdb_build_info("other"))


class UserRoleTests(SimpleTestCase):
    def test_explicit_user(self):
        user = SimpleNamespace(miq_user_role_name="EvmRole-operator")
        self.assertEqual(user_role_name(user), "EvmRole-operator")

    def test_current_user(self):
        token = set_current_user(SimpleNamespace(miq_user_role_name="EvmRole-auditor"))
        try:
            self.assertEqual(user_role_name(), "EvmRole-auditor")
        finally:
            reset_current_user(token)

    def test_no_user(self):
        self.assertIsNone(user_role_name())
