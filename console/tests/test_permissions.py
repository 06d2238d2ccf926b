from types import SimpleNamespace

from django.test import SimpleTestCase, override_settings

from console.permissions import default_role_checker, role_allows
from core.request_context import reset_current_user, set_current_user


class RoleAllowsTests(SimpleTestCase):
    def test_missing_feature_denies(self):
        with self.assertLogs("console.permissions", level="DEBUG") as logs:
            self.assertFalse(role_allows())
        self.assertIn("Auth failed - no feature was specified (required)", logs.output[0])

    def test_anonymous_denied(self):
        self.assertFalse(role_allows(feature="vm_show"))

    def test_superuser_allowed(self):
        admin = SimpleNamespace(is_authenticated=True, is_superuser=True)
        self.assertTrue(role_allows(feature="vm_show", user=admin))

    def test_django_permissions(self):
        user = SimpleNamespace(
            is_authenticated=True,
            is_superuser=False,
            has_perm=lambda perm: perm == "console.vm_show",
        )
        self.assertTrue(role_allows(feature="vm_show", user=user))
        self.assertFalse(role_allows(feature="vm_delete", user=user))

    def test_current_user_is_used(self):
        token = set_current_user(SimpleNamespace(is_authenticated=True, is_superuser=True))
        try:
            self.assertTrue(role_allows(feature="host_show"))
        finally:
            reset_current_user(token)

    @override_settings(CONSOLE_RBAC_CHECKER="console.tests.checkers.explode")
    def test_checker_failure_denies(self):
        with self.assertLogs("console.permissions", level="WARNING"):
            self.assertFalse(role_allows(feature="vm_show", user=object()))

    @override_settings(CONSOLE_RBAC_CHECKER="console.tests.checkers.allow_all")
    def test_custom_checker(self):
        self.assertTrue(role_allows(feature="vm_show"))


class DefaultCheckerTests(SimpleTestCase):
    def test_unauthenticated(self):
        self.assertFalse(default_role_checker(SimpleNamespace(is_authenticated=False), feature="x"))
        self.assertFalse(default_role_checker(None, feature="x"))
