from django.test import SimpleTestCase

from console.context import ViewContext
from console.javascript import (
    javascript_for_miq_button_visibility,
    javascript_for_miq_button_visibility_changed,
    javascript_for_timer_type,
    javascript_hide,
    javascript_pf_toolbar_reload,
    javascript_show,
)


class ShowHideTests(SimpleTestCase):
    def test_lines(self):
        self.assertEqual(javascript_show("weekly_span"), "$('#weekly_span').show();")
        self.assertEqual(javascript_hide("weekly_span"), "$('#weekly_span').hide();")

    def test_invalid_element(self):
        with self.assertRaises(ValueError):
            javascript_show("a'); alert(1); //")


class TimerTypeTests(SimpleTestCase):
    def test_monthly(self):
        self.assertEqual(
            javascript_for_timer_type("Monthly"),
            [
                "$('#weekly_span').hide();",
                "$('#daily_span').hide();",
                "$('#hourly_span').hide();",
                "$('#monthly_span').show();",
            ],
        )

    def test_hourly(self):
        self.assertEqual(
            javascript_for_timer_type("Hourly"),
            [
                "$('#daily_span').hide();",
                "$('#monthly_span').hide();",
                "$('#weekly_span').hide();",
                "$('#hourly_span').show();",
            ],
        )

    def test_none(self):
        self.assertEqual(javascript_for_timer_type(None), [])

    def test_once_hides_everything(self):
        self.assertEqual(
            javascript_for_timer_type("Once"),
            [
                "$('#daily_span').hide();",
                "$('#hourly_span').hide();",
                "$('#monthly_span').hide();",
                "$('#weekly_span').hide();",
            ],
        )


class ButtonVisibilityTests(SimpleTestCase):
    def test_visibility(self):
        self.assertEqual(javascript_for_miq_button_visibility(True), "miqButtons('show');")
        self.assertEqual(javascript_for_miq_button_visibility(False, "custom"), "miqButtons('hide', 'custom');")

    def test_changed_only_when_flag_flips(self):
        ctx = ViewContext(session={"changed": False})
        self.assertEqual(javascript_for_miq_button_visibility_changed(ctx, True), "miqButtons('show');")
        self.assertTrue(ctx.session["changed"])
        self.assertEqual(javascript_for_miq_button_visibility_changed(ctx, True), "")


class ToolbarReloadTests(SimpleTestCase):
    def test_reload(self):
        self.assertEqual(
            javascript_pf_toolbar_reload("center_tb", [{"id": "view_list"}]),
            'sendDataWithRx({redrawToolbar: [{"id": "view_list"}]});',
        )

    def test_reload_escapes_markup(self):
        js = javascript_pf_toolbar_reload("center_tb", [{"title": "</script><script>alert(1)</script> & co"}])
        self.assertNotIn("</script>", js)
        self.assertNotIn("&", js)
        self.assertIn("\\u003C/script\\u003E", js)
        self.assertIn("\\u0026 co", js)
