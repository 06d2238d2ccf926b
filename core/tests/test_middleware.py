from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, override_settings

from core.middleware import CurrentUserMiddleware, PerformanceLoggingMiddleware, RequestIDMiddleware
from core.request_context import get_current_user, get_request_id


class RequestIDMiddlewareTests(SimpleTestCase):
    def test_generates_and_echoes_id(self):
        seen = {}

        def view(request):
            seen["rid"] = get_request_id()
            return HttpResponse("ok")

        request = RequestFactory().get("/")
        response = RequestIDMiddleware(view)(request)
        self.assertTrue(response["X-Request-ID"])
        self.assertEqual(response["X-Request-ID"], request.request_id)
        self.assertEqual(seen["rid"], request.request_id)

    def test_keeps_incoming_id(self):
        request = RequestFactory().get("/", HTTP_X_REQUEST_ID="upstream-7")
        response = RequestIDMiddleware(lambda r: HttpResponse("ok"))(request)
        self.assertEqual(response["X-Request-ID"], "upstream-7")


class CurrentUserMiddlewareTests(SimpleTestCase):
    def test_user_visible_during_request_only(self):
        user = object()
        seen = {}

        def view(request):
            seen["user"] = get_current_user()
            return HttpResponse("ok")

        request = RequestFactory().get("/")
        request.user = user
        CurrentUserMiddleware(view)(request)
        self.assertIs(seen["user"], user)
        self.assertIsNone(get_current_user())


class PerformanceLoggingMiddlewareTests(SimpleTestCase):
    @override_settings(CONSOLE_PERF_LOGGING_ENABLED=True, CONSOLE_PERF_REQUEST_MS=0)
    def test_logs_slow_requests(self):
        request = RequestFactory().get("/vm/show_list")
        with self.assertLogs("console.perf", level="WARNING") as logs:
            PerformanceLoggingMiddleware(lambda r: HttpResponse("ok"))(request)
        self.assertIn("slow_request path=/vm/show_list", logs.output[0])

    @override_settings(CONSOLE_PERF_LOGGING_ENABLED=False)
    def test_disabled(self):
        request = RequestFactory().get("/")
        response = PerformanceLoggingMiddleware(lambda r: HttpResponse("ok"))(request)
        self.assertEqual(response.status_code, 200)
