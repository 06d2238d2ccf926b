import logging

from django.test import SimpleTestCase

from core.logging import RequestIDLogFilter
from core.request_context import get_request_id, request_id_var, set_request_id


class RequestIDLogFilterTests(SimpleTestCase):
    def make_record(self):
        return logging.LogRecord("console.test", logging.INFO, __file__, 1, "msg", None, None)

    def test_uses_active_request_id(self):
        token = request_id_var.set("rid-1")
        try:
            record = self.make_record()
            self.assertTrue(RequestIDLogFilter().filter(record))
            self.assertEqual(record.request_id, "rid-1")
        finally:
            request_id_var.reset(token)

    def test_placeholder_outside_requests(self):
        token = request_id_var.set("")
        try:
            record = self.make_record()
            RequestIDLogFilter().filter(record)
            self.assertEqual(record.request_id, "-")
        finally:
            request_id_var.reset(token)

    def test_set_request_id(self):
        token = request_id_var.set("")
        try:
            set_request_id("abc")
            self.assertEqual(get_request_id(), "abc")
        finally:
            request_id_var.reset(token)
