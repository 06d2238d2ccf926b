from __future__ import annotations

import logging

from .request_context import get_request_id


class RequestIDLogFilter(logging.Filter):
    """Stamp every console log record with the active request id."""

    def filter(self, record: logging.LogRecord) -> bool:
        rid = getattr(record, "request_id", "") or get_request_id() or "-"
        setattr(record, "request_id", rid)
        return True
