"""URL converters for console routes."""

from __future__ import annotations


class RecordIdConverter:
    """Plain or region-compressed record id (``12``, ``1r12``)."""

    regex = r"\d+(?:r\d+)?"

    def to_python(self, value: str) -> str:
        return value

    def to_url(self, value) -> str:
        return str(value)
