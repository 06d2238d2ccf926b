"""Region-compressed record ids.

Ids that belong to a non-zero region are shown as ``<region>r<short>`` so
links stay readable: 1_000_000_000_012 becomes ``1r12``.
"""

from __future__ import annotations

import re

RAILS_SEQUENCE_FACTOR = 1_000_000_000_000
CID_OR_ID_MATCHER = re.compile(r"^\d+$|^\d+r\d+$")
_CID_RE = re.compile(r"^(\d+)r(\d+)$")


def split_id(record_id: int) -> tuple[int, int]:
    return divmod(int(record_id), RAILS_SEQUENCE_FACTOR)


def to_cid(record_id) -> str | None:
    if record_id is None or record_id == "":
        return None
    text = str(record_id).strip()
    if _CID_RE.match(text):
        return text
    try:
        region, short = split_id(int(text))
    except (TypeError, ValueError):
        return text
    return f"{region}r{short}" if region > 0 else str(short)


def from_cid(cid) -> int | None:
    if cid is None:
        return None
    if isinstance(cid, int):
        return cid
    text = str(cid).strip()
    m = _CID_RE.match(text)
    if m:
        return int(m.group(1)) * RAILS_SEQUENCE_FACTOR + int(m.group(2))
    if text.isdigit():
        return int(text)
    return None


def cid_or_id(value) -> bool:
    return bool(CID_OR_ID_MATCHER.match(str(value or "")))
