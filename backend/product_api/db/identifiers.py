"""Generation and recognition of product identifiers.

Identifiers follow the shape document stores hand out: 24 hex
characters, the first 8 encoding the creation second so that they sort
roughly by insertion time.
"""

from __future__ import annotations

import re
import secrets
import time

OBJECT_ID_LENGTH = 24

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def new_object_id() -> str:
    """Return a fresh 24-character lowercase hex identifier."""
    timestamp = int(time.time()) & 0xFFFFFFFF
    return f"{timestamp:08x}{secrets.token_hex(8)}"


def is_object_id(value: str) -> bool:
    return bool(_OBJECT_ID_RE.match(value))
