"""
Utility modules for YooKassa SDK.
"""

from .body import MAX_RESPONSE_BODY_BYTES, read_limited
from .idempotency import make_idempotency_key
from .paths import escape_path_segment, item_path

__all__ = [
    "MAX_RESPONSE_BODY_BYTES",
    "read_limited",
    "make_idempotency_key",
    "escape_path_segment",
    "item_path",
]
