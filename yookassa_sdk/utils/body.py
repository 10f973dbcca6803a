"""
Bounded reads of response bodies.
"""

import time
from typing import BinaryIO, Optional

from ..exceptions import ResponseTooLargeError, TimeoutError as YooKassaTimeoutError

MAX_RESPONSE_BODY_BYTES = 10 << 20  # 10 MiB
_CHUNK_SIZE = 8 * 1024


def read_limited(
    body: BinaryIO,
    limit: int = MAX_RESPONSE_BODY_BYTES,
    deadline: Optional[float] = None,
) -> bytes:
    """
    Read at most ``limit`` bytes from ``body``.

    At most one byte past the limit is pulled from the stream, only to detect
    overflow; the rest is left unread. ``deadline`` is a ``time.monotonic()``
    value checked between chunks, so a slowly dripping body cannot hold the
    call open past it.

    Args:
        body: Readable binary stream
        limit: Maximum number of bytes accepted
        deadline: Optional monotonic deadline for the whole read

    Returns:
        Body bytes

    Raises:
        ResponseTooLargeError: If the body is longer than ``limit``
        TimeoutError: If the deadline passes before the body is read
    """
    chunks = []
    remaining = limit + 1

    while remaining > 0:
        if deadline is not None and time.monotonic() >= deadline:
            raise YooKassaTimeoutError("Response body read exceeded the deadline")

        chunk = body.read(min(remaining, _CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)

    data = b"".join(chunks)
    if len(data) > limit:
        raise ResponseTooLargeError(limit)
    return data
