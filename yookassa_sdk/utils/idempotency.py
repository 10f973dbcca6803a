"""
Idempotency key generation.
"""

import uuid
from typing import Optional

MAX_IDEMPOTENCY_KEY_LENGTH = 64


def make_idempotency_key(provided: Optional[str] = None) -> str:
    """
    Generate or validate idempotency key.

    A key ties a write to a single logical effect on the server: repeating a
    request with the same key has no additional effect.

    Args:
        provided: Optional user-provided idempotency key

    Returns:
        Validated or generated idempotency key

    Raises:
        ValueError: If provided key is too long (> 64 chars)

    Examples:
        >>> key = make_idempotency_key()
        >>> len(key)
        36

        >>> make_idempotency_key("order-12345")
        'order-12345'
    """
    if provided:
        if len(provided) > MAX_IDEMPOTENCY_KEY_LENGTH:
            raise ValueError(
                f"Idempotency key too long (max {MAX_IDEMPOTENCY_KEY_LENGTH} characters)"
            )
        return provided

    return str(uuid.uuid4())
