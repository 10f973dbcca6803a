"""
Classification of non-success API responses.
"""

import logging
from typing import BinaryIO, Dict, Optional, Type

from pydantic import ValidationError

from .exceptions import (
    ApiError,
    ForbiddenError,
    InternalServerError,
    InvalidCredentialsError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    ResponseTooLargeError,
    TooManyRequestsError,
    UnexpectedResponseError,
)
from .models import ErrorBody
from .utils.body import MAX_RESPONSE_BODY_BYTES, read_limited

logger = logging.getLogger("yookassa_sdk.classifier")

MAX_ERROR_BODY_BYTES = MAX_RESPONSE_BODY_BYTES
UNEXPECTED_CODE = "unexpected"

ERROR_CLASSES: Dict[str, Type[ApiError]] = {
    "invalid_request": InvalidRequestError,
    "invalid_credentials": InvalidCredentialsError,
    "forbidden": ForbiddenError,
    "not_found": NotFoundError,
    "too_many_requests": TooManyRequestsError,
    "internal_server_error": InternalServerError,
    UNEXPECTED_CODE: UnexpectedResponseError,
}


def _fallback(status_code: int, reason: str) -> ApiError:
    return UnexpectedResponseError(
        code=UNEXPECTED_CODE,
        description=f"unexpected error response: {reason}",
        status_code=status_code,
    )


def classify_error(
    body: Optional[BinaryIO],
    status_code: int = 0,
    deadline: Optional[float] = None,
) -> ApiError:
    """
    Decode a non-success response body into a classified API error.

    At most 10 MiB is read. An oversized, truncated, unreadable, non-JSON or
    otherwise malformed body yields an ``UnexpectedResponseError`` with code
    ``unexpected``; decoding failures are never raised to the caller.

    Args:
        body: Unread response body stream
        status_code: HTTP status code of the response
        deadline: Optional ``time.monotonic()`` deadline for reading the body

    Returns:
        ApiError (or a code-specific subclass), to be raised by the caller

    Raises:
        ValueError: If there is no body to classify
        TimeoutError: If the deadline passes while reading the body
    """
    if body is None:
        raise ValueError("response body is required to classify an error")

    try:
        raw = read_limited(body, MAX_ERROR_BODY_BYTES, deadline=deadline)
    except ResponseTooLargeError:
        logger.warning(
            "Error response body exceeds %d bytes",
            MAX_ERROR_BODY_BYTES,
            extra={"status_code": status_code},
        )
        return _fallback(status_code, "body too large")
    except NetworkError as e:
        logger.warning(
            "Error response body unreadable: %s",
            e,
            extra={"status_code": status_code},
        )
        return _fallback(status_code, "body unreadable")

    try:
        decoded = ErrorBody.model_validate_json(raw)
    except ValidationError:
        logger.warning(
            "Undecodable error response body",
            extra={"status_code": status_code},
        )
        return _fallback(status_code, "undecodable body")

    if not decoded.code:
        return _fallback(status_code, "missing error code")

    error_class = ERROR_CLASSES.get(decoded.code, ApiError)
    return error_class(
        code=decoded.code,
        description=decoded.description,
        id=decoded.id,
        type=decoded.type,
        status_code=status_code,
        parameter=decoded.parameter,
        retry_after=decoded.retry_after,
    )
