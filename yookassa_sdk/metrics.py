"""
Prometheus metrics for handler operations.

Every handler call is counted once, labelled with the HTTP status it got
(``none`` when no response arrived) and its outcome: ``ok``, ``transport``,
``decode``, or the API error code the response was classified as. Unknown
API codes are folded into ``api_error`` so server input cannot grow the
label set. The host application exposes the prometheus_client registry.
"""

import logging
from typing import Optional

from prometheus_client import Counter, Histogram

from .exceptions import ApiError, DecodeError, TransportError

logger = logging.getLogger("yookassa_sdk.metrics")

NO_RESPONSE_CODE = "none"

OUTCOME_OK = "ok"
OUTCOME_TRANSPORT = "transport"
OUTCOME_DECODE = "decode"
OUTCOME_API_ERROR = "api_error"
OUTCOME_ERROR = "error"

REQUEST_COUNT = Counter(
    "yookassa_sdk_requests_total",
    "Handler operations by HTTP status and outcome",
    ["operation", "code", "outcome"],
)

REQUEST_LATENCY = Histogram(
    "yookassa_sdk_request_latency_seconds",
    "Handler operation latency in seconds, body read included",
    ["operation", "outcome"],
)


def outcome_of(error: Optional[BaseException]) -> str:
    """
    Map the exception an operation ended with to an outcome label.

    Examples:
        >>> outcome_of(None)
        'ok'
        >>> outcome_of(NotFoundError(code="not_found"))
        'not_found'
    """
    if error is None:
        return OUTCOME_OK
    if isinstance(error, TransportError):
        return OUTCOME_TRANSPORT
    if isinstance(error, DecodeError):
        return OUTCOME_DECODE
    if isinstance(error, ApiError):
        # Codes with a dedicated class are known; anything else is bare ApiError.
        return error.code if type(error) is not ApiError else OUTCOME_API_ERROR
    return OUTCOME_ERROR


def record_request(
    operation: str,
    status_code: Optional[int],
    outcome: str,
    latency: float,
) -> None:
    """
    Record one handler operation.

    Args:
        operation: Handler operation name (e.g., 'create_payment')
        status_code: HTTP status of the response, None if none was received
        outcome: Result of ``outcome_of``
        latency: Operation duration in seconds
    """
    code = NO_RESPONSE_CODE if status_code is None else str(status_code)
    try:
        REQUEST_COUNT.labels(operation=operation, code=code, outcome=outcome).inc()
        REQUEST_LATENCY.labels(operation=operation, outcome=outcome).observe(latency)
    except Exception as e:
        logger.debug("Failed to record metrics: %s", e)
