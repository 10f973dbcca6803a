"""
Exception classes for YooKassa SDK.

Callers can branch on four families:

- ``TransportError``: the server could not be reached (network, timeout)
- ``ApiError``: the server rejected the request with a classified reason
- ``DecodeError``: a success response did not match the resource shape
- ``SemanticError``: a decoded resource the caller cannot act on
"""

from typing import Optional


class YooKassaError(Exception):
    """Base exception for all YooKassa SDK errors."""

    pass


class ConfigurationError(YooKassaError):
    """SDK configuration error"""

    pass


class TransportError(YooKassaError):
    """
    Request could not be built or sent.

    Never retried by the SDK.
    """

    pass


class NetworkError(TransportError):
    """Network connectivity error"""

    pass


class TimeoutError(TransportError):
    """Request deadline expired"""

    pass


class ApiError(YooKassaError):
    """
    API error exception.

    Raised when the API returns a non-success status. Built from the decoded
    error body, or from a fallback with code ``unexpected`` when the body could
    not be decoded.
    """

    def __init__(
        self,
        code: str,
        description: str = "",
        id: str = "",
        type: str = "error",
        status_code: int = 0,
        parameter: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        """
        Initialize API error.

        Args:
            code: Machine-readable error code (e.g. ``invalid_request``)
            description: Human-readable description
            id: Error ID assigned by the API
            type: Object type, always ``error`` for API errors
            status_code: HTTP status code
            parameter: Name of the offending request parameter, if any
            retry_after: Suggested delay in milliseconds, if any
        """
        super().__init__(description or code)
        self.code = code
        self.description = description
        self.id = id
        self.type = type
        self.status_code = status_code
        self.parameter = parameter
        self.retry_after = retry_after

    def __str__(self) -> str:
        parts = [f"[{self.status_code}] {self.code}"]
        if self.description:
            parts.append(f": {self.description}")
        if self.id:
            parts.append(f" (error_id: {self.id})")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, "
            f"status_code={self.status_code}, "
            f"id={self.id!r})"
        )


class InvalidRequestError(ApiError):
    pass


class InvalidCredentialsError(ApiError):
    pass


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class TooManyRequestsError(ApiError):
    pass


class InternalServerError(ApiError):
    pass


class UnexpectedResponseError(ApiError):
    """Error body was missing, oversized, or not in the documented shape."""

    pass


class DecodeError(YooKassaError):
    """
    Success response did not match the expected resource shape.

    The underlying parser error, if any, is chained as ``__cause__``.
    """

    pass


class ResponseTooLargeError(DecodeError):
    """Response body exceeded the read limit."""

    def __init__(self, limit: int):
        super().__init__(f"response body exceeds {limit} bytes")
        self.limit = limit


class SemanticError(YooKassaError):
    """Decoded resource is not usable by the caller."""

    message = ""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class EmptyConfirmationError(SemanticError):
    """Payment carries neither a confirmation nor a saved payment method."""

    message = "empty confirmation url"


class PaymentLinkError(SemanticError):
    """Payment confirmation does not expose a redirect link."""

    message = "unable to get link"
