"""
YooKassa Server-Side Python SDK

Typed, idempotent and size-bounded access to the YooKassa payments API.
"""

__version__ = "0.1.0"

from .config import Config
from .client import Client, Requester
from .exceptions import (
    YooKassaError,
    ConfigurationError,
    TransportError,
    NetworkError,
    TimeoutError,
    ApiError,
    DecodeError,
    ResponseTooLargeError,
    SemanticError,
    EmptyConfirmationError,
    PaymentLinkError,
)
from .models import (
    Amount,
    Payment,
    PaymentList,
    PaymentListFilter,
    Payout,
    PayoutList,
    PayoutListFilter,
    RedirectConfirmation,
    OtherConfirmation,
    Refund,
    RefundList,
    RefundListFilter,
)
from .resources import PaymentHandler, PayoutHandler, RefundHandler

__all__ = [
    "Config",
    "Client",
    "Requester",
    "YooKassaError",
    "ConfigurationError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "ApiError",
    "DecodeError",
    "ResponseTooLargeError",
    "SemanticError",
    "EmptyConfirmationError",
    "PaymentLinkError",
    "Amount",
    "Payment",
    "PaymentList",
    "PaymentListFilter",
    "Payout",
    "PayoutList",
    "PayoutListFilter",
    "RedirectConfirmation",
    "OtherConfirmation",
    "Refund",
    "RefundList",
    "RefundListFilter",
    "PaymentHandler",
    "PayoutHandler",
    "RefundHandler",
    "__version__",
]
