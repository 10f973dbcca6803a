"""
Resource handlers for YooKassa SDK.
"""

from .base import ResourceHandler
from .payments import PaymentHandler
from .payouts import PayoutHandler
from .refunds import RefundHandler

__all__ = ["ResourceHandler", "PaymentHandler", "PayoutHandler", "RefundHandler"]
