"""
Refunds resource
"""

from typing import Optional

from ..models import Refund, RefundList, RefundListFilter
from ..utils.paths import item_path
from .base import ResourceHandler

REFUND_ENDPOINT = "refunds"


class RefundHandler(ResourceHandler):
    """Refunds API"""

    endpoint = REFUND_ENDPOINT

    def create_refund(
        self,
        refund: Refund,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Refund:
        """
        Create a refund

        Args:
            refund: Refund data (``payment_id`` and ``amount`` required by the API)
            idempotency_key: Optional idempotency key for this call
            timeout: Optional timeout override in seconds

        Returns:
            Refund object
        """
        return self._request(
            "create_refund",
            "POST",
            self.endpoint,
            Refund,
            body=refund.to_json(),
            idempotency_key=idempotency_key,
            timeout=timeout,
        )

    def find_refund(self, refund_id: str, timeout: Optional[float] = None) -> Refund:
        """Retrieve a refund by ID"""
        return self._request(
            "find_refund",
            "GET",
            item_path(self.endpoint, refund_id),
            Refund,
            timeout=timeout,
        )

    def find_refunds(
        self,
        filter: Optional[RefundListFilter] = None,
        timeout: Optional[float] = None,
    ) -> RefundList:
        """
        List refunds

        Args:
            filter: Optional list filter (payment_id, status, cursor, ...)

        Returns:
            One page of refunds
        """
        return self._request(
            "find_refunds",
            "GET",
            self.endpoint,
            RefundList,
            params=self._params(filter),
            timeout=timeout,
        )
