"""
Payouts resource
"""

from typing import Optional

from ..models import Payout, PayoutList, PayoutListFilter
from ..utils.paths import item_path
from .base import ResourceHandler

PAYOUT_ENDPOINT = "payouts"


class PayoutHandler(ResourceHandler):
    """Payouts API"""

    endpoint = PAYOUT_ENDPOINT

    def create_payout(
        self,
        payout: Payout,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Payout:
        """
        Create a payout

        Args:
            payout: Payout data; set one of ``payout_destination_data``,
                ``payout_token`` or ``payment_method_id``
            idempotency_key: Optional idempotency key for this call
            timeout: Optional timeout override in seconds

        Returns:
            Payout object
        """
        return self._request(
            "create_payout",
            "POST",
            self.endpoint,
            Payout,
            body=payout.to_json(),
            idempotency_key=idempotency_key,
            timeout=timeout,
        )

    def get_payout(self, payout_id: str, timeout: Optional[float] = None) -> Payout:
        """Retrieve a payout by ID"""
        return self._request(
            "get_payout",
            "GET",
            item_path(self.endpoint, payout_id),
            Payout,
            timeout=timeout,
        )

    def find_payouts(
        self,
        filter: Optional[PayoutListFilter] = None,
        timeout: Optional[float] = None,
    ) -> PayoutList:
        return self._request(
            "find_payouts",
            "GET",
            self.endpoint,
            PayoutList,
            params=self._params(filter),
            timeout=timeout,
        )
