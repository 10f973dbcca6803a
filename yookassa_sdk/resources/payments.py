"""
Payments resource
"""

from typing import Optional

from ..exceptions import EmptyConfirmationError, PaymentLinkError
from ..models import Payment, PaymentList, PaymentListFilter, RedirectConfirmation
from ..utils.paths import item_path
from .base import ResourceHandler

PAYMENT_ENDPOINT = "payments"

# Fields accepted by POST /payments/{id}/capture
CAPTURE_FIELDS = {"amount", "receipt", "airline", "transfers", "deal"}


class PaymentHandler(ResourceHandler):
    """Payments API"""

    endpoint = PAYMENT_ENDPOINT

    def create_payment(
        self,
        payment: Payment,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Payment:
        """
        Create a payment.

        Args:
            payment: Payment data
            idempotency_key: Optional idempotency key for this call
            timeout: Optional timeout override in seconds

        Returns:
            Created payment

        Raises:
            EmptyConfirmationError: If the created payment has no confirmation
                and the request named no saved payment method

        Example:
            >>> created = payments.create_payment(
            ...     Payment(
            ...         amount=Amount(value="100.00", currency="RUB"),
            ...         confirmation=RedirectConfirmation(return_url="https://example.com"),
            ...         capture=True,
            ...     )
            ... )
            >>> url = payments.parse_payment_link(created)
        """
        created = self._request(
            "create_payment",
            "POST",
            self.endpoint,
            Payment,
            body=payment.to_json(),
            idempotency_key=idempotency_key,
            timeout=timeout,
        )

        if created.confirmation is None and not payment.payment_method_id:
            raise EmptyConfirmationError()

        return created

    def find_payment(self, payment_id: str, timeout: Optional[float] = None) -> Payment:
        """
        Retrieve a payment

        Args:
            payment_id: Payment ID

        Returns:
            Payment
        """
        return self._request(
            "find_payment",
            "GET",
            item_path(self.endpoint, payment_id),
            Payment,
            timeout=timeout,
        )

    def find_payments(
        self,
        filter: Optional[PaymentListFilter] = None,
        timeout: Optional[float] = None,
    ) -> PaymentList:
        """
        List payments matching ``filter``

        Args:
            filter: Optional list filter (created_at, status, cursor, ...)

        Returns:
            One page of payments
        """
        return self._request(
            "find_payments",
            "GET",
            self.endpoint,
            PaymentList,
            params=self._params(filter),
            timeout=timeout,
        )

    def capture_payment(
        self,
        payment: Payment,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Payment:
        """
        Capture a payment in ``waiting_for_capture`` status.

        Only ``amount``, ``receipt``, ``airline``, ``transfers`` and ``deal``
        are sent; leave ``amount`` unset to capture the full amount.

        Args:
            payment: Payment with ``id`` set
            idempotency_key: Optional idempotency key for this call

        Returns:
            Updated payment
        """
        if not payment.id:
            raise ValueError("payment id is required to capture a payment")

        return self._request(
            "capture_payment",
            "POST",
            item_path(self.endpoint, payment.id, "capture"),
            Payment,
            body=payment.to_json(include=CAPTURE_FIELDS),
            idempotency_key=idempotency_key,
            timeout=timeout,
        )

    def cancel_payment(
        self,
        payment_id: str,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Payment:
        """
        Cancel a payment in ``waiting_for_capture`` status

        Args:
            payment_id: Payment ID
            idempotency_key: Optional idempotency key for this call

        Returns:
            Canceled payment
        """
        return self._request(
            "cancel_payment",
            "POST",
            item_path(self.endpoint, payment_id, "cancel"),
            Payment,
            idempotency_key=idempotency_key,
            timeout=timeout,
        )

    def parse_payment_link(self, payment: Payment) -> str:
        """
        Return the URL the payer must visit to confirm ``payment``.

        Raises:
            EmptyConfirmationError: If the payment has no confirmation
            PaymentLinkError: If the confirmation is not a redirect
        """
        confirmation = payment.confirmation
        if confirmation is None:
            raise EmptyConfirmationError()

        if isinstance(confirmation, RedirectConfirmation) and confirmation.confirmation_url:
            return confirmation.confirmation_url

        raise PaymentLinkError()
