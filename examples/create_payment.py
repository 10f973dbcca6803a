"""
Complete Payment Flow Example
"""

import os
from yookassa_sdk import (
    Amount,
    Client,
    Config,
    Payment,
    PaymentHandler,
    RedirectConfirmation,
    Refund,
    RefundHandler,
)


def main():
    # Setup client (reads YOOKASSA_ACCOUNT_ID / YOOKASSA_SECRET_KEY if not passed)
    config = Config(
        account_id=os.getenv("YOOKASSA_ACCOUNT_ID"),
        secret_key=os.getenv("YOOKASSA_SECRET_KEY"),
    )
    client = Client(config)

    # Pin the key to the order so a retry after a timeout cannot charge twice
    payments = PaymentHandler(client).with_idempotency_key("order-37-payment")

    print("Creating payment...")
    payment = payments.create_payment(
        Payment(
            amount=Amount(value="250.00", currency="RUB"),
            confirmation=RedirectConfirmation(return_url="https://example.com/payment/return"),
            capture=True,
            description="Order #37",
            metadata={"order_id": "37"},
        )
    )

    print(f"\n✓ Payment Created")
    print(f"  ID: {payment.id}")
    print(f"  Status: {payment.status}")
    print(f"  Confirmation URL: {payments.parse_payment_link(payment)}")

    # After the payer confirms, the payment moves to "succeeded"
    current = payments.find_payment(payment.id)
    print(f"\n  Current status: {current.status}")

    if current.status == "succeeded":
        refund = RefundHandler(client).create_refund(
            Refund(payment_id=current.id, amount=Amount(value="50.00", currency="RUB")),
            idempotency_key="order-37-refund-1",
        )
        print(f"\n✓ Refund {refund.id}: {refund.status}")


if __name__ == "__main__":
    main()
