"""
Tests for the payouts handler.
"""

import json

import pytest

from yookassa_sdk import Amount, Payout, PayoutHandler, PayoutListFilter
from yookassa_sdk.client import IDEMPOTENCY_HEADER
from yookassa_sdk.exceptions import TimeoutError as YooKassaTimeoutError
from yookassa_sdk.exceptions import TooManyRequestsError


@pytest.fixture
def payouts(client):
    return PayoutHandler(client)


def test_create_payout(payouts, adapter):
    adapter.response_data = json.dumps(
        {
            "id": "payout-id",
            "status": "pending",
            "amount": {"value": "320.00", "currency": "RUB"},
            "payout_destination": {"type": "yoo_money", "account_number": "4100116075156746"},
            "test": True,
        }
    )

    payout = payouts.create_payout(
        Payout(
            amount=Amount(value="320.00", currency="RUB"),
            payout_destination_data={"type": "yoo_money", "account_number": "4100116075156746"},
            description="Payout for order 37",
        )
    )

    assert payout.id == "payout-id"
    assert payout.payout_destination["type"] == "yoo_money"
    request = adapter.last_request
    assert request["url"] == "https://api.yookassa.ru/v3/payouts"
    assert request["headers"][IDEMPOTENCY_HEADER]
    assert "id" not in json.loads(request["data"])


def test_pinned_key_survives_retry_after_timeout(payouts, adapter):
    adapter.error = YooKassaTimeoutError("deadline")
    pinned = payouts.with_idempotency_key("payout-order-37")

    with pytest.raises(YooKassaTimeoutError):
        pinned.create_payout(Payout(payout_token="token"))

    adapter.error = None
    adapter.response_data = '{"id":"payout-id","status":"succeeded"}'
    payout = pinned.create_payout(Payout(payout_token="token"))

    assert payout.status == "succeeded"
    keys = [r["headers"][IDEMPOTENCY_HEADER] for r in adapter.requests]
    assert keys == ["payout-order-37", "payout-order-37"]


def test_get_payout(payouts, adapter):
    adapter.response_data = '{"id":"payout-id","status":"canceled","cancellation_details":{"party":"yoo_money","reason":"general_decline"}}'

    payout = payouts.get_payout("payout-id")

    assert payout.cancellation_details.reason == "general_decline"
    assert adapter.last_request["method"] == "GET"
    assert adapter.last_body.was_closed


def test_get_payout_rate_limited(payouts, adapter):
    adapter.response_status = 429
    adapter.response_data = '{"type":"error","id":"e","code":"too_many_requests","description":"slow down","retry_after":1800}'

    with pytest.raises(TooManyRequestsError) as exc_info:
        payouts.get_payout("payout-id")

    assert exc_info.value.retry_after == 1800


def test_find_payouts(payouts, adapter):
    adapter.response_data = '{"type":"list","items":[{"id":"po-1","status":"succeeded"}],"next_cursor":"c"}'

    result = payouts.find_payouts(
        PayoutListFilter(payout_destination_type="bank_card", status="succeeded")
    )

    assert result.items[0].id == "po-1"
    url = adapter.last_request["url"]
    assert "payout_destination.type=bank_card" in url
    assert "status=succeeded" in url
