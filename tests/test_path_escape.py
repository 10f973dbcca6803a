"""
End-to-end path construction through the requests adapter.
"""

import pytest
import requests
import requests_mock
from requests_mock import Mocker

from yookassa_sdk import Client, Payment, PaymentHandler, PayoutHandler, RefundHandler
from yookassa_sdk.client import IDEMPOTENCY_HEADER
from yookassa_sdk.exceptions import NetworkError, TimeoutError as YooKassaTimeoutError, NotFoundError

PENDING = {"id": "resource-id", "status": "pending"}


@pytest.fixture
def real_client(config):
    return Client(config)


def _assert_last(m, method, url):
    assert m.call_count == 1
    assert m.last_request.method == method
    assert m.last_request.url == url


def test_capture_payment_escapes_payment_id(real_client):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)

        PaymentHandler(real_client).capture_payment(Payment(id="payment/id?test"))

        _assert_last(m, "POST", "https://api.yookassa.ru/v3/payments/payment%2Fid%3Ftest/capture")
        assert m.last_request.headers[IDEMPOTENCY_HEADER]
        assert m.last_request.headers["Content-Type"] == "application/json"


def test_cancel_payment_escapes_payment_id(real_client):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)

        PaymentHandler(real_client).cancel_payment("payment/id?test")

        _assert_last(m, "POST", "https://api.yookassa.ru/v3/payments/payment%2Fid%3Ftest/cancel")


def test_find_payment_escapes_payment_id(real_client):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)

        payment = PaymentHandler(real_client).find_payment("payment/id?test")

        _assert_last(m, "GET", "https://api.yookassa.ru/v3/payments/payment%2Fid%3Ftest")
        assert IDEMPOTENCY_HEADER not in m.last_request.headers
        assert payment.id == "resource-id"


def test_find_refund_escapes_refund_id(real_client):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)

        RefundHandler(real_client).find_refund("refund/id?test")

        _assert_last(m, "GET", "https://api.yookassa.ru/v3/refunds/refund%2Fid%3Ftest")


def test_get_payout_escapes_payout_id(real_client):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)

        PayoutHandler(real_client).get_payout("payout/id?test")

        _assert_last(m, "GET", "https://api.yookassa.ru/v3/payouts/payout%2Fid%3Ftest")


def test_fragment_and_percent_are_escaped(real_client):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)

        PaymentHandler(real_client).find_payment("a#b%c")

        _assert_last(m, "GET", "https://api.yookassa.ru/v3/payments/a%23b%25c")


def test_basic_auth_sent_over_the_wire(real_client):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)

        PaymentHandler(real_client).find_payment("p")

        assert m.last_request.headers["Authorization"].startswith("Basic ")


def test_api_error_through_requests_adapter(real_client):
    with Mocker() as m:
        m.get(
            requests_mock.ANY,
            status_code=404,
            json={"type": "error", "id": "e-1", "code": "not_found", "description": "no such payment"},
        )

        with pytest.raises(NotFoundError) as exc_info:
            PaymentHandler(real_client).find_payment("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.description == "no such payment"


def test_connection_error_becomes_network_error(real_client):
    with Mocker() as m:
        m.get(requests_mock.ANY, exc=requests.exceptions.ConnectionError("refused"))

        with pytest.raises(NetworkError):
            PaymentHandler(real_client).find_payment("p")


def test_timeout_becomes_timeout_error(real_client):
    with Mocker() as m:
        m.get(requests_mock.ANY, exc=requests.exceptions.ConnectTimeout("slow"))

        with pytest.raises(YooKassaTimeoutError):
            PaymentHandler(real_client).find_payment("p", timeout=0.1)


@pytest.mark.parametrize("payment_id", ["..", "."])
def test_dot_segment_ids_never_reach_the_wire(real_client, payment_id):
    with Mocker() as m:
        m.register_uri(requests_mock.ANY, requests_mock.ANY, json=PENDING)
        payments = PaymentHandler(real_client)

        with pytest.raises(ValueError, match="invalid resource id"):
            payments.find_payment(payment_id)
        with pytest.raises(ValueError, match="invalid resource id"):
            payments.cancel_payment(payment_id)
        with pytest.raises(ValueError, match="invalid resource id"):
            RefundHandler(real_client).find_refund(payment_id)
        with pytest.raises(ValueError, match="invalid resource id"):
            PayoutHandler(real_client).get_payout(payment_id)

        assert m.call_count == 0
