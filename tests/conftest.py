"""
Pytest configuration and fixtures
"""

import io
from typing import Dict, List, Optional

import pytest

from yookassa_sdk import Client, Config
from yookassa_sdk.http.adapter import HTTPAdapter, HTTPResponse


class TrackingBody(io.BytesIO):
    """Response body that remembers whether it was closed and how much was read"""

    def __init__(self, data: bytes = b""):
        super().__init__(data)
        self.was_closed = False
        self.bytes_read = 0

    def read(self, size=-1):
        chunk = super().read(size)
        self.bytes_read += len(chunk)
        return chunk

    def close(self):
        self.was_closed = True
        super().close()


class DummyAdapter(HTTPAdapter):
    """Mock HTTP adapter for testing."""

    def __init__(self, status: int = 200, body: str = '{"id":"payment-id","status":"pending"}'):
        self.requests: List[Dict] = []
        self.response_status = status
        self.response_data = body
        self.bodies: List[TrackingBody] = []
        self.error: Optional[Exception] = None

    @property
    def last_request(self) -> Dict:
        return self.requests[-1]

    @property
    def last_body(self) -> TrackingBody:
        return self.bodies[-1]

    def send(self, method, url, headers, data=None, timeout=None) -> HTTPResponse:
        """Mock send method."""
        self.requests.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "data": data,
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error

        payload = self.response_data
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        body = TrackingBody(payload)
        self.bodies.append(body)
        return HTTPResponse(status_code=self.response_status, body=body)


@pytest.fixture
def config():
    """Create test configuration fixture"""
    return Config(account_id="123456", secret_key="test_secret_key")


@pytest.fixture
def adapter():
    return DummyAdapter()


@pytest.fixture
def client(config, adapter):
    """Create test client fixture"""
    return Client(config, http_adapter=adapter)
