"""
Synchronous YooKassa API client.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode
import base64
import logging
import time

from .config import Config
from .http.adapter import HTTPAdapter, HTTPResponse
from .http.requests_adapter import RequestsAdapter
from .logging_setup import sanitize_headers
from .utils.idempotency import make_idempotency_key

logger = logging.getLogger("yookassa_sdk.client")

IDEMPOTENCY_HEADER = "Idempotence-Key"
USER_AGENT = "YooKassa-Python-SDK/0.1.0"


class Requester(ABC):
    """
    Abstraction used by resource handlers to perform API requests.

    Handlers depend on this interface only, never on a concrete transport.
    """

    @abstractmethod
    def make_request(
        self,
        method: str,
        endpoint: str,
        body: Optional[bytes] = None,
        params: Optional[Mapping[str, Any]] = None,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        raise NotImplementedError


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Client(Requester):
    """
    Synchronous YooKassa API client.

    Builds exactly one authenticated request per call and returns the raw
    response. Status codes are not inspected here; the response body belongs
    to the caller, who must close it.

    Examples:
        >>> config = Config(account_id="123456", secret_key="test_...")
        >>> client = Client(config)
        >>> payments = PaymentHandler(client)
    """

    def __init__(
        self,
        config: Config,
        http_adapter: Optional[HTTPAdapter] = None,
    ):
        """
        Initialize YooKassa client.

        Args:
            config: SDK configuration
            http_adapter: Optional custom HTTP adapter
        """
        self.config = config
        self.http = http_adapter or RequestsAdapter(timeout=config.timeout)
        self._authorization = self._basic_auth(config.account_id, config.secret_key)

    @staticmethod
    def _basic_auth(username: str, password: str) -> str:
        token = base64.b64encode(f"{username}:{password}".encode("utf-8"))
        return "Basic " + token.decode("ascii")

    def _url(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
        url = self.config.api_base + endpoint
        if params:
            query = urlencode({key: _stringify(value) for key, value in params.items()})
            url = f"{url}?{query}"
        return url

    def make_request(
        self,
        method: str,
        endpoint: str,
        body: Optional[bytes] = None,
        params: Optional[Mapping[str, Any]] = None,
        idempotency_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        """
        Make HTTP request to YooKassa API.

        Args:
            method: HTTP method
            endpoint: Path relative to the API base, already escaped
            body: Pre-serialized JSON body
            params: Query parameters, values are stringified
            idempotency_key: Idempotency key, generated when empty
            timeout: Per-call timeout override in seconds

        Returns:
            Raw response with an unread body and its read deadline set

        Raises:
            NetworkError: If the request could not be sent
            TimeoutError: If the deadline expired
        """
        method = method.upper()
        url = self._url(endpoint, params)
        idempotency_key = make_idempotency_key(idempotency_key)

        headers = {
            "Authorization": self._authorization,
            "User-Agent": USER_AGENT,
        }
        if method == "POST":
            headers["Content-Type"] = "application/json"
            headers[IDEMPOTENCY_HEADER] = idempotency_key

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Request %s %s headers=%s",
                method,
                url,
                sanitize_headers(headers),
                extra={"endpoint": endpoint},
            )

        timeout = timeout or self.config.timeout
        started = time.monotonic()
        response = self.http.send(
            method=method,
            url=url,
            headers=headers,
            data=body,
            timeout=timeout,
        )
        # The adapter timeout bounds each socket operation; the deadline bounds
        # the whole exchange, body included.
        response.deadline = started + timeout

        logger.debug(
            "Response %d for %s %s",
            response.status_code,
            method,
            endpoint,
            extra={"endpoint": endpoint, "status_code": response.status_code},
        )
        return response
