"""
Requests-based HTTP adapter (synchronous).
"""

import socket

import requests
from typing import Dict, Optional
from urllib3.exceptions import HTTPError as Urllib3HTTPError, ReadTimeoutError
from .adapter import HTTPAdapter, HTTPResponse
from ..config import DEFAULT_HTTP_TIMEOUT
from ..exceptions import NetworkError, TimeoutError as YooKassaTimeoutError


class _StreamingBody:
    """
    File-like view over a streamed ``requests.Response``.

    Failures while reading (connection reset, truncated body, read timeout)
    are raised as SDK transport errors, like failures while sending.
    """

    def __init__(self, response: requests.Response):
        self._response = response

    def read(self, size: int = -1) -> bytes:
        try:
            if size is None or size < 0:
                return self._response.raw.read(decode_content=True)
            return self._response.raw.read(size, decode_content=True)
        except (ReadTimeoutError, socket.timeout) as e:
            raise YooKassaTimeoutError(f"Response body read timed out: {e}") from e
        except (Urllib3HTTPError, OSError) as e:
            raise NetworkError(f"Response body read failed: {e}") from e

    def close(self) -> None:
        self._response.close()


class RequestsAdapter(HTTPAdapter):
    """
    Synchronous HTTP adapter using requests library.

    Features:
    - Connection pooling via session
    - Configurable timeouts (30 seconds by default)
    - Streamed bodies, so callers decide how much to read

    No retry strategy is mounted: every call is a single attempt.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance
            timeout: Timeout used when a call does not pass its own
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[bytes] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        """
        Send HTTP request using requests library.

        Args:
            method: HTTP method
            url: Request URL
            headers: Request headers
            data: Request body
            timeout: Request timeout in seconds

        Returns:
            HTTPResponse whose body streams from the connection

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                data=data,
                timeout=timeout or self.timeout,
                stream=True,
            )
        except requests.exceptions.Timeout as e:
            raise YooKassaTimeoutError(f"Request timed out: {e}") from e

        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network request failed: {e}") from e

        return HTTPResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=_StreamingBody(response),
        )
