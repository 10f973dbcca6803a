"""
Base HTTP adapter interface.
"""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Optional


def _empty_body() -> BinaryIO:
    return io.BytesIO(b"")


@dataclass
class HTTPResponse:
    """
    Raw HTTP response returned by an adapter.

    ``body`` is an unread stream. Whoever receives the response owns it and
    must call ``close()``. ``deadline`` is the ``time.monotonic()`` value by
    which the body must be fully read; the client sets it from the call's
    timeout.
    """

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: BinaryIO = field(default_factory=_empty_body)
    deadline: Optional[float] = None

    def close(self) -> None:
        self.body.close()


class HTTPAdapter(ABC):
    """
    Abstract base class for HTTP adapters.

    Allows pluggable HTTP clients. Implementations must be safe to share
    between threads.
    """

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[bytes] = None,
        timeout: Optional[float] = None,
    ) -> HTTPResponse:
        """
        Send HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute request URL, query string included
            headers: Request headers
            data: Pre-serialized request body
            timeout: Request timeout in seconds

        Returns:
            HTTPResponse with an unread body

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        raise NotImplementedError
