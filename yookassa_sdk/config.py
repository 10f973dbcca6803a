"""
Configuration module for YooKassa SDK.
"""

from typing import Optional
import os

from .exceptions import ConfigurationError

BASE_URL = "https://api.yookassa.ru/v3/"
DEFAULT_HTTP_TIMEOUT = 30


class Config:
    """
    SDK Configuration.

    Supports environment variables for easy configuration:
    - YOOKASSA_ACCOUNT_ID: Shop (account) identifier (required)
    - YOOKASSA_SECRET_KEY: Secret key (required)
    - YOOKASSA_API_BASE: API base URL (default: https://api.yookassa.ru/v3/)

    Values are read once; the client never mutates its configuration.
    """

    def __init__(
        self,
        account_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        """
        Initialize SDK configuration.

        Args:
            account_id: Shop identifier, used as the Basic auth username
            secret_key: Secret key, used as the Basic auth password
            api_base: API base URL, endpoints are appended to it
            timeout: Default request timeout in seconds
        """
        self.account_id = account_id or os.getenv("YOOKASSA_ACCOUNT_ID", "")
        self.secret_key = secret_key or os.getenv("YOOKASSA_SECRET_KEY", "")
        self.api_base = api_base or os.getenv("YOOKASSA_API_BASE", BASE_URL)
        self.timeout = timeout

        if not self.api_base.endswith("/"):
            self.api_base += "/"

        if not self.account_id:
            raise ConfigurationError("YOOKASSA_ACCOUNT_ID is required")

        if not self.secret_key:
            raise ConfigurationError("YOOKASSA_SECRET_KEY is required")

        if self.timeout is None or self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    def __repr__(self) -> str:
        return (
            f"Config(account_id={self.account_id!r}, "
            f"secret_key=***REDACTED***, "
            f"api_base={self.api_base!r}, "
            f"timeout={self.timeout!r})"
        )
